from __future__ import annotations

import contextlib
import io
import os
from typing import Tuple

from looseorder.cmd.command import main


def datafile_abspath(relpath: str) -> str:
    test_root = os.path.dirname(__file__)
    return os.path.join(test_root, "data", relpath)


def run_main(*args: str) -> Tuple[int, str, str]:
    """
    Run the command line with the given arguments.

    Returns the exit code, and what was written to stdout and stderr
    """
    stdout = io.StringIO()
    stderr = io.StringIO()
    with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
        code = main(list(args))
    return code, stdout.getvalue(), stderr.getvalue()
