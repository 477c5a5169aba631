from __future__ import annotations

import argparse
import fnmatch
import logging
import os
from typing import Any, Iterator, List, Optional

from looseorder.sequencer import Sequencer, field_getter
from looseorder.utils import front_matter

from .command import Command, Fail, register

log = logging.getLogger("files")


class FileRecord:
    """
    A file to sort, with the metadata in its front matter
    """
    def __init__(self, path: str, meta: front_matter.Meta):
        self.path = path
        self.meta = meta
        # Used when the front matter has no identifier
        self.default_id = os.path.splitext(os.path.basename(path))[0]

    def __str__(self):
        return self.path

    def __repr__(self):
        return "{}({})".format(self.__class__.__name__, self.path)


@register
class Files(Command):
    """
    Sort files according to the identifiers and 'before' hints in their front matter
    """

    @classmethod
    def add_subparser(cls, subparsers: "argparse._SubParsersAction[Any]") -> argparse.ArgumentParser:
        parser = super().add_subparser(subparsers)
        parser.add_argument("paths", nargs="+",
                            help="files to sort. Directories are scanned for files matching settings.FILE_PATTERNS")
        return parser

    def scan(self, root: str) -> Iterator[str]:
        """
        List the files in a directory matching FILE_PATTERNS, in sorted order
        """
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = sorted(d for d in dirnames if not d.startswith("."))
            for fname in sorted(filenames):
                if any(fnmatch.fnmatch(fname, pattern) for pattern in self.settings.FILE_PATTERNS):
                    yield os.path.join(dirpath, fname)

    def list_paths(self) -> List[str]:
        res: List[str] = []
        for path in self.args.paths:
            if os.path.isdir(path):
                res.extend(self.scan(path))
            elif os.path.exists(path):
                res.append(path)
            else:
                raise Fail(f"{path}: file not found")
        return res

    def load(self, path: str) -> FileRecord:
        try:
            with open(path, "rb") as fd:
                fmt, meta = front_matter.read_partial(fd)
        except OSError as e:
            raise Fail(f"{path}: cannot open: {e.strerror}")
        except ValueError as e:
            raise Fail(f"{path}: invalid front matter: {e}")
        if fmt is None:
            log.debug("%s: no front matter found", path)
        return FileRecord(path, meta)

    def run(self) -> None:
        records = [self.load(path) for path in self.list_paths()]

        get_meta_id = field_getter(self.settings.ID_FIELD)
        get_meta_before = field_getter(self.settings.BEFORE_FIELD)

        def get_id(record: FileRecord) -> Optional[Any]:
            res = get_meta_id(record.meta)
            if res is None or res == "":
                return record.default_id
            return res

        sequencer = Sequencer(
            get_id=get_id,
            get_before=lambda record: get_meta_before(record.meta),
            prefix=self.settings.SYNTHETIC_ID_PREFIX,
            diagnostics=self.diagnostics)

        for record in sequencer.sequence(records):
            print(record.path)
        self.check_diagnostics()
