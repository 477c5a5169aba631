from __future__ import annotations

import logging
from typing import Any, BinaryIO, Dict, Optional, Tuple

from .data import loads

log = logging.getLogger("utils")

Meta = Dict[str, Any]


def read_partial(fd: BinaryIO) -> Tuple[Optional[str], Meta]:
    """
    Parse lines front matter from a file header.

    Stop reading at the end of the front matter.

    Returns the format of the front matter read, and parsed front matter.
    """
    buf = bytearray()
    line = fd.readline()
    head = line.strip()
    if head == b"{":
        # JSON, end at }
        buf += line
        while True:
            line = fd.readline()
            if not line:
                raise ValueError("unterminated json front matter")
            buf += line
            if line.rstrip() == b"}":
                return "json", _as_meta(loads(buf.decode(), "json"))
    elif head == b"---":
        # YAML, end at ---
        while True:
            line = fd.readline()
            if not line or line.strip() == b"---":
                return "yaml", _as_meta(loads(buf.decode(), "yaml"))
            buf += line
    elif head == b"+++":
        # TOML, end at +++
        while True:
            line = fd.readline()
            if not line or line.strip() == b"+++":
                return "toml", _as_meta(loads(buf.decode(), "toml"))
            buf += line
    else:
        # No front matter found
        return None, {}


def _as_meta(data: Any) -> Meta:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"front matter is a {type(data).__name__} instead of a mapping")
    return data
