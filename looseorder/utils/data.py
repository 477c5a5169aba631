from __future__ import annotations

import json
import logging
import os
from typing import IO, Any, Dict, List, Optional, Tuple

import toml
from ruamel.yaml.error import YAMLError

from . import yaml_codec

log = logging.getLogger("utils")

# Key holding the list of records in formats whose top level is a mapping
RECORDS_KEY = "records"

extensions = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".toml": "toml",
}


def guess_format(pathname: str) -> Optional[str]:
    """
    Guess the data format of a file from its extension.

    Returns None if the extension is not known.
    """
    ext = os.path.splitext(pathname)[1].lower()
    return extensions.get(ext)


def loads(content: str, fmt: str) -> Any:
    """
    Parse data in the given format.

    Raises ValueError on parse errors, whatever the format.
    """
    if fmt == "json":
        return json.loads(content)
    elif fmt == "yaml":
        try:
            return yaml_codec.loads(content)
        except YAMLError as e:
            raise ValueError(f"cannot parse yaml: {e}") from e
    elif fmt == "toml":
        return toml.loads(content)
    else:
        raise ValueError(f"unsupported data format {fmt!r}")


def read_records(fd: IO[str], fmt: str) -> List[Any]:
    """
    Read a list of records.

    The data can be a list, or a mapping with the list in its ``records`` key.
    TOML files can only use the latter, as a ``[[records]]`` array of tables.
    """
    data = loads(fd.read(), fmt)
    if data is None:
        return []
    if isinstance(data, dict):
        if RECORDS_KEY not in data:
            raise ValueError(f"records file has no {RECORDS_KEY!r} list")
        data = data[RECORDS_KEY]
    if not isinstance(data, list):
        raise ValueError(f"records file must contain a list, not a {type(data).__name__}")
    return data


def read_edges(fd: IO[str], fmt: Optional[str]) -> List[Tuple[Any, Any]]:
    """
    Read a list of (from_node, to_node) pairs.

    With fmt set to "json" or "yaml", the data is a list of two-element
    lists. Otherwise, as with tsort(1), it is a sequence of whitespace
    separated tokens, taken two by two.
    """
    if fmt in ("json", "yaml"):
        data = loads(fd.read(), fmt) or []
        if not isinstance(data, list):
            raise ValueError(f"edges file must contain a list, not a {type(data).__name__}")
        res = []
        for idx, pair in enumerate(data):
            if not isinstance(pair, (list, tuple)) or len(pair) != 2:
                raise ValueError(f"edge #{idx} is {pair!r} instead of a [from, to] pair")
            res.append((pair[0], pair[1]))
        return res

    tokens = fd.read().split()
    if len(tokens) % 2:
        raise ValueError(f"input contains an odd number of tokens ({len(tokens)})")
    return list(zip(tokens[::2], tokens[1::2]))


def write(data: List[Any], fmt: str) -> str:
    """
    Serialize a list of records
    """
    if fmt == "json":
        return json.dumps(data, indent=4, ensure_ascii=False) + "\n"
    elif fmt == "toml":
        wrapped: Dict[str, Any] = {RECORDS_KEY: data}
        return toml.dumps(wrapped)
    elif fmt == "yaml":
        return yaml_codec.dumps(data)
    else:
        raise ValueError(f"unsupported output format {fmt!r}")
