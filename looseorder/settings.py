from __future__ import annotations

import importlib
import logging
import sys
import types
from collections.abc import Sequence
from typing import Any

log = logging.getLogger("settings")


class Settings:
    # Name of the record field holding its identifier
    ID_FIELD: str

    # Name of the record field holding the identifier of the record it must
    # precede
    BEFORE_FIELD: str

    # Prefix of generated identifiers
    SYNTHETIC_ID_PREFIX: str

    # Format used to print sorted records: yaml, json, toml or lines
    OUTPUT_FORMAT: str

    # Jinja2 template used to print each sorted record, or None to use
    # OUTPUT_FORMAT
    RECORD_TEMPLATE: str | None

    # Set to false to disable running Jinja2 in a sandboxed environnment.
    JINJA2_SANDBOXED: bool

    # Globs selecting the files read by `looseorder files` in directories
    FILE_PATTERNS: Sequence[str]

    def __init__(self, default_settings: str | None = "looseorder.global_settings") -> None:
        if default_settings is not None:
            self.add_module(importlib.import_module(default_settings))

    def as_dict(self) -> dict[str, Any]:
        res = {}
        for setting in dir(self):
            if setting.isupper():
                res[setting] = getattr(self, setting)
        return res

    def add_module(self, mod: types.ModuleType) -> None:
        """
        Add uppercase settings from mod into this module
        """
        for setting in dir(mod):
            if setting.isupper():
                setattr(self, setting, getattr(mod, setting))

    def load(self, pathname: str) -> None:
        """
        Load settings from a python file, importing only uppercase symbols
        """
        import importlib.util

        orig_dwb = sys.dont_write_bytecode
        try:
            sys.dont_write_bytecode = True
            spec = importlib.util.spec_from_file_location("looseorder.user_settings", pathname)
            if spec is None or spec.loader is None:
                raise ValueError(f"{pathname}: cannot load settings from this file")
            user_settings = importlib.util.module_from_spec(spec)
            spec.loader.exec_module(user_settings)
        finally:
            sys.dont_write_bytecode = orig_dwb

        log.debug("%s: loaded settings", pathname)
        self.add_module(user_settings)
