from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

# Default settings

# Name of the record field holding its identifier
ID_FIELD: str = "id"

# Name of the record field holding the identifier of the record it must
# precede
BEFORE_FIELD: str = "before"

# Prefix of the identifiers generated for records that lack one, or whose
# identifier is already taken. Generated identifiers never clash with the ones
# found in the records being sorted.
SYNTHETIC_ID_PREFIX: str = "@auto-"

# Format used to print sorted records: yaml, json, toml or lines
OUTPUT_FORMAT: str = "yaml"

# Jinja2 template used to print each sorted record on its own line.
# If None, records are printed using OUTPUT_FORMAT
RECORD_TEMPLATE: Optional[str] = None

# Set to false to disable running Jinja2 in a sandboxed environnment.
# If you trust your record templates, it renders noticeably faster.
JINJA2_SANDBOXED: bool = True

# Patterns (globs) of the files whose front matter is read when a directory
# is given to `looseorder files`
FILE_PATTERNS: Sequence[str] = ["*.md", "*.rst", "*.html", "*.yaml", "*.toml", "*.json"]
