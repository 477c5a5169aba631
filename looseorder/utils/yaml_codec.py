from __future__ import annotations

import io
from typing import Any

import ruamel.yaml

# Loading uses the safe loader, so records come back as plain python
# containers. Dumping uses the round-trip dumper, which keeps keys in the order
# they appear in the records instead of sorting them.

yaml_loader = ruamel.yaml.YAML(typ="safe", pure=True)

yaml_dumper = ruamel.yaml.YAML(typ="rt", pure=True)
yaml_dumper.allow_unicode = True
yaml_dumper.default_flow_style = False
yaml_dumper.explicit_start = True  # type: ignore


def loads(string: str | bytes) -> Any:
    return yaml_loader.load(string)


def dumps(data: Any) -> str:
    with io.StringIO() as fd:
        yaml_dumper.dump(data, fd)
        return fd.getvalue()
