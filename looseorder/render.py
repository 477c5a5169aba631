from __future__ import annotations

import collections.abc
import logging
from typing import TYPE_CHECKING, Any, Iterable, Iterator

import jinja2

if TYPE_CHECKING:
    from .settings import Settings

log = logging.getLogger("render")


class RecordRenderer:
    """
    Render sorted records, one line each, with a jinja2 template.

    Fields of mapping records are available as template variables. The record
    itself is always available as ``record``, and its 1-based position in the
    sorted output as ``position``.
    """
    def __init__(self, settings: "Settings", source: str):
        if settings.JINJA2_SANDBOXED:
            from jinja2.sandbox import ImmutableSandboxedEnvironment
            env_cls = ImmutableSandboxedEnvironment
        else:
            from jinja2 import Environment
            env_cls = Environment

        self.jinja2 = env_cls(
            autoescape=False,
            keep_trailing_newline=False,
        )

        # Add settings to jinja2 globals
        self.jinja2.globals.update(settings.as_dict())

        try:
            self.template = self.jinja2.from_string(source)
        except jinja2.TemplateSyntaxError as e:
            raise ValueError(f"invalid record template {source!r}: {e}") from e

    def render(self, record: Any, position: int) -> str:
        ctx: dict[str, Any] = {}
        if isinstance(record, collections.abc.Mapping):
            ctx.update((str(k), v) for k, v in record.items())
        ctx["record"] = record
        ctx["position"] = position
        return self.template.render(ctx)

    def render_all(self, records: Iterable[Any]) -> Iterator[str]:
        for position, record in enumerate(records, 1):
            yield self.render(record, position)
