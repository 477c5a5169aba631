from __future__ import annotations

import collections.abc
import logging
from typing import TYPE_CHECKING, Any, Callable, Dict, Hashable, Iterable, List, Optional, Sequence, TypeVar

from . import global_settings
from .diagnostics import Diagnostics, DuplicateIdentifier, InvalidReference
from .graph import Graph

if TYPE_CHECKING:
    from .settings import Settings

__all__ = ["Sequencer", "sequence", "field_getter"]

log = logging.getLogger("sequencer")

R = TypeVar("R")

Getter = Callable[[Any], Any]


def field_getter(name: str) -> Getter:
    """
    Return a function reading the field ``name`` from a record.

    Mappings are looked up by key, other objects by attribute. Missing fields
    read as None.
    """
    def get(record: Any) -> Any:
        if isinstance(record, collections.abc.Mapping):
            return record.get(name)
        return getattr(record, name, None)
    get.__name__ = f"get_{name}"
    return get


def _is_set(value: Any) -> bool:
    return value is not None and value != ""


def _is_hashable(value: Any) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True


class Sequencer:
    """
    Order records according to their "before" hints.

    Each record can have an identifier, and can name the identifier of another
    record that it must precede. Records without a usable hint keep following
    the record that came before them in the input.
    """
    def __init__(
            self,
            id_field: str = global_settings.ID_FIELD,
            before_field: str = global_settings.BEFORE_FIELD,
            get_id: Optional[Getter] = None,
            get_before: Optional[Getter] = None,
            prefix: str = global_settings.SYNTHETIC_ID_PREFIX,
            diagnostics: Optional[Diagnostics] = None):
        self.get_id = get_id if get_id is not None else field_getter(id_field)
        self.get_before = get_before if get_before is not None else field_getter(before_field)
        # Prefix of identifiers generated for records without a usable one
        self.prefix = prefix
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics(log)

    @classmethod
    def from_settings(cls, settings: "Settings", diagnostics: Optional[Diagnostics] = None) -> "Sequencer":
        return cls(
            id_field=settings.ID_FIELD,
            before_field=settings.BEFORE_FIELD,
            prefix=settings.SYNTHETIC_ID_PREFIX,
            diagnostics=diagnostics)

    def resolve_ids(self, items: Sequence[Any]) -> List[Hashable]:
        """
        Return the identifier to use for each record.

        Missing or duplicate identifiers are replaced with generated ones,
        which never match an identifier declared by any of the records.
        """
        declared = set()
        for item in items:
            value = self.get_id(item)
            if _is_set(value) and _is_hashable(value):
                declared.add(value)

        counter = 0

        def generate() -> str:
            nonlocal counter
            while True:
                counter += 1
                res = f"{self.prefix}{counter}"
                if res not in declared:
                    return res

        ids: List[Hashable] = []
        seen = set()
        for idx, item in enumerate(items):
            value = self.get_id(item)
            if not _is_set(value):
                value = generate()
            elif not _is_hashable(value):
                replacement = generate()
                log.warning("record #%d: identifier %r cannot be used: using %r instead", idx, value, replacement)
                value = replacement
            elif value in seen:
                replacement = generate()
                self.diagnostics.report(DuplicateIdentifier(value, idx, replacement))
                value = replacement
            seen.add(value)
            ids.append(value)
        return ids

    def build_graph(self, items: Sequence[Any], ids: Sequence[Hashable]) -> Graph[Hashable]:
        """
        Build the ordering graph for records with the given resolved ids
        """
        known = set(ids)
        graph: Graph[Hashable] = Graph(diagnostics=self.diagnostics)

        for idx, (item, ident) in enumerate(zip(items, ids)):
            before = self.get_before(item)
            if _is_set(before):
                if _is_hashable(before) and before in known:
                    graph.add_edge(ident, before)
                    continue
                self.diagnostics.report(InvalidReference(ident, before))
            if idx > 0:
                graph.add_edge(ids[idx - 1], ident)

        # Every later record is in an edge: only the first one can be missing
        if ids and ids[0] not in graph:
            graph.add_node(ids[0])

        return graph

    def sequence(self, items: Iterable[R]) -> List[R]:
        """
        Return the records sorted according to their "before" hints
        """
        items = list(items)
        ids = self.resolve_ids(items)
        by_id: Dict[Hashable, R] = dict(zip(ids, items))
        graph = self.build_graph(items, ids)
        return [by_id[ident] for ident in graph.sort()]


def sequence(items: Iterable[R], **kw: Any) -> List[R]:
    """
    Sort records according to their "before" hints.

    Keyword arguments are passed to Sequencer.
    """
    return Sequencer(**kw).sequence(items)
