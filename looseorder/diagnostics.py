from __future__ import annotations

import logging
from typing import Any, Hashable, Iterator, List, Optional, Type, TypeVar

log = logging.getLogger("diagnostics")


class Diagnostic:
    """
    Something that was wrong with the input, and has been worked around
    """
    def __init__(self, msg: str):
        self.msg = msg

    def __str__(self):
        return self.msg

    def __repr__(self):
        return "{}({!r})".format(self.__class__.__name__, self.msg)


class DuplicateIdentifier(Diagnostic):
    """
    A record declared an identifier already used by a previous record
    """
    def __init__(self, identifier: Hashable, index: int, replacement: Hashable):
        super().__init__(
                f"{identifier!r}: duplicate identifier in record #{index}: using {replacement!r} instead")
        self.identifier = identifier
        self.index = index
        self.replacement = replacement


class InvalidReference(Diagnostic):
    """
    A record wants to be placed before an identifier that does not exist
    """
    def __init__(self, identifier: Hashable, reference: Any):
        super().__init__(
                f"{identifier!r}: ignoring 'before' reference to {reference!r} which is not available")
        self.identifier = identifier
        self.reference = reference


class OrderConflict(Diagnostic):
    """
    An ordering constraint was dropped to break a cycle
    """
    def __init__(self, node: Hashable, dependent: Hashable):
        super().__init__(
                f"{node!r}: dependency loop found with {dependent!r}: ignoring dependency")
        # The dropped edge was node → dependent
        self.node = node
        self.dependent = dependent


D = TypeVar("D", bound=Diagnostic)


class Diagnostics:
    """
    Collect the diagnostics reported while sorting, and log them as warnings.
    """
    def __init__(self, logger: Optional[logging.Logger] = None):
        self.log = logger if logger is not None else log
        # Diagnostics in the order they were reported
        self.reported: List[Diagnostic] = []

    def __len__(self) -> int:
        return len(self.reported)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.reported)

    def __bool__(self) -> bool:
        return bool(self.reported)

    def report(self, diag: Diagnostic) -> None:
        self.reported.append(diag)
        self.log.warning("%s", diag)

    def of_kind(self, cls: Type[D]) -> List[D]:
        """
        Return the reported diagnostics of the given class
        """
        return [d for d in self.reported if isinstance(d, cls)]

    def clear(self) -> None:
        self.reported.clear()
