from .diagnostics import Diagnostic, Diagnostics, DuplicateIdentifier, InvalidReference, OrderConflict
from .graph import Graph, sort_edges
from .sequencer import Sequencer, sequence
from .settings import Settings


__all__ = ("Diagnostic", "Diagnostics", "DuplicateIdentifier", "InvalidReference", "OrderConflict",
           "Graph", "sort_edges", "Sequencer", "sequence", "Settings")
