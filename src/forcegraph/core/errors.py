"""Exceptions raised by the force graph engine."""

from __future__ import annotations
from typing import Any


class ForceGraphError(Exception):
    """Base class for all engine errors."""


class MissingNodeError(ForceGraphError, LookupError):
    """A node index does not name a live node in the graph."""

    def __init__(self, index: Any):
        super().__init__(f"No live node with index {index!r}")
        self.index = index


class InvalidParameterError(ForceGraphError, ValueError):
    """A simulation input is out of range or not finite."""


class TraversalActiveError(ForceGraphError, RuntimeError):
    """The graph was modified while a visitor pass was running."""

    def __init__(self, operation: str):
        super().__init__(f"Cannot {operation} while a traversal is active")
        self.operation = operation


class ViewExpiredError(ForceGraphError, RuntimeError):
    """A NodeMut was written to after its visit_nodes_mut callback returned."""

    def __init__(self, index: Any):
        super().__init__(f"Mutable view of node {index!r} is no longer writable")
        self.index = index
