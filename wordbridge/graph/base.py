"""
Graph contract shared by every representation.

A ``Graph`` is a mutable, weighted, directed graph over hashable vertex
labels. Edges carry strictly positive integer weights; at most one edge
exists per ordered ``(source, target)`` pair and self-loops are ordinary
edges. A weight of ``0`` means "no edge" and is never stored.

Representation invariant checks (``_check_rep``) are opt-in: they run
only when the interpreter has assertions enabled and the environment
variable ``WORDBRIDGE_CHECK_REP`` is ``"1"``. Each check is a full scan
of the graph, so they stay off outside debugging and tests.
"""

import abc
import numbers
import os
from typing import Dict, Generic, Hashable, Mapping, Optional, Set, TypeVar

L = TypeVar("L", bound=Hashable)


def check_rep_enabled(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Return ``True`` if invariant checks are switched on in *environ*."""
    if environ is None:
        environ = os.environ
    return __debug__ and environ.get("WORDBRIDGE_CHECK_REP", "0") == "1"


CHECK_REP: bool = check_rep_enabled()


# =========================================================================
# Argument validation
# =========================================================================


def _require_label(label, role: str = "vertex") -> None:
    """Raise ``ValueError`` if *label* is unset."""
    if label is None:
        raise ValueError(f"{role} label cannot be None")


def _require_weight(weight) -> None:
    """Raise if *weight* is not a non-negative integer."""
    if isinstance(weight, bool) or not isinstance(weight, numbers.Integral):
        raise TypeError(f"edge weight must be an integer, got {weight!r}")
    if weight < 0:
        raise ValueError(f"edge weight cannot be negative, got {weight}")


# =========================================================================
# Contract
# =========================================================================


class Graph(abc.ABC, Generic[L]):
    """A mutable weighted directed graph with labeled vertices.

    All accessors return independent copies: mutating a returned set or
    dict never changes the graph, and later graph mutations never change
    a previously returned snapshot.
    """

    @staticmethod
    def empty() -> "Graph":
        """Create an empty graph of the default representation."""
        from wordbridge.graph import empty

        return empty()

    @abc.abstractmethod
    def add(self, vertex: L) -> bool:
        """Add a vertex with no edges.

        Returns:
            ``True`` if the vertex was inserted, ``False`` if it was
            already present (the graph is unchanged).

        Raises:
            ValueError: if *vertex* is ``None``.
        """

    @abc.abstractmethod
    def set(self, source: L, target: L, weight: int) -> int:
        """Add, change, or remove the weighted edge ``source -> target``.

        A positive *weight* adds any missing endpoint and creates or
        overwrites the edge. A zero *weight* removes the edge if present
        and leaves the vertices alone.

        Returns:
            The previous weight of the edge, or ``0`` if there was none.

        Raises:
            ValueError: if an endpoint is ``None`` or *weight* is negative.
            TypeError: if *weight* is not an integer.
        """

    @abc.abstractmethod
    def remove(self, vertex: L) -> bool:
        """Remove a vertex and every edge into or out of it.

        Returns:
            ``True`` if the vertex existed, ``False`` otherwise.
        """

    @abc.abstractmethod
    def vertices(self) -> Set[L]:
        """Return a snapshot of all vertex labels."""

    @abc.abstractmethod
    def sources(self, target: L) -> Dict[L, int]:
        """Return ``{source: weight}`` for every edge into *target*.

        Empty when *target* is absent or has no incoming edges.
        """

    @abc.abstractmethod
    def targets(self, source: L) -> Dict[L, int]:
        """Return ``{target: weight}`` for every edge out of *source*.

        Empty when *source* is absent or has no outgoing edges.
        """

    def __len__(self) -> int:
        return len(self.vertices())

    def __contains__(self, vertex) -> bool:
        return vertex in self.vertices()

    def __repr__(self) -> str:
        vertices = self.vertices()
        edges = sum(len(self.targets(v)) for v in vertices)
        return f"{type(self).__name__}(vertices={len(vertices)}, edges={edges})"
