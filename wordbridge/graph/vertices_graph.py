"""
Vertex-oriented graph representation.

Stores one mutable ``Vertex`` record per label, each owning its outgoing
adjacency map. ``targets(v)`` is proportional to v's out-degree;
``sources(v)`` has to scan every record, O(V + E).
"""

import logging
from typing import Dict, Generic, Set

from wordbridge.graph import base
from wordbridge.graph.base import Graph, L, _require_label, _require_weight

logger = logging.getLogger(__name__)


# =========================================================================
# Vertex record
# =========================================================================


class Vertex(Generic[L]):
    """A labeled vertex together with its outgoing weighted edges.

    Mutable, but only reachable through the owning ``VerticesGraph``.
    """

    def __init__(self, label: L) -> None:
        if label is None:
            raise ValueError("vertex label cannot be None")
        self._label = label
        self._targets: Dict[L, int] = {}
        if base.CHECK_REP:
            self._check_rep()

    def _check_rep(self) -> None:
        assert self._label is not None
        for target, weight in self._targets.items():
            assert target is not None, "target label cannot be None"
            assert weight > 0, f"weight to {target!r} must be positive"

    @property
    def label(self) -> L:
        return self._label

    def targets(self) -> Dict[L, int]:
        """Return a copy of the outgoing adjacency map."""
        return dict(self._targets)

    def set_target(self, target: L, weight: int) -> int:
        """Create or overwrite the edge to *target*; return the old weight."""
        if target is None:
            raise ValueError("target cannot be None")
        if weight <= 0:
            raise ValueError(f"weight must be positive, got {weight}")
        previous = self._targets.get(target, 0)
        self._targets[target] = weight
        if base.CHECK_REP:
            self._check_rep()
        return previous

    def remove_target(self, target: L) -> int:
        """Drop the edge to *target*; return its weight, or 0 if absent."""
        previous = self._targets.pop(target, 0)
        if base.CHECK_REP:
            self._check_rep()
        return previous

    def has_target(self, target: L) -> bool:
        return target in self._targets

    def target_weight(self, target: L) -> int:
        return self._targets.get(target, 0)

    def __str__(self) -> str:
        edges = ", ".join(f"{t}({w})" for t, w in self._targets.items())
        return f"{self._label}: [{edges}]"

    def __repr__(self) -> str:
        return f"Vertex({self._label!r}, {self._targets!r})"


# =========================================================================
# Graph
# =========================================================================


class VerticesGraph(Graph[L]):
    """Graph stored as ``{label: Vertex}`` adjacency records.

    Representation invariant:
        - every key equals its record's label (labels are unique);
        - every record satisfies its own invariant (positive weights);
        - every outgoing target is itself a key.

    Safety from rep exposure:
        ``Vertex`` records are never handed out; ``vertices``,
        ``sources`` and ``targets`` build new containers.
    """

    def __init__(self) -> None:
        self._vertices: Dict[L, Vertex[L]] = {}
        if base.CHECK_REP:
            self._check_rep()

    def _check_rep(self) -> None:
        for label, vertex in self._vertices.items():
            assert vertex is not None
            assert vertex.label == label, f"record {vertex!r} filed under {label!r}"
            vertex._check_rep()
            for target in vertex.targets():
                assert target in self._vertices, (
                    f"edge {label!r} -> {target!r} points at a missing vertex"
                )

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def add(self, vertex: L) -> bool:
        _require_label(vertex)
        if vertex in self._vertices:
            return False
        self._vertices[vertex] = Vertex(vertex)
        if base.CHECK_REP:
            self._check_rep()
        return True

    def set(self, source: L, target: L, weight: int) -> int:
        _require_label(source, "source")
        _require_label(target, "target")
        _require_weight(weight)

        if weight == 0:
            record = self._vertices.get(source)
            previous = record.remove_target(target) if record is not None else 0
        else:
            for label in (source, target):
                if label not in self._vertices:
                    self._vertices[label] = Vertex(label)
            previous = self._vertices[source].set_target(target, int(weight))

        if base.CHECK_REP:
            self._check_rep()
        return previous

    def remove(self, vertex: L) -> bool:
        if vertex is None or vertex not in self._vertices:
            return False
        del self._vertices[vertex]
        dropped = sum(1 for record in self._vertices.values() if record.remove_target(vertex))
        logger.debug("Removed vertex %r and %d incoming edge(s).", vertex, dropped)
        if base.CHECK_REP:
            self._check_rep()
        return True

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def vertices(self) -> Set[L]:
        return set(self._vertices)

    def sources(self, target: L) -> Dict[L, int]:
        return {
            label: record.target_weight(target)
            for label, record in self._vertices.items()
            if record.has_target(target)
        }

    def targets(self, source: L) -> Dict[L, int]:
        record = self._vertices.get(source)
        if record is None:
            return {}
        return record.targets()

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex) -> bool:
        return vertex in self._vertices

    def __str__(self) -> str:
        lines = ["VerticesGraph{"]
        lines.extend(f"  {record}" for record in self._vertices.values())
        lines.append("}")
        return "\n".join(lines)
