"""
Edge-oriented graph representation.

Stores the vertex set plus a flat list of immutable ``Edge`` records.
Every ``sources``/``targets`` query scans the whole edge list, O(E);
inserting a new edge is an O(1) amortised append after the O(E) lookup
for an existing record.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Generic, List, Optional, Set

from wordbridge.graph import base
from wordbridge.graph.base import Graph, L, _require_label, _require_weight

logger = logging.getLogger(__name__)


# =========================================================================
# Edge record
# =========================================================================


@dataclass(frozen=True)
class Edge(Generic[L]):
    """An immutable weighted directed edge ``source -> target``.

    Value equality and hashing cover all three fields.
    """

    source: L
    target: L
    weight: int

    def __post_init__(self) -> None:
        if self.source is None or self.target is None:
            raise ValueError("edge source and target cannot be None")
        if self.weight <= 0:
            raise ValueError(f"edge weight must be positive, got {self.weight}")

    def _check_rep(self) -> None:
        assert self.source is not None, "source must be non-None"
        assert self.target is not None, "target must be non-None"
        assert self.weight > 0, "weight must be positive"

    def connects(self, source: L, target: L) -> bool:
        """Return ``True`` if this edge runs from *source* to *target*."""
        return self.source == source and self.target == target

    def involves(self, vertex: L) -> bool:
        """Return ``True`` if *vertex* is either endpoint."""
        return self.source == vertex or self.target == vertex

    def has_source(self, vertex: L) -> bool:
        return self.source == vertex

    def has_target(self, vertex: L) -> bool:
        return self.target == vertex

    def __str__(self) -> str:
        return f"{self.source} -> {self.target} ({self.weight})"


# =========================================================================
# Graph
# =========================================================================


class EdgesGraph(Graph[L]):
    """Graph stored as a vertex set and a list of ``Edge`` records.

    Representation invariant:
        - every edge's source and target are in ``_vertices``;
        - no two edges connect the same ``(source, target)``;
        - every edge weight is positive (enforced by ``Edge``).

    Safety from rep exposure:
        ``vertices``, ``sources`` and ``targets`` build new containers;
        ``Edge`` records are immutable and never handed out.
    """

    def __init__(self) -> None:
        self._vertices: Set[L] = set()
        self._edges: List[Edge[L]] = []
        if base.CHECK_REP:
            self._check_rep()

    def _check_rep(self) -> None:
        seen = set()
        for edge in self._edges:
            assert edge is not None
            edge._check_rep()
            assert edge.source in self._vertices, f"dangling source in {edge}"
            assert edge.target in self._vertices, f"dangling target in {edge}"
            key = (edge.source, edge.target)
            assert key not in seen, f"duplicate edge {edge}"
            seen.add(key)
        for vertex in self._vertices:
            assert vertex is not None

    def _find(self, source: L, target: L) -> Optional[int]:
        """Return the list index of the ``source -> target`` edge, if any."""
        for idx, edge in enumerate(self._edges):
            if edge.connects(source, target):
                return idx
        return None

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def add(self, vertex: L) -> bool:
        _require_label(vertex)
        if vertex in self._vertices:
            return False
        self._vertices.add(vertex)
        if base.CHECK_REP:
            self._check_rep()
        return True

    def set(self, source: L, target: L, weight: int) -> int:
        _require_label(source, "source")
        _require_label(target, "target")
        _require_weight(weight)

        idx = self._find(source, target)
        previous = self._edges[idx].weight if idx is not None else 0

        if weight == 0:
            if idx is not None:
                self._edges.pop(idx)
        else:
            self._vertices.add(source)
            self._vertices.add(target)
            edge = Edge(source, target, int(weight))
            if idx is None:
                self._edges.append(edge)
            else:
                self._edges[idx] = edge

        if base.CHECK_REP:
            self._check_rep()
        return previous

    def remove(self, vertex: L) -> bool:
        if vertex is None or vertex not in self._vertices:
            return False
        self._vertices.discard(vertex)
        before = len(self._edges)
        self._edges = [e for e in self._edges if not e.involves(vertex)]
        logger.debug(
            "Removed vertex %r with %d incident edge(s).",
            vertex, before - len(self._edges),
        )
        if base.CHECK_REP:
            self._check_rep()
        return True

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def vertices(self) -> Set[L]:
        return set(self._vertices)

    def sources(self, target: L) -> Dict[L, int]:
        return {e.source: e.weight for e in self._edges if e.has_target(target)}

    def targets(self, source: L) -> Dict[L, int]:
        return {e.target: e.weight for e in self._edges if e.has_source(source)}

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex) -> bool:
        return vertex in self._vertices

    def __str__(self) -> str:
        lines = ["EdgesGraph{"]
        lines.append(f"  vertices: [{', '.join(str(v) for v in self._vertices)}]")
        lines.append("  edges: [")
        lines.extend(f"    {edge}" for edge in self._edges)
        lines.append("  ]")
        lines.append("}")
        return "\n".join(lines)
