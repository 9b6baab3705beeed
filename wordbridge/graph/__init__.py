"""
Weighted directed graph ADT with interchangeable representations.

``empty()`` is the factory callers should use; pick a representation by
name when the access pattern matters:

- ``"edges"``: vertex set + flat edge list, O(E) queries.
- ``"vertices"``: per-vertex adjacency maps, O(out-degree) ``targets``.
"""

from typing import Dict, Type

from wordbridge.graph.base import Graph
from wordbridge.graph.edges_graph import Edge, EdgesGraph
from wordbridge.graph.vertices_graph import Vertex, VerticesGraph

REPRESENTATIONS: Dict[str, Type[Graph]] = {
    "edges": EdgesGraph,
    "vertices": VerticesGraph,
}

DEFAULT_REPRESENTATION = "vertices"


def empty(representation: str = DEFAULT_REPRESENTATION) -> Graph:
    """Return a new empty graph of the named *representation*."""
    try:
        cls = REPRESENTATIONS[representation]
    except KeyError:
        raise ValueError(
            f"unknown graph representation {representation!r}; "
            f"expected one of {sorted(REPRESENTATIONS)}"
        ) from None
    return cls()


__all__ = [
    "DEFAULT_REPRESENTATION",
    "Edge",
    "EdgesGraph",
    "Graph",
    "REPRESENTATIONS",
    "Vertex",
    "VerticesGraph",
    "empty",
]
