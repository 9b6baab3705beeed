"""
Affinity-graph metrics.

Converts any ``Graph`` into a ``networkx.DiGraph`` and reports summary
statistics: word and adjacency counts, total weight, average out-degree,
self-loops and isolated words.
"""

import logging

import networkx as nx

from wordbridge.graph import Graph
from wordbridge.models import CorpusMetrics

logger = logging.getLogger(__name__)


def to_networkx(graph: Graph) -> nx.DiGraph:
    """Build a ``networkx.DiGraph`` mirroring *graph*.

    Isolated vertices are kept; each edge carries its weight as the
    ``weight`` attribute.
    """
    G = nx.DiGraph()
    labels = graph.vertices()
    G.add_nodes_from(labels)
    for source in labels:
        for target, weight in graph.targets(source).items():
            G.add_edge(source, target, weight=weight)
    return G


def compute_metrics(graph: Graph) -> CorpusMetrics:
    """Compute summary metrics for *graph*."""
    G = to_networkx(graph)

    total_words = G.number_of_nodes()
    total_adjacencies = G.number_of_edges()
    total_weight = int(G.size(weight="weight"))
    avg_out = total_adjacencies / total_words if total_words > 0 else 0.0

    metrics = CorpusMetrics(
        total_words=total_words,
        total_adjacencies=total_adjacencies,
        total_weight=total_weight,
        avg_out_degree=round(avg_out, 4),
        self_loops=nx.number_of_selfloops(G),
        isolated_words=sum(1 for _ in nx.isolates(G)),
    )
    logger.debug("Computed metrics: %s", metrics)
    return metrics
