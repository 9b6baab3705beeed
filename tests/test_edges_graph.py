"""
pytest suite for the edge-oriented representation.

Contract behaviour is in ``test_graph_contract.py``; this module covers
the ``Edge`` record, string forms, and the debug invariant checker.
"""

import dataclasses
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from wordbridge.graph import base
from wordbridge.graph.edges_graph import Edge, EdgesGraph


# =========================================================================
# Test: Edge record
# =========================================================================


class TestEdge:
    """Tests for the immutable ``Edge`` record."""

    def test_valid_edge(self):
        e = Edge("A", "B", 5)
        assert (e.source, e.target, e.weight) == ("A", "B", 5)

    @pytest.mark.parametrize("source,target", [(None, "B"), ("A", None)])
    def test_none_endpoint_rejected(self, source, target):
        with pytest.raises(ValueError):
            Edge(source, target, 1)

    @pytest.mark.parametrize("weight", [0, -1])
    def test_non_positive_weight_rejected(self, weight):
        with pytest.raises(ValueError):
            Edge("A", "B", weight)

    def test_self_loop_allowed(self):
        e = Edge("A", "A", 2)
        assert e.connects("A", "A")
        assert e.involves("A")

    def test_connects_is_directed(self):
        e = Edge("A", "B", 1)
        assert e.connects("A", "B")
        assert not e.connects("B", "A")

    def test_involves_and_endpoints(self):
        e = Edge("A", "B", 1)
        assert e.involves("A") and e.involves("B")
        assert not e.involves("C")
        assert e.has_source("A") and not e.has_source("B")
        assert e.has_target("B") and not e.has_target("A")

    def test_value_equality_and_hash(self):
        assert Edge("A", "B", 5) == Edge("A", "B", 5)
        assert Edge("A", "B", 5) != Edge("A", "B", 6)
        assert Edge("A", "B", 5) != Edge("B", "A", 5)
        assert hash(Edge("A", "B", 5)) == hash(Edge("A", "B", 5))
        assert len({Edge("A", "B", 5), Edge("A", "B", 5)}) == 1

    def test_immutable(self):
        e = Edge("A", "B", 5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            e.weight = 10

    def test_str(self):
        assert str(Edge("A", "B", 5)) == "A -> B (5)"
        assert str(Edge("x", "x", 1)) == "x -> x (1)"


# =========================================================================
# Test: string form
# =========================================================================


class TestEdgesGraphStr:
    """Tests for the readable dump of an ``EdgesGraph``."""

    def test_empty_graph(self):
        assert str(EdgesGraph()) == "EdgesGraph{\n  vertices: []\n  edges: [\n  ]\n}"

    def test_graph_with_edges(self):
        g = EdgesGraph()
        g.set("A", "B", 5)
        g.set("B", "B", 1)
        text = str(g)
        assert text.startswith("EdgesGraph{")
        assert "    A -> B (5)" in text
        assert "    B -> B (1)" in text

    def test_edges_listed_in_insertion_order(self):
        g = EdgesGraph()
        g.set("A", "B", 1)
        g.set("C", "D", 2)
        g.set("A", "B", 3)
        text = str(g)
        assert text.index("A -> B (3)") < text.index("C -> D (2)")


# =========================================================================
# Test: representation invariant
# =========================================================================


class TestEdgesGraphCheckRep:
    """The debug checker detects corrupted internal state."""

    def test_fresh_graph_passes(self):
        g = EdgesGraph()
        g.set("A", "B", 1)
        g._check_rep()

    def test_dangling_endpoint_detected(self):
        g = EdgesGraph()
        g.set("A", "B", 1)
        g._vertices.discard("B")
        with pytest.raises(AssertionError):
            g._check_rep()

    def test_duplicate_edge_detected(self):
        g = EdgesGraph()
        g.set("A", "B", 1)
        g._edges.append(Edge("A", "B", 2))
        with pytest.raises(AssertionError):
            g._check_rep()

    def test_tampered_edge_record_detected(self):
        g = EdgesGraph()
        g.set("A", "B", 1)
        object.__setattr__(g._edges[0], "weight", 0)
        with pytest.raises(AssertionError):
            g._check_rep()

    def test_mutations_run_checker_when_enabled(self, monkeypatch):
        monkeypatch.setattr(base, "CHECK_REP", True)
        g = EdgesGraph()
        g.set("A", "B", 1)
        g._vertices.discard("B")
        with pytest.raises(AssertionError):
            g.add("C")

    def test_mutations_skip_checker_when_disabled(self, monkeypatch):
        monkeypatch.setattr(base, "CHECK_REP", False)
        g = EdgesGraph()
        g.set("A", "B", 1)
        g._vertices.discard("B")
        assert g.add("C") is True
