from __future__ import annotations

import pytest

from ontograph.graph.graph_store import DirectedGraph


@pytest.fixture()
def graph() -> DirectedGraph:
    return DirectedGraph()


@pytest.fixture()
def triangle() -> DirectedGraph:
    """
    Nodes {1, 2, 3} with edges (1, 2), (1, 3), (2, 3).
    """
    g = DirectedGraph(label="triangle")
    for node in (1, 2, 3):
        g.add_node(node)
    g.add_edge(1, 2)
    g.add_edge(1, 3)
    g.add_edge(2, 3)
    return g


@pytest.fixture()
def enzyme_classes() -> DirectedGraph:
    """
    Two top-level classes with no common root, as in enzyme classification.

        10 -> 11 -> 12
        20 -> 21
    """
    g = DirectedGraph(label="enzyme-classification")
    terms = {
        10: "EC 1.-.-.-",
        11: "EC 1.1.-.-",
        12: "EC 1.1.1.-",
        20: "EC 2.-.-.-",
        21: "EC 2.1.-.-",
    }
    for node, accession in terms.items():
        g.add_node(node)
        g.add_node_metadata(node, "accession", accession)
    g.add_edge(10, 11)
    g.add_edge(11, 12)
    g.add_edge(20, 21)
    return g
