from __future__ import annotations

from typing import Optional

import networkx as nx

from ontograph.config.settings import GraphConfig
from ontograph.graph.graph_store import DirectedGraph
from ontograph.graph.node_store import check_node


def to_networkx(graph: DirectedGraph) -> nx.DiGraph:
    """
    Export to a networkx.DiGraph.

    Node attribute ``metadata`` holds a copy of the node's metadata; edge
    attributes ``id`` and ``label`` carry the edge id and label.
    """
    out = nx.DiGraph(label=graph.graph_label)

    for node in graph.get_nodes():
        out.add_node(node, metadata=graph.get_node_metadata(node))

    for edge in graph.get_edges():
        out.add_edge(
            graph.get_tail_node(edge),
            graph.get_head_node(edge),
            id=edge,
            label=graph.get_edge_label(edge),
        )

    return out


def from_networkx(
    nx_graph: nx.DiGraph,
    *,
    config: Optional[GraphConfig] = None,
) -> DirectedGraph:
    """
    Build a DirectedGraph from a networkx.DiGraph with integer nodes.

    Edge ids are reassigned in the networkx edge order.
    """
    graph = DirectedGraph(label=nx_graph.graph.get("label"), config=config)

    for node, data in nx_graph.nodes(data=True):
        graph.add_node(check_node(node))
        for key, value in (data.get("metadata") or {}).items():
            graph.add_node_metadata(node, str(key), str(value))

    for tail, head, data in nx_graph.edges(data=True):
        edge = graph.add_edge(tail, head)
        label = data.get("label")
        if label is not None:
            graph.set_edge_label(edge, str(label))

    return graph
