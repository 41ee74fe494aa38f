from __future__ import annotations

from typing import Iterable, List, Sequence

from ontograph.graph.edge_store import EDGE_ALREADY_EXISTS
from ontograph.graph.graph_schema import Node
from ontograph.graph.graph_store import DirectedGraph


class GraphBuilder:
    """
    Populates a DirectedGraph from structured inputs.
    """

    def __init__(self, graph: DirectedGraph) -> None:
        self.graph = graph

    def add_nodes(self, nodes: Iterable[Node]) -> None:
        for node in nodes:
            self.graph.add_node(node.id)
            for key, value in node.metadata.items():
                self.graph.add_node_metadata(node.id, key, value)

    def add_edges(self, edges: Iterable[Sequence]) -> List[int]:
        """
        Add ``(tail, head)`` or ``(tail, head, label)`` tuples.

        Returns the ids of edges actually created; pairs that were
        already connected are skipped and keep their existing label.
        """
        created: List[int] = []
        for row in edges:
            tail, head = row[0], row[1]
            edge = self.graph.add_edge(tail, head)
            if edge == EDGE_ALREADY_EXISTS:
                continue
            if len(row) > 2 and row[2] is not None:
                self.graph.set_edge_label(edge, row[2])
            created.append(edge)
        return created
