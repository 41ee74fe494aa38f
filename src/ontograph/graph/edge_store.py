from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

import networkx as nx

from ontograph.errors import EdgeNotFoundError
from ontograph.graph.node_store import check_node

# Returned by add_edge when the ordered pair is already connected.
EDGE_ALREADY_EXISTS = -1


class EdgeStore:
    """
    Edge ids, endpoints, labels and in/out adjacency.

    Adjacency is kept in a networkx.DiGraph whose edge attribute ``id``
    holds the edge id. networkx keeps neighbours in insertion-ordered
    dicts, so per-node edge order is the order edges were added.
    """

    def __init__(self) -> None:
        self._adjacency = nx.DiGraph()
        self._endpoints: Dict[int, Tuple[int, int]] = {}
        self._labels: Dict[int, str] = {}
        self._next_id = 0

    # -------------------- Edges --------------------

    def add_edge(self, tail: int, head: int) -> int:
        check_node(tail)
        check_node(head)

        if self._adjacency.has_edge(tail, head):
            return EDGE_ALREADY_EXISTS

        edge = self._next_id
        self._next_id += 1
        self._adjacency.add_edge(tail, head, id=edge)
        self._endpoints[edge] = (tail, head)
        return edge

    def get_edges(self) -> List[int]:
        return list(self._endpoints)

    def count(self) -> int:
        return len(self._endpoints)

    def get_edge(self, tail: int, head: int) -> Optional[int]:
        data = self._adjacency.get_edge_data(tail, head)
        if data is None:
            return None
        return data["id"]

    def get_tail_node(self, edge: int) -> Optional[int]:
        endpoints = self._endpoints.get(edge)
        return None if endpoints is None else endpoints[0]

    def get_head_node(self, edge: int) -> Optional[int]:
        endpoints = self._endpoints.get(edge)
        return None if endpoints is None else endpoints[1]

    def contains_edge(self, edge: int, head: Optional[int] = None) -> bool:
        """
        contains_edge(edge) tests an edge id;
        contains_edge(tail, head) tests an ordered node pair.
        """
        if head is None:
            return edge in self._endpoints
        return self._adjacency.has_edge(edge, head)

    # -------------------- Labels --------------------

    def set_edge_label(self, edge: int, label: str) -> None:
        if edge not in self._endpoints:
            raise EdgeNotFoundError(edge)
        self._labels[edge] = label

    def get_edge_label(self, edge: int) -> Optional[str]:
        return self._labels.get(edge)

    # -------------------- Adjacency --------------------

    def get_in_edges(self, *nodes: int) -> List[int]:
        return self._collect(nodes, self._adjacency.in_edges)

    def get_out_edges(self, *nodes: int) -> List[int]:
        return self._collect(nodes, self._adjacency.out_edges)

    def get_edges_incident_to(self, *nodes: int) -> List[int]:
        edges = self.get_in_edges(*nodes)
        seen = set(edges)
        for edge in self.get_out_edges(*nodes):
            if edge not in seen:
                seen.add(edge)
                edges.append(edge)
        return edges

    def get_in_degree(self, node: int) -> int:
        if node not in self._adjacency:
            return 0
        return self._adjacency.in_degree(node)

    def get_out_degree(self, node: int) -> int:
        if node not in self._adjacency:
            return 0
        return self._adjacency.out_degree(node)

    def get_predecessors(self, node: int) -> List[int]:
        if node not in self._adjacency:
            return []
        return list(self._adjacency.predecessors(node))

    def get_successors(self, node: int) -> List[int]:
        if node not in self._adjacency:
            return []
        return list(self._adjacency.successors(node))

    def _collect(self, nodes: Iterable[int], view) -> List[int]:
        edges: List[int] = []
        seen = set()
        for node in nodes:
            if node not in self._adjacency:
                continue
            for _, _, edge in view(node, data="id"):
                if edge not in seen:
                    seen.add(edge)
                    edges.append(edge)
        return edges
