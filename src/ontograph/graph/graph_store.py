from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from ontograph.config.settings import GraphConfig
from ontograph.errors import NodeNotFoundError
from ontograph.graph.edge_store import EDGE_ALREADY_EXISTS, EdgeStore
from ontograph.graph.graph_query import reachable
from ontograph.graph.graph_schema import Edge, Node
from ontograph.graph.node_store import NodeStore, check_node
from ontograph.graph.tree_height import TreeHeightAnalyzer


class DirectedGraph:
    """
    Authoritative in-memory directed graph over integer node ids.

    Append-only: nodes and edges are never removed, metadata and labels
    may be overwritten. Not thread-safe for writers; once fully built it
    can be queried concurrently.
    """

    def __init__(
        self,
        *,
        label: Optional[str] = None,
        config: Optional[GraphConfig] = None,
    ) -> None:
        self.graph_label = label
        self.config = config or GraphConfig()
        self._nodes = NodeStore()
        self._edges = EdgeStore()

    # -------------------- Nodes --------------------

    def add_node(self, node: int) -> None:
        self._nodes.add_node(node)

    def add_node_metadata(self, node: int, key: str, value: str) -> None:
        self._nodes.add_node_metadata(node, key, value)

    def get_node_metadata_value(self, node: int, key: str) -> Optional[str]:
        return self._nodes.get_node_metadata_value(node, key)

    def get_node_metadata(self, node: int) -> Dict[str, str]:
        return self._nodes.get_node_metadata(node)

    def get_node_from_metadata(self, value: str) -> Optional[int]:
        return self._nodes.get_node_from_metadata(value)

    def contains_node(self, node: int) -> bool:
        return self._nodes.contains_node(node)

    def get_nodes(self) -> List[int]:
        return self._nodes.get_nodes()

    def get_node_view(self, node: int) -> Optional[Node]:
        if not self.contains_node(node):
            return None
        return Node(id=node, metadata=self.get_node_metadata(node))

    # -------------------- Edges --------------------

    def add_edge(self, tail: int, head: int) -> int:
        """
        Connect ``tail`` to ``head`` and return the new edge id.

        Returns EDGE_ALREADY_EXISTS if the pair is already connected.
        Unregistered endpoints are registered, or rejected with
        NodeNotFoundError when implicit registration is disabled.
        """
        check_node(tail)
        check_node(head)

        if not self.config.implicit_node_registration:
            for node in (tail, head):
                if not self.contains_node(node):
                    raise NodeNotFoundError(node)

        edge = self._edges.add_edge(tail, head)
        if edge != EDGE_ALREADY_EXISTS:
            self._nodes.add_node(tail)
            self._nodes.add_node(head)
        return edge

    def set_edge_label(self, edge: int, label: str) -> None:
        self._edges.set_edge_label(edge, label)

    def get_edge_label(self, edge: int) -> Optional[str]:
        return self._edges.get_edge_label(edge)

    def get_edges(self) -> List[int]:
        return self._edges.get_edges()

    def get_edge(self, tail: int, head: int) -> Optional[int]:
        return self._edges.get_edge(tail, head)

    def get_tail_node(self, edge: int) -> Optional[int]:
        return self._edges.get_tail_node(edge)

    def get_head_node(self, edge: int) -> Optional[int]:
        return self._edges.get_head_node(edge)

    def contains_edge(self, edge: int, head: Optional[int] = None) -> bool:
        return self._edges.contains_edge(edge, head)

    def get_edge_view(self, edge: int) -> Optional[Edge]:
        if not self.contains_edge(edge):
            return None
        return Edge(
            id=edge,
            tail=self.get_tail_node(edge),
            head=self.get_head_node(edge),
            label=self.get_edge_label(edge),
        )

    # -------------------- Adjacency --------------------

    def get_in_edges(self, *nodes: int) -> List[int]:
        return self._edges.get_in_edges(*nodes)

    def get_out_edges(self, *nodes: int) -> List[int]:
        return self._edges.get_out_edges(*nodes)

    def get_edges_incident_to(self, *nodes: int) -> List[int]:
        return self._edges.get_edges_incident_to(*nodes)

    def get_in_degree(self, node: int) -> int:
        return self._edges.get_in_degree(node)

    def get_out_degree(self, node: int) -> int:
        return self._edges.get_out_degree(node)

    def get_predecessors(self, node: int) -> List[int]:
        return self._edges.get_predecessors(node)

    def get_successors(self, node: int) -> List[int]:
        return self._edges.get_successors(node)

    # -------------------- Relationships --------------------

    def get_ancestors(self, node: int) -> List[int]:
        return reachable(node, self._edges.get_predecessors)

    def get_descendants(self, node: int, max_depth: Optional[int] = None) -> List[int]:
        return reachable(node, self._edges.get_successors, max_depth=max_depth)

    def is_ancestor_of(self, ancestor: int, descendant: int) -> bool:
        return descendant in self.get_descendants(ancestor)

    def is_descendant_of(self, descendant: int, ancestor: int) -> bool:
        return self.is_ancestor_of(ancestor, descendant)

    def is_source(self, node: int) -> bool:
        return self.get_in_degree(node) == 0 and self.get_out_degree(node) > 0

    def is_sink(self, node: int) -> bool:
        return self.get_in_degree(node) > 0 and self.get_out_degree(node) == 0

    def get_sources(self) -> List[int]:
        return [n for n in self.get_nodes() if self.is_source(n)]

    def get_sinks(self) -> List[int]:
        return [n for n in self.get_nodes() if self.is_sink(n)]

    # -------------------- Analytics --------------------

    def count_nodes(self) -> int:
        return self._nodes.count()

    def count_edges(self) -> int:
        return self._edges.count()

    def calc_height(self) -> int:
        """
        Number of edges on the longest path from the first root to a sink.

        Raises NotATreeError when there is no root and CycleDetectedError
        when a path revisits one of its own nodes.
        """
        return TreeHeightAnalyzer(self).calc_height()

    # -------------------- Derivation --------------------

    def calc_subgraph(self, nodes: Iterable[int]) -> "DirectedGraph":
        """
        Induced subgraph over ``nodes``, fully independent of this graph.

        Edges keep their relative order but get fresh ids.
        """
        sub = DirectedGraph(label=self.graph_label, config=self.config)

        for node in nodes:
            sub.add_node(node)
            for key, value in self._nodes.get_node_metadata(node).items():
                sub.add_node_metadata(node, key, value)

        for edge in self.get_edges():
            tail = self.get_tail_node(edge)
            head = self.get_head_node(edge)
            if sub.contains_node(tail) and sub.contains_node(head):
                new_edge = sub.add_edge(tail, head)
                label = self.get_edge_label(edge)
                if label is not None:
                    sub.set_edge_label(new_edge, label)

        logging.getLogger("ontograph.graph").debug(
            "subgraph nodes=%s/%s edges=%s/%s",
            sub.count_nodes(),
            self.count_nodes(),
            sub.count_edges(),
            self.count_edges(),
        )
        return sub

    def clone(self) -> "DirectedGraph":
        return self.calc_subgraph(self.get_nodes())

    # -------------------- Introspection --------------------

    def __len__(self) -> int:
        return self.count_nodes()

    def __contains__(self, node: object) -> bool:
        if isinstance(node, bool) or not isinstance(node, int):
            return False
        return self.contains_node(node)

    def __repr__(self) -> str:
        return (
            f"DirectedGraph(label={self.graph_label!r}, "
            f"nodes={self.count_nodes()}, "
            f"edges={self.count_edges()})"
        )
