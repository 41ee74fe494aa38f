from __future__ import annotations

import logging
from typing import List, Optional

from ontograph.config.settings import OntographConfig
from ontograph.errors import NotATreeError
from ontograph.graph.graph_store import DirectedGraph


class TermHierarchy:
    """
    Hierarchy-aware lookups keyed by external term accessions.

    Accessions are stored as node metadata under ``accession_key``;
    edges point from a broader term to a narrower one.
    """

    def __init__(self, graph: DirectedGraph, *, accession_key: str = "accession") -> None:
        self.graph = graph
        self.accession_key = accession_key

    @classmethod
    def from_config(cls, graph: DirectedGraph, config: OntographConfig) -> "TermHierarchy":
        return cls(graph, accession_key=config.loader.accession_key)

    def node_for(self, accession: str) -> Optional[int]:
        """
        Earliest-registered node holding ``accession`` under the accession key.

        The metadata reverse index matches a value under any key, so a hit
        is only trusted when it carries the value as its accession.
        """
        node = self.graph.get_node_from_metadata(accession)
        if node is None:
            return None
        if self.accession_of(node) == accession:
            return node

        for node in self.graph.get_nodes():
            if self.accession_of(node) == accession:
                return node
        return None

    def accession_of(self, node: int) -> Optional[str]:
        return self.graph.get_node_metadata_value(node, self.accession_key)

    def is_subclass_of(self, child: str, parent: str) -> bool:
        """
        True if ``child`` sits anywhere below ``parent``.
        """
        child_node = self.node_for(child)
        parent_node = self.node_for(parent)
        if child_node is None or parent_node is None:
            return False
        return self.graph.is_ancestor_of(parent_node, child_node)

    def ancestors_of(self, accession: str) -> List[str]:
        node = self.node_for(accession)
        if node is None:
            return []
        return self._accessions(self.graph.get_ancestors(node))

    def descendants_of(self, accession: str, max_depth: Optional[int] = None) -> List[str]:
        node = self.node_for(accession)
        if node is None:
            return []
        return self._accessions(self.graph.get_descendants(node, max_depth))

    def height(self) -> Optional[int]:
        """
        Tree height, or None when the hierarchy is not a tree.
        """
        try:
            return self.graph.calc_height()
        except NotATreeError as exc:
            logging.getLogger("ontograph.hierarchy").warning(
                "height unavailable for %r: %s", self.graph.graph_label, exc
            )
            return None

    def _accessions(self, nodes: List[int]) -> List[str]:
        found = []
        for node in nodes:
            accession = self.accession_of(node)
            if accession is not None:
                found.append(accession)
        return found
