"""
ontograph
=========

An in-memory directed graph over integer node ids for hierarchical and
ontological relationships: classification trees, controlled vocabularies,
term hierarchies.

Public API:
- DirectedGraph
- GraphBuilder
- TermHierarchy
- GraphConfig / OntographConfig
- NotATreeError / CycleDetectedError
"""

from ontograph.config.settings import GraphConfig, LoaderConfig, OntographConfig
from ontograph.errors import (
    GraphError,
    InvalidNodeError,
    NodeNotFoundError,
    EdgeNotFoundError,
    NotATreeError,
    MultipleRootsError,
    CycleDetectedError,
)
from ontograph.graph.edge_store import EDGE_ALREADY_EXISTS
from ontograph.graph.graph_store import DirectedGraph
from ontograph.graph.graph_builder import GraphBuilder
from ontograph.hierarchy import TermHierarchy

__all__ = [
    "GraphConfig",
    "LoaderConfig",
    "OntographConfig",
    "GraphError",
    "InvalidNodeError",
    "NodeNotFoundError",
    "EdgeNotFoundError",
    "NotATreeError",
    "MultipleRootsError",
    "CycleDetectedError",
    "EDGE_ALREADY_EXISTS",
    "DirectedGraph",
    "GraphBuilder",
    "TermHierarchy",
]

__version__ = "0.1.0"
