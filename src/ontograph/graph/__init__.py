"""
Graph subsystem for ontograph.

Defines the directed graph used to model hierarchical relationships:
- node and edge stores with string metadata and labels
- transitive ancestor / descendant queries
- induced subgraphs
- cycle-aware tree height
"""

from ontograph.graph.graph_schema import Node, Edge
from ontograph.graph.node_store import NodeStore
from ontograph.graph.edge_store import EdgeStore, EDGE_ALREADY_EXISTS
from ontograph.graph.graph_store import DirectedGraph
from ontograph.graph.graph_builder import GraphBuilder
from ontograph.graph.tree_height import TreeHeightAnalyzer
from ontograph.graph.interop import to_networkx, from_networkx

__all__ = [
    "Node",
    "Edge",
    "NodeStore",
    "EdgeStore",
    "EDGE_ALREADY_EXISTS",
    "DirectedGraph",
    "GraphBuilder",
    "TreeHeightAnalyzer",
    "to_networkx",
    "from_networkx",
]
