from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass(frozen=True)
class Node:
    """
    Read view of a graph node: its caller-assigned id and metadata.
    """

    id: int
    metadata: Dict[str, str] = field(default_factory=dict)

    @staticmethod
    def create(id: int, **metadata: str) -> "Node":
        return Node(id=id, metadata=dict(metadata))


@dataclass(frozen=True)
class Edge:
    """
    Read view of a directed edge. The id is assigned by the graph.
    """

    id: int
    tail: int
    head: int
    label: Optional[str] = None
