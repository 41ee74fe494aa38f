from __future__ import annotations

from typing import List


class GraphError(Exception):
    """
    Base class for every error raised by ontograph.
    """


# ---------------------------------------------------------------------
# Invalid usage
# ---------------------------------------------------------------------


class InvalidNodeError(GraphError, ValueError):
    """
    Raised when a node id is not a non-negative integer.
    """

    def __init__(self, node: object) -> None:
        super().__init__(f"node id must be a non-negative int, got {node!r}")
        self.node = node


class NodeNotFoundError(GraphError, KeyError):
    def __init__(self, node: int) -> None:
        super().__init__(f"node {node} was not found")
        self.node = node

    def __str__(self) -> str:
        return self.args[0]


class EdgeNotFoundError(GraphError, KeyError):
    def __init__(self, edge: int) -> None:
        super().__init__(f"edge {edge} was not found")
        self.edge = edge

    def __str__(self) -> str:
        return self.args[0]


# ---------------------------------------------------------------------
# Structural (height analysis)
# ---------------------------------------------------------------------


class NotATreeError(GraphError):
    """
    The graph cannot be read as a rooted tree.

    Recoverable: callers are expected to catch it and degrade.
    """

    def __init__(self, detail: str | None = None) -> None:
        message = "not a tree" if detail is None else f"not a tree, {detail}"
        super().__init__(message)


class MultipleRootsError(NotATreeError):
    def __init__(self, roots: List[int]) -> None:
        super().__init__(f"roots={list(roots)}")
        self.roots = list(roots)


class CycleDetectedError(NotATreeError):
    """
    A back-edge was met while walking down from the root.

    ``path`` ends with the node that closes the cycle.
    """

    def __init__(self, path: List[int]) -> None:
        super().__init__(f"path={list(path)}")
        self.path = list(path)
