from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator, List, Set

from ontograph.errors import CycleDetectedError, MultipleRootsError, NotATreeError

if TYPE_CHECKING:
    from ontograph.graph.graph_store import DirectedGraph


class TreeHeightAnalyzer:
    """
    Longest root-to-sink path length of a graph read as a rooted tree.

    The first source in node order is the root; other roots are ignored
    unless the graph's config asks to reject them. The walk is a
    depth-first enumeration of paths with no node-level memoisation,
    which keeps the cycle check path-sensitive: a node shared by two
    branches is fine, a node repeated on one path is a cycle.
    """

    def __init__(self, graph: "DirectedGraph") -> None:
        self.graph = graph

    def calc_height(self) -> int:
        roots = self.graph.get_sources()
        if not roots:
            raise NotATreeError()

        if len(roots) > 1 and self.graph.config.reject_multiple_roots:
            raise MultipleRootsError(roots)

        root = roots[0]
        height = self._longest_path(root)

        logging.getLogger("ontograph.graph").debug(
            "height=%s root=%s roots=%s", height, root, len(roots)
        )
        return height

    def _longest_path(self, root: int) -> int:
        graph = self.graph

        path: List[int] = [root]
        on_path: Set[int] = {root}
        stack: List[Iterator[int]] = [iter(graph.get_successors(root))]
        longest = 0

        while stack:
            nxt = next(stack[-1], None)

            if nxt is None:
                stack.pop()
                on_path.discard(path.pop())
                continue

            if nxt in on_path:
                raise CycleDetectedError(path + [nxt])

            if graph.is_sink(nxt):
                longest = max(longest, len(path))
                continue

            path.append(nxt)
            on_path.add(nxt)
            stack.append(iter(graph.get_successors(nxt)))

        return longest
