from __future__ import annotations

from collections import deque
from typing import Callable, Deque, List, Optional, Set, Tuple

Neighbours = Callable[[int], List[int]]


def reachable(
    start: int,
    neighbours: Neighbours,
    *,
    max_depth: Optional[int] = None,
) -> List[int]:
    """
    Breadth-first closure of ``start`` under ``neighbours``.

    ``start`` itself is only reported when some path leads back to it.
    Nodes come out in discovery order. With ``max_depth`` only nodes at
    most that many hops away are reported; breadth-first order guarantees
    each node is first met at its shortest distance.
    """
    if max_depth is not None and max_depth <= 0:
        return []

    found: List[int] = []
    seen: Set[int] = set()
    frontier: Deque[Tuple[int, int]] = deque([(start, 0)])

    while frontier:
        node, depth = frontier.popleft()
        if max_depth is not None and depth >= max_depth:
            continue

        for nbr in neighbours(node):
            if nbr in seen:
                continue
            seen.add(nbr)
            found.append(nbr)
            frontier.append((nbr, depth + 1))

    return found
