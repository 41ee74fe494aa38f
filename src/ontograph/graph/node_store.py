from __future__ import annotations

from typing import Dict, List, Optional

from ontograph.errors import InvalidNodeError, NodeNotFoundError


def check_node(node: int) -> int:
    """
    Validate a caller-supplied node id and return it.
    """
    if isinstance(node, bool) or not isinstance(node, int) or node < 0:
        raise InvalidNodeError(node)
    return node


class NodeStore:
    """
    Node ids in insertion order plus per-node string metadata.

    Metadata lives in a side table keyed by node id, so nodes without
    metadata cost nothing beyond their slot in the id table. A reverse
    index value -> {node: key count} backs get_node_from_metadata.
    """

    def __init__(self) -> None:
        # node id -> insertion position
        self._nodes: Dict[int, int] = {}
        self._metadata: Dict[int, Dict[str, str]] = {}
        self._value_index: Dict[str, Dict[int, int]] = {}

    # -------------------- Nodes --------------------

    def add_node(self, node: int) -> None:
        check_node(node)
        if node not in self._nodes:
            self._nodes[node] = len(self._nodes)

    def contains_node(self, node: int) -> bool:
        return node in self._nodes

    def get_nodes(self) -> List[int]:
        return list(self._nodes)

    def count(self) -> int:
        return len(self._nodes)

    # -------------------- Metadata --------------------

    def add_node_metadata(self, node: int, key: str, value: str) -> None:
        if node not in self._nodes:
            raise NodeNotFoundError(node)

        entries = self._metadata.setdefault(node, {})
        previous = entries.get(key)
        if previous == value:
            return
        if previous is not None:
            self._unindex(previous, node)

        entries[key] = value
        counts = self._value_index.setdefault(value, {})
        counts[node] = counts.get(node, 0) + 1

    def get_node_metadata_value(self, node: int, key: str) -> Optional[str]:
        entries = self._metadata.get(node)
        if entries is None:
            return None
        return entries.get(key)

    def get_node_metadata(self, node: int) -> Dict[str, str]:
        return dict(self._metadata.get(node, {}))

    def get_node_from_metadata(self, value: str) -> Optional[int]:
        """
        Return the earliest-registered node holding ``value`` under any key.
        """
        counts = self._value_index.get(value)
        if not counts:
            return None
        return min(counts, key=self._nodes.__getitem__)

    def _unindex(self, value: str, node: int) -> None:
        counts = self._value_index[value]
        counts[node] -= 1
        if counts[node] == 0:
            del counts[node]
        if not counts:
            del self._value_index[value]
