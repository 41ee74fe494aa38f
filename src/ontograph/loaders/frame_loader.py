from __future__ import annotations

import logging
import numbers
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import pandas as pd

from ontograph.config.settings import LoaderConfig
from ontograph.errors import NodeNotFoundError
from ontograph.graph.edge_store import EDGE_ALREADY_EXISTS
from ontograph.graph.graph_store import DirectedGraph


@dataclass(frozen=True)
class LoadReport:
    nodes: int
    edges: int
    duplicate_edges: int
    skipped_rows: int


def _as_node_id(value) -> Optional[int]:
    if isinstance(value, bool):
        return None

    if isinstance(value, numbers.Integral):
        node = int(value)
    elif isinstance(value, str):
        try:
            node = int(value.strip())
        except ValueError:
            return None
    elif isinstance(value, numbers.Real):
        # float cells: NaN and inf are not integral
        if not float(value).is_integer():
            return None
        node = int(value)
    else:
        return None

    return node if node >= 0 else None


def _as_text(column: pd.Series) -> List[Optional[str]]:
    """
    Column values as strings, None for nulls.

    A float column whose present values are all integral is an integer
    column that pandas widened to hold nulls; it is rendered without the
    trailing ".0".
    """
    if pd.api.types.is_float_dtype(column):
        present = column.dropna()
        if (present == present.round()).all():
            try:
                column = column.astype("Int64")
            except (ValueError, OverflowError, TypeError):
                pass

    return [None if pd.isna(v) else str(v) for v in column.astype("string").tolist()]


def load_graph_from_frames(
    *,
    graph: DirectedGraph,
    nodes_df: Optional[pd.DataFrame],
    edges_df: pd.DataFrame,
    config: Optional[LoaderConfig] = None,
) -> LoadReport:
    """
    Populate ``graph`` from node and edge tables.

    Every node column other than the id column becomes node metadata
    (null cells are left out). Edge rows give tail, head and, when the
    column is present, a label. Rows whose ids are missing, negative or
    non-integral, and edge rows rejected by a strict graph, are skipped
    with a warning.
    """
    config = config or LoaderConfig()
    logger = logging.getLogger("ontograph.load_graph")

    added_nodes = 0
    added_edges = 0
    duplicates = 0
    skipped = 0

    t0 = time.perf_counter()
    if nodes_df is not None:
        ids = nodes_df[config.id_column].tolist()
        metadata = {
            str(column): _as_text(nodes_df[column])
            for column in nodes_df.columns
            if column != config.id_column
        }

        for position, raw in enumerate(ids):
            node = _as_node_id(raw)
            if node is None:
                logger.warning("skipping node row with id=%r", raw)
                skipped += 1
                continue

            if not graph.contains_node(node):
                added_nodes += 1
            graph.add_node(node)

            for key, values in metadata.items():
                if values[position] is not None:
                    graph.add_node_metadata(node, key, values[position])
    t_nodes = time.perf_counter()

    tails = edges_df[config.tail_column].tolist()
    heads = edges_df[config.head_column].tolist()
    labels: List[Optional[str]] = [None] * len(tails)
    if config.label_column in edges_df.columns:
        labels = _as_text(edges_df[config.label_column])

    for raw_tail, raw_head, label in zip(tails, heads, labels):
        tail = _as_node_id(raw_tail)
        head = _as_node_id(raw_head)
        if tail is None or head is None:
            logger.warning("skipping edge row with tail=%r head=%r", raw_tail, raw_head)
            skipped += 1
            continue

        try:
            edge = graph.add_edge(tail, head)
        except NodeNotFoundError as exc:
            logger.warning("skipping edge row %s -> %s: %s", tail, head, exc)
            skipped += 1
            continue

        if edge == EDGE_ALREADY_EXISTS:
            duplicates += 1
            continue

        added_edges += 1
        if label is not None:
            graph.set_edge_label(edge, label)
    t_edges = time.perf_counter()

    if duplicates:
        logger.warning("ignored %s duplicate edges", duplicates)

    logger.info(
        "added nodes=%s in %.3fs; added edges=%s in %.3fs; skipped rows=%s",
        added_nodes,
        t_nodes - t0,
        added_edges,
        t_edges - t_nodes,
        skipped,
    )

    return LoadReport(
        nodes=added_nodes,
        edges=added_edges,
        duplicate_edges=duplicates,
        skipped_rows=skipped,
    )


def load_graph_from_csv(
    *,
    graph: DirectedGraph,
    nodes_path: Optional[Path],
    edges_path: Path,
    config: Optional[LoaderConfig] = None,
) -> LoadReport:
    # str keeps accessions such as "0001" and large ids intact; ids are parsed per row
    nodes_df = None
    if nodes_path is not None:
        nodes_df = pd.read_csv(nodes_path, dtype=str, keep_default_na=False, na_values=[""])

    edges_df = pd.read_csv(edges_path, dtype=str, keep_default_na=False, na_values=[""])

    return load_graph_from_frames(
        graph=graph,
        nodes_df=nodes_df,
        edges_df=edges_df,
        config=config,
    )
