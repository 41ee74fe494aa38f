from __future__ import annotations

from dataclasses import dataclass, field

# ---------------------------------------------------------------------
# Graph structure policy
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class GraphConfig:
    """
    Structural policy for a DirectedGraph.

    implicit_node_registration:
        register edge endpoints that were never added as nodes. When off,
        such edges are rejected with NodeNotFoundError.
    reject_multiple_roots:
        make the height analysis fail on forests instead of walking the
        first root only.
    """

    implicit_node_registration: bool = True
    reject_multiple_roots: bool = False


# ---------------------------------------------------------------------
# Tabular loading
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class LoaderConfig:
    """
    Column names used when populating a graph from node/edge tables.
    """

    id_column: str = "id"
    tail_column: str = "tail"
    head_column: str = "head"
    label_column: str = "label"
    accession_key: str = "accession"


# ---------------------------------------------------------------------
# Root configuration object
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class OntographConfig:
    """
    Root configuration object for ontograph.

    Constructed explicitly and passed to the subsystems that need it.
    """

    graph: GraphConfig = field(default_factory=GraphConfig)
    loader: LoaderConfig = field(default_factory=LoaderConfig)
