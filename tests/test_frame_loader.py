import math

import pandas as pd

from ontograph.config.settings import GraphConfig, LoaderConfig
from ontograph.graph.graph_store import DirectedGraph
from ontograph.loaders.frame_loader import load_graph_from_csv, load_graph_from_frames


def test_load_from_frames(graph):
    nodes_df = pd.DataFrame(
        {
            "id": [1, 2, 3],
            "accession": ["EC 1.-.-.-", "EC 1.1.-.-", None],
            "name": ["oxidoreductases", "acting on CH-OH", "orphan"],
        }
    )
    edges_df = pd.DataFrame(
        {
            "tail": [1, 2, 1],
            "head": [2, 4, 2],
            "label": ["is_a", None, "is_a"],
        }
    )

    report = load_graph_from_frames(graph=graph, nodes_df=nodes_df, edges_df=edges_df)

    assert report.nodes == 3
    assert report.edges == 2
    assert report.duplicate_edges == 1
    assert report.skipped_rows == 0
    assert graph.get_nodes() == [1, 2, 3, 4]
    assert graph.get_node_from_metadata("EC 1.1.-.-") == 2
    assert graph.get_node_metadata_value(3, "accession") is None
    assert graph.get_node_metadata_value(3, "name") == "orphan"
    assert graph.get_edge_label(graph.get_edge(1, 2)) == "is_a"
    assert graph.get_edge_label(graph.get_edge(2, 4)) is None


def test_invalid_rows_are_skipped(graph):
    nodes_df = pd.DataFrame({"id": [1, -5, math.nan, 2.5]})
    edges_df = pd.DataFrame({"tail": [1, -1], "head": [2, 3]})

    report = load_graph_from_frames(graph=graph, nodes_df=nodes_df, edges_df=edges_df)

    assert report.skipped_rows == 4
    assert graph.get_nodes() == [1, 2]
    assert graph.count_edges() == 1


def test_custom_columns():
    graph = DirectedGraph()
    config = LoaderConfig(tail_column="parent", head_column="child", label_column="rel")
    edges_df = pd.DataFrame({"parent": [10], "child": [11], "rel": ["part_of"]})

    load_graph_from_frames(graph=graph, nodes_df=None, edges_df=edges_df, config=config)

    assert graph.get_edge_label(graph.get_edge(10, 11)) == "part_of"


def test_load_from_csv(tmp_path):
    nodes_path = tmp_path / "nodes.csv"
    edges_path = tmp_path / "edges.csv"
    nodes_path.write_text("id,accession\n1,0001\n2,0002\n")
    edges_path.write_text("tail,head\n1,2\n")

    graph = DirectedGraph()
    report = load_graph_from_csv(graph=graph, nodes_path=nodes_path, edges_path=edges_path)

    assert report.nodes == 2
    assert graph.get_node_from_metadata("0002") == 2
    assert graph.is_ancestor_of(1, 2)


def test_strict_graph_skips_edges_to_unknown_nodes():
    graph = DirectedGraph(config=GraphConfig(implicit_node_registration=False))
    nodes_df = pd.DataFrame({"id": [1, 2]})
    edges_df = pd.DataFrame({"tail": [1, 2, 2], "head": [2, 9, 1]})

    report = load_graph_from_frames(graph=graph, nodes_df=nodes_df, edges_df=edges_df)

    assert report.edges == 2
    assert report.skipped_rows == 1
    assert graph.get_nodes() == [1, 2]
    assert not graph.contains_edge(2, 9)
    assert graph.contains_edge(2, 1)


def test_large_ids_keep_full_precision(graph):
    big = 2**53 + 1
    nodes_df = pd.DataFrame({"id": [str(big)]})
    edges_df = pd.DataFrame({"tail": [big], "head": [str(big + 2)]})

    load_graph_from_frames(graph=graph, nodes_df=nodes_df, edges_df=edges_df)

    assert graph.get_nodes() == [big, big + 2]
    assert graph.contains_edge(big, big + 2)


def test_large_ids_from_csv(tmp_path):
    big = 9007199254740993
    edges_path = tmp_path / "edges.csv"
    edges_path.write_text(f"tail,head\n{big},1\n")

    graph = DirectedGraph()
    load_graph_from_csv(graph=graph, nodes_path=None, edges_path=edges_path)

    assert graph.get_edge(big, 1) == 0


def test_non_integral_string_ids_are_skipped(graph):
    nodes_df = pd.DataFrame({"id": ["7", "x", "-1", "1.5"]})
    edges_df = pd.DataFrame({"tail": [], "head": []})

    report = load_graph_from_frames(graph=graph, nodes_df=nodes_df, edges_df=edges_df)

    assert graph.get_nodes() == [7]
    assert report.skipped_rows == 3


def test_integer_metadata_with_nulls_is_not_rendered_as_float(graph):
    nodes_df = pd.DataFrame(
        {
            "id": [1, 2],
            "code": [1, None],
            "weight": [0.5, None],
        }
    )
    edges_df = pd.DataFrame({"tail": [], "head": []})

    load_graph_from_frames(graph=graph, nodes_df=nodes_df, edges_df=edges_df)

    assert graph.get_node_metadata(1) == {"code": "1", "weight": "0.5"}
    assert graph.get_node_metadata(2) == {}
