import logging

from ontograph.config.settings import LoaderConfig, OntographConfig
from ontograph.hierarchy import TermHierarchy


def test_is_subclass_of(enzyme_classes):
    terms = TermHierarchy(enzyme_classes)

    assert terms.is_subclass_of("EC 1.1.1.-", "EC 1.-.-.-")
    assert not terms.is_subclass_of("EC 1.-.-.-", "EC 1.1.1.-")
    assert not terms.is_subclass_of("EC 2.1.-.-", "EC 1.-.-.-")
    assert not terms.is_subclass_of("EC 9.9.9.9", "EC 1.-.-.-")


def test_node_and_accession_resolution(enzyme_classes):
    terms = TermHierarchy(enzyme_classes)

    assert terms.node_for("EC 2.1.-.-") == 21
    assert terms.node_for("missing") is None
    assert terms.accession_of(11) == "EC 1.1.-.-"


def test_ancestors_and_descendants_by_accession(enzyme_classes):
    terms = TermHierarchy(enzyme_classes)

    assert set(terms.ancestors_of("EC 1.1.1.-")) == {"EC 1.-.-.-", "EC 1.1.-.-"}
    assert terms.descendants_of("EC 1.-.-.-", max_depth=1) == ["EC 1.1.-.-"]
    assert terms.descendants_of("missing") == []


def test_nodes_without_accession_are_skipped(enzyme_classes):
    enzyme_classes.add_edge(12, 13)
    terms = TermHierarchy(enzyme_classes)

    assert terms.descendants_of("EC 1.1.-.-") == ["EC 1.1.1.-"]


def test_height_degrades_to_none_on_cycles(graph, caplog):
    graph.add_edge(0, 1)
    graph.add_edge(1, 2)
    graph.add_edge(2, 1)

    with caplog.at_level(logging.WARNING, logger="ontograph.hierarchy"):
        assert TermHierarchy(graph).height() is None

    assert "not a tree" in caplog.text


def test_height_of_forest(enzyme_classes):
    assert TermHierarchy(enzyme_classes).height() == 2


def test_accession_is_not_shadowed_by_other_metadata(enzyme_classes):
    enzyme_classes.add_node(0)
    enzyme_classes.add_node_metadata(0, "name", "EC 1.1.-.-")
    # re-register 0 first so it wins the any-key reverse lookup
    graph = enzyme_classes.calc_subgraph([0] + enzyme_classes.get_nodes())
    terms = TermHierarchy(graph)

    assert graph.get_node_from_metadata("EC 1.1.-.-") == 0
    assert terms.node_for("EC 1.1.-.-") == 11
    assert terms.is_subclass_of("EC 1.1.-.-", "EC 1.-.-.-")
    assert terms.ancestors_of("EC 1.1.-.-") == ["EC 1.-.-.-"]
    assert terms.node_for("EC 9.9.9.9") is None


def test_name_only_match_does_not_resolve(graph):
    graph.add_node(1)
    graph.add_node_metadata(1, "name", "GO:0008150")

    assert TermHierarchy(graph).node_for("GO:0008150") is None


def test_from_config_uses_loader_accession_key(graph):
    graph.add_edge(1, 2)
    graph.add_node_metadata(1, "curie", "GO:0008150")
    graph.add_node_metadata(2, "curie", "GO:0009987")

    config = OntographConfig(loader=LoaderConfig(accession_key="curie"))
    terms = TermHierarchy.from_config(graph, config)

    assert terms.accession_key == "curie"
    assert terms.is_subclass_of("GO:0009987", "GO:0008150")
    assert terms.descendants_of("GO:0008150") == ["GO:0009987"]
