from __future__ import annotations

from thesaurus_helper import Term, build_graph, load_terms


def test_empty_terms_give_empty_graph() -> None:
    assert build_graph([]) == {}


def test_edges_are_symmetric_and_lowercased() -> None:
    graph = build_graph([Term(word="Fast", synonyms=("Quick", "rapid"))])

    assert graph["fast"] == {"quick", "rapid"}
    assert graph["quick"] == {"fast"}
    assert graph["rapid"] == {"fast"}


def test_duplicate_edges_collapse() -> None:
    graph = build_graph(
        [
            Term(word="joy", synonyms=("happiness",)),
            Term(word="happiness", synonyms=("joy", "JOY")),
        ]
    )
    assert graph == {"joy": {"happiness"}, "happiness": {"joy"}}


def test_antonyms_do_not_form_edges() -> None:
    graph = build_graph([Term(word="joy", antonyms=("sorrow",))])
    assert graph == {"joy": set()}


def test_sample_dictionary_graph_is_symmetric() -> None:
    graph = build_graph(load_terms())
    for word, neighbors in graph.items():
        for neighbor in neighbors:
            assert word in graph[neighbor]
