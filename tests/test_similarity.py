from __future__ import annotations

from thesaurus_helper import Term, find_similarities


def test_direct_synonym_and_antonym(emotion_terms) -> None:
    results = find_similarities("sorrow", emotion_terms)

    assert [(r.term.word, r.connection, r.strength) for r in results] == [("joy", "antonym", 40)]


def test_query_term_is_never_listed(emotion_terms) -> None:
    results = find_similarities("JOY", emotion_terms)

    assert all(r.term.word != "joy" for r in results)
    assert results[0].term.word == "happiness"
    assert results[0].connection == "synonym"
    assert results[0].strength == 90


def test_shared_synonyms_strength_and_label() -> None:
    terms = [
        Term(word="idea", category="concept", synonyms=("notion", "thought", "concept")),
        Term(word="belief", category="other", synonyms=("thought", "notion")),
    ]
    results = find_similarities("idea", terms)

    assert len(results) == 1
    assert results[0].connection == "shared synonym: notion"
    assert results[0].strength == 70


def test_shared_synonym_strength_caps_at_80() -> None:
    syns = ("a", "b", "c", "d", "e", "f")
    terms = [Term(word="x", synonyms=syns), Term(word="y", synonyms=syns)]

    assert find_similarities("x", terms)[0].strength == 80


def test_same_category_needs_known_query() -> None:
    terms = [
        Term(word="anger", category="emotion"),
        Term(word="grief", category="emotion"),
    ]
    assert [(r.term.word, r.strength) for r in find_similarities("anger", terms)] == [("grief", 30)]
    assert find_similarities("rage", terms) == []


def test_sorted_by_strength_with_stable_ties() -> None:
    terms = [
        Term(word="calm", category="state"),
        Term(word="serene", category="state"),
        Term(word="placid", category="state", synonyms=("calm",)),
        Term(word="still", category="state"),
    ]
    results = find_similarities("calm", terms)

    assert [r.term.word for r in results] == ["placid", "serene", "still"]
    assert [r.strength for r in results] == [90, 30, 30]


def test_blank_query_returns_nothing(emotion_terms) -> None:
    assert find_similarities("   ", emotion_terms) == []
