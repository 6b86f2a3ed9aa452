from __future__ import annotations

import pytest

from thesaurus_helper import Term, generate_challenge, load_terms, make_index_chooser


def test_challenge_structure_on_sample_dictionary() -> None:
    challenge = generate_challenge(load_terms(), make_index_chooser(seed=7))

    assert len(challenge.hints) == 4
    assert challenge.max_guesses == 5


def test_hints_from_pinned_target() -> None:
    terms = [
        Term(word="other"),
        Term(
            word="serene",
            definition="Untroubled and quietly composed, like a still lake",
            category="state",
            synonyms=("calm", "tranquil", "placid"),
        ),
    ]
    challenge = generate_challenge(terms, choose_index=lambda n: 1)

    assert challenge.target_word == "serene"
    assert challenge.hints == (
        "Category: state",
        "It has 3 known synonyms",
        'First letter: "S"',
        "Definition hint: Untroubled and quietly composed, like...",
    )


def test_empty_terms_fail_fast() -> None:
    with pytest.raises(ValueError):
        generate_challenge([])


def test_out_of_range_chooser_is_rejected() -> None:
    with pytest.raises(ValueError):
        generate_challenge([Term(word="a")], choose_index=lambda n: n)


def test_seeded_chooser_is_reproducible() -> None:
    terms = load_terms()
    first = generate_challenge(terms, make_index_chooser(seed=42))
    second = generate_challenge(terms, make_index_chooser(seed=42))

    assert first == second


def test_terms_are_not_mutated() -> None:
    terms = [Term(word="a", synonyms=("b",))]
    snapshot = list(terms)
    generate_challenge(terms, choose_index=lambda n: 0)
    assert terms == snapshot


def test_padded_word_gives_real_first_letter() -> None:
    challenge = generate_challenge([Term(word=" joy", category="emotion")], choose_index=lambda n: 0)

    assert challenge.target_word == "joy"
    assert challenge.hints[2] == 'First letter: "J"'


def test_loaded_padded_word_is_trimmed(tmp_path) -> None:
    path = tmp_path / "terms.json"
    path.write_text('[{"word": " joy", "category": "emotion"}]', encoding="utf-8")

    challenge = generate_challenge(load_terms(path), choose_index=lambda n: 0)

    assert challenge.hints[2] == 'First letter: "J"'
