#!/usr/bin/env python3
"""Thesaurus helper built on a small synonym graph.

Features:
- Similar mode: rank dictionary terms related to a query word.
- Connect mode: shortest synonym path between two words.
- Play mode: guess a hidden word from progressively revealed hints.
"""

from __future__ import annotations

import argparse
import json
from collections import deque
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Set, Tuple

import numpy as np

from thesaurus_terms import SAMPLE_TERMS


# -------------------- Defaults --------------------
DEFAULT_TOPK = 10
MAX_GUESSES = 5
HINT_WORDS = 5

SIMILAR_SYNONYM_STRENGTH = 90
SIMILAR_ANTONYM_STRENGTH = 40
SIMILAR_SHARED_BASE = 60
SIMILAR_SHARED_STEP = 5
SIMILAR_SHARED_CAP = 80
SIMILAR_CATEGORY_STRENGTH = 30

EXACT_SCORE = 100
GUESS_SYNONYM_SCORE = 85
GUESS_ANTONYM_SCORE = 35
GUESS_SHARED_BASE = 50
GUESS_SHARED_STEP = 8
GUESS_SHARED_CAP = 75
GUESS_CATEGORY_SCORE = 20
PATH_BASE_SCORE = 70
PATH_HOP_PENALTY = 15
PATH_MIN_SCORE = 10

EXACT_FEEDBACK = "Exact match! You got it!"
TARGET_MISSING_FEEDBACK = "Target word not found in dictionary."
FEEDBACK_BANDS: Tuple[Tuple[int, str], ...] = (
    (80, "Very close! Strong connection found."),
    (60, "Good guess! Related through shared concepts."),
    (40, "Somewhat related, keep trying!"),
    (20, "Loosely connected. Think more closely."),
)
NO_CONNECTION_FEEDBACK = "No clear connection found. Try a synonym or related concept."

Graph = Dict[str, Set[str]]
IndexChooser = Callable[[int], int]


# -------------------- Data structures --------------------
@dataclass(frozen=True)
class Term:
    word: str
    definition: str = ""
    category: str = ""
    synonyms: Tuple[str, ...] = ()
    antonyms: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "Term":
        if not isinstance(record, Mapping):
            raise ValueError(f"Term record must be a JSON object, got {type(record).__name__}")

        word = record.get("word")
        if not isinstance(word, str) or not word.strip():
            raise ValueError(f"Term record needs a non-empty string 'word': {record!r}")

        return cls(
            word=word.strip(),
            definition=str(record.get("definition") or ""),
            category=str(record.get("category") or ""),
            synonyms=_word_list(record, "synonyms"),
            antonyms=_word_list(record, "antonyms"),
        )

    @property
    def key(self) -> str:
        return normalize_query(self.word)

    def lower_synonyms(self) -> List[str]:
        return [normalize_query(s) for s in self.synonyms]

    def lower_antonyms(self) -> List[str]:
        return [normalize_query(a) for a in self.antonyms]


@dataclass
class SimilarityResult:
    term: Term
    connection: str
    strength: int


@dataclass
class Connection:
    """One relation that contributed to a guess score."""

    type: str
    words: List[str]


@dataclass
class GuessResult:
    score: int
    feedback: str
    connections: List[Connection] = field(default_factory=list)

    def path(self) -> Optional[List[str]]:
        for conn in self.connections:
            if conn.type == "path":
                return conn.words
        return None


@dataclass(frozen=True)
class Challenge:
    target_word: str
    hints: Tuple[str, ...]
    max_guesses: int = MAX_GUESSES


# -------------------- Basic helpers --------------------
def normalize_query(word: str) -> str:
    return word.strip().lower()


def _word_list(record: Mapping[str, Any], key: str) -> Tuple[str, ...]:
    """Read a synonym/antonym list; a bare string is rejected rather than split into letters."""
    raw = record.get(key)
    if raw is None:
        return ()
    if not isinstance(raw, (list, tuple)):
        raise ValueError(f"'{key}' must be a list of words in record for {record.get('word')!r}")
    if not all(isinstance(item, str) for item in raw):
        raise ValueError(f"'{key}' must contain only strings in record for {record.get('word')!r}")
    return tuple(item.strip() for item in raw if item.strip())


def find_term(word: str, terms: Sequence[Term]) -> Optional[Term]:
    """Case-insensitive lookup; blank words never match."""
    key = normalize_query(word)
    if not key:
        return None
    for term in terms:
        if term.key == key:
            return term
    return None


def feedback_for_score(score: int) -> str:
    for threshold, message in FEEDBACK_BANDS:
        if score >= threshold:
            return message
    return NO_CONNECTION_FEEDBACK


def shared_synonyms(source: Term, other: Term) -> List[str]:
    """Synonyms listed on both terms, in ``source`` order."""
    other_syns = set(other.lower_synonyms())
    return [s for s in source.lower_synonyms() if s in other_syns]


# -------------------- Term store --------------------
def validate_terms(terms: Sequence[Term]) -> None:
    """Require non-blank words that are unique ignoring case."""
    seen: Set[str] = set()
    for term in terms:
        key = term.key
        if not key:
            raise ValueError("Term word must be non-empty")
        if key in seen:
            raise ValueError(f"Duplicate term word '{term.word}' (words are case-insensitive)")
        seen.add(key)


def load_terms(path: Optional[Path | str] = None) -> List[Term]:
    """Load term records from a JSON list, or the bundled sample when no path is given."""
    if path is None:
        records: Any = SAMPLE_TERMS
    else:
        try:
            records = json.loads(Path(path).read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON in term file '{path}': {exc}") from exc

    if not isinstance(records, list):
        raise ValueError("Term file must contain a JSON list of term records")

    terms = [Term.from_dict(record) for record in records]
    validate_terms(terms)
    return terms


def search_terms(query: str, terms: Sequence[Term]) -> List[Term]:
    """Substring search over word, definition, category and synonyms."""
    q = normalize_query(query)
    if not q:
        return list(terms)

    return [
        term
        for term in terms
        if q in term.word.lower()
        or q in term.definition.lower()
        or q in term.category.lower()
        or any(q in syn for syn in term.lower_synonyms())
    ]


# -------------------- Graph building --------------------
def build_graph(terms: Sequence[Term]) -> Graph:
    """Undirected synonym graph keyed by lower-cased word.

    Raw synonym lists need not be reciprocal; every listed synonym becomes an
    edge in both directions. Antonyms never form edges.
    """
    graph: Graph = {}

    for term in terms:
        word = term.key
        graph.setdefault(word, set())
        for syn in term.lower_synonyms():
            graph[word].add(syn)
            graph.setdefault(syn, set()).add(word)

    return graph


# -------------------- Similar mode --------------------
@dataclass
class _SimilarityContext:
    query: str
    source: Optional[Term]


SimilarityRule = Callable[[_SimilarityContext, Term], Optional[Tuple[str, int]]]


def _similar_synonym(ctx: _SimilarityContext, term: Term) -> Optional[Tuple[str, int]]:
    if ctx.query in term.lower_synonyms():
        return "synonym", SIMILAR_SYNONYM_STRENGTH
    return None


def _similar_antonym(ctx: _SimilarityContext, term: Term) -> Optional[Tuple[str, int]]:
    if ctx.query in term.lower_antonyms():
        return "antonym", SIMILAR_ANTONYM_STRENGTH
    return None


def _similar_shared(ctx: _SimilarityContext, term: Term) -> Optional[Tuple[str, int]]:
    if ctx.source is None:
        return None
    shared = shared_synonyms(ctx.source, term)
    if not shared:
        return None
    strength = SIMILAR_SHARED_BASE + min(SIMILAR_SHARED_STEP * len(shared), SIMILAR_SHARED_CAP - SIMILAR_SHARED_BASE)
    return f"shared synonym: {shared[0]}", strength


def _similar_category(ctx: _SimilarityContext, term: Term) -> Optional[Tuple[str, int]]:
    if ctx.source is not None and term.category == ctx.source.category:
        return "same category", SIMILAR_CATEGORY_STRENGTH
    return None


# First matching rule wins.
SIMILARITY_RULES: Tuple[SimilarityRule, ...] = (
    _similar_synonym,
    _similar_antonym,
    _similar_shared,
    _similar_category,
)


def find_similarities(word: str, terms: Sequence[Term]) -> List[SimilarityResult]:
    """Rank terms by heuristic relatedness to ``word``, strongest first.

    Shared-synonym and same-category signals need ``word`` to be a known term;
    otherwise only direct synonym/antonym mentions can match. Ties keep the
    input order of ``terms``.
    """
    query = normalize_query(word)
    if not query:
        return []

    ctx = _SimilarityContext(query=query, source=find_term(query, terms))
    results: List[SimilarityResult] = []

    for term in terms:
        if term.key == query:
            continue
        for rule in SIMILARITY_RULES:
            outcome = rule(ctx, term)
            if outcome is not None:
                connection, strength = outcome
                results.append(SimilarityResult(term=term, connection=connection, strength=strength))
                break

    return sorted(results, key=lambda r: -r.strength)


# -------------------- Connect mode --------------------
def find_path(word_a: str, word_b: str, graph: Mapping[str, Iterable[str]]) -> Optional[List[str]]:
    """Breadth-first shortest path between two words, or None.

    Identical words short-circuit to a one-word path even when the word is not
    in the graph. Neighbors are expanded in sorted order.
    """
    start = normalize_query(word_a)
    goal = normalize_query(word_b)

    if not start or not goal:
        return None
    if start == goal:
        return [start]
    if start not in graph or goal not in graph:
        return None

    queue = deque([[start]])
    visited = {start}

    while queue:
        path = queue.popleft()
        for neighbor in sorted(graph.get(path[-1], ())):
            if neighbor == goal:
                return path + [goal]
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(path + [neighbor])

    return None


# -------------------- Guess scoring --------------------
@dataclass
class _GuessContext:
    guess: str
    target: str
    target_term: Term
    guess_term: Optional[Term]


GuessRule = Callable[[_GuessContext], Optional[Tuple[int, Connection]]]


def _guess_in_target_synonyms(ctx: _GuessContext) -> Optional[Tuple[int, Connection]]:
    if ctx.guess in ctx.target_term.lower_synonyms():
        return GUESS_SYNONYM_SCORE, Connection("synonym", [ctx.guess, ctx.target])
    return None


def _guess_in_target_antonyms(ctx: _GuessContext) -> Optional[Tuple[int, Connection]]:
    if ctx.guess in ctx.target_term.lower_antonyms():
        return GUESS_ANTONYM_SCORE, Connection("antonym", [ctx.guess, ctx.target])
    return None


def _target_in_guess_synonyms(ctx: _GuessContext) -> Optional[Tuple[int, Connection]]:
    if ctx.guess_term is not None and ctx.target in ctx.guess_term.lower_synonyms():
        return GUESS_SYNONYM_SCORE, Connection("synonym", [ctx.guess, ctx.target])
    return None


def _target_in_guess_antonyms(ctx: _GuessContext) -> Optional[Tuple[int, Connection]]:
    if ctx.guess_term is not None and ctx.target in ctx.guess_term.lower_antonyms():
        return GUESS_ANTONYM_SCORE, Connection("antonym", [ctx.guess, ctx.target])
    return None


def _guess_shares_synonyms(ctx: _GuessContext) -> Optional[Tuple[int, Connection]]:
    if ctx.guess_term is None:
        return None
    shared = shared_synonyms(ctx.target_term, ctx.guess_term)
    if not shared:
        return None
    score = GUESS_SHARED_BASE + min(GUESS_SHARED_STEP * len(shared), GUESS_SHARED_CAP - GUESS_SHARED_BASE)
    return score, Connection("shared synonym", shared)


def _guess_same_category(ctx: _GuessContext) -> Optional[Tuple[int, Connection]]:
    if ctx.guess_term is not None and ctx.guess_term.category == ctx.target_term.category:
        return GUESS_CATEGORY_SCORE, Connection("same category", [ctx.target_term.category])
    return None


# Synonym lists are not guaranteed reciprocal, so both directions are checked.
GUESS_RULES: Tuple[GuessRule, ...] = (
    _guess_in_target_synonyms,
    _guess_in_target_antonyms,
    _target_in_guess_synonyms,
    _target_in_guess_antonyms,
    _guess_shares_synonyms,
    _guess_same_category,
)


def path_score(path_length: int) -> int:
    """Partial credit for graph distance: a direct edge (2 words) is worth the most."""
    return max(PATH_MIN_SCORE, PATH_BASE_SCORE - PATH_HOP_PENALTY * (path_length - 2))


def score_guess(guess: str, target: str, terms: Sequence[Term]) -> GuessResult:
    """Score a guess against the hidden target on a 0-100 scale.

    An unknown target returns a zero score with TARGET_MISSING_FEEDBACK
    rather than raising; callers should check for it.
    """
    guess_key = normalize_query(guess)
    target_key = normalize_query(target)

    if guess_key == target_key:
        return GuessResult(score=EXACT_SCORE, feedback=EXACT_FEEDBACK, connections=[])

    target_term = find_term(target_key, terms)
    if target_term is None:
        return GuessResult(score=0, feedback=TARGET_MISSING_FEEDBACK, connections=[])

    ctx = _GuessContext(
        guess=guess_key,
        target=target_key,
        target_term=target_term,
        guess_term=find_term(guess_key, terms),
    )

    score = 0
    connections: List[Connection] = []
    for rule in GUESS_RULES:
        outcome = rule(ctx)
        if outcome is not None:
            score, connection = outcome
            connections.append(connection)
            break

    path = find_path(guess_key, target_key, build_graph(terms))
    if path is not None and len(path) >= 2:
        connections.append(Connection("path", path))
        if score == 0:
            score = path_score(len(path))

    score = int(np.clip(score, 0, EXACT_SCORE))
    return GuessResult(score=score, feedback=feedback_for_score(score), connections=connections)


# -------------------- Challenge generation --------------------
def make_index_chooser(seed: Optional[int] = None) -> IndexChooser:
    """Uniform index picker backed by a numpy Generator."""
    rng = np.random.default_rng(seed)

    def choose(n: int) -> int:
        return int(rng.integers(n))

    return choose


def build_hints(term: Term) -> Tuple[str, ...]:
    """Four hints, from vaguest to most revealing."""
    definition_head = " ".join(term.definition.split()[:HINT_WORDS])
    return (
        f"Category: {term.category}",
        f"It has {len(term.synonyms)} known synonyms",
        f'First letter: "{term.word.strip()[0].upper()}"',
        f"Definition hint: {definition_head}...",
    )


def generate_challenge(terms: Sequence[Term], choose_index: Optional[IndexChooser] = None) -> Challenge:
    if not terms:
        raise ValueError("Cannot generate a challenge from an empty term list")

    chooser = choose_index if choose_index is not None else make_index_chooser()
    idx = chooser(len(terms))
    if not (0 <= idx < len(terms)):
        raise ValueError(f"Index chooser returned {idx}, expected 0..{len(terms) - 1}")

    target = terms[idx]
    return Challenge(target_word=target.word.strip(), hints=build_hints(target), max_guesses=MAX_GUESSES)


# -------------------- Game session --------------------
@dataclass
class GuessRecord:
    word: str
    result: GuessResult

    @property
    def score(self) -> int:
        return self.result.score


@dataclass
class GameSession:
    """Caller-owned state for a multi-round guessing game."""

    terms: Sequence[Term]
    choose_index: Optional[IndexChooser] = None
    round: int = 1
    total_score: int = 0
    challenge: Optional[Challenge] = None
    guesses: List[GuessRecord] = field(default_factory=list)
    hints_shown: int = 1
    revealed: bool = False

    def start_challenge(self) -> Challenge:
        self.challenge = generate_challenge(self.terms, self.choose_index)
        self.guesses = []
        self.hints_shown = 1
        self.revealed = False
        return self.challenge

    def next_round(self) -> Challenge:
        self.round += 1
        return self.start_challenge()

    @property
    def guesses_left(self) -> int:
        max_guesses = self.challenge.max_guesses if self.challenge else MAX_GUESSES
        return max_guesses - len(self.guesses)

    @property
    def visible_hints(self) -> Tuple[str, ...]:
        if self.challenge is None:
            return ()
        return self.challenge.hints[: self.hints_shown]

    def submit_guess(self, word: str) -> GuessRecord:
        """Score a guess; the round ends on an exact match or when guesses run out.

        Only the final guess of a round adds to ``total_score``.
        """
        if self.challenge is None:
            raise RuntimeError("No active challenge; call start_challenge() first")
        if self.revealed:
            raise RuntimeError("Round is over; start a new challenge")

        cleaned = word.strip()
        if not cleaned:
            raise ValueError("Guess must be a non-empty word")

        result = score_guess(cleaned, self.challenge.target_word, self.terms)
        record = GuessRecord(word=cleaned, result=result)
        self.guesses.append(record)

        if result.score == EXACT_SCORE or len(self.guesses) >= self.challenge.max_guesses:
            self.revealed = True
            self.total_score += result.score
        else:
            self.hints_shown = min(self.hints_shown + 1, len(self.challenge.hints))

        return record


# -------------------- Output / CLI --------------------
def format_path(path: Sequence[str]) -> str:
    steps = len(path) - 1
    return f"{' -> '.join(path)} ({steps} step{'' if steps == 1 else 's'})"


def run_define(word: str, terms: Sequence[Term]) -> None:
    term = find_term(word, terms)
    if term is None:
        print(f"'{normalize_query(word)}' is not in the dictionary ({len(terms)} terms).")
        return

    print(f"\n{term.word} [{term.category}]")
    print(f"  {term.definition}")
    if term.synonyms:
        print(f"  Synonyms: {', '.join(term.synonyms)}")
    if term.antonyms:
        print(f"  Antonyms: {', '.join(term.antonyms)}")


def run_synonyms(word: str, terms: Sequence[Term]) -> None:
    term = find_term(word, terms)
    if term is None:
        print(f"'{normalize_query(word)}' is not in the dictionary.")
        return
    if not term.synonyms:
        print(f"'{term.word}' has no synonyms listed.")
        return
    print(f"Synonyms of '{term.word}': {', '.join(term.synonyms)}")


def run_antonyms(word: str, terms: Sequence[Term]) -> None:
    term = find_term(word, terms)
    if term is None:
        print(f"'{normalize_query(word)}' is not in the dictionary.")
        return
    if not term.antonyms:
        print(f"'{term.word}' has no antonyms listed.")
        return
    print(f"Antonyms of '{term.word}': {', '.join(term.antonyms)}")


def terms_in_category(category: str, terms: Sequence[Term]) -> List[Term]:
    wanted = normalize_query(category)
    return [term for term in terms if term.category.lower() == wanted]


def run_category(category: str, terms: Sequence[Term]) -> None:
    matches = terms_in_category(category, terms)
    if not matches:
        available = list(dict.fromkeys(term.category for term in terms if term.category))
        print(f"No terms in category '{category.strip()}'. Available categories: {', '.join(available)}")
        return
    print(f"{category.strip()} terms ({len(matches)}): {', '.join(term.word for term in matches)}")


def run_similar_query(word: str, topk: int, terms: Sequence[Term]) -> None:
    query = normalize_query(word)
    if not query:
        print("Please enter a non-empty word.")
        return

    results = find_similarities(query, terms)
    if not results:
        print(f"No similar terms found for '{query}'.")
        return

    print(f"\nTop {min(topk, len(results))} terms related to '{query}':")
    for rank, item in enumerate(results[:topk], start=1):
        print(f"{rank:2d}. {item.term.word:18s} strength={item.strength:3d}  {item.connection}")


def run_connect(word_a: str, word_b: str, terms: Sequence[Term]) -> None:
    a = normalize_query(word_a)
    b = normalize_query(word_b)
    path = find_path(a, b, build_graph(terms))

    if path is None:
        has_a = find_term(a, terms) is not None
        has_b = find_term(b, terms) is not None
        if not has_a and not has_b:
            print(f"Neither '{a}' nor '{b}' is in the dictionary.")
        elif not has_a:
            print(f"'{a}' is not in the dictionary.")
        elif not has_b:
            print(f"'{b}' is not in the dictionary.")
        else:
            print(f"No thesaurus path connects '{a}' and '{b}'.")
        return
    if len(path) == 1:
        print(f"'{a}' and '{b}' are the same word.")
        return
    print(f"Connection path: {format_path(path)}")


def run_search(query: str, terms: Sequence[Term]) -> None:
    matches = search_terms(query, terms)
    print(f"\n{len(matches)} terms match '{normalize_query(query)}':")
    for term in matches:
        print(f"- {term.word:18s} [{term.category}] {term.definition}")


def print_challenge_status(session: GameSession) -> None:
    print("=" * 60)
    print(f"Round {session.round} | Total score {session.total_score} | Guesses left {session.guesses_left}")
    for hint in session.visible_hints:
        print(f"  * {hint}")
    print("=" * 60)


def print_guess_record(record: GuessRecord) -> None:
    print("-" * 60)
    print(f"{record.word}: {record.score} pts - {record.result.feedback}")
    path = record.result.path()
    if path is not None and len(path) > 1:
        print(f"  Path: {' -> '.join(path)}")
    print("-" * 60)


def run_play_mode(terms: Sequence[Term], choose_index: Optional[IndexChooser] = None) -> None:
    session = GameSession(terms=terms, choose_index=choose_index)
    session.start_challenge()

    print("\nPlay mode started.")
    print("Type a guess. Commands: hints, new, help, quit")
    print_challenge_status(session)

    while True:
        raw = input("play> ").strip()
        if not raw:
            continue

        lower = raw.lower()

        if lower in {"quit", "exit", "q"}:
            break

        if lower in {"help", "?"}:
            print("-" * 60)
            print("Commands:")
            print("- <word>        score a guess against the hidden word")
            print("- hints         show revealed hints and round status")
            print("- new           reveal the word and start the next round")
            print("- quit          exit play mode")
            print("-" * 60)
            continue

        if lower == "hints":
            print_challenge_status(session)
            continue

        if lower == "new":
            if not session.revealed and session.challenge is not None:
                print(f"The word was: {session.challenge.target_word}")
            session.next_round()
            print_challenge_status(session)
            continue

        if session.revealed:
            print("Round is over. Type 'new' for the next challenge or 'quit'.")
            continue

        try:
            record = session.submit_guess(raw)
        except ValueError as exc:
            print(str(exc))
            continue

        print_guess_record(record)

        if session.revealed:
            print(f"The word was: {session.challenge.target_word}")
            print(f"Total score: {session.total_score}. Type 'new' for the next challenge.")
        else:
            print_challenge_status(session)

    print(f"Final score after {session.round} round(s): {session.total_score}")


def run_interactive(terms: Sequence[Term], topk: int) -> None:
    print("Interactive mode. Commands: define, synonyms, antonyms, similar, connect, category, search, help, quit")
    while True:
        raw = input("> ").strip()
        if not raw:
            continue

        parts = raw.split()
        command = parts[0].lower()
        args = parts[1:]

        if command in {"quit", "exit", "q"}:
            break
        if command in {"help", "?"}:
            print("- define <word>          look up a word")
            print("- synonyms <word>        list synonyms")
            print("- antonyms <word>        list antonyms")
            print("- similar <word>         related terms ranked by strength")
            print("- connect <word> <word>  shortest thesaurus path")
            print("- category <name>        list terms in a category")
            print("- search <text>          search words, definitions, categories")
            print("- <word>                 quick lookup of a dictionary word")
            continue

        if command == "define" and len(args) == 1:
            run_define(args[0], terms)
        elif command == "synonyms" and len(args) == 1:
            run_synonyms(args[0], terms)
        elif command == "antonyms" and len(args) == 1:
            run_antonyms(args[0], terms)
        elif command == "similar" and len(args) == 1:
            run_similar_query(args[0], topk, terms)
        elif command == "connect" and len(args) == 2:
            run_connect(args[0], args[1], terms)
        elif command == "category" and args:
            run_category(" ".join(args), terms)
        elif command == "search" and args:
            run_search(" ".join(args), terms)
        elif not args and find_term(command, terms) is not None:
            run_define(command, terms)
        else:
            print("Unknown command. Type 'help' for usage.")


# -------------------- Argument parsing --------------------
def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Thesaurus helper: related words, synonym paths and a guessing game."
    )
    parser.add_argument("--terms", type=Path, help="JSON file with a list of term records.")
    parser.add_argument("--word", type=str, help="Query word for related-term suggestions.")
    parser.add_argument("--topk", type=int, default=DEFAULT_TOPK, help="How many results to return.")
    parser.add_argument("--define", type=str, help="Look up a single word.")
    parser.add_argument("--antonyms", type=str, help="List antonyms of a word.")
    parser.add_argument("--category", type=str, help="List terms in a category.")
    parser.add_argument("--search", type=str, help="Search words, definitions, categories and synonyms.")
    parser.add_argument(
        "--connect",
        nargs=2,
        metavar=("WORD_A", "WORD_B"),
        help="Shortest synonym path between two words.",
    )
    parser.add_argument(
        "--play",
        action="store_true",
        help="Interactive guessing game with progressive hints.",
    )
    parser.add_argument("--seed", type=int, help="Seed for challenge selection in play mode.")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)

    if args.topk <= 0:
        raise ValueError("--topk must be > 0")

    modes = [
        bool(args.word),
        bool(args.define),
        bool(args.antonyms),
        bool(args.category),
        args.search is not None,
        bool(args.connect),
        args.play,
    ]
    if sum(modes) > 1:
        raise ValueError("Use only one of --word, --define, --antonyms, --category, --search, --connect or --play per run")

    terms = load_terms(args.terms)

    if args.play:
        run_play_mode(terms, make_index_chooser(args.seed))
        return

    if args.word:
        run_similar_query(args.word, args.topk, terms)
        return

    if args.define:
        run_define(args.define, terms)
        return

    if args.antonyms:
        run_antonyms(args.antonyms, terms)
        return

    if args.category:
        run_category(args.category, terms)
        return

    if args.search is not None:
        run_search(args.search, terms)
        return

    if args.connect:
        run_connect(args.connect[0], args.connect[1], terms)
        return

    run_interactive(terms, args.topk)


if __name__ == "__main__":
    main()
