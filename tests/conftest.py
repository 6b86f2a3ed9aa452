from __future__ import annotations

import sys
from pathlib import Path
from typing import List

import pytest

# Make modules importable when running tests from the repo root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from thesaurus_helper import Term  # noqa: E402


@pytest.fixture
def emotion_terms() -> List[Term]:
    return [
        Term(
            word="joy",
            definition="A feeling of great pleasure and happiness",
            category="emotion",
            synonyms=("happiness",),
            antonyms=("sorrow",),
        ),
        Term(
            word="happiness",
            definition="The state of being content",
            category="emotion",
            synonyms=("joy",),
        ),
    ]


@pytest.fixture
def chain_terms() -> List[Term]:
    # a - b - c with no shared synonyms between a and c
    return [
        Term(word="a", category="x", synonyms=("b",)),
        Term(word="b", category="y", synonyms=("c",)),
        Term(word="c", category="z"),
    ]
