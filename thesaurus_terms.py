"""Bundled sample dictionary for the thesaurus helper.

Each record uses the same shape as a JSON term file passed with ``--terms``.
"""

from __future__ import annotations

from typing import Any, Dict, List

SAMPLE_TERMS: List[Dict[str, Any]] = [
    {
        "word": "joy",
        "definition": "A feeling of great pleasure and happiness that lifts the spirit.",
        "category": "emotion",
        "synonyms": ["happiness", "delight", "elation"],
        "antonyms": ["sorrow", "misery"],
    },
    {
        "word": "happiness",
        "definition": "The state of being content and pleased with one's circumstances.",
        "category": "emotion",
        "synonyms": ["joy", "contentment", "cheer"],
        "antonyms": ["sadness"],
    },
    {
        "word": "delight",
        "definition": "Great pleasure taken in something seen, heard or done.",
        "category": "emotion",
        "synonyms": ["joy", "pleasure"],
        "antonyms": ["displeasure"],
    },
    {
        "word": "sadness",
        "definition": "The condition of feeling unhappy or sorrowful about a loss.",
        "category": "emotion",
        "synonyms": ["sorrow", "grief", "melancholy"],
        "antonyms": ["happiness", "joy"],
    },
    {
        "word": "grief",
        "definition": "Deep sorrow caused by loss, especially the death of someone.",
        "category": "emotion",
        "synonyms": ["sorrow", "sadness", "anguish"],
        "antonyms": ["comfort"],
    },
    {
        "word": "anger",
        "definition": "A strong feeling of displeasure aroused by a perceived wrong.",
        "category": "emotion",
        "synonyms": ["rage", "fury", "wrath"],
        "antonyms": ["calm"],
    },
    {
        "word": "calm",
        "definition": "Free from agitation, excitement or any strong disturbance.",
        "category": "state",
        "synonyms": ["serene", "tranquil", "peaceful"],
        "antonyms": ["anger", "agitated"],
    },
    {
        "word": "serene",
        "definition": "Untroubled and quietly composed, like a still lake at dawn.",
        "category": "state",
        "synonyms": ["calm", "tranquil", "placid"],
        "antonyms": ["turbulent"],
    },
    {
        "word": "idea",
        "definition": "A thought or suggestion about a possible course of action.",
        "category": "concept",
        "synonyms": ["notion", "concept", "thought"],
        "antonyms": [],
    },
    {
        "word": "concept",
        "definition": "An abstract idea formed by generalising from particular instances.",
        "category": "concept",
        "synonyms": ["idea", "notion", "theory"],
        "antonyms": [],
    },
    {
        "word": "theory",
        "definition": "A system of ideas intended to explain something observed.",
        "category": "concept",
        "synonyms": ["hypothesis", "concept", "model"],
        "antonyms": ["practice", "fact"],
    },
    {
        "word": "hypothesis",
        "definition": "A proposed explanation made as a starting point for investigation.",
        "category": "concept",
        "synonyms": ["theory", "premise", "guess"],
        "antonyms": [],
    },
    {
        "word": "fast",
        "definition": "Moving or capable of moving at high speed over a distance.",
        "category": "quality",
        "synonyms": ["quick", "rapid", "swift"],
        "antonyms": ["slow"],
    },
    {
        "word": "quick",
        "definition": "Done with speed or taking only a short time to finish.",
        "category": "quality",
        "synonyms": ["fast", "rapid", "brisk"],
        "antonyms": ["slow", "sluggish"],
    },
    {
        "word": "slow",
        "definition": "Moving or operating at a low speed and taking a long time.",
        "category": "quality",
        "synonyms": ["sluggish", "leisurely", "unhurried"],
        "antonyms": ["fast", "quick"],
    },
    {
        "word": "build",
        "definition": "Construct something by putting parts or material together over time.",
        "category": "action",
        "synonyms": ["construct", "assemble", "create"],
        "antonyms": ["destroy", "demolish"],
    },
    {
        "word": "create",
        "definition": "Bring something into existence that did not exist before.",
        "category": "action",
        "synonyms": ["make", "build", "generate"],
        "antonyms": ["destroy"],
    },
    {
        "word": "destroy",
        "definition": "End the existence of something by damaging or attacking it.",
        "category": "action",
        "synonyms": ["demolish", "wreck", "ruin"],
        "antonyms": ["build", "create"],
    },
    {
        "word": "connect",
        "definition": "Bring together or into contact so that a real link is established.",
        "category": "action",
        "synonyms": ["link", "join", "attach"],
        "antonyms": ["separate", "disconnect"],
    },
    {
        "word": "link",
        "definition": "A relationship or connection between two things or situations.",
        "category": "concept",
        "synonyms": ["connection", "bond", "connect"],
        "antonyms": [],
    },
]
