# dimensions.py
# The six fixed "Three Whys" dimensions and the 1-5 maturity scale.

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Tuple

Level = Literal["None", "Emerging", "Basic", "Advanced", "Leading"]


@dataclass(frozen=True)
class Dimension:
    key: str    # answer key in the payload (q1..q6)
    name: str


WHY_CHANGE = Dimension("q1", "Why change")
WHY_NOW = Dimension("q2", "Why now")
WHY_YOUR_COMPANY = Dimension("q3", "Why your company")
EMOTION_LOGIC = Dimension("q4", "Emotion–Logic")
BUYER_AS_HERO = Dimension("q5", "Buyer-as-hero")
CLARITY = Dimension("q6", "Clarity")

# Report order.
DIMENSIONS: Tuple[Dimension, ...] = (
    WHY_CHANGE,
    WHY_NOW,
    WHY_YOUR_COMPANY,
    EMOTION_LOGIC,
    BUYER_AS_HERO,
    CLARITY,
)

ANSWER_KEYS: Tuple[str, ...] = tuple(d.key for d in DIMENSIONS)

# Lowest to highest.
LEVELS: Tuple[Level, ...] = ("None", "Emerging", "Basic", "Advanced", "Leading")

LEVEL_SCORES: Dict[str, int] = {
    "None": 1,
    "Emerging": 2,
    "Basic": 3,
    "Advanced": 4,
    "Leading": 5,
}

MIN_SCORE = LEVEL_SCORES["None"]
MAX_SCORE = LEVEL_SCORES["Leading"]


def level_for_score(score: int) -> Level:
    for level, value in LEVEL_SCORES.items():
        if value == score:
            return level
    raise ValueError(f"score out of range: {score!r}")
