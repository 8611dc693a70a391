# classifier.py
# Deterministic answer classifier: free text -> (score, level).
#
# Unknown answers (blank, or an exact "I don't know" style phrase) always land
# on the lowest level. Everything else is banded by word count.

from __future__ import annotations

import re
from typing import Any, List, Tuple

from .dimensions import LEVEL_SCORES, Level

NON_ALNUM_RE = re.compile(r"[^a-z0-9\s]")
SPACE_RE = re.compile(r"\s+")

# Compared after normalize_answer(), so "I don't know." -> "i dont know"
# and "N/A" -> "na".
UNKNOWN_PHRASES = frozenset({
    "i dont know",
    "i do not know",
    "dont know",
    "do not know",
    "idk",
    "unknown",
    "none",
    "na",
    "n a",
    "not applicable",
    "not sure",
    "im not sure",
    "unsure",
    "missing",
    "no data",
    "no idea",
    "no answer",
    "nothing",
    "tbd",
    "tba",
    "pass",
    "skip",
    "",
})

# (exclusive upper bound on word count, level). Boundaries belong to the higher band.
WORD_COUNT_BANDS: List[Tuple[int, Level]] = [
    (15, "Emerging"),
    (40, "Basic"),
    (80, "Advanced"),
]
TOP_LEVEL: Level = "Leading"


def as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def normalize_answer(answer: str) -> str:
    lowered = (answer or "").strip().lower()
    stripped = NON_ALNUM_RE.sub("", lowered)
    return SPACE_RE.sub(" ", stripped).strip()


def is_unknown(answer: str) -> bool:
    return normalize_answer(answer) in UNKNOWN_PHRASES


def word_count(answer: str) -> int:
    return len((answer or "").split())


def level_for_word_count(count: int) -> Level:
    for upper, level in WORD_COUNT_BANDS:
        if count < upper:
            return level
    return TOP_LEVEL


def classify_answer(answer: Any) -> Tuple[int, Level]:
    """Map one raw answer to (score, level). Never raises."""
    text = as_text(answer).strip()
    if is_unknown(text):
        return LEVEL_SCORES["None"], "None"
    level = level_for_word_count(word_count(text))
    return LEVEL_SCORES[level], level
