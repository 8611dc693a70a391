# banding.py
# Aggregate score and band classification (1-5 scale).

from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from .dimensions import Level

# (exclusive upper bound on average, band). Anything >= the last bound is Leading.
BAND_BREAKPOINTS: List[Tuple[float, Level]] = [
    (2.0, "None"),
    (3.0, "Emerging"),
    (4.0, "Basic"),
    (5.0, "Advanced"),
]
TOP_BAND: Level = "Leading"

EXECUTIVE_SUMMARIES: Dict[str, str] = {
    "None": (
        "Your messaging foundations are not yet in place. Most dimensions of the Three Whys "
        "are missing or unanswered, which means buyers are left to work out for themselves "
        "why they should change, why now and why you. Start by writing a plain statement of "
        "the problem you solve and the buyer who feels it most, then build each dimension "
        "from there."
    ),
    "Emerging": (
        "Your messaging shows early signs of a point of view, but it is thin and uneven. "
        "Some reasons to change and some differentiators are present, yet they read as "
        "generic claims rather than a buyer-centred argument. Focus on making the case for "
        "change specific and quantified, and give buyers a concrete reason to act this "
        "quarter."
    ),
    "Basic": (
        "Your messaging covers the essentials of the Three Whys. Buyers can follow why the "
        "status quo is a problem and what you offer, but the story relies on familiar pain "
        "points and feature-led differentiation. The next gains come from reframing the "
        "buyer's problem, proving urgency and putting the buyer at the centre of the story."
    ),
    "Advanced": (
        "Your messaging is strong and largely buyer-centred. The case for change, timing "
        "and differentiation are supported with evidence, and emotion and logic work "
        "together. To lead your category, sharpen consistency across teams, equip champions "
        "to sell internally and keep proof points current."
    ),
    "Leading": (
        "Your messaging is a competitive asset. Every dimension of the Three Whys is "
        "specific, evidenced and told from the buyer's point of view, giving sales and "
        "marketing a shared, repeatable narrative. Protect this position by governing "
        "consistency and refreshing proof as markets and competitors move."
    ),
}


def average_score(scores: Iterable[int]) -> float:
    values = list(scores)
    if not values:
        return 0.0
    return round(sum(values) / len(values), 1)


def band_for_average(average: float) -> Level:
    for upper, band in BAND_BREAKPOINTS:
        if average < upper:
            return band
    return TOP_BAND


def executive_summary(band: str) -> str:
    return EXECUTIVE_SUMMARIES.get(band, "")
