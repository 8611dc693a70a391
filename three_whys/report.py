"""
Fallback Scorer: builds the full Three Whys report without any network call.

Pure composition of the classifier, narrative tables, banding and role
coaching, in fixed dimension order. Identical input gives identical output.

Run offline against a saved payload:
  python -m three_whys.report payload.json
  python -m three_whys.report payload.json --indent 2
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, List, Mapping, Optional

from .banding import average_score, band_for_average, executive_summary
from .classifier import as_text, classify_answer
from .coaching import build_coaching
from .dimensions import DIMENSIONS, Dimension
from .narratives import select_narrative

SCORER_VERSION = "three-whys-v1.0"

PROFILE_FIELDS = ("name", "role", "email", "organization")


def normalize_profile(profile: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    if not isinstance(profile, Mapping):
        profile = {}
    return {field: as_text(profile.get(field)).strip() for field in PROFILE_FIELDS}


def score_dimension(dimension: Dimension, answer: Any) -> Dict[str, Any]:
    score, level = classify_answer(answer)
    rationale, advancement = select_narrative(dimension.name, level)
    return {
        "key": dimension.key,
        "name": dimension.name,
        "score": score,
        "level": level,
        "rationale": rationale,
        "advancement": advancement,
    }


def score_dimensions(answers: Optional[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    if not isinstance(answers, Mapping):
        answers = {}
    return [score_dimension(d, answers.get(d.key)) for d in DIMENSIONS]


def build_report(
    profile: Optional[Mapping[str, Any]],
    answers: Optional[Mapping[str, Any]],
) -> Dict[str, Any]:
    """Score a profile + answer set. Never raises; non-mapping input counts as empty."""
    echo = normalize_profile(profile)
    dimensions = score_dimensions(answers)
    average = average_score(d["score"] for d in dimensions)
    band = band_for_average(average)

    return {
        "profile": echo,
        "average": average,
        "band": band,
        "summary": executive_summary(band),
        "dimensions": dimensions,
        "coaching": build_coaching(echo["role"], band),
        "engine": "fallback",
        "version": SCORER_VERSION,
    }


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Three Whys fallback scorer (offline)")
    p.add_argument("payload", help="JSON file with profile and answers, or - for stdin")
    p.add_argument("--indent", type=int, default=None)
    a = p.parse_args(argv)

    if a.payload == "-":
        payload = json.load(sys.stdin)
    else:
        with open(a.payload, "r", encoding="utf-8") as f:
            payload = json.load(f)

    if not isinstance(payload, dict):
        p.error("payload must be a JSON object")

    report = build_report(payload.get("profile"), payload.get("answers"))
    print(json.dumps(report, ensure_ascii=False, indent=a.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
