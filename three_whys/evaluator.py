# evaluator.py
# Remote model path: prompt in, report JSON out, or None.
#
# Every failure mode (no key, breaker open, transport error, non-2xx,
# unparsable or off-contract output) returns None so the caller falls back
# to the deterministic scorer.

from __future__ import annotations

import json
import logging
import re
import threading
import time
from typing import Any, Callable, Dict, List, Mapping, Optional

import requests

from .banding import average_score, band_for_average, executive_summary
from .coaching import build_coaching
from .config import get_config
from .dimensions import DIMENSIONS, MAX_SCORE, MIN_SCORE, level_for_score
from .narratives import select_narrative
from .report import SCORER_VERSION, normalize_profile

log = logging.getLogger("evaluator")

SYSTEM_PROMPT = (
    "You are a strict B2B go-to-market messaging evaluator. Score six dimensions in this "
    "order: Why change, Why now, Why your company, Emotion-Logic, Buyer-as-hero, Clarity. "
    "Use the scale 1=None, 2=Emerging, 3=Basic, 4=Advanced, 5=Leading. "
    "Output ONLY valid JSON with keys: summary (string), dimensions (array of six objects "
    "with name, score, level, rationale, advancement), coaching (object with guidance, "
    "headline, urgency, differentiators, valueOutline, valueProposition, nextActions). "
    "Tailor coaching to the respondent's role. Do not fabricate external facts."
)

FENCE_RE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL | re.IGNORECASE)
NAME_RE = re.compile(r"[^a-z0-9]")

# Same bounds as the band-keyed lists in coaching.NEXT_ACTIONS.
MIN_NEXT_ACTIONS, MAX_NEXT_ACTIONS = 3, 5


class ModelError(Exception):
    """Remote call failed or returned nothing usable."""


class CircuitOpen(ModelError):
    pass


# ══════════════ CIRCUIT BREAKER ══════════════
class CircuitBreaker:
    def __init__(self, name: str, threshold: int = 3, timeout: float = 60,
                 clock: Callable[[], float] = time.time) -> None:
        self.name, self.threshold, self.timeout = name, threshold, timeout
        self.failures, self.state, self.last_fail = 0, "closed", 0.0
        self._clock = clock
        self._lock = threading.Lock()

    def call(self, func: Callable[..., Any], *a: Any, **kw: Any) -> Any:
        with self._lock:
            if self.state == "open":
                if self._clock() - self.last_fail > self.timeout:
                    self.state = "half-open"
                else:
                    raise CircuitOpen(f"Circuit '{self.name}' OPEN")
        try:
            r = func(*a, **kw)
        except Exception:
            with self._lock:
                self.failures += 1
                self.last_fail = self._clock()
                if self.state == "half-open" or self.failures >= self.threshold:
                    self.state = "open"
            raise
        with self._lock:
            self.state, self.failures = "closed", 0
        return r


_breaker: Optional[CircuitBreaker] = None
_breaker_lock = threading.Lock()


def get_breaker(config: Optional[Dict[str, Any]] = None) -> CircuitBreaker:
    global _breaker
    with _breaker_lock:
        if _breaker is None:
            config = config or get_config()
            _breaker = CircuitBreaker("model", config["BREAKER_THRESHOLD"], config["BREAKER_RESET_SECONDS"])
        return _breaker


def reset_breaker() -> None:
    global _breaker
    with _breaker_lock:
        _breaker = None


# ══════════════ REMOTE CALL ══════════════
def build_messages(profile: Mapping[str, Any], answers: Mapping[str, Any],
                   attachments: Optional[Mapping[str, Any]] = None) -> List[Dict[str, str]]:
    user = {"profile": dict(profile), "answers": dict(answers)}
    if attachments:
        user["attachments"] = {
            key: {"name": str(a.get("name", "")), "content": str(a.get("content", ""))}
            for key, a in attachments.items() if isinstance(a, Mapping)
        }
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": json.dumps(user, ensure_ascii=False)},
    ]


def extract_text(data: Any) -> str:
    """Pull the completion text out of a responses-style or chat-style payload."""
    if not isinstance(data, dict):
        return ""
    if isinstance(data.get("output_text"), str):
        return data["output_text"]
    if isinstance(data.get("output"), list):
        parts = []
        for item in data["output"]:
            content = item.get("content") if isinstance(item, dict) else None
            if isinstance(content, list) and content and isinstance(content[0], dict):
                parts.append(str(content[0].get("text") or ""))
        return "\n".join(parts)
    choices = data.get("choices")
    if isinstance(choices, list) and choices and isinstance(choices[0], dict):
        message = choices[0].get("message") or {}
        return str(message.get("content") or "")
    return ""


def is_responses_api(url: str) -> bool:
    return url.rstrip("/").endswith("/responses")


def build_request_body(config: Dict[str, Any], messages: List[Dict[str, str]]) -> Dict[str, Any]:
    """Responses API takes `input`; chat completions takes `messages`."""
    if is_responses_api(config["MODEL_URL"]):
        return {
            "model": config["MODEL"],
            "input": messages,
            "temperature": 0.2,
            "text": {"format": {"type": "json_object"}},
        }
    return {
        "model": config["MODEL"],
        "messages": messages,
        "temperature": 0.2,
        "response_format": {"type": "json_object"},
    }


def call_model(config: Dict[str, Any], messages: List[Dict[str, str]]) -> str:
    headers = {
        "Authorization": f"Bearer {config['OPENAI_API_KEY']}",
        "Content-Type": "application/json",
    }
    body = build_request_body(config, messages)
    try:
        resp = requests.post(config["MODEL_URL"], headers=headers, json=body,
                             timeout=config["MODEL_TIMEOUT"])
    except requests.RequestException as e:
        raise ModelError(f"transport: {e}") from e

    if not resp.ok:
        raise ModelError(f"HTTP {resp.status_code}: {resp.text[:200]}")
    try:
        data = resp.json()
    except ValueError as e:
        raise ModelError("response body is not JSON") from e

    text = extract_text(data).strip()
    if not text:
        raise ModelError("empty completion")
    return text


# ══════════════ OUTPUT CONTRACT ══════════════
def parse_model_json(text: str) -> Optional[Dict[str, Any]]:
    text = (text or "").strip()
    m = FENCE_RE.match(text)
    if m:
        text = m.group(1)
    try:
        data = json.loads(text)
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


def _valid_score(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and MIN_SCORE <= value <= MAX_SCORE


def _text_or(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def _name_key(name: Any) -> str:
    return NAME_RE.sub("", str(name or "").lower())


def _align_dimensions(raw_dims: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Order model dimensions by name when all six are named, else by position."""
    by_name = {_name_key(d.get("name")): d for d in raw_dims}
    wanted = [_name_key(dim.name) for dim in DIMENSIONS]
    if all(k in by_name for k in wanted):
        return [by_name[k] for k in wanted]
    return raw_dims


def _next_actions_or(value: Any, default: List[str]) -> List[str]:
    if not isinstance(value, list):
        return default
    actions = [a.strip() for a in value if isinstance(a, str) and a.strip()]
    if MIN_NEXT_ACTIONS <= len(actions) <= MAX_NEXT_ACTIONS:
        return actions
    return default


def conform_model_report(data: Dict[str, Any], profile: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
    """
    Coerce model output onto the report contract, or None if it cannot be.
    Scores are taken from the model; level, average and band are re-derived
    from them so both paths share one scale and one set of breakpoints.
    """
    raw_dims = data.get("dimensions")
    if not isinstance(raw_dims, list) or len(raw_dims) != len(DIMENSIONS):
        return None
    if not all(isinstance(d, dict) and _valid_score(d.get("score")) for d in raw_dims):
        return None

    dimensions = []
    for dim, raw in zip(DIMENSIONS, _align_dimensions(raw_dims)):
        score = raw["score"]
        level = level_for_score(score)
        rationale, advancement = select_narrative(dim.name, level)
        dimensions.append({
            "key": dim.key,
            "name": dim.name,
            "score": score,
            "level": level,
            "rationale": _text_or(raw.get("rationale"), rationale),
            "advancement": _text_or(raw.get("advancement"), advancement),
        })

    echo = normalize_profile(profile)
    average = average_score(d["score"] for d in dimensions)
    band = band_for_average(average)

    coaching = build_coaching(echo["role"], band)
    raw_coaching = data.get("coaching")
    if isinstance(raw_coaching, dict):
        for field in ("guidance", "headline", "urgency", "differentiators", "valueOutline", "valueProposition"):
            coaching[field] = _text_or(raw_coaching.get(field), coaching[field])
        coaching["nextActions"] = _next_actions_or(raw_coaching.get("nextActions"), coaching["nextActions"])

    return {
        "profile": echo,
        "average": average,
        "band": band,
        "summary": _text_or(data.get("summary"), executive_summary(band)),
        "dimensions": dimensions,
        "coaching": coaching,
        "engine": "model",
        "version": SCORER_VERSION,
    }


def evaluate_with_model(
    profile: Mapping[str, Any],
    answers: Mapping[str, Any],
    attachments: Optional[Mapping[str, Any]] = None,
    config: Optional[Dict[str, Any]] = None,
) -> Optional[Dict[str, Any]]:
    """Return a model-produced report, or None when the fallback should run."""
    config = config or get_config()
    if not config["MODEL_SCORING_ENABLED"] or not config["OPENAI_API_KEY"]:
        log.debug("model scoring skipped: not configured")
        return None

    messages = build_messages(profile, answers, attachments)
    try:
        text = get_breaker(config).call(call_model, config, messages)
    except CircuitOpen as e:
        log.info(f"model scoring skipped: {e}")
        return None
    except ModelError as e:
        log.warning(f"model call failed: {e}")
        return None

    data = parse_model_json(text)
    if data is None:
        log.warning("model output was not a JSON object")
        return None

    report = conform_model_report(data, profile)
    if report is None:
        log.warning("model output failed report validation")
    return report
