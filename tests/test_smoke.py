"""
tests/test_smoke.py — HTTP smoke tests for the Three Whys evaluator
====================================================================
Runs on every PR. Must all pass before merge.

Tests:
  - Health endpoint returns valid JSON
  - Method, validation and malformed-body errors return JSON with the right status
  - Blank submissions score at the floor and still carry coaching
  - Missing API key routes silently to the fallback scorer
"""

import os
import sys
import json
import pytest

os.environ["TESTING"] = "1"
os.environ.pop("OPENAI_API_KEY", None)
os.environ.pop("SENTRY_DSN", None)

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import app
from three_whys.dimensions import ANSWER_KEYS
from three_whys.evaluator import reset_breaker

BLANK_ANSWERS = {key: "" for key in ANSWER_KEYS}


@pytest.fixture(autouse=True)
def _no_model(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.setenv("TRACE_ENABLED", "0")
    reset_breaker()
    yield
    reset_breaker()


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


# ═══════════════════════════════════════════
# ROUTE HEALTH
# ═══════════════════════════════════════════

def test_health_json(client):
    """Health endpoint returns valid JSON with status ok."""
    r = client.get("/health")
    data = r.get_json()
    assert r.status_code == 200
    assert data["status"] == "ok"
    assert "version" in data


def test_timing_headers(client):
    r = client.get("/health")
    assert "X-Response-Time-Ms" in r.headers
    assert r.headers.get("X-Trace-Id")


# ═══════════════════════════════════════════
# METHOD / VALIDATION ERRORS
# ═══════════════════════════════════════════

@pytest.mark.parametrize("path", ["/api/evaluate", "/evaluate"])
def test_get_is_405_with_allow_header(client, path):
    r = client.get(path)
    assert r.status_code == 405
    assert r.headers["Allow"] == "POST"
    assert r.get_json()["error"]


@pytest.mark.parametrize("method", ["put", "delete", "patch"])
def test_other_methods_are_405(client, method):
    r = getattr(client, method)("/api/evaluate", json={})
    assert r.status_code == 405
    assert "POST" in r.headers["Allow"]


def test_missing_answers_is_400(client):
    r = client.post("/api/evaluate", json={"profile": {}})
    assert r.status_code == 400
    assert "answers" in r.get_json()["error"]


def test_missing_profile_is_400(client):
    r = client.post("/api/evaluate", json={"answers": BLANK_ANSWERS})
    assert r.status_code == 400
    assert "profile" in r.get_json()["error"]


def test_non_object_body_is_400(client):
    r = client.post("/api/evaluate", json=["profile", "answers"])
    assert r.status_code == 400


def test_answers_must_be_object(client):
    r = client.post("/api/evaluate", json={"profile": {}, "answers": "all of them"})
    assert r.status_code == 400


def test_attachments_must_be_object(client):
    r = client.post("/api/evaluate", json={"profile": {}, "answers": BLANK_ANSWERS, "attachments": "deck.pdf"})
    assert r.status_code == 400


def test_malformed_json_is_500(client):
    r = client.post("/api/evaluate", data="{not json", content_type="application/json")
    assert r.status_code == 500
    assert r.get_json()["error"] == "Malformed JSON body"


# ═══════════════════════════════════════════
# FALLBACK SCORING END-TO-END
# ═══════════════════════════════════════════

def test_blank_submission_scores_at_floor(client):
    r = client.post("/api/evaluate", json={"profile": {}, "answers": BLANK_ANSWERS})
    assert r.status_code == 200
    assert r.headers["Content-Type"].startswith("application/json")
    data = r.get_json()
    assert data["band"] == "None"
    assert data["average"] == 1.0
    assert len(data["dimensions"]) == 6
    assert all(d["score"] == 1 for d in data["dimensions"])
    assert all(d["level"] == "None" for d in data["dimensions"])
    assert data["coaching"]["nextActions"]
    assert data["engine"] == "fallback"


def test_profile_is_echoed(client):
    profile = {"name": "Sam Lee", "role": "VP of Sales", "email": "sam@example.com", "organization": "Acme"}
    r = client.post("/api/evaluate", json={"profile": profile, "answers": BLANK_ANSWERS})
    data = r.get_json()
    assert data["profile"] == profile
    assert data["coaching"]["role"] == "sales"


def test_missing_answer_keys_are_blank(client):
    r = client.post("/api/evaluate", json={"profile": {"role": None}, "answers": {"q1": "We cut onboarding time in half."}})
    assert r.status_code == 200
    data = r.get_json()
    assert [d["key"] for d in data["dimensions"]] == ["q1", "q2", "q3", "q4", "q5", "q6"]
    assert data["dimensions"][0]["level"] == "Emerging"
    assert all(d["level"] == "None" for d in data["dimensions"][1:])


def test_attachments_accepted(client):
    r = client.post("/api/evaluate", json={
        "profile": {},
        "answers": BLANK_ANSWERS,
        "attachments": {"deck": {"name": "pitch.txt", "content": "Our pitch."}},
    })
    assert r.status_code == 200


def test_no_api_key_never_calls_model(client, monkeypatch):
    import three_whys.evaluator as evaluator

    def _boom(*a, **kw):
        raise AssertionError("network call without a key")

    monkeypatch.setattr(evaluator.requests, "post", _boom)
    r = client.post("/api/evaluate", json={"profile": {}, "answers": BLANK_ANSWERS})
    assert r.status_code == 200
    assert r.get_json()["engine"] == "fallback"


def test_same_input_same_bytes(client):
    body = {"profile": {"role": "CMO"}, "answers": {"q1": "Buyers lose deals to inertia.", "q6": "idk"}}
    a = client.post("/api/evaluate", json=body).get_json()
    b = client.post("/api/evaluate", json=body).get_json()
    assert json.dumps(a, sort_keys=True) == json.dumps(b, sort_keys=True)


def test_trace_file_written(client, monkeypatch, tmp_path):
    monkeypatch.setenv("TRACE_ENABLED", "1")
    monkeypatch.setenv("TRACE_DIR", str(tmp_path))
    client.post("/api/evaluate", json={"profile": {}, "answers": BLANK_ANSWERS})
    lines = (tmp_path / "evaluations.jsonl").read_text().splitlines()
    assert len(lines) == 1
    record = json.loads(lines[0])
    assert record["engine"] == "fallback"
    assert record["band"] == "None"
