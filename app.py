import os
import json
import time
import uuid
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from flask import Flask, request, jsonify
from flask_cors import CORS
from werkzeug.exceptions import MethodNotAllowed

from observability import init_observability, evaluation_span, report_exception
from three_whys import (
    SCORER_VERSION,
    TraceLogger,
    build_report,
    evaluate_with_model,
    get_config,
)

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"), format="%(asctime)s %(name)s %(message)s")
log = logging.getLogger("three-whys")

app = Flask(__name__)

# ============================================================
# THREE WHYS EVALUATOR
#
# One POST endpoint. Tries the remote model when a key is configured,
# otherwise (or on any model failure) scores with the deterministic
# fallback. The fallback needs no network and never fails on valid input.
# ============================================================
CORS(app, resources={
    r"/api/*": {"origins": get_config()["CORS_ORIGINS"].split(",")},
    r"/evaluate": {"origins": get_config()["CORS_ORIGINS"].split(",")},
})
init_observability(app)


# ==========================
# TELEMETRY
# ==========================
def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def log_json_line(event: str, payload: Dict[str, Any]) -> None:
    record = {"event": event, "ts": utc_now_iso(), **payload}
    log.info(json.dumps(record, ensure_ascii=False))


def record_trace(config: Dict[str, Any], payload: Dict[str, Any]) -> None:
    if not config["TRACE_ENABLED"]:
        return
    if not TraceLogger(config["TRACE_DIR"]).write(payload):
        log.warning(f"trace write failed: {config['TRACE_DIR']}")


# ==========================
# VALIDATION
# ==========================
def validate_payload(payload: Any) -> Optional[str]:
    """Return an error message, or None if the payload can be scored."""
    if not isinstance(payload, dict):
        return "Request body must be a JSON object"
    if payload.get("profile") is None:
        return "Missing 'profile' field in request body"
    if payload.get("answers") is None:
        return "Missing 'answers' field in request body"
    if not isinstance(payload["profile"], dict):
        return "'profile' must be an object"
    if not isinstance(payload["answers"], dict):
        return "'answers' must be an object mapping q1..q6 to text"
    attachments = payload.get("attachments")
    if attachments is not None and not isinstance(attachments, dict):
        return "'attachments' must be an object"
    return None


# ==========================
# ERRORS
# ==========================
@app.errorhandler(MethodNotAllowed)
def method_not_allowed(e):
    allowed = [m for m in (e.valid_methods or []) if m not in ("HEAD", "OPTIONS")]
    resp = jsonify({"error": "Method not allowed", "allowed": allowed})
    resp.status_code = 405
    resp.headers["Allow"] = ", ".join(allowed)
    return resp


# ==========================
# ROUTES
# ==========================
@app.route("/health")
def health():
    return jsonify({"status": "ok", "version": SCORER_VERSION})


@app.route("/api/evaluate", methods=["POST"])
@app.route("/evaluate", methods=["POST"])
def evaluate():
    request_id = str(uuid.uuid4())
    t0 = time.time()
    config = get_config()

    try:
        payload = json.loads(request.get_data(as_text=True))
    except ValueError:
        log.warning(f"malformed JSON body request_id={request_id}")
        return jsonify({"error": "Malformed JSON body", "request_id": request_id}), 500

    error = validate_payload(payload)
    if error:
        return jsonify({"error": error, "request_id": request_id}), 400

    profile = payload["profile"]
    answers = payload["answers"]
    attachments = payload.get("attachments") or {}

    try:
        with evaluation_span(request_id) as span:
            report = None
            try:
                report = evaluate_with_model(profile, answers, attachments, config=config)
            except Exception as e:
                # Model path must never take the endpoint down.
                log.exception(f"model path crashed request_id={request_id}")
                report_exception(e)

            if report is None:
                report = build_report(profile, answers)

            span.set_attribute("engine", report["engine"])
            span.set_attribute("band", report["band"])
    except Exception as e:
        log.exception(f"evaluation failed request_id={request_id}")
        report_exception(e)
        return jsonify({"error": "Internal error", "request_id": request_id}), 500

    latency_ms = int((time.time() - t0) * 1000)
    summary = {
        "request_id": request_id,
        "engine": report["engine"],
        "band": report["band"],
        "average": report["average"],
        "attachments": len(attachments),
        "latency_ms": latency_ms,
    }
    log_json_line("evaluate", summary)
    record_trace(config, summary)

    return jsonify(report)


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "10000")), debug=False)
