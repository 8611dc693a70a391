import json
import os
from datetime import datetime, timezone
from typing import Any, Dict

DEFAULT_LOG_FILE = "evaluations.jsonl"


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class TraceLogger:
    """
    Appends one JSON object per evaluation to a JSONL file.
    Fail-safe: a write error never interrupts a request.
    """
    def __init__(self, log_dir: str, filename: str = DEFAULT_LOG_FILE) -> None:
        self.log_dir = log_dir
        self.filename = filename
        self.path = os.path.join(self.log_dir, self.filename)

    def write(self, trace_obj: Dict[str, Any]) -> bool:
        record = {"ts": utc_now_iso(), **trace_obj}
        try:
            os.makedirs(self.log_dir, exist_ok=True)
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(json.dumps(record, ensure_ascii=False) + "\n")
        except OSError:
            return False
        return True
