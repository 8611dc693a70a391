import os


def _env_bool(name: str, default: bool) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    try:
        return int(val)
    except ValueError:
        return default


def get_config() -> dict:
    """
    Runtime settings, read from the environment on every call.
    An empty OPENAI_API_KEY means the model path is skipped.
    """
    return {
        "OPENAI_API_KEY": os.getenv("OPENAI_API_KEY", "").strip(),
        "MODEL": os.getenv("THREE_WHYS_MODEL", "gpt-4.1-mini"),
        "MODEL_URL": os.getenv("THREE_WHYS_MODEL_URL", "https://api.openai.com/v1/chat/completions"),
        "MODEL_TIMEOUT": _env_int("THREE_WHYS_MODEL_TIMEOUT", 30),
        "MODEL_SCORING_ENABLED": _env_bool("MODEL_SCORING_ENABLED", True),
        "TRACE_ENABLED": _env_bool("TRACE_ENABLED", False),
        "TRACE_DIR": os.getenv("TRACE_DIR", os.path.join(os.getcwd(), "logs")),
        "BREAKER_THRESHOLD": _env_int("BREAKER_THRESHOLD", 3),
        "BREAKER_RESET_SECONDS": _env_int("BREAKER_RESET_SECONDS", 60),
        "CORS_ORIGINS": os.getenv("CORS_ORIGINS", "*"),
    }
