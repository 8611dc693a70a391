# Deterministic fallback scorer
from .dimensions import DIMENSIONS, LEVELS, LEVEL_SCORES, Dimension, level_for_score
from .classifier import classify_answer, is_unknown, normalize_answer
from .narratives import NARRATIVES, select_narrative
from .banding import average_score, band_for_average, executive_summary
from .coaching import build_coaching, next_actions, role_guidance, role_key
from .report import SCORER_VERSION, build_report, normalize_profile

# Remote model path
from .evaluator import CircuitBreaker, evaluate_with_model

from .config import get_config
from .trace import TraceLogger
