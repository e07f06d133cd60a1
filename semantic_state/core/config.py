"""
Runtime configuration for the semantic state engine and its HTTP host.
Values are read from the environment once at import; getters keep call sites patchable.
"""

import math
import os
from typing import Any, Dict, List

from dotenv import load_dotenv

load_dotenv()

# Engine parameters
SSE_ALPHA = float(os.getenv("SSE_ALPHA", "0.3"))  # EMA weight of the newest embedding
SSE_DRIFT_THRESHOLD = float(os.getenv("SSE_DRIFT_THRESHOLD", "0.7"))  # cosine similarity below this is drift

# Health policy knobs
SSE_AGE_DECAY_RATE = float(os.getenv("SSE_AGE_DECAY_RATE", "0.0001"))  # per millisecond
SSE_DRIFT_WEIGHT = float(os.getenv("SSE_DRIFT_WEIGHT", "0.5"))

# Version string
VERSION = "0.1.0"


def debug_enabled():
    """Check if debug mode is enabled."""
    return os.getenv("DEBUG", "true").lower() == "true"


def get_engine_config() -> Dict[str, Any]:
    """Get constructor arguments for the configured engine."""
    return {
        "alpha": SSE_ALPHA,
        "drift_threshold": SSE_DRIFT_THRESHOLD
    }


def get_health_model():
    """Get the health model built from the configured policy knobs."""
    from .health import HealthModel
    return HealthModel(age_decay_rate=SSE_AGE_DECAY_RATE, drift_weight=SSE_DRIFT_WEIGHT)


def validate_engine_params(alpha: float, drift_threshold: float) -> List[str]:
    """Validate engine construction parameters and return any issues."""
    issues = []

    if not math.isfinite(alpha) or not 0.0 <= alpha <= 1.0:
        issues.append(f"alpha must be in [0, 1], got {alpha}")

    if not math.isfinite(drift_threshold) or not -1.0 <= drift_threshold <= 1.0:
        issues.append(f"drift_threshold must be in [-1, 1], got {drift_threshold}")

    return issues


def validate_engine_config() -> List[str]:
    """Validate the environment-provided configuration and return any issues."""
    issues = validate_engine_params(SSE_ALPHA, SSE_DRIFT_THRESHOLD)

    if not math.isfinite(SSE_AGE_DECAY_RATE) or SSE_AGE_DECAY_RATE < 0:
        issues.append(f"SSE_AGE_DECAY_RATE must be >= 0, got {SSE_AGE_DECAY_RATE}")

    if not math.isfinite(SSE_DRIFT_WEIGHT) or SSE_DRIFT_WEIGHT < 0:
        issues.append(f"SSE_DRIFT_WEIGHT must be >= 0, got {SSE_DRIFT_WEIGHT}")

    return issues


def create_engine():
    """Build a StateEngine from the current configuration."""
    from .engine import StateEngine
    from .errors import InvalidParameterError
    from ..util.logging import logger

    issues = validate_engine_config()
    if issues:
        logger.log_config_issues(issues)
        raise InvalidParameterError(issues)

    return StateEngine(health_model=get_health_model(), **get_engine_config())
