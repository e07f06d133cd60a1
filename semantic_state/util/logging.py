"""
Structured logging for semantic state operations - updates, drift, rejections and snapshots.
"""

import logging
from typing import Any, Dict, List

class StructuredLogger:
    """Structured logger for engine and host operations."""

    def __init__(self, name: str = "semantic_state"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.INFO)

        # Create handler if not already set
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def log_operation(self, operation: str, status: str, details: Dict[str, Any] = None, level: int = logging.INFO):
        """Log a structured operation."""
        if not self.logger.isEnabledFor(level):
            return

        message = f"Operation: {operation}, Status: {status}"
        if details:
            message += f", Details: {details}"

        self.logger.log(level, message)

    def log_update(self, update_count: int, dimension: int, drift_score: float, baseline: bool = False):
        """Log a successful embedding update."""
        if not self.logger.isEnabledFor(logging.DEBUG):
            return

        details = {
            "update_count": update_count,
            "dimension": dimension,
            "drift_score": round(drift_score, 6)
        }
        status = "baseline" if baseline else "success"
        self.log_operation("engine.update", status, details, level=logging.DEBUG)

    def log_rejected_update(self, reason: str, details: Dict[str, Any] = None):
        """Log an update rejected before touching engine state."""
        log_details = {"reason": reason}
        if details:
            log_details.update(details)

        self.log_operation("engine.update", "rejected", log_details, level=logging.WARNING)

    def log_drift_detected(self, drift_score: float, threshold: float, details: Dict[str, Any] = None):
        """Log a drift detection surfaced to the host."""
        log_details = {
            "drift_score": round(drift_score, 6),
            "threshold": threshold
        }
        if details:
            log_details.update(details)

        self.log_operation("drift.detected", "detected", log_details)

    def log_snapshot(self, health_score: float, summary: str, update_count: int):
        """Log a snapshot read."""
        if not self.logger.isEnabledFor(logging.DEBUG):
            return

        log_details = {
            "health_score": round(health_score, 6),
            "summary": summary,
            "update_count": update_count
        }
        self.log_operation("engine.snapshot", "success", log_details, level=logging.DEBUG)

    def log_reset(self, previous_update_count: int):
        """Log an engine reset."""
        self.log_operation("engine.reset", "success", {"previous_update_count": previous_update_count})

    def log_config_issues(self, issues: List[str]):
        """Log configuration problems found at startup."""
        self.log_operation("config.validate", "invalid", {"issues": issues}, level=logging.ERROR)

    # Standard logging methods for compatibility
    def info(self, message: str) -> None:
        """Log an info message."""
        self.logger.info(message)

    def warning(self, message: str) -> None:
        """Log a warning message."""
        self.logger.warning(message)

    def error(self, message: str) -> None:
        """Log an error message."""
        self.logger.error(message)

    def debug(self, message: str) -> None:
        """Log a debug message."""
        self.logger.debug(message)

# Global logger instance
logger = StructuredLogger()
