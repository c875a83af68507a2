"""
Utility module for PairRank.

Provides logging configuration and validation.
"""

from pairrank.utils.logger_config import (
    setup_logging,
    setup_logging_from_settings,
    parse_component_levels,
    get_logger,
    LogContext,
    trace_questions,
    COMPONENT_LOGGERS,
)
from pairrank.utils.validation import (
    validate_ratio,
    validate_entities,
    parse_ratio,
)

__all__ = [
    "setup_logging",
    "setup_logging_from_settings",
    "parse_component_levels",
    "get_logger",
    "LogContext",
    "trace_questions",
    "COMPONENT_LOGGERS",
    "validate_ratio",
    "validate_entities",
    "parse_ratio",
]
