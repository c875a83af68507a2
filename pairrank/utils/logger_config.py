"""
Logging configuration for PairRank.

Provides consistent logging setup across all modules. Each session
component logs under its own child of the "pairrank" logger, so the
scheduler's per-question DEBUG output can be switched on without the
solver's or the storage layer's:

    pairrank.scheduling   spanning/adaptive phases, skips, every question
    pairrank.ranking      system assembly and solving
    pairrank.collectors   scripted/console answer sources
    pairrank.storage      roster and result files
    pairrank.config       parameter changes
"""

import logging
import sys
from typing import Dict, Optional

ROOT_LOGGER_NAME = "pairrank"

COMPONENT_LOGGERS = ("scheduling", "ranking", "collectors", "storage", "config")


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    log_file: Optional[str] = None,
    component_levels: Optional[Dict[str, str]] = None
) -> logging.Logger:
    """
    Set up logging configuration.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Log message format
        log_file: Optional file to write logs to
        component_levels: Per-component overrides, e.g. {"scheduling": "DEBUG"}

    Returns:
        Package root logger
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    numeric_level = _numeric_level(level, logging.INFO)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(numeric_level)
    root_logger.handlers = []

    formatter = logging.Formatter(format_string)

    # Handlers pass everything; loggers decide what is emitted
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    for component in COMPONENT_LOGGERS:
        get_logger(component).setLevel(logging.NOTSET)
    for component, component_level in (component_levels or {}).items():
        get_logger(_check_component(component)).setLevel(
            _numeric_level(component_level, numeric_level)
        )

    return root_logger


def parse_component_levels(text: Optional[str]) -> Dict[str, str]:
    """
    Parse "scheduling=DEBUG,ranking=WARNING" into a component -> level mapping.

    Raises:
        ValueError: On a malformed entry or an unknown component
    """
    levels: Dict[str, str] = {}
    if not text:
        return levels

    for entry in text.split(","):
        entry = entry.strip()
        if not entry:
            continue
        component, sep, level = entry.partition("=")
        if not sep or not level.strip():
            raise ValueError(f"Expected component=LEVEL, got {entry!r}")
        levels[_check_component(component.strip())] = level.strip().upper()
    return levels


def setup_logging_from_settings() -> logging.Logger:
    """Configure logging from the global Settings (LOG_LEVEL, PAIRRANK_LOG_COMPONENTS, ...)."""
    from pairrank.config.settings import get_settings

    settings = get_settings()
    return setup_logging(
        level=settings.log_level,
        format_string=settings.log_format,
        log_file=settings.log_file,
        component_levels=parse_component_levels(settings.log_components),
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Component name (None for the package root logger)

    Returns:
        Logger instance
    """
    if name:
        return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
    return logging.getLogger(ROOT_LOGGER_NAME)


class LogContext:
    """
    Context manager for temporary log level changes.

    Example:
        with LogContext(level="WARNING", logger_name="ranking"):
            # solver chatter suppressed here
            ...
    """

    def __init__(self, level: str = "DEBUG", logger_name: Optional[str] = None):
        """
        Initialize log context.

        Args:
            level: Temporary log level
            logger_name: Component logger to modify (None for the package root)
        """
        self.level = level
        self.logger_name = logger_name
        self.logger = get_logger(logger_name)
        self.original_level = None

    def __enter__(self):
        """Enter context - change log level."""
        self.original_level = self.logger.level
        self.logger.setLevel(_numeric_level(self.level, logging.DEBUG))
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context - restore log level."""
        if self.original_level is not None:
            self.logger.setLevel(self.original_level)
        return False


def trace_questions() -> LogContext:
    """
    Log every scheduled question for the duration of a block.

    Example:
        with trace_questions():
            pipeline.compute_ratings(entities, anchor)
    """
    return LogContext(level="DEBUG", logger_name="scheduling")


def _numeric_level(level: str, default: int) -> int:
    return getattr(logging, level.upper(), default)


def _check_component(component: str) -> str:
    if component not in COMPONENT_LOGGERS:
        raise ValueError(
            f"Unknown log component {component!r}; expected one of {COMPONENT_LOGGERS}"
        )
    return component
