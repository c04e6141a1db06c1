"""Structured logging for the translation engine.

Every module gets its logger from ``get_module_logger()``, which binds the
module's name so events can be filtered per component. Events are
snake_case names with keyword context, for example:

    dictionary_loaded        dictionary="attributes", tag_count=42
    dictionary_unavailable   file="./dictionaries/status", reason="..."
    tag_not_translated       tag="login_button"
    language_file_merged     file="./dictionaries/extra", tag_count=12

Output is rendered for a console in development and as JSON lines in
production (``Settings.is_production``). Under pytest nothing is emitted.

Usage:
    from core.logging import get_module_logger

    logger = get_module_logger()
    logger.info("dictionary_loaded", dictionary="attributes")
"""

import inspect
import logging
import sys
from typing import Any, List, Optional

import structlog
from structlog.stdlib import BoundLogger

from core.config import Settings, get_settings

SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """Detect if running in a test environment."""
    return "pytest" in sys.modules


def build_processors(prod_mode: bool) -> List[Any]:
    """Return the structlog processor chain for the given mode.

    The chain ends in a JSON renderer in production and a console
    renderer otherwise.
    """
    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if prod_mode:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def _configure_silent() -> BoundLogger:
    logging.root.setLevel(SILENT_LEVEL)
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=SILENT_LEVEL, force=True)
    return structlog.stdlib.get_logger()


def configure_logging(
    settings: Optional[Settings] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog and the standard library root logger.

    Args:
        settings: Settings providing LOG_LEVEL and the production flag.
            Defaults to ``get_settings()``.
        log_level: Overrides ``settings.LOG_LEVEL``.
        is_production: Overrides ``settings.is_production``.

    Returns:
        The configured root logger.
    """
    if _is_test_environment():
        return _configure_silent()

    settings = settings or get_settings()
    prod_mode = settings.is_production if is_production is None else is_production

    structlog.configure(
        processors=build_processors(prod_mode),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level_name = (log_level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Return a logger bound to the calling module.

    Returns:
        Logger bound with ``component`` (last part of the module name) and
        ``module_path`` (the full dotted name).

    Example:
        # In translation/store.py
        logger = get_module_logger()
        # context: {"component": "store", "module_path": "translation.store"}
    """
    current_frame = inspect.currentframe()
    caller = current_frame.f_back if current_frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return logger.bind(component="unknown")

    module_name = module.__name__
    return logger.bind(
        component=module_name.rsplit(".", 1)[-1],
        module_path=module_name,
    )
