"""Structlog configuration for the text localizer.

Render failures are never raised to callers; they are reported as
event-named log calls with keyword context, e.g.::

    logger = get_module_logger()
    logger.error("missing_argument", key="menu.greeting", argument="name")

Output is console-rendered in development, JSON in production (empty
``PREFIX``), and silenced while pytest is running.
"""

import inspect
import logging
import sys
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from infrastructure.configuration import settings

SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """True when running under pytest."""
    return "pytest" in sys.modules


def _build_processors(prod_mode: bool) -> List[Processor]:
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if prod_mode:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog and the stdlib root logger.

    Args:
        log_level: Level name overriding settings.LOG_LEVEL.
        is_production: Overrides settings.is_production (JSON vs console).

    Returns:
        The base logger that module loggers are bound from.
    """
    if _is_test_environment():
        # Tests assert on patched module loggers, never on output
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
        logging.root.setLevel(SILENT_LEVEL)
        return structlog.stdlib.get_logger()

    prod_mode = settings.is_production if is_production is None else is_production
    structlog.configure(
        processors=_build_processors(prod_mode),
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


_base_logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Logger bound to the calling module.

    Binds ``component`` (last dotted part) and ``module_path``, so
    ``infrastructure.i18n.references`` logs with ``component="references"``.
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return _base_logger.bind(component="unknown")

    module_path = module.__name__
    return _base_logger.bind(
        component=module_path.rsplit(".", 1)[-1],
        module_path=module_path,
    )
