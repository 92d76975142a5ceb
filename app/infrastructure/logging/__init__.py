"""Structured logging for the text localizer.

Example:
    from infrastructure.logging import get_module_logger

    logger = get_module_logger()
    logger.warning("used_fallback_translation", key="menu.title", locale="fr-FR")
"""

from infrastructure.logging.setup import configure_logging, get_module_logger

__all__ = [
    "configure_logging",
    "get_module_logger",
]
