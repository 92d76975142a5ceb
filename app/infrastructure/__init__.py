"""Infrastructure modules for the text localizer.

Centralized infrastructure components:
- configuration: Settings management (settings, LocalizationSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- events: In-process publish/subscribe (EventNotifier, Event)
- i18n: Localized string rendering (StringRenderer, LocaleManager)
"""

# Configuration
from infrastructure.configuration import settings

# Logging
from infrastructure.logging import configure_logging, get_module_logger

__all__ = [
    "settings",
    "get_module_logger",
    "configure_logging",
]
