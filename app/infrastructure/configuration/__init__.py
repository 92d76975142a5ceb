"""Infrastructure configuration module - public API.

Centralized configuration management using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    LocalizationSettings: Localization settings class (for testing)

Example:
    ```python
    from infrastructure.configuration import settings

    translations_dir = settings.i18n.translations_dir
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.infrastructure.i18n import LocalizationSettings

__all__ = ["Settings", "settings", "LocalizationSettings"]
