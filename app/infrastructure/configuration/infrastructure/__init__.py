"""Infrastructure settings __init__ - exports all infrastructure settings."""

from infrastructure.configuration.infrastructure.i18n import LocalizationSettings

__all__ = [
    "LocalizationSettings",
]
