"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    InMemoryTranslationLoader,
    make_locale_manager,
    make_render_request,
    make_translation_catalog,
)

__all__ = [
    "InMemoryTranslationLoader",
    "make_locale_manager",
    "make_render_request",
    "make_translation_catalog",
]
