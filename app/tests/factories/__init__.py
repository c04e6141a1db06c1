"""Test data factories for deterministic test data generation."""

from tests.factories.translation import (
    make_dictionary,
    make_settings,
    make_translator,
    write_definition,
    write_legacy,
)

__all__ = [
    "make_dictionary",
    "make_settings",
    "make_translator",
    "write_definition",
    "write_legacy",
]
