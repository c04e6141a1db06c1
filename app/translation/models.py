"""Translation models.

Defines the data structures shared by the dictionary store, the inline
registry and the tag resolver.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from core.logging import get_module_logger
from translation.errors import InvalidTranslationShape

logger = get_module_logger()

# Language code -> translated text
TranslationMap = Dict[str, str]

# Unscoped tag -> TranslationMap
Dictionary = Dict[str, TranslationMap]

FALLBACK_LANGUAGE = "en"

DEFINITION_SUFFIX = ".definition.json"
TRANSLATION_SUFFIX = ".translation.json"
LEGACY_SUFFIX = ".php"

_SCOPED_TAG = re.compile(r"\{((?:\w+:)?\w+?):(.*)\}", re.ASCII)


@dataclass(frozen=True)
class ScopedTag:
    """A tag bound to a specific dictionary.

    Written as ``{dictionary:name}``, where ``dictionary`` may itself be
    ``module:file``.

    Attributes:
        dictionary: Dictionary name (e.g. "attributes" or "core:login").
        name: Tag name inside that dictionary.
    """

    dictionary: str
    name: str

    def __str__(self) -> str:
        return f"{{{self.dictionary}:{self.name}}}"

    @classmethod
    def parse(cls, tag: str) -> Optional["ScopedTag"]:
        """Parse the scoped form of a tag.

        The match is strict: the whole tag must have the form
        ``{dictionary:name}``. Anything else, including malformed braces,
        returns None and is handled as a bare tag.

        Args:
            tag: Tag string.

        Returns:
            ScopedTag, or None if the tag is not scoped.
        """
        if not tag.startswith("{"):
            return None
        match = _SCOPED_TAG.fullmatch(tag)
        if match is None:
            return None
        return cls(dictionary=match.group(1), name=match.group(2))


def is_translation_map(value: Any) -> bool:
    """Check that value maps language codes to texts."""
    return isinstance(value, Mapping) and all(
        isinstance(lang, str) and isinstance(text, str) for lang, text in value.items()
    )


def normalize_dictionary(data: Any, source: str) -> Dictionary:
    """Keep the well-formed entries of parsed dictionary data.

    Entries that are not a non-empty language -> text mapping are dropped.

    Args:
        data: Parsed file contents.
        source: File the data came from (for logging).

    Returns:
        Dictionary with the valid entries, in file order.
    """
    if not isinstance(data, Mapping):
        logger.warning(
            "invalid_dictionary_format",
            file=source,
            expected="dict",
            actual=type(data).__name__,
        )
        return {}

    dictionary: Dictionary = {}
    for tag, translations in data.items():
        if not isinstance(tag, str) or not is_translation_map(translations):
            logger.warning("invalid_dictionary_entry", file=source, tag=str(tag))
            continue
        if not translations:
            logger.warning("empty_dictionary_entry", file=source, tag=tag)
            continue
        dictionary[tag] = dict(translations)
    return dictionary


@dataclass(frozen=True)
class StringTranslation:
    """A single text, registered as the English translation."""

    text: str

    def as_map(self) -> TranslationMap:
        return {FALLBACK_LANGUAGE: self.text}


@dataclass(frozen=True)
class MapTranslation:
    """Translations for several languages."""

    translations: TranslationMap = field(default_factory=dict)

    def as_map(self) -> TranslationMap:
        return dict(self.translations)


Translation = Union[StringTranslation, MapTranslation]


def to_translation(tag: str, value: Any) -> Translation:
    """Validate an inline translation value.

    Args:
        tag: Tag the value is registered for (used in the error).
        value: A string, a language -> text mapping, or an already
            validated Translation.

    Returns:
        StringTranslation or MapTranslation.

    Raises:
        InvalidTranslationShape: If value has any other shape, or is a
            mapping without any translations.
    """
    if isinstance(value, (StringTranslation, MapTranslation)):
        return value
    if isinstance(value, str):
        return StringTranslation(value)
    if is_translation_map(value) and value:
        return MapTranslation(dict(value))
    raise InvalidTranslationShape(tag, value)
