"""Dictionary-based translation of text tags.

Resolves tags into the caller's preferred language from per-language
dictionaries, with language fallback, inline translations and placeholder
replacement.

Main components:
- models: TranslationMap, ScopedTag, StringTranslation, MapTranslation
- store: DictionaryStore and lang_merge
- inline: InlineRegistry for runtime translations
- resolver: TagResolver for tag -> candidate translations
- selector: LanguageFallbackSelector
- substitutor: PlaceholderSubstitutor
- translator: Translator service
- legacy: reader and migration tool for legacy PHP dictionaries
"""

from translation.collaborators import (
    Configuration,
    LanguageContext,
    LanguagePreference,
    ModuleDirectory,
    ModuleDirResolver,
)
from translation.errors import (
    DictionaryUnavailable,
    InvalidTranslationShape,
    LegacyFormatError,
    NoTranslationAvailable,
    TagNotFound,
    TranslationError,
)
from translation.factory import create_translator
from translation.inline import InlineRegistry
from translation.models import (
    Dictionary,
    MapTranslation,
    ScopedTag,
    StringTranslation,
    TranslationMap,
)
from translation.resolver import TagResolver
from translation.selector import LanguageFallbackSelector
from translation.store import DictionaryStore, lang_merge
from translation.substitutor import PlaceholderSubstitutor
from translation.translator import Translator

__all__ = [
    "Configuration",
    "LanguageContext",
    "LanguagePreference",
    "ModuleDirectory",
    "ModuleDirResolver",
    "DictionaryUnavailable",
    "InvalidTranslationShape",
    "LegacyFormatError",
    "NoTranslationAvailable",
    "TagNotFound",
    "TranslationError",
    "create_translator",
    "InlineRegistry",
    "Dictionary",
    "MapTranslation",
    "ScopedTag",
    "StringTranslation",
    "TranslationMap",
    "TagResolver",
    "LanguageFallbackSelector",
    "DictionaryStore",
    "lang_merge",
    "PlaceholderSubstitutor",
    "Translator",
]
