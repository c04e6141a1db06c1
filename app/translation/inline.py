"""Translations registered at runtime instead of loaded from dictionaries."""

from typing import Any, Dict, Mapping, Optional

from core.logging import get_module_logger
from translation.models import TranslationMap, to_translation

logger = get_module_logger()


class InlineRegistry:
    """Tag -> translations entries supplied by the application.

    Entries shadow dictionary entries with the same tag. They are never
    scoped: a tag such as ``{attributes:cn}`` is stored and matched as is.
    """

    def __init__(self) -> None:
        self.entries: Dict[str, TranslationMap] = {}

    def __contains__(self, tag: object) -> bool:
        return tag in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, tag: str) -> Optional[TranslationMap]:
        """Return a copy of the translations registered for a tag."""
        translations = self.entries.get(tag)
        return dict(translations) if translations is not None else None

    def register(self, tag: str, translation: Any) -> None:
        """Register translations for a tag, replacing any previous entry.

        Args:
            tag: Tag to register.
            translation: A string (stored as the English translation) or a
                non-empty language -> text mapping.

        Raises:
            InvalidTranslationShape: If translation has any other shape.
        """
        self.entries[tag] = to_translation(tag, translation).as_map()
        logger.debug("inline_translation_added", tag=tag)

    def merge(self, entries: Mapping[str, TranslationMap]) -> None:
        """Add many entries at once.

        Each tag's translations replace the existing ones as a whole; the
        languages are not merged.

        Args:
            entries: Tag -> translations, e.g. a loaded dictionary. Tags
                without any translations are skipped.
        """
        for tag, translations in entries.items():
            if not translations:
                logger.warning("empty_inline_translation_skipped", tag=tag)
                continue
            self.entries[tag] = dict(translations)
