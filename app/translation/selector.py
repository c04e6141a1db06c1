"""Selection of one translation according to the language fallback chain."""

from core.logging import get_module_logger
from translation.collaborators import LanguageContext
from translation.errors import NoTranslationAvailable
from translation.models import FALLBACK_LANGUAGE, TranslationMap

logger = get_module_logger()


class LanguageFallbackSelector:
    """Picks the preferred text from a set of translations.

    Fallback chain, first match wins:
    1. Currently selected language
    2. Configured default language
    3. English
    4. First available translation
    """

    def __init__(self, language: LanguageContext):
        self.language = language

    def select(self, candidates: TranslationMap) -> str:
        """Select the preferred translation.

        Args:
            candidates: Language -> text mapping.

        Returns:
            The preferred text.

        Raises:
            NoTranslationAvailable: If candidates is empty.
        """
        selected = self.language.get_language()
        if selected in candidates:
            return candidates[selected]

        default = self.language.get_default_language()
        if default in candidates:
            return candidates[default]

        if FALLBACK_LANGUAGE in candidates:
            return candidates[FALLBACK_LANGUAGE]

        for language, text in candidates.items():
            logger.debug(
                "used_first_available_translation",
                requested_language=selected,
                language=language,
            )
            return text

        raise NoTranslationAvailable("Nothing to return from translation")
