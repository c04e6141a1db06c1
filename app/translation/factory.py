"""Factory functions for creating translators from settings."""

from typing import Optional

from core.config import Settings, get_settings
from core.logging import get_module_logger
from translation.collaborators import LanguagePreference, ModuleDirectory
from translation.models import FALLBACK_LANGUAGE
from translation.translator import Translator

logger = get_module_logger()

DEFAULT_MODULE_DIR = "modules/"


def create_translator(
    settings: Optional[Settings] = None,
    language: Optional[str] = None,
    default_dictionary: Optional[str] = None,
) -> Translator:
    """Create a Translator wired with the default collaborators.

    Args:
        settings: Settings to read directories and defaults from
            (default: process-wide settings).
        language: Language selected for this request (default: the
            configured default language).
        default_dictionary: Dictionary for bare tags (default:
            ``default.dictionary`` from settings).

    Returns:
        Translator: A new translator with an empty cache.

    Usage:
        translator = create_translator(language="nb", default_dictionary="login")
        translator.t("user_pass_header")
    """
    settings = settings or get_settings()

    default_language = settings.get_string("language.default", FALLBACK_LANGUAGE)
    module_dirs = ModuleDirectory(
        settings.get_path_value("moduledir", DEFAULT_MODULE_DIR)
    )
    if default_dictionary is None:
        default_dictionary = settings.get_string("default.dictionary", None)

    translator = Translator(
        configuration=settings,
        language=LanguagePreference(default_language, language),
        module_dirs=module_dirs,
        default_dictionary=default_dictionary,
    )
    logger.debug(
        "translator_created",
        language=translator.language.get_language(),
        default_dictionary=default_dictionary,
        modules_dir=str(module_dirs.modules_dir),
    )
    return translator
