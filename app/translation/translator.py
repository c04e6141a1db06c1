"""Translation service: tag lookup, language selection and placeholders.

One Translator owns its dictionary cache and inline entries. Create one
per request; instances are not shared between concurrent executions.
"""

from typing import Any, Mapping, Optional, Union

from core.logging import get_module_logger
from translation.collaborators import Configuration, LanguageContext, ModuleDirResolver
from translation.errors import TagNotFound
from translation.inline import InlineRegistry
from translation.models import TranslationMap
from translation.resolver import TagResolver
from translation.selector import LanguageFallbackSelector
from translation.store import DictionaryStore
from translation.substitutor import PlaceholderSubstitutor

logger = get_module_logger()

ATTRIBUTES_DICTIONARY = "attributes"
ATTRIBUTE_TAG_PREFIX = "attribute_"


class Translator:
    """Service for translating tags into the preferred language.

    Attributes:
        configuration: Configuration source (dictionary directory, extra
            attribute dictionary).
        language: Language context of the current request.
        store: Dictionary store owned by this translator.
        inline: Inline translations owned by this translator.
        resolver: Tag resolver over ``inline`` and ``store``.
        selector: Language fallback selector.
        substitutor: Placeholder substitutor.
    """

    def __init__(
        self,
        configuration: Configuration,
        language: LanguageContext,
        module_dirs: ModuleDirResolver,
        default_dictionary: Optional[str] = None,
    ):
        """Initialize Translator.

        Args:
            configuration: Configuration source.
            language: Provides the selected and default languages.
            module_dirs: Resolves ``module:file`` dictionary names.
            default_dictionary: Dictionary searched for bare tags. Without
                one, bare tags only match inline translations.
        """
        self.configuration = configuration
        self.language = language
        self.store = DictionaryStore(configuration, module_dirs)
        self.inline = InlineRegistry()
        self.resolver = TagResolver(self.inline, self.store, default_dictionary)
        self.selector = LanguageFallbackSelector(language)
        self.substitutor = PlaceholderSubstitutor(self.t)

    @property
    def default_dictionary(self) -> Optional[str]:
        return self.resolver.default_dictionary

    def get_tag(self, tag: str) -> Optional[TranslationMap]:
        """Retrieve a tag as a language -> text mapping.

        Args:
            tag: Tag name, optionally scoped as ``{dictionary:name}``.

        Returns:
            Translations of the tag, or None if the tag was not found.
        """
        return self.resolver.get_candidates(tag)

    def get_preferred_translation(self, translations: TranslationMap) -> str:
        """Retrieve the preferred translation of a text.

        Raises:
            NoTranslationAvailable: If translations is empty.
        """
        return self.selector.select(translations)

    def t(
        self,
        tag: Union[str, TranslationMap],
        replacements: Optional[Mapping[str, Any]] = None,
        fallback_placeholder: bool = True,
    ) -> str:
        """Translate a tag into the current language.

        Args:
            tag: Tag name, or a language -> text mapping to select from.
            replacements: Marker -> value replacements applied to the
                translated text, in order. Markers without a value are
                translated as tags.
            fallback_placeholder: When the tag is not found, return
                ``"not translated (<tag>)"`` if True, the tag itself if False.

        Returns:
            The translated text.

        Raises:
            NoTranslationAvailable: If the translations found are empty.
        """
        try:
            candidates = self.resolver.resolve(tag)
        except TagNotFound:
            logger.info("tag_not_translated", tag=tag)
            if fallback_placeholder:
                return f"not translated ({tag})"
            return tag

        translated = self.selector.select(candidates)
        return self.substitutor.apply(translated, replacements)

    def include_inline_translation(self, tag: str, translation: Any) -> None:
        """Add a translation that is not stored in a dictionary.

        Meant for variable data, or translations provided by an external
        source such as a database or metadata.

        Args:
            tag: Tag the translation is for.
            translation: A string (English) or a language -> text mapping.

        Raises:
            InvalidTranslationShape: If translation is neither.
        """
        self.inline.register(tag, translation)

    def include_language_file(
        self,
        file_name: str,
        configuration: Optional[Configuration] = None,
    ) -> None:
        """Load a dictionary file into the inline translations.

        Args:
            file_name: Dictionary name inside the dictionary directory,
                without extension.
            configuration: Configuration whose ``dictionarydir`` holds the
                file. Defaults to this translator's configuration, which
                lets external dictionaries be combined with the main ones.
        """
        stem = self.store.dictionary_dir(configuration) / file_name
        entries = self.store.read_file(stem)
        self.inline.merge(entries)
        logger.debug(
            "language_file_merged",
            file=str(stem),
            tag_count=len(entries),
        )

    def get_attribute_translation(self, name: str) -> str:
        """Translate the name of an attribute.

        The name is lower-cased and ``:`` replaced with ``_``. The extra
        attribute dictionary (``attributes.extradictionary``) is searched
        for that name, then the ``attributes`` dictionary for
        ``attribute_<name>``.

        Args:
            name: Attribute name.

        Returns:
            The translated name, or ``name`` unchanged if not found.
        """
        normalized = name.lower().replace(":", "_")

        extra_dictionary = self.configuration.get_string(
            "attributes.extradictionary", None
        )
        if extra_dictionary is not None:
            dictionary = self.store.load(extra_dictionary)
            if normalized in dictionary:
                return self.selector.select(dictionary[normalized])

        dictionary = self.store.load(ATTRIBUTES_DICTIONARY)
        tag = ATTRIBUTE_TAG_PREFIX + normalized
        if tag in dictionary:
            return self.selector.select(dictionary[tag])

        return name
