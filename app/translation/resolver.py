"""Tag resolution: from a tag to the translations that exist for it."""

from collections.abc import Mapping
from typing import Optional, Union

from core.logging import get_module_logger
from translation.errors import TagNotFound
from translation.inline import InlineRegistry
from translation.models import ScopedTag, TranslationMap
from translation.store import DictionaryStore

logger = get_module_logger()


class TagResolver:
    """Finds the candidate translations of a tag.

    Lookup order:
    1. Inline entries registered for the exact tag string
    2. The dictionary named by a ``{dictionary:name}`` scope
    3. The default dictionary, for bare tags

    Attributes:
        inline: Inline registry, checked first.
        store: Dictionary store for file-backed dictionaries.
        default_dictionary: Dictionary searched for bare tags, if any.
    """

    def __init__(
        self,
        inline: InlineRegistry,
        store: DictionaryStore,
        default_dictionary: Optional[str] = None,
    ):
        self.inline = inline
        self.store = store
        self.default_dictionary = default_dictionary

    def get_candidates(
        self, tag_or_map: Union[str, TranslationMap]
    ) -> Optional[TranslationMap]:
        """Return the translations for a tag.

        Args:
            tag_or_map: Tag name, or translations already in hand, which
                are returned unchanged.

        Returns:
            Language -> text mapping, or None if the tag is not defined.
            Inline and dictionary entries are returned as copies.
        """
        if isinstance(tag_or_map, Mapping):
            return tag_or_map

        tag = tag_or_map
        inline = self.inline.get(tag)
        if inline is not None:
            return inline

        scoped = ScopedTag.parse(tag)
        if scoped is not None:
            dictionary_name, name = scoped.dictionary, scoped.name
        elif self.default_dictionary is not None:
            dictionary_name, name = self.default_dictionary, tag
        else:
            logger.debug("no_dictionary_for_tag", tag=tag)
            return None

        translations = self.store.load(dictionary_name).get(name)
        return dict(translations) if translations is not None else None

    def resolve(self, tag_or_map: Union[str, TranslationMap]) -> TranslationMap:
        """Return the translations for a tag, raising if it is not defined.

        Raises:
            TagNotFound: If no inline entry or dictionary defines the tag.
        """
        candidates = self.get_candidates(tag_or_map)
        if candidates is None:
            raise TagNotFound(str(tag_or_map))
        return candidates
