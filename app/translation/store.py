"""Dictionary loading and caching.

A dictionary is stored either as a JSON definition file with an optional
JSON translation overlay, or as a legacy PHP file:

    <dir>/<name>.definition.json   tag -> {language: text}, authoritative
    <dir>/<name>.translation.json  optional overlay, merged per language
    <dir>/<name>.php               legacy format, see translation.legacy
"""

import json
from pathlib import Path
from typing import Dict, Optional, Union

from core.logging import get_module_logger
from translation.collaborators import Configuration, ModuleDirResolver
from translation.errors import DictionaryUnavailable
from translation.legacy import read_legacy_dictionary
from translation.models import (
    DEFINITION_SUFFIX,
    LEGACY_SUFFIX,
    TRANSLATION_SUFFIX,
    Dictionary,
    normalize_dictionary,
)

logger = get_module_logger()

DEFAULT_DICTIONARY_DIR = "dictionaries/"


def lang_merge(base: Dictionary, overlay: Dictionary) -> Dictionary:
    """Merge overlay translations into a base dictionary.

    For every tag of ``base`` that also appears in ``overlay``, the
    languages of both are combined and the overlay wins when a language is
    defined twice. Tags that only exist in ``overlay`` are not added.

    Args:
        base: Authoritative dictionary, defines the tag set.
        overlay: Additional or updated translations.

    Returns:
        New merged dictionary. Neither input is modified.
    """
    merged: Dictionary = {}
    for tag, translations in base.items():
        if tag in overlay:
            merged[tag] = {**translations, **overlay[tag]}
        else:
            merged[tag] = dict(translations)
    return merged


def _read_json(path: Path) -> Dictionary:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DictionaryUnavailable(path, str(e)) from e

    if not data:
        raise DictionaryUnavailable(path, "empty dictionary")
    return normalize_dictionary(data, str(path))


def read_json_dictionary(stem: Path) -> Dictionary:
    """Read a definition file and merge its translation overlay.

    Args:
        stem: Dictionary path without extension.

    Returns:
        The merged dictionary.

    Raises:
        DictionaryUnavailable: If the definition file is missing, empty or
            not valid JSON. Problems with the overlay are logged and the
            definition is returned as is.
    """
    definition = _read_json(Path(f"{stem}{DEFINITION_SUFFIX}"))

    translation_file = Path(f"{stem}{TRANSLATION_SUFFIX}")
    if not translation_file.exists():
        return definition

    try:
        overlay = _read_json(translation_file)
    except DictionaryUnavailable as e:
        logger.warning(
            "dictionary_translation_ignored",
            file=str(translation_file),
            reason=e.reason,
        )
        return definition

    return lang_merge(definition, overlay)


def read_dictionary_file(stem: Union[str, Path]) -> Dictionary:
    """Read the dictionary stored at ``stem`` in either format.

    The JSON definition format is preferred over the legacy format.

    Args:
        stem: Dictionary path without extension.

    Returns:
        The dictionary.

    Raises:
        DictionaryUnavailable: If no dictionary file exists at ``stem`` or
            the file found cannot be parsed.
    """
    stem = Path(stem)
    logger.debug("reading_dictionary", stem=str(stem))

    if Path(f"{stem}{DEFINITION_SUFFIX}").exists():
        return read_json_dictionary(stem)

    legacy_file = Path(f"{stem}{LEGACY_SUFFIX}")
    if legacy_file.exists():
        return read_legacy_dictionary(legacy_file)

    raise DictionaryUnavailable(stem, "no dictionary file found")


class DictionaryStore:
    """Loads named dictionaries and caches them for its own lifetime.

    Names of the form ``module:file`` are looked up in the module's
    dictionary directory, other names in the configured ``dictionarydir``.
    Missing or broken dictionaries are logged and cached as empty, so a
    name is read from disk at most once.

    Attributes:
        configuration: Configuration providing ``dictionarydir``.
        module_dirs: Resolver for module dictionary directories.
        cache: Loaded dictionaries by name.
    """

    def __init__(
        self,
        configuration: Configuration,
        module_dirs: ModuleDirResolver,
    ):
        self.configuration = configuration
        self.module_dirs = module_dirs
        self.cache: Dict[str, Dictionary] = {}

    def dictionary_dir(self, configuration: Optional[Configuration] = None) -> Path:
        """Return the ``dictionarydir`` of a configuration.

        Args:
            configuration: Configuration to read; defaults to the store's.
        """
        configuration = configuration or self.configuration
        return Path(
            configuration.get_path_value("dictionarydir", DEFAULT_DICTIONARY_DIR)
        )

    def stem_for(self, name: str) -> Path:
        """Return the file path (without extension) of a dictionary name."""
        module, sep, file_name = name.partition(":")
        if sep:
            return Path(self.module_dirs.resolve(module)) / file_name
        return self.dictionary_dir() / name

    def load(self, name: str) -> Dictionary:
        """Return the dictionary called ``name``, reading it on first use.

        Args:
            name: Dictionary name, optionally ``module:file``.

        Returns:
            The dictionary; empty if it could not be read.
        """
        if name in self.cache:
            return self.cache[name]

        self.cache[name] = self.read_file(self.stem_for(name))
        logger.info(
            "dictionary_loaded",
            dictionary=name,
            tag_count=len(self.cache[name]),
        )
        return self.cache[name]

    def read_file(self, stem: Union[str, Path]) -> Dictionary:
        """Read a dictionary at an explicit path, bypassing the cache.

        Args:
            stem: Dictionary path without extension.

        Returns:
            The dictionary; empty if it could not be read.
        """
        try:
            return read_dictionary_file(stem)
        except DictionaryUnavailable as e:
            logger.error(
                "dictionary_unavailable",
                file=str(e.path),
                reason=e.reason,
            )
            return {}
