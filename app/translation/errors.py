"""Error types raised by the translation engine."""

from pathlib import Path
from typing import Any, Union


class TranslationError(Exception):
    """Base class for translation engine errors."""


class DictionaryUnavailable(TranslationError):
    """A dictionary file is missing or could not be parsed.

    Raised by the file readers and handled inside the dictionary store,
    which logs it and treats the dictionary as empty.
    """

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Dictionary unavailable at {self.path}: {reason}")


class LegacyFormatError(DictionaryUnavailable):
    """A legacy dictionary file does not follow the supported format."""


class TagNotFound(TranslationError, KeyError):
    """No reachable dictionary or inline entry defines the tag."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"Tag not found: {tag}")

    def __str__(self) -> str:
        return self.args[0]


class NoTranslationAvailable(TranslationError, LookupError):
    """A candidate translation map is empty."""


class InvalidTranslationShape(TranslationError, TypeError):
    """An inline translation is neither a string nor a language mapping."""

    def __init__(self, tag: str, value: Any):
        self.tag = tag
        self.value = value
        super().__init__(
            f"Inline translation for {tag} should be a string or a mapping, "
            f"got {type(value).__name__}"
        )
