"""Placeholder replacement in translated texts."""

from typing import Any, Callable, Mapping, Optional


class PlaceholderSubstitutor:
    """Replaces marker substrings in a translated text.

    Attributes:
        translate: Translates a tag with no replacements. Used for markers
            given without a value, which are translated as tags themselves.
    """

    def __init__(self, translate: Callable[[str], str]):
        self.translate = translate

    def apply(self, text: str, replacements: Optional[Mapping[str, Any]] = None) -> str:
        """Replace every marker in ``text``.

        Markers are applied one after another in the order of
        ``replacements``, so a value that contains a later marker is
        replaced again.

        Args:
            text: Translated text.
            replacements: Marker -> value. A None or empty value is replaced
                by the translation of the marker itself.

        Returns:
            The text with all markers replaced.
        """
        for marker, value in (replacements or {}).items():
            if value is None or value == "":
                value = self.translate(marker)
            text = text.replace(marker, str(value))
        return text
