"""Interfaces the translation engine depends on, with default implementations.

The engine only needs a configuration source, a way to find a module's
dictionary directory and the current language preference. The protocols
below describe those contracts so callers can plug in their own.
"""

from pathlib import Path
from typing import Optional, Protocol, Union

from core.logging import get_module_logger
from translation.models import FALLBACK_LANGUAGE

logger = get_module_logger()


class Configuration(Protocol):
    """Configuration source.

    Implemented by ``core.config.Settings``.
    """

    def get_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Return a string-valued setting or ``default``."""
        ...

    def get_path_value(
        self, key: str, default: Optional[str] = None
    ) -> Optional[Path]:
        """Return a path-valued setting or ``default`` as a path."""
        ...


class ModuleDirResolver(Protocol):
    """Maps a module name to the directory holding its dictionaries."""

    def resolve(self, module: str) -> Path:
        """Return the dictionary directory of ``module``."""
        ...


class LanguageContext(Protocol):
    """Language preference of the current request."""

    def get_language(self) -> str:
        """Return the currently selected language."""
        ...

    def get_default_language(self) -> str:
        """Return the configured default language."""
        ...


class ModuleDirectory:
    """Resolves module dictionaries under a common modules directory.

    A module ``core`` keeps its dictionaries in
    ``<modules_dir>/core/dictionaries``.
    """

    def __init__(self, modules_dir: Union[str, Path]):
        self.modules_dir = Path(modules_dir)

    def resolve(self, module: str) -> Path:
        return self.modules_dir / module / "dictionaries"


class LanguagePreference:
    """Language context with an explicitly selected language.

    Attributes:
        default_language: Configured default language.
        language: Selected language, or None to use the default.
    """

    def __init__(
        self,
        default_language: str = FALLBACK_LANGUAGE,
        language: Optional[str] = None,
    ):
        self.default_language = default_language
        self.language = language

    def set_language(self, language: str) -> None:
        """Select the language for the rest of the request."""
        logger.debug(
            "language_selected",
            language=language,
            previous_language=self.language,
        )
        self.language = language

    def get_language(self) -> str:
        return self.language or self.default_language

    def get_default_language(self) -> str:
        return self.default_language
