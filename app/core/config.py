"""Translation engine configuration settings."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
import structlog

logger = structlog.stdlib.get_logger().bind(component="config")

# Configuration key -> settings field
CONFIG_KEYS = {
    "basedir": "BASE_DIR",
    "dictionarydir": "DICTIONARY_DIR",
    "moduledir": "MODULE_DIR",
    "default.dictionary": "DEFAULT_DICTIONARY",
    "attributes.extradictionary": "ATTRIBUTES_EXTRA_DICTIONARY",
    "language.default": "LANGUAGE_DEFAULT",
}


class Settings(BaseSettings):
    """Translation engine settings.

    Values are read from ``TRANSLATION_*`` environment variables (or a
    ``.env`` file). The engine reads them through configuration keys with
    ``get_string`` and ``get_path_value``, so an alternative configuration
    object only has to provide those two methods.

    Environment Variables:
        TRANSLATION_BASE_DIR: Root that relative path settings resolve against
        TRANSLATION_DICTIONARY_DIR: Directory holding the dictionary files
        TRANSLATION_MODULE_DIR: Directory holding one sub-directory per module
        TRANSLATION_DEFAULT_DICTIONARY: Dictionary searched for bare tags
        TRANSLATION_ATTRIBUTES_EXTRA_DICTIONARY: Extra attribute dictionary
        TRANSLATION_LANGUAGE_DEFAULT: Configured default language
        TRANSLATION_LOG_LEVEL: Logging level (default: INFO)
        TRANSLATION_PREFIX: Environment prefix, empty in production
    """

    BASE_DIR: str = Field(default=".", description="Root for relative paths")
    DICTIONARY_DIR: Optional[str] = Field(
        default=None, description="Dictionary directory (dictionarydir)"
    )
    MODULE_DIR: Optional[str] = Field(
        default=None, description="Modules directory (moduledir)"
    )
    DEFAULT_DICTIONARY: Optional[str] = Field(
        default=None, description="Dictionary for bare tags"
    )
    ATTRIBUTES_EXTRA_DICTIONARY: Optional[str] = Field(
        default=None, description="Extra attribute dictionary"
    )
    LANGUAGE_DEFAULT: Optional[str] = Field(
        default=None, description="Default language (language.default)"
    )

    LOG_LEVEL: str = "INFO"
    PREFIX: str = ""

    model_config = SettingsConfigDict(
        env_prefix="TRANSLATION_",
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production."""
        return not bool(self.PREFIX)

    def _lookup(self, key: str) -> Optional[str]:
        field_name = CONFIG_KEYS.get(key)
        if field_name is None:
            logger.debug("unknown_configuration_key", key=key)
            return None
        return getattr(self, field_name)

    def get_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Return a string-valued setting.

        Args:
            key: Configuration key (e.g. "attributes.extradictionary").
            default: Value returned when the setting is unset or empty.

        Returns:
            The configured string, or ``default``.
        """
        value = self._lookup(key)
        if value is None or value == "":
            return default
        return value

    def get_path_value(self, key: str, default: Optional[str] = None) -> Optional[Path]:
        """Return a path-valued setting resolved against BASE_DIR.

        Args:
            key: Configuration key (e.g. "dictionarydir").
            default: Path used when the setting is unset or empty.

        Returns:
            Absolute path, or None when neither value nor default is set.
        """
        value = self.get_string(key, default)
        if value is None:
            return None

        path = Path(value)
        if not path.is_absolute():
            path = Path(self.BASE_DIR) / path
        return path.resolve()


@lru_cache
def get_settings() -> Settings:
    """Get process-wide settings loaded from the environment.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
