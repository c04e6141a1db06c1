"""Feature-level fixtures for translation engine tests.

Provides dictionary directories on disk and translators wired to them.
"""

import pytest

from tests.factories.translation import (
    make_settings,
    make_translator,
    write_definition,
    write_legacy,
)

LEGACY_STATUS = """<?php
/* Status messages */
$lang = array(
    'status_ok' => array(
        'en' => 'Everything is OK',
        'no' => 'Alt er i orden',
    ),
    'status_failed' => array('en' => "Something failed"),
);
"""


@pytest.fixture
def temp_dictionaries_dir(tmp_path):
    """Create a directory tree with sample dictionaries.

    Returns the base directory, containing:
    - dictionaries/login.definition.json
    - dictionaries/login.translation.json
    - dictionaries/attributes.definition.json
    - dictionaries/status.php
    - modules/core/dictionaries/frontpage.definition.json
    """
    dictionaries = tmp_path / "dictionaries"
    write_definition(
        dictionaries,
        "login",
        {
            "user_pass_header": {
                "en": "Enter your username and password",
                "no": "Skriv inn brukernavn og passord",
            },
            "login_button": {"en": "Login", "no": "Logg inn"},
            "welcome": {"en": "Welcome %NAME%", "no": "Velkommen %NAME%"},
            "only_german": {"de": "Nur Deutsch"},
        },
        translation={
            "login_button": {"no": "Logg på", "nn": "Logg inn"},
            "not_in_definition": {"en": "Never added"},
        },
    )
    write_definition(
        dictionaries,
        "attributes",
        {
            "attribute_cn": {"en": "Common name", "no": "Fullt navn"},
            "attribute_urn_oid_2.5.4.3": {"en": "Common name (OID)"},
            "attribute_mail": {"en": "Mail"},
        },
    )
    write_legacy(dictionaries, "status", LEGACY_STATUS)
    write_definition(
        tmp_path / "modules" / "core" / "dictionaries",
        "frontpage",
        {"welcome": {"en": "Welcome to the front page"}},
    )
    return tmp_path


@pytest.fixture
def settings(temp_dictionaries_dir):
    """Settings rooted at the temporary dictionaries tree."""
    return make_settings(temp_dictionaries_dir)


@pytest.fixture
def translator(settings):
    """Translator with Norwegian selected and ``login`` as default dictionary."""
    return make_translator(settings, language="no", default_dictionary="login")


@pytest.fixture
def english_translator(settings):
    """Translator with English selected and no default dictionary."""
    return make_translator(settings, language="en")
