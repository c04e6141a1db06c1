"""Reader and migration tool for legacy PHP dictionary files.

Legacy dictionaries are ``<name>.php`` files that assign the dictionary to
a ``$lang`` variable. They are never executed: this module parses the
fixed array-literal subset those files are written in and rejects
anything else.

Supported format (version 1):

    <?php
    // comments: //, # and /* */
    $lang = array(
        'tag' => array('en' => 'Text', 'no' => "Tekst"),
    );
    $lang['other_tag'] = ['en' => 'Other'];
    $lang['other_tag']['no'] = 'Annen';

Values are nested ``array(...)`` or ``[...]`` literals, single or double
quoted strings, numbers and ``true``/``false``/``null``. Statements that
do not assign ``$lang`` are ignored. Element assignments may be nested
(``$lang['tag']['en'] = ...``) and create missing arrays on the way.
Double-quoted strings must not interpolate variables.

Usage:
    python -m translation.legacy dictionaries/attributes --overwrite
"""

import argparse
import json
import re
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from core.logging import get_module_logger
from translation.errors import LegacyFormatError
from translation.models import (
    DEFINITION_SUFFIX,
    LEGACY_SUFFIX,
    Dictionary,
    normalize_dictionary,
)

logger = get_module_logger()

LEGACY_FORMAT_VERSION = 1
LEGACY_VARIABLE = "$lang"

_TOKEN = re.compile(
    r"""
    (?P<ws>\s+)
    |(?P<open><\?php|<\?=?|\?>)
    |(?P<comment>//[^\n]*|\#[^\n]*|/\*.*?\*/)
    |(?P<var>\$[A-Za-z_]\w*)
    |(?P<arrow>=>)
    |(?P<assign>=)
    |(?P<sstring>'(?:[^'\\]|\\.)*')
    |(?P<dstring>"(?:[^"\\]|\\.)*")
    |(?P<number>-?\d+(?:\.\d+)?)
    |(?P<ident>[A-Za-z_]\w*)
    |(?P<punct>[()\[\],;])
    |(?P<other>.)
    """,
    re.VERBOSE | re.DOTALL,
)

_SKIPPED = {"ws", "open", "comment"}

_DOUBLE_QUOTE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "v": "\v",
    "e": "\x1b",
    "f": "\f",
    "\\": "\\",
    "$": "$",
    '"': '"',
}

Token = Tuple[str, str]


def _tokenize(source: str) -> List[Token]:
    return [
        (match.lastgroup, match.group())
        for match in _TOKEN.finditer(source)
        if match.lastgroup not in _SKIPPED
    ]


def _decode_single_quoted(literal: str) -> str:
    return re.sub(r"\\([\\'])", r"\1", literal[1:-1])


def _decode_double_quoted(literal: str, path: Path) -> str:
    body = literal[1:-1]
    chars = []
    i = 0
    while i < len(body):
        char = body[i]
        if char == "\\" and i + 1 < len(body):
            escaped = body[i + 1]
            if escaped in _DOUBLE_QUOTE_ESCAPES:
                chars.append(_DOUBLE_QUOTE_ESCAPES[escaped])
                i += 2
                continue
            hex_match = re.match(r"x([0-9A-Fa-f]{1,2})", body[i + 1 :])
            if hex_match:
                chars.append(chr(int(hex_match.group(1), 16)))
                i += 1 + len(hex_match.group())
                continue
            chars.append(char)
            i += 1
            continue
        if char == "$" and i + 1 < len(body) and re.match(r"[A-Za-z_{]", body[i + 1]):
            raise LegacyFormatError(path, f"variable interpolation in string {literal}")
        chars.append(char)
        i += 1
    return "".join(chars)


class _ArrayLiteralParser:
    """Recursive-descent parser over the token list of one file."""

    def __init__(self, tokens: List[Token], path: Path):
        self.tokens = tokens
        self.path = path
        self.pos = 0

    def _peek(self) -> Optional[Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def _next(self) -> Token:
        token = self._peek()
        if token is None:
            raise LegacyFormatError(self.path, "unexpected end of file")
        self.pos += 1
        return token

    def _expect(self, value: str) -> None:
        kind, text = self._next()
        if text != value:
            raise LegacyFormatError(
                self.path, f"expected {value!r}, found {text!r} ({kind})"
            )

    def _is(self, offset: int, value: str) -> bool:
        index = self.pos + offset
        return index < len(self.tokens) and self.tokens[index][1] == value

    def parse(self) -> Optional[Dict[Any, Any]]:
        """Collect every assignment to the dictionary variable.

        Returns:
            The assigned array, or None if the file never assigns it.
        """
        result: Optional[Dict[Any, Any]] = None
        while self._peek() is not None:
            kind, text = self._peek()
            if kind == "var" and text == LEGACY_VARIABLE:
                if self._is(1, "="):
                    self.pos += 2
                    value = self._value()
                    if not isinstance(value, dict):
                        raise LegacyFormatError(
                            self.path, f"{LEGACY_VARIABLE} must be an array"
                        )
                    result = value
                    self._end_statement()
                    continue
                if self._is(1, "["):
                    self.pos += 1
                    keys = []
                    while self._is(0, "["):
                        self.pos += 1
                        keys.append(self._value())
                        self._expect("]")
                    self._expect("=")
                    value = self._value()
                    if result is None:
                        result = {}
                    target = result
                    for key in keys[:-1]:
                        if not isinstance(target.get(key), dict):
                            target[key] = {}
                        target = target[key]
                    target[keys[-1]] = value
                    self._end_statement()
                    continue
            self.pos += 1
        return result

    def _end_statement(self) -> None:
        if self._peek() is not None:
            self._expect(";")

    def _value(self) -> Any:
        kind, text = self._next()
        if kind == "sstring":
            return _decode_single_quoted(text)
        if kind == "dstring":
            return _decode_double_quoted(text, self.path)
        if kind == "number":
            return float(text) if "." in text else int(text)
        if kind == "punct" and text == "[":
            return self._entries("]")
        if kind == "ident":
            lowered = text.lower()
            if lowered == "array":
                self._expect("(")
                return self._entries(")")
            if lowered in ("true", "false"):
                return lowered == "true"
            if lowered == "null":
                return None
        raise LegacyFormatError(self.path, f"unsupported value {text!r}")

    def _entries(self, closing: str) -> Dict[Any, Any]:
        entries: Dict[Any, Any] = {}
        next_index = 0
        while not self._is(0, closing):
            first = self._value()
            if self._is(0, "=>"):
                self.pos += 1
                if not isinstance(first, (str, int)) or isinstance(first, bool):
                    raise LegacyFormatError(self.path, f"invalid array key {first!r}")
                key = first
                entries[key] = self._value()
            else:
                key = next_index
                entries[key] = first
            if isinstance(key, int):
                next_index = max(next_index, key + 1)
            if self._is(0, ","):
                self.pos += 1
            elif not self._is(0, closing):
                _, text = self._next()
                raise LegacyFormatError(
                    self.path, f"expected ',' or {closing!r}, found {text!r}"
                )
        self.pos += 1
        return entries


def parse_legacy_dictionary(source: str, path: Union[str, Path] = "<string>") -> Dictionary:
    """Parse the contents of a legacy dictionary file.

    Args:
        source: File contents.
        path: File path (for errors and logging).

    Returns:
        The dictionary, or an empty one if ``$lang`` is never assigned.

    Raises:
        LegacyFormatError: If the file is not in the supported format.
    """
    path = Path(path)
    data = _ArrayLiteralParser(_tokenize(source), path).parse()
    if data is None:
        logger.warning("legacy_dictionary_undefined", file=str(path))
        return {}
    return normalize_dictionary(data, str(path))


def read_legacy_dictionary(path: Union[str, Path]) -> Dictionary:
    """Read a legacy ``.php`` dictionary file.

    Args:
        path: Path to the ``.php`` file.

    Returns:
        The parsed dictionary.

    Raises:
        DictionaryUnavailable: If the file cannot be read.
        LegacyFormatError: If the file is not in the supported format.
    """
    path = Path(path)
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LegacyFormatError(path, str(e)) from e

    dictionary = parse_legacy_dictionary(source, path)
    logger.info(
        "legacy_dictionary_read",
        file=str(path),
        format_version=LEGACY_FORMAT_VERSION,
        tag_count=len(dictionary),
    )
    return dictionary


def migrate_legacy_dictionary(stem: Union[str, Path], overwrite: bool = False) -> Path:
    """Convert ``<stem>.php`` into ``<stem>.definition.json``.

    Args:
        stem: Dictionary path without extension.
        overwrite: Replace an existing definition file.

    Returns:
        Path of the written definition file.

    Raises:
        FileExistsError: If the definition file exists and overwrite is False.
        LegacyFormatError: If the legacy file is missing or malformed.
    """
    stem = Path(stem)
    legacy_file = Path(f"{stem}{LEGACY_SUFFIX}")
    definition_file = Path(f"{stem}{DEFINITION_SUFFIX}")

    if definition_file.exists() and not overwrite:
        raise FileExistsError(f"Definition file already exists: {definition_file}")

    dictionary = read_legacy_dictionary(legacy_file)
    definition_file.write_text(
        json.dumps(dictionary, ensure_ascii=False, indent=4) + "\n",
        encoding="utf-8",
    )

    logger.info(
        "legacy_dictionary_migrated",
        source=str(legacy_file),
        target=str(definition_file),
        tag_count=len(dictionary),
    )
    return definition_file


def main(argv: Optional[List[str]] = None) -> int:
    """Migrate legacy dictionaries given on the command line."""
    parser = argparse.ArgumentParser(
        prog="python -m translation.legacy",
        description="Convert legacy PHP dictionaries to .definition.json files.",
    )
    parser.add_argument(
        "stems",
        nargs="+",
        help="dictionary paths without extension (e.g. dictionaries/login)",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="replace existing .definition.json files",
    )
    args = parser.parse_args(argv)

    failed = 0
    for stem in args.stems:
        try:
            target = migrate_legacy_dictionary(stem, overwrite=args.overwrite)
        except (FileExistsError, LegacyFormatError) as e:
            logger.error("legacy_migration_failed", stem=stem, error=str(e))
            print(f"error: {e}", file=sys.stderr)
            failed += 1
            continue
        print(target)

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
