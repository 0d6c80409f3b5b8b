"""Constants and regex patterns shared by the case and base converters and the `stringy.wrapper.Stringy` delegates.
"""

__docformat__ = 'google'

import re
from typing import List

## Case styles
# Constants
CASE_CAMEL: str = 'camelCase'
CASE_KEBAB: str = 'kebab-case'
CASE_PASCAL: str = 'PascalCase'
CASE_SNAKE: str = 'snake_case'

CASES: List[str] = [CASE_CAMEL, CASE_KEBAB, CASE_PASCAL, CASE_SNAKE]
"""Identifier naming styles accepted by `stringy.cases.convert_case`.

These values cross the API boundary verbatim and must not change."""

KEBAB_SEPARATOR: str = '-'
"""Word separator of the kebab-case intermediate form."""

SNAKE_SEPARATOR: str = '_'
DOT_SEPARATOR: str = '.'

# Patterns
UPPERCASE_PATTERN: re.Pattern = re.compile('([A-Z])')
"""Compiled regex matching a single ASCII uppercase letter.

Each match marks a word boundary in camelCase and PascalCase identifiers.

Used in `stringy.cases.to_kebab`."""


## Bases
# Constants
BASE_BIN: str = 'bin'
BASE_HEX: str = 'hex'

BASES: List[str] = [BASE_BIN, BASE_HEX]
"""Encodings accepted by `stringy.bases.convert_base`."""

# Patterns
HEX_PATTERN: re.Pattern = re.compile('(?:[0-9a-fA-F]{2})*')
"""Compiled regex matching an even-length run of hexadecimal digits.

Must be applied with `fullmatch`.

Used in `stringy.bases.hex_to_bin`."""


## Wrapper delegates
WHITESPACE_PATTERN: re.Pattern = re.compile(r'\s+')
"""Compiled regex matching runs of whitespace.

Used in `stringy.helpers.squish`."""

NATURAL_CHUNK_PATTERN: re.Pattern = re.compile(r'([0-9]+)')
"""Compiled regex splitting text into digit and non-digit runs for natural ordering.

Used in `stringy.wrapper.Stringy.compare`."""

WORD_PATTERN: re.Pattern = re.compile(r"[^\W\d_](?:[^\W\d_]|['-])*")
"""Compiled regex matching a word: letters, plus apostrophes and hyphens after the first letter.

Used in `stringy.wrapper.Stringy.word_count`."""

SLASHED_CHARACTERS: str = '\'"\\\0'
"""Characters escaped with a backslash by `stringy.wrapper.Stringy.add_slashes`."""

ESCAPE_PATTERN: re.Pattern = re.compile(r'\\(.?)', re.S)
"""Compiled regex matching a backslash and the character it escapes.

Capture groups:
    * escaped character (empty at end of string)

Used in `stringy.wrapper.Stringy.strip_slashes`."""
