"""A chainable value object wrapping Python's string primitives.

`Stringy` holds a single string. Transforming methods return a new `Stringy`,
so calls can be chained without sharing mutable state between the links of a
chain; query methods return plain values.

Example:
    >>> str(Stringy('  my_variable_name ').trim().convert_case('snake_case', 'PascalCase'))
    'MyVariableName'
"""

__docformat__ = 'google'

__all__ = [
    'Stringy'
]

import codecs
import re
import textwrap
import unicodedata
from dataclasses import dataclass, field, replace
from difflib import SequenceMatcher
from typing import Callable, Dict, List, Optional
from stringy import bases, cases, helpers
from stringy.entities import Base, CaseStyle, PadSide
from stringy.exceptions import OperationFailedError
from stringy.positions import all_positions
from stringy.settings import Settings, get_settings
from stringy.patterns import (
    NATURAL_CHUNK_PATTERN,
    WORD_PATTERN,
    SLASHED_CHARACTERS,
    ESCAPE_PATTERN
)

def _natural_key(text: str) -> List:
    # captured digit runs sit at odd indices
    return [int(chunk) if index % 2 else chunk for index, chunk in enumerate(NATURAL_CHUNK_PATTERN.split(text))]

def _char_width(char: str) -> int:
    return 2 if unicodedata.east_asian_width(char) in ('W', 'F') else 1

@dataclass(frozen=True)
class Stringy:
    """
    An immutable string with chainable helpers.

    Args:
        value: The wrapped string
        settings: Defaults for encoding, padding and wrapping (packaged defaults if omitted)
    """
    value: str = ''
    settings: Settings = field(default_factory=get_settings, compare=False, repr=False)

    def __str__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return len(self.value)

    def _derive(self, value: str) -> "Stringy":
        return replace(self, value=value)

    def pipe(self, *operations: Callable[[str], str]) -> "Stringy":
        """
        Apply plain `str -> str` callables in order.

        Example:
            >>> str(Stringy(' Foo ').pipe(str.strip, str.upper))
            'FOO'
        """
        return self._derive(helpers.chain_operations(self.value, operations))

    ## Trimming
    def trim(self, characters: Optional[str] = None) -> "Stringy":
        return self._derive(self.value.strip(characters))

    def ltrim(self, characters: Optional[str] = None) -> "Stringy":
        return self._derive(self.value.lstrip(characters))

    def rtrim(self, characters: Optional[str] = None) -> "Stringy":
        return self._derive(self.value.rstrip(characters))

    chop = rtrim

    def squish(self) -> "Stringy":
        """Trim and collapse internal whitespace to single spaces."""
        return self._derive(helpers.squish(self.value))

    ## Padding and repetition
    def pad(self, length: int, pad_string: Optional[str] = None, side: PadSide = PadSide.RIGHT) -> "Stringy":
        """
        Pad the string to a target length.

        The pad string is repeated and truncated to fit. When padding both sides,
        the odd character goes to the right.

        Args:
            length: Target length; shorter targets leave the string unchanged
            pad_string: Filler (defaults to the `pad_string` setting)
            side: `PadSide` to fill

        Raises:
            ValueError: If the pad string is empty

        Example:
            >>> str(Stringy('5').pad(3, '0', PadSide.LEFT))
            '005'
            >>> str(Stringy('ab').pad(7, '-=', PadSide.BOTH))
            '-=ab-=-'
        """
        pad_string = self.settings.pad_string if pad_string is None else pad_string
        if not pad_string:
            raise ValueError('Padding string must not be empty.')

        missing = length - len(self.value)
        if missing <= 0:
            return self

        def _fill(size: int) -> str:
            return (pad_string * size)[:size]

        side = PadSide(side)
        if side is PadSide.LEFT:
            return self._derive(_fill(missing) + self.value)
        elif side is PadSide.RIGHT:
            return self._derive(self.value + _fill(missing))
        else:
            left = missing // 2
            return self._derive(_fill(left) + self.value + _fill(missing - left))

    def repeat(self, times: int) -> "Stringy":
        if times < 0:
            raise ValueError(f'Repeat count must not be negative, got {times}.')
        return self._derive(self.value * times)

    def reverse(self) -> "Stringy":
        return self._derive(self.value[::-1])

    def rot13(self) -> "Stringy":
        return self._derive(codecs.encode(self.value, 'rot13'))

    ## Case
    def lower(self) -> "Stringy":
        return self._derive(self.value.lower())

    def upper(self) -> "Stringy":
        return self._derive(self.value.upper())

    def swapcase(self) -> "Stringy":
        return self._derive(self.value.swapcase())

    def lcfirst(self) -> "Stringy":
        return self._derive(self.value[:1].lower() + self.value[1:])

    def ucfirst(self) -> "Stringy":
        return self._derive(self.value[:1].upper() + self.value[1:])

    def ucwords(self, delimiters: Optional[str] = None) -> "Stringy":
        """
        Uppercase the first character and every character that follows a delimiter.

        Example:
            >>> str(Stringy('hello world-wide').ucwords())
            'Hello World-wide'
            >>> str(Stringy('hello world-wide').ucwords(' -'))
            'Hello World-Wide'
        """
        delimiters = self.settings.ucwords_delimiters if delimiters is None else delimiters
        value = self.value
        characters = [
            char.upper() if index == 0 or value[index - 1] in delimiters else char
            for index, char in enumerate(value)
        ]
        return self._derive(''.join(characters))

    def convert_case(self, from_case, to_case) -> "Stringy":
        """
        Convert the identifier between case styles.

        See `stringy.cases.convert_case`.

        Example:
            >>> str(Stringy('my-variable-name').convert_case(CaseStyle.KEBAB, CaseStyle.CAMEL))
            'myVariableName'
        """
        return self._derive(cases.convert_case(self.value, from_case, to_case))

    def dot_notation_to_camel_case(self) -> "Stringy":
        return self._derive(cases.dot_notation_to_camel_case(self.value))

    ## Search
    def position(self, needle: str, offset: int = 0, case_insensitive: bool = False) -> Optional[int]:
        """
        Find the first occurrence of a substring.

        Args:
            needle: Substring to look for
            offset: Index to start searching from; negative values count from the end
            case_insensitive: Ignore case when matching

        Returns:
            Zero-based index of the first occurrence, or None if not found

        Example:
            >>> Stringy('abcabc').position('c', 3)
            5
            >>> Stringy('abc').position('x') is None
            True
        """
        if offset < 0:
            offset = max(len(self.value) + offset, 0)

        if case_insensitive:
            match = re.compile(re.escape(needle), re.I).search(self.value, offset)
            return match.start() if match else None

        index = self.value.find(needle, offset)
        return None if index == -1 else index

    def last_position(self, needle: str, offset: int = 0, case_insensitive: bool = False) -> Optional[int]:
        """
        Find the last occurrence of a substring.

        Args:
            needle: Substring to look for
            offset: Non-negative: ignore matches starting before this index.
                Negative: ignore matches starting after `len + offset`.
            case_insensitive: Ignore case when matching

        Returns:
            Zero-based index of the last occurrence, or None if not found

        Example:
            >>> Stringy('abcabc').last_position('b')
            4
            >>> Stringy('abcabc').last_position('b', -3)
            1
        """
        size = len(self.value)
        if offset < 0:
            start, limit = 0, size + offset
        else:
            start, limit = offset, size
        if limit < start:
            return None

        if case_insensitive:
            pattern = re.compile(f"(?={re.escape(needle)})", re.I)
            starts = [match.start() for match in pattern.finditer(self.value, start)]
            starts = [index for index in starts if index <= limit]
            return starts[-1] if starts else None

        index = self.value.rfind(needle, start, limit + len(needle))
        return None if index == -1 else index

    def positions(self, needle: str, case_insensitive: bool = False) -> List[int]:
        """
        Find every non-overlapping occurrence of a substring.

        See `stringy.positions.all_positions`.
        """
        return all_positions(self.value, needle, case_insensitive)

    def contains(self, needle: str, case_insensitive: bool = False) -> bool:
        return self.position(needle, case_insensitive=case_insensitive) is not None

    def starts_with(self, prefix: str) -> bool:
        return self.value.startswith(prefix)

    def ends_with(self, suffix: str) -> bool:
        return self.value.endswith(suffix)

    def substr_count(self, needle: str) -> int:
        """
        Count non-overlapping occurrences of a substring.

        Raises:
            ValueError: If the needle is empty
        """
        if not needle:
            raise ValueError('Substring must not be empty.')
        return self.value.count(needle)

    ## Replacement
    def replace(self, search: str, replacement: str, case_insensitive: bool = False) -> "Stringy":
        """
        Replace every literal occurrence of a substring.

        Example:
            >>> str(Stringy('Hello hello').replace('HELLO', 'bye', case_insensitive=True))
            'bye bye'
        """
        if not search:
            return self
        if case_insensitive:
            pattern = re.compile(re.escape(search), re.I)
            return self._derive(pattern.sub(lambda _: replacement, self.value))
        return self._derive(self.value.replace(search, replacement))

    def replace_all(self, replacements: Dict[str, str]) -> "Stringy":
        return self._derive(helpers.replace_all(replacements, self.value))

    def regex_replace(self, pattern: str, replacement: str, flags: int = 0) -> "Stringy":
        """
        Replace every match of a regular expression; back-references are allowed.

        Example:
            >>> str(Stringy('fooBar').regex_replace('([A-Z])', r'-\\1'))
            'foo-Bar'
        """
        return self._derive(re.sub(pattern, replacement, self.value, flags=flags))

    def regex_match(self, pattern: str, flags: int = 0) -> bool:
        return re.search(pattern, self.value, flags) is not None

    def regex_split(self, pattern: str, flags: int = 0) -> List[str]:
        return re.split(pattern, self.value, flags=flags)

    ## Substrings
    def substr(self, start: int, length: Optional[int] = None) -> "Stringy":
        """
        Return part of the string.

        Args:
            start: Start index; negative values count from the end
            length: Number of characters; negative values stop that many characters
                before the end; None runs to the end

        Example:
            >>> str(Stringy('abcdef').substr(-3, 2))
            'de'
            >>> str(Stringy('abcdef').substr(1, -2))
            'bcd'
        """
        size = len(self.value)
        start = max(size + start, 0) if start < 0 else min(start, size)

        if length is None:
            end = size
        elif length < 0:
            end = max(size + length, start)
        else:
            end = min(start + length, size)
        return self._derive(self.value[start:end])

    def split(self, delimiter: str, limit: Optional[int] = None) -> List[str]:
        """
        Split the string by a delimiter.

        Args:
            delimiter: Non-empty separator
            limit: Positive: at most this many parts, the last holding the remainder.
                Negative: all parts except the last `-limit`. Zero is treated as one.

        Example:
            >>> Stringy('a,b,c,d').split(',', 2)
            ['a', 'b,c,d']
            >>> Stringy('a,b,c,d').split(',', -1)
            ['a', 'b', 'c']
        """
        if not delimiter:
            raise ValueError('Delimiter must not be empty.')

        if limit is None:
            return self.value.split(delimiter)
        elif limit < 0:
            return self.value.split(delimiter)[:limit]
        else:
            return self.value.split(delimiter, max(limit, 1) - 1)

    def chunk(self, size: int = 1) -> List[str]:
        """
        Split the string into chunks of a fixed length; the last chunk may be shorter.

        Example:
            >>> Stringy('abcde').chunk(2)
            ['ab', 'cd', 'e']
        """
        if size < 1:
            raise ValueError(f'Chunk size must be positive, got {size}.')
        return [self.value[i:i + size] for i in range(0, len(self.value), size)]

    def tokens(self, delimiters: str) -> List[str]:
        """
        Split the string on any of the delimiter characters, dropping empty tokens.

        Example:
            >>> Stringy('  a b,,c ').tokens(' ,')
            ['a', 'b', 'c']
        """
        if not delimiters:
            return [self.value] if self.value else []
        pattern = f"[{re.escape(delimiters)}]+"
        return [token for token in re.split(pattern, self.value) if token]

    def token(self, delimiters: str) -> str:
        """
        Return the first token delimited by any of the delimiter characters.

        Raises:
            OperationFailedError: If the string holds no token
        """
        tokens = self.tokens(delimiters)
        if not tokens:
            raise OperationFailedError('token')
        return tokens[0]

    ## Multibyte
    def length(self) -> int:
        """Number of characters (code points)."""
        return len(self.value)

    def byte_length(self, encoding: Optional[str] = None) -> int:
        """
        Number of bytes once encoded.

        Example:
            >>> Stringy('café').byte_length()
            5
        """
        encoding = encoding or self.settings.encoding
        return len(self.value.encode(encoding, self.settings.errors))

    def width(self) -> int:
        """
        Display width, counting wide and fullwidth East Asian characters as two columns.

        Example:
            >>> Stringy('日本a').width()
            5
        """
        return sum(map(_char_width, self.value))

    def truncate_width(self, width: int, marker: str = '') -> "Stringy":
        """
        Truncate the string to a display width, appending a marker when truncated.

        Example:
            >>> str(Stringy('Hello World').truncate_width(8, '...'))
            'Hello...'
        """
        if self.width() <= width:
            return self

        budget = width - sum(map(_char_width, marker))
        kept, used = [], 0
        for char in self.value:
            used += _char_width(char)
            if used > budget:
                break
            kept.append(char)
        return self._derive(''.join(kept) + marker)

    def scrub(self, encoding: Optional[str] = None) -> "Stringy":
        """Replace characters that cannot be encoded with the codec's replacement character."""
        encoding = encoding or self.settings.encoding
        return self._derive(self.value.encode(encoding, 'replace').decode(encoding))

    ## Comparison
    def compare(self, other: str, case_insensitive: bool = False, natural: bool = False) -> int:
        """
        Compare with another string.

        Args:
            other: String to compare with
            case_insensitive: Ignore case
            natural: Order digit runs by numeric value ('img2' < 'img10')

        Returns:
            -1, 0 or 1

        Example:
            >>> Stringy('img12').compare('img10', natural=True)
            1
            >>> Stringy('img2').compare('img10', natural=True)
            -1
        """
        left, right = self.value, str(other)
        if case_insensitive:
            left, right = left.lower(), right.lower()
        if natural:
            left_key, right_key = _natural_key(left), _natural_key(right)
            return (left_key > right_key) - (left_key < right_key)
        return (left > right) - (left < right)

    def levenshtein(self, other: str) -> int:
        """
        Edit distance to another string (insertions, deletions and substitutions).

        Example:
            >>> Stringy('kitten').levenshtein('sitting')
            3
        """
        source, target = self.value, str(other)
        previous = list(range(len(target) + 1))
        for i, source_char in enumerate(source, start=1):
            current = [i]
            for j, target_char in enumerate(target, start=1):
                current.append(min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (source_char != target_char)
                ))
            previous = current
        return previous[-1]

    def similarity(self, other: str) -> float:
        """Similarity to another string as a percentage."""
        return SequenceMatcher(None, self.value, str(other)).ratio() * 100

    def word_count(self) -> int:
        """
        Count words made of letters, apostrophes and hyphens.

        Example:
            >>> Stringy("Hello fri3nd, you're looking good today!").word_count()
            7
        """
        return len(WORD_PATTERN.findall(self.value))

    def wrap(self, width: Optional[int] = None, break_: str = '\n', cut: bool = False) -> "Stringy":
        """
        Wrap lines at a given width, keeping existing line breaks.

        Args:
            width: Maximum line width (defaults to the `wrap_width` setting)
            break_: Line break to insert
            cut: Split words longer than the width

        Example:
            >>> str(Stringy('The quick brown fox').wrap(10))
            'The quick\\nbrown fox'
        """
        width = width or self.settings.wrap_width
        lines = []
        for paragraph in self.value.split(break_):
            wrapped = textwrap.wrap(
                paragraph,
                width,
                break_long_words=cut,
                break_on_hyphens=False
            )
            lines.extend(wrapped or [''])
        return self._derive(break_.join(lines))

    ## Slashes
    def add_slashes(self) -> "Stringy":
        """
        Escape quotes, backslashes and NUL characters with a backslash.

        Example:
            >>> str(Stringy("O'Reilly").add_slashes())
            "O\\\\'Reilly"
        """
        escaped = [
            '\\' + ('0' if char == '\0' else char) if char in SLASHED_CHARACTERS else char
            for char in self.value
        ]
        return self._derive(''.join(escaped))

    def strip_slashes(self) -> "Stringy":
        def _unescape(match) -> str:
            return '\0' if match.group(1) == '0' else match.group(1)
        return self._derive(ESCAPE_PATTERN.sub(_unescape, self.value))

    ## Base conversion
    def convert_base(self, from_base, to_base) -> "Stringy":
        """
        Convert between binary and hexadecimal encodings.

        See `stringy.bases.convert_base`.
        """
        return self._derive(bases.convert_base(self.value, from_base, to_base, self.settings))

    def bin_to_hex(self) -> "Stringy":
        return self.convert_base(Base.BIN, Base.HEX)

    def hex_to_bin(self) -> "Stringy":
        return self.convert_base(Base.HEX, Base.BIN)
