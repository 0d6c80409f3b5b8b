"""Identifier case style conversion.

This module converts identifiers between camelCase, PascalCase, snake_case and
kebab-case. Every conversion is routed through kebab-case: the source style is
first normalized to kebab-case (`to_kebab`), then expanded to the target style
(`from_kebab`).

Note:
    Each ASCII uppercase letter is treated as a word boundary, so acronyms do not
    round-trip losslessly through snake_case or kebab-case: `userID` normalizes to
    `user-i-d` and expands back to `userID`, but `user_id` expands to `userId`.
"""

__docformat__ = 'google'

__all__ = [
    'validate_cases',
    'to_kebab',
    'from_kebab',
    'convert_case',
    'dot_notation_to_camel_case'
]

from typing import Tuple
from loguru import logger
from stringy.entities import CaseStyle
from stringy.exceptions import SameCaseError
from stringy.positions import all_positions
from stringy.patterns import (
    UPPERCASE_PATTERN,
    KEBAB_SEPARATOR,
    SNAKE_SEPARATOR,
    DOT_SEPARATOR
)

def validate_cases(from_case, to_case) -> Tuple[CaseStyle, CaseStyle]:
    """
    Resolve and validate a pair of case styles.

    Args:
        from_case: Source `CaseStyle` or its string value
        to_case: Target `CaseStyle` or its string value

    Returns:
        Tuple of resolved source and target styles

    Raises:
        InvalidCaseError: If either style is not recognized
        SameCaseError: If both styles are the same
    """
    source = CaseStyle.resolve(from_case)
    target = CaseStyle.resolve(to_case)
    if source is target:
        raise SameCaseError(source.value)
    return source, target

def _uppercase_first(value: str) -> str:
    return value[:1].upper() + value[1:]

def _lowercase_first(value: str) -> str:
    return value[:1].lower() + value[1:]

def _hyphenate(match) -> str:
    return KEBAB_SEPARATOR + match.group(1).lower()

def _capitalize_after(value: str, separator: str) -> str:
    """
    Uppercase the character after each separator, then drop the separators.

    Positions are located on the unmodified string and the result is built in a
    new buffer, so consecutive separators and multi-character uppercase forms
    cannot shift later boundaries.

    Example:
        >>> _capitalize_after('user-i-d', '-')
        'userID'
    """
    boundaries = {position + len(separator) for position in all_positions(value, separator)}
    characters = [
        char.upper() if index in boundaries else char
        for index, char in enumerate(value)
    ]
    return ''.join(characters).replace(separator, '')

def to_kebab(value: str, from_case) -> str:
    """
    Normalize an identifier to kebab-case.

    Args:
        value: Identifier in the source style
        from_case: Source `CaseStyle` or its string value

    Returns:
        Identifier in kebab-case

    Example:
        >>> to_kebab('MyVariableName', CaseStyle.PASCAL)
        'my-variable-name'
        >>> to_kebab('userID', CaseStyle.CAMEL)
        'user-i-d'
        >>> to_kebab('my_variable_name', 'snake_case')
        'my-variable-name'
    """
    source = CaseStyle.resolve(from_case)

    if source is CaseStyle.KEBAB:
        return value
    elif source is CaseStyle.SNAKE:
        return value.replace(SNAKE_SEPARATOR, KEBAB_SEPARATOR)
    elif source is CaseStyle.PASCAL:
        value = _lowercase_first(value)

    return UPPERCASE_PATTERN.sub(_hyphenate, value)

def from_kebab(value: str, to_case) -> str:
    """
    Expand a kebab-case identifier to another style.

    Args:
        value: Identifier in kebab-case
        to_case: Target `CaseStyle` or its string value

    Returns:
        Identifier in the target style

    Example:
        >>> from_kebab('my-variable-name', CaseStyle.CAMEL)
        'myVariableName'
        >>> from_kebab('my-variable-name', CaseStyle.PASCAL)
        'MyVariableName'
        >>> from_kebab('my-variable-name', 'snake_case')
        'my_variable_name'
    """
    target = CaseStyle.resolve(to_case)

    if target is CaseStyle.KEBAB:
        return value
    elif target is CaseStyle.SNAKE:
        return value.replace(KEBAB_SEPARATOR, SNAKE_SEPARATOR)

    result = _capitalize_after(value, KEBAB_SEPARATOR)
    if target is CaseStyle.PASCAL:
        return _uppercase_first(result)
    return result

def convert_case(value: str, from_case, to_case) -> str:
    """
    Convert an identifier from one case style to another.

    Args:
        value: Identifier in the source style
        from_case: Source `CaseStyle` or its string value
        to_case: Target `CaseStyle` or its string value

    Returns:
        Identifier in the target style

    Raises:
        InvalidCaseError: If either style is not recognized
        SameCaseError: If both styles are the same

    Example:
        >>> convert_case('my-variable-name', CaseStyle.KEBAB, CaseStyle.CAMEL)
        'myVariableName'
        >>> convert_case('myVariableName', 'camelCase', 'PascalCase')
        'MyVariableName'
        >>> convert_case('MyVariableName', CaseStyle.PASCAL, CaseStyle.SNAKE)
        'my_variable_name'
        >>> convert_case('word', CaseStyle.CAMEL, CaseStyle.PASCAL)
        'Word'
    """
    source, target = validate_cases(from_case, to_case)
    logger.debug("Converting {!r} from {} to {}", value, source.value, target.value)
    return from_kebab(to_kebab(value, source), target)

def dot_notation_to_camel_case(value: str) -> str:
    """
    Convert a dot-separated path to camelCase.

    Example:
        >>> dot_notation_to_camel_case('some.dotted.path')
        'someDottedPath'
        >>> dot_notation_to_camel_case('plain')
        'plain'
    """
    return _capitalize_after(value, DOT_SEPARATOR)
