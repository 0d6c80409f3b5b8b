"""Small text helpers shared across stringy modules.
"""

__docformat__ = 'google'

__all__ = [
    'chain_operations',
    'replace_all',
    'squish'
]

from functools import reduce
from typing import Callable, Dict, Iterable
from stringy.patterns import WHITESPACE_PATTERN

def chain_operations(text: str, operations: Iterable[Callable[[str], str]]) -> str:
    """
    Apply each operation to the output of the previous one.

    Example:
        >>> chain_operations('  Foo ', [str.strip, str.lower])
        'foo'
    """
    return reduce(lambda result, operation: operation(result), operations, text)

def replace_all(replacements: Dict[str, str], text: str) -> str:
    """
    Replace every literal key of a dictionary with its value, in insertion order.

    Example:
        >>> replace_all({'_': '-', ' ': ''}, 'my_var name')
        'my-varname'
    """
    for search, replacement in replacements.items():
        text = text.replace(search, replacement)
    return text

def squish(text: str) -> str:
    """
    Trim the string and collapse internal whitespace runs to a single space.

    Example:
        >>> squish('  my   spaced\\tvalue ')
        'my spaced value'
    """
    return WHITESPACE_PATTERN.sub(' ', text).strip()
