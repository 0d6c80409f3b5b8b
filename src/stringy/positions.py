"""Substring location helpers.
"""

__docformat__ = 'google'

__all__ = [
    'all_positions'
]

import re
from typing import List

def all_positions(host: str, needle: str, case_insensitive: bool = False) -> List[int]:
    """
    Find the start index of every non-overlapping occurrence of a substring.

    Note:
        Each search restarts after the end of the previous match, so overlapping
        occurrences are not counted. The host string is never modified.

    Args:
        host: String to search
        needle: Substring to look for
        case_insensitive: Ignore case when matching

    Returns:
        List of zero-based character offsets, empty if the needle is empty or absent

    Example:
        >>> all_positions('abcabcabc', 'abc')
        [0, 3, 6]
        >>> all_positions('aaaa', 'aa')
        [0, 2]
        >>> all_positions('abc', '')
        []
        >>> all_positions('Foo-foo', 'FOO', case_insensitive=True)
        [0, 4]
    """
    if not needle:
        return []

    if case_insensitive:
        pattern = re.compile(re.escape(needle), re.I)
        return [match.start() for match in pattern.finditer(host)]

    positions = []
    position = host.find(needle)
    while position != -1:
        positions.append(position)
        position = host.find(needle, position + len(needle))
    return positions
