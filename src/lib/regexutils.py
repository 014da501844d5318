"""
Regular expression helpers

Small utilities for building patterns out of literal text and for probing
text against the pattern table. They do not depend on the converter and can
be used on their own.
"""

import re
from typing import Union

from .patterns import PATTERNS


# The characters escape() guards; a deliberately smaller set than re.escape()
METACHARACTERS = re.compile(r'[.*+?^${}()|\[\]\\]')

# JavaScript-style flag letters. 'g' (global) is how sub/finditer already work.
FLAG_LETTERS: dict[str, int] = {
    'g': 0,
    'i': re.IGNORECASE,
    'm': re.MULTILINE,
    's': re.DOTALL,
}


def escape(text: str) -> str:
    r"""
    Prefix every regex metacharacter with a backslash

    Only . * + ? ^ $ { } ( ) | [ ] and \ are escaped; everything else is
    returned as is.

    Example:
        >>> escape('a.b*c')
        'a\\.b\\*c'
    """
    return METACHARACTERS.sub(r'\\\g<0>', text)


def flags_parse(flags: Union[int, str]) -> int:
    """
    Convert flags given as letters ("gim") or as an re flag int to an int

    Raises:
        ValueError: If a letter has no re equivalent
    """
    if isinstance(flags, int):
        return flags

    value = 0
    for letter in flags:
        if letter not in FLAG_LETTERS:
            raise ValueError(f"Unsupported regex flag '{letter}' in '{flags}'")
        value |= FLAG_LETTERS[letter]
    return value


def delimiterPattern_create(delimiter: str, flags: Union[int, str] = 'gim') -> re.Pattern:
    r"""
    Build a pattern matching text wrapped in a literal delimiter

    The wrapped text is captured in group 1 and may not contain any
    character of the delimiter.

    Args:
        delimiter: Literal opening/closing delimiter (e.g., "**", "==")
        flags: re flag int or letters; defaults to case-insensitive multiline

    Example:
        >>> delimiterPattern_create('**').pattern
        '\\*\\*([^\\*]+)\\*\\*'
    """
    if not delimiter:
        raise ValueError("Delimiter must be a non-empty string")

    escaped = escape(delimiter)
    # A '-' between two characters would form a range inside the class
    excluded = ''.join(
        '\\-' if char == '-' else escape(char) for char in dict.fromkeys(delimiter)
    )
    return re.compile(f'{escaped}([^{excluded}]+){escaped}', flags_parse(flags))


def markdownPattern_is(text: str, pattern_name: str) -> bool:
    """
    Check whether a named pattern matches anywhere in text

    Returns:
        True on a match; False for no match or an unknown pattern name
    """
    pattern = PATTERNS.get(pattern_name)
    if pattern is None:
        return False
    return pattern.search(text) is not None


def matches_extract(text: str, pattern: Union[re.Pattern, str]) -> list[re.Match]:
    """
    Collect every non-overlapping match of pattern in text

    Args:
        text: Text to scan
        pattern: Compiled pattern or pattern source

    Returns:
        List of re.Match objects in order of appearance
    """
    if isinstance(pattern, str):
        pattern = re.compile(pattern)
    return list(pattern.finditer(text))
