"""
Regex utility tests - escaping, delimiter patterns, pattern lookup

Tests the helpers that work independently of the conversion pipeline.
"""

import re

import pytest

from mdparse import escape, delimiterPattern_create, markdownPattern_is, matches_extract, PATTERNS


class TestEscape:
    """Test metacharacter escaping"""

    def test_all_metacharacters(self):
        """Each metacharacter gets exactly one backslash, order preserved"""
        source = 'test.*+?^${}()|[]\\'
        expected = 'test\\.\\*\\+\\?\\^\\$\\{\\}\\(\\)\\|\\[\\]\\\\'
        assert escape(source) == expected

    def test_plain_text_unchanged(self):
        """Letters, digits, spaces and other punctuation pass through"""
        assert escape('Hello world - 42 #!') == 'Hello world - 42 #!'

    def test_escaped_text_matches_literally(self):
        """The escaped string matches the original as a literal"""
        literal = 'Hello [world]! (.*+?)'
        assert re.fullmatch(escape(literal), literal)


class TestDelimiterPattern:
    """Test patterns built around a literal delimiter"""

    def test_double_star(self):
        """'**' captures the wrapped text"""
        pattern = delimiterPattern_create('**')
        match = pattern.search('some **bold** text')
        assert match.group(1) == 'bold'

    def test_default_flags(self):
        """Defaults to case-insensitive multiline"""
        pattern = delimiterPattern_create('==')
        assert pattern.flags & re.IGNORECASE
        assert pattern.flags & re.MULTILINE

    def test_letter_flags(self):
        """Flag letters map to re flags; 'g' is accepted and implied"""
        pattern = delimiterPattern_create('~~', 'gi')
        assert pattern.flags & re.IGNORECASE
        assert not pattern.flags & re.MULTILINE

    def test_int_flags(self):
        """re flag ints are used as given"""
        pattern = delimiterPattern_create('~~', re.DOTALL)
        assert pattern.flags & re.DOTALL
        assert not pattern.flags & re.IGNORECASE

    def test_unknown_flag_letter(self):
        """A letter with no re equivalent is rejected"""
        with pytest.raises(ValueError):
            delimiterPattern_create('**', 'gy')

    def test_empty_delimiter(self):
        """An empty delimiter is rejected"""
        with pytest.raises(ValueError):
            delimiterPattern_create('')

    def test_hyphen_delimiter(self):
        """A hyphen is excluded literally, not read as a range"""
        pattern = delimiterPattern_create('-')
        assert [m.group(1) for m in pattern.finditer('x-ab-c-d e-f')] == ['ab', 'd e']

    def test_wrapped_text_cannot_contain_delimiter(self):
        """The captured text never contains a delimiter character"""
        pattern = delimiterPattern_create('|')
        assert [m.group(1) for m in pattern.finditer('|a|b|')] == ['a']


class TestMarkdownPatternIs:
    """Test named pattern lookup"""

    def test_h1_detected(self):
        """'# Header' is an h1"""
        assert markdownPattern_is('# Header', 'h1') is True

    def test_h2_detected(self):
        """'## Header' is an h2 but not an h1"""
        assert markdownPattern_is('## Header', 'h2') is True
        assert markdownPattern_is('## Header', 'h1') is False

    def test_unknown_name(self):
        """An unknown pattern name is a negative result, not an error"""
        assert markdownPattern_is('# Header', 'h7') is False
        assert markdownPattern_is('# Header', '') is False

    def test_repeated_calls_agree(self):
        """Lookups carry no match state between calls"""
        results = [markdownPattern_is('text with **bold**', 'bold') for _ in range(3)]
        assert results == [True, True, True]

    def test_match_anywhere(self):
        """A match on any line counts"""
        assert markdownPattern_is('intro\n\n> quote', 'blockquote') is True


class TestMatchesExtract:
    """Test collecting all matches"""

    def test_compiled_pattern(self):
        """Every non-overlapping match is returned in order"""
        matches = matches_extract('**a** and **b**', PATTERNS.get('bold'))
        assert [m.group(1) for m in matches] == ['a', 'b']

    def test_pattern_string(self):
        """A pattern source string is compiled for the caller"""
        matches = matches_extract('a1 b22 c333', r'\d+')
        assert [m.group(0) for m in matches] == ['1', '22', '333']

    def test_no_matches(self):
        """No match gives an empty list"""
        assert matches_extract('plain', PATTERNS.get('link')) == []

    def test_multiline_pattern(self):
        """Line-anchored patterns match on every line"""
        matches = matches_extract('- a\n- b\ntext\n- c', PATTERNS.get('unorderedList'))
        assert [m.group(1) for m in matches] == ['a', 'b', 'c']
