"""
Basic converter tests - empty input, headers, rules, paragraphs

Tests the simplest documents and the block assembly that wraps them.
"""

import pytest

from mdparse import convert, Converter, ConversionOptions


class TestEmptyInput:
    """Test that absent or empty input short-circuits to an empty string"""

    def test_empty_string(self):
        """Empty string converts to empty string"""
        assert convert('') == ''

    def test_none(self):
        """None converts to empty string"""
        assert convert(None) == ''

    def test_no_argument(self):
        """Calling with no text at all converts to empty string"""
        assert convert() == ''

    def test_non_string(self):
        """Non-string input is treated as absent, not an error"""
        assert convert(42) == ''
        assert convert(['# not text']) == ''

    def test_whitespace_only(self):
        """Only whitespace produces no blocks"""
        assert convert('   \n\n  \t  ') == ''


class TestHeaders:
    """Test # headers and underlined headers"""

    @pytest.mark.parametrize('level', range(1, 7))
    def test_each_level(self, level):
        """n hashes, a space and text give an h<n> element"""
        assert convert('#' * level + ' T') == f'<h{level}>T</h{level}>'

    def test_several_headers(self):
        """Consecutive header lines stay one block, unwrapped"""
        markdown = '# Header 1\n## Header 2\n### Header 3'
        expected = '<h1>Header 1</h1>\n<h2>Header 2</h2>\n<h3>Header 3</h3>'
        assert convert(markdown) == expected

    def test_seven_hashes_is_not_a_header(self):
        """More than six hashes is plain text"""
        assert convert('####### seven') == '<p>####### seven</p>'

    def test_hash_without_space_is_not_a_header(self):
        """#hashtag is not a header"""
        assert convert('#hashtag') == '<p>#hashtag</p>'

    def test_header_with_emphasis(self):
        """Inline formatting works inside headers"""
        assert convert('# Hello **World**') == '<h1>Hello <strong>World</strong></h1>'

    def test_underlined_h1(self):
        """Text over a line of '=' is an h1"""
        assert convert('Big Header\n==========') == '<h1>Big Header</h1>'

    def test_underlined_h2(self):
        """Text over a line of '-' is an h2, not text plus a rule"""
        assert convert('Smaller Header\n--------------') == '<h2>Smaller Header</h2>'

    def test_short_underline_is_not_a_header(self):
        """Two '=' are not enough"""
        assert '<h1>' not in convert('Title\n==')

    def test_code_block_is_not_underlined_header_text(self):
        """A fenced block over a line of '=' stays a code block"""
        html = convert('```\nx\n```\n===')
        assert '<h1>' not in html
        assert html == '<pre><code>x</code></pre>\n==='

    def test_inline_code_in_underlined_header(self):
        """A line holding inline code can still be underlined as a header"""
        assert convert('`code` title\n===') == '<h1><code>code</code> title</h1>'


class TestHorizontalRules:
    """Test rule lines"""

    @pytest.mark.parametrize('rule', ['---', '***', '___', '-----'])
    def test_rule_alone(self, rule):
        """A line of three or more rule characters is <hr>"""
        assert convert(rule) == '<hr>'

    def test_rule_after_blank_line(self):
        """A dash rule after a blank line is a rule"""
        assert convert('Para\n\n---') == '<p>Para</p>\n\n<hr>'

    def test_rule_under_header(self):
        """A dash rule under a # header is a rule, not an underline"""
        assert convert('# Title\n---') == '<h1>Title</h1>\n<hr>'

    def test_rule_under_list_item(self):
        """A dash rule under a list item does not turn the item into a header"""
        html = convert('- item\n---')
        assert '<h2>' not in html
        assert '<hr>' in html
        assert '<li>item</li>' in html


class TestParagraphs:
    """Test paragraph splitting and wrapping"""

    def test_single_line(self):
        """Plain text is wrapped in <p>"""
        assert convert('Hello world') == '<p>Hello world</p>'

    def test_line_breaks_enabled(self):
        """Single newlines become <br> by default"""
        assert convert('line one\nline two') == '<p>line one<br>line two</p>'

    def test_line_breaks_disabled(self):
        """With breaks off, single newlines are kept"""
        html = convert('line one\nline two', {'breaks': False})
        assert html == '<p>line one\nline two</p>'

    def test_blank_line_separates_paragraphs(self):
        """Blank lines split paragraphs; blocks are joined by a blank line"""
        assert convert('para one\n\npara two') == '<p>para one</p>\n\n<p>para two</p>'

    def test_whitespace_only_separator(self):
        """A line holding only spaces also separates paragraphs"""
        assert convert('one\n   \ntwo') == '<p>one</p>\n\n<p>two</p>'

    def test_surrounding_blank_lines_dropped(self):
        """Leading and trailing blank lines produce no empty blocks"""
        assert convert('\n\n\nHello\n\n\n') == '<p>Hello</p>'

    def test_block_elements_not_wrapped(self):
        """Headers next to paragraphs are not nested inside <p>"""
        html = convert('# Title\n\nBody text')
        assert html == '<h1>Title</h1>\n\n<p>Body text</p>'

    def test_crlf_input(self):
        """Windows line endings convert like Unix ones"""
        assert convert('# A\r\n\r\ntext\r\nmore') == convert('# A\n\ntext\nmore')


class TestOptionsHandling:
    """Test how convert() takes options"""

    def test_inert_flags(self):
        """sanitize and tables are accepted but change nothing"""
        markdown = '# T\n\n| a | b |\n\n<b>raw</b> **x**'
        assert convert(markdown, {'sanitize': False, 'tables': False}) == convert(markdown)

    def test_unknown_keys_ignored(self):
        """Unrecognized option names are ignored"""
        assert convert('a\nb', {'nonsense': True}) == '<p>a<br>b</p>'

    def test_options_instance(self):
        """A ConversionOptions instance is accepted directly"""
        options = ConversionOptions(breaks=False)
        assert convert('a\nb', options) == '<p>a\nb</p>'

    def test_converter_reusable(self):
        """One Converter gives the same result on repeated calls"""
        converter = Converter({'autoLinks': False})
        first = converter.convert('Visit https://example.com **now**')
        second = converter.convert('Visit https://example.com **now**')
        assert first == second == '<p>Visit https://example.com <strong>now</strong></p>'
