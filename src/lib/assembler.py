"""
Block assembler for mdparse

Turns the line-oriented output of the rewrite passes into block structure:
list items are gathered into list containers, adjacent quote lines into one
blockquote, and the remaining text into paragraphs.
"""

import re

from ..config import appsettings
from ..models.options import ConversionOptions
from .log import LOG


# One run of list items separated only by whitespace, with the list container
# it already sits in, if any. Items never span lines.
LIST_RUN = re.compile(
    r'(<(?:ul|ol)\b[^>]*>\s*)?'
    r'<li\b[^>]*>[^\n]*?</li>(?:\s*<li\b[^>]*>[^\n]*?</li>)*',
    re.IGNORECASE,
)
LIST_SEAM = re.compile(r'</ul>\s*<ul>', re.IGNORECASE)

QUOTE_SEAM = re.compile(r'</blockquote>\s*<blockquote>', re.IGNORECASE)

PARAGRAPH_SPLIT = re.compile(r'\n\s*\n')

BLOCK_START = re.compile(
    r'^(?:<(?:h[1-6]|ul|ol|li|pre|div|blockquote|hr|p|table)\b'
    + r'|' + re.escape(appsettings.placeholder_prefix) + r'C\d+' + re.escape(appsettings.placeholder_suffix)
    + r')',
    re.IGNORECASE,
)


class BlockAssembler:
    """
    Assembles intermediate converter output into block-level HTML

    Responsibilities:
    - Wrap runs of <li> elements in a single <ul>
    - Merge consecutive blockquotes
    - Split text on blank lines and wrap non-block candidates in <p>
    """

    def __init__(self, options: ConversionOptions) -> None:
        self.options = options

    def lists_wrap(self, text: str) -> str:
        """
        Wrap each run of list items in <ul></ul>

        Runs that already sit directly inside a list container are left
        alone, so converting emitted HTML again does not nest lists.
        Lists separated only by whitespace collapse into one.
        """

        def run_wrap(match: re.Match) -> str:
            if match.group(1):
                return match.group(0)
            return f'<ul>{match.group(0)}</ul>'

        text = LIST_RUN.sub(run_wrap, text)
        return LIST_SEAM.sub('', text)

    def quotes_merge(self, text: str) -> str:
        """Collapse directly adjacent blockquote boundaries into one quote"""
        return QUOTE_SEAM.sub('', text)

    def paragraphs_split(self, text: str) -> list[str]:
        """Split text into paragraph candidates on blank lines"""
        return PARAGRAPH_SPLIT.split(text)

    def paragraph_assemble(self, candidate: str) -> str:
        """
        Turn one candidate into its final form

        Returns:
            '' for blank candidates, the candidate unchanged when it already
            starts with a block-level element, otherwise a <p> element
        """
        candidate = candidate.strip()
        if not candidate:
            return ''

        if BLOCK_START.match(candidate):
            return candidate

        if self.options.breaks:
            candidate = candidate.replace('\n', '<br>')

        return f'<p>{candidate}</p>'

    def assemble(self, text: str) -> str:
        """
        Split text into paragraphs and assemble each one

        Blank candidates are dropped; the surviving blocks are joined with
        a blank line.
        """
        candidates = self.paragraphs_split(text)
        LOG(f"Assembling {len(candidates)} paragraph candidates", level=2)
        blocks = (self.paragraph_assemble(candidate) for candidate in candidates)
        return '\n\n'.join(block for block in blocks if block)
