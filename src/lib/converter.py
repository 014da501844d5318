"""
Converter for Markdown text to HTML

Rewrites the whole document in a fixed sequence of passes, each one a global
substitution over the output of the previous pass:

     0. normalize line endings, protect code (fenced blocks, inline spans)
     1. horizontal rules
     2. underlined headers (h1, then h2)
     3. # headers, h6 down to h1
     4. images, then links
     5. bare URLs (autoLinks)
     6. emphasis: ~~, **, __, *, _
     7. task list items (taskLists), then plain list items
     8. list containers
     9. blockquotes
    10. paragraphs
    11. restore protected regions

The order is load-bearing: images must run before links, bold before
italic, and so on. Code is rendered when it is protected, so no later pass
ever sees code contents; emitted link and image tags are protected the same
way, so their attribute values are never rewritten.

Example:
    >>> convert('# Hello **World**')
    '<h1>Hello <strong>World</strong></h1>'
"""

import re
from typing import Any, Mapping, Optional, Union

from ..config import appsettings
from ..models.options import ConversionOptions
from ..models.patterns import PatternSpec
from ..models.state import ConversionState, pipeline
from .assembler import BlockAssembler
from .highlight import codeBlock_highlight
from .log import LOG, state_connectToLogger, state_disconnectFromLogger
from .patterns import PATTERNS, PatternRegistry


# Tag markup; quoted attribute values may contain '>'
TAG = re.compile(r'<(?:[^<>"]|"[^"]*")*>')

PLACEHOLDER = re.compile(
    re.escape(appsettings.placeholder_prefix) + r'[A-Z]\d+' + re.escape(appsettings.placeholder_suffix)
)

HEADERS = ('h6', 'h5', 'h4', 'h3', 'h2', 'h1')
EMPHASIS = ('strikethrough', 'bold', 'boldAlt', 'italic', 'italicAlt')


class Converter:
    """
    Converts Markdown text to an HTML string

    A Converter holds only its options; every call to convert() builds a
    fresh ConversionState, so one instance can be reused and shared
    between threads.
    """

    def __init__(
        self,
        options: Union[ConversionOptions, Mapping[str, Any], None] = None,
        verbosity: Optional[int] = None,
        registry: Optional[PatternRegistry] = None,
    ) -> None:
        """
        Initialize converter

        Args:
            options: Rendering options (ConversionOptions or a mapping of names)
            verbosity: LOG() verbosity; defaults to appsettings.verbosity
            registry: Pattern table; defaults to the shared PATTERNS
        """
        self.options = ConversionOptions.options_resolve(options)
        self.verbosity = appsettings.verbosity if verbosity is None else verbosity
        self.registry = registry or PATTERNS
        self.assembler = BlockAssembler(self.options)

    def convert(self, text: Any) -> str:
        """
        Convert Markdown text to HTML

        Args:
            text: Markdown source; None, '' or a non-string gives ''

        Returns:
            HTML string
        """
        if not isinstance(text, str) or not text:
            return ''

        state = ConversionState(text=text, options=self.options, verbosity=self.verbosity)
        token = state_connectToLogger(state)
        try:
            LOG(f"Converting {len(text)} characters", level=1)
            final = pipeline(
                state,
                self.text_normalize,
                self.regions_protect,
                self.rules_convert,
                self.headersAlt_convert,
                self.headers_convert,
                self.links_convert,
                self.autolinks_convert,
                self.emphasis_convert,
                self.taskLists_convert,
                self.lists_convert,
                self.lists_wrap,
                self.blockquotes_convert,
                self.blocks_assemble,
                self.regions_restore,
            )
            LOG(f"Produced {len(final.text)} characters of HTML", level=1)
        finally:
            state_disconnectFromLogger(token)

        return final.text

    def spec(self, name: str) -> PatternSpec:
        """Get a pattern spec the pipeline depends on"""
        spec = self.registry.spec_get(name)
        if spec is None:
            raise KeyError(f"Pattern '{name}' is not registered")
        return spec

    def pattern_apply(self, text: str, name: str) -> str:
        """Run one global substitution pass"""
        text, count = self.spec(name).apply(text)
        if count:
            LOG(f"Pattern {name} replaced {count} matches", level=3)
        return text

    def region_placeholder(self, state: ConversionState, kind: str, html: str) -> str:
        """Store html in the state and return the placeholder standing in for it"""
        return appsettings.placeHolder_make(kind, state.region_protect(html))

    def tags_protect(self, state: ConversionState, html: str) -> str:
        """Replace each tag in html with a placeholder, leaving text between tags visible"""
        return TAG.sub(lambda match: self.region_placeholder(state, 'T', match.group(0)), html)

    def text_normalize(self, inputstate: ConversionState) -> ConversionState:
        """
        Normalize line endings to \\n

        NUL characters are replaced with U+FFFD so that input can never
        forge a placeholder.
        """
        state = inputstate.copy()
        state.text = state.text.replace('\r\n', '\n').replace('\r', '\n').replace('\x00', '\ufffd')
        return state

    def regions_protect(self, inputstate: ConversionState) -> ConversionState:
        """
        Render code and swap it out of the text

        Fenced blocks with a language tag are handled first, then bare
        fenced blocks, then inline code spans. Blocks are stored under 'C'
        placeholders (recognized as block-level by the assembler), inline
        spans under 'I'.
        """
        state = inputstate.copy()
        highlighting = state.options.highlight

        for name in ('codeBlockWithLang', 'codeBlock'):
            spec = self.spec(name)
            render = codeBlock_highlight if highlighting else spec.render
            state.text = spec.regex.sub(
                lambda match: self.region_placeholder(state, 'C', render(match)), state.text
            )

        inline = self.spec('inlineCode')
        state.text = inline.regex.sub(
            lambda match: self.region_placeholder(state, 'I', inline.render(match)), state.text
        )

        LOG(f"Protected {len(state.protected)} code regions", level=2)
        return state

    def rules_convert(self, inputstate: ConversionState) -> ConversionState:
        """Turn rule lines into <hr>"""
        state = inputstate.copy()
        state.text = self.pattern_apply(state.text, 'horizontalRule')
        return state

    def headersAlt_convert(self, inputstate: ConversionState) -> ConversionState:
        """Turn underlined headers into h1/h2"""
        state = inputstate.copy()
        state.text = self.pattern_apply(state.text, 'h1Alt')
        state.text = self.pattern_apply(state.text, 'h2Alt')
        return state

    def headers_convert(self, inputstate: ConversionState) -> ConversionState:
        """Turn # headers into h1-h6, most hashes first"""
        state = inputstate.copy()
        for name in HEADERS:
            state.text = self.pattern_apply(state.text, name)
        LOG("Headers converted", level=2)
        return state

    def links_convert(self, inputstate: ConversionState) -> ConversionState:
        """
        Turn images, then links, into HTML

        Images run first: link syntax would otherwise claim the bracketed
        part of ![alt](src). The emitted tags are protected; link text stays
        in the document so emphasis inside it is still converted. Bare URLs
        in link text are protected as well, since the anchor already
        exists and an autolink there would nest <a> inside <a>.
        """
        state = inputstate.copy()

        image = self.spec('image')
        state.text = image.regex.sub(
            lambda match: self.tags_protect(state, image.render(match)), state.text
        )

        link = self.spec('link')
        state.text = link.regex.sub(
            lambda match: self.linkText_protect(state, self.tags_protect(state, link.render(match))),
            state.text,
        )
        LOG("Images and links converted", level=2)
        return state

    def linkText_protect(self, state: ConversionState, html: str) -> str:
        """Protect the bare URLs an autolink pass would otherwise pick up"""
        return self.spec('autoLink').regex.sub(
            lambda match: match.group(1) + self.region_placeholder(state, 'T', match.group(2)),
            html,
        )

    def autolinks_convert(self, inputstate: ConversionState) -> ConversionState:
        """
        Wrap bare URLs in anchors, when autoLinks is on

        A URL only qualifies at line start or after whitespace. URLs already
        emitted as href/src values are inside protected tags and never seen.
        The whole anchor is protected, URL text included.
        """
        if not inputstate.options.autoLinks:
            return inputstate

        state = inputstate.copy()
        spec = self.spec('autoLink')

        def url_link(match: re.Match) -> str:
            lead = match.group(1)
            anchor = spec.render(match)[len(lead):]
            return lead + self.region_placeholder(state, 'T', anchor)

        state.text = spec.regex.sub(url_link, state.text)
        return state

    def emphasis_convert(self, inputstate: ConversionState) -> ConversionState:
        """Strikethrough, then bold, then italic; double markers go before single"""
        state = inputstate.copy()
        for name in EMPHASIS:
            state.text = self.pattern_apply(state.text, name)
        LOG("Emphasis converted", level=2)
        return state

    def taskLists_convert(self, inputstate: ConversionState) -> ConversionState:
        """Turn '- [x]' / '- [ ]' items into checkbox list items, when taskLists is on"""
        if not inputstate.options.taskLists:
            return inputstate

        state = inputstate.copy()
        state.text = self.pattern_apply(state.text, 'taskListChecked')
        state.text = self.pattern_apply(state.text, 'taskListUnchecked')
        return state

    def lists_convert(self, inputstate: ConversionState) -> ConversionState:
        """Turn remaining unordered, then ordered, item lines into <li>"""
        state = inputstate.copy()
        state.text = self.pattern_apply(state.text, 'unorderedList')
        state.text = self.pattern_apply(state.text, 'orderedList')
        return state

    def lists_wrap(self, inputstate: ConversionState) -> ConversionState:
        """Gather runs of <li> into list containers"""
        state = inputstate.copy()
        state.text = self.assembler.lists_wrap(state.text)
        return state

    def blockquotes_convert(self, inputstate: ConversionState) -> ConversionState:
        """Turn '>' lines into blockquotes and merge neighbours"""
        state = inputstate.copy()
        state.text = self.pattern_apply(state.text, 'blockquote')
        state.text = self.assembler.quotes_merge(state.text)
        return state

    def blocks_assemble(self, inputstate: ConversionState) -> ConversionState:
        """Split into paragraphs and wrap the ones that are not block-level"""
        state = inputstate.copy()
        state.text = self.assembler.assemble(state.text)
        return state

    def regions_restore(self, inputstate: ConversionState) -> ConversionState:
        """
        Expand placeholders back into their stored HTML

        Stored HTML may itself hold placeholders (an image whose alt text
        contained inline code), so expansion recurses.
        """
        state = inputstate.copy()

        def region_expand(match: re.Match) -> str:
            parsed = appsettings.placeHolder_parse(match.group(0))
            html = state.protected.get(parsed[1]) if parsed else None
            if html is None:
                return match.group(0)
            return PLACEHOLDER.sub(region_expand, html)

        state.text = PLACEHOLDER.sub(region_expand, state.text)
        return state


def convert(
    text: Any = None,
    options: Union[ConversionOptions, Mapping[str, Any], None] = None,
    verbosity: Optional[int] = None,
) -> str:
    """
    Convert Markdown text to HTML

    Args:
        text: Markdown source; None, '' or a non-string gives ''
        options: ConversionOptions or a mapping such as {'breaks': False};
                 unknown keys are ignored, missing keys take their defaults
        verbosity: LOG() verbosity for this call

    Returns:
        HTML string
    """
    return Converter(options, verbosity).convert(text)
