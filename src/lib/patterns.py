"""
Pattern table for mdparse

Every Markdown construct the converter understands is registered here as a
PatternSpec: a name, its recognizer and, for constructs the pipeline
rewrites, the replacement rule. The registry is built once and only read
afterwards, so a single instance is shared by all conversions.
"""

import re
from types import MappingProxyType
from typing import Mapping, Optional

from ..config import appsettings
from ..models.patterns import PatternSpec, PatternCategory


DOTALL = re.IGNORECASE | re.MULTILINE | re.DOTALL

_RULE_LINE = re.compile(r'(?:-{3,}|_{3,}|\*{3,})')

# Underlined-header text may not be a protected code block
_CODE_BLOCK_LEAD = re.escape(appsettings.placeholder_prefix) + 'C'

# Lines that cannot be the text of an underlined (---) header
_NOT_HEADER_TEXT = re.compile(
    r'^\s*(?:[#>]|[-*+]\s|\d+\.\s|```|' + re.escape(appsettings.placeholder_prefix) + r')'
)


def rule_replace(match: re.Match) -> str:
    """
    Replace a rule line with <hr>, unless it underlines a text line

    A dash rule directly below a line of plain text is the underline of an
    alternate-style h2 and is left for the h2Alt pattern.
    """
    if not match.group(1).startswith('-') or match.start() == 0:
        return '<hr>'

    source = match.string
    previous_end = match.start() - 1
    previous_start = source.rfind('\n', 0, previous_end) + 1
    previous = source[previous_start:previous_end]

    if not previous.strip():
        return '<hr>'
    if _RULE_LINE.fullmatch(previous) or _NOT_HEADER_TEXT.match(previous):
        return '<hr>'
    return match.group(0)


def codeBlock_render(match: re.Match) -> str:
    """
    Render a fenced code block

    Handles both fence patterns: with a language group (lang, body) and
    without (body only). The body is stripped and otherwise left verbatim.
    """
    if match.re.groups == 2:
        language, body = match.group(1), match.group(2)
    else:
        language, body = None, match.group(1)

    lang_class = f' class="language-{language}"' if language else ''
    return f'<pre><code{lang_class}>{body.strip()}</code></pre>'


class PatternRegistry:
    """
    Registry of Markdown pattern specifications

    Maps pattern names to PatternSpec objects. Registration happens only
    during construction; afterwards the registry is read-only.
    """

    def __init__(self) -> None:
        """Initialize the registry and register all built-in patterns"""
        self._specs: dict[str, PatternSpec] = {}
        self.headerPatterns_register()
        self.emphasisPatterns_register()
        self.codePatterns_register()
        self.linkPatterns_register()
        self.listPatterns_register()
        self.blockPatterns_register()
        self.tablePatterns_register()
        self.specs: Mapping[str, PatternSpec] = MappingProxyType(self._specs)

    def _register(self, spec: PatternSpec) -> None:
        self._specs[spec.name] = spec

    def __contains__(self, name: object) -> bool:
        return name in self.specs

    def __len__(self) -> int:
        return len(self.specs)

    def names(self) -> list[str]:
        """All registered pattern names, in registration order"""
        return list(self.specs)

    def get(self, name: str) -> Optional[re.Pattern]:
        """
        Get a compiled pattern by name

        Args:
            name: Pattern name to look up (e.g., "h1", "autoLink")

        Returns:
            Compiled pattern, or None if the name is not registered
        """
        spec = self.specs.get(name)
        return spec.regex if spec else None

    def spec_get(self, name: str) -> Optional[PatternSpec]:
        """Get full pattern specification by name"""
        return self.specs.get(name)

    def patterns_listByCategory(self, category: PatternCategory) -> list[PatternSpec]:
        """Get all patterns in a category"""
        return [spec for spec in self.specs.values() if spec.category == category]

    def headerPatterns_register(self) -> None:
        """Register numeric (#) and alternate-style (underlined) headers"""
        for level in range(6, 0, -1):
            self._register(PatternSpec(
                name=f'h{level}',
                category=PatternCategory.HEADER,
                description=(
                    f"Exactly {level} '#' at line start, then spaces or tabs; "
                    f"captures the rest of the line. More or fewer hashes do not match."
                ),
                pattern=rf'^#{{{level}}}[ \t]+(.*)$',
                replacement=rf'<h{level}>\1</h{level}>',
            ))

        self._register(PatternSpec(
            name='h1Alt',
            category=PatternCategory.HEADER,
            description="A text line, not a code block, followed by a line of three or more '='",
            pattern=rf'^(?!{_CODE_BLOCK_LEAD})(.+)\n={{3,}}$',
            replacement=r'<h1>\1</h1>',
        ))

        self._register(PatternSpec(
            name='h2Alt',
            category=PatternCategory.HEADER,
            description="A text line, not a code block, followed by a line of three or more '-'",
            pattern=rf'^(?!{_CODE_BLOCK_LEAD})(.+)\n-{{3,}}$',
            replacement=r'<h2>\1</h2>',
        ))

    def emphasisPatterns_register(self) -> None:
        """Register bold, italic and strikethrough (single-line, non-greedy)"""
        self._register(PatternSpec(
            name='bold',
            category=PatternCategory.EMPHASIS,
            description="Text between '**' pairs on one line",
            pattern=r'\*\*(.*?)\*\*',
            replacement=r'<strong>\1</strong>',
        ))

        self._register(PatternSpec(
            name='boldAlt',
            category=PatternCategory.EMPHASIS,
            description="Text between '__' pairs on one line",
            pattern=r'__(.*?)__',
            replacement=r'<strong>\1</strong>',
        ))

        self._register(PatternSpec(
            name='italic',
            category=PatternCategory.EMPHASIS,
            description="Text between single '*' on one line. The opening '*' may not be followed by whitespace or another '*'",
            pattern=r'\*(?![\s*])(.*?)\*',
            replacement=r'<em>\1</em>',
        ))

        self._register(PatternSpec(
            name='italicAlt',
            category=PatternCategory.EMPHASIS,
            description="Text between single '_' on one line. The opening '_' may not be followed by whitespace or another '_'",
            pattern=r'_(?![\s_])(.*?)_',
            replacement=r'<em>\1</em>',
        ))

        self._register(PatternSpec(
            name='strikethrough',
            category=PatternCategory.EMPHASIS,
            description="Text between '~~' pairs on one line",
            pattern=r'~~(.*?)~~',
            replacement=r'<del>\1</del>',
        ))

    def codePatterns_register(self) -> None:
        """Register fenced code blocks and inline code spans"""
        self._register(PatternSpec(
            name='codeBlockWithLang',
            category=PatternCategory.CODE,
            description="``` with an optional word language tag, a newline, then the body up to the next ```",
            pattern=r'```(\w+)?\n(.*?)```',
            flags=DOTALL,
            replacement=codeBlock_render,
        ))

        self._register(PatternSpec(
            name='codeBlock',
            category=PatternCategory.CODE,
            description="Anything between two ``` fences, including single-line fences",
            pattern=r'```(.*?)```',
            flags=DOTALL,
            replacement=codeBlock_render,
        ))

        self._register(PatternSpec(
            name='inlineCode',
            category=PatternCategory.CODE,
            description="Non-empty text between single backticks",
            pattern=r'`([^`]+)`',
            replacement=r'<code>\1</code>',
        ))

    def linkPatterns_register(self) -> None:
        """Register images, links and bare URLs"""
        self._register(PatternSpec(
            name='image',
            category=PatternCategory.LINK,
            description="![alt](src); alt may be empty, src may not contain ')'",
            pattern=r'!\[([^\]]*)\]\(([^)]+)\)',
            replacement=r'<img src="\2" alt="\1" />',
        ))

        self._register(PatternSpec(
            name='link',
            category=PatternCategory.LINK,
            description="[text](url); text may not be empty or contain ']'",
            pattern=r'\[([^\]]+)\]\(([^)]+)\)',
            replacement=r'<a href="\2">\1</a>',
        ))

        self._register(PatternSpec(
            name='autoLink',
            category=PatternCategory.LINK,
            description=(
                "http(s) URL at line start or after whitespace, up to whitespace or '<'. "
                "URLs inside attribute values (preceded by '=\"') never match."
            ),
            pattern=r'(^|\s)(https?://[^\s<\x00]+)',
            replacement=r'\1<a href="\2" target="_blank">\2</a>',
        ))

    def listPatterns_register(self) -> None:
        """Register task, unordered and ordered list items"""
        self._register(PatternSpec(
            name='taskListChecked',
            category=PatternCategory.LIST,
            description="List marker, then '[x]' (either case), then the item text",
            pattern=r'^[-*+][ \t]+\[x\][ \t]+(.*)$',
            replacement=r'<li class="task-list-item"><input type="checkbox" checked disabled> \1</li>',
        ))

        self._register(PatternSpec(
            name='taskListUnchecked',
            category=PatternCategory.LIST,
            description="List marker, then '[ ]', then the item text",
            pattern=r'^[-*+][ \t]+\[[ \t]\][ \t]+(.*)$',
            replacement=r'<li class="task-list-item"><input type="checkbox" disabled> \1</li>',
        ))

        self._register(PatternSpec(
            name='unorderedList',
            category=PatternCategory.LIST,
            description="'-', '*' or '+' at line start, then spaces or tabs",
            pattern=r'^[-*+][ \t]+(.*)$',
            replacement=r'<li>\1</li>',
        ))

        self._register(PatternSpec(
            name='orderedList',
            category=PatternCategory.LIST,
            description="Digits and '.' at line start, then spaces or tabs",
            pattern=r'^\d+\.[ \t]+(.*)$',
            replacement=r'<li>\1</li>',
        ))

    def blockPatterns_register(self) -> None:
        """Register blockquotes and horizontal rules"""
        self._register(PatternSpec(
            name='blockquote',
            category=PatternCategory.BLOCK,
            description="'>' at line start, then spaces or tabs",
            pattern=r'^>[ \t]+(.*)$',
            replacement=r'<blockquote><p>\1</p></blockquote>',
        ))

        self._register(PatternSpec(
            name='horizontalRule',
            category=PatternCategory.BLOCK,
            description=(
                "A line of only three or more '-', '_' or '*'. A '-' line directly "
                "under plain text is an h2 underline, not a rule."
            ),
            pattern=r'^(-{3,}|_{3,}|\*{3,})$',
            replacement=rule_replace,
        ))

    def tablePatterns_register(self) -> None:
        """Register table and line-break recognizers (lookup only)"""
        self._register(PatternSpec(
            name='tableHeader',
            category=PatternCategory.TABLE,
            description="Cells between pipes on a header row",
            pattern=r'\|(.+)\|',
            flags=0,
        ))

        self._register(PatternSpec(
            name='tableSeparator',
            category=PatternCategory.TABLE,
            description="Header separator cell such as '| :---: |'",
            pattern=r'\|\s*:?-+:?\s*\|',
            flags=0,
        ))

        self._register(PatternSpec(
            name='tableRow',
            category=PatternCategory.TABLE,
            description="Cells between pipes on a body row",
            pattern=r'\|(.+)\|',
            flags=0,
        ))

        self._register(PatternSpec(
            name='lineBreak',
            category=PatternCategory.WHITESPACE,
            description="A single newline",
            pattern=r'\n',
            flags=0,
        ))

        self._register(PatternSpec(
            name='doubleLineBreak',
            category=PatternCategory.WHITESPACE,
            description="A newline, optional whitespace, then another newline (paragraph separator)",
            pattern=r'\n\s*\n',
            flags=0,
        ))


# Shared read-only instance used by the converter and lookup utilities
PATTERNS = PatternRegistry()
