"""
Syntax highlighting for fenced code blocks

Optional renderer used when ConversionOptions.highlight is on. The output
keeps the plain renderer's <pre><code class="language-X"> wrapper so that
stylesheets and client-side highlighters keyed on the class still apply.
"""

import re

from pygments import highlight
from pygments.lexers import get_lexer_by_name
from pygments.lexer import Lexer
from pygments.formatters import HtmlFormatter
from pygments.util import ClassNotFound

from ..config import appsettings
from .log import LOG
from .patterns import codeBlock_render


def lexer_find(language: str | None) -> Lexer | None:
    """
    Find a Pygments lexer for a language tag

    Returns:
        Lexer instance, or None when the tag is empty or unknown to Pygments
    """
    if not language:
        return None
    try:
        return get_lexer_by_name(language)
    except ClassNotFound:
        LOG(f"No lexer for language '{language}', leaving code block unhighlighted", level=2)
        return None


def codeBlock_highlight(match: re.Match) -> str:
    """
    Render a fenced code block with inline-styled Pygments spans

    Falls back to the plain renderer when the block has no language tag or
    Pygments does not know the language.
    """
    if match.re.groups != 2:
        return codeBlock_render(match)

    language, body = match.group(1), match.group(2)
    lexer = lexer_find(language)
    if lexer is None:
        return codeBlock_render(match)

    # nowrap: we supply our own <pre><code> wrapper
    formatter = HtmlFormatter(style=appsettings.highlight_style, noclasses=True, nowrap=True)
    highlighted = highlight(body.strip(), lexer, formatter).rstrip('\n')

    return f'<pre><code class="language-{language}">{highlighted}</code></pre>'
