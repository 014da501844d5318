"""
mdparse - Markdown to HTML by ordered pattern rewriting

Converts Markdown text to HTML through a fixed sequence of whole-document
substitution passes, followed by list, quote and paragraph assembly.
"""

__version__ = "1.0.0"

from .converter import Converter, convert
from .assembler import BlockAssembler
from .patterns import PATTERNS, PatternRegistry
from .regexutils import escape, delimiterPattern_create, markdownPattern_is, matches_extract
from .reader import file_convert, ConversionError, MarkdownFileError
from .log import LOG, state_connectToLogger, state_disconnectFromLogger

__all__ = [
    "Converter",
    "convert",
    "BlockAssembler",
    "PATTERNS",
    "PatternRegistry",
    "escape",
    "delimiterPattern_create",
    "markdownPattern_is",
    "matches_extract",
    "file_convert",
    "ConversionError",
    "MarkdownFileError",
    "LOG",
    "state_connectToLogger",
    "state_disconnectFromLogger",
    "__version__",
]
