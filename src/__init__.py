"""
mdparse - Markdown to HTML by ordered pattern rewriting

A small, regex-driven converter for blogs, static sites and documentation
viewers that need Markdown rendering without a full CommonMark engine.
"""

__version__ = "1.0.0"

from .lib import (
    Converter,
    convert,
    file_convert,
    escape,
    delimiterPattern_create,
    markdownPattern_is,
    matches_extract,
    PATTERNS,
    ConversionError,
    MarkdownFileError,
    LOG,
)
from .models import ConversionOptions

__all__ = [
    "Converter",
    "convert",
    "file_convert",
    "escape",
    "delimiterPattern_create",
    "markdownPattern_is",
    "matches_extract",
    "PATTERNS",
    "ConversionOptions",
    "ConversionError",
    "MarkdownFileError",
    "LOG",
    "__version__",
]
