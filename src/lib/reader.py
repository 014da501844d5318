"""
File input for mdparse

Reads a Markdown document from disk and converts it. This is the only part
of the package that touches the filesystem.
"""

from pathlib import Path
from typing import Any, Mapping, Optional, Union

from ..config import appsettings
from ..models.options import ConversionOptions
from ..models.state import ConversionState
from .converter import convert
from .log import LOG, state_connectToLogger, state_disconnectFromLogger


class ConversionError(RuntimeError):
    """Base class for errors raised around a conversion"""
    pass


class MarkdownFileError(ConversionError):
    """Raised when a Markdown file cannot be read"""
    pass


def file_convert(
    path: Union[str, Path],
    options: Union[ConversionOptions, Mapping[str, Any], None] = None,
    verbosity: Optional[int] = None,
) -> str:
    """
    Read a UTF-8 Markdown file and convert it to HTML

    Args:
        path: File to read
        options: Conversion options, as for convert()
        verbosity: LOG() verbosity; defaults to appsettings.verbosity

    Returns:
        HTML string

    Raises:
        MarkdownFileError: If the file is missing, unreadable or not UTF-8;
                           the underlying error is chained as __cause__
    """
    if verbosity is None:
        verbosity = appsettings.verbosity
    source_path = Path(path)

    token = state_connectToLogger(ConversionState(verbosity=verbosity))
    try:
        markdown = source_path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        LOG(f"Could not read {source_path}: {e}", level=1)
        raise MarkdownFileError(f"Failed to parse markdown file: {e}") from e
    else:
        LOG(f"Read {len(markdown)} characters from {source_path.name}", level=2)
    finally:
        state_disconnectFromLogger(token)

    return convert(markdown, options, verbosity)
