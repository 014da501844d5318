"""
Centralized logging using Loguru with context-aware verbosity.

This module provides a LOG() function that respects the current
ConversionState's verbosity level without requiring explicit state passing.

Features:
- Context-aware logging tied to ConversionState verbosity
- Rich formatting with timestamps, colors, and metadata
- Thread-safe using contextvars, so concurrent conversions keep their own level

Usage:
    from mdparse.lib.log import LOG, state_connectToLogger, state_disconnectFromLogger

    token = state_connectToLogger(state)
    try:
        LOG("This message appears if verbosity >= 1", level=1)
        LOG("Stage details appear if verbosity >= 2", level=2)
        LOG("Pattern traces appear if verbosity >= 3", level=3)
    finally:
        state_disconnectFromLogger(token)
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar, Token
import sys

# Context variable to hold current ConversionState
_conversion_state: ContextVar[Optional[Any]] = ContextVar('conversion_state', default=None)

# Configure loguru with mdparse-specific format
logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{function: <20}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()  # Remove default handler
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> Token:
    """
    Connect a ConversionState to the logging context.

    Call this at the start of a conversion to make the state's verbosity
    setting available to LOG() calls throughout that context.

    Args:
        state: ConversionState instance with verbosity attribute

    Returns:
        Token to hand back to state_disconnectFromLogger() when done
    """
    return _conversion_state.set(state)


def state_disconnectFromLogger(token: Token) -> None:
    """Restore the logging context that was active before state_connectToLogger()"""
    _conversion_state.reset(token)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if current state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=debug)
        **kwargs: Additional loguru metadata

    Verbosity levels:
        0 = Silent (library default)
        1 = Normal output
        2 = Verbose: one line per pipeline stage
        3 = Debug: pattern-level traces

    Example:
        LOG("File read successfully", level=1)
        LOG("Protected 3 code regions", level=2)
        LOG("Pattern h2 replaced 4 matches", level=3)
    """
    state = _conversion_state.get()

    if state and hasattr(state, 'verbosity') and state.verbosity >= level:
        logger.opt(depth=1).debug(message, **kwargs)
