"""
Models package for mdparse

Contains data structures and type definitions for the conversion pipeline.
"""

from .state import ConversionState, pipeline
from .options import ConversionOptions, OPTION_ALIASES
from .patterns import PatternSpec, PatternCategory

__all__ = [
    "ConversionState",
    "pipeline",
    "ConversionOptions",
    "OPTION_ALIASES",
    "PatternSpec",
    "PatternCategory",
]
