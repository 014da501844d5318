"""
Conversion state model and pipeline helper

Defines ConversionState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from functools import reduce
from typing import Callable, Dict, TypeVar
from dataclasses import dataclass, field

from .options import ConversionOptions


CS = TypeVar("CS", bound="ConversionState")


@dataclass
class ConversionState:
    """
    Central state container for one conversion (state bus pattern).

    Every stage receives the full document text produced by the previous
    stage and returns a new state with its own rewrite applied.

    Pipeline stages and their state changes:
        - regions_protect: text (code replaced by placeholders), protected
        - rules_convert ... blockquotes_convert: text
        - tags_protect (inside links_convert/autolinks_convert): protected
        - blocks_assemble: text (final paragraphs)
        - regions_restore: text (placeholders expanded)

    Attributes:
        text: Document text as of the current stage
        options: Resolved rendering options (read-only for the whole call)
        protected: Placeholder index -> stored HTML for protected regions
        verbosity: LOG() verbosity for this conversion
    """

    text: str = field(default="")
    options: ConversionOptions = field(default_factory=ConversionOptions)
    protected: Dict[int, str] = field(default_factory=dict)
    verbosity: int = field(default=0)

    def copy(self: CS) -> CS:
        """
        Creates a copy of the ConversionState instance.

        The protected-region table is copied too, so a stage that adds
        regions never mutates the state it was given.

        Returns:
            A new ConversionState instance.
        """
        state = type(self)(**self.__dict__)
        state.protected = dict(self.protected)
        return state

    def region_protect(self, html: str) -> int:
        """Store html as a protected region and return its index"""
        index = len(self.protected)
        self.protected[index] = html
        return index


def pipeline(
    initial_state: ConversionState, *stages: Callable[[ConversionState], ConversionState]
) -> ConversionState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ConversionState) -> ConversionState that receives
    the output of the previous stage and returns a new state.

    Args:
        initial_state: Starting ConversionState
        *stages: Variable number of stage functions to execute in order

    Returns:
        Final ConversionState after all transformations

    Example:
        final_state = pipeline(
            initial_state,
            rules_convert,
            headers_convert,
            blocks_assemble,
        )

    This is equivalent to:
        blocks_assemble(headers_convert(rules_convert(initial_state)))

    But reads left-to-right instead of inside-out.
    """
    return reduce(lambda state, stage: stage(state), stages, initial_state)
