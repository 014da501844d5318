"""
Pattern specification and metadata models

Defines the structure and categories of Markdown recognizers for the
pattern registry, lookup utilities, and the conversion pipeline.
"""

import re
from enum import Enum
from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple, Union


Replacement = Union[str, Callable[[re.Match], str]]


class PatternCategory(Enum):
    """
    Categories of Markdown patterns

    Used for organization and for listing patterns by kind.
    """
    HEADER = "header"            # # h1 ... ###### h6, underlined h1/h2
    EMPHASIS = "emphasis"        # **bold**, *italic*, ~~del~~
    CODE = "code"                # ```fenced```, `inline`
    LINK = "link"                # [text](url), ![alt](src), bare URLs
    LIST = "list"                # - item, 1. item, - [x] task
    BLOCK = "block"              # > quote, ---
    TABLE = "table"              # | cell | (lookup only)
    WHITESPACE = "whitespace"    # line and paragraph breaks (lookup only)


@dataclass(frozen=True)
class PatternSpec:
    """
    Specification for a Markdown recognizer

    Attributes:
        name: Pattern name used for lookup (e.g., "h1", "taskListChecked")
        category: Category for organization
        description: What a match requires and what it deliberately excludes
        pattern: Regular expression source
        flags: re module flags the pattern is compiled with
        replacement: re template string or callable used by the pipeline;
                     None for lookup-only patterns
        regex: Compiled pattern (derived; compiled patterns keep no match state)
    """
    name: str
    category: PatternCategory
    description: str
    pattern: str
    flags: int = re.IGNORECASE | re.MULTILINE
    replacement: Optional[Replacement] = None
    regex: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'regex', re.compile(self.pattern, self.flags))

    def apply(self, text: str) -> Tuple[str, int]:
        """
        Replace every non-overlapping match in text

        Returns:
            (new text, number of replacements made)

        Raises:
            ValueError: If the pattern is lookup-only (no replacement)
        """
        if self.replacement is None:
            raise ValueError(f"Pattern '{self.name}' has no replacement rule")
        return self.regex.subn(self.replacement, text)

    def render(self, match: re.Match) -> str:
        """Produce the replacement for a single match"""
        if self.replacement is None:
            raise ValueError(f"Pattern '{self.name}' has no replacement rule")
        if callable(self.replacement):
            return self.replacement(match)
        return match.expand(self.replacement)
