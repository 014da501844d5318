"""
Conversion options model

Immutable record of the caller-facing rendering switches.
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, Mapping, Type, Union


# Pythonic spellings accepted alongside the canonical option names
OPTION_ALIASES: dict[str, str] = {
    'task_lists': 'taskLists',
    'auto_links': 'autoLinks',
}


@dataclass(frozen=True)
class ConversionOptions:
    """
    Rendering options for a single conversion.

    Attributes:
        sanitize: Accepted for compatibility; has no effect (no sanitization pass)
        breaks: Convert single newlines inside paragraphs to <br>
        tables: Accepted for compatibility; has no effect (tables are not rendered)
        taskLists: Recognize "- [x]" / "- [ ]" list items as checkbox items
        autoLinks: Wrap bare http(s) URLs in anchors
        highlight: Render fenced code with a known language through Pygments
    """

    sanitize: bool = True
    breaks: bool = True
    tables: bool = True
    taskLists: bool = True
    autoLinks: bool = True
    highlight: bool = False

    @classmethod
    def options_resolve(
        cls: Type["ConversionOptions"],
        options: Union["ConversionOptions", Mapping[str, Any], None] = None,
    ) -> "ConversionOptions":
        """
        Build options from caller input, falling back to defaults.

        Supplied keys override defaults, omitted keys keep them, and keys
        that are not option names are ignored.

        Args:
            options: None, an existing ConversionOptions, or a mapping of names

        Returns:
            ConversionOptions instance

        Example:
            >>> ConversionOptions.options_resolve({'breaks': False, 'bogus': 1}).breaks
            False
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options

        valid_fields = {f.name for f in dataclasses.fields(cls)}

        resolved: dict[str, bool] = {}
        for key, value in dict(options).items():
            name = OPTION_ALIASES.get(key, key)
            if name in valid_fields:
                resolved[name] = bool(value)

        return cls(**resolved)

    def replace(self, **changes: Any) -> "ConversionOptions":
        """Return a copy with the given options changed"""
        return dataclasses.replace(self, **changes)
