"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use MDPARSE_ prefix (e.g., MDPARSE_VERBOSITY=2).

Settings can also be loaded from a .env file in the project root.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use MDPARSE_ prefix.

    Examples:
        MDPARSE_VERBOSITY=3
        MDPARSE_HIGHLIGHT_STYLE=monokai
    """

    model_config = SettingsConfigDict(
        env_prefix="MDPARSE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Protection placeholders. Kind and index sit between prefix and suffix,
    # so neither may contain Markdown marker characters (*, _, `, ~, [, #).
    placeholder_prefix: str = Field(
        default="\x00",
        description="Prefix for protected-region placeholders (null byte avoids collisions with text)",
    )

    placeholder_suffix: str = Field(
        default="\x00",
        description="Suffix for protected-region placeholders",
    )

    # Logging configuration
    verbosity: int = Field(
        default=0,
        description="Default LOG() verbosity for conversions (0=silent, 1-3 increasingly chatty)",
    )

    # Code highlighting configuration
    highlight_style: str = Field(
        default="default",
        description="Pygments style used when code highlighting is enabled",
    )

    def placeHolder_make(self, kind: str, index: int) -> str:
        """
        Generate a placeholder string for a protected region.

        Args:
            kind: Single-letter region kind ("C" code block, "I" inline code, "T" tag)
            index: Zero-based index into the protected-region table

        Returns:
            Placeholder string (e.g., "\\x00C0\\x00")

        Example:
            >>> settings = AppSettings()
            >>> settings.placeHolder_make("C", 0)
            '\\x00C0\\x00'
        """
        return f"{self.placeholder_prefix}{kind}{index}{self.placeholder_suffix}"

    def placeHolder_parse(self, placeholder: str) -> tuple[str, int] | None:
        """
        Extract kind and index from a placeholder string.

        Args:
            placeholder: Placeholder string to parse

        Returns:
            (kind, index) if valid placeholder, None otherwise

        Example:
            >>> settings = AppSettings()
            >>> settings.placeHolder_parse('\\x00T12\\x00')
            ('T', 12)
        """
        if not placeholder.startswith(self.placeholder_prefix):
            return None
        if not placeholder.endswith(self.placeholder_suffix):
            return None

        # Extract the middle part
        content = placeholder[len(self.placeholder_prefix) : len(placeholder) - len(self.placeholder_suffix)]
        if len(content) < 2 or not content[0].isalpha():
            return None

        try:
            return content[0], int(content[1:])
        except ValueError:
            return None


# Singleton instance - import this in your code
appsettings = AppSettings()
