"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use PROSETREE_ prefix (e.g., PROSETREE_VERBOSITY=2).

Settings can also be loaded from a .env file in the project root.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use PROSETREE_ prefix.

    Examples:
        PROSETREE_VERBOSITY=3
        PROSETREE_CAPTURE_ORIGIN=false
    """

    model_config = SettingsConfigDict(
        env_prefix="PROSETREE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Document build configuration
    verbosity: int = Field(
        default=0,
        description="Default logging verbosity for document builds (0=silent, 3=trace)",
    )

    # Reference configuration
    capture_origin: bool = Field(
        default=True,
        description="Record the file and line where each reference is declared",
    )

    def origin_make(self, filename: str, lineno: int) -> str:
        """
        Generate the origin marker for a reference declared at a call site.

        Args:
            filename: Source file of the declaring call
            lineno: Line number of the declaring call

        Returns:
            Origin string (e.g., "article.py:12")

        Example:
            >>> settings = AppSettings()
            >>> settings.origin_make("/docs/article.py", 12)
            'article.py:12'
        """
        return f"{Path(filename).name}:{lineno}"


# Singleton instance - import this in your code
appsettings = AppSettings()
