"""
Configuration settings for objaide.

**Conceptual**: This module provides a strongly-typed configuration object that
loads from environment variables (via .env files). Settings are validated when
constructed, so a malformed value fails fast with a clear message instead of
surfacing later as odd behavior inside a utility call.

**What is configurable?**
  - Argument validation policy for the selection helpers (median on empty
    input either raises ValueError or returns None).

**Teaching note**: The utility functions never read os.environ directly. They
accept an explicit ``settings`` argument and fall back to the cached
``get_settings()`` singleton, so tests can inject a Settings object without
touching the process environment.

This module uses python-dotenv to load .env files and dataclasses for type safety.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# .env at the project root (dev/local environments); a missing file is a no-op
ENV_PATH = Path(__file__).parent.parent.parent / ".env"


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def parse_bool(name: str, raw: str) -> bool:
    """
    Parse a boolean environment value.

    Accepts 1/0, true/false, yes/no, on/off (case-insensitive, surrounding
    whitespace ignored).

    Args:
        name: Environment variable name (used in the error message).
        raw: Raw string value read from the environment.

    Returns:
        Parsed boolean.

    Raises:
        ValueError: If the value is not a recognised boolean literal.
    """
    normalised = raw.strip().lower()
    if normalised in _TRUE_VALUES:
        return True
    if normalised in _FALSE_VALUES:
        return False
    raise ValueError(
        f"{name} must be a boolean (true/false, 1/0, yes/no, on/off), got: {raw!r}"
    )


@dataclass(frozen=True)
class ObjaideSettings:
    """
    Settings for the objaide utility functions.

    **Conceptual**: The selection helpers have one policy decision that callers
    may want to flip: what happens when ``median`` receives no values at all.
    With validation enabled (the default) that is a caller bug and raises
    ValueError; with validation disabled it is treated like an empty selection
    and yields None, the same way ``min_value``/``max_value`` behave.

    Attributes:
        validate_arguments: If True, median-style functions raise ValueError
                            on empty input. If False, they return None.
    """
    validate_arguments: bool = True

    def __post_init__(self):
        """Validate settings after initialization."""
        if not isinstance(self.validate_arguments, bool):
            raise ValueError(
                f"validate_arguments must be a bool, got: {self.validate_arguments!r}"
            )

    @classmethod
    def from_env(cls) -> "ObjaideSettings":
        """
        Load objaide settings from environment variables.

        The project .env file is loaded first, so importing objaide never
        touches the process environment; variables already set win over it.

        **Environment variables**:
          - OBJAIDE_VALIDATE_ARGUMENTS (optional): Whether median raises on
            empty input. Defaults to "true" if not set.

        Returns:
            ObjaideSettings object with values loaded from environment.

        Raises:
            ValueError: If OBJAIDE_VALIDATE_ARGUMENTS is not a boolean literal.

        Usage example:
            >>> # In .env file:
            >>> # OBJAIDE_VALIDATE_ARGUMENTS=false
            >>>
            >>> settings = ObjaideSettings.from_env()
            >>> print(settings.validate_arguments)  # False
        """
        load_dotenv(dotenv_path=ENV_PATH)
        validate_str = os.getenv("OBJAIDE_VALIDATE_ARGUMENTS", "true")

        return cls(
            validate_arguments=parse_bool("OBJAIDE_VALIDATE_ARGUMENTS", validate_str),
        )


# Lazily loaded on first get_settings() call; tests inject their own or reset.
_default_settings: Optional[ObjaideSettings] = None


def get_settings() -> ObjaideSettings:
    """
    Get the global settings singleton.

    **Conceptual**: Settings are loaded from environment on first call, then
    cached for reuse. Functions that take an optional ``settings`` argument
    call this when none is passed.

    Returns:
        Global ObjaideSettings singleton.

    Raises:
        ValueError: If an environment value is malformed.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = ObjaideSettings.from_env()

    return _default_settings


def reset_settings():
    """
    Reset the global settings singleton (for testing).

    **Testing pattern**:
      ```python
      def test_something(monkeypatch):
          monkeypatch.setenv("OBJAIDE_VALIDATE_ARGUMENTS", "false")
          reset_settings()

          assert get_settings().validate_arguments is False
      ```

    Returns:
        None (side effect: clears global settings cache).
    """
    global _default_settings
    _default_settings = None
