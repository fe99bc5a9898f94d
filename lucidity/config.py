"""Process-wide settings for lucidity."""

import typing

import pydantic

from . import options as _options
from . import translation as _translation


class Settings(pydantic.BaseModel):
    """Global engine settings.

    Attributes:
        cascade_mode: Cascade mode given to newly created chains
        language_manager: Translation tables used to render failure messages
    """

    model_config = pydantic.ConfigDict(
        validate_assignment=True, arbitrary_types_allowed=True
    )

    cascade_mode: _options.CascadeMode = _options.CascadeMode.CONTINUE
    language_manager: _translation.LanguageManager = pydantic.Field(
        default_factory=_translation.LanguageManager
    )


settings = Settings()
"""The process-wide settings instance read by every validator."""


def configure(**options: typing.Any) -> Settings:
    """Update the process-wide settings.

    Call this at startup, before validators are used.

    Args:
        **options: Setting names and values (see :class:`Settings`)

    Returns:
        The updated settings

    Raises:
        pydantic.ValidationError: If a value is invalid
        AttributeError: If an option name is unknown

    Example:
        >>> configure(cascade_mode="stop_on_first_failure")
    """
    for name, value in options.items():
        if name not in Settings.model_fields:
            raise AttributeError(f"Unknown setting: {name!r}")
        setattr(settings, name, value)
    return settings


def reset() -> Settings:
    """Restore every setting to its default, including the translation tables."""
    defaults = Settings()
    for name in Settings.model_fields:
        setattr(settings, name, getattr(defaults, name))
    return settings
