"""Exceptions raised for engine misconfiguration.

Validation failures are never raised. They are returned as
:class:`lucidity.result.Failure` values.
"""


class LucidityError(Exception):
    """Base class for lucidity configuration errors."""


class UnknownCultureError(LucidityError, LookupError):
    """Raised when selecting a culture that has no registered language.

    Attributes:
        culture: The culture that was requested
        available: Cultures that are registered
    """

    def __init__(self, culture: str, available: list[str]) -> None:
        self.culture = culture
        self.available = available
        super().__init__(
            f"Unknown culture {culture!r}. Registered cultures: {', '.join(available)}"
        )
