"""Result types for validation operations."""

import json
import typing

import pydantic


class Failure(pydantic.BaseModel):
    """A single validation failure.

    Failures are immutable values. Many failures may share a code or key.

    Attributes:
        message: Human-readable message, always present
        code: Error code used for translation (may be empty)
        key: Field key the failure belongs to (may be empty)
    """

    model_config = pydantic.ConfigDict(frozen=True)

    message: str
    code: str = ""
    key: str = ""

    @pydantic.model_serializer(mode="wrap")
    def _omit_empty(
        self, handler: pydantic.SerializerFunctionWrapHandler
    ) -> dict[str, typing.Any]:
        data = handler(self)
        for name in ("key", "code"):
            if not data.get(name):
                data.pop(name, None)
        return data

    def to_dict(self) -> dict[str, typing.Any]:
        """Convert the failure to a dictionary, omitting empty key and code."""
        return self.model_dump()

    def to_json(self) -> str:
        """Convert the failure to a JSON string, omitting empty key and code."""
        return self.model_dump_json()


class ValidationResult(pydantic.BaseModel):
    """Outcome of validating one entity.

    ``is_valid`` is derived from ``failures`` so the two can never disagree.

    Attributes:
        failures: Failures in the order the rules produced them
        is_valid: True when there are no failures
    """

    model_config = pydantic.ConfigDict(frozen=True)

    failures: tuple[Failure, ...] = ()

    @pydantic.computed_field  # type: ignore[prop-decorator]
    @property
    def is_valid(self) -> bool:
        return len(self.failures) == 0

    @classmethod
    def from_failures(cls, failures: typing.Iterable[Failure]) -> "ValidationResult":
        """Create a ValidationResult from an iterable of failures.

        Args:
            failures: Failures in evaluation order

        Returns:
            ValidationResult owning a copy of the failures
        """
        return cls(failures=tuple(failures))

    @property
    def messages(self) -> list[str]:
        """Failure messages in order."""
        return [failure.message for failure in self.failures]

    def failures_for(self, key: str) -> list[Failure]:
        """Get the failures produced for one field key.

        Args:
            key: Field key to filter on

        Returns:
            Failures whose key equals ``key``, in order
        """
        return [failure for failure in self.failures if failure.key == key]

    def to_dict(self) -> dict[str, typing.Any]:
        """Convert the result to a dictionary of JSON-compatible values."""
        return self.model_dump(mode="json")

    def to_json(self, indent: int | None = None) -> str:
        """Convert the result to a JSON string.

        Args:
            indent: JSON indentation level (None for compact)
        """
        return json.dumps(self.to_dict(), indent=indent)
