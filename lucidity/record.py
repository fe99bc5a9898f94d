"""Type aliases for the values passed around by the engine."""

import typing

from . import result as _result


Entity = typing.Any
"""Type alias for the object being validated.

Any object works: Pydantic models, dataclasses, plain classes or mappings.
"""

Selector = typing.Callable[[Entity], typing.Any]
"""Type alias for a function extracting one property value from an entity."""

Rule = typing.Callable[[typing.Any, Entity], _result.Failure | None]
"""Type alias for a rule.

A rule receives the property value and the whole entity and returns a
Failure, or None when the value is valid.
"""

FieldAccessor = typing.Callable[..., str | None]
"""Type alias for the accessor returned by ``Validator.by_field``.

Calling it (the optional positional argument is ignored) returns the first
failure message for the field, or None.
"""

OverrideCallback = typing.Callable[[list[_result.Failure]], None]
"""Type alias for the callback receiving every failure of a probed field."""
