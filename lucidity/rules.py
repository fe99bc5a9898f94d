"""The rule factory every built-in rule goes through."""

import typing
from enum import Enum

from . import record as _record
from . import result as _result
from . import translation as _translation

Predicate = typing.Callable[[typing.Any, typing.Any], bool]
"""Function(value, entity) -> bool, True when the value is valid."""

ParameterBuilder = typing.Callable[[typing.Any, typing.Any, str], dict[str, str]]
"""Function(value, entity, display_name) -> template parameters."""


class NullPolicy(str, Enum):
    """How a rule treats a None property value.

    Attributes:
        FAIL: None fails without calling the predicate (``not_empty``)
        PASS: None passes without calling the predicate (``not_empty_or_null``)
        CHECK: None is handed to the predicate (``is_null``, ``is_not_null``)
    """

    FAIL = "fail"
    PASS = "pass"
    CHECK = "check"


def display_name(key: str, label: str = "") -> str:
    """Name shown in messages: the label when set, else the key."""
    return label if label else key


def _property_name(value: typing.Any, entity: typing.Any, name: str) -> dict[str, str]:
    return {"PropertyName": name}


def predicate_rule(
    predicate: Predicate,
    code: str,
    *,
    key: str,
    label: str = "",
    parameters: ParameterBuilder | None = None,
    message: str | None = None,
    nulls: NullPolicy = NullPolicy.FAIL,
) -> _record.Rule:
    """Wrap a predicate into a rule.

    The message is rendered through the process-wide translation tables only
    when the predicate fails. An explicit ``message`` always wins over the
    tables.

    Args:
        predicate: Function(value, entity) -> bool
        code: Failure code, also the translation lookup key
        key: Field key stamped on failures
        label: Display name for messages (falls back to key)
        parameters: Builds the template parameters; defaults to
            ``{"PropertyName": display_name}``
        message: Literal message overriding the translation
        nulls: How a None value is treated

    Returns:
        Rule function(value, entity) -> Failure | None

    Example:
        >>> rule = predicate_rule(lambda v, e: v >= 18, "min", key="age")
        >>> rule(15, None).message
        'min'
    """
    build_parameters = parameters or _property_name

    def rule(value: typing.Any, entity: typing.Any) -> _result.Failure | None:
        if value is None and nulls is not NullPolicy.CHECK:
            if nulls is NullPolicy.PASS:
                return None
        elif predicate(value, entity):
            return None

        name = display_name(key, label)
        text = _translation.translate(
            code, build_parameters(value, entity, name), default_message=message
        )
        return _result.Failure(message=text, code=code, key=key)

    return rule
