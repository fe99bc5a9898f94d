"""Equality, ordering and range rules for comparable values."""

import operator
import typing
from datetime import date, datetime

from .. import rules as _rules
from ..translation import LanguageCode
from . import base as _base
from . import datetimes as _datetimes

Host = _base.Host

Comparison = typing.Any
"""A literal comparison value, or a function reading it from the entity."""


def _resolve(comparison: Comparison, entity: typing.Any) -> typing.Any:
    return comparison(entity) if callable(comparison) else comparison


def _comparison_parameters(comparison: Comparison) -> _rules.ParameterBuilder:
    def build(value: typing.Any, entity: typing.Any, name: str) -> dict[str, str]:
        return {
            "PropertyName": name,
            "ComparisonValue": str(_resolve(comparison, entity)),
        }

    return build


def _resolved_ordering(
    compare: typing.Callable[[typing.Any, typing.Any], bool], comparison: Comparison
) -> typing.Callable[[typing.Any, typing.Any], bool]:
    def check(value: typing.Any, entity: typing.Any) -> bool:
        bound = _resolve(comparison, entity)
        if isinstance(bound, (date, datetime)):
            return _datetimes.compare_datetimes(compare, value, bound)
        return compare(value, bound)

    return check


def _limit_parameters(limit_name: str, limit: typing.Any) -> _rules.ParameterBuilder:
    def build(value: typing.Any, entity: typing.Any, name: str) -> dict[str, str]:
        return {"PropertyName": name, limit_name: str(limit), "PropertyValue": str(value)}

    return build


class ComparisonValidations(_base.RuleHost):
    """Rules for values supporting ``==`` and ordering operators.

    ``equal_to`` and ``not_equal_to`` accept either a literal or a function
    of the entity, so one property can be checked against another::

        validator.rule_for(lambda c: c.confirm_password, key="confirmPassword") \\
            .equal_to(lambda c: c.password)
    """

    def equal_to(
        self: Host,
        comparison: Comparison,
        *,
        message: str | None = None,
        code: str | None = None,
    ) -> Host:
        """Fail unless the value equals ``comparison``.

        Template parameters: ``{PropertyName}``, ``{ComparisonValue}``.
        """
        return self._equality(operator.eq, comparison, LanguageCode.EQUAL_TO, message, code, False)

    def equal_to_or_null(
        self: Host,
        comparison: Comparison,
        *,
        message: str | None = None,
        code: str | None = None,
    ) -> Host:
        return self._equality(operator.eq, comparison, LanguageCode.EQUAL_TO, message, code, True)

    def not_equal_to(
        self: Host,
        comparison: Comparison,
        *,
        message: str | None = None,
        code: str | None = None,
    ) -> Host:
        return self._equality(
            operator.ne, comparison, LanguageCode.NOT_EQUAL_TO, message, code, False
        )

    def not_equal_to_or_null(
        self: Host,
        comparison: Comparison,
        *,
        message: str | None = None,
        code: str | None = None,
    ) -> Host:
        return self._equality(
            operator.ne, comparison, LanguageCode.NOT_EQUAL_TO, message, code, True
        )

    def greater_than(
        self: Host,
        comparison: typing.Any,
        *,
        message: str | None = None,
        code: str | None = None,
    ) -> Host:
        """Fail unless the value is strictly greater than ``comparison``.

        A date or datetime ``comparison`` switches to the date message.
        A function ``comparison`` that returns a date compares as a date, but
        keeps the general message because the code is chosen when the rule
        is declared.
        """
        return self._ordering(
            operator.gt,
            comparison,
            LanguageCode.GREATER_THAN,
            LanguageCode.GREATER_THAN_DATETIME,
            message,
            code,
            False,
        )

    def greater_than_or_null(
        self: Host,
        comparison: typing.Any,
        *,
        message: str | None = None,
        code: str | None = None,
    ) -> Host:
        return self._ordering(
            operator.gt,
            comparison,
            LanguageCode.GREATER_THAN,
            LanguageCode.GREATER_THAN_DATETIME,
            message,
            code,
            True,
        )

    def less_than(
        self: Host,
        comparison: typing.Any,
        *,
        message: str | None = None,
        code: str | None = None,
    ) -> Host:
        """Fail unless the value is strictly less than ``comparison``.

        A date or datetime ``comparison`` switches to the date message.
        A function ``comparison`` that returns a date compares as a date, but
        keeps the general message because the code is chosen when the rule
        is declared.
        """
        return self._ordering(
            operator.lt,
            comparison,
            LanguageCode.LESS_THAN,
            LanguageCode.LESS_THAN_DATETIME,
            message,
            code,
            False,
        )

    def less_than_or_null(
        self: Host,
        comparison: typing.Any,
        *,
        message: str | None = None,
        code: str | None = None,
    ) -> Host:
        return self._ordering(
            operator.lt,
            comparison,
            LanguageCode.LESS_THAN,
            LanguageCode.LESS_THAN_DATETIME,
            message,
            code,
            True,
        )

    def min(
        self: Host,
        minimum: typing.Any,
        *,
        message: str | None = None,
        code: str | None = None,
    ) -> Host:
        """Fail when the value is below ``minimum``.

        Template parameters: ``{PropertyName}``, ``{MinValue}``, ``{PropertyValue}``.

        Example:
            >>> validator.rule_for(lambda u: u.age, key="age").min(18)
        """
        return self._limit(operator.ge, minimum, "MinValue", LanguageCode.MIN, message, code, False)

    def min_or_null(
        self: Host,
        minimum: typing.Any,
        *,
        message: str | None = None,
        code: str | None = None,
    ) -> Host:
        return self._limit(operator.ge, minimum, "MinValue", LanguageCode.MIN, message, code, True)

    def max(
        self: Host,
        maximum: typing.Any,
        *,
        message: str | None = None,
        code: str | None = None,
    ) -> Host:
        """Fail when the value is above ``maximum``.

        Template parameters: ``{PropertyName}``, ``{MaxValue}``, ``{PropertyValue}``.
        """
        return self._limit(operator.le, maximum, "MaxValue", LanguageCode.MAX, message, code, False)

    def max_or_null(
        self: Host,
        maximum: typing.Any,
        *,
        message: str | None = None,
        code: str | None = None,
    ) -> Host:
        return self._limit(operator.le, maximum, "MaxValue", LanguageCode.MAX, message, code, True)

    def range(
        self: Host,
        start: typing.Any,
        end: typing.Any,
        *,
        message: str | None = None,
        code: str | None = None,
    ) -> Host:
        """Fail unless ``start <= value <= end``.

        Template parameters: ``{PropertyName}``, ``{From}``, ``{To}``, ``{PropertyValue}``.
        """
        return self._range(start, end, message, code, False)

    def range_or_null(
        self: Host,
        start: typing.Any,
        end: typing.Any,
        *,
        message: str | None = None,
        code: str | None = None,
    ) -> Host:
        return self._range(start, end, message, code, True)

    def _equality(
        self: Host,
        compare: typing.Callable[[typing.Any, typing.Any], bool],
        comparison: Comparison,
        default_code: str,
        message: str | None,
        code: str | None,
        or_null: bool,
    ) -> Host:
        return self._add(
            lambda value, entity: compare(value, _resolve(comparison, entity)),
            default_code,
            code=code,
            message=message,
            parameters=_comparison_parameters(comparison),
            nulls=_base.null_policy(or_null),
        )

    def _ordering(
        self: Host,
        compare: typing.Callable[[typing.Any, typing.Any], bool],
        comparison: typing.Any,
        default_code: str,
        datetime_code: str,
        message: str | None,
        code: str | None,
        or_null: bool,
    ) -> Host:
        if isinstance(comparison, (date, datetime)):
            predicate = _datetimes.datetime_predicate(compare, comparison)
            default_code = datetime_code
        else:
            predicate = _resolved_ordering(compare, comparison)
        return self._add(
            predicate,
            default_code,
            code=code,
            message=message,
            parameters=_comparison_parameters(comparison),
            nulls=_base.null_policy(or_null),
        )

    def _limit(
        self: Host,
        compare: typing.Callable[[typing.Any, typing.Any], bool],
        limit: typing.Any,
        limit_name: str,
        default_code: str,
        message: str | None,
        code: str | None,
        or_null: bool,
    ) -> Host:
        return self._add(
            lambda value, entity: compare(value, limit),
            default_code,
            code=code,
            message=message,
            parameters=_limit_parameters(limit_name, limit),
            nulls=_base.null_policy(or_null),
        )

    def _range(
        self: Host,
        start: typing.Any,
        end: typing.Any,
        message: str | None,
        code: str | None,
        or_null: bool,
    ) -> Host:
        def build(value: typing.Any, entity: typing.Any, name: str) -> dict[str, str]:
            return {
                "PropertyName": name,
                "From": str(start),
                "To": str(end),
                "PropertyValue": str(value),
            }

        return self._add(
            lambda value, entity: start <= value <= end,
            LanguageCode.RANGE,
            code=code,
            message=message,
            parameters=build,
            nulls=_base.null_policy(or_null),
        )
