"""Rules comparing dates and datetimes.

Property values and bounds may be ``date``/``datetime`` objects or strings
that dateutil can parse. A property string that cannot be parsed fails the
rule; a bound that cannot be parsed raises when the rule is declared.
"""

import operator
import typing
from datetime import date, datetime

from .. import coerce as _coerce
from .. import rules as _rules
from ..translation import LanguageCode
from . import base as _base

Host = _base.Host

Bound = date | datetime | str


def datetime_predicate(
    compare: typing.Callable[[typing.Any, typing.Any], bool], bound: date | datetime
) -> typing.Callable[[typing.Any, typing.Any], bool]:
    """Build a predicate comparing the (coerced) property value to ``bound``."""

    def check(value: typing.Any, entity: typing.Any) -> bool:
        return compare_datetimes(compare, value, bound)

    return check


def compare_datetimes(
    compare: typing.Callable[[typing.Any, typing.Any], bool],
    value: typing.Any,
    bound: date | datetime,
) -> bool:
    """Coerce value to a datetime and compare it to bound; unreadable values fail."""
    moment = _coerce.try_datetime(value)
    if moment is None:
        return False
    return compare(*_coerce.comparable_datetimes(moment, bound))


def _comparison_parameters(bound: date | datetime) -> _rules.ParameterBuilder:
    def build(value: typing.Any, entity: typing.Any, name: str) -> dict[str, str]:
        return {"PropertyName": name, "ComparisonValue": str(bound)}

    return build


def _between_parameters(
    start: date | datetime, end: date | datetime
) -> _rules.ParameterBuilder:
    def build(value: typing.Any, entity: typing.Any, name: str) -> dict[str, str]:
        return {"PropertyName": name, "StartValue": str(start), "EndValue": str(end)}

    return build


class DateTimeValidations(_base.RuleHost):
    """Ordering rules specific to dates.

    ``greater_than`` and ``less_than`` live with the general comparison rules
    and switch to the date messages when given a date bound.
    """

    def greater_than_or_equal_to(
        self: Host,
        comparison: Bound,
        *,
        message: str | None = None,
        code: str | None = None,
    ) -> Host:
        """Fail unless the value is at or after ``comparison``.

        Template parameters: ``{PropertyName}``, ``{ComparisonValue}``.
        """
        return self._datetime_rule(
            operator.ge,
            comparison,
            LanguageCode.GREATER_THAN_OR_EQUAL_TO_DATETIME,
            message,
            code,
            False,
        )

    def greater_than_or_equal_to_or_null(
        self: Host,
        comparison: Bound,
        *,
        message: str | None = None,
        code: str | None = None,
    ) -> Host:
        return self._datetime_rule(
            operator.ge,
            comparison,
            LanguageCode.GREATER_THAN_OR_EQUAL_TO_DATETIME,
            message,
            code,
            True,
        )

    def less_than_or_equal_to(
        self: Host,
        comparison: Bound,
        *,
        message: str | None = None,
        code: str | None = None,
    ) -> Host:
        """Fail unless the value is at or before ``comparison``."""
        return self._datetime_rule(
            operator.le,
            comparison,
            LanguageCode.LESS_THAN_OR_EQUAL_TO_DATETIME,
            message,
            code,
            False,
        )

    def less_than_or_equal_to_or_null(
        self: Host,
        comparison: Bound,
        *,
        message: str | None = None,
        code: str | None = None,
    ) -> Host:
        return self._datetime_rule(
            operator.le,
            comparison,
            LanguageCode.LESS_THAN_OR_EQUAL_TO_DATETIME,
            message,
            code,
            True,
        )

    def inclusive_between(
        self: Host,
        start: Bound,
        end: Bound,
        *,
        message: str | None = None,
        code: str | None = None,
    ) -> Host:
        """Fail unless ``start <= value <= end``.

        Template parameters: ``{PropertyName}``, ``{StartValue}``, ``{EndValue}``.
        """
        return self._between(
            start, end, True, LanguageCode.INCLUSIVE_BETWEEN_DATETIME, message, code, False
        )

    def inclusive_between_or_null(
        self: Host,
        start: Bound,
        end: Bound,
        *,
        message: str | None = None,
        code: str | None = None,
    ) -> Host:
        return self._between(
            start, end, True, LanguageCode.INCLUSIVE_BETWEEN_DATETIME, message, code, True
        )

    def exclusive_between(
        self: Host,
        start: Bound,
        end: Bound,
        *,
        message: str | None = None,
        code: str | None = None,
    ) -> Host:
        """Fail unless ``start < value < end``."""
        return self._between(
            start, end, False, LanguageCode.EXCLUSIVE_BETWEEN_DATETIME, message, code, False
        )

    def exclusive_between_or_null(
        self: Host,
        start: Bound,
        end: Bound,
        *,
        message: str | None = None,
        code: str | None = None,
    ) -> Host:
        return self._between(
            start, end, False, LanguageCode.EXCLUSIVE_BETWEEN_DATETIME, message, code, True
        )

    def _datetime_rule(
        self: Host,
        compare: typing.Callable[[typing.Any, typing.Any], bool],
        comparison: Bound,
        default_code: str,
        message: str | None,
        code: str | None,
        or_null: bool,
    ) -> Host:
        bound = _coerce.as_datetime(comparison)
        return self._add(
            datetime_predicate(compare, bound),
            default_code,
            code=code,
            message=message,
            parameters=_comparison_parameters(bound),
            nulls=_base.null_policy(or_null),
        )

    def _between(
        self: Host,
        start: Bound,
        end: Bound,
        inclusive: bool,
        default_code: str,
        message: str | None,
        code: str | None,
        or_null: bool,
    ) -> Host:
        lower = _coerce.as_datetime(start)
        upper = _coerce.as_datetime(end)
        after = datetime_predicate(operator.ge if inclusive else operator.gt, lower)
        before = datetime_predicate(operator.le if inclusive else operator.lt, upper)
        return self._add(
            lambda value, entity: after(value, entity) and before(value, entity),
            default_code,
            code=code,
            message=message,
            parameters=_between_parameters(lower, upper),
            nulls=_base.null_policy(or_null),
        )
