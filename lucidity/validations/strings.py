"""Rules for strings and other sized values."""

import re
import typing

from .. import predicates as _predicates
from ..translation import LanguageCode
from . import base as _base

Host = _base.Host


def _length_parameters(
    limit_name: str, limit: int
) -> typing.Callable[[typing.Any, typing.Any, str], dict[str, str]]:
    def build(value: typing.Any, entity: typing.Any, name: str) -> dict[str, str]:
        return {
            "PropertyName": name,
            limit_name: str(limit),
            "TotalLength": str(len(value) if value is not None else 0),
        }

    return build


class StringValidations(_base.RuleHost):
    """Emptiness, length, pattern and character-class rules.

    Methods without the ``_or_null`` suffix fail on None; the ``_or_null``
    forms let None pass.
    """

    def not_empty(
        self: Host, *, message: str | None = None, code: str | None = None
    ) -> Host:
        """Fail when the value is None or has length zero.

        Example:
            >>> validator.rule_for(lambda u: u.email, key="email").not_empty()
        """
        return self._add(
            lambda value, entity: len(value) > 0,
            LanguageCode.NOT_EMPTY,
            code=code,
            message=message,
        )

    def not_empty_or_null(
        self: Host, *, message: str | None = None, code: str | None = None
    ) -> Host:
        return self._add(
            lambda value, entity: len(value) > 0,
            LanguageCode.NOT_EMPTY,
            code=code,
            message=message,
            nulls=_base.null_policy(True),
        )

    def is_empty(
        self: Host, *, message: str | None = None, code: str | None = None
    ) -> Host:
        return self._add(
            lambda value, entity: len(value) == 0,
            LanguageCode.IS_EMPTY,
            code=code,
            message=message,
        )

    def is_empty_or_null(
        self: Host, *, message: str | None = None, code: str | None = None
    ) -> Host:
        return self._add(
            lambda value, entity: len(value) == 0,
            LanguageCode.IS_EMPTY,
            code=code,
            message=message,
            nulls=_base.null_policy(True),
        )

    def min_length(
        self: Host,
        length: int,
        *,
        message: str | None = None,
        code: str | None = None,
    ) -> Host:
        """Fail when the value is shorter than ``length``.

        Template parameters: ``{PropertyName}``, ``{MinLength}``, ``{TotalLength}``.
        """
        return self._min_length(length, message=message, code=code, or_null=False)

    def min_length_or_null(
        self: Host,
        length: int,
        *,
        message: str | None = None,
        code: str | None = None,
    ) -> Host:
        return self._min_length(length, message=message, code=code, or_null=True)

    def _min_length(
        self: Host,
        length: int,
        *,
        message: str | None,
        code: str | None,
        or_null: bool,
    ) -> Host:
        return self._add(
            lambda value, entity: len(value) >= length,
            LanguageCode.MIN_LENGTH,
            code=code,
            message=message,
            parameters=_length_parameters("MinLength", length),
            nulls=_base.null_policy(or_null),
        )

    def max_length(
        self: Host,
        length: int,
        *,
        message: str | None = None,
        code: str | None = None,
    ) -> Host:
        """Fail when the value is longer than ``length``.

        Template parameters: ``{PropertyName}``, ``{MaxLength}``, ``{TotalLength}``.
        """
        return self._max_length(length, message=message, code=code, or_null=False)

    def max_length_or_null(
        self: Host,
        length: int,
        *,
        message: str | None = None,
        code: str | None = None,
    ) -> Host:
        return self._max_length(length, message=message, code=code, or_null=True)

    def _max_length(
        self: Host,
        length: int,
        *,
        message: str | None,
        code: str | None,
        or_null: bool,
    ) -> Host:
        return self._add(
            lambda value, entity: len(value) <= length,
            LanguageCode.MAX_LENGTH,
            code=code,
            message=message,
            parameters=_length_parameters("MaxLength", length),
            nulls=_base.null_policy(or_null),
        )

    def matches_pattern(
        self: Host,
        pattern: str | re.Pattern[str],
        *,
        message: str | None = None,
        code: str | None = None,
    ) -> Host:
        """Fail unless ``pattern`` is found somewhere in the value."""
        return self._add(
            lambda value, entity: _predicates.matches(value, pattern),
            LanguageCode.MATCHES_PATTERN,
            code=code,
            message=message,
        )

    def matches_pattern_or_null(
        self: Host,
        pattern: str | re.Pattern[str],
        *,
        message: str | None = None,
        code: str | None = None,
    ) -> Host:
        return self._add(
            lambda value, entity: _predicates.matches(value, pattern),
            LanguageCode.MATCHES_PATTERN,
            code=code,
            message=message,
            nulls=_base.null_policy(True),
        )

    def must_have_lowercase(
        self: Host, *, message: str | None = None, code: str | None = None
    ) -> Host:
        return self._string_rule(
            _predicates.has_lowercase, LanguageCode.MUST_HAVE_LOWERCASE, message, code, False
        )

    def must_have_lowercase_or_null(
        self: Host, *, message: str | None = None, code: str | None = None
    ) -> Host:
        return self._string_rule(
            _predicates.has_lowercase, LanguageCode.MUST_HAVE_LOWERCASE, message, code, True
        )

    def must_have_uppercase(
        self: Host, *, message: str | None = None, code: str | None = None
    ) -> Host:
        return self._string_rule(
            _predicates.has_uppercase, LanguageCode.MUST_HAVE_UPPERCASE, message, code, False
        )

    def must_have_uppercase_or_null(
        self: Host, *, message: str | None = None, code: str | None = None
    ) -> Host:
        return self._string_rule(
            _predicates.has_uppercase, LanguageCode.MUST_HAVE_UPPERCASE, message, code, True
        )

    def must_have_number(
        self: Host, *, message: str | None = None, code: str | None = None
    ) -> Host:
        return self._string_rule(
            _predicates.has_number, LanguageCode.MUST_HAVE_NUMBER, message, code, False
        )

    def must_have_number_or_null(
        self: Host, *, message: str | None = None, code: str | None = None
    ) -> Host:
        return self._string_rule(
            _predicates.has_number, LanguageCode.MUST_HAVE_NUMBER, message, code, True
        )

    def must_have_special_character(
        self: Host, *, message: str | None = None, code: str | None = None
    ) -> Host:
        return self._string_rule(
            _predicates.has_special_character,
            LanguageCode.MUST_HAVE_SPECIAL_CHARACTER,
            message,
            code,
            False,
        )

    def must_have_special_character_or_null(
        self: Host, *, message: str | None = None, code: str | None = None
    ) -> Host:
        return self._string_rule(
            _predicates.has_special_character,
            LanguageCode.MUST_HAVE_SPECIAL_CHARACTER,
            message,
            code,
            True,
        )

    def valid_email(
        self: Host, *, message: str | None = None, code: str | None = None
    ) -> Host:
        return self._string_rule(
            _predicates.is_valid_email, LanguageCode.VALID_EMAIL, message, code, False
        )

    def valid_email_or_null(
        self: Host, *, message: str | None = None, code: str | None = None
    ) -> Host:
        return self._string_rule(
            _predicates.is_valid_email, LanguageCode.VALID_EMAIL, message, code, True
        )

