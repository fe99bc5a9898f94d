"""Rules about the presence of a value."""

from .. import rules as _rules
from ..translation import LanguageCode
from . import base as _base

Host = _base.Host


class NullabilityValidations(_base.RuleHost):
    """``is_null`` and ``is_not_null``.

    These rules inspect None themselves, so they have no ``_or_null`` forms.
    """

    def is_null(self: Host, *, message: str | None = None, code: str | None = None) -> Host:
        return self._add(
            lambda value, entity: value is None,
            LanguageCode.IS_NULL,
            code=code,
            message=message,
            nulls=_rules.NullPolicy.CHECK,
        )

    def is_not_null(
        self: Host, *, message: str | None = None, code: str | None = None
    ) -> Host:
        return self._add(
            lambda value, entity: value is not None,
            LanguageCode.IS_NOT_NULL,
            code=code,
            message=message,
            nulls=_rules.NullPolicy.CHECK,
        )
