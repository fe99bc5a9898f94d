"""Shared plumbing for the predicate rule families."""

import abc
import typing

from .. import record as _record
from .. import rules as _rules

Host = typing.TypeVar("Host", bound="RuleHost")


class RuleHost(abc.ABC):
    """Base for the rule family mixins of :class:`lucidity.builder.PropertyChain`.

    Each family method builds a rule with :func:`lucidity.rules.predicate_rule`
    and appends it through :meth:`use`.
    """

    key: str
    label: str

    @abc.abstractmethod
    def use(self: Host, rule: _record.Rule) -> Host:
        """Append a rule and return the host for chaining."""

    def _add(
        self: Host,
        predicate: _rules.Predicate,
        default_code: str,
        *,
        code: str | None,
        message: str | None,
        parameters: _rules.ParameterBuilder | None = None,
        nulls: _rules.NullPolicy = _rules.NullPolicy.FAIL,
    ) -> Host:
        return self.use(
            _rules.predicate_rule(
                predicate,
                code or default_code,
                key=self.key,
                label=self.label,
                parameters=parameters,
                message=message,
                nulls=nulls,
            )
        )

    def _string_rule(
        self: Host,
        check: typing.Callable[[str], bool],
        default_code: str,
        message: str | None,
        code: str | None,
        or_null: bool,
    ) -> Host:
        return self._add(
            lambda value, entity: check(str(value)),
            default_code,
            code=code,
            message=message,
            nulls=null_policy(or_null),
        )


def null_policy(or_null: bool) -> _rules.NullPolicy:
    return _rules.NullPolicy.PASS if or_null else _rules.NullPolicy.FAIL
