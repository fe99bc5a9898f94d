"""Property chains: the ordered rules declared for one property."""

import logging
import typing

from . import config as _config
from . import options as _options
from . import record as _record
from . import result as _result
from . import rules as _rules
from . import validations as _validations

if typing.TYPE_CHECKING:
    from .validator import Validator

logger = logging.getLogger(__name__)

Chain = typing.TypeVar("Chain", bound="PropertyChain")


def no_field(_value: typing.Any = None) -> None:
    """Field accessor for fields that cannot be resolved; always returns None."""
    return None


class PropertyChain(
    _validations.StringValidations,
    _validations.ComparisonValidations,
    _validations.DateTimeValidations,
    _validations.DocumentValidations,
    _validations.NullabilityValidations,
):
    """Ordered rules bound to one selector and one field key.

    Chains are created with :meth:`lucidity.Validator.rule_for` and configured
    fluently; every configuration method returns the chain itself.

    Attributes:
        key: Field key stamped on failures and used for lookups
        label: Display name used in messages instead of the key when set
        selector: Function extracting the property value from the entity

    Example:
        >>> validator.rule_for(lambda u: u.password, key="password") \\
        ...     .cascade(CascadeMode.STOP_ON_FIRST_FAILURE) \\
        ...     .not_empty() \\
        ...     .min_length(8)
    """

    def __init__(
        self,
        key: str,
        selector: _record.Selector,
        label: str = "",
        *,
        cascade_mode: _options.CascadeMode | str | None = None,
    ) -> None:
        """Initialize PropertyChain.

        Args:
            key: Field key
            selector: Function(entity) -> property value
            label: Display name for messages
            cascade_mode: Cascade mode (None for the configured default)
        """
        self.key = key
        self.label = label
        self.selector = selector
        self._rules: list[_record.Rule] = []
        self._mode = _options.CascadeMode(
            cascade_mode if cascade_mode is not None else _config.settings.cascade_mode
        )
        self._nested: "Validator[typing.Any] | None" = None

    def __repr__(self) -> str:
        return (
            f"PropertyChain(key={self.key!r}, rules={len(self._rules)}, "
            f"mode={self._mode.value})"
        )

    @property
    def rules(self) -> tuple[_record.Rule, ...]:
        """The chain's rules in registration order."""
        return tuple(self._rules)

    @property
    def mode(self) -> _options.CascadeMode:
        """The chain's cascade mode."""
        return self._mode

    @property
    def nested_validator(self) -> "Validator[typing.Any] | None":
        return self._nested

    def use(self: Chain, rule: _record.Rule) -> Chain:
        """Append a rule.

        Args:
            rule: Function(value, entity) -> Failure | None

        Returns:
            This chain
        """
        self._rules.append(rule)
        return self

    add_rule = use

    def must(
        self: Chain,
        predicate: typing.Callable[[typing.Any], bool],
        message: str,
        code: str,
    ) -> Chain:
        """Append a custom rule on the property value.

        The predicate also receives None values.

        Args:
            predicate: Function(value) -> bool, True when valid
            message: Failure message
            code: Failure code

        Example:
            >>> chain.must(lambda name: name != "admin", "Reserved name", "reserved")
        """
        return self.use(
            _rules.predicate_rule(
                lambda value, entity: predicate(value),
                code,
                key=self.key,
                label=self.label,
                message=message,
                nulls=_rules.NullPolicy.CHECK,
            )
        )

    def must_with(
        self: Chain,
        predicate: typing.Callable[[typing.Any, typing.Any], bool],
        message: str,
        code: str,
    ) -> Chain:
        """Append a custom rule that can also read the whole entity.

        Args:
            predicate: Function(value, entity) -> bool, True when valid
            message: Failure message
            code: Failure code

        Example:
            >>> chain.must_with(
            ...     lambda confirm, user: confirm == user.password,
            ...     "Passwords do not match",
            ...     "password_mismatch",
            ... )
        """
        return self.use(
            _rules.predicate_rule(
                predicate,
                code,
                key=self.key,
                label=self.label,
                message=message,
                nulls=_rules.NullPolicy.CHECK,
            )
        )

    def cascade(self: Chain, mode: _options.CascadeMode | str) -> Chain:
        """Set the cascade mode.

        With ``STOP_ON_FIRST_FAILURE`` the chain stops at its first failing
        rule, and a validator stops running later chains once this chain fails.

        Returns:
            This chain
        """
        self._mode = _options.CascadeMode(mode)
        return self

    set_cascade_mode = cascade

    def set_validator(self: Chain, validator: "Validator[typing.Any]") -> Chain:
        """Validate the property value with another validator.

        The nested validator runs after this chain's own rules. A None
        property value skips it.

        Args:
            validator: Validator for the property's type

        Returns:
            This chain
        """
        self._nested = validator
        return self

    def execute_chain(self, entity: typing.Any) -> list[_result.Failure]:
        """Run the chain against an entity.

        Exceptions raised by the selector or by a rule propagate.

        Args:
            entity: The entity to validate

        Returns:
            Failures in rule order; at most one in STOP_ON_FIRST_FAILURE mode
        """
        value = self.selector(entity)
        stop = self._mode is _options.CascadeMode.STOP_ON_FIRST_FAILURE
        failures: list[_result.Failure] = []

        for rule in self._rules:
            failure = rule(value, entity)
            if failure is None:
                continue
            failures.append(failure)
            if stop:
                return failures

        if self._nested is not None and value is not None:
            nested_failures = self._nested.get_exceptions(value)
            failures.extend(nested_failures[:1] if stop else nested_failures)

        return failures

    def resolve_nested_field(
        self,
        entity: typing.Any,
        remaining_path: str,
        override_callback: _record.OverrideCallback | None = None,
    ) -> _record.FieldAccessor:
        """Resolve a dotted field path inside the nested validator.

        Args:
            entity: The parent entity
            remaining_path: Path below this chain, e.g. ``"postcode"`` or
                ``"address.postcode"``
            override_callback: Passed on to the nested ``by_field``

        Returns:
            :func:`no_field` when the chain has no nested validator. Otherwise
            an accessor that reads the property on every call and delegates to
            the nested validator's ``by_field``; while the property is None
            it returns None and passes ``[]`` to the callback.
        """
        nested = self._nested
        if nested is None:
            logger.debug(
                "Cannot resolve %r below %r: no nested validator", remaining_path, self.key
            )
            if override_callback is not None:
                override_callback([])
            return no_field

        def accessor(_value: typing.Any = None) -> str | None:
            value = self.selector(entity)
            if value is None:
                if override_callback is not None:
                    override_callback([])
                return None
            return nested.by_field(value, remaining_path, override_callback)()

        return accessor


RuleBuilder = PropertyChain
