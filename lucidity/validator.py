"""Validators: the set of property chains declared for one entity type."""

import logging
import typing
from collections.abc import Mapping

from . import builder as _builder
from . import options as _options
from . import record as _record
from . import result as _result

logger = logging.getLogger(__name__)

E = typing.TypeVar("E")


def _select_by_key(key: str) -> _record.Selector:
    """Build the default selector: ``entity.get(key)`` for mappings, else ``getattr``."""

    def select(entity: typing.Any) -> typing.Any:
        if isinstance(entity, Mapping):
            return entity.get(key)
        return getattr(entity, key)

    return select


class Validator(typing.Generic[E]):
    """Validates entities of type E against declared property chains.

    Declare rules in a subclass ``__init__`` (or on an instance) and reuse
    the validator for many entities. Chains run in registration order.

    Failures are returned, never raised. Only exceptions from selectors and
    predicates propagate.

    Example:
        >>> class UserValidator(Validator[User]):
        ...     def __init__(self) -> None:
        ...         super().__init__()
        ...         self.rule_for(lambda u: u.email, key="email").not_empty().valid_email()
        ...         self.rule_for(lambda u: u.age, key="age").min(18)
        >>> result = UserValidator().validate(user)
        >>> result.is_valid
        True
    """

    def __init__(self) -> None:
        self._chains: list[_builder.PropertyChain] = []

    def __repr__(self) -> str:
        keys = ", ".join(repr(chain.key) for chain in self._chains)
        return f"{type(self).__name__}(chains=[{keys}])"

    @property
    def chains(self) -> tuple[_builder.PropertyChain, ...]:
        """Registered chains in registration order."""
        return tuple(self._chains)

    def add_chain(self, chain: _builder.PropertyChain) -> _builder.PropertyChain:
        """Register a chain.

        Duplicate keys are accepted: both chains run in :meth:`validate`, and
        key lookups resolve to the first one registered.

        Args:
            chain: The chain to register

        Returns:
            The registered chain
        """
        if self._find_chain(chain.key) is not None:
            logger.warning(
                "%s already has a chain for key %r; lookups by key will use the first one",
                type(self).__name__,
                chain.key,
            )
        self._chains.append(chain)
        return chain

    def rule_for(
        self,
        selector: _record.Selector | None = None,
        key: str = "",
        label: str = "",
    ) -> _builder.PropertyChain:
        """Declare a chain of rules for one property.

        Args:
            selector: Function(entity) -> property value. When None, the
                property is read by ``key``: ``entity.get(key)`` for mappings,
                ``getattr(entity, key)`` otherwise.
            key: Field key for failures and lookups
            label: Display name used in messages

        Returns:
            The new chain, for fluent configuration

        Raises:
            ValueError: If neither a selector nor a key is given
        """
        if selector is None:
            if not key:
                raise ValueError("rule_for() needs a selector or a key")
            selector = _select_by_key(key)
        return self.add_chain(_builder.PropertyChain(key, selector, label))

    def _find_chain(self, key: str) -> _builder.PropertyChain | None:
        return next((chain for chain in self._chains if chain.key == key), None)

    def get_exceptions(self, entity: E) -> list[_result.Failure]:
        """Run every chain and collect the failures.

        Chains run in registration order. When a chain in
        ``STOP_ON_FIRST_FAILURE`` mode produces a failure, the remaining
        chains are skipped.

        Args:
            entity: The entity to validate

        Returns:
            Failures in chain order, then rule order
        """
        failures: list[_result.Failure] = []
        for index, chain in enumerate(self._chains):
            chain_failures = chain.execute_chain(entity)
            failures.extend(chain_failures)
            if chain_failures and chain.mode is _options.CascadeMode.STOP_ON_FIRST_FAILURE:
                logger.debug(
                    "Chain %r failed in %s mode, skipping %d remaining chain(s)",
                    chain.key,
                    chain.mode.value,
                    len(self._chains) - index - 1,
                )
                break
        return failures

    def validate(self, entity: E) -> _result.ValidationResult:
        """Validate an entity.

        Args:
            entity: The entity to validate

        Returns:
            ValidationResult with the failures from :meth:`get_exceptions`
        """
        failures = self.get_exceptions(entity)
        logger.debug(
            "%s validated %s: %d failure(s)",
            type(self).__name__,
            type(entity).__name__,
            len(failures),
        )
        return _result.ValidationResult.from_failures(failures)

    def get_exceptions_by_key(self, entity: E, key: str) -> list[_result.Failure]:
        """Run only the chain registered for ``key``.

        Args:
            entity: The entity to validate
            key: Field key of the chain

        Returns:
            The chain's failures, or an empty list when no chain has the key
        """
        chain = self._find_chain(key)
        if chain is None:
            logger.debug("%s has no chain for key %r", type(self).__name__, key)
            return []
        return chain.execute_chain(entity)

    def by_field(
        self,
        entity: E,
        key: str,
        override_callback: _record.OverrideCallback | None = None,
    ) -> _record.FieldAccessor:
        """Build an accessor that validates a single field on demand.

        Meant for form fields: each call of the accessor runs the field's
        chain and returns its first failure message. A dotted key such as
        ``"address.postcode"`` is resolved through the chain's nested
        validator.

        Args:
            entity: The entity holding the field
            key: Field key, optionally dotted
            override_callback: Called with the field's full failure list on
                every accessor call (with an empty list when the key cannot
                be resolved)

        Returns:
            Function([value]) -> first failure message or None; the
            positional argument is accepted and ignored

        Example:
            >>> email_field = validator.by_field(user, "email")
            >>> email_field()
            "'email' must not be empty."
        """
        if "." in key:
            first_key, remaining_path = key.split(".", 1)
        else:
            first_key, remaining_path = key, None

        chain = self._find_chain(first_key)
        if chain is None:
            logger.debug("%s has no chain for key %r", type(self).__name__, first_key)
            if override_callback is not None:
                override_callback([])
            return _builder.no_field

        if remaining_path is not None:
            return chain.resolve_nested_field(entity, remaining_path, override_callback)

        def accessor(_value: typing.Any = None) -> str | None:
            failures = chain.execute_chain(entity)
            if override_callback is not None:
                override_callback(failures)
            return failures[0].message if failures else None

        return accessor
