"""Cascade options for rule chains."""

from enum import Enum


class CascadeMode(str, Enum):
    """How a chain behaves once one of its rules fails.

    Attributes:
        CONTINUE: Run every rule in the chain and collect all failures
        STOP_ON_FIRST_FAILURE: Stop at the first failing rule. On a validator,
            a chain in this mode that fails also stops the remaining chains.
    """

    CONTINUE = "continue"
    STOP_ON_FIRST_FAILURE = "stop_on_first_failure"
