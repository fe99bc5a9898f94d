"""Predicate rule families mixed into :class:`lucidity.builder.PropertyChain`."""

from lucidity.validations.base import RuleHost
from lucidity.validations.comparisons import ComparisonValidations
from lucidity.validations.datetimes import DateTimeValidations
from lucidity.validations.documents import DocumentValidations
from lucidity.validations.nullability import NullabilityValidations
from lucidity.validations.strings import StringValidations

__all__ = [
    "RuleHost",
    "ComparisonValidations",
    "DateTimeValidations",
    "DocumentValidations",
    "NullabilityValidations",
    "StringValidations",
]
