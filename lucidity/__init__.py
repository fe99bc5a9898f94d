"""Declarative validation rules for Python objects.

A Python package for declaring per-property rule chains on a validator and
running them against entities, producing structured failures with
translatable messages.
"""

__version__ = "0.1.0"

from lucidity.builder import PropertyChain, RuleBuilder
from lucidity.config import Settings, configure, reset, settings
from lucidity.errors import LucidityError, UnknownCultureError
from lucidity.options import CascadeMode
from lucidity.result import Failure, ValidationResult
from lucidity.rules import NullPolicy, predicate_rule
from lucidity.translation import (
    DEFAULT_TRANSLATIONS,
    Language,
    LanguageCode,
    LanguageManager,
    set_translations,
    translate,
)
from lucidity.validator import Validator

__all__ = [
    "Validator",
    "PropertyChain",
    "RuleBuilder",
    "CascadeMode",
    "Failure",
    "ValidationResult",
    "NullPolicy",
    "predicate_rule",
    "Language",
    "LanguageCode",
    "LanguageManager",
    "DEFAULT_TRANSLATIONS",
    "translate",
    "set_translations",
    "Settings",
    "settings",
    "configure",
    "reset",
    "LucidityError",
    "UnknownCultureError",
]
