"""Translation of failure codes into human-readable messages.

Every built-in rule reports a code (see :class:`LanguageCode`) and a set of
named parameters. The active :class:`Language` maps the code to a message
template whose ``{Token}`` placeholders are filled from those parameters.

The process-wide :class:`LanguageManager` lives on
:data:`lucidity.config.settings`. Swapping tables while other threads are
validating is not synchronized; callers that need that must serialize the
swap themselves.
"""

import logging
import re
import typing

from . import errors as _errors

logger = logging.getLogger(__name__)

DEFAULT_CULTURE = "en"

_TOKEN = re.compile(r"\{(\w+)\}")


class LanguageCode:
    """Codes reported by the built-in rules."""

    EQUAL_TO = "equalTo"
    GREATER_THAN = "greaterThan"
    IS_EMPTY = "isEmpty"
    IS_NOT_NULL = "isNotNull"
    IS_NULL = "isNull"
    LESS_THAN = "lessThan"
    MATCHES_PATTERN = "matchesPattern"
    MAX = "max"
    MAX_LENGTH = "maxLength"
    MIN = "min"
    MIN_LENGTH = "minLength"
    MUST_HAVE_LOWERCASE = "mustHaveLowercase"
    MUST_HAVE_NUMBER = "mustHaveNumber"
    MUST_HAVE_SPECIAL_CHARACTER = "mustHaveSpecialCharacter"
    MUST_HAVE_UPPERCASE = "mustHaveUppercase"
    NOT_EMPTY = "notEmpty"
    NOT_EQUAL_TO = "notEqualTo"
    RANGE = "range"
    VALID_CEP = "validCEP"
    VALID_CPF = "validCPF"
    VALID_CNPJ = "validCNPJ"
    VALID_CREDIT_CARD = "validCreditCard"
    VALID_EMAIL = "validEmail"
    GREATER_THAN_OR_EQUAL_TO_DATETIME = "greaterThanOrEqualToDateTime"
    GREATER_THAN_DATETIME = "greaterThanDatetime"
    LESS_THAN_OR_EQUAL_TO_DATETIME = "lessThanOrEqualToDateTime"
    LESS_THAN_DATETIME = "lessThanDateTime"
    INCLUSIVE_BETWEEN_DATETIME = "inclusiveBetweenDatetime"
    EXCLUSIVE_BETWEEN_DATETIME = "exclusiveBetweenDatetime"
    VALID_CPF_OR_CNPJ = "validCpfOrCnpj"
    VALID_PHONE_BR = "validPhoneBr"
    VALID_PHONE_DDI_BR = "validPhoneDdiBr"


DEFAULT_TRANSLATIONS: dict[str, str] = {
    LanguageCode.EQUAL_TO: "'{PropertyName}' must be equal to '{ComparisonValue}'.",
    LanguageCode.GREATER_THAN: "'{PropertyName}' must be greater than '{ComparisonValue}'.",
    LanguageCode.IS_EMPTY: "'{PropertyName}' must be empty.",
    LanguageCode.IS_NOT_NULL: "'{PropertyName}' must not be null.",
    LanguageCode.IS_NULL: "'{PropertyName}' must be null.",
    LanguageCode.LESS_THAN: "'{PropertyName}' must be less than '{ComparisonValue}'.",
    LanguageCode.MATCHES_PATTERN: "'{PropertyName}' is not in the correct format.",
    LanguageCode.MAX: (
        "'{PropertyName}' must be less than or equal to {MaxValue}. "
        "You entered {PropertyValue}."
    ),
    LanguageCode.MAX_LENGTH: (
        "The length of '{PropertyName}' must be {MaxLength} characters or fewer. "
        "You entered {TotalLength} characters."
    ),
    LanguageCode.MIN: (
        "'{PropertyName}' must be greater than or equal to {MinValue}. "
        "You entered {PropertyValue}."
    ),
    LanguageCode.MIN_LENGTH: (
        "The length of '{PropertyName}' must be at least {MinLength} characters. "
        "You entered {TotalLength} characters."
    ),
    LanguageCode.MUST_HAVE_LOWERCASE: "'{PropertyName}' must have at least one lowercase letter.",
    LanguageCode.MUST_HAVE_NUMBER: "'{PropertyName}' must have at least one digit ('0'-'9').",
    LanguageCode.MUST_HAVE_SPECIAL_CHARACTER: (
        "'{PropertyName}' must have at least one non-alphanumeric character."
    ),
    LanguageCode.MUST_HAVE_UPPERCASE: "'{PropertyName}' must have at least one uppercase letter.",
    LanguageCode.NOT_EMPTY: "'{PropertyName}' must not be empty.",
    LanguageCode.NOT_EQUAL_TO: "'{PropertyName}' must not be equal to '{ComparisonValue}'.",
    LanguageCode.RANGE: (
        "'{PropertyName}' must be between {From} and {To}. You entered {PropertyValue}."
    ),
    LanguageCode.VALID_CEP: "'{PropertyName}' is not a valid CEP.",
    LanguageCode.VALID_CPF: "'{PropertyName}' is not a valid CPF.",
    LanguageCode.VALID_CNPJ: "'{PropertyName}' is not a valid CNPJ.",
    LanguageCode.VALID_CREDIT_CARD: "'{PropertyName}' is not a valid credit card number.",
    LanguageCode.VALID_EMAIL: "'{PropertyName}' is not a valid email address.",
    LanguageCode.GREATER_THAN_OR_EQUAL_TO_DATETIME: (
        "'{PropertyName}' must be greater than or equal to date '{ComparisonValue}'."
    ),
    LanguageCode.GREATER_THAN_DATETIME: (
        "'{PropertyName}' must be greater than date '{ComparisonValue}'."
    ),
    LanguageCode.LESS_THAN_OR_EQUAL_TO_DATETIME: (
        "'{PropertyName}' must be less than or equal to date '{ComparisonValue}'."
    ),
    LanguageCode.LESS_THAN_DATETIME: "'{PropertyName}' must be less than date '{ComparisonValue}'.",
    LanguageCode.INCLUSIVE_BETWEEN_DATETIME: (
        "'{PropertyName}' must be greater than or equal to '{StartValue}' date "
        "and less than or equal to '{EndValue}' date."
    ),
    LanguageCode.EXCLUSIVE_BETWEEN_DATETIME: (
        "'{PropertyName}' must be greater than the '{StartValue}' date "
        "and less than the '{EndValue}' date."
    ),
    LanguageCode.VALID_CPF_OR_CNPJ: "'{PropertyName}' is not a valid CPF or CNPJ.",
    LanguageCode.VALID_PHONE_BR: "'{PropertyName}' is not a valid phone number.",
    LanguageCode.VALID_PHONE_DDI_BR: "'{PropertyName}' is not a valid phone number with DDI.",
}


def render(template: str, parameters: typing.Mapping[str, str] | None = None) -> str:
    """Fill ``{Token}`` placeholders in a template.

    Tokens without a matching parameter are left as they are.

    Args:
        template: Message template
        parameters: Token name to replacement text

    Returns:
        The rendered message
    """
    if not parameters:
        return template
    return _TOKEN.sub(
        lambda match: str(parameters.get(match.group(1), match.group(0))), template
    )


class Language:
    """A code -> template table for one culture.

    The table starts from :data:`DEFAULT_TRANSLATIONS` and layers the given
    translations on top, unless ``replace`` is set.

    Attributes:
        culture: Culture name, e.g. ``"en"`` or ``"pt_BR"``
    """

    def __init__(
        self,
        translations: typing.Mapping[str, str] | None = None,
        *,
        culture: str = DEFAULT_CULTURE,
        replace: bool = False,
    ) -> None:
        self.culture = culture
        self._translations: dict[str, str] = {} if replace else dict(DEFAULT_TRANSLATIONS)
        if translations:
            self._translations.update(translations)

    def get_translation(self, code: str) -> str | None:
        return self._translations.get(code)

    def set_translation(self, code: str, template: str) -> None:
        self._translations[code] = template

    def update(self, translations: typing.Mapping[str, str]) -> None:
        self._translations.update(translations)

    @property
    def translations(self) -> dict[str, str]:
        """A copy of the table."""
        return dict(self._translations)


class LanguageManager:
    """Registry of languages with one active culture.

    Example:
        >>> manager = LanguageManager()
        >>> manager.add_language("pt_BR", {"notEmpty": "'{PropertyName}' não pode ser vazio."})
        >>> manager.set_culture("pt_BR")
        >>> manager.translate("notEmpty", {"PropertyName": "email"})
        "'email' não pode ser vazio."
    """

    def __init__(self, default: Language | None = None) -> None:
        default = default or Language()
        self._languages: dict[str, Language] = {default.culture: default}
        self._culture = default.culture

    @property
    def culture(self) -> str:
        """The active culture."""
        return self._culture

    @property
    def cultures(self) -> list[str]:
        """Registered cultures."""
        return list(self._languages)

    def get_language(self, culture: str | None = None) -> Language:
        """Get the Language registered for a culture.

        Args:
            culture: Culture name (None for the active culture)

        Raises:
            UnknownCultureError: If the culture is not registered
        """
        culture = culture or self._culture
        try:
            return self._languages[culture]
        except KeyError:
            raise _errors.UnknownCultureError(culture, self.cultures) from None

    def add_language(
        self,
        culture: str,
        translations: typing.Mapping[str, str] | None = None,
        *,
        replace: bool = False,
    ) -> Language:
        """Register a culture, or extend one that is already registered.

        Args:
            culture: Culture name
            translations: Templates overriding the defaults
            replace: If True, the table holds only ``translations`` and
                unlisted codes render as the code itself

        Returns:
            The Language now registered for the culture
        """
        existing = self._languages.get(culture)
        if existing is not None and not replace:
            existing.update(translations or {})
            return existing
        if existing is not None:
            logger.warning("Replacing translation table for culture %r", culture)
        language = Language(translations, culture=culture, replace=replace)
        self._languages[culture] = language
        return language

    def add_translation(self, culture: str, code: str, template: str) -> None:
        """Set a single template, registering the culture if needed."""
        if culture not in self._languages:
            self.add_language(culture)
        self._languages[culture].set_translation(code, template)

    def set_culture(self, culture: str) -> None:
        """Make a registered culture the active one.

        Raises:
            UnknownCultureError: If the culture is not registered
        """
        self.get_language(culture)
        self._culture = culture

    def translate(
        self,
        code: str,
        parameters: typing.Mapping[str, str] | None = None,
        default_message: str | None = None,
        culture: str | None = None,
    ) -> str:
        """Render the message for a failure code.

        A non-empty ``default_message`` is returned as-is. Otherwise the
        template for ``code`` is rendered; an unknown code is returned
        unchanged.

        Args:
            code: Failure code
            parameters: Values for the template placeholders
            default_message: Explicit message that bypasses the table
            culture: Culture to translate into (None for the active culture)

        Returns:
            The message, never None
        """
        if default_message:
            return default_message
        template = self.get_language(culture).get_translation(code)
        if template is None:
            logger.debug("No translation for code %r, using the code as message", code)
            return code
        return render(template, parameters)


def translate(
    code: str,
    parameters: typing.Mapping[str, str] | None = None,
    default_message: str | None = None,
    culture: str | None = None,
) -> str:
    """Translate a code with the process-wide language manager.

    See :meth:`LanguageManager.translate`.
    """
    from . import config as _config

    return _config.settings.language_manager.translate(
        code, parameters, default_message=default_message, culture=culture
    )


def set_translations(
    translations: typing.Mapping[str, str],
    *,
    replace: bool = False,
    culture: str | None = None,
) -> None:
    """Merge or replace templates in the process-wide language manager.

    Already produced failures keep their messages; messages are rendered
    when a rule fails.

    Args:
        translations: code -> template mapping
        replace: If True, drop the defaults and keep only ``translations``
        culture: Culture to update (None for the active culture)
    """
    from . import config as _config

    manager = _config.settings.language_manager
    manager.add_language(culture or manager.culture, translations, replace=replace)
