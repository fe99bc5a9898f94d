"""Pure predicates used by the built-in rules.

Every function takes a string and returns a bool. None of them know about
chains, keys or messages.
"""

import re

EMAIL_PATTERN = re.compile(r"^[\w\.-]+@[a-zA-Z\d\.-]+\.[a-zA-Z]{2,}$", re.ASCII)
CEP_PATTERN = re.compile(r"^\d{5}-?\d{3}$", re.ASCII)
PHONE_BR_PATTERN = re.compile(
    r"^(\(?[1-9]{2}\)?\s?)(9\s?)?(\d{4})[\s-]?(\d{4})$", re.ASCII
)
PHONE_DDI_BR_PATTERN = re.compile(
    r"^\+55 ?\(?[1-9]{2}\)? ?9?[0-9]{4}-?[0-9]{4}$", re.ASCII
)

_NON_DIGIT = re.compile(r"\D")
_CNPJ_WEIGHTS = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


def _digits(value: str) -> str:
    return _NON_DIGIT.sub("", value)


def matches(value: str, pattern: str | re.Pattern[str]) -> bool:
    """Check whether the pattern is found anywhere in value."""
    return re.search(pattern, value) is not None


def is_valid_email(value: str) -> bool:
    return EMAIL_PATTERN.fullmatch(value) is not None


def is_valid_cep(value: str) -> bool:
    """Check a Brazilian postal code (``12345-678`` or ``12345678``)."""
    return CEP_PATTERN.fullmatch(value) is not None


def is_valid_phone_br(value: str) -> bool:
    """Check a Brazilian phone number with area code, e.g. ``(11) 99999-9999``."""
    return PHONE_BR_PATTERN.fullmatch(value) is not None


def is_valid_phone_with_country_code_br(value: str) -> bool:
    """Check a Brazilian phone number prefixed with ``+55``."""
    return PHONE_DDI_BR_PATTERN.fullmatch(value) is not None


def has_lowercase(value: str) -> bool:
    return any(char.islower() for char in value)


def has_uppercase(value: str) -> bool:
    return any(char.isupper() for char in value)


def has_number(value: str) -> bool:
    return re.search(r"[0-9]", value) is not None


def has_special_character(value: str) -> bool:
    return re.search(r"[^a-zA-Z0-9]", value) is not None


def is_valid_cpf(value: str) -> bool:
    """Check a CPF number, formatted or not, by its two check digits.

    Args:
        value: CPF such as ``529.982.247-25`` or ``52998224725``

    Returns:
        True if the number has 11 digits, is not a repeated digit and both
        check digits match
    """
    digits = _digits(value)
    if len(digits) != 11 or len(set(digits)) == 1:
        return False

    numbers = [int(d) for d in digits]
    for position in (9, 10):
        total = sum(
            number * (position + 1 - index)
            for index, number in enumerate(numbers[:position])
        )
        check = total * 10 % 11
        if check == 10:
            check = 0
        if check != numbers[position]:
            return False
    return True


def is_valid_cnpj(value: str) -> bool:
    """Check a CNPJ number, formatted or not, by its two check digits.

    Args:
        value: CNPJ such as ``11.222.333/0001-81`` or ``11222333000181``

    Returns:
        True if the number has 14 digits, is not a repeated digit and both
        check digits match
    """
    digits = _digits(value)
    if len(digits) != 14 or len(set(digits)) == 1:
        return False

    numbers = [int(d) for d in digits]
    for position, weights in ((12, _CNPJ_WEIGHTS), (13, (6,) + _CNPJ_WEIGHTS)):
        remainder = sum(n * w for n, w in zip(numbers[:position], weights)) % 11
        check = 0 if remainder < 2 else 11 - remainder
        if check != numbers[position]:
            return False
    return True


def is_valid_cpf_or_cnpj(value: str) -> bool:
    return is_valid_cpf(value) or is_valid_cnpj(value)


def is_valid_credit_card(value: str) -> bool:
    """Check a card number with the Luhn checksum.

    Spaces and dashes are ignored; any other non-digit makes it invalid.
    """
    number = re.sub(r"[\s-]", "", value)
    if re.fullmatch(r"[0-9]{13,19}", number) is None:
        return False

    total = 0
    for index, char in enumerate(reversed(number)):
        digit = int(char)
        if index % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0
