"""Rules for Brazilian documents, postal codes, phone numbers and card numbers."""

from .. import predicates as _predicates
from ..translation import LanguageCode
from . import base as _base

Host = _base.Host


class DocumentValidations(_base.RuleHost):
    """Format and checksum rules backed by :mod:`lucidity.predicates`.

    Non-string values are converted with ``str()`` before checking.
    """

    def valid_cpf(self: Host, *, message: str | None = None, code: str | None = None) -> Host:
        return self._string_rule(_predicates.is_valid_cpf, LanguageCode.VALID_CPF, message, code, False)

    def valid_cpf_or_null(
        self: Host, *, message: str | None = None, code: str | None = None
    ) -> Host:
        return self._string_rule(_predicates.is_valid_cpf, LanguageCode.VALID_CPF, message, code, True)

    def valid_cnpj(self: Host, *, message: str | None = None, code: str | None = None) -> Host:
        return self._string_rule(
            _predicates.is_valid_cnpj, LanguageCode.VALID_CNPJ, message, code, False
        )

    def valid_cnpj_or_null(
        self: Host, *, message: str | None = None, code: str | None = None
    ) -> Host:
        return self._string_rule(
            _predicates.is_valid_cnpj, LanguageCode.VALID_CNPJ, message, code, True
        )

    def valid_cpf_or_cnpj(
        self: Host, *, message: str | None = None, code: str | None = None
    ) -> Host:
        """Accept either a valid CPF or a valid CNPJ."""
        return self._string_rule(
            _predicates.is_valid_cpf_or_cnpj, LanguageCode.VALID_CPF_OR_CNPJ, message, code, False
        )

    def valid_cpf_or_cnpj_or_null(
        self: Host, *, message: str | None = None, code: str | None = None
    ) -> Host:
        return self._string_rule(
            _predicates.is_valid_cpf_or_cnpj, LanguageCode.VALID_CPF_OR_CNPJ, message, code, True
        )

    def valid_cep(self: Host, *, message: str | None = None, code: str | None = None) -> Host:
        return self._string_rule(_predicates.is_valid_cep, LanguageCode.VALID_CEP, message, code, False)

    def valid_cep_or_null(
        self: Host, *, message: str | None = None, code: str | None = None
    ) -> Host:
        return self._string_rule(_predicates.is_valid_cep, LanguageCode.VALID_CEP, message, code, True)

    def valid_credit_card(
        self: Host, *, message: str | None = None, code: str | None = None
    ) -> Host:
        return self._string_rule(
            _predicates.is_valid_credit_card, LanguageCode.VALID_CREDIT_CARD, message, code, False
        )

    def valid_credit_card_or_null(
        self: Host, *, message: str | None = None, code: str | None = None
    ) -> Host:
        return self._string_rule(
            _predicates.is_valid_credit_card, LanguageCode.VALID_CREDIT_CARD, message, code, True
        )

    def valid_phone_br(
        self: Host, *, message: str | None = None, code: str | None = None
    ) -> Host:
        return self._string_rule(
            _predicates.is_valid_phone_br, LanguageCode.VALID_PHONE_BR, message, code, False
        )

    def valid_phone_br_or_null(
        self: Host, *, message: str | None = None, code: str | None = None
    ) -> Host:
        return self._string_rule(
            _predicates.is_valid_phone_br, LanguageCode.VALID_PHONE_BR, message, code, True
        )

    def valid_phone_with_country_code_br(
        self: Host, *, message: str | None = None, code: str | None = None
    ) -> Host:
        """Require the ``+55`` country code, e.g. ``+55 (11) 99999-9999``."""
        return self._string_rule(
            _predicates.is_valid_phone_with_country_code_br,
            LanguageCode.VALID_PHONE_DDI_BR,
            message,
            code,
            False,
        )

    def valid_phone_with_country_code_br_or_null(
        self: Host, *, message: str | None = None, code: str | None = None
    ) -> Host:
        return self._string_rule(
            _predicates.is_valid_phone_with_country_code_br,
            LanguageCode.VALID_PHONE_DDI_BR,
            message,
            code,
            True,
        )
