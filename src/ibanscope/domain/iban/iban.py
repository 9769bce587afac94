"""Validated IBAN value object.

Provides validated, normalized IBANs and access to their national parts.
"""

from dataclasses import dataclass, field

from ibanscope.domain.iban.country_registry import COUNTRY_PROFILES
from ibanscope.domain.iban.exceptions import IbanValidationError
from ibanscope.domain.iban.field_extractor import extract_field
from ibanscope.domain.iban.normalization import format_iban, normalize_iban
from ibanscope.domain.iban.swift_directory import get_swift_directory
from ibanscope.domain.iban.validator import validate_iban
from ibanscope.domain.iban.value_objects.country_profile import (
    CountryProfile,
    FieldRole,
)


@dataclass(frozen=True)
class Iban:
    """Value object representing a validated IBAN.

    Constructing an instance always normalizes and validates the input, so
    every ``Iban`` that exists has a registered country, the right length
    and a correct checksum.
    """

    value: str
    country_code: str = field(init=False)

    def __post_init__(self) -> None:
        normalized = normalize_iban(self.value)
        profile = validate_iban(normalized)

        # Replace value with normalized version (frozen dataclass workaround)
        object.__setattr__(self, "value", normalized)
        object.__setattr__(self, "country_code", profile.alpha2)

    @classmethod
    def create(cls, value: str) -> "Iban":
        return cls(value)

    @classmethod
    def is_valid(cls, value: str) -> bool:
        try:
            cls(value)
        except IbanValidationError:
            return False
        return True

    @property
    def profile(self) -> CountryProfile:
        # Validation already found this entry in the static registry
        return COUNTRY_PROFILES[self.country_code]

    # Country data

    @property
    def country_name(self) -> str:
        return self.profile.name

    @property
    def alpha2_country_code(self) -> str:
        return self.profile.alpha2

    @property
    def alpha3_country_code(self) -> str:
        return self.profile.alpha3

    @property
    def numeric_country_code(self) -> str:
        return self.profile.numeric_code

    @property
    def is_sepa_enabled(self) -> bool:
        return self.profile.sepa_enabled

    # Fields from the format mask

    def extract(self, role: FieldRole | str) -> str:
        """Characters of the IBAN tagged with ``role`` in the country format."""
        return extract_field(self.value, self.profile.format_mask, role)

    @property
    def national_bank_code(self) -> str:
        return self.extract(FieldRole.BANK_CODE)

    @property
    def branch_code(self) -> str:
        return self.extract(FieldRole.BRANCH_CODE)

    @property
    def account_number_prefix(self) -> str:
        return self.extract(FieldRole.ACCOUNT_NUMBER_PREFIX)

    @property
    def account_number(self) -> str:
        return self.extract(FieldRole.ACCOUNT_NUMBER)

    @property
    def check_digits(self) -> str:
        return self.value[2:4]

    @property
    def bban(self) -> str:
        """Basic Bank Account Number: everything after the check digits."""
        return self.value[4:]

    @property
    def swift(self) -> str:
        """BIC of the account's bank, empty if the bank code is not listed."""
        return get_swift_directory().find_by_bank_code(
            self.country_code,
            self.national_bank_code,
        )

    @property
    def formatted(self) -> str:
        return format_iban(self.value)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Iban('{self.value}')"
