"""ibanscope - IBAN validation and decomposition."""

from ibanscope.domain.iban import (
    CountryProfile,
    FieldRole,
    Iban,
    IbanValidationError,
    InvalidChecksumError,
    LengthMismatchError,
    UnknownCountryError,
    all_countries,
    extract_field,
    is_valid_checksum,
    lookup_country,
    normalize_iban,
    sepa_countries,
)
from ibanscope.domain.shared import DomainException, ErrorCode, ValidationError

__version__ = "1.0.0"

__all__ = [
    "CountryProfile",
    "DomainException",
    "ErrorCode",
    "FieldRole",
    "Iban",
    "IbanValidationError",
    "InvalidChecksumError",
    "LengthMismatchError",
    "UnknownCountryError",
    "ValidationError",
    "all_countries",
    "extract_field",
    "is_valid_checksum",
    "lookup_country",
    "normalize_iban",
    "sepa_countries",
]
