"""IBAN domain.

Validation of International Bank Account Numbers (ISO 13616) and access to
their national parts through per-country format masks.
"""

from ibanscope.domain.iban.checksum import is_valid_checksum, mod97
from ibanscope.domain.iban.country_registry import (
    COUNTRY_PROFILES,
    all_countries,
    lookup_country,
    sepa_countries,
)
from ibanscope.domain.iban.exceptions import (
    IbanValidationError,
    InvalidChecksumError,
    LengthMismatchError,
    UnknownCountryError,
)
from ibanscope.domain.iban.field_extractor import extract_field
from ibanscope.domain.iban.iban import Iban
from ibanscope.domain.iban.normalization import normalize_iban
from ibanscope.domain.iban.swift_directory import SwiftDirectory, get_swift_directory
from ibanscope.domain.iban.validator import validate_iban
from ibanscope.domain.iban.value_objects import CountryProfile, FieldRole

__all__ = [
    # Value objects
    "CountryProfile",
    "FieldRole",
    "Iban",
    # Exceptions
    "IbanValidationError",
    "InvalidChecksumError",
    "LengthMismatchError",
    "UnknownCountryError",
    # Registry
    "COUNTRY_PROFILES",
    "all_countries",
    "lookup_country",
    "sepa_countries",
    # SWIFT
    "SwiftDirectory",
    "get_swift_directory",
    # Algorithms
    "extract_field",
    "is_valid_checksum",
    "mod97",
    "normalize_iban",
    "validate_iban",
]
