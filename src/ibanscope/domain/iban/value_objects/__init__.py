"""Value objects for the IBAN domain."""

from ibanscope.domain.iban.value_objects.country_profile import (
    ROLE_SYMBOLS,
    CountryProfile,
    FieldRole,
)

__all__ = [
    "ROLE_SYMBOLS",
    "CountryProfile",
    "FieldRole",
]
