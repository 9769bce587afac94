"""Structural and checksum validation of normalized IBANs."""

import logging

from ibanscope.domain.iban.checksum import is_valid_checksum
from ibanscope.domain.iban.country_registry import lookup_country
from ibanscope.domain.iban.exceptions import (
    InvalidChecksumError,
    LengthMismatchError,
    UnknownCountryError,
)
from ibanscope.domain.iban.normalization import mask_iban
from ibanscope.domain.iban.value_objects.country_profile import CountryProfile

logger = logging.getLogger(__name__)


def validate_iban(iban: str) -> CountryProfile:
    """Validate a normalized IBAN and return its country profile.

    Checks run in order: country code, length, checksum. The first failing
    check raises.

    Parameters
    ----------
    iban
        IBAN already passed through ``normalize_iban``.

    Returns
    -------
    The registered profile of the IBAN's country.

    Raises
    ------
    UnknownCountryError
        If the first two characters are not a registered country code.
    LengthMismatchError
        If the length differs from the country's format.
    InvalidChecksumError
        If the mod-97 remainder is not 1.
    """
    country_code = iban[:2]
    profile = lookup_country(country_code)
    if profile is None:
        logger.debug("Rejected %s: unknown country", mask_iban(iban))
        raise UnknownCountryError(country_code, iban)

    if len(iban) != profile.iban_length:
        logger.debug(
            "Rejected %s: length %d, expected %d",
            mask_iban(iban),
            len(iban),
            profile.iban_length,
        )
        raise LengthMismatchError(country_code, profile.iban_length, len(iban))

    if not is_valid_checksum(iban):
        logger.debug("Rejected %s: checksum mismatch", mask_iban(iban))
        raise InvalidChecksumError(country_code, iban)

    return profile
