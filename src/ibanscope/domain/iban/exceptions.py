"""IBAN domain exceptions.

Every failure raised while turning a candidate string into a validated
``Iban`` derives from IbanValidationError, so callers can catch the whole
family at once or branch on the concrete subclass (or on ``code``).
"""

from ibanscope.domain.iban.normalization import mask_iban
from ibanscope.domain.shared.exceptions import ErrorCode, ValidationError

# =============================================================================
# Base IBAN Exception
# =============================================================================


class IbanValidationError(ValidationError):
    """Base exception for IBAN validation failures."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INVALID_IBAN,
        country_code: str | None = None,
        **details: object,
    ) -> None:
        if country_code is not None:
            details["country_code"] = country_code
        super().__init__(message, code, details)
        self.country_code = country_code


# =============================================================================
# Structural Exceptions
# =============================================================================


class UnknownCountryError(IbanValidationError):
    """Raised when the first two characters are not a registered country."""

    def __init__(self, country_code: str, iban: str) -> None:
        super().__init__(
            message=(
                f"Invalid country code '{country_code}' "
                f"for IBAN {mask_iban(iban)}"
            ),
            code=ErrorCode.UNKNOWN_COUNTRY,
            country_code=country_code,
        )


class LengthMismatchError(IbanValidationError):
    """Raised when the IBAN length does not match the country format."""

    def __init__(self, country_code: str, expected: int, actual: int) -> None:
        super().__init__(
            message=(
                f"Invalid IBAN length for country {country_code}. "
                f"Expected {expected} characters, got {actual}"
            ),
            code=ErrorCode.INVALID_IBAN_LENGTH,
            country_code=country_code,
            expected_length=expected,
            actual_length=actual,
        )
        self.expected_length = expected
        self.actual_length = actual


# =============================================================================
# Checksum Exceptions
# =============================================================================


class InvalidChecksumError(IbanValidationError):
    """Raised when the mod-97 remainder of the IBAN is not 1."""

    def __init__(self, country_code: str, iban: str) -> None:
        super().__init__(
            message=f"Invalid check sum for IBAN {mask_iban(iban)}",
            code=ErrorCode.INVALID_IBAN_CHECKSUM,
            country_code=country_code,
        )
