"""Country profile value object describing one IBAN country format."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class FieldRole(str, Enum):
    """Role of a single character position in an IBAN format mask."""

    CHECK_DIGITS = "k"
    BANK_CODE = "b"
    BRANCH_CODE = "s"
    ACCOUNT_NUMBER_PREFIX = "p"
    ACCOUNT_NUMBER = "c"
    ACCOUNT_CHECK_DIGITS = "x"
    ZERO = "0"
    CURRENCY_CODE = "m"
    ACCOUNT_TYPE = "t"
    OWNER_NUMBER = "n"
    BIC_BANK_CODE = "q"
    NATIONAL_ID = "i"
    BALANCE_ACCOUNT = "a"


ROLE_SYMBOLS: frozenset[str] = frozenset(role.value for role in FieldRole)


class CountryProfile(BaseModel):
    """
    Value object describing how IBANs of one country are built.

    ``format`` is the human readable layout, e.g.
    ``"DEkk bbbb bbbb cccc cccc cc"``: the country code followed by one role
    symbol per character, grouped by spaces for readability.
    """

    name: str = Field(..., min_length=1, description="Display name")
    alpha2: str = Field(..., description="ISO 3166-1 alpha-2 code")
    alpha3: str = Field(..., description="ISO 3166-1 alpha-3 code")
    numeric_code: str = Field(
        default="",
        description="ISO 3166-1 numeric code, empty when unassigned",
    )
    sepa_enabled: bool = Field(default=False, description="SEPA participant")
    format: str = Field(..., description="IBAN layout with grouping spaces")

    model_config = ConfigDict(
        frozen=True,  # Immutable like dataclass(frozen=True)
        str_strip_whitespace=True,
    )

    @field_validator("alpha2")
    @classmethod
    def validate_alpha2(cls, v: str) -> str:
        if len(v) != 2 or not (v.isascii() and v.isalpha() and v.isupper()):
            msg = f"Alpha-2 code must be 2 uppercase letters: {v!r}"
            raise ValueError(msg)
        return v

    @field_validator("alpha3")
    @classmethod
    def validate_alpha3(cls, v: str) -> str:
        if len(v) != 3 or not (v.isascii() and v.isalpha() and v.isupper()):
            msg = f"Alpha-3 code must be 3 uppercase letters: {v!r}"
            raise ValueError(msg)
        return v

    @field_validator("numeric_code")
    @classmethod
    def validate_numeric_code(cls, v: str) -> str:
        if v and (len(v) != 3 or not v.isdigit()):
            msg = f"Numeric code must be empty or 3 digits: {v!r}"
            raise ValueError(msg)
        return v

    @model_validator(mode="after")
    def validate_format(self) -> "CountryProfile":
        mask = self.format_mask
        if not mask.startswith(self.alpha2):
            msg = f"Format of {self.alpha2} must start with the country code"
            raise ValueError(msg)
        unknown = set(mask[2:]) - ROLE_SYMBOLS
        if unknown:
            msg = f"Format of {self.alpha2} has unknown symbols: {sorted(unknown)}"
            raise ValueError(msg)
        return self

    @property
    def format_mask(self) -> str:
        """Format with grouping spaces removed, one symbol per IBAN position."""
        return self.format.replace(" ", "")

    @property
    def iban_length(self) -> int:
        return len(self.format_mask)

    def __str__(self) -> str:
        return f"{self.name} ({self.alpha2})"
