"""Unit tests for the country registry and CountryProfile value object."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from ibanscope.domain.iban import (
    COUNTRY_PROFILES,
    CountryProfile,
    FieldRole,
    all_countries,
    lookup_country,
    sepa_countries,
)
from ibanscope.domain.iban.value_objects import ROLE_SYMBOLS

# Official lengths from the SWIFT IBAN registry
EXPECTED_LENGTHS = {
    "AD": 24, "AE": 23, "AL": 28, "AT": 20, "AZ": 28, "BA": 20, "BE": 16,
    "BG": 22, "BH": 22, "BR": 29, "BY": 28, "CH": 21, "CR": 22, "CY": 28,
    "CZ": 24, "DE": 22, "DK": 18, "DO": 28, "EE": 20, "EG": 29, "ES": 24,
    "FI": 18, "FO": 18, "FR": 27, "GB": 22, "GE": 22, "GI": 23, "GL": 18,
    "GR": 27, "GT": 28, "HR": 21, "HU": 28, "IE": 22, "IL": 23, "IQ": 23,
    "IS": 26, "IT": 27, "JO": 30, "KW": 30, "KZ": 20, "LB": 28, "LC": 32,
    "LI": 21, "LT": 20, "LU": 20, "LV": 21, "LY": 25, "MC": 27, "MD": 24,
    "ME": 22, "MK": 19, "MR": 27, "MT": 31, "MU": 30, "NL": 18, "NO": 15,
    "PK": 24, "PL": 28, "PS": 29, "PT": 25, "QA": 29, "RO": 24, "RS": 22,
    "RU": 33, "SA": 24, "SC": 31, "SD": 18, "SE": 24, "SI": 19, "SK": 24,
    "SM": 27, "ST": 25, "SV": 28, "TL": 23, "TN": 24, "TR": 26, "UA": 29,
    "VA": 22, "VG": 24, "XK": 20,
}  # fmt: skip


class TestCountryRegistry:
    """Tests for registry lookups."""

    def test_registry_size(self):
        assert len(COUNTRY_PROFILES) == 80

    def test_lookup_known_country(self):
        profile = lookup_country("DE")

        assert profile is not None
        assert profile.name == "Germany"
        assert profile.alpha2 == "DE"
        assert profile.alpha3 == "DEU"
        assert profile.numeric_code == "276"
        assert profile.sepa_enabled is True
        assert profile.format == "DEkk bbbb bbbb cccc cccc cc"
        assert profile.format_mask == "DEkkbbbbbbbbcccccccccc"
        assert profile.iban_length == 22

    @pytest.mark.parametrize("code", ["ZZ", "de", "", "D", "DEU"])
    def test_lookup_unknown_country(self, code):
        assert lookup_country(code) is None

    def test_keys_match_alpha2_codes(self):
        for code, profile in COUNTRY_PROFILES.items():
            assert profile.alpha2 == code

    @pytest.mark.parametrize("code", sorted(EXPECTED_LENGTHS))
    def test_mask_length_matches_registry_length(self, code):
        assert COUNTRY_PROFILES[code].iban_length == EXPECTED_LENGTHS[code]

    def test_every_registered_country_has_expected_length(self):
        assert set(COUNTRY_PROFILES) == set(EXPECTED_LENGTHS)

    def test_masks_contain_only_role_symbols(self):
        for profile in COUNTRY_PROFILES.values():
            assert set(profile.format_mask[2:]) <= ROLE_SYMBOLS
            assert profile.format_mask[2:4] == "kk"

    def test_every_country_has_bank_code(self):
        for profile in COUNTRY_PROFILES.values():
            assert FieldRole.BANK_CODE.value in profile.format_mask

    def test_unassigned_numeric_code(self):
        assert lookup_country("XK").numeric_code == ""

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            COUNTRY_PROFILES["ZZ"] = COUNTRY_PROFILES["DE"]  # type: ignore[index]

    def test_all_countries_sorted(self):
        codes = [profile.alpha2 for profile in all_countries()]

        assert codes == sorted(codes)
        assert len(codes) == 80

    def test_sepa_countries(self):
        codes = {profile.alpha2 for profile in sepa_countries()}

        assert {"DE", "FR", "SK", "CH", "GB", "NO"} <= codes
        assert "TR" not in codes
        assert all(profile.sepa_enabled for profile in sepa_countries())


class TestCountryProfile:
    """Tests for CountryProfile validation."""

    def _profile(self, **overrides):
        data = {
            "name": "Testland",
            "alpha2": "TE",
            "alpha3": "TES",
            "numeric_code": "999",
            "sepa_enabled": False,
            "format": "TEkk bbbb cccc",
        }
        data.update(overrides)
        return CountryProfile(**data)

    def test_valid_profile(self):
        profile = self._profile()

        assert profile.format_mask == "TEkkbbbbcccc"
        assert profile.iban_length == 12
        assert str(profile) == "Testland (TE)"

    def test_is_immutable(self):
        profile = self._profile()

        with pytest.raises(PydanticValidationError):
            profile.name = "Other"

    @pytest.mark.parametrize("alpha2", ["T", "te", "T1", "TES"])
    def test_invalid_alpha2(self, alpha2):
        with pytest.raises(PydanticValidationError, match="Alpha-2"):
            self._profile(alpha2=alpha2, format=f"{alpha2}kk bbbb")

    @pytest.mark.parametrize("alpha3", ["TE", "tes", "T3S"])
    def test_invalid_alpha3(self, alpha3):
        with pytest.raises(PydanticValidationError, match="Alpha-3"):
            self._profile(alpha3=alpha3)

    @pytest.mark.parametrize("numeric_code", ["99", "9999", "abc"])
    def test_invalid_numeric_code(self, numeric_code):
        with pytest.raises(PydanticValidationError, match="Numeric code"):
            self._profile(numeric_code=numeric_code)

    def test_empty_numeric_code_allowed(self):
        assert self._profile(numeric_code="").numeric_code == ""

    def test_format_must_start_with_country_code(self):
        with pytest.raises(PydanticValidationError, match="must start with"):
            self._profile(format="XXkk bbbb cccc")

    def test_format_rejects_unknown_symbols(self):
        with pytest.raises(PydanticValidationError, match="unknown symbols"):
            self._profile(format="TEkk bbbb zzzz")

    def test_format_rejects_tabs(self):
        with pytest.raises(PydanticValidationError, match="unknown symbols"):
            self._profile(format="TEkk\tbbbb cccc")
