"""SWIFT/BIC directory - lookup a BIC by country and national bank code."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

logger = logging.getLogger(__name__)

# Extend per country as data becomes available
_SWIFT_CODES: dict[str, dict[str, str]] = {
    "SK": {
        "0200": "SUBASKBX",
        "0720": "NBSBSKBX",
        "0900": "GIBASKBX",
        "1100": "TATRSKBX",
        "1111": "UNCRSKBX",
        "3000": "SLZBSKBA",
        "3100": "LUBASKBX",
        "5200": "OTPVSKBX",
        "5600": "KOMASK2X",
        "5900": "PRVASKBA",
        "6500": "POBNSKBA",
        "7300": "INGBSKBX",
        "7500": "CEKOSKBX",
        "7930": "WUSTSKBA",
        "8050": "COBASKBX",
        "8100": "KOMBSKBA",
        "8120": "BSLOSK22",
        "8130": "CITISKBA",
        "8150": "ABNASKBX",
        "8160": "EXSKSKBX",
        "8170": "KBSPSKBX",
        "8180": "SPSRSKBA",
        "8320": "JTBPSKBA",
        "8330": "FIOZSKBA",
        "8360": "BREXSKBX",
        "8370": "OBKLSKBA",
        "8410": "RIDBSKBX",
        "8420": "BFKKSKBB",
        "8430": "KODBSKBX",
        "9951": "XBRASKB1",
        "9952": "TPAYSKBX",
    },
}


class SwiftDirectory:
    """
    Directory service for resolving SWIFT/BIC codes from national bank codes.

    The table is sparse: a missing entry is the normal case and yields an
    empty string rather than an error.
    """

    def __init__(self, codes: Mapping[str, Mapping[str, str]] | None = None):
        source = _SWIFT_CODES if codes is None else codes
        self._index: Mapping[str, Mapping[str, str]] = MappingProxyType(
            {
                country: MappingProxyType(dict(banks))
                for country, banks in source.items()
            },
        )

    @property
    def countries(self) -> list[str]:
        return sorted(self._index)

    @property
    def entry_count(self) -> int:
        return sum(len(banks) for banks in self._index.values())

    def find_by_bank_code(self, country_code: str, bank_code: str) -> str:
        bic = self._index.get(country_code, {}).get(bank_code, "")
        if not bic:
            logger.debug("No BIC for bank code %s in %s", bank_code, country_code)
        return bic


# ═══════════════════════════════════════════════════════════════
#           Module-Level Accessor
# ═══════════════════════════════════════════════════════════════

_default_directory: SwiftDirectory | None = None


def get_swift_directory() -> SwiftDirectory:
    """Get the built-in SWIFT directory singleton."""
    global _default_directory  # noqa: PLW0603
    if _default_directory is None:
        _default_directory = SwiftDirectory()
    return _default_directory
