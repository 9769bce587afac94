"""IBAN normalization utilities."""

from __future__ import annotations

import string

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def normalize_iban(value: str) -> str:
    """Normalize an IBAN for validation and storage.

    - Removes all spaces (U+0020 only, other whitespace is kept)
    - Uppercases ASCII letters

    Non-ASCII characters are left untouched, so the result never depends on
    the locale and never changes length because of case folding.
    """
    return value.replace(" ", "").translate(_ASCII_UPPER)


def mask_iban(iban: str) -> str:
    """Hide everything but the first and last four characters."""
    if len(iban) < 8:
        return iban
    return iban[:4] + "*" * (len(iban) - 8) + iban[-4:]


def format_iban(iban: str) -> str:
    """Render an IBAN in print format (groups of four)."""
    return " ".join(iban[i : i + 4] for i in range(0, len(iban), 4))
