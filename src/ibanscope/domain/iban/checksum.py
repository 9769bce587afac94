"""ISO 7064 MOD 97-10 checksum as used by IBAN.

1. The first four characters are moved to the end.
2. Letters are replaced by two digits (A=10, B=11, ..., Z=35).
3. The resulting number is divided by 97.
4. The IBAN is valid if the remainder is 1.

The translated number can be around seventy digits long, so the remainder is
computed digit by digit instead of building the full integer.
"""

import re

MODULO = 97

_CHECKSUM_ALPHABET = re.compile(r"[0-9A-Z]+")


def rearrange(iban: str) -> str:
    """Move country code and check digits to the end."""
    return iban[4:] + iban[:4]


def to_digits(value: str) -> str:
    """Translate letters into their two-digit numeric codes.

    Raises
    ------
    ValueError
        If ``value`` contains anything other than ``0-9`` and ``A-Z``.
    """
    digits = []
    for char in value:
        if "0" <= char <= "9":
            digits.append(char)
        elif "A" <= char <= "Z":
            digits.append(str(ord(char) - ord("A") + 10))
        else:
            msg = f"Character {char!r} is not allowed in an IBAN"
            raise ValueError(msg)
    return "".join(digits)


def mod97(digits: str) -> int:
    """Remainder of a decimal digit string divided by 97."""
    remainder = 0
    for digit in digits:
        remainder = (remainder * 10 + int(digit)) % MODULO
    return remainder


def is_valid_checksum(iban: str) -> bool:
    """Check the mod-97 checksum of a normalized IBAN."""
    if len(iban) < 5 or not _CHECKSUM_ALPHABET.fullmatch(iban):
        return False
    return mod97(to_digits(rearrange(iban))) == 1
