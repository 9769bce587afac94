"""Extract IBAN fields by their position in a country format mask."""

from ibanscope.domain.iban.value_objects.country_profile import FieldRole


def extract_field(iban: str, format_mask: str, role: FieldRole | str) -> str:
    """Slice the characters of ``iban`` tagged with ``role`` in the mask.

    The field spans from the first to the last occurrence of the role symbol,
    inclusive, even if other symbols interrupt the run. Returns an empty
    string if the symbol does not occur in the mask.
    """
    symbol = role.value if isinstance(role, FieldRole) else role
    first = format_mask.find(symbol)
    if first < 0:
        return ""
    last = format_mask.rfind(symbol)
    return iban[first : last + 1]
