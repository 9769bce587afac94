"""Registry of IBAN country formats.

Not every country that issues IBANs is listed. Each row holds the alpha-2
code, alpha-3 code, numeric code, display name, SEPA flag and the IBAN
layout. Layout symbols are described by
:class:`~ibanscope.domain.iban.value_objects.FieldRole`:

    k  IBAN check digits          x  account check digits
    b  national bank code         0  literal zero
    s  branch code                m  currency code
    p  account number prefix      t  account type
    c  account number             n  owner account number
    q  BIC bank code              i  national identification number
    a  balance account number

References:
    https://en.wikipedia.org/wiki/International_Bank_Account_Number
    https://www.iban.com/structure
    https://www.iban.com/country-codes
"""

from collections.abc import Mapping
from types import MappingProxyType

from ibanscope.domain.iban.value_objects.country_profile import CountryProfile

# fmt: off
_COUNTRY_ROWS: tuple[tuple[str, str, str, str, bool, str], ...] = (
    ("AL", "ALB", "004", "Albania", False, "ALkk bbbs sssx cccc cccc cccc cccc"),
    ("AD", "AND", "020", "Andorra", True, "ADkk bbbb ssss cccc cccc cccc"),
    ("AT", "AUT", "040", "Austria", True, "ATkk bbbb bccc cccc cccc"),
    ("AZ", "AZE", "031", "Azerbaijan", False, "AZkk bbbb cccc cccc cccc cccc cccc"),
    ("BH", "BHR", "048", "Bahrain", False, "BHkk bbbb cccc cccc cccc cc"),
    ("BY", "BLR", "112", "Belarus", False, "BYkk bbbb aaaa cccc cccc cccc cccc"),
    ("BE", "BEL", "056", "Belgium", True, "BEkk bbbc cccc ccxx"),
    ("BA", "BIH", "070", "Bosnia and Herzegovina", False, "BAkk bbbs sscc cccc ccxx"),
    ("BR", "BRA", "076", "Brazil", False, "BRkk bbbb bbbb ssss sccc cccc ccct n"),
    ("BG", "BGR", "100", "Bulgaria", True, "BGkk bbbb ssss ttcc cccc cc"),
    ("HR", "HRV", "191", "Croatia", True, "HRkk bbbb bbbc cccc cccc c"),
    ("CY", "CYP", "196", "Cyprus", True, "CYkk bbbs ssss cccc cccc cccc cccc"),
    ("CZ", "CZE", "203", "Czech Republic", True, "CZkk bbbb pppp sscc cccc cccc"),
    ("CR", "CRI", "188", "Costa Rica", False, "CRkk 0bbb cccc cccc cccc cc"),
    ("DK", "DNK", "208", "Denmark", True, "DKkk bbbb cccc cccc cx"),
    ("DO", "DOM", "214", "Dominican Republic", False, "DOkk bbbb cccc cccc cccc cccc cccc"),
    ("TL", "TLS", "626", "East Timor", False, "TLkk bbbc cccc cccc cccc cxx"),
    ("EG", "EGY", "818", "Egypt", False, "EGkk bbbb ssss cccc cccc cccc cccc c"),
    ("SV", "SLV", "222", "El Salvador", False, "SVkk bbbb cccc cccc cccc cccc cccc"),
    ("EE", "EST", "233", "Estonia", True, "EEkk bbss cccc cccc cccx"),
    ("FO", "FRO", "234", "Faroe Islands", False, "FOkk bbbb cccc cccc cx"),
    ("FI", "FIN", "246", "Finland", True, "FIkk bbbb bbcc cccc cx"),
    ("FR", "FRA", "250", "France", True, "FRkk bbbb bsss sscc cccc cccc cxx"),
    ("GE", "GEO", "268", "Georgia", False, "GEkk bbcc cccc cccc cccc cc"),
    ("DE", "DEU", "276", "Germany", True, "DEkk bbbb bbbb cccc cccc cc"),
    ("GI", "GIB", "292", "Gibraltar", True, "GIkk bbbb cccc cccc cccc ccc"),
    ("GR", "GRC", "300", "Greece", True, "GRkk bbbs sssc cccc cccc cccc ccc"),
    ("GL", "GRL", "304", "Greenland", False, "GLkk bbbb cccc cccc cx"),
    ("GT", "GTM", "320", "Guatemala", False, "GTkk bbbb mmtt cccc cccc cccc cccc"),
    ("HU", "HUN", "348", "Hungary", True, "HUkk bbbs sssx cccc cccc cccc cccx"),
    ("IS", "ISL", "352", "Iceland", True, "ISkk bbss ttcc cccc iiii iiii ii"),
    ("IQ", "IRQ", "368", "Iraq", False, "IQkk bbbb sssc cccc cccc ccc"),
    ("IE", "IRL", "372", "Ireland", True, "IEkk qqqq bbbb bbcc cccc cc"),
    ("IL", "ISR", "376", "Israel", False, "ILkk bbbs sscc cccc cccc ccc"),
    ("IT", "ITA", "380", "Italy", True, "ITkk xbbb bbss sssc cccc cccc ccc"),
    ("JO", "JOR", "400", "Jordan", False, "JOkk bbbb ssss cccc cccc cccc cccc cc"),
    ("KZ", "KAZ", "398", "Kazakhstan", False, "KZkk bbbc cccc cccc cccc"),
    ("XK", "XXK", "", "Kosovo", False, "XKkk bbbb cccc cccc cccc"),
    ("KW", "KWT", "414", "Kuwait", False, "KWkk bbbb cccc cccc cccc cccc cccc cc"),
    ("LV", "LVA", "428", "Latvia", True, "LVkk bbbb cccc cccc cccc c"),
    ("LB", "LBN", "422", "Lebanon", False, "LBkk bbbb cccc cccc cccc cccc cccc"),
    ("LY", "LBY", "424", "Libya", False, "LYkk bbbs sscc cccc cccc cccc c"),
    ("LI", "LIE", "438", "Liechtenstein", True, "LIkk bbbb bccc cccc cccc c"),
    ("LT", "LTU", "440", "Lithuania", True, "LTkk bbbb bccc cccc cccc"),
    ("LU", "LUX", "442", "Luxembourg", True, "LUkk bbbc cccc cccc cccc"),
    ("MK", "MKD", "807", "North Macedonia", False, "MKkk bbbc cccc cccc cxx"),
    ("MT", "MLT", "470", "Malta", True, "MTkk bbbb ssss sccc cccc cccc cccc ccc"),
    ("MR", "MRT", "478", "Mauritania", False, "MRkk bbbb bsss sscc cccc cccc cxx"),
    ("MU", "MUS", "480", "Mauritius", False, "MUkk bbbb bbss cccc cccc cccc 000m mm"),
    ("MC", "MCO", "492", "Monaco", True, "MCkk bbbb bsss sscc cccc cccc cxx"),
    ("MD", "MDA", "498", "Moldova", False, "MDkk bbcc cccc cccc cccc cccc"),
    ("ME", "MNE", "499", "Montenegro", False, "MEkk bbbc cccc cccc cccc xx"),
    ("NL", "NLD", "528", "Netherlands", True, "NLkk bbbb cccc cccc cc"),
    ("NO", "NOR", "578", "Norway", True, "NOkk bbbb cccc ccx"),
    ("PK", "PAK", "586", "Pakistan", False, "PKkk bbbb cccc cccc cccc cccc"),
    ("PS", "PSE", "275", "Palestinian territories", False, "PSkk bbbb cccc cccc cccc cccc cccc c"),
    ("PL", "POL", "616", "Poland", True, "PLkk bbbs sssx cccc cccc cccc cccc"),
    ("PT", "PRT", "620", "Portugal", True, "PTkk bbbb ssss cccc cccc cccx x"),
    ("QA", "QAT", "634", "Qatar", False, "QAkk bbbb cccc cccc cccc cccc cccc c"),
    ("RO", "ROU", "642", "Romania", True, "ROkk bbbb cccc cccc cccc cccc"),
    ("RU", "RUS", "643", "Russia", False, "RUkk bbbb bbbb bsss sscc cccc cccc cccc c"),
    ("LC", "LCA", "662", "Saint Lucia", False, "LCkk bbbb cccc cccc cccc cccc cccc cccc"),
    ("SM", "SMR", "674", "San Marino", True, "SMkk xbbb bbss sssc cccc cccc ccc"),
    ("ST", "STP", "678", "São Tomé and Príncipe", False, "STkk bbbb ssss cccc cccc cccc c"),
    ("SA", "SAU", "682", "Saudi Arabia", False, "SAkk bbcc cccc cccc cccc cccc"),
    ("RS", "SRB", "688", "Serbia", False, "RSkk bbbc cccc cccc cccc xx"),
    ("SC", "SYC", "690", "Seychelles", False, "SCkk bbbb bb ss cccc cccc cccc cccc mmm"),
    ("SK", "SVK", "703", "Slovakia", True, "SKkk bbbb pppp sscc cccc cccc"),
    ("SI", "SVN", "705", "Slovenia", True, "SIkk bbss sccc cccc cxx"),
    ("ES", "ESP", "724", "Spain", True, "ESkk bbbb ssss xxcc cccc cccc"),
    ("SD", "SDN", "729", "Sudan", False, "SDkk bbcc cccc cccc cc"),
    ("SE", "SWE", "752", "Sweden", True, "SEkk bbbc cccc cccc cccc cccx"),
    ("CH", "CHE", "756", "Switzerland", True, "CHkk bbbb bccc cccc cccc c"),
    ("TN", "TUN", "788", "Tunisia", False, "TNkk bbss sccc cccc cccc ccxx"),
    ("TR", "TUR", "792", "Turkey", False, "TRkk bbbb b0cc cccc cccc cccc cc"),
    ("UA", "UKR", "804", "Ukraine", False, "UAkk bbbb bbcc cccc cccc cccc cccc c"),
    ("AE", "ARE", "784", "United Arab Emirates", False, "AEkk bbbc cccc cccc cccc ccc"),
    ("GB", "GBR", "826", "United Kingdom", True, "GBkk bbbb ssss sscc cccc cc"),
    ("VA", "VAT", "336", "Vatican City", False, "VAkk bbbc cccc cccc cccc cc"),
    ("VG", "VGB", "092", "Virgin Islands, British", False, "VGkk bbbb cccc cccc cccc cccc"),
)
# fmt: on

COUNTRY_PROFILES: Mapping[str, CountryProfile] = MappingProxyType(
    {
        alpha2: CountryProfile(
            name=name,
            alpha2=alpha2,
            alpha3=alpha3,
            numeric_code=numeric_code,
            sepa_enabled=sepa_enabled,
            format=layout,
        )
        for alpha2, alpha3, numeric_code, name, sepa_enabled, layout in _COUNTRY_ROWS
    },
)


def lookup_country(country_code: str) -> CountryProfile | None:
    """Return the profile registered for an alpha-2 code, if any."""
    return COUNTRY_PROFILES.get(country_code)


def all_countries() -> list[CountryProfile]:
    return sorted(COUNTRY_PROFILES.values(), key=lambda profile: profile.alpha2)


def sepa_countries() -> list[CountryProfile]:
    return [profile for profile in all_countries() if profile.sepa_enabled]
