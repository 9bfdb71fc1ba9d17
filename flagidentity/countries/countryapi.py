"""Country code, name and flag conversion API.

Public API for converting between the three representations of a country:
its ISO 3166-1 alpha-2 code, its display name, and its flag emoji.

The polymorphic entry points inspect the shape of their input:
  - code(input): flag emoji or name -> code
  - flag(input): code or name -> flag emoji
  - name(input, locale): flag emoji or code -> display name

A miss of any kind (malformed input, unknown code, unknown or ambiguous
name, bad flag) returns None.
"""

from typing import Iterable, List, Optional

import pandas as pd

from flagidentity.countries.countrycodec import decode, encode
from flagidentity.countries.countrymatcher import (
    fuzzy_compare,
    resolve as _resolve,
)
from flagidentity.countries.countrynormalize import (
    looks_like_code,
    looks_like_flag,
    normalize_country_code,
)
from flagidentity.countries.countrytables import load_table

# ISO assigns GB; "UK" is routed through name matching instead of the code path.
UK_ALIAS = "UK"


# ---- Primitives ----

def is_code(code: str) -> Optional[str]:
    """Return the uppercase code if it is a known country code, else None.

    Examples:
        >>> is_code("gb")
        'GB'

        >>> is_code("UK")  # not an ISO code
    """
    code = normalize_country_code(code)
    if code is None or code not in load_table():
        return None
    return code


def code_to_names(code: str, locale: Optional[str] = None) -> List[str]:
    """All display names for a code in a locale, primary name first.

    Examples:
        >>> code_to_names("GB")
        ['United Kingdom', 'UK', 'Great Britain']
    """
    if not looks_like_code(code):
        return []
    return list(load_table(locale).get(code.upper(), ()))


def code_to_name(code: str, locale: Optional[str] = None) -> Optional[str]:
    """Primary display name for a code.

    Args:
        code: Two-letter country code, any case
        locale: Locale tag (e.g. "ru"). Tags are trimmed and case-folded, so "RU"
                selects the "ru" table. Unknown or absent tags use the default table.

    Returns:
        Primary name, or None if the code is malformed or not in the table

    Examples:
        >>> code_to_name("ru")
        'Russian Federation'

        >>> code_to_name("RU", "ru")
        'Россия'

        >>> code_to_name("RU", "xx")  # unknown locale falls back
        'Russian Federation'
    """
    names = code_to_names(code, locale)
    return names[0] if names else None


def code_to_flag(code: str) -> Optional[str]:
    """Flag emoji for a country code.

    Examples:
        >>> code_to_flag("US")
        '🇺🇸'
    """
    return encode(code, load_table())


def flag_to_code(flag: str) -> Optional[str]:
    """Country code for a flag emoji.

    Examples:
        >>> flag_to_code("🇺🇸")
        'US'
    """
    return decode(flag, load_table())


def name_to_code(name: str) -> Optional[str]:
    """Resolve a country name to its code.

    Exact (case-insensitive) matches win. Otherwise a substring or
    comma-reversed match is accepted only when it points at a single country.

    Examples:
        >>> name_to_code("Russia")
        'RU'

        >>> name_to_code("Vatican")
        'VA'

        >>> name_to_code("Republic of Moldova")
        'MD'

        >>> name_to_code("United")  # ambiguous
    """
    return _resolve(name, load_table())


# ---- Polymorphic entry points ----

def code(input: str) -> Optional[str]:
    """Country code from a flag emoji or a country name.

    Examples:
        >>> code("🇫🇷")
        'FR'

        >>> code("france")
        'FR'
    """
    if looks_like_flag(input):
        return flag_to_code(input)
    return name_to_code(input)


def flag(input: str) -> Optional[str]:
    """Flag emoji from a country code or a country name.

    "UK" is treated as a name so that it resolves to the GB flag.

    Examples:
        >>> flag("de")
        '🇩🇪'

        >>> flag("Germany")
        '🇩🇪'

        >>> flag("UK") == flag("GB")
        True
    """
    if not looks_like_code(input) or input == UK_ALIAS:
        input = name_to_code(input)
    return code_to_flag(input)


def name(input: str, locale: Optional[str] = None) -> Optional[str]:
    """Display name from a flag emoji or a country code.

    The locale tag is case-folded like in code_to_name(): "RU" and "ru" match.

    Examples:
        >>> name("🇳🇱")
        'Netherlands'

        >>> name("NL", "ru")
        'Нидерланды'
    """
    if looks_like_flag(input):
        input = flag_to_code(input)
    return code_to_name(input, locale)


# ---- Convenience wrappers ----

def codes(inputs: Iterable[str]) -> List[Optional[str]]:
    """Vectorized code()."""
    return [code(i) for i in inputs]


def flags(inputs: Iterable[str]) -> List[Optional[str]]:
    """Vectorized flag()."""
    return [flag(i) for i in inputs]


def names(inputs: Iterable[str], locale: Optional[str] = None) -> List[Optional[str]]:
    """Vectorized name()."""
    return [name(i, locale) for i in inputs]


def country_flag_identifier(input: str, locale: Optional[str] = None) -> Optional[dict]:
    """Resolve any input shape to a full record.

    Flag emoji are decoded, two-letter codes are checked against the table
    ("UK" excepted, as in flag()), anything else is matched as a name.

    Returns:
        Dict with code, name and flag, or None if nothing resolved

    Examples:
        >>> country_flag_identifier("Russia")
        {'code': 'RU', 'name': 'Russian Federation', 'flag': '🇷🇺'}
    """
    if looks_like_flag(input):
        resolved = flag_to_code(input)
    elif looks_like_code(input) and input != UK_ALIAS:
        resolved = is_code(input)
    else:
        resolved = name_to_code(input)

    if resolved is None:
        return None

    return {
        "code": resolved,
        "name": code_to_name(resolved, locale),
        "flag": code_to_flag(resolved),
    }


def list_countries(locale: Optional[str] = None) -> pd.DataFrame:
    """List every country with its primary name and flag.

    Args:
        locale: Locale tag for the name column

    Returns:
        DataFrame with columns code, name, flag in table order. Codes the
        locale table lacks have an empty name.

    Examples:
        >>> df = list_countries()
        >>> df[df["code"] == "JP"].iloc[0].tolist()
        ['JP', 'Japan', '🇯🇵']
    """
    table = load_table()
    localized = load_table(locale)
    rows = [
        {
            "code": c,
            "name": localized[c][0] if c in localized else "",
            "flag": encode(c, table),
        }
        for c in table
    ]
    return pd.DataFrame(rows, columns=["code", "name", "flag"])


__all__ = [
    "UK_ALIAS",
    "code",
    "flag",
    "name",
    "is_code",
    "code_to_name",
    "code_to_names",
    "code_to_flag",
    "name_to_code",
    "flag_to_code",
    "fuzzy_compare",
    "codes",
    "flags",
    "names",
    "country_flag_identifier",
    "list_countries",
]
