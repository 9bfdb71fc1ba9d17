#!/usr/bin/env python3
"""
Build countries.csv and countries_<locale>.csv from pycountry.

This script:
1. Reads ISO 3166-1 names from pycountry (name, then common_name)
2. Appends curated aliases users expect ("UK", "Russia", "Holland", ...)
3. Translates names through pycountry's iso3166-1 gettext catalogs for
   each extra locale, preferring curated common names where the catalog
   carries the formal one
4. Expands names into alias1...aliasN columns
5. Validates every table with the same loader the library uses

Usage:
    python flagidentity/countries/data/build_countries.py
    python flagidentity/countries/data/build_countries.py --locale ru --output tables/countries
"""

import argparse
import gettext
import sys
from pathlib import Path
from typing import Dict, List

import pandas as pd

try:
    import pycountry
except ImportError as e:
    raise ImportError("pycountry not installed. pip install flagidentity[build]") from e

# Add repository root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from flagidentity.countries.countrytables import DEFAULT_LOCALE, table_filename, table_from_frame

MIN_ALIAS_COLUMNS = 3

# Colloquial names appended after the ISO names. Keep these longer than two
# letters where possible: short aliases are substrings of many queries and
# make fuzzy matching ambiguous.
MANUAL_ALIASES: Dict[str, List[str]] = {
    "AE": ["UAE", "Emirates"],
    "AX": ["Aland Islands"],
    "BA": ["Bosnia"],
    "BN": ["Brunei"],
    "BQ": ["Caribbean Netherlands"],
    "CD": ["Democratic Republic of the Congo", "DR Congo"],
    "CG": ["Republic of the Congo"],
    "CI": ["Ivory Coast"],
    "CV": ["Cape Verde"],
    "CZ": ["Czech Republic"],
    "FK": ["Falkland Islands"],
    "GB": ["UK", "Great Britain"],
    "KP": ["North Korea"],
    "KR": ["South Korea"],
    "LA": ["Laos"],
    "MK": ["Macedonia"],
    "MM": ["Burma"],
    "MO": ["Macau"],
    "NL": ["Holland"],
    "PS": ["Palestine"],
    "RU": ["Russia"],
    "SH": ["Saint Helena"],
    "SZ": ["Swaziland"],
    "TL": ["East Timor"],
    "TR": ["Turkey"],
    "US": ["USA", "United States of America", "America"],
    "VG": ["British Virgin Islands"],
    "VI": ["US Virgin Islands"],
    "VN": ["Vietnam"],
}

# Common names placed first for a locale, ahead of the catalog translation.
LOCALE_COMMON_NAMES: Dict[str, Dict[str, List[str]]] = {
    "ru": {
        "AE": ["Объединённые Арабские Эмираты", "ОАЭ"],
        "BY": ["Беларусь", "Белоруссия"],
        "GB": ["Великобритания", "Соединённое Королевство"],
        "KP": ["КНДР", "Северная Корея"],
        "KR": ["Республика Корея", "Южная Корея"],
        "MD": ["Молдова", "Молдавия"],
        "NL": ["Нидерланды", "Голландия"],
        "RU": ["Россия", "Российская Федерация"],
        "US": ["США", "Соединённые Штаты Америки"],
        "VA": ["Ватикан"],
        "ZA": ["ЮАР", "Южно-Африканская Республика"],
    },
}


def _unique(names: List[str]) -> List[str]:
    seen = set()
    out = []
    for n in names:
        if n and n not in seen:
            seen.add(n)
            out.append(n)
    return out


def default_names() -> Dict[str, List[str]]:
    """ISO names plus manual aliases, keyed by alpha-2 code, in code order."""
    table = {}
    for c in sorted(pycountry.countries, key=lambda c: c.alpha_2):
        names = [c.name, getattr(c, "common_name", None)]
        names.extend(MANUAL_ALIASES.get(c.alpha_2, []))
        table[c.alpha_2] = _unique(names)
    return table


def localized_names(locale: str) -> Dict[str, List[str]]:
    """Names translated through the pycountry catalog for a locale."""
    translation = gettext.translation("iso3166-1", pycountry.LOCALES_DIR, languages=[locale])
    common = LOCALE_COMMON_NAMES.get(locale, {})

    table = {}
    for c in sorted(pycountry.countries, key=lambda c: c.alpha_2):
        names = list(common.get(c.alpha_2, []))
        names.append(translation.gettext(getattr(c, "common_name", None) or c.name))
        table[c.alpha_2] = _unique(names)
    return table


def to_frame(table: Dict[str, List[str]]) -> pd.DataFrame:
    """Expand name lists into code, name, alias1...aliasN columns."""
    width = max(MIN_ALIAS_COLUMNS, max(len(v) - 1 for v in table.values()))
    rows = []
    for code, names in table.items():
        row = {"code": code, "name": names[0]}
        for i in range(1, width + 1):
            row[f"alias{i}"] = names[i] if i < len(names) else ""
        rows.append(row)
    return pd.DataFrame(rows, columns=["code", "name"] + [f"alias{i}" for i in range(1, width + 1)])


def write_table(df: pd.DataFrame, output_dir: Path, locale: str) -> Path:
    # Round-trip through the library validator before writing
    table_from_frame(df)
    path = output_dir / table_filename(locale)
    df.to_csv(path, index=False, encoding="utf-8")
    print(f"Wrote {len(df)} rows to {path}")
    return path


def main():
    parser = argparse.ArgumentParser(
        description='Build the bundled country name tables from pycountry',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        '--output', '-o',
        type=Path,
        default=Path(__file__).parent,
        help='Output directory (default: this directory)'
    )
    parser.add_argument(
        '--locale', '-l',
        action='append',
        default=None,
        help='Extra locale to build (repeatable, default: ru)'
    )
    args = parser.parse_args()

    args.output.mkdir(parents=True, exist_ok=True)
    default = default_names()
    write_table(to_frame(default), args.output, DEFAULT_LOCALE)

    for locale in args.locale or ["ru"]:
        localized = localized_names(locale)
        missing = set(default) - set(localized)
        if missing:
            print(f"Warning: {locale} table lacks {len(missing)} codes: {sorted(missing)}")
        write_table(to_frame(localized), args.output, locale)


if __name__ == "__main__":
    main()
