"""Country name tables: loading, validation and locale selection.

A name table maps an uppercase ISO 3166-1 alpha-2 code to a non-empty tuple
of display names (primary name first). One table exists per locale and is
stored as CSV with columns ``code, name, alias1 ... aliasN``:

    code,name,alias1,alias2,alias3
    GB,United Kingdom,UK,Great Britain,
    RU,Russian Federation,Russia,,

Tables load once per process and are read-only afterwards.

Table location:
    1. Explicit data_dir argument, else FLAGIDENTITY_DATA_DIR. When set, this
       directory is the only one searched, for every locale.
    2. Otherwise package data (countries/data/), then development tables
       (../tables/countries/).
"""

import logging
import os
import re
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence, Tuple, Union

import pandas as pd

from flagidentity.utils.dataloader import (
    data_search_dirs,
    find_data_file,
    format_not_found_error,
    load_csv_table,
)

logger = logging.getLogger(__name__)

NameTable = Mapping[str, Tuple[str, ...]]

DEFAULT_LOCALE = "en"
DATA_DIR_ENV = "FLAGIDENTITY_DATA_DIR"

_TABLE_CODE_RE = re.compile(r"[A-Z]{2}")
_LOCALE_TAG_RE = re.compile(r"[a-z0-9_\-]+")
_ALIAS_COL_RE = re.compile(r"alias(\d+)")


def table_filename(locale: str) -> str:
    """Return the CSV filename holding the table for a locale tag.

    Examples:
        >>> table_filename("en")
        'countries.csv'
        >>> table_filename("ru")
        'countries_ru.csv'
    """
    if locale == DEFAULT_LOCALE:
        return "countries.csv"
    return f"countries_{locale}.csv"


def normalize_locale(locale: Optional[str]) -> str:
    """Lowercase and trim a locale tag. Absent, blank or unsafe tags map to the default."""
    if not isinstance(locale, str):
        return DEFAULT_LOCALE
    tag = locale.strip().lower()
    if not tag or _LOCALE_TAG_RE.fullmatch(tag) is None:
        return DEFAULT_LOCALE
    return tag


def _alias_columns(df: pd.DataFrame) -> List[str]:
    numbered = []
    for col in df.columns:
        m = _ALIAS_COL_RE.fullmatch(str(col))
        if m:
            numbered.append((int(m.group(1)), col))
    return [col for _, col in sorted(numbered)]


def _get_names(row: pd.Series, alias_cols: List[str]) -> Tuple[str, ...]:
    """Primary name followed by the non-empty aliases, in column order."""
    names = [row["name"].strip()]
    for col in alias_cols:
        alias = str(row[col]).strip()
        if alias:
            names.append(alias)
    return tuple(names)


def table_from_frame(df: pd.DataFrame) -> NameTable:
    """Build a read-only name table from a loaded CSV frame.

    Args:
        df: DataFrame with ``code`` and ``name`` columns plus optional
            ``alias1 ... aliasN`` columns, all as strings

    Returns:
        Read-only mapping code -> tuple of names, in file order

    Raises:
        ValueError: On missing columns, malformed or duplicate codes, or an
            empty primary name
    """
    missing = {"code", "name"} - set(df.columns)
    if missing:
        raise ValueError(f"Country table is missing columns: {sorted(missing)}")

    alias_cols = _alias_columns(df)
    table = {}
    for _, row in df.iterrows():
        code = str(row["code"]).strip()
        if _TABLE_CODE_RE.fullmatch(code) is None:
            raise ValueError(f"Invalid country code in table: {code!r}")
        if code in table:
            raise ValueError(f"Duplicate country code in table: {code}")
        if not str(row["name"]).strip():
            raise ValueError(f"Empty primary name for country code: {code}")
        table[code] = _get_names(row, alias_cols)

    return MappingProxyType(table)


def table_from_mapping(data: Mapping[str, Union[str, Sequence[str]]]) -> NameTable:
    """Build a read-only name table from a plain mapping.

    Values may be a single name or an ordered sequence of names; both are
    normalized to a non-empty tuple of trimmed names; blank names are
    dropped. Keys are uppercased and must stay unique after uppercasing.

    Examples:
        >>> t = table_from_mapping({"md": "Moldova, Republic of", "US": ["United States", "USA"]})
        >>> t["MD"], t["US"]
        (('Moldova, Republic of',), ('United States', 'USA'))

    Raises:
        ValueError: On malformed or duplicate codes, or no non-blank name
    """
    table = {}
    for code, names in data.items():
        key = str(code).strip().upper()
        if _TABLE_CODE_RE.fullmatch(key) is None:
            raise ValueError(f"Invalid country code in table: {code!r}")
        if key in table:
            raise ValueError(f"Duplicate country code in table: {key}")
        if isinstance(names, str):
            names = (names,)
        names = tuple(n.strip() for n in names if n and n.strip())
        if not names:
            raise ValueError(f"Empty name list for country code: {key}")
        table[key] = names
    return MappingProxyType(table)


def _default_data_dir() -> Optional[str]:
    return os.environ.get(DATA_DIR_ENV) or None


def _search_dirs(data_dir: Optional[str]) -> List[Path]:
    # An explicit directory is a complete dataset: package tables are not mixed in
    return data_search_dirs(
        module_file=__file__,
        subdirectory="countries",
        search_dev_tables=data_dir is None,
        module_local_data=data_dir is None,
        data_dir=data_dir,
    )


def _find_table_file(locale: str, data_dir: Optional[str]) -> Optional[Path]:
    return find_data_file(
        module_file=__file__,
        subdirectory="countries",
        filenames=[table_filename(locale)],
        search_dev_tables=data_dir is None,
        module_local_data=data_dir is None,
        data_dir=data_dir,
    )


@lru_cache(maxsize=256)
def _has_table(locale: str, data_dir: Optional[str]) -> bool:
    return _find_table_file(locale, data_dir) is not None


@lru_cache(maxsize=None)
def _load_table_cached(locale: str, data_dir: Optional[str]) -> NameTable:
    found_path = _find_table_file(locale, data_dir)
    if found_path is None:
        filename = table_filename(locale)
        if data_dir is not None:
            searched = [("Explicit directory", Path(data_dir))]
        else:
            searched = [("Package data", d) for d in _search_dirs(None)[:1]]
            searched += [("Development tables", d) for d in _search_dirs(None)[1:]]
        error_msg = format_not_found_error(
            filenames=[filename],
            searched_locations=searched,
            fix_instructions=[
                f"Point {DATA_DIR_ENV} (or data_dir) at a directory containing {filename}",
                "Or run flagidentity/countries/data/build_countries.py to regenerate the tables",
            ],
        )
        raise FileNotFoundError(error_msg)

    table = table_from_frame(load_csv_table(found_path))
    logger.info(f"Loaded {len(table)} country names ({locale}) from {found_path}")
    return table


def resolve_locale(locale: Optional[str] = None, data_dir: Optional[Union[str, Path]] = None) -> str:
    """Return the locale tag whose table will actually be used.

    Unrecognized tags fall back to the default locale.

    Examples:
        >>> resolve_locale("RU")
        'ru'
        >>> resolve_locale("xx")
        'en'
    """
    tag = normalize_locale(locale)
    if tag == DEFAULT_LOCALE:
        return tag
    directory = str(data_dir) if data_dir is not None else _default_data_dir()
    if not _has_table(tag, directory):
        logger.debug(f"No country table for locale {tag!r}, using {DEFAULT_LOCALE!r}")
        return DEFAULT_LOCALE
    return tag


def load_table(
    locale: Optional[str] = None,
    *,
    data_dir: Optional[Union[str, Path]] = None,
) -> NameTable:
    """Load the name table for a locale (cached).

    Args:
        locale: Locale tag such as "ru". None, unknown or malformed tags
                select the default table.
        data_dir: Optional directory holding a complete set of tables.
                  Defaults to the FLAGIDENTITY_DATA_DIR environment variable.
                  When given, package tables are never used: a locale
                  without a file in this directory falls back to this
                  directory's default table.

    Returns:
        Read-only mapping of uppercase code -> tuple of names

    Raises:
        FileNotFoundError: If the default table cannot be found
    """
    directory = str(data_dir) if data_dir is not None else _default_data_dir()
    tag = resolve_locale(locale, directory)
    return _load_table_cached(tag, directory)


def list_locales(data_dir: Optional[Union[str, Path]] = None) -> List[str]:
    """List locale tags with a table available, default locale first.

    Examples:
        >>> list_locales()
        ['en', 'ru']
    """
    directory = str(data_dir) if data_dir is not None else _default_data_dir()
    tags = set()
    for d in _search_dirs(directory):
        if not d.is_dir():
            continue
        for p in d.glob("countries_*.csv"):
            tag = p.stem[len("countries_"):]
            if _LOCALE_TAG_RE.fullmatch(tag):
                tags.add(tag)
    tags.discard(DEFAULT_LOCALE)
    return [DEFAULT_LOCALE] + sorted(tags)


def clear_cache():
    """Clear the cached tables.

    Useful for testing or after FLAGIDENTITY_DATA_DIR changes. Not meant to
    run while other threads are resolving.
    """
    _has_table.cache_clear()
    _load_table_cached.cache_clear()
    logger.info("Cleared country table cache")


__all__ = [
    "NameTable",
    "DEFAULT_LOCALE",
    "DATA_DIR_ENV",
    "table_filename",
    "normalize_locale",
    "table_from_frame",
    "table_from_mapping",
    "resolve_locale",
    "load_table",
    "list_locales",
    "clear_cache",
]
