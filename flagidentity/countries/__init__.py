"""Country code, name and flag conversion."""

# Clean API that wraps the matcher, codec and name tables
from flagidentity.countries.countryapi import (
    code,
    flag,
    name,
    is_code,
    code_to_name,
    code_to_names,
    code_to_flag,
    name_to_code,
    flag_to_code,
    fuzzy_compare,
    codes,
    flags,
    names,
    country_flag_identifier,
    list_countries,
)
from flagidentity.countries.countrynormalize import (
    MAGIC_NUMBER,
    REGIONAL_INDICATOR_OFFSET,
    CODE_RE,
    NAME_RE,
    FLAG_RE,
)
from flagidentity.countries.countrytables import (
    load_table,
    list_locales,
    clear_cache,
)

__all__ = [
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
    "MAGIC_NUMBER",
    "REGIONAL_INDICATOR_OFFSET",
    "CODE_RE",
    "NAME_RE",
    "FLAG_RE",
    "load_table",
    "list_locales",
    "clear_cache",
]
