"""Flag Identity - country code, name and flag emoji conversion

Public API for converting between ISO 3166-1 alpha-2 codes, country names
(in several locales) and flag emoji.

Usage:
    from flagidentity import code, flag, name

    # Code from a name or a flag
    code("Russia")             # Returns: 'RU'
    code("🇷🇺")                 # Returns: 'RU'

    # Flag from a code or a name
    flag("US")                 # Returns: '🇺🇸'
    flag("United Kingdom")     # Returns: '🇬🇧'

    # Name from a code or a flag, optionally localized
    name("DE")                 # Returns: 'Germany'
    name("🇩🇪", "ru")           # Returns: 'Германия'

Every function returns None when its input cannot be resolved.
"""

__version__ = "0.0.1"

# ============================================================================
# Country Conversion API
# ============================================================================
# Primary interface: flagidentity.countries.countryapi
# Implementation: countrymatcher (names), countrycodec (flags), countrytables (data)

from .countries.countryapi import (
    code,                     # Primary API - flag or name -> code
    flag,                     # Primary API - code or name -> flag emoji
    name,                     # Primary API - flag or code -> display name
    is_code,                  # Validate and uppercase a code
    code_to_name,             # Code -> primary name (locale-aware)
    code_to_names,            # Code -> all name variants
    code_to_flag,             # Code -> flag emoji
    name_to_code,             # Name -> code (exact, then unambiguous fuzzy)
    flag_to_code,             # Flag emoji -> code
    fuzzy_compare,            # Substring / comma-reversal name comparison
    codes,                    # Batch code()
    flags,                    # Batch flag()
    names,                    # Batch name()
    country_flag_identifier,  # Any input -> {code, name, flag}
    list_countries,           # All countries as a DataFrame
)

# ============================================================================
# Constants and recognizers
# ============================================================================

from .countries.countrynormalize import (
    MAGIC_NUMBER,               # Regional-indicator offset (127397)
    REGIONAL_INDICATOR_OFFSET,  # Same value, descriptive name
    CODE_RE,                    # Two ASCII letters
    NAME_RE,                    # At least two characters
    FLAG_RE,                    # Any regional-indicator symbol
)

# ============================================================================
# Data tables
# ============================================================================

from .countries.countrytables import (
    load_table,    # Load a locale's name table (cached)
    list_locales,  # Locale tags with a bundled table
    clear_cache,   # Drop cached tables
)

__all__ = [
    # Version
    "__version__",

    # ========================================================================
    # PRIMARY APIS - Start here!
    # ========================================================================
    "code",   # Flag or name -> code
    "flag",   # Code or name -> flag emoji
    "name",   # Flag or code -> display name

    # ========================================================================
    # Primitives
    # ========================================================================
    "is_code",
    "code_to_name",
    "code_to_names",
    "code_to_flag",
    "name_to_code",
    "flag_to_code",
    "fuzzy_compare",

    # ========================================================================
    # Convenience
    # ========================================================================
    "codes",
    "flags",
    "names",
    "country_flag_identifier",
    "list_countries",

    # ========================================================================
    # Constants
    # ========================================================================
    "MAGIC_NUMBER",
    "REGIONAL_INDICATOR_OFFSET",
    "CODE_RE",
    "NAME_RE",
    "FLAG_RE",

    # ========================================================================
    # Data tables
    # ========================================================================
    "load_table",
    "list_locales",
    "clear_cache",
]
