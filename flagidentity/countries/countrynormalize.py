"""
Country Input Shape Recognition
-------------------------------

Three recognizers decide how a raw input string is routed:
  1. CODE_RE: exactly two ASCII letters, any case ("us", "GB")
  2. NAME_RE: at least two characters of free text ("Chad", "UK")
  3. FLAG_RE: contains a regional-indicator symbol (U+1F1E6..U+1F1FF)

Facade precedence is flag first, then code, else name.

Examples:
  >>> looks_like_code("us")
  True

  >>> looks_like_flag("\U0001F1FA\U0001F1F8")
  True

  >>> looks_like_name("X")
  False

  >>> normalize_country_name("  Russia ")
  'russia'
"""

import re
from typing import Any, Optional

# Difference between a regional-indicator symbol and its ASCII capital letter:
# ord("\U0001F1E6") - ord("A")
REGIONAL_INDICATOR_OFFSET = 127462 - 65
MAGIC_NUMBER = REGIONAL_INDICATOR_OFFSET

REGIONAL_INDICATOR_A = 0x1F1E6
REGIONAL_INDICATOR_Z = 0x1F1FF

# Whole-string patterns under .match(), .search() and .fullmatch() alike
CODE_RE = re.compile(r"\A[a-z]{2}\Z", re.IGNORECASE | re.ASCII)
NAME_RE = re.compile(r"\A.{2,}\Z")
FLAG_RE = re.compile("[\U0001F1E6-\U0001F1FF]")


def looks_like_code(s: Any) -> bool:
    """True for exactly two ASCII letters. Says nothing about table membership."""
    return isinstance(s, str) and CODE_RE.fullmatch(s) is not None


def looks_like_name(s: Any) -> bool:
    """True for text of at least two characters on a single line."""
    return isinstance(s, str) and NAME_RE.fullmatch(s) is not None


def looks_like_flag(s: Any) -> bool:
    """True when at least one regional-indicator symbol occurs anywhere in s."""
    return isinstance(s, str) and FLAG_RE.search(s) is not None


def normalize_country_name(s: str) -> str:
    """
    Normalization applied to name queries before matching.

    Only trims and lowercases. Diacritics and Unicode forms are left alone,
    so "Åland Islands" and "Aland Islands" stay distinct strings.
    """
    if not s:
        return ""
    return s.strip().lower()


def normalize_country_code(s: Any) -> Optional[str]:
    """Uppercase a code-shaped string, or None when the shape is wrong."""
    if not looks_like_code(s):
        return None
    return s.upper()


__all__ = [
    "REGIONAL_INDICATOR_OFFSET",
    "MAGIC_NUMBER",
    "REGIONAL_INDICATOR_A",
    "REGIONAL_INDICATOR_Z",
    "CODE_RE",
    "NAME_RE",
    "FLAG_RE",
    "looks_like_code",
    "looks_like_name",
    "looks_like_flag",
    "normalize_country_name",
    "normalize_country_code",
]
