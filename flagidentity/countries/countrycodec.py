"""
Country Flag Codec
------------------

Flag emoji are pairs of Unicode regional-indicator symbols. Each symbol is
its ASCII capital letter shifted by a fixed offset (127397), so the
transform is plain code point arithmetic in both directions:

  "US" -> U+1F1FA U+1F1F8
  "GB" -> U+1F1EC U+1F1E7

Both directions only accept codes that are keys of the name table.

API:
  encode(code, table) -> str | None
  decode(flag, table) -> str | None
"""

from __future__ import annotations
from typing import Optional

from flagidentity.countries.countrynormalize import (
    REGIONAL_INDICATOR_OFFSET,
    looks_like_flag,
    normalize_country_code,
)
from flagidentity.countries.countrytables import NameTable


def encode(code: str, table: NameTable) -> Optional[str]:
    """Encode a table code as its flag emoji.

    Examples:
        >>> encode("us", table) == "\\U0001F1FA\\U0001F1F8"
        True
    """
    code = normalize_country_code(code)
    if code is None or code not in table:
        return None

    return "".join(chr(REGIONAL_INDICATOR_OFFSET + ord(c)) for c in code)


def decode(flag: str, table: NameTable) -> Optional[str]:
    """Decode a flag emoji to its table code.

    Every code point of ``flag`` is shifted back by the offset, so anything
    other than exactly two regional indicators decodes to a string that is
    not a table key and yields None.
    """
    if not flag or not looks_like_flag(flag):
        return None

    letters = []
    for c in flag:
        point = ord(c) - REGIONAL_INDICATOR_OFFSET
        if not 0 <= point < 0x110000:
            return None
        letters.append(chr(point))

    code = normalize_country_code("".join(letters))
    if code is None or code not in table:
        return None
    return code


__all__ = [
    "encode",
    "decode",
]
