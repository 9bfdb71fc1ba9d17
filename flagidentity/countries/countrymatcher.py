"""
Country Name Matching
---------------------

Resolves free-text country names to ISO 3166-1 alpha-2 codes over a name
table, in two passes:
  1) exact: first code with a case-insensitive equal name (short-circuits)
  2) fuzzy: every code with a name that fuzzy-matches, kept only when
     exactly one code matched

Fuzzy matching is deliberately narrow. A name fuzzy-matches the query when
one contains the other, or when the name has comma clauses that contain /
are contained in the query once reversed:

  "Vatican"             <-> "Holy See (Vatican City State)"
  "Russia"              <-> "Russian Federation"
  "Republic of Moldova" <-> "Moldova, Republic of"

A query hitting several codes ("United") resolves to nothing.

API:
  fuzzy_compare(candidate, name) -> bool
  resolve_exact(name, table) -> str | None
  resolve_fuzzy(name, table) -> str | None
  fuzzy_candidates(name, table) -> list[str]
  resolve(name, table) -> str | None
"""

from __future__ import annotations
from typing import List, Optional

from flagidentity.countries.countrynormalize import looks_like_name, normalize_country_name
from flagidentity.countries.countrytables import NameTable


def _reverse_clauses(name: str) -> str:
    return " ".join(reversed(name.split(", ")))


def fuzzy_compare(candidate: str, name: str) -> bool:
    """True when a lowercased query and a table name are a fuzzy match.

    Only ``name`` is lowercased here. Callers pass ``candidate`` already
    normalized with normalize_country_name().

    Examples:
        >>> fuzzy_compare("vatican", "Holy See (Vatican City State)")
        True
        >>> fuzzy_compare("republic of moldova", "Moldova, Republic of")
        True
        >>> fuzzy_compare("france", "Germany")
        False
    """
    name = name.lower()

    if name in candidate or candidate in name:
        return True

    if "," in name:
        reversed_name = _reverse_clauses(name)
        if reversed_name in candidate or candidate in reversed_name:
            return True

    return False


def _prepare_query(name) -> Optional[str]:
    if not name or not looks_like_name(name):
        return None
    # whitespace-only input would otherwise be a substring of every name
    return normalize_country_name(name) or None


def resolve_exact(name: str, table: NameTable) -> Optional[str]:
    """Return the first code (table order) with a name equal to ``name``, ignoring case."""
    query = _prepare_query(name)
    if query is None:
        return None

    for code, names in table.items():
        for n in names:
            if n.lower() == query:
                return code

    return None


def fuzzy_candidates(name: str, table: NameTable) -> List[str]:
    """Every code (table order) with at least one name fuzzy-matching ``name``."""
    query = _prepare_query(name)
    if query is None:
        return []

    return [
        code
        for code, names in table.items()
        if any(fuzzy_compare(query, n) for n in names)
    ]


def resolve_fuzzy(name: str, table: NameTable) -> Optional[str]:
    """Return the fuzzy-matched code only when it is the only one in the table."""
    matches = fuzzy_candidates(name, table)
    if len(matches) == 1:
        return matches[0]
    return None


def resolve(name: str, table: NameTable) -> Optional[str]:
    """Exact pass first, fuzzy pass as fallback."""
    return resolve_exact(name, table) or resolve_fuzzy(name, table)


__all__ = [
    "fuzzy_compare",
    "resolve_exact",
    "resolve_fuzzy",
    "fuzzy_candidates",
    "resolve",
]
