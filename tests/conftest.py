"""Shared test fixtures and utilities for flagidentity tests."""

import pytest

from flagidentity.countries.countrytables import DATA_DIR_ENV, clear_cache, table_from_mapping


@pytest.fixture(autouse=True)
def isolated_tables(monkeypatch):
    """Run every test against the bundled tables with a cold cache.

    Removes any FLAGIDENTITY_DATA_DIR override from the environment and
    clears the table cache before and after the test.
    """
    monkeypatch.delenv(DATA_DIR_ENV, raising=False)
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def small_table():
    """Fixture providing a hand-written name table for matcher and codec tests.

    Covers single names, name lists, comma-clause names and a pair of names
    where one is a substring of the other (Niger / Nigeria).
    """
    return table_from_mapping({
        "MD": "Moldova, Republic of",
        "VA": "Holy See (Vatican City State)",
        "RU": ["Russian Federation", "Russia"],
        "GB": ["United Kingdom", "UK"],
        "US": ["United States", "USA"],
        "AE": "United Arab Emirates",
        "NE": "Niger",
        "NG": "Nigeria",
        "VG": "Virgin Islands, British",
    })


@pytest.fixture
def table_dir(tmp_path):
    """Fixture providing a directory with a custom default table and a 'de' table.

    The default table holds NA (a cell pandas would read as missing by
    default), a user-assigned ZZ and GB.
    """
    (tmp_path / "countries.csv").write_text(
        "code,name,alias1,alias2\n"
        "NA,Namibia,,\n"
        "ZZ,Zedland,Zed,\n"
        "GB,United Kingdom,UK,Great Britain\n",
        encoding="utf-8",
    )
    (tmp_path / "countries_de.csv").write_text(
        "code,name,alias1\n"
        "NA,Namibia,\n"
        "ZZ,Zedland,\n"
        "GB,Vereinigtes Königreich,Großbritannien\n",
        encoding="utf-8",
    )
    return tmp_path


@pytest.fixture
def sample_countries():
    """Fixture providing sample country names and their ISO2 codes."""
    return {
        "Russia": "RU",
        "United States": "US",
        "United Kingdom": "GB",
        "Germany": "DE",
        "France": "FR",
        "Japan": "JP",
        "Vatican": "VA",
        "Republic of Moldova": "MD",
    }
