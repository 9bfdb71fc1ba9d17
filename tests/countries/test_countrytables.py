"""Tests for country name table loading and locale selection."""

import pandas as pd
import pytest

from flagidentity.countries import countrytables
from flagidentity.countries.countrytables import (
    DATA_DIR_ENV,
    DEFAULT_LOCALE,
    clear_cache,
    list_locales,
    load_table,
    normalize_locale,
    resolve_locale,
    table_filename,
    table_from_frame,
    table_from_mapping,
)


class TestBundledTables:
    """Test the tables shipped with the package"""

    def test_default_table(self):
        table = load_table()
        assert len(table) == 249
        assert table["US"][0] == "United States"
        assert table["GB"] == ("United Kingdom", "UK", "Great Britain")

    def test_namibia_is_not_missing(self):
        table = load_table()
        assert table["NA"] == ("Namibia",)

    def test_names_are_non_empty(self):
        for locale in list_locales():
            for code, names in load_table(locale).items():
                assert len(names) >= 1, code
                assert all(n.strip() for n in names), code

    def test_comma_names_preserved(self):
        assert load_table()["MD"][0] == "Moldova, Republic of"

    def test_russian_table(self):
        table = load_table("ru")
        assert table["RU"][0] == "Россия"
        assert set(table) == set(load_table())

    def test_tables_are_read_only(self):
        table = load_table()
        with pytest.raises(TypeError):
            table["XX"] = ("Nowhere",)

    def test_cached(self):
        assert load_table() is load_table()
        assert load_table("ru") is load_table("RU")


class TestLocaleSelection:
    """Test locale tag handling and fallback"""

    @pytest.mark.parametrize("tag,expected", [
        (None, "en"),
        ("", "en"),
        (" RU ", "ru"),
        ("pt_BR", "pt_br"),
        ("../etc", "en"),
        (7, "en"),
    ])
    def test_normalize_locale(self, tag, expected):
        assert normalize_locale(tag) == expected

    def test_unknown_locale_falls_back(self):
        assert resolve_locale("xx") == DEFAULT_LOCALE
        assert load_table("xx") is load_table()

    def test_known_locale(self):
        assert resolve_locale("ru") == "ru"

    def test_table_filename(self):
        assert table_filename("en") == "countries.csv"
        assert table_filename("ru") == "countries_ru.csv"

    def test_list_locales(self):
        assert list_locales() == ["en", "ru"]


class TestDataDirectory:
    """Test explicit and environment data directories"""

    def test_explicit_data_dir(self, table_dir):
        table = load_table(data_dir=table_dir)
        assert list(table) == ["NA", "ZZ", "GB"]
        assert table["ZZ"] == ("Zedland", "Zed")

    def test_explicit_locale_table(self, table_dir):
        table = load_table("de", data_dir=table_dir)
        assert table["GB"][0] == "Vereinigtes Königreich"

    def test_missing_locale_file_uses_default(self, table_dir):
        assert load_table("fr", data_dir=table_dir) is load_table(data_dir=table_dir)

    def test_list_locales_with_data_dir(self, table_dir):
        assert list_locales(table_dir) == ["en", "de"]

    def test_environment_variable(self, table_dir, monkeypatch):
        monkeypatch.setenv(DATA_DIR_ENV, str(table_dir))
        clear_cache()
        assert len(load_table()) == 3

    def test_missing_default_table(self, monkeypatch):
        monkeypatch.setattr(countrytables, "_find_table_file", lambda locale, data_dir: None)
        clear_cache()
        with pytest.raises(FileNotFoundError, match="Country table countries.csv not found"):
            load_table()

    def test_data_dir_not_mixed_with_package_tables(self, table_dir):
        """A locale missing from data_dir uses data_dir's default, not a bundled table"""
        assert resolve_locale("ru", table_dir) == DEFAULT_LOCALE
        assert load_table("ru", data_dir=table_dir) is load_table(data_dir=table_dir)
        assert "RU" not in load_table("ru", data_dir=table_dir)

    def test_environment_dir_not_mixed(self, table_dir, monkeypatch):
        monkeypatch.setenv(DATA_DIR_ENV, str(table_dir))
        clear_cache()
        assert load_table("ru")["ZZ"] == ("Zedland", "Zed")
        assert list_locales() == ["en", "de"]

    def test_empty_data_dir(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Country table countries.csv not found"):
            load_table(data_dir=tmp_path)


class TestTableFromFrame:
    """Test table validation"""

    def test_builds_tuples(self):
        df = pd.DataFrame({
            "code": ["FR", "DE"],
            "name": ["France", "Germany"],
            "alias2": ["", "Deutschland"],
            "alias1": ["", "Allemagne"],
        })
        table = table_from_frame(df)
        assert table["FR"] == ("France",)
        assert table["DE"] == ("Germany", "Allemagne", "Deutschland")

    def test_missing_columns(self):
        with pytest.raises(ValueError, match="missing columns"):
            table_from_frame(pd.DataFrame({"code": ["FR"]}))

    def test_lowercase_code(self):
        with pytest.raises(ValueError, match="Invalid country code"):
            table_from_frame(pd.DataFrame({"code": ["fr"], "name": ["France"]}))

    def test_duplicate_code(self):
        df = pd.DataFrame({"code": ["FR", "FR"], "name": ["France", "France"]})
        with pytest.raises(ValueError, match="Duplicate"):
            table_from_frame(df)

    def test_empty_name(self):
        with pytest.raises(ValueError, match="Empty primary name"):
            table_from_frame(pd.DataFrame({"code": ["FR"], "name": ["  "]}))


class TestTableFromMapping:
    """Test single-name / name-list normalization"""

    def test_normalizes_values(self):
        table = table_from_mapping({"md": "Moldova, Republic of", "US": ["United States", "USA"]})
        assert table["MD"] == ("Moldova, Republic of",)
        assert table["US"] == ("United States", "USA")

    def test_empty_list(self):
        with pytest.raises(ValueError, match="Empty name list"):
            table_from_mapping({"US": []})

    def test_duplicate_after_uppercasing(self):
        with pytest.raises(ValueError, match="Duplicate country code in table: US"):
            table_from_mapping({"us": "Lowercase", "US": "United States"})

    def test_blank_names_dropped(self):
        table = table_from_mapping({"US": ["  United States ", "   ", "", "USA"]})
        assert table["US"] == ("United States", "USA")

    def test_whitespace_only_names(self):
        with pytest.raises(ValueError, match="Empty name list"):
            table_from_mapping({"US": ["  ", "\t"]})
        with pytest.raises(ValueError, match="Empty name list"):
            table_from_mapping({"US": "   "})

    def test_bad_code(self):
        with pytest.raises(ValueError, match="Invalid country code"):
            table_from_mapping({"USA": "United States"})
