"""
Tests for catalog loading — schema checks, candidate order, icon resolution.
"""

from pathlib import Path

import pytest

from launchpad.catalog_loader import load_catalog, parse_catalog, resolve_icon
from launchpad.errors import CatalogMalformedError, CatalogNotFoundError, LoadError


class TestParseCatalog:
    def test_document_order_and_verbatim_strings(self):
        data = {
            "categories": [
                {"name": "  Zeta ", "apps": [{"name": "B app", "exec": "  run b  "}]},
                {"name": "alpha", "icon": "a.ico", "apps": []},
            ]
        }
        cat = parse_catalog(data)
        assert [c.name for c in cat.categories] == ["  Zeta ", "alpha"]
        assert cat.categories[0].apps[0].exec == "  run b  "
        assert cat.categories[1].icon == "a.ico"
        assert cat.categories[1].apps == ()

    def test_optional_fields(self, catalog):
        editor = catalog.categories[0].apps[0]
        assert editor.description == "Plain text"
        assert editor.icon is None
        assert catalog.categories[1].icon is None

    def test_unknown_keys_ignored(self):
        cat = parse_catalog({"version": 2, "categories": [
            {"name": "X", "extra": 1, "apps": [{"name": "a", "exec": "a", "path": "ignored"}]}
        ]})
        assert cat.categories[0].apps[0].name == "a"

    @pytest.mark.parametrize("data, field", [
        ([], None),
        ({}, "categories"),
        ({"categories": {}}, "categories"),
        ({"categories": [{"apps": []}]}, "categories[0].name"),
        ({"categories": [{"name": "X"}]}, "categories[0].apps"),
        ({"categories": [{"name": "X", "apps": [{"exec": "x"}]}]}, "categories[0].apps[0].name"),
        ({"categories": [{"name": "X", "apps": [{"name": "x"}]}]}, "categories[0].apps[0].exec"),
        ({"categories": [{"name": "X", "apps": [{"name": "", "exec": "x"}]}]}, "categories[0].apps[0].name"),
        ({"categories": [{"name": "X", "apps": [{"name": "x", "exec": 5}]}]}, "categories[0].apps[0].exec"),
        ({"categories": [{"name": "X", "apps": ["x"]}]}, "categories[0].apps[0]"),
    ])
    def test_malformed_names_failing_field(self, data, field):
        with pytest.raises(CatalogMalformedError) as exc:
            parse_catalog(data)
        assert exc.value.field == field
        if field:
            assert field in str(exc.value)


class TestLoadCatalog:
    def test_primary_wins(self, tmp_path, write_catalog, sample_data):
        write_catalog(sample_data, "apps.json")
        write_catalog({"categories": []}, "src/apps.json")
        cat = load_catalog([tmp_path / "apps.json", tmp_path / "src" / "apps.json"])
        assert len(cat.categories) == 3

    def test_falls_back_to_second_candidate(self, tmp_path, write_catalog, sample_data):
        write_catalog(sample_data, "src/apps.json")
        cat = load_catalog([tmp_path / "apps.json", tmp_path / "src" / "apps.json"])
        assert [c.name for c in cat.categories] == ["Dev Tools", "Games", "Web"]

    def test_not_found_lists_candidates(self, tmp_path):
        candidates = [tmp_path / "apps.json", tmp_path / "src" / "apps.json"]
        with pytest.raises(CatalogNotFoundError) as exc:
            load_catalog(candidates)
        assert exc.value.candidates == tuple(candidates)
        assert isinstance(exc.value, LoadError)

    def test_invalid_json_is_malformed_not_skipped(self, tmp_path, write_catalog, sample_data):
        bad = write_catalog("{ not json", "apps.json")
        write_catalog(sample_data, "src/apps.json")
        with pytest.raises(CatalogMalformedError) as exc:
            load_catalog([bad, tmp_path / "src" / "apps.json"])
        assert exc.value.path == bad

    def test_schema_error_carries_path_and_field(self, write_catalog):
        bad = write_catalog({"categories": [{"name": "X", "apps": [{"name": "x"}]}]})
        with pytest.raises(CatalogMalformedError) as exc:
            load_catalog([bad])
        assert exc.value.path == bad
        assert exc.value.field == "categories[0].apps[0].exec"

    def test_invalid_utf8_is_malformed(self, tmp_path, write_catalog, sample_data):
        bad = tmp_path / "apps.json"
        bad.write_bytes(b'{"categories": [\xff]}')
        write_catalog(sample_data, "src/apps.json")
        with pytest.raises(CatalogMalformedError) as exc:
            load_catalog([bad, tmp_path / "src" / "apps.json"])
        assert exc.value.path == bad
        assert "UTF-8" in str(exc.value)

    def test_deeply_nested_json_is_malformed(self, write_catalog):
        depth = 200000
        bad = write_catalog('{"categories": ' + "[" * depth + "]" * depth + "}")
        with pytest.raises(CatalogMalformedError) as exc:
            load_catalog([bad])
        assert exc.value.path == bad

    def test_empty_exec_is_accepted(self, write_catalog):
        path = write_catalog({"categories": [{"name": "X", "apps": [{"name": "a", "exec": ""}]}]})
        assert load_catalog([path]).categories[0].apps[0].exec == ""

    def test_utf8_bom_accepted(self, tmp_path):
        p = tmp_path / "apps.json"
        p.write_bytes(b"\xef\xbb\xbf" + b'{"categories": []}')
        assert load_catalog([p]).categories == ()

    def test_directory_candidate_is_skipped(self, tmp_path, write_catalog, sample_data):
        (tmp_path / "apps.json").mkdir()
        write_catalog(sample_data, "src/apps.json")
        cat = load_catalog([tmp_path / "apps.json", tmp_path / "src" / "apps.json"])
        assert len(cat.categories) == 3


class TestResolveIcon:
    def test_relative_icon_resolved_against_base_dir(self, tmp_path):
        (tmp_path / "icons").mkdir()
        icon = tmp_path / "icons" / "dev.ico"
        icon.write_bytes(b"")
        assert resolve_icon("./icons/dev.ico", tmp_path) == icon
        assert resolve_icon("icons/dev.ico", tmp_path) == icon

    def test_missing_icon_uses_default(self, tmp_path):
        default = tmp_path / "default.ico"
        default.write_bytes(b"")
        assert resolve_icon("nope.ico", tmp_path, default) == default
        assert resolve_icon(None, tmp_path, default) == default
        assert resolve_icon("   ", tmp_path, default) == default

    def test_no_default_gives_none(self, tmp_path):
        assert resolve_icon("nope.ico", tmp_path, tmp_path / "missing.ico") is None
        assert resolve_icon(None, tmp_path) is None
