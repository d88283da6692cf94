from pathlib import Path

import pytest

from steam_openapi.catalog.loader import CatalogError, load_catalog, load_default_catalog

FIXTURES = Path(__file__).parent / "fixtures"


class TestLoadCatalog:
    def test_load_json(self):
        catalog = load_catalog(FIXTURES / "catalog.json")
        assert list(catalog.services) == ["IFooService", "IBarService"]
        assert catalog.services["IFooService"]["Grant"].audience == "publisher_only"

    def test_load_yaml(self):
        catalog = load_catalog(FIXTURES / "catalog.yaml")
        method = catalog.services["ISteamApps"]["UpToDateCheck"]
        assert method.version == 1
        assert method.parameters[0].description == "AppID of game"

    def test_load_tab_indented_json(self):
        catalog = load_catalog(FIXTURES / "catalog_tabs.json")
        method = catalog.services["ISteamApps"]["GetServersAtAddress"]
        assert method.httpmethod == "GET"
        assert method.parameters[0].required is True

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogError, match="Cannot read"):
            load_catalog(tmp_path / "missing.json")

    def test_invalid_syntax(self, tmp_path):
        f = tmp_path / "bad.json"
        f.write_text("{ISteamUser: [invalid\n")
        with pytest.raises(CatalogError, match="Cannot parse"):
            load_catalog(f)

    def test_top_level_must_be_mapping(self, tmp_path):
        f = tmp_path / "list.json"
        f.write_text("[1, 2, 3]")
        with pytest.raises(CatalogError, match="must map"):
            load_catalog(f)

    def test_validation_error(self, tmp_path):
        f = tmp_path / "noversion.json"
        f.write_text('{"ISteamUser": {"GetFriendList": {"httpmethod": "GET"}}}')
        with pytest.raises(CatalogError, match="Invalid catalog"):
            load_catalog(f)


class TestDefaultCatalog:
    def test_bundled_catalog_loads(self):
        catalog = load_default_catalog()
        assert "ISteamUser" in catalog.services
        assert catalog.services["ISteamUser"]["GetPlayerSummaries"].version == 2

    def test_bundled_catalog_is_cached(self):
        assert load_default_catalog() is load_default_catalog()
