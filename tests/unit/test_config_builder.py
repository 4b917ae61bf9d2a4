"""
migrator/config_builder.py 單元測試
"""

import json

import pytest

from config.config import Config
from core.exceptions import ConfigFileError
from migrator.config_builder import ConfigBuilder
from migrator.schema import MigrationOptions


def _builder(root, **kwargs):
    return ConfigBuilder(MigrationOptions(repo_path=str(root), **kwargs))


@pytest.mark.unit
class TestRenderAll:

    @pytest.mark.unit
    def test_plain_mode(self, tmp_path):
        files = _builder(tmp_path).render_all()
        assert sorted(files) == ["package.json", "playwright.config.ts"]
        assert "testDir: './tests'" in files["playwright.config.ts"]
        assert Config.BASE_URL in files["playwright.config.ts"]

    @pytest.mark.unit
    def test_bdd_mode(self, tmp_path):
        files = _builder(tmp_path, bdd=True, output="e2e/").render_all()
        assert "e2e/features/support/world.ts" in files
        assert "e2e/features/support/hooks.ts" in files
        assert "paths: ['e2e/features/**/*.feature']" in files["cucumber.js"]

    @pytest.mark.unit
    def test_base_url_option(self, tmp_path):
        files = _builder(tmp_path, base_url="http://localhost:8080").render_all()
        assert "'http://localhost:8080'" in files["playwright.config.ts"]


@pytest.mark.unit
class TestPackageJson:

    @pytest.mark.unit
    def test_new_package(self, tmp_path):
        builder = _builder(tmp_path)
        assert builder.load_package_json() == {}
        pkg = builder.merge_package_json({})
        assert pkg["devDependencies"] == {"@playwright/test": Config.PLAYWRIGHT_VERSION}
        assert pkg["scripts"] == {"test": "playwright test", "test:ui": "playwright test --ui"}

    @pytest.mark.unit
    def test_existing_fields_preserved(self, tmp_path):
        (tmp_path / "package.json").write_text(json.dumps({
            "name": "web-app",
            "scripts": {"build": "webpack", "test": "mocha"},
            "devDependencies": {"mocha": "^10.0.0"},
        }), encoding="utf-8")
        builder = _builder(tmp_path, bdd=True)
        pkg = builder.merge_package_json(builder.load_package_json())

        assert pkg["name"] == "web-app"
        assert pkg["scripts"]["build"] == "webpack"
        assert pkg["scripts"]["test"] == "playwright test"
        assert pkg["scripts"]["test:bdd"] == "cucumber-js"
        assert pkg["devDependencies"]["mocha"] == "^10.0.0"
        assert pkg["devDependencies"]["@cucumber/cucumber"] == Config.CUCUMBER_VERSION
        assert "ts-node" in pkg["devDependencies"]

    @pytest.mark.unit
    def test_invalid_json(self, tmp_path):
        (tmp_path / "package.json").write_text("{oops", encoding="utf-8")
        with pytest.raises(ConfigFileError):
            _builder(tmp_path).load_package_json()

    @pytest.mark.unit
    def test_not_an_object(self, tmp_path):
        (tmp_path / "package.json").write_text("[]", encoding="utf-8")
        with pytest.raises(ConfigFileError):
            _builder(tmp_path).load_package_json()


@pytest.mark.unit
class TestBuildAll:

    @pytest.mark.unit
    def test_writes_files(self, tmp_path):
        created = _builder(tmp_path, bdd=True).build_all()
        rels = sorted(p.relative_to(tmp_path).as_posix() for p in created)
        assert rels == [
            "cucumber.js",
            "package.json",
            "playwright.config.ts",
            "tests/features/support/hooks.ts",
            "tests/features/support/world.ts",
        ]
        pkg = json.loads((tmp_path / "package.json").read_text(encoding="utf-8"))
        assert "@playwright/test" in pkg["devDependencies"]
