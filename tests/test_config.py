"""
Tests for LocalizationConfig loading from YAML and the environment.
"""

from pathlib import Path

import pytest
import yaml

from localization_utilities import ConfigError, LocalizationConfig
from localization_utilities.config import ENV_CONFIG_FILE, ENV_MODS_DIR, ENV_TABLE_FILENAME


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # setenv first so teardown also removes anything a .env file loaded
    for name in (ENV_MODS_DIR, ENV_TABLE_FILENAME, ENV_CONFIG_FILE):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def write_yaml(path: Path, data) -> Path:
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, allow_unicode=True)
    return path


class TestDefaults:

    def test_defaults(self):
        config = LocalizationConfig()
        assert config.table_path == Path("Mods") / "Localization.json"
        assert config.source_language == "English"
        assert config.preserved_language == "Simplified Chinese"
        assert config.sentinel == "null"
        assert config.indent == 4

    def test_table_path_uses_mods_dir(self, tmp_path):
        config = LocalizationConfig(mods_dir=tmp_path)
        assert config.table_path == tmp_path / "Localization.json"

    @pytest.mark.parametrize("name", ["sub/Localization.json", "Localization.txt", ""])
    def test_invalid_table_filename(self, name):
        with pytest.raises(ValueError):
            LocalizationConfig(table_filename=name)

    def test_blank_language_rejected(self):
        with pytest.raises(ValueError):
            LocalizationConfig(preserved_language="  ")

    def test_indent_bounds(self):
        with pytest.raises(ValueError):
            LocalizationConfig(indent=20)


class TestFromYaml:

    def test_flat_mapping(self, tmp_path):
        path = write_yaml(tmp_path / "loc.yaml", {"mods_dir": str(tmp_path / "Mods"), "indent": 2})
        config = LocalizationConfig.from_yaml(path)
        assert config.mods_dir == tmp_path / "Mods"
        assert config.indent == 2

    def test_nested_under_localization_key(self, tmp_path):
        path = write_yaml(tmp_path / "loc.yaml", {"localization": {"preserved_language": "Korean"}})
        assert LocalizationConfig.from_yaml(path).preserved_language == "Korean"

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "loc.yaml"
        path.write_text("", encoding="utf-8")
        assert LocalizationConfig.from_yaml(path) == LocalizationConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Cannot read"):
            LocalizationConfig.from_yaml(tmp_path / "missing.yaml")

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "loc.yaml"
        path.write_text("mods_dir: [unclosed", encoding="utf-8")
        with pytest.raises(ConfigError, match="Malformed YAML"):
            LocalizationConfig.from_yaml(path)

    def test_not_a_mapping(self, tmp_path):
        path = write_yaml(tmp_path / "loc.yaml", ["a", "b"])
        with pytest.raises(ConfigError):
            LocalizationConfig.from_yaml(path)

    def test_invalid_values(self, tmp_path):
        path = write_yaml(tmp_path / "loc.yaml", {"indent": "wide"})
        with pytest.raises(ConfigError, match="Invalid localization settings"):
            LocalizationConfig.from_yaml(path)


class TestFromEnv:

    def test_env_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv(ENV_MODS_DIR, str(tmp_path / "Mods"))
        monkeypatch.setenv(ENV_TABLE_FILENAME, "Shared.json")

        config = LocalizationConfig.from_env(dotenv=False)

        assert config.table_path == tmp_path / "Mods" / "Shared.json"

    def test_env_over_yaml(self, monkeypatch, tmp_path):
        path = write_yaml(tmp_path / "loc.yaml", {"mods_dir": "from-yaml", "sentinel": "TODO"})
        monkeypatch.setenv(ENV_CONFIG_FILE, str(path))
        monkeypatch.setenv(ENV_MODS_DIR, str(tmp_path / "from-env"))

        config = LocalizationConfig.from_env(dotenv=False)

        assert config.mods_dir == tmp_path / "from-env"
        assert config.sentinel == "TODO"

    def test_no_env_gives_defaults(self):
        assert LocalizationConfig.from_env(dotenv=False) == LocalizationConfig()

    def test_reads_dotenv(self, monkeypatch, tmp_path):
        (tmp_path / ".env").write_text(f"{ENV_MODS_DIR}={tmp_path / 'dotenv-mods'}\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        config = LocalizationConfig.from_env()

        assert config.mods_dir == tmp_path / "dotenv-mods"
