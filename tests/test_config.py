from __future__ import annotations

import pytest

import project_config
from project_config import get_config, get_section, use_config, validate_config
from sudoku_errors import ConfigError


def teardown_function():
    use_config(None)


def test_default_config_is_valid():
    config = get_config()
    validate_config(config)
    assert get_section("generator.empty_ratio.hard") == 0.75
    assert get_section("logging.level") == "WARNING"


def test_get_section_default_and_missing():
    assert get_section("generator.missing", default=3) == 3
    with pytest.raises(KeyError):
        get_section("generator.missing")


def test_missing_file_yields_empty_config(tmp_path):
    use_config(tmp_path / "absent.toml")
    assert get_config() == {}


def test_env_variable_selects_file(tmp_path, monkeypatch):
    path = tmp_path / "alt.toml"
    path.write_text("[generator]\ndefault_level = 3\n", encoding="utf-8")
    monkeypatch.setenv("SUDOKU_CONFIG", str(path))
    project_config.reload()
    assert get_section("generator.default_level") == 3
    monkeypatch.delenv("SUDOKU_CONFIG")
    project_config.reload()


def test_schema_violation_raises(tmp_path):
    path = tmp_path / "bad.toml"
    path.write_text("[generator.empty_ratio]\nhard = 1.5\n", encoding="utf-8")
    use_config(path)
    with pytest.raises(ConfigError) as excinfo:
        get_config()
    assert excinfo.value.path == "generator.empty_ratio.hard"


def test_unparseable_file_raises(tmp_path):
    path = tmp_path / "broken.toml"
    path.write_text("[generator\n", encoding="utf-8")
    use_config(path)
    with pytest.raises(ConfigError):
        get_config()


def test_validate_rejects_unknown_level():
    with pytest.raises(ConfigError):
        validate_config({"logging": {"level": "LOUD"}})
