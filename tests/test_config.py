"""
Tests for configuration loading — datagen.yml parsing and validation.
"""

import textwrap
from pathlib import Path

import pytest

from datagen.core.config.loader import ConfigError, find_settings_file, load_settings
from datagen.core.use_cases.config_check import check_config


@pytest.fixture
def settings_yml(tmp_path: Path) -> Path:
    """A settings file with everything under a 'generator:' key."""
    content = textwrap.dedent("""\
        generator:
          min_value: -10
          max_value: 10
          precision: 2
    """)
    path = tmp_path / "datagen.yml"
    path.write_text(content)
    return path


class TestFindSettingsFile:
    def test_finds_in_cwd(self, settings_yml: Path):
        assert find_settings_file() == settings_yml.resolve()

    def test_finds_from_subdirectory(self, settings_yml: Path, tmp_path: Path):
        sub = tmp_path / "a" / "b"
        sub.mkdir(parents=True)
        assert find_settings_file(sub) == settings_yml.resolve()

    def test_none_when_absent(self, tmp_path: Path):
        assert find_settings_file(tmp_path) is None


class TestLoadSettings:
    def test_defaults_without_file(self):
        s = load_settings()
        assert (s.min_value, s.max_value, s.precision) == (-1000, 1000, 3)

    def test_nested_section(self, settings_yml: Path):
        s = load_settings(settings_yml)
        assert (s.min_value, s.max_value, s.precision) == (-10, 10, 2)

    def test_auto_detected(self, settings_yml: Path):
        assert load_settings().max_value == 10

    def test_flat_layout(self, tmp_path: Path):
        path = tmp_path / "flat.yml"
        path.write_text("min_value: 0\nmax_value: 5\n")
        s = load_settings(path)
        assert (s.min_value, s.max_value, s.precision) == (0, 5, 3)

    def test_empty_file_is_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yml"
        path.write_text("")
        assert load_settings(path).max_value == 1000

    def test_explicit_missing(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_settings(tmp_path / "nope.yml")

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "bad.yml"
        path.write_text("min_value: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_settings(path)

    def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "list.yml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_settings(path)

    def test_generator_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "bad.yml"
        path.write_text("generator: 5\n")
        with pytest.raises(ConfigError, match="generator"):
            load_settings(path)

    def test_inverted_range(self, tmp_path: Path):
        path = tmp_path / "bad.yml"
        path.write_text("min_value: 10\nmax_value: 1\n")
        with pytest.raises(ConfigError, match="Invalid settings"):
            load_settings(path)


class TestCheckConfig:
    def test_no_file_is_valid_with_warning(self):
        result = check_config()
        assert result.valid
        assert result.config_path is None
        assert any("defaults" in w for w in result.warnings)

    def test_valid_file(self, settings_yml: Path):
        result = check_config(settings_yml)
        assert result.valid
        assert result.settings.precision == 2
        assert result.errors == []

    def test_invalid_file(self, tmp_path: Path):
        path = tmp_path / "datagen.yml"
        path.write_text("precision: 99\n")
        result = check_config(path)
        assert not result.valid
        assert result.settings is None
        assert len(result.errors) == 1

    def test_degenerate_range_warns(self, tmp_path: Path):
        path = tmp_path / "datagen.yml"
        path.write_text("min_value: 4\nmax_value: 4\n")
        result = check_config(path)
        assert result.valid
        assert any("same" in w for w in result.warnings)

    def test_to_dict(self, settings_yml: Path):
        d = check_config(settings_yml).to_dict()
        assert d["valid"] is True
        assert d["config_path"] == str(settings_yml)
        assert d["settings"] == {"min_value": -10, "max_value": 10, "precision": 2}
