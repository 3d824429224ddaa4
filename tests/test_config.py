"""Tests for TPrintConfig loading, overrides and persistence."""

# pylint: disable=missing-function-docstring

import os

import pytest
import yaml

from tprint.config import TPrintConfig
from tprint.table.align import Alignment, ValueKind
from tprint.utils.exceptions import ConfigurationException


@pytest.fixture
def config_path(tmp_path):
    return str(tmp_path / "tprint" / "config.yaml")


def write_config(path, data):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w") as f:
        yaml.safe_dump(data, f)


def test_defaults_without_file(config_path):
    config = TPrintConfig(config_path)
    assert config.show_borders is False
    assert config.show_header is True
    assert config.spaces_left == 0
    assert config.spaces_between == 2
    assert config.caption_align is Alignment.LEFT
    assert config.data_align is Alignment.LEFT
    assert config.formats[ValueKind.UINT64] == "%llu"
    assert config.log_level == "WARNING"
    assert config.log_file is None


def test_file_values_merge_with_defaults(config_path):
    write_config(config_path, {"table": {"show_borders": True, "spaces_left": 4}, "formats": {"double": "%0.1f"}})
    config = TPrintConfig(config_path)
    assert config.show_borders is True
    assert config.spaces_left == 4
    assert config.spaces_between == 2
    assert config.formats[ValueKind.DOUBLE] == "%0.1f"
    assert config.formats[ValueKind.INT32] == "%d"


def test_config_path_from_environment(config_path, monkeypatch):
    write_config(config_path, {"table": {"spaces_between": 6}})
    monkeypatch.setenv("TPRINT_CONFIG", config_path)
    assert TPrintConfig().spaces_between == 6


def test_environment_overrides(config_path, monkeypatch):
    monkeypatch.setenv("TPRINT_BORDERS", "yes")
    monkeypatch.setenv("TPRINT_SPACES_LEFT", "3")
    monkeypatch.setenv("TPRINT_SPACES_BETWEEN", "5")
    monkeypatch.setenv("TPRINT_LOG_LEVEL", "DEBUG")
    config = TPrintConfig(config_path)
    assert config.show_borders is True
    assert config.spaces_left == 3
    assert config.spaces_between == 5
    assert config.log_level == "DEBUG"


def test_invalid_environment_value(config_path, monkeypatch):
    monkeypatch.setenv("TPRINT_SPACES_LEFT", "-1")
    with pytest.raises(ConfigurationException):
        _ = TPrintConfig(config_path).spaces_left


def test_unreadable_file_falls_back_to_defaults(config_path):
    os.makedirs(os.path.dirname(config_path), exist_ok=True)
    with open(config_path, "w") as f:
        f.write("table: [unclosed\n")
    config = TPrintConfig(config_path)
    assert config.spaces_between == 2


def test_empty_sections_keep_defaults(config_path):
    os.makedirs(os.path.dirname(config_path), exist_ok=True)
    with open(config_path, "w") as f:
        f.write("table:\nlogging:\nformats:\n")
    config = TPrintConfig(config_path)
    assert config.spaces_between == 2
    assert config.show_header is True
    assert config.log_level == "WARNING"
    assert config.formats[ValueKind.DOUBLE] == "%0.3f"


def test_partial_section_with_empty_sibling(config_path):
    write_config(config_path, {"table": {"spaces_left": 3}, "logging": None})
    config = TPrintConfig(config_path)
    assert config.spaces_left == 3
    assert config.log_file is None


@pytest.mark.parametrize("text", ["table: 5\n", "logging: [a, b]\n", "formats: text\n"])
def test_non_mapping_section_falls_back_to_defaults(config_path, text):
    os.makedirs(os.path.dirname(config_path), exist_ok=True)
    with open(config_path, "w") as f:
        f.write(text)
    config = TPrintConfig(config_path)
    assert config.config["table"]["spaces_between"] == 2
    assert config.log_level == "WARNING"


def test_set_value_coerces_and_saves(config_path):
    config = TPrintConfig(config_path)
    config.set_value("table.spaces_left", "2")
    config.set_value("table.show_borders", "true")
    config.set_value("table.data_align", "r")
    config.set_value("formats.double", "%0.2f")

    reloaded = TPrintConfig(config_path)
    assert reloaded.spaces_left == 2
    assert reloaded.show_borders is True
    assert reloaded.data_align is Alignment.RIGHT
    assert reloaded.formats[ValueKind.DOUBLE] == "%0.2f"
    assert oct(os.stat(config_path).st_mode & 0o777) == oct(0o600)


@pytest.mark.parametrize(
    "key, value",
    [
        ("table.unknown", "1"),
        ("nosection", "1"),
        ("table.spaces_left", "abc"),
        ("table.spaces_between", "-3"),
        ("table.show_header", "maybe"),
        ("table.caption_align", "diagonal"),
        ("formats.int32", "%s"),
    ],
)
def test_set_value_rejects_bad_input(config_path, key, value):
    config = TPrintConfig(config_path)
    with pytest.raises(ConfigurationException):
        config.set_value(key, value)
    assert not os.path.exists(config_path)
