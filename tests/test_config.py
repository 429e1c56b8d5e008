# tests/test_config.py
import pytest

from syslog_loadgen.config import AppConfig, load_config, validate_config
from syslog_loadgen.exceptions import ConfigurationError
from syslog_loadgen.templates import MAX_EVENT_LENGTH, MIN_EVENT_LENGTH


def test_missing_file_gives_defaults(tmp_path):
    config = load_config(str(tmp_path / "absent.yaml"))

    assert config.target.host == "127.0.0.1"
    assert config.target.port == "514"
    assert config.target.protocol == "tcp"
    assert config.generator.length is None
    assert config.generator.body == "template"
    assert config.generator.stats_interval == 1
    assert config.output.mode == "socket"


def test_file_values_merge_over_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "target:\n"
        "  host: logs.example.com\n"
        "  port: 6514\n"
        "generator:\n"
        "  length: 300\n"
        "  body: filler\n"
    )

    config = load_config(str(path))

    assert config.target.host == "logs.example.com"
    assert config.target.port == "6514"
    assert config.target.protocol == "tcp"
    assert config.generator.length == 300
    assert config.generator.body == "filler"
    assert config.generator.stats_interval == 1


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")

    assert load_config(str(path)) == AppConfig()


def test_unknown_option_rejected(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("generator:\n  rate: 100\n")

    with pytest.raises(ConfigurationError, match="rate"):
        load_config(str(path))


def test_malformed_yaml_rejected(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("target: [unclosed\n")

    with pytest.raises(ConfigurationError):
        load_config(str(path))


@pytest.mark.parametrize("length", [None, MIN_EVENT_LENGTH, 120, MAX_EVENT_LENGTH])
def test_valid_lengths_accepted(length):
    config = AppConfig()
    config.generator.length = length

    assert validate_config(config) is config


@pytest.mark.parametrize("length", [0, -5, MIN_EVENT_LENGTH - 1, MAX_EVENT_LENGTH + 1, "120", True])
def test_invalid_lengths_rejected(length):
    config = AppConfig()
    config.generator.length = length

    with pytest.raises(ConfigurationError):
        validate_config(config)


@pytest.mark.parametrize("section,name,value", [
    ("generator", "body", "lorem"),
    ("generator", "stats_interval", 0),
    ("target", "protocol", "sctp"),
    ("output", "mode", "file"),
    ("target", "host", ""),
])
def test_invalid_values_rejected(section, name, value):
    config = AppConfig()
    setattr(getattr(config, section), name, value)

    with pytest.raises(ConfigurationError):
        validate_config(config)


def test_unreadable_path_rejected(tmp_path):
    # a directory exists but cannot be opened as a file
    with pytest.raises(ConfigurationError, match="Cannot read"):
        load_config(str(tmp_path))


def test_unknown_section_rejected(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("generater:\n  length: 120\n")

    with pytest.raises(ConfigurationError, match="generater"):
        load_config(str(path))
