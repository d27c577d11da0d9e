from pathlib import Path

import pytest
import yaml

from hostfetch.color import ColorMode, IndexedColor, NamedColor, RgbColor
from hostfetch.config import (
    AppSettings,
    GroupConfig,
    PartialStylingRecord,
    RawConfiguration,
    StylingRecord,
    dump_config_to_string,
    load_config_from_string,
    load_config_from_yaml,
    save_config_to_yaml,
)
from hostfetch.exceptions import ConfigurationError

VALID_DOCUMENT = """
default:
  name_color: bright cyan
  separator: ": "
  separator_color: bright white
  value_color: "#ffffff"
groups:
  hardware:
    name_color: 69
    properties: [cpu, memory]
overrides:
  os:
    separator: " -> "
"""


class TestDefaultConfiguration:
    def test_default_styling(self, builtin_raw: RawConfiguration):
        assert builtin_raw.default == StylingRecord(
            name_color=NamedColor.BRIGHT_CYAN,
            separator=": ",
            separator_color=NamedColor.BRIGHT_WHITE,
            value_color=NamedColor.BRIGHT_WHITE,
        )

    def test_sys_group(self, builtin_raw: RawConfiguration):
        assert list(builtin_raw.groups) == ["sys"]

        group = builtin_raw.groups["sys"]
        assert group.name_color == IndexedColor(69)
        assert group.value_color == RgbColor(255, 255, 255)
        assert group.separator is None
        assert group.separator_color is None
        assert group.properties == ["os", "kernel", "memory", "cpu", "gpu"]

    def test_no_overrides(self, builtin_raw: RawConfiguration):
        assert builtin_raw.overrides == {}


class TestLoad:
    def test_load_document(self):
        raw = load_config_from_string(VALID_DOCUMENT)

        assert raw.default.value_color == RgbColor(255, 255, 255)
        assert raw.groups["hardware"].name_color == IndexedColor(69)
        assert raw.groups["hardware"].properties == ["cpu", "memory"]
        assert raw.overrides["os"] == PartialStylingRecord(separator=" -> ")

    def test_groups_and_overrides_are_optional(self):
        raw = load_config_from_string(
            "default: {name_color: red, separator: '=', separator_color: red, value_color: red}"
        )

        assert raw.groups == {}
        assert raw.overrides == {}

    def test_groups_keep_document_order(self):
        raw = load_config_from_string(
            """
default: {name_color: red, separator: '=', separator_color: red, value_color: red}
groups:
  zeta: {properties: [os]}
  alpha: {properties: [os]}
"""
        )

        assert list(raw.groups) == ["zeta", "alpha"]

    def test_invalid_color(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config_from_string(VALID_DOCUMENT.replace("bright cyan", "chartreuse"))

        assert "'chartreuse' is not a valid color" in str(exc_info.value)

    def test_missing_default_attribute(self):
        with pytest.raises(ConfigurationError):
            load_config_from_string("default: {name_color: red, separator: '='}")

    def test_missing_default_section(self):
        with pytest.raises(ConfigurationError):
            load_config_from_string("groups: {}")

    def test_unknown_attribute(self):
        with pytest.raises(ConfigurationError):
            load_config_from_string(VALID_DOCUMENT.replace("separator: \" -> \"", "bold: true"))

    def test_empty_document(self):
        with pytest.raises(ConfigurationError):
            load_config_from_string("")

    def test_document_must_be_mapping(self):
        with pytest.raises(ConfigurationError):
            load_config_from_string("- red\n- blue\n")

    def test_malformed_yaml(self):
        with pytest.raises(ConfigurationError):
            load_config_from_string("default: [unclosed")

    def test_boolean_is_not_a_color(self):
        with pytest.raises(ConfigurationError):
            load_config_from_string(VALID_DOCUMENT.replace("name_color: 69", "name_color: true"))

    def test_missing_file(self, tmp_path: Path):
        missing = tmp_path / "missing.yaml"

        with pytest.raises(ConfigurationError) as exc_info:
            load_config_from_yaml(missing)

        assert exc_info.value.path == missing
        assert str(missing) in str(exc_info.value)

    def test_file_that_is_not_utf8(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_bytes(b"default:\n  separator: \xff\xfe\n")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config_from_yaml(path)

        assert exc_info.value.path == path

    def test_directory_is_not_a_document(self, tmp_path: Path):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config_from_yaml(tmp_path)

        assert exc_info.value.path == tmp_path


class TestRoundTrip:
    def test_builtin_round_trip(self, builtin_raw: RawConfiguration):
        assert load_config_from_string(dump_config_to_string(builtin_raw)) == builtin_raw

    def test_round_trip_with_overrides(self):
        raw = RawConfiguration(
            default=StylingRecord(
                name_color=NamedColor.RED,
                separator=" | ",
                separator_color=NamedColor.RESET,
                value_color=RgbColor(0, 0, 5),
            ),
            groups={
                "first": GroupConfig(separator_color=IndexedColor(200), properties=["os"]),
                "second": GroupConfig(properties=[]),
            },
            overrides={
                "os": PartialStylingRecord(value_color=NamedColor.BRIGHT_BLACK),
                "cpu": PartialStylingRecord(),
            },
        )

        assert load_config_from_string(dump_config_to_string(raw)) == raw

    def test_dump_writes_text_colors_and_omits_unset(self, builtin_raw: RawConfiguration):
        data = yaml.safe_load(dump_config_to_string(builtin_raw))

        assert data["default"]["name_color"] == "bright_cyan"
        assert data["groups"]["sys"] == {
            "name_color": "69",
            "value_color": "#ffffff",
            "properties": ["os", "kernel", "memory", "cpu", "gpu"],
        }

    def test_save_creates_directories(self, tmp_path: Path, builtin_raw: RawConfiguration):
        path = tmp_path / "nested" / "dir" / "config.yaml"

        save_config_to_yaml(builtin_raw, path)

        assert load_config_from_yaml(path) == builtin_raw


class TestMerge:
    def test_merged_with_keeps_unset_attributes(self):
        current = PartialStylingRecord(name_color=NamedColor.RED, separator=":")
        merged = current.merged_with(PartialStylingRecord(separator="=", value_color=NamedColor.BLUE))

        assert merged == PartialStylingRecord(
            name_color=NamedColor.RED, separator="=", value_color=NamedColor.BLUE
        )

    def test_group_styling_drops_members(self):
        group = GroupConfig(name_color=NamedColor.GREEN, properties=["os"])

        assert group.styling == PartialStylingRecord(name_color=NamedColor.GREEN)


class TestAppSettings:
    def test_defaults(self):
        settings = AppSettings()

        assert settings.color is ColorMode.AUTO
        assert settings.properties == ["os", "kernel", "cpu", "memory"]
        assert settings.log_level == "WARNING"
        assert settings.config_file is None

    def test_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("HOSTFETCH_COLOR", "never")
        monkeypatch.setenv("HOSTFETCH_LOG_LEVEL", "debug")
        monkeypatch.setenv("HOSTFETCH_PROPERTIES", '["os", "cpu"]')

        settings = AppSettings()

        assert settings.color is ColorMode.NEVER
        assert settings.log_level == "DEBUG"
        assert settings.properties == ["os", "cpu"]

    def test_invalid_log_level(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("HOSTFETCH_LOG_LEVEL", "loud")

        with pytest.raises(ValueError):
            AppSettings()
