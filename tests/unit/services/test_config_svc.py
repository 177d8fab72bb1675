"""
Unit tests for ConfigService.

Tests cover:
- Built-in defaults
- Layering of YAML files, overrides and environment variables
- Tolerance for unreadable config files
- Conversion to RenderOptions
"""

import logging
from pathlib import Path

import pytest

from cdepgraph.helpers.exceptions import ConfigError
from cdepgraph.services.config_svc import ConfigService


def write_local_config(root: Path, text: str) -> Path:
    path = root / "config" / "cdepgraph.yaml"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.mark.unit
class TestDefaults:
    def test_defaults_without_sources(self, clean_env):
        cfg = ConfigService().get_config()

        assert cfg["output_path"] == "out.dot"
        assert cfg["graph_template"] is None
        assert cfg["include_modules"] == []
        assert cfg["private_modules"] == []
        assert cfg["recursive"] is False
        assert cfg["log_level"] == "warning"

    def test_get_missing_key_returns_default(self, clean_env):
        service = ConfigService()
        assert service.get("nope", "fallback") == "fallback"
        assert service.get("output_path.deeper") is None

    def test_config_is_cached(self, clean_env):
        service = ConfigService()
        assert service.get_config() is service.get_config()


@pytest.mark.unit
class TestLayering:
    def test_local_yaml_overrides_defaults(self, clean_env):
        write_local_config(clean_env, "output_path: build/deps.dot\nprivate_modules: [BMS]\n")

        service = ConfigService()

        assert service.get("output_path") == "build/deps.dot"
        assert service.get("private_modules") == ["BMS"]
        assert service.get("recursive") is False

    def test_config_path_env_overrides_local_yaml(self, clean_env, monkeypatch):
        write_local_config(clean_env, "output_path: local.dot\nrecursive: true\n")
        extra = clean_env / "extra.yaml"
        extra.write_text("output_path: extra.dot\n", encoding="utf-8")
        monkeypatch.setenv("CDEPGRAPH_CONFIG_PATH", str(extra))

        service = ConfigService()

        assert service.get("output_path") == "extra.dot"
        assert service.get("recursive") is True

    def test_overrides_beat_files_and_none_is_ignored(self, clean_env):
        write_local_config(clean_env, "output_path: local.dot\nlog_level: info\n")

        service = ConfigService({"output_path": "cli.dot", "log_level": None})

        assert service.get("output_path") == "cli.dot"
        assert service.get("log_level") == "info"

    def test_environment_beats_overrides(self, clean_env, monkeypatch):
        monkeypatch.setenv("CDEPGRAPH_OUTPUT_PATH", "env.dot")
        monkeypatch.setenv("CDEPGRAPH_INCLUDE_MODULES", "BMS, CONT,,DIAG")
        monkeypatch.setenv("CDEPGRAPH_RECURSIVE", "TRUE")

        service = ConfigService({"output_path": "cli.dot"})

        assert service.get("output_path") == "env.dot"
        assert service.get("include_modules") == ["BMS", "CONT", "DIAG"]
        assert service.get("recursive") is True

    def test_unknown_environment_keys_are_ignored(self, clean_env, monkeypatch):
        monkeypatch.setenv("CDEPGRAPH_SOMETHING_ELSE", "x")
        assert "something_else" not in ConfigService().get_config()

    def test_reload_picks_up_changes(self, clean_env):
        service = ConfigService()
        assert service.get("output_path") == "out.dot"

        write_local_config(clean_env, "output_path: later.dot\n")

        assert service.get("output_path") == "out.dot"
        assert service.reload()["output_path"] == "later.dot"


@pytest.mark.unit
class TestBrokenFiles:
    def test_invalid_yaml_is_ignored(self, clean_env, caplog):
        write_local_config(clean_env, "output_path: [unclosed\n")

        with caplog.at_level(logging.WARNING):
            cfg = ConfigService().get_config()

        assert cfg["output_path"] == "out.dot"
        assert "Ignoring unreadable config file" in caplog.text

    def test_non_mapping_is_ignored(self, clean_env, caplog):
        write_local_config(clean_env, "- just\n- a list\n")

        with caplog.at_level(logging.WARNING):
            cfg = ConfigService().get_config()

        assert cfg["output_path"] == "out.dot"
        assert "top level is not a mapping" in caplog.text

    def test_missing_config_path_is_ignored(self, clean_env, monkeypatch):
        monkeypatch.setenv("CDEPGRAPH_CONFIG_PATH", str(clean_env / "missing.yaml"))
        assert ConfigService().get("output_path") == "out.dot"


@pytest.mark.unit
class TestRenderOptions:
    def test_defaults(self, clean_env):
        options = ConfigService().make_render_options()

        assert options.include_modules == []
        assert options.private_modules == []
        assert options.graph_template_path is None
        assert options.subgraph_template_path is None

    def test_lists_strings_and_templates(self, clean_env):
        service = ConfigService(
            {
                "include_modules": "BMS,CONT",
                "private_modules": ["CONT", " "],
                "graph_template": "my/graph.temp",
            }
        )

        options = service.make_render_options()

        assert options.include_modules == ["BMS", "CONT"]
        assert options.private_modules == ["CONT"]
        assert options.graph_template_path == Path("my/graph.temp")
        assert options.subgraph_template_path is None

    def test_bad_filter_type(self, clean_env):
        write_local_config(clean_env, "include_modules: 42\n")

        with pytest.raises(ConfigError, match="include_modules must be a list"):
            ConfigService().make_render_options()


@pytest.mark.unit
class TestOutputPath:
    @pytest.mark.parametrize("text", ["output_path:\n", 'output_path: ""\n', "output_path: '   '\n"])
    def test_empty_value_falls_back_to_default(self, clean_env, text):
        write_local_config(clean_env, text)
        assert ConfigService().get_output_path() == "out.dot"

    def test_configured_value(self, clean_env):
        assert ConfigService({"output_path": "build/deps.dot"}).get_output_path() == "build/deps.dot"

    def test_non_string_value(self, clean_env):
        write_local_config(clean_env, "output_path: [a, b]\n")

        with pytest.raises(ConfigError, match="output_path must be a file path"):
            ConfigService().get_output_path()


@pytest.mark.unit
class TestFlags:
    @pytest.mark.parametrize("raw", ["0", "no", "off", "false", "NO"])
    def test_false_spellings_from_environment(self, clean_env, monkeypatch, raw):
        monkeypatch.setenv("CDEPGRAPH_RECURSIVE", raw)
        assert ConfigService().get_bool("recursive") is False

    @pytest.mark.parametrize("raw", ["1", "yes", "on", "true"])
    def test_true_spellings_from_environment(self, clean_env, monkeypatch, raw):
        monkeypatch.setenv("CDEPGRAPH_RECURSIVE", raw)
        assert ConfigService().get_bool("recursive") is True

    def test_yaml_integer(self, clean_env):
        write_local_config(clean_env, "recursive: 0\n")
        assert ConfigService().get_bool("recursive") is False

    def test_missing_key_uses_default(self, clean_env):
        assert ConfigService().get_bool("nope", default=True) is True

    def test_unreadable_flag(self, clean_env, monkeypatch):
        monkeypatch.setenv("CDEPGRAPH_RECURSIVE", "sometimes")

        with pytest.raises(ConfigError, match="recursive must be true or false"):
            ConfigService().get_bool("recursive")
