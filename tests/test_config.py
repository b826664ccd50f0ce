"""Tests for configuration."""

import pytest

from gen_form.config import GenFormConfig, get_config, update_config


class TestGenFormConfig:
    """Tests for GenFormConfig."""

    def test_defaults(self):
        """Defaults match the documented values."""
        config = GenFormConfig()
        assert config.use_nextjs is True
        assert config.default_component_name == "GeneratedForm"
        assert config.submit_button_text == "Submit"
        assert config.indent == 2
        assert config.indent_unit == "  "
        assert config.mcp_transport == "stdio"
        assert config.mcp_port == 8080
        assert config.max_sessions == 100

    def test_from_env(self, monkeypatch):
        """Environment variables override the defaults."""
        monkeypatch.setenv("GEN_FORM_USE_NEXTJS", "false")
        monkeypatch.setenv("GEN_FORM_DEFAULT_COMPONENT_NAME", "MyForm")
        monkeypatch.setenv("GEN_FORM_SUBMIT_TEXT", "Send")
        monkeypatch.setenv("GEN_FORM_INDENT", "4")
        monkeypatch.setenv("GEN_FORM_LOG_LEVEL", "debug")
        monkeypatch.setenv("MCP_TRANSPORT", "sse")
        monkeypatch.setenv("MCP_PORT", "9000")
        monkeypatch.setenv("GEN_FORM_MAX_SESSIONS", "5")

        config = GenFormConfig.from_env()

        assert config.use_nextjs is False
        assert config.default_component_name == "MyForm"
        assert config.submit_button_text == "Send"
        assert config.indent_unit == "    "
        assert config.log_level == "DEBUG"
        assert config.mcp_transport == "sse"
        assert config.mcp_port == 9000
        assert config.max_sessions == 5

    def test_from_env_unset(self, monkeypatch):
        """Unset variables fall back to the field defaults."""
        for name in ("GEN_FORM_USE_NEXTJS", "GEN_FORM_INDENT", "MCP_PORT"):
            monkeypatch.delenv(name, raising=False)
        config = GenFormConfig.from_env()
        assert config.use_nextjs is True
        assert config.indent == 2
        assert config.mcp_port == 8080


class TestUpdateConfig:
    """Tests for update_config."""

    @pytest.fixture(autouse=True)
    def restore(self):
        config = get_config()
        saved = config.submit_button_text
        yield
        config.submit_button_text = saved

    def test_update_known_key(self):
        """Known settings are changed in place."""
        update_config(submit_button_text="Go")
        assert get_config().submit_button_text == "Go"

    def test_unknown_key_ignored(self):
        """Unknown settings are ignored."""
        config = update_config(no_such_setting=1)
        assert not hasattr(config, "no_such_setting")
