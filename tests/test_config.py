"""Tests for terminal configuration."""

from hexterm.config import TerminalConfig


class TestTerminalConfig:
    def test_from_env(self):
        config = TerminalConfig.from_env({"COLORTERM": "truecolor"})
        assert config.colorterm == "truecolor"
        assert config.true_color

    def test_from_empty_env(self):
        config = TerminalConfig.from_env({})
        assert config.colorterm is None
        assert not config.true_color

    def test_case_sensitive(self):
        assert not TerminalConfig(colorterm="24Bit").true_color
        assert TerminalConfig(colorterm="24bit").true_color

    def test_defaults_to_process_env(self, monkeypatch):
        monkeypatch.setenv("COLORTERM", "truecolor")
        assert TerminalConfig.from_env().true_color
        monkeypatch.setenv("COLORTERM", "")
        assert not TerminalConfig.from_env().true_color

    def test_to_dict(self):
        assert TerminalConfig(colorterm="24bit").to_dict() == {
            "colorterm": "24bit",
            "true_color": True,
        }
        assert TerminalConfig().to_dict() == {"colorterm": None, "true_color": False}
