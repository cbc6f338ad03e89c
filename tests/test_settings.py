"""
Settings tests - YAF_ environment configuration
"""

import pytest
from pydantic import ValidationError

from yaf.config import AppSettings


class TestLogLevel:
    """Test validation of YAF_LOG_LEVEL"""

    def test_default(self, monkeypatch):
        monkeypatch.delenv("YAF_LOG_LEVEL", raising=False)
        assert AppSettings(_env_file=None).log_level == "WARNING"

    def test_lowercase_accepted(self, monkeypatch):
        monkeypatch.setenv("YAF_LOG_LEVEL", "debug")
        assert AppSettings(_env_file=None).log_level == "DEBUG"

    def test_unknown_level_rejected(self, monkeypatch):
        """A bad level fails in settings, with the field named"""
        monkeypatch.setenv("YAF_LOG_LEVEL", "loud")

        with pytest.raises(ValidationError) as exc_info:
            AppSettings(_env_file=None)

        assert "log_level" in str(exc_info.value)


class TestOtherSettings:
    def test_shell_from_environment(self, monkeypatch):
        monkeypatch.setenv("YAF_SHELL", "/bin/bash")
        assert AppSettings(_env_file=None).shell == "/bin/bash"

    def test_config_path_follows_xdg(self, monkeypatch, tmp_path):
        monkeypatch.delenv("YAF_CONFIG_PATH", raising=False)
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert AppSettings(_env_file=None).config_path == str(tmp_path / "yaf.conf")
