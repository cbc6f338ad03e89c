"""
Built-in field tests - host information readers

Readers are pointed at temporary files so results do not depend on the
machine running the tests.
"""

import pytest

from yaf.lib import fetch


class TestUptime:
    """Test uptime formatting and reading"""

    @pytest.mark.parametrize("seconds,expected", [
        (0, "0 minutes"),
        (59, "0 minutes"),
        (60, "1 minute"),
        (3600, "1 hour"),
        (7260, "2 hours, 1 minute"),
        (86400, "1 day"),
        (90061, "1 day, 1 hour, 1 minute"),
        (3 * 86400 + 120, "3 days, 2 minutes"),
    ])
    def test_format(self, seconds, expected):
        assert fetch.uptime_format(seconds) == expected

    def test_read_proc_format(self, tmp_path):
        uptime_file = tmp_path / "uptime"
        uptime_file.write_text("7260.55 12345.67\n")

        assert fetch.uptime_get(uptime_file) == "2 hours, 1 minute"

    def test_missing_file(self, tmp_path):
        assert fetch.uptime_get(tmp_path / "missing") == "N/A"

    def test_garbage(self, tmp_path):
        uptime_file = tmp_path / "uptime"
        uptime_file.write_text("not-a-number")

        assert fetch.uptime_get(uptime_file) == "N/A"


class TestKernel:
    """Test kernel release reading"""

    def test_proc_version(self, tmp_path):
        version_file = tmp_path / "version"
        version_file.write_text("Linux version 6.9.1-arch1-1 (linux@archlinux) (gcc) #1 SMP\n")

        assert fetch.kernel_get(version_file) == "6.9.1-arch1-1"

    def test_short_file(self, tmp_path):
        version_file = tmp_path / "version"
        version_file.write_text("Linux")

        assert fetch.kernel_get(version_file) == "N/A"


class TestPackages:
    """Test package counting"""

    def test_none_found(self, tmp_path, monkeypatch):
        monkeypatch.delenv("HOME", raising=False)
        assert fetch.pkgs_get(tmp_path) == "N/A"

    def test_counts_per_manager(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path / "home"))

        pacman = tmp_path / "var/lib/pacman/local"
        pacman.mkdir(parents=True)
        for name in ("bash-5.2", "coreutils-9.4", "ALPM_DB_VERSION"):
            (pacman / name).mkdir()

        dpkg = tmp_path / "var/lib/dpkg/info"
        dpkg.mkdir(parents=True)
        for name in ("bash.list", "bash.md5sums", "coreutils.list"):
            (dpkg / name).write_text("")

        flatpak = tmp_path / "home/.local/share/flatpak/app"
        flatpak.mkdir(parents=True)
        (flatpak / "org.example.App").mkdir()

        assert fetch.pkgs_get(tmp_path) == "3 (pacman), 2 (apt), 1 (flatpak)"


class TestNeverRaise:
    """Live readers always return a string"""

    @pytest.mark.parametrize("reader", [
        fetch.username_get,
        fetch.hostname_get,
        fetch.distro_get,
        fetch.kernel_get,
        fetch.uptime_get,
    ])
    def test_returns_text(self, reader):
        value = reader()
        assert isinstance(value, str)
        assert value
