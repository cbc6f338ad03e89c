"""
Built-in system fields

Each function returns a short display string for one piece of host
information, or the configured "not available" marker when it cannot be
determined. None of these raise.
"""

import getpass
import os
import platform
import socket
from pathlib import Path
from typing import List

from ..config import appsettings


def notAvailable_get() -> str:
    return appsettings.not_available


def username_get() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return notAvailable_get()


def hostname_get() -> str:
    try:
        return socket.gethostname() or notAvailable_get()
    except OSError:
        return notAvailable_get()


def distro_get() -> str:
    """Pretty distribution name from os-release, e.g. 'Arch Linux'"""
    try:
        release = platform.freedesktop_os_release()
    except OSError:
        return notAvailable_get()
    return release.get('PRETTY_NAME') or release.get('NAME') or notAvailable_get()


def kernel_get(version_file: Path = Path("/proc/version")) -> str:
    """Kernel release, the third word of /proc/version"""
    try:
        parts = version_file.read_text().split()
    except OSError:
        return platform.release() or notAvailable_get()
    if len(parts) > 2:
        return parts[2]
    return notAvailable_get()


def uptime_format(seconds: float) -> str:
    """
    Format an uptime in seconds as days, hours and minutes

    Example:
        >>> uptime_format(90061)
        '1 day, 1 hour, 1 minute'
        >>> uptime_format(30)
        '0 minutes'
    """
    total = int(seconds)
    days = total // 86400
    hours = (total % 86400) // 3600
    minutes = (total % 3600) // 60

    parts: List[str] = []
    for amount, unit in ((days, "day"), (hours, "hour"), (minutes, "minute")):
        if amount > 0:
            parts.append(f"{amount} {unit}{'s' if amount > 1 else ''}")

    return ", ".join(parts) if parts else "0 minutes"


def uptime_get(uptime_file: Path = Path("/proc/uptime")) -> str:
    try:
        first = uptime_file.read_text().split()[0]
        return uptime_format(float(first))
    except (OSError, IndexError, ValueError):
        return notAvailable_get()


def _entries_count(directory: Path, suffix: str = "") -> int:
    try:
        return sum(1 for entry in directory.iterdir() if entry.name.endswith(suffix))
    except OSError:
        return 0


def pkgs_get(root: Path = Path("/")) -> str:
    """
    Installed package counts per package manager

    Example:
        '1234 (pacman), 12 (flatpak)'
    """
    flatpak = _entries_count(root / "var/lib/flatpak/app")
    home = os.environ.get("HOME")
    if home:
        flatpak += _entries_count(Path(home) / ".local/share/flatpak/app")

    counts = [
        ("pacman", _entries_count(root / "var/lib/pacman/local")),
        ("xbps", _entries_count(root / "var/db/xbps")),
        ("apt", _entries_count(root / "var/lib/dpkg/info", suffix=".list")),
        ("flatpak", flatpak),
    ]

    found = [f"{count} ({manager})" for manager, count in counts if count > 0]
    if not found:
        return notAvailable_get()
    return ", ".join(found)
