"""
Style table and built-in field registry

Both tables back the {@name} directive. Style names map to fixed ANSI
escape sequences; field names map to functions reading host information.
Styles are consulted first, so a field can never shadow a style.
"""

from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional

from . import fetch


ESC = "\x1b"

STYLES: Mapping[str, str] = MappingProxyType({
    **{f"color{n}": f"{ESC}[38;5;{n}m" for n in range(16)},
    "bold": f"{ESC}[1m",
    "italic": f"{ESC}[3m",
    "underline": f"{ESC}[4m",
    "reset": f"{ESC}[0m",
})

RESET = STYLES["reset"]


def style_get(name: str) -> Optional[str]:
    """ANSI sequence for a style name, or None if the name is not a style"""
    return STYLES.get(name)


class FieldRegistry:
    """
    Registry of built-in {@field} providers

    Maps field names to zero-argument callables returning display text.
    """

    def __init__(self) -> None:
        """Initialize the registry with all built-in system fields"""
        self.fields: Dict[str, Callable[[], str]] = {}
        self.systemFields_register()

    def register(self, name: str, provider: Callable[[], str]) -> None:
        """Register a field provider under name"""
        self.fields[name] = provider

    def get(self, name: str) -> Optional[Callable[[], str]]:
        """Field provider by name, or None if not registered"""
        return self.fields.get(name)

    def names_list(self) -> list[str]:
        return sorted(self.fields)

    def systemFields_register(self) -> None:
        """Register the host information fields"""
        self.register("username", fetch.username_get)
        self.register("hostname", fetch.hostname_get)
        self.register("distro", fetch.distro_get)
        self.register("kernel", fetch.kernel_get)
        self.register("uptime", fetch.uptime_get)
        self.register("pkgs", fetch.pkgs_get)
