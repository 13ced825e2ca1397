"""Per-platform host hooks called by the modules."""

from __future__ import annotations

from typing import Dict, Type

from fujiconfig.screen import Screen


class Host:
    """Platform hooks; tracks whether the platform has been set up."""

    def __init__(self, screen: Screen) -> None:
        self.screen = screen
        self.active = False

    def init(self) -> None:
        """Global platform setup, run once at start."""
        self.active = True

    def display_legacy_hosts_devices(self) -> None:
        """Prepare the display for the legacy hosts/devices screen."""

    def cleanup(self) -> None:
        """Restore the platform state before exit."""
        self.active = False


class Apple2Host(Host):
    def display_legacy_hosts_devices(self) -> None:
        self.screen.clrscr()


class AtariHost(Host):
    pass


TARGETS: Dict[str, Type[Host]] = {
    "apple2": Apple2Host,
    "apple2enh": Apple2Host,
    "atari": AtariHost,
    "atarixl": AtariHost,
}


def host_for_target(target: str, screen: Screen) -> Host:
    """Return the host for a build target name."""
    try:
        cls = TARGETS[target]
    except KeyError:
        raise ValueError(f"unknown target: {target!r}") from None
    return cls(screen)