"""Module runner: the application is a chain of screens, each picking the next."""

from __future__ import annotations

import argparse
import sys
import threading
from enum import IntEnum
from typing import Callable, Dict, Optional, Sequence, TextIO

from fujiconfig.host import TARGETS, Host, host_for_target
from fujiconfig.preferences import MemoryAppKeyStore, PreferencesManager
from fujiconfig.screen import Screen


class Module(IntEnum):
    INIT = 0
    LEGACY_HOSTS_DEVICES = 1
    HOSTS = 2
    DEVICES = 3
    WIFI = 4
    INFO = 5
    FILES = 6
    BOOT = 7
    EXIT = 8


class Runner:
    """Runs the current module until one of them selects EXIT."""

    def __init__(self, host: Host, prefs: PreferencesManager,
                 out: Optional[TextIO] = None) -> None:
        self.host = host
        self.prefs = prefs
        self.out = out if out is not None else sys.stdout
        self.mod_current = Module.INIT
        self.exit_requested = threading.Event()

    def run_module(self) -> None:
        """Run the current module; modules without an implementation are ignored."""
        fn = _MODULES.get(self.mod_current)
        if fn is not None:
            fn(self)

    def run(self) -> None:
        while self.mod_current != Module.EXIT:
            if self.mod_current not in _MODULES:
                raise LookupError(f"no implementation for module {self.mod_current.name}")
            self.run_module()
        self.host.cleanup()


def mod_init(runner: Runner) -> None:
    """Load preferences, set up the host, then move to the next screen."""
    runner.prefs.read_prefs()
    runner.host.init()
    runner.mod_current = Module.LEGACY_HOSTS_DEVICES


def mod_legacy_hosts_devices(runner: Runner) -> None:
    """Show the combined hosts/devices screen and stay there until exit is asked."""
    print("mod_legacy_hosts_devices", file=runner.out)
    runner.host.display_legacy_hosts_devices()
    runner.exit_requested.wait()
    runner.mod_current = Module.EXIT


_MODULES: Dict[Module, Callable[[Runner], None]] = {
    Module.INIT: mod_init,
    Module.LEGACY_HOSTS_DEVICES: mod_legacy_hosts_devices,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="fujiconfig", description="FujiNet configuration")
    parser.add_argument("--target", choices=sorted(TARGETS), default="atari")
    args = parser.parse_args(argv)
    host = host_for_target(args.target, Screen())
    runner = Runner(host, PreferencesManager(MemoryAppKeyStore()))
    try:
        runner.run()
    except KeyboardInterrupt:
        host.cleanup()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())