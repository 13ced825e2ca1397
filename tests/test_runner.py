import io

import pytest

from fujiconfig.host import Apple2Host, AtariHost
from fujiconfig.preferences import KEY_ID, MemoryAppKeyStore, Prefs, PreferencesManager
from fujiconfig.runner import Module, Runner, main, mod_init
from fujiconfig.screen import Screen


def _runner(host_cls=AtariHost):
    store = MemoryAppKeyStore()
    out = io.StringIO()
    screen = Screen()
    runner = Runner(host_cls(screen), PreferencesManager(store, Prefs(colour=9)), out)
    return runner, store, screen, out


def test_starts_at_init():
    runner, *_ = _runner()
    assert runner.mod_current is Module.INIT


def test_mod_init_loads_prefs_and_advances():
    runner, store, _, _ = _runner()
    mod_init(runner)
    assert runner.mod_current is Module.LEGACY_HOSTS_DEVICES
    assert runner.prefs.prefs == Prefs.defaults()
    assert store.read_appkey(KEY_ID) == Prefs.defaults().to_bytes()


def test_run_module_ignores_unimplemented():
    runner, *_ = _runner()
    runner.mod_current = Module.WIFI
    runner.run_module()
    assert runner.mod_current is Module.WIFI


def test_run_raises_for_unimplemented():
    runner, *_ = _runner()
    runner.mod_current = Module.BOOT
    with pytest.raises(LookupError):
        runner.run()


def test_full_run_until_exit():
    runner, _, screen, out = _runner(Apple2Host)
    screen.cputsxy(0, 0, "JUNK")
    runner.exit_requested.set()
    runner.run()
    assert runner.mod_current is Module.EXIT
    assert out.getvalue() == "mod_legacy_hosts_devices\n"
    assert screen.row(0) == b" " * screen.width


def test_run_from_exit_runs_no_module():
    runner, store, _, out = _runner()
    runner.mod_current = Module.EXIT
    runner.run()
    assert runner.mod_current is Module.EXIT
    assert Module.EXIT == len(Module) - 1
    assert out.getvalue() == ""
    assert store.keys == {}


def test_main_rejects_unknown_target():
    with pytest.raises(SystemExit):
        main(["--target", "nosuch"])