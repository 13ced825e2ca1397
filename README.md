# fujiconfig

A model of a FujiNet configuration application: a character-cell text screen
with Apple II style border lines, inverse text and windows; preferences kept
as a ten-byte app-key record; per-platform host hooks; and a runner that moves
the application from one module to the next.

## Installing

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Commands

    fujiconfig [--target {apple2,apple2enh,atari,atarixl}]

Starts the module runner (the target defaults to `atari`). The init module
loads preferences, writing defaults when none are stored, sets up the host and
moves to the legacy hosts-and-devices module. That module prints
`mod_legacy_hosts_devices`, asks the host to prepare its display, and then
waits until exit is requested; from the command line, stop it with Ctrl-C.

    fujiconfig-mock [--lowercase]

Draws a static mock-up of the "Disk Images" selection screen and prints it as
text. `--lowercase` uses the lowercase/MouseText character set for borders and
inverse text.

## Library use

### Screen drawing (`fujiconfig.screen`)

`Screen(width=40, height=24, lower=False)` holds one byte per cell and offers
`clrscr`, `gotoxy`, `revers`, `cputc`, `cputs`, `cputcxy`, `cputsxy`,
`char_at`, `row` and `render`. Positions off the screen raise `ValueError`.
Reverse mode flips the high bit of each code written.

    from fujiconfig.screen import Screen, LineType, hlinexy, draw_window

    screen = Screen()
    hlinexy(screen, 1, 0, 38, LineType.TOP)
    draw_window(screen, 6, 6, 28, 13, "Select Device Slot")
    print(screen.render())

`hlinexy`, `vlinexy` and `iputsxy` draw horizontal borders, vertical borders
and inverse text; the characters used depend on the screen's `lower` setting.
`draw_window` draws a bordered window with a centred title (shown only when it
fits) and a blanked interior; windows smaller than 2x2 raise `ValueError`.

### Preferences (`fujiconfig.preferences`)

    from fujiconfig.preferences import MemoryAppKeyStore, PreferencesManager

    store = MemoryAppKeyStore()
    manager = PreferencesManager(store)
    manager.read_prefs()          # writes defaults if no key is stored yet
    print(manager.prefs.brightness)

`Prefs.to_bytes()` and `Prefs.from_bytes()` convert preferences to and from
the ten-byte record kept in the app key; the first byte is the record's
version. `read_prefs` loads a version 0 record and writes defaults when the
key is missing or its version is unknown. `MemoryAppKeyStore` refuses keys
longer than 64 bytes and raises `RuntimeError` if used before
`set_appkey_details`.

### Hosts and runner

`host_for_target(target, screen)` returns an `Apple2Host` or `AtariHost` for
the targets listed above and raises `ValueError` for others. `Runner` in
`fujiconfig.runner` calls one `Module` after another until it reaches
`Module.EXIT`, then calls the host's `cleanup`; setting
`runner.exit_requested` lets the hosts-and-devices module finish.

## What this package does not do

- It does not talk to a FujiNet device. Preferences live only in
  `MemoryAppKeyStore` and are lost when the process ends.
- Only the init and legacy hosts-and-devices modules exist. `Runner.run`
  raises `LookupError` if it reaches any other module (hosts, devices, wifi,
  info, files, boot).
- The hosts-and-devices module draws nothing of its own and takes no input;
  there is no interactive screen.