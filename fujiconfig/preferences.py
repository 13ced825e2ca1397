"""Application preferences persisted as a FujiNet app key."""

from __future__ import annotations

from dataclasses import astuple, dataclass, fields
from enum import IntEnum
from typing import Callable, ClassVar, Dict, Optional, Tuple

CREATOR_ID = 0xFE0C
APP_ID = 0x02
KEY_ID = 0x01
MAX_KEY_SIZE = 64
KEYS_BUFFER_SIZE = MAX_KEY_SIZE + 2
CURRENT_VERSION = 0


class AppKeyMode(IntEnum):
    """Access mode for app keys."""

    DEFAULT = 0


@dataclass
class Prefs:
    """Stored preferences; the first byte is the layout version."""

    version: int = 0
    colour: int = 0
    brightness: int = 0x0D
    shade: int = 0
    bar_conn: int = 0xB4
    bar_disconn: int = 0x33
    bar_copy: int = 0x66
    anim_delay: int = 0x04
    date_format: int = 0x00
    use_banks: int = 0x01

    SIZE: ClassVar[int] = 10

    @classmethod
    def defaults(cls) -> "Prefs":
        return cls()

    def to_bytes(self) -> bytes:
        """Pack the fields one byte each; values must fit in a byte."""
        return bytes(astuple(self))

    @classmethod
    def from_bytes(cls, data: bytes) -> "Prefs":
        if len(data) < cls.SIZE:
            raise ValueError(f"need {cls.SIZE} bytes of preferences, got {len(data)}")
        return cls(*data[: cls.SIZE])


assert len(fields(Prefs)) == Prefs.SIZE

# Migrations keyed by the version they upgrade from; version 0 is the base.
_MIGRATIONS: Dict[int, Callable[[Prefs], Prefs]] = {}


class MemoryAppKeyStore:
    """An app-key store kept in memory, keyed by creator, app and key id."""

    def __init__(self, keys: Optional[Dict[Tuple[int, int, int], bytes]] = None) -> None:
        self.keys: Dict[Tuple[int, int, int], bytes] = dict(keys or {})
        self.creator_id: Optional[int] = None
        self.app_id: Optional[int] = None
        self.mode: Optional[AppKeyMode] = None

    def set_appkey_details(self, creator_id: int, app_id: int, mode: AppKeyMode) -> None:
        self.creator_id = creator_id
        self.app_id = app_id
        self.mode = AppKeyMode(mode)

    def _slot(self, key_id: int) -> Tuple[int, int, int]:
        if self.creator_id is None or self.app_id is None:
            raise RuntimeError("app key details have not been set")
        return (self.creator_id, self.app_id, key_id)

    def read_appkey(self, key_id: int) -> Optional[bytes]:
        """Return the stored key, or None if there is none."""
        return self.keys.get(self._slot(key_id))

    def write_appkey(self, key_id: int, data: bytes) -> None:
        data = bytes(data)
        if len(data) > MAX_KEY_SIZE:
            raise ValueError(f"app key data is {len(data)} bytes, limit is {MAX_KEY_SIZE}")
        self.keys[self._slot(key_id)] = data


class PreferencesManager:
    """Loads and saves :class:`Prefs` through an app-key store."""

    def __init__(self, store: MemoryAppKeyStore, prefs: Optional[Prefs] = None) -> None:
        self.store = store
        self.prefs = prefs if prefs is not None else Prefs.defaults()

    def set_appkey_details(self) -> None:
        self.store.set_appkey_details(CREATOR_ID, APP_ID, AppKeyMode.DEFAULT)

    def read_appkeys(self) -> Optional[bytes]:
        self.set_appkey_details()
        return self.store.read_appkey(KEY_ID)

    def write_prefs(self) -> None:
        self.set_appkey_details()
        self.store.write_appkey(KEY_ID, self.prefs.to_bytes())

    def write_defaults(self) -> None:
        self.prefs = Prefs.defaults()
        self.write_prefs()

    def upgrade(self, from_version: int) -> Prefs:
        """Apply each migration from ``from_version`` up to the current layout."""
        for version in range(from_version, CURRENT_VERSION):
            migrate = _MIGRATIONS.get(version)
            if migrate is not None:
                self.prefs = migrate(self.prefs)
        return self.prefs

    def read_prefs(self) -> Prefs:
        """Load stored preferences, writing defaults if none or unknown."""
        data = self.read_appkeys()
        if data is None:
            self.write_defaults()
            return self.prefs
        buffer = bytes(data[:KEYS_BUFFER_SIZE]).ljust(KEYS_BUFFER_SIZE, b"\0")
        if buffer[0] == 0:
            self.prefs = Prefs.from_bytes(buffer)
        else:
            self.write_defaults()
        return self.prefs