"""
Persistence module for the tracker.

Every piece of state is stored under its own key and loaded and saved
independently. Loading never fails: a missing, unreadable or corrupt key falls
back to its default. Saving never raises: a failure is logged and the
in-memory state stays authoritative.
"""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any, Protocol, TypeVar

from catchery import log_debug, log_error, log_warning
from pydantic import StrictBool, TypeAdapter, ValidationError

from character.inventory import InventoryItem
from core.constants import Attribute
from core.errors import PersistenceReadError, PersistenceWriteError
from effects.modifier import Modifier
from effects.status_effect import StatusEffect

T = TypeVar("T")

# Persisted keys.
STATS_KEY = "stats"
BUFFS_KEY = "buffs"
STATUSES_KEY = "statuses"
INVENTORY_KEY = "inventory"
MONEY_KEY = "money"
IS_MY_TURN_KEY = "isMyTurn"
# Transient display flag: recognized in stored data but never loaded or written.
TURN_ENDED_KEY = "turnEnded"

PERSISTED_KEYS = (
    STATS_KEY,
    BUFFS_KEY,
    STATUSES_KEY,
    INVENTORY_KEY,
    MONEY_KEY,
    IS_MY_TURN_KEY,
)

_STATS = TypeAdapter(dict[Attribute, int])
_BUFFS = TypeAdapter(list[Modifier])
_STATUSES = TypeAdapter(list[StatusEffect])
_INVENTORY = TypeAdapter(list[InventoryItem])
_MONEY = TypeAdapter(int)
_FLAG = TypeAdapter(StrictBool)


class StorageBackend(Protocol):
    """The storage medium: raw strings stored under string keys."""

    def read(self, key: str) -> str | None:
        """
        Returns the raw value stored under `key`, or None if there is none.

        Raises:
            PersistenceReadError: If the medium cannot be read.

        """
        ...

    def write(self, key: str, raw: str) -> None:
        """
        Stores a raw value under `key`.

        Raises:
            PersistenceWriteError: If the medium cannot be written.

        """
        ...


class MemoryStorage:
    """Keeps the keys in a dictionary. Nothing survives the process."""

    def __init__(self, data: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(data or {})

    def read(self, key: str) -> str | None:
        return self.data.get(key)

    def write(self, key: str, raw: str) -> None:
        self.data[key] = raw


class JsonFileStorage:
    """
    Stores each key as `<key>.json` inside a directory.

    Attributes:
        directory (Path):
            The folder holding the key files. It is created on first write.

    """

    def __init__(self, directory: Path | str) -> None:
        self.directory = Path(directory)

    def path_for(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def read(self, key: str) -> str | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceReadError(key, f"Cannot read {path}: {e}") from e

    def write(self, key: str, raw: str) -> None:
        path = self.path_for(key)
        tmp_path = path.with_suffix(".json.tmp")
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                f.write(raw)
            tmp_path.replace(path)
        except OSError as e:
            raise PersistenceWriteError(key, f"Cannot write {path}: {e}") from e


class PersistenceAdapter:
    """
    Loads and saves the tracker state key by key on top of a storage backend.
    """

    def __init__(self, backend: StorageBackend) -> None:
        self.backend = backend

    # ============================================================================
    # GENERIC ACCESS
    # ============================================================================

    def load(
        self,
        key: str,
        parse: Callable[[Any], T],
        default: Callable[[], T],
    ) -> T:
        """
        Loads one key, falling back to its default on any failure.

        Args:
            key (str):
                The key to load.
            parse (Callable[[Any], T]):
                Converts the decoded JSON value; raises ValueError (or a
                pydantic ValidationError) when the value is malformed.
            default (Callable[[], T]):
                Builds the default value.

        Returns:
            T:
                The stored value, or the default.

        """
        try:
            raw = self.backend.read(key)
        except PersistenceReadError as e:
            log_warning(f"Could not read stored state: {e}", {"key": key})
            return default()
        if raw is None:
            log_debug("No stored state, using default", {"key": key})
            return default()
        try:
            return parse(json.loads(raw))
        except (ValueError, ValidationError) as e:
            log_warning(
                f"Discarding corrupt stored state: {e.__class__.__name__}",
                {"key": key},
            )
            return default()

    def save(self, key: str, value: Any) -> bool:
        """
        Saves one key. Failures are logged and reported through the result.

        Returns:
            bool: True on success, False otherwise.

        """
        try:
            raw = json.dumps(value)
            self.backend.write(key, raw)
        except (PersistenceWriteError, TypeError, ValueError) as e:
            log_error(f"Could not save state: {e}", {"key": key})
            return False
        return True

    # ============================================================================
    # TYPED KEYS
    # ============================================================================

    def load_stats(self) -> dict[Attribute, int]:
        return self.load(STATS_KEY, _STATS.validate_python, dict)

    def load_buffs(self) -> list[Modifier]:
        return self.load(BUFFS_KEY, _BUFFS.validate_python, list)

    def load_statuses(self) -> list[StatusEffect]:
        return self.load(STATUSES_KEY, _STATUSES.validate_python, list)

    def load_inventory(self) -> list[InventoryItem]:
        return self.load(INVENTORY_KEY, _INVENTORY.validate_python, list)

    def load_money(self) -> int:
        return self.load(MONEY_KEY, _MONEY.validate_python, int)

    def load_is_my_turn(self) -> bool:
        return self.load(IS_MY_TURN_KEY, _FLAG.validate_python, bool)
