"""
Snapshot persistence for session configuration.

League settings, the value source and the blend weight are saved after every
change and restored at start-up. Storage is a plain key-value store holding
JSON strings. Persistence is best-effort in both directions:

- a failed save is logged and forgotten
- a missing or corrupt key on load is skipped, leaving that part at defaults

Team rosters are never persisted.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Protocol

from dynasty.core.enums import ValueSource
from dynasty.core.numeric import parse_float
from dynasty.core.settings import LeagueSettings, ValueSourceConfig

logger = logging.getLogger(__name__)


SETTINGS_KEY = "dtc_settings"
VALUE_SOURCE_KEY = "dtc_value_source"
BLEND_WEIGHT_KEY = "dtc_blend_weight"


class KeyValueStore(Protocol):
    """Opaque string storage."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    """In-process store, used for tests and when file persistence is off."""

    def __init__(self, data: Optional[dict[str, str]] = None) -> None:
        self.data: dict[str, str] = dict(data or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonFileStore:
    """Key-value store backed by a single JSON object on disk."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Snapshot file {self.path} is not a JSON object")
        return data

    def get(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        try:
            data = self._read()
        except (OSError, ValueError):
            data = {}
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        os.replace(tmp, self.path)


@dataclass
class CalculatorState:
    """The persisted part of a calculator session."""

    settings: LeagueSettings = field(default_factory=LeagueSettings)
    value_source: ValueSourceConfig = field(default_factory=ValueSourceConfig)


class SnapshotStore:
    """save(state) / load() -> state or None, over a key-value store."""

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    def save(self, state: CalculatorState) -> bool:
        """Write all keys. Returns False (and logs) when storage fails."""
        try:
            self.store.set(SETTINGS_KEY, json.dumps(state.settings.to_dict()))
            self.store.set(VALUE_SOURCE_KEY, json.dumps(state.value_source.source.value))
            self.store.set(BLEND_WEIGHT_KEY, json.dumps(state.value_source.blend_weight))
        except Exception as e:
            logger.warning(f"Snapshot save failed (non-fatal): {e}")
            return False
        return True

    def load(self) -> Optional[CalculatorState]:
        """
        Restore the last snapshot.

        Returns None when nothing usable is stored. Each key is applied on
        its own, so one corrupt key only resets that part to defaults.
        """
        state = CalculatorState()
        applied = False

        settings_data = self._read_json(SETTINGS_KEY)
        if settings_data is not None:
            try:
                state.settings = LeagueSettings.from_dict(settings_data)
                applied = True
            except (TypeError, ValueError) as e:
                logger.warning(f"Ignoring stored settings: {e}")

        source_data = self._read_json(VALUE_SOURCE_KEY)
        if source_data is not None:
            try:
                state.value_source.source = ValueSource(source_data)
                applied = True
            except ValueError as e:
                logger.warning(f"Ignoring stored value source: {e}")

        weight_data = self._read_json(BLEND_WEIGHT_KEY)
        weight = parse_float(weight_data, None)
        if weight is not None:
            state.value_source.blend_weight = weight
            applied = True

        return state if applied else None

    def _read_json(self, key: str):
        try:
            raw = self.store.get(key)
            if raw is None:
                return None
            return json.loads(raw)
        except Exception as e:
            logger.warning(f"Ignoring unreadable snapshot key {key}: {e}")
            return None


def open_snapshot_store(path: Optional[str]) -> SnapshotStore:
    """File-backed store for a path, in-memory when the path is empty."""
    if not path:
        return SnapshotStore(MemoryStore())
    return SnapshotStore(JsonFileStore(Path(path).expanduser()))
