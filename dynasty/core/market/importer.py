"""
CSV import for external market tables.

Turns uploaded comma-separated text into typed rows:

- Players: Name/Player, Position, Age, Value, SF Value
- Picks:   Round (slot like "1.07"), Value, SF Value

Header matching is case-insensitive. Rows that miss required fields are
dropped; numeric cells that fail to parse fall back to defaults. A file that
cannot be read as a table at all raises MarketImportError and nothing is
committed.
"""

import csv
import io
import logging
from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dynasty.core.market.catalog import MarketValue, PickYearTable, PlayerEntry
from dynasty.core.numeric import parse_float, parse_int, parse_nonzero_float, round_half_up

logger = logging.getLogger(__name__)


NAME_HEADERS = ("name", "player")
SF_VALUE_HEADERS = ("sf value", "sf_value")


class MarketImportError(ValueError):
    """The uploaded file could not be parsed into a market table."""


@dataclass
class PlayerRow:
    """A validated player row from an import."""

    name: str
    position: str
    value: float = 0.0
    sf_value: float = 0.0
    age: Optional[int] = None

    def to_entry(self) -> PlayerEntry:
        return PlayerEntry(
            name=self.name,
            position=self.position,
            age=self.age,
            market=MarketValue(self.value, self.sf_value),
        )


@dataclass
class PickRow:
    """A validated pick row from an import."""

    slot: str
    value: float = 0.0
    sf_value: float = 0.0

    @property
    def round_part(self) -> str:
        return self.slot.split(".")[0].strip()


def read_import_file(path: Union[str, Path]) -> str:
    """Read an import file as UTF-8 text. Unreadable files raise MarketImportError."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MarketImportError(f"Could not read {path}: {e}") from e


def parse_csv(text: str) -> tuple[list[str], list[dict[str, str]]]:
    """
    Parse CSV text into (headers, rows).

    Headers are lower-cased and trimmed. Blank lines are skipped. Short rows
    leave trailing columns empty.
    """
    if text is None or not str(text).strip():
        raise MarketImportError("File is empty")

    try:
        reader = csv.reader(io.StringIO(str(text)))
        lines = [row for row in reader if any(cell.strip() for cell in row)]
    except csv.Error as e:
        raise MarketImportError(f"Malformed CSV: {e}") from e

    if not lines:
        raise MarketImportError("File is empty")

    headers = [h.strip().lower() for h in lines[0]]
    rows = []
    for line in lines[1:]:
        cells = [c.strip() for c in line]
        rows.append({h: (cells[i] if i < len(cells) else "") for i, h in enumerate(headers)})
    return headers, rows


def _first(row: dict[str, str], keys: tuple[str, ...]) -> str:
    for key in keys:
        if row.get(key):
            return row[key]
    return ""


def _first_number(row: dict[str, str], keys: tuple[str, ...], default: float) -> float:
    """First column among keys that parses to a non-zero number."""
    for key in keys:
        value = parse_nonzero_float(row.get(key), 0.0)
        if value:
            return value
    return default


def _require(headers: list[str], options: tuple[str, ...], label: str) -> None:
    if not any(h in headers for h in options):
        raise MarketImportError(f"Missing required column: {label}")


def import_players(text: str) -> list[PlayerRow]:
    """Parse a players CSV. Raises MarketImportError for unusable files."""
    headers, raw_rows = parse_csv(text)
    _require(headers, NAME_HEADERS, "Name/Player")
    _require(headers, ("position",), "Position")

    rows = []
    for raw in raw_rows:
        name = _first(raw, NAME_HEADERS)
        position = raw.get("position", "").upper()
        if not name or not position:
            continue
        rows.append(
            PlayerRow(
                name=name,
                position=position,
                value=parse_float(raw.get("value"), 0.0),
                sf_value=_first_number(raw, SF_VALUE_HEADERS, 0.0),
                age=parse_int(raw.get("age"), None),
            )
        )

    dropped = len(raw_rows) - len(rows)
    if dropped:
        logger.debug(f"Dropped {dropped} player rows missing name or position")
    return rows


def import_pick_rows(text: str) -> list[PickRow]:
    """Parse a picks CSV into rows. SF Value defaults to Value when absent."""
    headers, raw_rows = parse_csv(text)
    _require(headers, ("round",), "Round")

    rows = []
    for raw in raw_rows:
        slot = raw.get("round", "").strip()
        if not slot:
            continue
        value = parse_float(raw.get("value"), 0.0)
        rows.append(
            PickRow(
                slot=slot,
                value=value,
                sf_value=_first_number(raw, SF_VALUE_HEADERS, value),
            )
        )
    return rows


def aggregate_picks(rows: list[PickRow]) -> PickYearTable:
    """
    Build slot and round tables.

    Later rows for the same slot overwrite earlier ones in the slot table,
    but every row contributes to its round's average.
    """
    table = PickYearTable()
    buckets: dict[str, list[PickRow]] = defaultdict(list)
    for row in rows:
        table.slots[row.slot] = MarketValue(row.value, row.sf_value)
        buckets[row.round_part].append(row)

    for round_part, members in buckets.items():
        count = len(members)
        table.rounds[round_part] = MarketValue(
            value=round_half_up(sum(r.value for r in members) / count),
            sf_value=round_half_up(sum(r.sf_value for r in members) / count),
        )
    return table


def import_picks(text: str) -> PickYearTable:
    """Parse a picks CSV straight into a year table."""
    return aggregate_picks(import_pick_rows(text))
