"""
Market value tables.

Two independent markets feed the resolver:

- Demo: a small built-in player table. Demo picks have no table; they are
  priced straight off the pick curve.
- External: player and pick tables imported from CSV.

Every market row carries two columns: value (1QB leagues) and sf_value
(superflex leagues).
"""

import re
from dataclasses import dataclass, field
from typing import Iterable, Optional

from dynasty.core.enums import Position


_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def normalize_name(name: str) -> str:
    """Lower-case, collapse every run of non-alphanumerics to one space, trim."""
    return _NON_ALNUM.sub(" ", str(name or "").lower()).strip()


@dataclass(frozen=True)
class MarketValue:
    """One market row: 1QB and superflex values."""

    value: float = 0.0
    sf_value: float = 0.0

    def for_league(self, superflex: bool) -> float:
        return self.sf_value if superflex else self.value

    def to_dict(self) -> dict:
        return {"value": self.value, "sf_value": self.sf_value}


@dataclass
class PlayerEntry:
    """A named player row in a market table."""

    name: str
    position: str
    market: MarketValue
    age: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "position": self.position,
            "age": self.age,
            **self.market.to_dict(),
        }


class PlayerMarket:
    """Player values keyed by (normalized name, position)."""

    def __init__(self, entries: Iterable[PlayerEntry] = ()) -> None:
        self._entries: list[PlayerEntry] = []
        self._index: dict[tuple[str, str], PlayerEntry] = {}
        for entry in entries:
            self._entries.append(entry)
            # First row wins when a file lists the same player twice
            self._index.setdefault(self._key(entry.name, entry.position), entry)

    @staticmethod
    def _key(name: str, position: object) -> tuple[str, str]:
        if isinstance(position, Position):
            position = position.value
        return normalize_name(name), str(position or "").strip().upper()

    def lookup(self, name: str, position: object) -> Optional[MarketValue]:
        entry = self._index.get(self._key(name, position))
        return entry.market if entry else None

    def value_for(self, name: str, position: object, superflex: bool) -> float:
        """Market value for the league type; 0 when the player is unknown."""
        market = self.lookup(name, position)
        return market.for_league(superflex) if market else 0.0

    @property
    def entries(self) -> list[PlayerEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


@dataclass
class PickYearTable:
    """
    Pick values for one draft year.

    slots holds exact slot rows ("1.07"); rounds holds per-round averages
    keyed by the round part of the slot ("1").
    """

    slots: dict[str, MarketValue] = field(default_factory=dict)
    rounds: dict[str, MarketValue] = field(default_factory=dict)

    def lookup(self, slot: str) -> Optional[MarketValue]:
        """Exact slot first, then the round average."""
        slot = str(slot or "").strip()
        if slot in self.slots:
            return self.slots[slot]
        return self.rounds.get(slot.split(".")[0].strip())

    def to_dict(self) -> dict:
        return {
            "slots": {k: v.to_dict() for k, v in self.slots.items()},
            "rounds": {k: v.to_dict() for k, v in self.rounds.items()},
        }


@dataclass
class PickMarket:
    """Imported pick tables by draft year."""

    years: dict[int, PickYearTable] = field(default_factory=dict)

    def value_for(self, year: int, slot: str, superflex: bool) -> float:
        table = self.years.get(year)
        if table is None:
            return 0.0
        market = table.lookup(slot)
        return market.for_league(superflex) if market else 0.0

    def with_year(self, year: int, table: PickYearTable) -> "PickMarket":
        """New market with one year's table replaced, other years kept."""
        years = dict(self.years)
        years[year] = table
        return PickMarket(years=years)


# Built-in demo market (name, position, age, 1QB value, superflex value)
DEMO_PLAYERS = [
    ("Josh Allen", "QB", 29, 850, 1100),
    ("Patrick Mahomes", "QB", 30, 840, 1080),
    ("C.J. Stroud", "QB", 23, 820, 1060),
    ("Jalen Hurts", "QB", 27, 800, 1040),
    ("Anthony Richardson", "QB", 22, 710, 980),
    ("Bijan Robinson", "RB", 22, 820, 820),
    ("Breece Hall", "RB", 24, 800, 800),
    ("Jahmyr Gibbs", "RB", 22, 740, 740),
    ("Christian McCaffrey", "RB", 29, 670, 670),
    ("Justin Jefferson", "WR", 25, 980, 980),
    ("Ja'Marr Chase", "WR", 25, 960, 960),
    ("Amon-Ra St. Brown", "WR", 25, 820, 820),
    ("Puka Nacua", "WR", 23, 760, 760),
    ("CeeDee Lamb", "WR", 25, 900, 900),
    ("Marvin Harrison Jr.", "WR", 22, 820, 820),
    ("Sam LaPorta", "TE", 23, 520, 520),
    ("Travis Kelce", "TE", 35, 260, 260),
]


def demo_player_market() -> PlayerMarket:
    return PlayerMarket(
        PlayerEntry(name=name, position=pos, age=age, market=MarketValue(one_qb, sf))
        for name, pos, age, one_qb, sf in DEMO_PLAYERS
    )


@dataclass
class MarketCatalog:
    """
    All market tables visible to the resolver.

    Imports never mutate a table in place: a fully parsed table is swapped in,
    so readers see either the old table or the new one.
    """

    demo_players: PlayerMarket = field(default_factory=demo_player_market)
    external_players: PlayerMarket = field(default_factory=PlayerMarket)
    external_picks: PickMarket = field(default_factory=PickMarket)

    def replace_external_players(self, entries: Iterable[PlayerEntry]) -> int:
        self.external_players = PlayerMarket(entries)
        return len(self.external_players)

    def merge_external_picks(self, year: int, table: PickYearTable) -> None:
        self.external_picks = self.external_picks.with_year(year, table)

    def summary(self) -> dict:
        return {
            "demo_players": len(self.demo_players),
            "external_players": len(self.external_players),
            "external_pick_years": sorted(self.external_picks.years),
        }
