"""
Balancing suggestions.

Given how far a team sits below the league average, look for one asset, or
failing that a pair, whose value lands inside a tolerance window around the
shortfall. This is a bounded heuristic search, not an optimizer: the first
acceptable answer wins.

Search order:
    1. Single asset inside the window (pool order)
    2. Pair inside the window, second asset within PAIR_WINDOW of the first
    3. Closest single asset to the need
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence

from dynasty.core.enums import AssetKind, BalanceStatus, RoundKey, SuggestionPreference
from dynasty.core.market.catalog import MarketCatalog
from dynasty.core.numeric import clamp
from dynasty.core.settings import LeagueSettings


# Pair search looks at most this many entries ahead of the first asset
PAIR_WINDOW = 80

MIN_TOLERANCE = 0.01
MAX_TOLERANCE = 0.5
DEFAULT_TOLERANCE = 0.10

# Deltas this close to zero count as balanced
EVEN_THRESHOLD = 1


@dataclass(frozen=True)
class PoolEntry:
    """An asset that could be added to a side of the trade."""

    key: str
    kind: AssetKind
    name: str
    value: int

    def to_dict(self) -> dict:
        return {"key": self.key, "kind": self.kind.value, "name": self.name, "value": self.value}


def clamp_tolerance(raw: Optional[float]) -> float:
    if not raw:
        return DEFAULT_TOLERANCE
    return clamp(raw, MIN_TOLERANCE, MAX_TOLERANCE)


def build_pool(
    settings: LeagueSettings,
    catalog: MarketCatalog,
    curve: dict[RoundKey, int],
    year: int,
) -> list[PoolEntry]:
    """Demo players at market value plus one pick per round for the given year."""
    players = [
        PoolEntry(
            key=f"P|{entry.name}",
            kind=AssetKind.PLAYER,
            name=entry.name,
            value=int(entry.market.for_league(settings.superflex)),
        )
        for entry in catalog.demo_players.entries
    ]
    picks = [
        PoolEntry(
            key=f"K|{year}|{key.value}",
            kind=AssetKind.PICK,
            name=f"{year} {key.value}",
            value=value,
        )
        for key, value in curve.items()
    ]
    return players + picks


def order_pool(pool: Sequence[PoolEntry], preference: SuggestionPreference) -> list[PoolEntry]:
    """Sort ascending by value, then move the preferred kind to the front."""
    ordered = sorted(pool, key=lambda e: e.value)
    if preference == SuggestionPreference.PLAYERS:
        first = AssetKind.PLAYER
    elif preference == SuggestionPreference.PICKS:
        first = AssetKind.PICK
    else:
        return ordered
    return [e for e in ordered if e.kind == first] + [e for e in ordered if e.kind != first]


def suggest(
    deficit: float,
    pool: Sequence[PoolEntry],
    preference: SuggestionPreference = SuggestionPreference.ANY,
    tolerance: float = DEFAULT_TOLERANCE,
) -> list[PoolEntry]:
    """
    One or two pool entries that close a value gap.

    Returns an empty list only when the pool is empty.
    """
    ordered = order_pool(pool, preference)
    if not ordered:
        return []

    tolerance = clamp_tolerance(tolerance)
    need = abs(deficit)
    low, high = need * (1 - tolerance), need * (1 + tolerance)

    for entry in ordered:
        if low <= entry.value <= high:
            return [entry]

    n = len(ordered)
    for i in range(n):
        for j in range(i, min(n, i + PAIR_WINDOW)):
            total = ordered[i].value + ordered[j].value
            if low <= total <= high:
                return [ordered[i], ordered[j]]

    best = ordered[0]
    for entry in ordered:
        if abs(entry.value - need) < abs(best.value - need):
            best = entry
    return [best]


@dataclass
class BalanceAdvice:
    """What a team should do to get back to the league average."""

    status: BalanceStatus
    delta: int
    suggestions: list[PoolEntry] = field(default_factory=list)

    @property
    def need(self) -> int:
        return abs(self.delta) if self.status == BalanceStatus.DEFICIT else 0

    @property
    def message(self) -> str:
        if self.status == BalanceStatus.EVEN:
            return "already even"
        if self.status == BalanceStatus.SURPLUS:
            return "surplus, consider trimming a depth piece"
        return f"needs ~{self.need:,}"

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "delta": self.delta,
            "need": self.need,
            "message": self.message,
            "suggestions": [s.to_dict() for s in self.suggestions],
        }


def advise(
    delta: int,
    pool: Sequence[PoolEntry],
    preference: SuggestionPreference = SuggestionPreference.ANY,
    tolerance: float = DEFAULT_TOLERANCE,
) -> BalanceAdvice:
    """Classify a team's delta and, for deficits only, suggest additions."""
    if abs(delta) <= EVEN_THRESHOLD:
        return BalanceAdvice(status=BalanceStatus.EVEN, delta=delta)
    if delta > 0:
        return BalanceAdvice(status=BalanceStatus.SURPLUS, delta=delta)
    return BalanceAdvice(
        status=BalanceStatus.DEFICIT,
        delta=delta,
        suggestions=suggest(delta, pool, preference, tolerance),
    )
