"""
League evaluation.

Runs the whole pipeline for the current board: price every asset, adjust
each team's package, compare against the league average and advise each
team. Nothing is cached; every call recomputes from current state.
"""

import logging
from dataclasses import dataclass, field

from dynasty.core.board import TradeBoard
from dynasty.core.enums import SuggestionPreference
from dynasty.core.market.catalog import MarketCatalog
from dynasty.core.numeric import round_half_up
from dynasty.core.settings import LeagueSettings, ValueSourceConfig
from dynasty.core.valuation import (
    BalanceAdvice,
    ValueResolver,
    advise,
    build_pool,
    clamp_tolerance,
    package_adjust,
    pick_curve,
    second_piece_percent,
)

logger = logging.getLogger(__name__)


@dataclass
class Segment:
    """One asset's raw contribution, for stacked-bar rendering."""

    asset_id: str
    label: str
    value: int

    def to_dict(self) -> dict:
        return {"asset_id": self.asset_id, "label": self.label, "value": self.value}


@dataclass
class TeamResult:
    """Valuation of one team's side of the trade."""

    team_id: str
    name: str
    values: list[int]
    raw_total: int
    adjusted_total: int
    delta: int = 0
    segments: list[Segment] = field(default_factory=list)
    advice: BalanceAdvice = None

    def to_dict(self) -> dict:
        return {
            "team_id": self.team_id,
            "name": self.name,
            "values": self.values,
            "raw_total": self.raw_total,
            "adjusted_total": self.adjusted_total,
            "delta": self.delta,
            "segments": [s.to_dict() for s in self.segments],
            "advice": self.advice.to_dict() if self.advice else None,
        }


@dataclass
class LeagueEvaluation:
    """Totals and advice for every team on the board."""

    teams: list[TeamResult]
    grand_adjusted: int
    average_adjusted: int
    decay: float
    second_piece_percent: int
    adjustment_enabled: bool

    def get(self, team_id: str) -> TeamResult:
        for result in self.teams:
            if result.team_id == team_id:
                return result
        raise LookupError(f"Team {team_id} not found")

    def to_dict(self) -> dict:
        return {
            "teams": [t.to_dict() for t in self.teams],
            "grand_adjusted": self.grand_adjusted,
            "average_adjusted": self.average_adjusted,
            "decay": self.decay,
            "second_piece_percent": self.second_piece_percent,
            "adjustment_enabled": self.adjustment_enabled,
        }


def chart_segments(assets, values: list[int]) -> list[Segment]:
    """Per-asset segments, largest first. Negative values render as 0."""
    segments = [
        Segment(asset_id=asset.id, label=asset.label, value=max(0, value))
        for asset, value in zip(assets, values)
    ]
    return sorted(segments, key=lambda s: s.value, reverse=True)


def evaluate(
    board: TradeBoard,
    settings: LeagueSettings,
    catalog: MarketCatalog,
    source: ValueSourceConfig,
    resolver: ValueResolver,
    preference: SuggestionPreference = SuggestionPreference.ANY,
    tolerance: float = 0.10,
) -> LeagueEvaluation:
    """Value every team and advise each against the league average."""
    results = []
    for team in board.teams:
        values = [resolver.resolve(asset, settings, catalog, source) for asset in team.assets]
        results.append(
            TeamResult(
                team_id=team.id,
                name=team.name,
                values=values,
                raw_total=sum(values),
                adjusted_total=package_adjust(values, settings.ktc_decay, settings.ktc_adjustment),
                segments=chart_segments(team.assets, values),
            )
        )

    grand = sum(r.adjusted_total for r in results)
    average = round_half_up(grand / len(results)) if results else 0

    curve = pick_curve(settings.superflex, settings.te_premium)
    pool = build_pool(settings, catalog, curve, resolver.current_year + 1)
    tolerance = clamp_tolerance(tolerance)
    for result in results:
        result.delta = result.adjusted_total - average
        result.advice = advise(result.delta, pool, preference, tolerance)

    logger.debug(
        f"Evaluated {len(results)} teams: grand={grand} avg={average} "
        f"source={source.source.value} decay={settings.ktc_decay:.2f}"
    )

    return LeagueEvaluation(
        teams=results,
        grand_adjusted=grand,
        average_adjusted=average,
        decay=settings.ktc_decay,
        second_piece_percent=second_piece_percent(settings.ktc_decay),
        adjustment_enabled=settings.ktc_adjustment,
    )
