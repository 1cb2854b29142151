"""
Service layer for the trade calculator API.

Holds the single interactive session: league settings, value source, the
trade board and the market catalog. Settings and value source are
snapshotted after every change; the board and catalog live in memory only.
"""

import logging
from typing import Optional

from dynasty.config import get_config
from dynasty.core.assets import Asset
from dynasty.core.board import TradeBoard
from dynasty.core.enums import Position, RoundKey, SuggestionPreference, ValueSource
from dynasty.core.evaluation import LeagueEvaluation, evaluate
from dynasty.core.market.catalog import MarketCatalog
from dynasty.core.market.importer import MarketImportError, import_picks, import_players
from dynasty.core.persistence import CalculatorState, SnapshotStore, open_snapshot_store
from dynasty.core.settings import LeagueSettings, ValueSourceConfig
from dynasty.core.valuation import ValueResolver, pick_curve

logger = logging.getLogger(__name__)


class CalculatorSession:
    """One user's calculator state and the operations on it."""

    def __init__(
        self,
        snapshots: SnapshotStore,
        current_year: Optional[int] = None,
    ) -> None:
        self.snapshots = snapshots
        self.resolver = ValueResolver(current_year)

        restored = snapshots.load()
        state = restored or CalculatorState()
        if restored:
            logger.info("Restored calculator settings from snapshot")
        self.settings: LeagueSettings = state.settings
        self.value_source: ValueSourceConfig = state.value_source

        self.board = TradeBoard.new()
        self.catalog = MarketCatalog()

    @property
    def current_year(self) -> int:
        return self.resolver.current_year

    def _snapshot(self) -> None:
        self.snapshots.save(
            CalculatorState(settings=self.settings, value_source=self.value_source)
        )

    # === Settings ===

    def update_settings(self, patch: dict) -> LeagueSettings:
        self.settings.update(patch)
        self._snapshot()
        return self.settings

    def set_value_source(
        self, source: Optional[ValueSource] = None, blend_weight: Optional[float] = None
    ) -> ValueSourceConfig:
        if source is not None:
            self.value_source.source = source
        if blend_weight is not None:
            self.value_source.blend_weight = blend_weight
        self._snapshot()
        return self.value_source

    def curve(self) -> dict[RoundKey, int]:
        return pick_curve(self.settings.superflex, self.settings.te_premium)

    # === Teams and assets ===

    def add_player(
        self, team_id: str, name: str = "", position: Position = Position.WR, age: Optional[int] = None
    ) -> Asset:
        return self.board.add_player(team_id, name=name, position=position, age=age)

    def add_pick(self, team_id: str, year: Optional[int] = None, slot: str = "1.01") -> Asset:
        return self.board.add_pick(team_id, year=year or self.current_year + 1, slot=slot)

    def asset_value(self, asset: Asset) -> int:
        return self.resolver.resolve(asset, self.settings, self.catalog, self.value_source)

    # === Market imports ===

    def import_players(self, text: str) -> int:
        """
        Replace the external player table.

        Raises MarketImportError for unusable files; the old table stays.
        """
        try:
            rows = import_players(text)
        except MarketImportError as e:
            logger.warning(f"Players import rejected: {e}")
            raise
        count = self.catalog.replace_external_players(row.to_entry() for row in rows)
        logger.info(f"Imported {count} external player values")
        return count

    def import_picks(self, year: int, text: str) -> dict:
        """Replace one year of external pick values. Other years are kept."""
        try:
            table = import_picks(text)
        except MarketImportError as e:
            logger.warning(f"Picks import for {year} rejected: {e}")
            raise
        self.catalog.merge_external_picks(year, table)
        logger.info(f"Imported {len(table.slots)} pick slots for {year}")
        return table.to_dict()

    # === Results ===

    def evaluate(
        self,
        preference: SuggestionPreference = SuggestionPreference.ANY,
        tolerance: float = 0.10,
    ) -> LeagueEvaluation:
        return evaluate(
            self.board,
            self.settings,
            self.catalog,
            self.value_source,
            self.resolver,
            preference=preference,
            tolerance=tolerance,
        )


# Process-wide session, created on first use
_session: Optional[CalculatorSession] = None


def get_session() -> CalculatorSession:
    global _session
    if _session is None:
        config = get_config()
        _session = CalculatorSession(
            snapshots=open_snapshot_store(config.snapshot_path),
            current_year=config.current_year,
        )
    return _session


def reset_session(session: Optional[CalculatorSession] = None) -> Optional[CalculatorSession]:
    """Swap the process session (None forces a fresh one on next use)."""
    global _session
    _session = session
    return _session
