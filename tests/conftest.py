"""Shared pytest fixtures for dynasty tests."""

import pytest

from dynasty.core.board import TradeBoard
from dynasty.core.enums import ValueSource
from dynasty.core.market.catalog import MarketCatalog, MarketValue, PickYearTable, PlayerEntry
from dynasty.core.settings import LeagueSettings, ValueSourceConfig
from dynasty.core.valuation import ValueResolver


CURRENT_YEAR = 2025


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def superflex_settings() -> LeagueSettings:
    """Superflex league, no TE premium, package adjustment on."""
    return LeagueSettings(superflex=True, te_premium=False)


@pytest.fixture
def one_qb_settings() -> LeagueSettings:
    """1QB league, no TE premium."""
    return LeagueSettings(superflex=False, te_premium=False)


@pytest.fixture
def demo_source() -> ValueSourceConfig:
    return ValueSourceConfig(source=ValueSource.DEMO)


@pytest.fixture
def current_year() -> int:
    return CURRENT_YEAR


@pytest.fixture
def resolver() -> ValueResolver:
    """Resolver pinned to a fixed year so discounts are stable."""
    return ValueResolver(current_year=CURRENT_YEAR)


# =============================================================================
# Market Fixtures
# =============================================================================

@pytest.fixture
def catalog() -> MarketCatalog:
    """Demo market only."""
    return MarketCatalog()


@pytest.fixture
def imported_catalog() -> MarketCatalog:
    """Demo market plus a small external player and pick import."""
    catalog = MarketCatalog()
    catalog.replace_external_players([
        PlayerEntry(name="Josh Allen", position="QB", market=MarketValue(900, 1300)),
        PlayerEntry(name="Justin Jefferson", position="WR", market=MarketValue(1000, 1000)),
        PlayerEntry(name="Rome Odunze", position="WR", market=MarketValue(450, 450)),
    ])
    catalog.merge_external_picks(
        CURRENT_YEAR + 1,
        PickYearTable(
            slots={"1.01": MarketValue(900, 1200), "1.02": MarketValue(700, 1000)},
            rounds={"1": MarketValue(800, 1100), "2": MarketValue(300, 350)},
        ),
    )
    return catalog


# =============================================================================
# Board Fixtures
# =============================================================================

@pytest.fixture
def board() -> TradeBoard:
    """Fresh two-team board."""
    return TradeBoard.new()
