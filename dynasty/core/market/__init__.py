"""Market value tables and CSV import."""

from dynasty.core.market.catalog import (
    DEMO_PLAYERS,
    MarketCatalog,
    MarketValue,
    PickMarket,
    PickYearTable,
    PlayerEntry,
    PlayerMarket,
    demo_player_market,
    normalize_name,
)
from dynasty.core.market.importer import (
    MarketImportError,
    PickRow,
    PlayerRow,
    aggregate_picks,
    import_pick_rows,
    import_picks,
    import_players,
    parse_csv,
    read_import_file,
)

__all__ = [
    "DEMO_PLAYERS",
    "MarketCatalog",
    "MarketImportError",
    "MarketValue",
    "PickMarket",
    "PickRow",
    "PickYearTable",
    "PlayerEntry",
    "PlayerMarket",
    "PlayerRow",
    "aggregate_picks",
    "demo_player_market",
    "import_pick_rows",
    "import_picks",
    "import_players",
    "normalize_name",
    "parse_csv",
    "read_import_file",
]
