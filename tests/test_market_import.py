"""Tests for CSV market imports and the market catalog."""

import pytest

from dynasty.core.market.catalog import (
    MarketCatalog,
    MarketValue,
    PickYearTable,
    PlayerMarket,
    PlayerEntry,
    normalize_name,
)
from dynasty.core.market.importer import (
    MarketImportError,
    aggregate_picks,
    import_pick_rows,
    import_picks,
    import_players,
    parse_csv,
)


PLAYERS_CSV = """Player,Team,Position,Age,Value,SF Value
Josh Allen,BUF,qb,29,880,1250
Bijan Robinson,ATL,RB,22,850,
Rome Odunze,CHI,WR,,410,410
,NYJ,WR,24,300,300
Mystery Man,FA,,30,100,100
"""

PICKS_CSV = """Round,Value,SF Value
1.01,900,1200
1.02,800,1100
1.03,700,
2.01,300,320
"""


# =============================================================================
# CSV parsing
# =============================================================================

class TestParseCsv:
    """Low-level CSV reading."""

    def test_headers_lower_cased(self):
        headers, rows = parse_csv(" Name , POSITION\nA,QB\n")
        assert headers == ["name", "position"]
        assert rows == [{"name": "A", "position": "QB"}]

    def test_blank_lines_skipped(self):
        headers, rows = parse_csv("round,value\n\n1.01,10\r\n\n2.01,5\n")
        assert len(rows) == 2

    def test_short_rows_padded(self):
        _, rows = parse_csv("a,b,c\n1\n")
        assert rows == [{"a": "1", "b": "", "c": ""}]

    def test_quoted_commas(self):
        _, rows = parse_csv('name,position\n"Allen, Josh",QB\n')
        assert rows[0]["name"] == "Allen, Josh"

    @pytest.mark.parametrize("text", ["", "   \n\n", None])
    def test_empty_file_rejected(self, text):
        with pytest.raises(MarketImportError):
            parse_csv(text)


# =============================================================================
# Players
# =============================================================================

class TestImportPlayers:
    """Players CSV import."""

    def test_rows_missing_name_or_position_dropped(self):
        rows = import_players(PLAYERS_CSV)
        assert [r.name for r in rows] == ["Josh Allen", "Bijan Robinson", "Rome Odunze"]

    def test_position_upper_cased(self):
        rows = import_players(PLAYERS_CSV)
        assert rows[0].position == "QB"

    def test_numeric_fields(self):
        allen, bijan, odunze = import_players(PLAYERS_CSV)
        assert allen.value == 880
        assert allen.sf_value == 1250
        assert allen.age == 29
        # Missing SF value defaults to 0 for players
        assert bijan.sf_value == 0
        assert odunze.age is None

    def test_unparseable_numbers_default(self):
        rows = import_players("name,position,age,value,sf_value\nA,WR,old,lots,n/a\n")
        assert rows[0].value == 0
        assert rows[0].sf_value == 0
        assert rows[0].age is None

    def test_name_header_alias(self):
        rows = import_players("Name,Position,Value,sf_value\nA,TE,10,12\n")
        assert rows[0].name == "A"
        assert rows[0].sf_value == 12

    def test_missing_position_header_rejected(self):
        with pytest.raises(MarketImportError):
            import_players("Player,Value\nJosh Allen,900\n")

    def test_missing_name_header_rejected(self):
        with pytest.raises(MarketImportError):
            import_players("Position,Value\nQB,900\n")

    def test_header_only_is_empty_table(self):
        assert import_players("Name,Position,Value,SF Value\n") == []

    def test_zero_sf_column_falls_through(self):
        rows = import_players(
            "name,position,value,sf value,sf_value\nA,QB,900,0,1300\nB,QB,800,junk,1100\n"
        )
        assert [r.sf_value for r in rows] == [1300, 1100]


# =============================================================================
# Picks
# =============================================================================

class TestImportPicks:
    """Draft pick CSV import and round aggregation."""

    def test_sf_value_defaults_to_value(self):
        rows = import_pick_rows(PICKS_CSV)
        third = next(r for r in rows if r.slot == "1.03")
        assert third.sf_value == 700

    def test_zero_sf_column_falls_through(self):
        rows = import_pick_rows("round,value,sf value,sf_value\n1.01,900,0,1200\n1.02,800,n/a,\n")
        assert [r.sf_value for r in rows] == [1200, 800]

    def test_empty_round_rows_dropped(self):
        rows = import_pick_rows("round,value\n1.01,900\n,500\n")
        assert [r.slot for r in rows] == ["1.01"]

    def test_slot_table(self):
        table = import_picks(PICKS_CSV)
        assert table.slots["1.02"] == MarketValue(800, 1100)
        assert set(table.slots) == {"1.01", "1.02", "1.03", "2.01"}

    def test_round_aggregates_hand_computed(self):
        """
        Round 1: value (900 + 800 + 700) / 3 = 800
                 sf    (1200 + 1100 + 700) / 3 = 1000
        """
        table = import_picks(PICKS_CSV)
        assert table.rounds["1"] == MarketValue(800, 1000)
        assert table.rounds["2"] == MarketValue(300, 320)

    def test_round_aggregate_rounds_half_up(self):
        table = import_picks("round,value,sf value\n1.01,10,11\n1.02,11,12\n")
        # 10.5 -> 11, 11.5 -> 12
        assert table.rounds["1"] == MarketValue(11, 12)

    def test_missing_round_header_rejected(self):
        with pytest.raises(MarketImportError):
            import_picks("Slot,Value,SF Value\n1.01,900,1200\n")

    def test_aggregate_empty(self):
        assert aggregate_picks([]) == PickYearTable()


# =============================================================================
# Catalog
# =============================================================================

class TestCatalog:
    """Table swapping and lookups."""

    def test_normalize_name(self):
        assert normalize_name("Amon-Ra St. Brown") == "amon ra st brown"
        assert normalize_name("  Marvin Harrison Jr. ") == "marvin harrison jr"
        assert normalize_name(None) == ""

    def test_slot_precedes_round(self):
        table = PickYearTable(
            slots={"1.01": MarketValue(900, 1200)},
            rounds={"1": MarketValue(500, 600)},
        )
        assert table.lookup("1.01") == MarketValue(900, 1200)
        assert table.lookup("1.05") == MarketValue(500, 600)
        assert table.lookup("3.01") is None

    def test_first_duplicate_wins(self):
        market = PlayerMarket([
            PlayerEntry("Josh Allen", "QB", MarketValue(1, 2)),
            PlayerEntry("JOSH ALLEN", "qb", MarketValue(3, 4)),
        ])
        assert market.lookup("josh allen", "QB") == MarketValue(1, 2)
        assert len(market) == 2

    def test_player_import_replaces_wholesale(self):
        catalog = MarketCatalog()
        catalog.replace_external_players(r.to_entry() for r in import_players(PLAYERS_CSV))
        assert catalog.external_players.value_for("Josh Allen", "QB", True) == 1250

        catalog.replace_external_players(
            r.to_entry() for r in import_players("name,position,value\nRome Odunze,WR,400\n")
        )
        assert catalog.external_players.value_for("Josh Allen", "QB", True) == 0
        assert catalog.external_players.value_for("Rome Odunze", "WR", False) == 400

    def test_pick_import_merges_by_year(self):
        catalog = MarketCatalog()
        catalog.merge_external_picks(2026, import_picks(PICKS_CSV))
        catalog.merge_external_picks(2027, import_picks("round,value\n1.01,500\n"))
        catalog.merge_external_picks(2026, import_picks("round,value\n2.01,50\n"))

        assert sorted(catalog.external_picks.years) == [2026, 2027]
        # 2026 was overwritten entirely by the second import
        assert catalog.external_picks.value_for(2026, "1.01", False) == 0
        assert catalog.external_picks.value_for(2026, "2.01", False) == 50
        assert catalog.external_picks.value_for(2027, "1.01", False) == 500

    def test_header_only_pick_import_clears_year(self):
        """A header-only file is a valid, empty table for that year."""
        catalog = MarketCatalog()
        catalog.merge_external_picks(2026, import_picks(PICKS_CSV))
        catalog.merge_external_picks(2027, import_picks(PICKS_CSV))

        catalog.merge_external_picks(2026, import_picks("Round,Value,SF Value\n"))

        assert catalog.external_picks.years[2026] == PickYearTable()
        assert catalog.external_picks.value_for(2026, "1.01", True) == 0
        assert catalog.external_picks.value_for(2027, "1.01", True) == 1200

    def test_rejected_pick_import_leaves_table(self):
        catalog = MarketCatalog()
        catalog.merge_external_picks(2026, import_picks(PICKS_CSV))
        before = catalog.external_picks.years[2026]

        with pytest.raises(MarketImportError):
            catalog.merge_external_picks(2026, import_picks("value,sf value\n900,1200\n"))

        assert catalog.external_picks.years[2026] is before

    def test_summary(self):
        catalog = MarketCatalog()
        assert catalog.summary() == {
            "demo_players": 17,
            "external_players": 0,
            "external_pick_years": [],
        }
