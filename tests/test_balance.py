"""Tests for balancing suggestions."""

import pytest

from dynasty.core.enums import AssetKind, BalanceStatus, RoundKey, SuggestionPreference
from dynasty.core.market.catalog import DEMO_PLAYERS
from dynasty.core.valuation.balance import (
    PAIR_WINDOW,
    PoolEntry,
    advise,
    build_pool,
    clamp_tolerance,
    order_pool,
    suggest,
)
from dynasty.core.valuation.pick_curve import pick_curve


def player(name: str, value: int) -> PoolEntry:
    return PoolEntry(key=f"P|{name}", kind=AssetKind.PLAYER, name=name, value=value)


def pick(name: str, value: int) -> PoolEntry:
    return PoolEntry(key=f"K|{name}", kind=AssetKind.PICK, name=name, value=value)


# =============================================================================
# Pool
# =============================================================================

class TestBuildPool:
    """Suggestion pool construction."""

    def test_contains_demo_players_and_five_picks(self, superflex_settings, catalog):
        curve = pick_curve(True, False)
        pool = build_pool(superflex_settings, catalog, curve, 2026)

        players = [e for e in pool if e.kind == AssetKind.PLAYER]
        picks = [e for e in pool if e.kind == AssetKind.PICK]
        assert len(players) == len(DEMO_PLAYERS)
        assert len(picks) == 5

    def test_player_values_follow_league_type(self, superflex_settings, one_qb_settings, catalog):
        curve = pick_curve(False, False)
        sf_pool = build_pool(superflex_settings, catalog, curve, 2026)
        qb_pool = build_pool(one_qb_settings, catalog, curve, 2026)

        sf_allen = next(e for e in sf_pool if e.name == "Josh Allen")
        qb_allen = next(e for e in qb_pool if e.name == "Josh Allen")
        assert sf_allen.value == 1100
        assert qb_allen.value == 850

    def test_pick_entries_use_curve(self, superflex_settings, catalog):
        curve = pick_curve(True, False)
        pool = build_pool(superflex_settings, catalog, curve, 2026)
        first = next(e for e in pool if e.key == "K|2026|1st")
        assert first.name == "2026 1st"
        assert first.value == curve[RoundKey.FIRST]


class TestOrderPool:
    """Preference ordering keeps every entry."""

    @pytest.fixture
    def mixed_pool(self):
        return [player("A", 300), pick("1st", 600), player("B", 100), pick("3rd", 90)]

    def test_any_sorts_ascending(self, mixed_pool):
        ordered = order_pool(mixed_pool, SuggestionPreference.ANY)
        assert [e.value for e in ordered] == [90, 100, 300, 600]

    def test_players_first(self, mixed_pool):
        ordered = order_pool(mixed_pool, SuggestionPreference.PLAYERS)
        assert [e.name for e in ordered] == ["B", "A", "3rd", "1st"]

    def test_picks_first(self, mixed_pool):
        ordered = order_pool(mixed_pool, SuggestionPreference.PICKS)
        assert [e.name for e in ordered] == ["3rd", "1st", "B", "A"]

    @pytest.mark.parametrize("preference", list(SuggestionPreference))
    def test_nothing_dropped(self, mixed_pool, preference):
        assert len(order_pool(mixed_pool, preference)) == len(mixed_pool)


# =============================================================================
# Suggest
# =============================================================================

class TestSuggest:
    """Single, pair and closest-match search."""

    def test_empty_pool(self):
        assert suggest(-100, [], SuggestionPreference.ANY, 0.1) == []

    def test_single_match(self):
        pool = [player("A", 95), player("B", 300)]
        assert suggest(-100, pool) == [pool[0]]

    def test_single_match_prefers_pool_order(self):
        """Both are in the window; the lower value comes first."""
        pool = [player("High", 108), player("Low", 92)]
        assert suggest(-100, pool, tolerance=0.1)[0].name == "Low"

    def test_preference_changes_first_match(self):
        pool = [player("Player", 92), pick("Pick", 108)]
        result = suggest(-100, pool, SuggestionPreference.PICKS, 0.1)
        assert result[0].name == "Pick"

    def test_pair_match(self):
        pool = [player("A", 30), player("B", 40), player("C", 500)]
        result = suggest(-70, pool, tolerance=0.05)
        assert [e.name for e in result] == ["A", "B"]

    def test_pair_can_repeat_an_entry(self):
        """i <= j, so the same entry may pair with itself."""
        pool = [player("A", 50), player("B", 500)]
        result = suggest(-100, pool, tolerance=0.05)
        assert [e.name for e in result] == ["A", "A"]

    def test_fallback_closest(self):
        pool = [player("Small", 10), player("Big", 500)]
        assert [e.name for e in suggest(-200, pool, tolerance=0.1)] == ["Small"]

    def test_fallback_tie_keeps_pool_order(self):
        pool = [player("Low", 150), pick("High", 250)]
        assert suggest(-200, pool, SuggestionPreference.ANY, 0.05)[0].name == "Low"
        assert suggest(-200, pool, SuggestionPreference.PICKS, 0.05)[0].name == "High"

    def test_surplus_sign_ignored(self):
        """suggest works on the magnitude of the gap."""
        pool = [player("A", 95)]
        assert suggest(100, pool) == suggest(-100, pool)

    def test_pair_search_window_is_bounded(self):
        """A pair further apart than PAIR_WINDOW is never considered."""
        low = player("Low", 5)
        high = player("High", 95)
        fillers = [player(f"F{i}", 7) for i in range(PAIR_WINDOW + 5)]

        result = suggest(-100, [low, *fillers, high], tolerance=0.01)
        # Low + High sums to 100 but High sits beyond the window
        assert [e.name for e in result] == ["High"]

    def test_pair_inside_window(self):
        low = player("Low", 5)
        high = player("High", 95)
        fillers = [player(f"F{i}", 7) for i in range(10)]

        result = suggest(-100, [low, *fillers, high], tolerance=0.01)
        assert [e.name for e in result] == ["Low", "High"]

    def test_scenario_even_two_team_gap(self, one_qb_settings, catalog):
        """A 100 point shortfall is closed by something worth 90-110."""
        pool = build_pool(one_qb_settings, catalog, pick_curve(False, False), 2026)
        result = suggest(-100, pool, SuggestionPreference.ANY, 0.10)
        assert 1 <= len(result) <= 2
        assert 90 <= sum(e.value for e in result) <= 110


class TestTolerance:

    @pytest.mark.parametrize("raw,expected", [
        (0.1, 0.1),
        (0.0, 0.10),
        (None, 0.10),
        (0.001, 0.01),
        (0.9, 0.5),
    ])
    def test_clamp(self, raw, expected):
        assert clamp_tolerance(raw) == pytest.approx(expected)


# =============================================================================
# Advice
# =============================================================================

class TestAdvise:
    """Only deficits get suggestions."""

    @pytest.fixture
    def pool(self):
        return [player("A", 95), pick("B", 250)]

    @pytest.mark.parametrize("delta", [-1, 0, 1])
    def test_even(self, pool, delta):
        advice = advise(delta, pool)
        assert advice.status == BalanceStatus.EVEN
        assert advice.suggestions == []
        assert advice.message == "already even"

    def test_surplus(self, pool):
        advice = advise(150, pool)
        assert advice.status == BalanceStatus.SURPLUS
        assert advice.suggestions == []
        assert advice.need == 0

    def test_deficit(self, pool):
        advice = advise(-100, pool)
        assert advice.status == BalanceStatus.DEFICIT
        assert advice.need == 100
        assert [e.name for e in advice.suggestions] == ["A"]
        assert advice.message == "needs ~100"

    def test_to_dict(self, pool):
        data = advise(-2500, pool).to_dict()
        assert data["status"] == "deficit"
        assert data["message"] == "needs ~2,500"
        assert data["suggestions"][0]["kind"] in ("player", "pick")
