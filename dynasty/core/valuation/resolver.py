"""
Value resolution for individual assets.

Every asset resolves to a non-negative integer under the current league
settings and market source. Unknown players are worth 0 until a market
lists them; picks always have at least the curve baseline.
"""

from datetime import date
from typing import Optional

from dynasty.core.assets import Asset, PickAsset, PlayerAsset
from dynasty.core.enums import ValueSource
from dynasty.core.market.catalog import MarketCatalog
from dynasty.core.numeric import clamp, round_half_up
from dynasty.core.settings import LeagueSettings, ValueSourceConfig
from dynasty.core.valuation.pick_curve import pick_curve, slot_to_round_key


# Future picks lose 4% per year out, capped at 16%
DISCOUNT_PER_YEAR = 0.04
MAX_DISCOUNT = 0.16


def time_discount(years_out: int) -> float:
    """
    Multiplier for a pick this many years out.

    Current-year and past picks are not discounted.
    """
    return 1.0 - clamp(DISCOUNT_PER_YEAR * years_out, 0.0, MAX_DISCOUNT)


def blend(demo: float, external: float, weight: float) -> int:
    """Weighted blend toward the external value."""
    return round_half_up((1.0 - weight) * demo + weight * external)


class ValueResolver:
    """
    Prices assets against a market catalog.

    current_year anchors pick discounting; it defaults to today's year.
    """

    def __init__(self, current_year: Optional[int] = None) -> None:
        self.current_year = current_year or date.today().year

    def resolve(
        self,
        asset: Asset,
        settings: LeagueSettings,
        catalog: MarketCatalog,
        source: ValueSourceConfig,
    ) -> int:
        if isinstance(asset, PlayerAsset):
            value = self.player_value(asset, settings, catalog, source)
        elif isinstance(asset, PickAsset):
            value = self.pick_value(asset, settings, catalog, source)
        else:
            raise TypeError(f"Cannot value {type(asset).__name__}")
        return max(0, value)

    def player_value(
        self,
        player: PlayerAsset,
        settings: LeagueSettings,
        catalog: MarketCatalog,
        source: ValueSourceConfig,
    ) -> int:
        demo = catalog.demo_players.value_for(player.name, player.position, settings.superflex)
        external = catalog.external_players.value_for(
            player.name, player.position, settings.superflex
        )

        if source.source == ValueSource.EXTERNAL:
            return round_half_up(external)
        if source.source == ValueSource.BLEND:
            return blend(demo, external, source.blend_weight)
        return round_half_up(demo)

    def pick_value(
        self,
        pick: PickAsset,
        settings: LeagueSettings,
        catalog: MarketCatalog,
        source: ValueSourceConfig,
    ) -> int:
        curve = pick_curve(settings.superflex, settings.te_premium)
        base = curve[slot_to_round_key(pick.slot)]

        if source.source != ValueSource.DEMO:
            # A pick the import doesn't cover keeps the curve value
            external = catalog.external_picks.value_for(pick.year, pick.slot, settings.superflex)
            if source.source == ValueSource.EXTERNAL:
                base = external or base
            else:
                base = blend(base, external or base, source.blend_weight)

        years_out = pick.year - self.current_year
        return round_half_up(base * time_discount(years_out))
