"""Valuation engine: pick curve, asset pricing, package adjustment, balancing."""

from dynasty.core.valuation.balance import (
    PAIR_WINDOW,
    BalanceAdvice,
    PoolEntry,
    advise,
    build_pool,
    clamp_tolerance,
    order_pool,
    suggest,
)
from dynasty.core.valuation.package import package_adjust, second_piece_percent
from dynasty.core.valuation.pick_curve import (
    BASE_ROUND_VALUES,
    pick_curve,
    slot_round_number,
    slot_to_round_key,
)
from dynasty.core.valuation.resolver import ValueResolver, blend, time_discount

__all__ = [
    "BASE_ROUND_VALUES",
    "BalanceAdvice",
    "PAIR_WINDOW",
    "PoolEntry",
    "ValueResolver",
    "advise",
    "blend",
    "build_pool",
    "clamp_tolerance",
    "order_pool",
    "package_adjust",
    "pick_curve",
    "second_piece_percent",
    "slot_round_number",
    "slot_to_round_key",
    "suggest",
    "time_discount",
]
