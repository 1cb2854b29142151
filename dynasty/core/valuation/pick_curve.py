"""
Baseline draft pick values by round.

Rookie pick values scale with league rules: superflex leagues push early
picks up because a rookie QB can start, TE premium lifts them a little more.
"""

from dynasty.core.enums import RoundKey
from dynasty.core.numeric import round_half_up


# 1QB baseline by round
BASE_ROUND_VALUES = {
    RoundKey.FIRST: 600,
    RoundKey.SECOND: 220,
    RoundKey.THIRD: 90,
    RoundKey.FOURTH: 40,
    RoundKey.FIFTH: 20,
}

SUPERFLEX_MULTIPLIERS = {
    RoundKey.FIRST: 1.25,
    RoundKey.SECOND: 1.15,
    RoundKey.THIRD: 1.10,
    RoundKey.FOURTH: 1.05,
    RoundKey.FIFTH: 1.05,
}

TE_PREMIUM_MULTIPLIERS = {
    RoundKey.FIRST: 1.08,
    RoundKey.SECOND: 1.06,
    RoundKey.THIRD: 1.04,
    RoundKey.FOURTH: 1.02,
    RoundKey.FIFTH: 1.02,
}


def pick_curve(superflex: bool, te_premium: bool) -> dict[RoundKey, int]:
    """Value of a pick in each round for the given league rules."""
    curve = {}
    for key, base in BASE_ROUND_VALUES.items():
        sf = SUPERFLEX_MULTIPLIERS[key] if superflex else 1.0
        tep = TE_PREMIUM_MULTIPLIERS[key] if te_premium else 1.0
        curve[key] = round_half_up(base * sf * tep)
    return curve


def slot_round_number(slot: object) -> int:
    """
    Round number from a slot string ("2.05" -> 2).

    Returns 0 when the round portion is not an integer.
    """
    head = str(slot if slot is not None else "").split(".")[0].strip()
    try:
        return int(head)
    except ValueError:
        return 0


def slot_to_round_key(slot: object) -> RoundKey:
    """Round key for a slot. Rounds outside 1-5 and junk count as a 1st."""
    return RoundKey.from_number(slot_round_number(slot))
