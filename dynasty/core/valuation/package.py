"""
Package adjustment.

A bundle of assets trades for less than the sum of its parts: the best
asset counts in full, the next at decay, the next at decay squared, and so
on down the sorted list.
"""

from typing import Sequence

from dynasty.core.numeric import round_half_up
from dynasty.core.settings import clamp_decay


def package_adjust(values: Sequence[float], decay: float, enabled: bool = True) -> int:
    """Rank-decayed total of a team's asset values. Disabled means a plain sum."""
    if not enabled:
        return round_half_up(sum(values))

    decay = clamp_decay(decay)
    ranked = sorted(values, reverse=True)
    return round_half_up(sum(v * decay ** i for i, v in enumerate(ranked)))


def second_piece_percent(decay: float) -> int:
    """How much the second-best asset counts, as a whole percentage."""
    return round_half_up(clamp_decay(decay) * 100)
