"""Tests for the rank-decayed package adjustment."""

import random

import pytest

from dynasty.core.valuation.package import package_adjust, second_piece_percent


class TestPackageAdjust:
    """Diminishing returns on bundles of assets."""

    def test_empty_is_zero(self):
        assert package_adjust([], 0.93) == 0

    def test_single_asset_unchanged(self):
        assert package_adjust([740], 0.93) == 740

    def test_two_assets(self):
        """1000 + 500 x 0.9 = 1450."""
        assert package_adjust([500, 1000], 0.90) == 1450

    def test_sorted_descending_before_weighting(self):
        """Order of input doesn't matter."""
        assert package_adjust([100, 900, 400], 0.9) == package_adjust([900, 400, 100], 0.9)

    def test_three_assets_hand_computed(self):
        """900 + 400 x 0.9 + 100 x 0.81 = 1341."""
        assert package_adjust([100, 900, 400], 0.9) == 1341

    def test_disabled_is_plain_sum(self):
        assert package_adjust([500, 1000, 250], 0.85, enabled=False) == 1750

    def test_disabled_empty(self):
        assert package_adjust([], 0.93, enabled=False) == 0

    @pytest.mark.parametrize("raw,effective", [
        (0.5, 0.80),
        (1.5, 0.99),
        (0.0, 0.93),
        ("junk", 0.93),
    ])
    def test_decay_clamped(self, raw, effective):
        values = [1000, 1000]
        assert package_adjust(values, raw) == round(1000 + 1000 * effective)

    def test_never_exceeds_sum(self):
        rng = random.Random(7)
        for _ in range(200):
            decay = rng.uniform(0.80, 0.99)
            values = [rng.randint(100, 1200) for _ in range(rng.randint(0, 8))]
            adjusted = package_adjust(values, decay)
            if len(values) <= 1:
                assert adjusted == sum(values)
            else:
                assert adjusted < sum(values)


class TestSecondPiece:

    def test_percent(self):
        assert second_piece_percent(0.93) == 93
        assert second_piece_percent(0.5) == 80
