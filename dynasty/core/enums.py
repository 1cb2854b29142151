"""Enumerations shared across the valuation engine."""

from enum import Enum


class Position(Enum):
    """Fantasy-relevant offensive positions."""

    QB = "QB"  # Quarterback
    RB = "RB"  # Running Back
    WR = "WR"  # Wide Receiver
    TE = "TE"  # Tight End

    @classmethod
    def parse(cls, raw: object, default: "Position" = None) -> "Position":
        """Parse a position string case-insensitively."""
        text = str(raw or "").strip().upper()
        try:
            return cls(text)
        except ValueError:
            if default is not None:
                return default
            raise


class ScoringMode(Enum):
    """League scoring format. Not yet used by valuation."""

    PPR = "PPR"
    HALF_PPR = "Half PPR"
    STANDARD = "Standard"

    @classmethod
    def _missing_(cls, value):
        text = str(value).strip().lower().replace("-", " ").replace("_", " ")
        for mode in cls:
            if mode.value.lower() == text:
                return mode
        if text == "halfppr":
            return cls.HALF_PPR
        return None


class ValueSource(Enum):
    """Which market table values are drawn from."""

    DEMO = "Demo"
    EXTERNAL = "External"
    BLEND = "Blend"

    @classmethod
    def _missing_(cls, value):
        text = str(value).strip().lower()
        # Older snapshots name the imported market after its provider
        if text in ("fantasypros", "external", "imported"):
            return cls.EXTERNAL
        for source in cls:
            if source.value.lower() == text:
                return source
        return None


class AssetKind(Enum):
    """Tag for the asset sum type."""

    PLAYER = "player"
    PICK = "pick"


class RoundKey(Enum):
    """Draft rounds that carry a value on the pick curve."""

    FIRST = "1st"
    SECOND = "2nd"
    THIRD = "3rd"
    FOURTH = "4th"
    FIFTH = "5th"

    @classmethod
    def from_number(cls, number: int) -> "RoundKey":
        """Map 1-5 to a round key. Anything else is treated as a 1st."""
        for key, n in ROUND_NUMBERS.items():
            if n == number:
                return key
        return cls.FIRST


ROUND_NUMBERS = {
    RoundKey.FIRST: 1,
    RoundKey.SECOND: 2,
    RoundKey.THIRD: 3,
    RoundKey.FOURTH: 4,
    RoundKey.FIFTH: 5,
}


class SuggestionPreference(Enum):
    """Ordering preference for the balancing pool."""

    ANY = "any"
    PLAYERS = "players"
    PICKS = "picks"


class BalanceStatus(Enum):
    """Where a team sits relative to the league average."""

    EVEN = "even"
    SURPLUS = "surplus"
    DEFICIT = "deficit"
