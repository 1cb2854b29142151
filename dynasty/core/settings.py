"""
League settings and value-source selection.

Both objects are long-lived session state: created with defaults, mutated by
the user, and snapshotted after every change. Deserialization is forgiving:
fields that cannot be parsed keep their defaults.
"""

from dataclasses import dataclass

from dynasty.core.enums import ScoringMode, ValueSource
from dynasty.core.numeric import clamp, parse_float, parse_int


# Package adjustment decay bounds
MIN_DECAY = 0.80
MAX_DECAY = 0.99
DEFAULT_DECAY = 0.93

MIN_LEAGUE_SIZE = 8
MAX_LEAGUE_SIZE = 16
DEFAULT_LEAGUE_SIZE = 12

DEFAULT_BLEND_WEIGHT = 0.5


def clamp_decay(raw: object) -> float:
    """Coerce any input into a usable decay factor."""
    value = parse_float(raw, None)
    if not value:
        value = DEFAULT_DECAY
    return clamp(value, MIN_DECAY, MAX_DECAY)


def _parse_bool(raw: object, default: bool) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, (int, float)):
        return bool(raw)
    if isinstance(raw, str):
        text = raw.strip().lower()
        if text in ("true", "1", "yes", "on"):
            return True
        if text in ("false", "0", "no", "off"):
            return False
    return default


@dataclass
class LeagueSettings:
    """
    League rules that shift market values.

    ktc_decay is re-clamped on every assignment, so the stored value is
    always inside [MIN_DECAY, MAX_DECAY].
    """

    scoring_mode: ScoringMode = ScoringMode.PPR
    superflex: bool = True
    te_premium: bool = False
    league_size: int = DEFAULT_LEAGUE_SIZE
    ktc_adjustment: bool = True
    ktc_decay: float = DEFAULT_DECAY

    def __setattr__(self, name: str, value: object) -> None:
        if name == "ktc_decay":
            value = clamp_decay(value)
        elif name == "league_size":
            size = parse_int(value, None) or DEFAULT_LEAGUE_SIZE
            value = int(clamp(size, MIN_LEAGUE_SIZE, MAX_LEAGUE_SIZE))
        super().__setattr__(name, value)

    def update(self, patch: dict) -> "LeagueSettings":
        """Apply a partial update from user input."""
        merged = self.to_dict()
        merged.update({k: v for k, v in patch.items() if v is not None})
        updated = LeagueSettings.from_dict(merged)
        for name in updated.__dataclass_fields__:
            setattr(self, name, getattr(updated, name))
        return self

    def to_dict(self) -> dict:
        return {
            "scoring_mode": self.scoring_mode.value,
            "superflex": self.superflex,
            "te_premium": self.te_premium,
            "league_size": self.league_size,
            "ktc_adjustment": self.ktc_adjustment,
            "ktc_decay": self.ktc_decay,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "LeagueSettings":
        """Create from dictionary. Unknown or malformed fields use defaults."""
        if not isinstance(data, dict):
            raise TypeError(f"Expected a settings object, got {type(data).__name__}")

        defaults = cls()
        try:
            scoring = ScoringMode(data.get("scoring_mode", data.get("scoringMode", "PPR")))
        except ValueError:
            scoring = defaults.scoring_mode

        return cls(
            scoring_mode=scoring,
            superflex=_parse_bool(data.get("superflex"), defaults.superflex),
            te_premium=_parse_bool(
                data.get("te_premium", data.get("tePremium")), defaults.te_premium
            ),
            league_size=data.get("league_size", data.get("leagueSize")),
            ktc_adjustment=_parse_bool(
                data.get("ktc_adjustment", data.get("ktcAdjustment")), defaults.ktc_adjustment
            ),
            ktc_decay=data.get("ktc_decay", data.get("ktcDecay")),
        )


@dataclass
class ValueSourceConfig:
    """Market source selection. blend_weight applies to the External side."""

    source: ValueSource = ValueSource.DEMO
    blend_weight: float = DEFAULT_BLEND_WEIGHT

    def __setattr__(self, name: str, value: object) -> None:
        if name == "blend_weight":
            value = clamp(parse_float(value, DEFAULT_BLEND_WEIGHT), 0.0, 1.0)
        elif name == "source" and not isinstance(value, ValueSource):
            value = ValueSource(value)
        super().__setattr__(name, value)

    def to_dict(self) -> dict:
        return {"source": self.source.value, "blend_weight": self.blend_weight}
