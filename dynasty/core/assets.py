"""
Trade assets and team rosters.

An asset is either a player or a future draft pick. Assets carry no value of
their own; the valuation engine prices them against the active market.
"""

from dataclasses import dataclass, field
from typing import Optional, Union
from uuid import uuid4

from dynasty.core.enums import AssetKind, Position
from dynasty.core.numeric import parse_int


def new_asset_id() -> str:
    """Random UUID string, unique within the process."""
    return str(uuid4())


@dataclass
class PlayerAsset:
    """A rostered player, identified for pricing by name and position."""

    name: str = ""
    position: Position = Position.WR
    age: Optional[int] = None
    id: str = field(default_factory=new_asset_id)

    kind = AssetKind.PLAYER

    def __post_init__(self) -> None:
        if not isinstance(self.position, Position):
            self.position = Position.parse(self.position, Position.WR)
        self.age = _positive_or_none(self.age)

    @property
    def label(self) -> str:
        return self.name or "Player"

    def update(self, patch: dict) -> None:
        """Apply user edits. Fields that fail to parse keep their old value."""
        if "name" in patch and patch["name"] is not None:
            self.name = str(patch["name"])
        if "position" in patch and patch["position"] is not None:
            self.position = Position.parse(patch["position"], self.position)
        if "age" in patch:
            self.age = _positive_or_none(patch["age"])

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "kind": self.kind.value,
            "name": self.name,
            "position": self.position.value,
            "age": self.age,
        }


@dataclass
class PickAsset:
    """
    A future draft pick.

    The slot is kept as typed ("1.07" = round 1, pick 7); pricing only ever
    reads the round portion and the exact string.
    """

    year: int = 0
    slot: str = "1.01"
    id: str = field(default_factory=new_asset_id)

    kind = AssetKind.PICK

    @property
    def label(self) -> str:
        return f"{self.year} {self.slot}"

    def update(self, patch: dict) -> None:
        if "year" in patch:
            self.year = parse_int(patch["year"], None) or self.year
        if "slot" in patch and patch["slot"] is not None:
            self.slot = str(patch["slot"]).strip()

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "kind": self.kind.value,
            "year": self.year,
            "slot": self.slot,
        }


Asset = Union[PlayerAsset, PickAsset]


def _positive_or_none(raw: object) -> Optional[int]:
    age = parse_int(raw, None)
    if age is None or age <= 0:
        return None
    return age


@dataclass
class Team:
    """A team and the ordered list of assets it currently owns."""

    name: str
    assets: list[Asset] = field(default_factory=list)
    id: str = field(default_factory=new_asset_id)

    def add(self, asset: Asset) -> Asset:
        self.assets.append(asset)
        return asset

    def get(self, asset_id: str) -> Asset:
        for asset in self.assets:
            if asset.id == asset_id:
                return asset
        raise LookupError(f"Asset {asset_id} not found on {self.name}")

    def remove(self, asset_id: str) -> Asset:
        asset = self.get(asset_id)
        self.assets.remove(asset)
        return asset

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "assets": [asset.to_dict() for asset in self.assets],
        }
