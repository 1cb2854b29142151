"""
Trade board: the teams taking part in a multi-team trade.

Each team owns its asset list outright. Moving an asset between teams is a
remove from one followed by an add to the other.
"""

from dataclasses import dataclass, field
from string import ascii_uppercase
from typing import Optional

from dynasty.core.assets import Asset, PickAsset, PlayerAsset, Team
from dynasty.core.enums import Position


MIN_TEAMS = 2


def default_team_name(index: int) -> str:
    """Team A, Team B, ... Team Z, Team AA, ..."""
    letters = ""
    n = index
    while True:
        letters = ascii_uppercase[n % 26] + letters
        n = n // 26 - 1
        if n < 0:
            break
    return f"Team {letters}"


@dataclass
class TradeBoard:
    """Ordered collection of teams with roster editing operations."""

    teams: list[Team] = field(default_factory=list)

    @classmethod
    def new(cls, team_count: int = MIN_TEAMS) -> "TradeBoard":
        board = cls()
        for _ in range(team_count):
            board.add_team()
        return board

    # === Teams ===

    def add_team(self, name: Optional[str] = None) -> Team:
        team = Team(name=name or default_team_name(len(self.teams)))
        self.teams.append(team)
        return team

    def get_team(self, team_id: str) -> Team:
        for team in self.teams:
            if team.id == team_id:
                return team
        raise LookupError(f"Team {team_id} not found")

    def remove_team(self, team_id: str) -> Team:
        team = self.get_team(team_id)
        if len(self.teams) <= MIN_TEAMS:
            raise ValueError(f"A trade needs at least {MIN_TEAMS} teams")
        self.teams.remove(team)
        return team

    def rename_team(self, team_id: str, name: str) -> Team:
        team = self.get_team(team_id)
        team.name = name
        return team

    # === Assets ===

    def add_player(
        self,
        team_id: str,
        name: str = "",
        position: Position = Position.WR,
        age: Optional[int] = None,
    ) -> PlayerAsset:
        team = self.get_team(team_id)
        return team.add(PlayerAsset(name=name, position=position, age=age))

    def add_pick(self, team_id: str, year: int, slot: str = "1.01") -> PickAsset:
        team = self.get_team(team_id)
        return team.add(PickAsset(year=year, slot=slot))

    def remove_asset(self, team_id: str, asset_id: str) -> Asset:
        return self.get_team(team_id).remove(asset_id)

    def update_asset(self, team_id: str, asset_id: str, patch: dict) -> Asset:
        asset = self.get_team(team_id).get(asset_id)
        asset.update(patch)
        return asset

    def move_asset(self, asset_id: str, from_team_id: str, to_team_id: str) -> Asset:
        """Transfer ownership of an asset between two teams."""
        target = self.get_team(to_team_id)
        asset = self.get_team(from_team_id).remove(asset_id)
        return target.add(asset)

    def to_dict(self) -> dict:
        return {"teams": [team.to_dict() for team in self.teams]}
