"""Player state: position on the grid plus the coins being carried."""

from __future__ import annotations

from dataclasses import dataclass, field

from geocoin.core.models import Coin


@dataclass(slots=True)
class PlayerState:
    """The one player of a session.

    Position is kept as whole tile steps from the world origin so that
    moving away and back lands on exactly the same coordinates.
    """

    origin_lat: float
    origin_lng: float
    tile_size: float
    steps_lat: int = 0
    steps_lng: int = 0
    inventory: list[Coin] = field(default_factory=list)

    @property
    def position(self) -> tuple[float, float]:
        return (
            self.origin_lat + self.steps_lat * self.tile_size,
            self.origin_lng + self.steps_lng * self.tile_size,
        )

    @property
    def steps(self) -> tuple[int, int]:
        return self.steps_lat, self.steps_lng

    def holds(self, coin: Coin) -> bool:
        return coin in self.inventory

    def copy(self) -> PlayerState:
        return PlayerState(
            origin_lat=self.origin_lat,
            origin_lng=self.origin_lng,
            tile_size=self.tile_size,
            steps_lat=self.steps_lat,
            steps_lng=self.steps_lng,
            inventory=list(self.inventory),
        )
