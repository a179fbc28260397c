"""Player position, inventory and movement."""

from __future__ import annotations

from enum import Enum

from fastapi import APIRouter, Depends

from geocoin.api.dependencies import get_session
from geocoin.api.schemas import MoveResponse, PlayerSchema
from geocoin.api.serializers import cache_schema, player_schema
from geocoin.core.enums import Direction
from geocoin.engine.session import GameSession

router = APIRouter()


class MoveDirection(str, Enum):
    north = "north"
    south = "south"
    east = "east"
    west = "west"


@router.get("/player", response_model=PlayerSchema)
def get_player(session: GameSession = Depends(get_session)) -> PlayerSchema:
    return player_schema(session.get_snapshot(), session.state.locator)


@router.post("/move/{direction}", response_model=MoveResponse)
def move(
    direction: MoveDirection,
    session: GameSession = Depends(get_session),
) -> MoveResponse:
    result = session.move(Direction.parse(direction.value))
    snap = session.get_snapshot()
    locator = session.state.locator
    return MoveResponse(
        turn=snap.turn,
        player=player_schema(snap, locator),
        spawned=[cache_schema(c, locator) for c in result.spawned],
    )
