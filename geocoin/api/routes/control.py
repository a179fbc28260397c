"""POST /api/v1/control/{action} — session lifecycle controls."""

from __future__ import annotations

from enum import Enum

from fastapi import APIRouter, Depends

from geocoin.api.dependencies import get_session
from geocoin.api.schemas import ControlResponse
from geocoin.engine.session import GameSession

router = APIRouter()


class ControlAction(str, Enum):
    reset = "reset"
    scan = "scan"


@router.post("/control/{action}", response_model=ControlResponse)
def control(
    action: ControlAction,
    session: GameSession = Depends(get_session),
) -> ControlResponse:
    match action:
        case ControlAction.reset:
            session.reset()
            return ControlResponse(status="ok", message="Session reset.", turn=session.get_snapshot().turn)

        case ControlAction.scan:
            spawned = session.scan()
            status = "ok" if spawned else "noop"
            return ControlResponse(
                status=status,
                message=f"Scan revealed {len(spawned)} new caches.",
                turn=session.get_snapshot().turn,
            )
