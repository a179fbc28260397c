"""GET /api/v1/events — status feed polled by the UI."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from geocoin.api.dependencies import get_session
from geocoin.api.schemas import EventSchema, EventsResponse
from geocoin.engine.session import GameSession

router = APIRouter()


@router.get("/events", response_model=EventsResponse)
def get_events(
    since: int | None = Query(None, ge=0, description="Only events with a larger seq, oldest first"),
    limit: int = Query(50, gt=0, le=500),
    session: GameSession = Depends(get_session),
) -> EventsResponse:
    log = session.event_log
    events = log.since(since)[:limit] if since is not None else log.latest(limit)
    return EventsResponse(events=[
        EventSchema(seq=e.seq, turn=e.turn, category=e.category, message=e.message, cells=list(e.cells))
        for e in events
    ])
