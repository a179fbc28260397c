"""Pydantic response models for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field


# --- Cells & coins ---

class CellSchema(BaseModel):
    i: int
    j: int
    label: str
    south: float
    west: float
    north: float
    east: float


class CoinSchema(BaseModel):
    label: str = Field(description='Coin identity as "i:j#serial"')
    origin_i: int
    origin_j: int
    serial: int


class CacheSchema(BaseModel):
    cell: CellSchema
    coin_count: int
    coins: list[CoinSchema] = Field(default_factory=list)


# --- Player ---

class PlayerSchema(BaseModel):
    lat: float
    lng: float
    cell: CellSchema
    inventory: list[CoinSchema] = Field(default_factory=list)


# --- Responses ---

class CachesResponse(BaseModel):
    turn: int
    caches: list[CacheSchema]


class MoveResponse(BaseModel):
    turn: int
    player: PlayerSchema
    spawned: list[CacheSchema] = Field(default_factory=list)


class TransferResponse(BaseModel):
    status: str = Field(description='"ok" when a coin moved, "noop" otherwise')
    outcome: str
    coin: CoinSchema | None = None
    cache: CacheSchema
    player: PlayerSchema


class EventSchema(BaseModel):
    seq: int
    turn: int
    category: str
    message: str
    cells: list[str] = Field(default_factory=list)


class EventsResponse(BaseModel):
    events: list[EventSchema]


class ControlResponse(BaseModel):
    status: str
    message: str
    turn: int = 0


class GameConfigResponse(BaseModel):
    origin_lat: float
    origin_lng: float
    tile_size: float
    grid_scale: int
    world_seed: int
    neighborhood_radius: int
    spawn_probability: float
    zoom_level: int
