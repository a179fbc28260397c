"""Game configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """Immutable configuration for one game session."""

    # World origin (player start)
    origin_lat: float = 36.98949379578401
    origin_lng: float = -122.06277128548504

    # Grid
    tile_size: float = 1e-4                # one grid unit in coordinate space

    # Spawning
    world_seed: int = 0
    neighborhood_radius: int = 8           # square scan, in cells
    spawn_probability: float = 0.1

    # Presentation
    zoom_level: int = 19
    event_log_limit: int = 200

    # Logging
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.tile_size <= 0:
            raise ValueError(f"tile_size must be positive, got {self.tile_size}")
        scale = 1.0 / self.tile_size
        if abs(scale - round(scale)) > 1e-6:
            raise ValueError(f"1 / tile_size must be an integer, got {scale}")
        if self.neighborhood_radius < 0:
            raise ValueError(f"neighborhood_radius must be >= 0, got {self.neighborhood_radius}")
        if not 0.0 <= self.spawn_probability <= 1.0:
            raise ValueError(f"spawn_probability must be within [0, 1], got {self.spawn_probability}")
        if self.event_log_limit < 1:
            raise ValueError(f"event_log_limit must be >= 1, got {self.event_log_limit}")

    @property
    def grid_scale(self) -> int:
        """Cells per coordinate unit (10,000 for the default tile size)."""
        return round(1.0 / self.tile_size)
