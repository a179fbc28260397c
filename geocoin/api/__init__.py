"""HTTP API over the game session."""
