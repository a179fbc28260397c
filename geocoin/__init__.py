"""Geocoin Carrier — deterministic grid caches and conserved coin transfers."""

__version__ = "0.1.0"
