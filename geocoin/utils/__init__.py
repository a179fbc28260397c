"""Logging setup, event feed and text rendering helpers."""
