"""Utilities: logging setup, event log, replay recording."""
