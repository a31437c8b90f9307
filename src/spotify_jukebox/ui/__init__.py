"""Presentation helpers for the jukebox console."""
