"""Interactive console for controlling a go-librespot playback daemon."""

__version__ = "0.1.0"
