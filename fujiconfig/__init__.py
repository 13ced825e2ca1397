"""FujiNet configuration model: text screen drawing, app-key preferences, host hooks and a module runner."""

__version__ = "0.1.0"
__all__ = ["host", "mock_screen", "preferences", "runner", "screen"]