"""Multi-user todo list API with cookie sessions and per-owner access checks."""

__version__ = "1.0.0"
