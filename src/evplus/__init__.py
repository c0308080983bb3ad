"""EVPlus backend: PrizePicks props as JSON or PDF."""

__version__ = "2.0.0"
