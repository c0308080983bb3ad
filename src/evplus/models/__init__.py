"""Domain models."""

from .prop import PropRecord

__all__ = ["PropRecord"]
