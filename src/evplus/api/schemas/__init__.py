"""Pydantic models for API I/O."""

from .error import ErrorResponse

__all__ = ["ErrorResponse"]
