"""Git access for the daily logger."""

from .operations import GitOperations

__all__ = ["GitOperations"]
