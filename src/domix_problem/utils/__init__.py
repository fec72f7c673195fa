"""Utility modules shared by the failure models."""

from .errors import FailureError, InvalidFailureError
from .hashing import freeze, structural_hash


__all__ = ["FailureError", "InvalidFailureError", "freeze", "structural_hash"]
