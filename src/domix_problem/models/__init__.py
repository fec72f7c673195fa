"""Failure value models."""

from .failure import Failure, FailureKind
from .serialization import FailurePayload


__all__ = ["Failure", "FailureKind", "FailurePayload"]
