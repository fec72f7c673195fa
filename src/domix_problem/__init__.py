"""Failures as immutable, classified values.

Key Responsibilities:
    - Export the :class:`Failure` value type and its :class:`FailureKind`
      classification
    - Export the cause-free :class:`FailurePayload` snapshot and the package
      exceptions

Side Effects:
    - None; importing the package does not configure logging

Example:
    >>> from domix_problem import Failure
    >>> Failure.business("x") == Failure.business("x")
    True
"""

from .models import Failure, FailureKind, FailurePayload
from .utils.errors import FailureError, InvalidFailureError


__all__ = [
    "Failure",
    "FailureError",
    "FailureKind",
    "FailurePayload",
    "InvalidFailureError",
]
