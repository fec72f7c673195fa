"""Exceptions raised around :class:`~domix_problem.models.failure.Failure` values.

Key Responsibilities:
    - Report invalid failure construction, naming the missing field
    - Supply an exception that carries a failure value for code paths that must
      raise instead of returning

Collaborators:
    - Upstream: ``Failure.__post_init__`` raises ``InvalidFailureError``;
      ``Failure.raise_error`` raises ``FailureError``
    - Downstream: Application code catches ``FailureError`` and reads
      ``error.failure``

Side Effects:
    - None
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from domix_problem.models.failure import Failure


class InvalidFailureError(ValueError):
    """Raised when a failure is built without one of its required fields."""

    def __init__(self, field_name: str, *, detail: str | None = None) -> None:
        self.field_name = field_name
        if detail:
            message = f"invalid argument '{field_name}': {detail}"
        else:
            message = f"invalid argument: missing required field '{field_name}'"
        super().__init__(message)


class FailureError(RuntimeError):
    """Exception that carries a :class:`Failure` value.

    The failure's cause stays reachable through ``error.failure.cause`` only;
    it is never chained, so formatted tracebacks cannot show it.
    """

    def __init__(self, failure: Failure[Any]) -> None:
        super().__init__(failure.message)
        self.failure = failure
        self.__suppress_context__ = True


__all__ = ["FailureError", "InvalidFailureError"]
