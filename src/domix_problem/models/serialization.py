"""Pydantic snapshot of a failure for callers that need JSON output.

The payload mirrors the visible fields of :class:`Failure` only. The cause is
not represented at all, so a payload built from a failure with a cause is
indistinguishable from one built without.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .failure import Failure, FailureKind


class FailurePayload(BaseModel):
    """Frozen, cause-free representation of a failure tree."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: FailureKind
    message: str
    reason: str | None = None
    code: str | None = None
    i18n_key: str | None = None
    i18n_args: dict[str, Any] = Field(default_factory=dict)
    details: tuple[FailurePayload, ...] = Field(default_factory=tuple)
    data: Any = None

    @classmethod
    def from_failure(cls, failure: Failure[Any]) -> FailurePayload:
        return cls(
            kind=failure.kind,
            message=failure.message,
            reason=failure.reason,
            code=failure.code,
            i18n_key=failure.i18n_key,
            i18n_args=dict(failure.i18n_args),
            details=tuple(cls.from_failure(detail) for detail in failure.details),
            data=failure.data,
        )

    def to_failure(self) -> Failure[Any]:
        """Rebuild a failure without a cause."""
        return Failure(
            self.kind,
            self.message,
            reason=self.reason,
            code=self.code,
            i18n_key=self.i18n_key,
            i18n_args=self.i18n_args,
            details=[detail.to_failure() for detail in self.details],
            data=self.data,
        )


__all__ = ["FailurePayload"]
