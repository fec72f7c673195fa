"""Immutable failure values used in place of exceptions.

Key Responsibilities:
    - Classify failures with :class:`FailureKind`
    - Carry optional metadata, nested detail failures and an arbitrary payload
    - Retain an optional underlying cause for internal diagnostics without
      exposing it through equality, hashing, rendering or serialization

Collaborators:
    - Upstream: Application services build failures through the named factories
      and refine them with the ``with_*`` derivations
    - Downstream: Transport mappers and i18n resolvers read ``kind``,
      ``message``, ``code``, ``i18n_key``, ``i18n_args``, ``details`` and ``data``

Side Effects:
    - None; construction only snapshots the provided collections

Thread Safety:
    - Thread-safe; instances are frozen after construction. ``cause`` and
      ``data`` are shared references and are never copied.

Example:
    >>> failure = Failure.validation("Invalid request").with_code("VALIDATION_ERROR")
    >>> failure.kind
    <FailureKind.VALIDATION: 'validation'>
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Any, Generic, NoReturn, TypeVar

from domix_problem.utils.errors import FailureError, InvalidFailureError
from domix_problem.utils.hashing import structural_hash

T = TypeVar("T")
U = TypeVar("U")

# ==============================================================================
# TYPE DEFINITIONS
# ==============================================================================


class FailureKind(str, Enum):
    """Domain category of a failure."""

    BUSINESS = "business"
    VALIDATION = "validation"
    TECHNICAL = "technical"
    AUTHORIZATION = "authorization"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


def _coerce_kind(value: FailureKind | str | None) -> FailureKind:
    if value is None:
        raise InvalidFailureError("kind")
    if isinstance(value, FailureKind):
        return value
    try:
        return FailureKind(value)
    except ValueError:
        pass
    try:
        return FailureKind[str(value)]
    except KeyError:
        raise InvalidFailureError("kind", detail=f"unknown failure kind {value!r}") from None


def _snapshot_args(args: Mapping[str, Any] | None) -> Mapping[str, Any]:
    if not args:
        return MappingProxyType({})
    return MappingProxyType(dict(args))


def _snapshot_details(details: Iterable[Failure[Any]] | None) -> tuple[Failure[Any], ...]:
    if details is None:
        return ()
    return tuple(details)


def _export(value: Any) -> Any:
    if isinstance(value, Failure):
        return value.asdict()
    if isinstance(value, dict):
        return {key: _export(item) for key, item in value.items()}
    if type(value) in (list, tuple):
        return type(value)(_export(item) for item in value)
    return value


def _describe_cause(cause: BaseException | None) -> str:
    if cause is None:
        return "None"
    cause_type = type(cause)
    return f"{cause_type.__module__}.{cause_type.__qualname__}"


# ==============================================================================
# FAILURE VALUE
# ==============================================================================


@dataclass(slots=True, frozen=True, eq=False, repr=False)
class Failure(Generic[T]):
    """Classified failure with optional metadata, nested details and payload.

    Attributes:
        kind: Domain category of the failure.
        message: Human readable description.
        reason: Optional extra explanation.
        code: Optional application-defined error code.
        i18n_key: Optional key into an external message catalog.
        i18n_args: Read-only snapshot of the message catalog arguments.
        details: Nested failures describing sub-parts of this one.
        data: Optional application payload, held by reference.
        cause: Optional underlying exception, held by reference. Ignored by
            ``==``, ``hash`` and ``repr`` and never serialized.
    """

    kind: FailureKind
    message: str
    reason: str | None = None
    code: str | None = None
    i18n_key: str | None = None
    i18n_args: Mapping[str, Any] = field(default_factory=dict)
    details: tuple[Failure[Any], ...] = ()
    data: T | None = None
    cause: BaseException | None = None

    def __post_init__(self) -> None:  # noqa: D401 - dataclass validation
        """Validate required fields and freeze the collections."""

        kind = _coerce_kind(self.kind)
        if self.message is None:
            raise InvalidFailureError("message")
        if not isinstance(self.message, str):
            raise InvalidFailureError(
                "message", detail=f"expected text, got {type(self.message).__name__}"
            )
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "i18n_args", _snapshot_args(self.i18n_args))
        object.__setattr__(self, "details", _snapshot_details(self.details))

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------
    @classmethod
    def of(cls, kind: FailureKind | str, message: str, data: U | None = None) -> Failure[U]:
        """Build a bare failure of ``kind`` carrying ``data``."""
        return cls(kind, message, data=data)

    @classmethod
    def business(cls, message: str, data: U | None = None) -> Failure[U]:
        return cls.of(FailureKind.BUSINESS, message, data)

    @classmethod
    def validation(cls, message: str, data: U | None = None) -> Failure[U]:
        return cls.of(FailureKind.VALIDATION, message, data)

    @classmethod
    def technical(cls, message: str, data: U | None = None) -> Failure[U]:
        return cls.of(FailureKind.TECHNICAL, message, data)

    @classmethod
    def authorization(cls, message: str, data: U | None = None) -> Failure[U]:
        return cls.of(FailureKind.AUTHORIZATION, message, data)

    @classmethod
    def not_found(cls, message: str, data: U | None = None) -> Failure[U]:
        return cls.of(FailureKind.NOT_FOUND, message, data)

    @classmethod
    def conflict(cls, message: str, data: U | None = None) -> Failure[U]:
        return cls.of(FailureKind.CONFLICT, message, data)

    @classmethod
    def business_caused_by(cls, message: str, cause: BaseException | None) -> Failure[Any]:
        return cls.of(FailureKind.BUSINESS, message).with_cause(cause)

    @classmethod
    def validation_caused_by(cls, message: str, cause: BaseException | None) -> Failure[Any]:
        return cls.of(FailureKind.VALIDATION, message).with_cause(cause)

    @classmethod
    def technical_caused_by(cls, message: str, cause: BaseException | None) -> Failure[Any]:
        return cls.of(FailureKind.TECHNICAL, message).with_cause(cause)

    # ------------------------------------------------------------------
    # Derivations
    # ------------------------------------------------------------------
    def with_reason(self, reason: str | None) -> Failure[T]:
        return replace(self, reason=reason)

    def with_code(self, code: str | None) -> Failure[T]:
        return replace(self, code=code)

    def with_i18n(self, i18n_key: str | None, args: Mapping[str, Any] | None = None) -> Failure[T]:
        """Set the message catalog key; omitted ``args`` reset the arguments to empty."""
        return replace(self, i18n_key=i18n_key, i18n_args=args)

    def with_details(self, details: Iterable[Failure[Any]] | None) -> Failure[T]:
        return replace(self, details=details)

    def with_data(self, data: U) -> Failure[U]:
        """Return a copy carrying ``data``; the payload type follows the new value."""
        return Failure(
            self.kind,
            self.message,
            self.reason,
            self.code,
            self.i18n_key,
            self.i18n_args,
            self.details,
            data,
            self.cause,
        )

    def with_cause(self, cause: BaseException | None) -> Failure[T]:
        return replace(self, cause=cause)

    def has_cause(self) -> bool:
        return self.cause is not None

    # ------------------------------------------------------------------
    # Exporting
    # ------------------------------------------------------------------
    def asdict(self) -> dict[str, Any]:
        """Return a plain dictionary of the visible fields; ``cause`` is omitted.

        Failures nested inside ``data`` or ``i18n_args`` (directly or within
        dicts, lists and tuples) are exported as dictionaries too.
        """
        return {
            "kind": self.kind.value,
            "message": self.message,
            "reason": self.reason,
            "code": self.code,
            "i18n_key": self.i18n_key,
            "i18n_args": _export(dict(self.i18n_args)),
            "details": [detail.asdict() for detail in self.details],
            "data": _export(self.data),
        }

    def raise_error(self) -> NoReturn:
        """Raise this failure wrapped in a :class:`FailureError`.

        The cause is not chained, so tracebacks never show it.
        """
        raise FailureError(self) from None

    # ------------------------------------------------------------------
    # Value semantics (cause excluded)
    # ------------------------------------------------------------------
    def _visible_fields(self) -> tuple[Any, ...]:
        return (
            self.kind,
            self.message,
            self.reason,
            self.code,
            self.i18n_key,
            dict(self.i18n_args),
            self.details,
            self.data,
        )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Failure):
            return NotImplemented
        return self._visible_fields() == other._visible_fields()

    def __hash__(self) -> int:
        return structural_hash(self._visible_fields())

    def __repr__(self) -> str:
        # Only the cause's type name is rendered, never its message or traceback.
        return (
            f"Failure[kind={self.kind.name}, message={self.message!r}, reason={self.reason!r}, "
            f"code={self.code!r}, i18n_key={self.i18n_key!r}, i18n_args={dict(self.i18n_args)!r}, "
            f"details={list(self.details)!r}, data={self.data!r}, "
            f"cause={_describe_cause(self.cause)}]"
        )

    def __reduce__(self) -> tuple[Any, ...]:
        return (
            Failure,
            (
                self.kind,
                self.message,
                self.reason,
                self.code,
                self.i18n_key,
                dict(self.i18n_args),
                self.details,
                self.data,
                self.cause,
            ),
        )


__all__ = ["Failure", "FailureKind"]
