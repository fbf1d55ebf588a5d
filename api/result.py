"""Result type for flat error handling (like Rust's Result<T, E>).

Domain operations return ``Ok`` or ``Err`` instead of raising for expected
failures. Errors are ``AppError`` values tagged with an ``ErrorKind`` that
fixes their HTTP status and default message.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, TypeVar

T = TypeVar("T")
E = TypeVar("E")


class ErrorKind(Enum):
    """Application error variants: (status, default message)."""

    NOT_FOUND = (404, "not found")
    VALIDATION = (400, "validation error")
    INTERNAL = (500, "internal server error")

    def __init__(self, status: int, default_message: str) -> None:
        self.status = status
        self.default_message = default_message


@dataclass(frozen=True, slots=True)
class AppError:
    """Application error carrying a status-bearing kind and a message."""

    kind: ErrorKind
    message: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            object.__setattr__(self, "message", self.kind.default_message)

    @property
    def status(self) -> int:
        return self.kind.status

    def to_response(self) -> dict[str, str]:
        """Wire body for this error."""
        return {"error": self.message}


def NotFoundError(message: str | None = None) -> AppError:  # noqa: N802
    """Requested entity is absent (404)."""
    return AppError(ErrorKind.NOT_FOUND, message or "")


def ValidationError(message: str | None = None) -> AppError:  # noqa: N802
    """Input failed a domain rule (400)."""
    return AppError(ErrorKind.VALIDATION, message or "")


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Success result."""

    ok: ClassVar[bool] = True
    value: T


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Error result."""

    ok: ClassVar[bool] = False
    error: E


Result = Ok[T] | Err[E]


def ok(value: T) -> Ok[T]:
    """Wrap a value in the success variant."""
    return Ok(value)


def fail(error: E) -> Err[E]:
    """Wrap an error in the failure variant."""
    return Err(error)
