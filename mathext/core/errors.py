"""
Result Monad & Error Types

Precondition checkers report through a Rust-style Result[T, E] instead of
raising, so callers can decide whether a violation is fatal. Operations that
must fail (argument errors, rejected configuration) raise MathExtError
subclasses.

Error Code Ranges:
    1000-1999: Argument errors
    2000-2999: Precondition errors
    5000-5999: Configuration errors
"""

from __future__ import annotations

from enum import Enum
from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Generic,
    Literal,
    NoReturn,
    Optional,
    TypeVar,
    Union,
    final,
)


# =============================================================================
# TYPE VARIABLES
# =============================================================================
T = TypeVar("T")  # Success value type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Transform result type


# =============================================================================
# RESULT MONAD: SUCCESS VARIANT
# =============================================================================
@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """
    Success variant of Result.

    Example:
        result: Result[int, str] = Ok(42)
        if result.is_ok():
            value = result.unwrap()
    """
    _value: T

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def unwrap(self) -> T:
        return self._value

    def unwrap_or(self, default: T) -> T:
        return self._value

    def map(self, fn: Callable[[T], U]) -> "Ok[U]":
        """Apply transformation to success value."""
        return Ok(fn(self._value))

    def and_then(self, fn: Callable[[T], "Result[U, Any]"]) -> "Result[U, Any]":
        """Chain another fallible step."""
        return fn(self._value)

    @property
    def value(self) -> T:
        return self._value

    @property
    def error(self) -> None:
        return None

    def __repr__(self) -> str:
        return f"Ok({self._value!r})"

    def __bool__(self) -> Literal[True]:
        return True


# =============================================================================
# RESULT MONAD: ERROR VARIANT
# =============================================================================
@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """
    Error variant of Result.

    Example:
        result: Result[None, PreconditionError] = check_ascending([3, 1])
        if result.is_err():
            raise result.error
    """
    _error: E

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def unwrap(self) -> NoReturn:
        """
        Raises:
            RuntimeError: Always, with error context
        """
        raise RuntimeError(f"Called unwrap() on Err: {self._error}")

    def unwrap_or(self, default: T) -> T:
        return default

    def map(self, fn: Callable[[Any], U]) -> "Err[E]":
        """No-op on error variant - propagates error unchanged."""
        return self

    def and_then(self, fn: Callable[[Any], "Result[U, E]"]) -> "Err[E]":
        return self

    @property
    def value(self) -> None:
        return None

    @property
    def error(self) -> E:
        return self._error

    def __repr__(self) -> str:
        return f"Err({self._error!r})"

    def __bool__(self) -> Literal[False]:
        return False


Result = Union[Ok[T], Err[E]]


# =============================================================================
# ERROR TAXONOMY
# =============================================================================
class ErrorCode(Enum):
    """Canonical error codes."""
    # Argument errors (1000-1999)
    INVALID_ARGUMENT = 1001
    INVALID_ARGUMENT_LENGTH_MISMATCH = 1002

    # Precondition errors (2000-2999)
    PRECONDITION_NOT_ASCENDING = 2001
    PRECONDITION_DUPLICATE = 2002

    # Configuration errors (5000-5999)
    CONFIG_INVALID = 5001


class MathExtError(Exception):
    """
    Base error type for all mathext failures.

    Carries a machine-readable code and details alongside the message so
    failures can be logged as structured records.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize for logging."""
        return {
            "code": self.code.value,
            "code_name": self.code.name,
            "message": self.message,
            "details": self.details,
        }


class InvalidArgumentError(MathExtError):
    """Argument rejected before any computation."""

    @classmethod
    def length_mismatch(
        cls, name_a: str, len_a: int, name_b: str, len_b: int
    ) -> "InvalidArgumentError":
        return cls(
            code=ErrorCode.INVALID_ARGUMENT_LENGTH_MISMATCH,
            message=f"Length mismatch: {name_a}={len_a}, {name_b}={len_b}",
            details={name_a: len_a, name_b: len_b},
        )


class PreconditionError(MathExtError):
    """Input violates an ordering precondition (debug checks only)."""

    @classmethod
    def not_ascending(cls, name: str, index: int, prev: Any, current: Any) -> "PreconditionError":
        return cls(
            code=ErrorCode.PRECONDITION_NOT_ASCENDING,
            message=f"'{name}' is not ascending at index {index}: {prev!r} > {current!r}",
            details={"name": name, "index": index, "prev": prev, "current": current},
        )

    @classmethod
    def duplicate(cls, name: str, index: int, value: Any) -> "PreconditionError":
        return cls(
            code=ErrorCode.PRECONDITION_DUPLICATE,
            message=f"'{name}' has duplicate {value!r} at index {index}",
            details={"name": name, "index": index, "value": value},
        )


class ConfigError(MathExtError):
    """Error in configuration."""

    @classmethod
    def invalid(cls, param: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID,
            message=f"Invalid config '{param}': {reason}",
            details={"param": param, "value": value, "reason": reason},
        )
