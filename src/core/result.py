"""Result types for railway-oriented programming.

This module implements the Result pattern to handle operations that can fail
without using exceptions. Store adapters, the session terminator and the
secure logout handler all return Results so that failures flow as data.

Usage:
    async def clear(self) -> Result[None, ClearError]:
        if self._storage is None:
            return Failure(error=ClearError(...))
        await self._storage.clear()
        return Success(value=None)

    match await adapter.clear():
        case Success():
            print("Store cleared")
        case Failure(error=err):
            print(f"Clear failed: {err.message}")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
