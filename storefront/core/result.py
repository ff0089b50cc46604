"""Result types for railway-oriented programming.

Operations that can fail return a Result instead of raising. Callers branch
on the variant, which keeps every failure mode visible at the call site.

Usage:
    result = await lifecycle.verify(email, token)
    match result:
        case Success(value=record):
            print(f"Verified at: {record.created_at}")
        case Failure(error=error):
            print(f"Error: {error.code}")
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful operation outcome.

    Attributes:
        value: The produced value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed operation outcome.

    Attributes:
        error: The error describing the failure.
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]
