"""Result monad for explicit error handling in domain operations.

Operations that can fail for expected reasons (a template that does not
exist, a destination that is already taken) return a Result instead of
raising, so the CLI can branch on the outcome without try/except.

Example usage:
    >>> def pick_template(name: str) -> Result[str, str]:
    ...     if name not in ("dotnet", "web"):
    ...         return Err(f"Template not found: {name}")
    ...     return Ok(name)
    ...
    >>> result = pick_template("web")
    >>> if is_ok(result):
    ...     print(f"Using {result.value}")
    Using web
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Represents a successful result containing a value.

    Attributes:
        value: The success value of type T.
    """

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Represents a failed result containing an error.

    Attributes:
        error: The error value of type E.
    """

    error: E


# Using Union here as TypeVar aliases don't work with | syntax at runtime
Result = Union[Ok[T], Err[E]]  # noqa: UP007


def is_ok(result: Ok[T] | Err[E]) -> bool:
    """Check if a result is successful.

    Args:
        result: The result to check.

    Returns:
        True if the result is Ok, False if it is Err.
    """
    return isinstance(result, Ok)


def is_err(result: Ok[T] | Err[E]) -> bool:
    """Check if a result is an error.

    Args:
        result: The result to check.

    Returns:
        True if the result is Err, False if it is Ok.
    """
    return isinstance(result, Err)
