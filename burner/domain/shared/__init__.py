"""Shared domain utilities for Burner.

This package provides common building blocks used across domain modules:

- Result monad for explicit error handling
- Base domain event infrastructure

Example usage:
    >>> from burner.domain.shared import Ok, Err, Result, is_ok
    >>>
    >>> def find_template(name: str) -> Result[str, str]:
    ...     if name == "missing":
    ...         return Err("Template not found")
    ...     return Ok(name)
"""

from burner.domain.shared.events import DomainEvent
from burner.domain.shared.result import Err, Ok, Result, is_err, is_ok

__all__ = [
    # Result monad
    "Ok",
    "Err",
    "Result",
    "is_ok",
    "is_err",
    # Domain events
    "DomainEvent",
]
