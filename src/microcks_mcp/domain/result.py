"""Result — success value or agent-friendly error message.

Use cases return a Result instead of raising, so adapters only ever
see plain text on the failure path::

    match result:
        case Success(value=services):
            ...
        case Error(message=message):
            ...
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, field_validator

T = TypeVar("T")


class Success(BaseModel, Generic[T]):
    """Success case: carries the value (never None)."""

    model_config = {"frozen": True}

    value: T

    @field_validator("value", mode="before")
    @classmethod
    def _reject_none(cls, value: Any) -> Any:
        if value is None:
            msg = "Success value cannot be None"
            raise ValueError(msg)
        return value


class Error(BaseModel):
    """Error case: carries a message with retry/abandon guidance."""

    model_config = {"frozen": True}

    message: str


Result = Success[T] | Error


def success(value: T) -> Success[T]:
    """Create a success result."""
    return Success(value=value)


def error(message: str) -> Error:
    """Create an error result."""
    return Error(message=message)
