"""Outcome of a single fetch call.

Why a sum type instead of exceptions:
- Every failure mode is a named value the caller has to look at.
- Exactly one of `Success` / `Failure` exists per call; there is no
  half-populated result.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Failure taxonomy of the remote data client."""

    CONFIG_MISSING = "config_missing"
    NETWORK_ERROR = "network_error"
    REMOTE_ERROR = "remote_error"
    PARSE_ERROR = "parse_error"

    def label(self) -> str:
        """Human readable label for CLI output."""

        return self.value.replace("_", " ")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    message: str
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        return False

    def unwrap_or(self, default: T) -> T:
        return default

    def __str__(self) -> str:
        return f"{self.kind.label()}: {self.message}"


FetchResult = Union[Success[T], Failure]
