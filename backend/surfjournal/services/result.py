"""Explicit outcome type for store reads."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ReadResult(Generic[T]):
    """
    Outcome of a read against the backing store.

    ``value`` is always usable: on failure it holds the empty default for
    the operation (empty list, ``None``, empty page) and ``error`` names
    what went wrong. Callers that need to react to the failure, such as the
    route handlers deciding to serve mock data, check ``failed``.
    """

    value: T
    source: str = "database"  # "database" | "cache"
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    @classmethod
    def failure(cls, default: T, exc: Exception) -> "ReadResult[T]":
        return cls(value=default, source="database", error=f"{type(exc).__name__}: {exc}")
