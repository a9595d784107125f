"""Sinks for error text returned by remote services."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List, Optional


class ErrorLogger(ABC):
    """Base interface for receiving response error text."""

    @abstractmethod
    def log_error(self, error: str) -> None:
        """Record the raw error text of a failed request."""


class NullLogger(ErrorLogger):
    """Discards everything; used when the caller supplies no logger."""

    def log_error(self, error: str) -> None:  # noqa: D401 - inherited
        return None


class StdlibErrorLogger(ErrorLogger):
    """Forward error text to a :mod:`logging` logger."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger("json_http")

    def log_error(self, error: str) -> None:
        self.logger.error(error)


class MemoryLogger(ErrorLogger):
    """Keep error text in memory, handy for tests and diagnostics."""

    def __init__(self) -> None:
        self.errors: List[str] = []

    def log_error(self, error: str) -> None:
        self.errors.append(error)


NULL_LOGGER = NullLogger()


__all__ = ["ErrorLogger", "MemoryLogger", "NULL_LOGGER", "NullLogger", "StdlibErrorLogger"]
