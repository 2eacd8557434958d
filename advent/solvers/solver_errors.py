"""
Solver errors and search limits.
"""

from __future__ import annotations

import os
from typing import Optional

DEFAULT_SEARCH_LIMIT = 50_000_000
SEARCH_LIMIT_MESSAGE = "Search node budget exhausted before the search space was covered."


class PuzzleError(RuntimeError):
    """
    Base class for every failure raised while parsing or solving a puzzle.
    """

    def __init__(
        self,
        message: str = "",
        *,
        day: Optional[int] = None,
        detail: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.day = day
        self.detail = detail

    def __repr__(self) -> str:
        parts = [repr(str(self))]
        if self.day is not None:
            parts.append(f"day={self.day}")
        if self.detail is not None:
            parts.append(f"detail={self.detail!r}")
        return f"{type(self).__name__}({', '.join(parts)})"


class InputError(PuzzleError, ValueError):
    """
    Raised when a puzzle input is malformed: an unparsable line, an unknown
    token, an inconsistent grid, or missing data the puzzle needs.
    """


class NoSolutionError(PuzzleError):
    """
    Raised when the input is well formed but the requested answer does not
    exist (no path, no marker, no divider, ...).
    """


class SearchLimitExceededError(PuzzleError):
    """
    Raised when a bounded search crosses its configured node budget.
    """

    def __init__(
        self,
        message: str = SEARCH_LIMIT_MESSAGE,
        *,
        limit: Optional[int] = None,
        observed: Optional[int] = None,
        context: Optional[str] = None,
        day: Optional[int] = None,
    ) -> None:
        super().__init__(message, day=day, detail=context)
        self.limit = limit
        self.observed = observed
        self.context = context


def parse_int(token: str, *, day: Optional[int] = None) -> int:
    """int() that reports failures as InputError, chaining the ValueError."""
    try:
        return int(token)
    except ValueError as exc:
        raise InputError(f"Invalid integer: {token!r}", day=day) from exc


def resolve_search_limit(limit: Optional[int] = None) -> int:
    """
    Resolve the node budget for bounded searches.

    Priority:
    1) explicit limit argument
    2) env ADVENT_SEARCH_LIMIT
    3) DEFAULT_SEARCH_LIMIT
    """
    raw = limit
    if raw is None:
        raw = os.getenv("ADVENT_SEARCH_LIMIT")
    if raw is None:
        return DEFAULT_SEARCH_LIMIT

    try:
        resolved = int(raw)
        if resolved > 0:
            return resolved
    except (TypeError, ValueError):
        pass
    return DEFAULT_SEARCH_LIMIT
