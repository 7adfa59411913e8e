# navgrid/errors.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .path import Path


class PathfindingErrorKind(Enum):
    NO_GRID = "no_grid"
    INVALID_START = "invalid_start"
    INVALID_GOAL = "invalid_goal"
    NO_PATH = "no_path"


class PathfindingError(Exception):
    """Raised by PathResult.unwrap() when the search failed."""

    def __init__(self, kind: PathfindingErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"PathfindingError({self.kind.name}, {self.message!r})"


@dataclass(frozen=True)
class PathResult:
    """
    Outcome of one find_path call: exactly one of `path` / `error` is set.

    Failures are returned, not raised, so callers can branch on
    `error.kind` (retry with other endpoints, treat NO_PATH as
    unreachable, ...). Use unwrap() to get exception semantics instead.
    """
    path: Optional[Path] = None
    error: Optional[PathfindingError] = None

    def __post_init__(self) -> None:
        if (self.path is None) == (self.error is None):
            raise ValueError("PathResult needs exactly one of path or error")

    @classmethod
    def success(cls, path: Path) -> "PathResult":
        return cls(path=path)

    @classmethod
    def failure(cls, kind: PathfindingErrorKind, message: str) -> "PathResult":
        return cls(error=PathfindingError(kind, message))

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[PathfindingErrorKind]:
        return None if self.error is None else self.error.kind

    def unwrap(self) -> Path:
        if self.error is not None:
            raise self.error
        return self.path

    def __bool__(self) -> bool:
        return self.ok
