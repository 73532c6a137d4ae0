"""Narrow git query interface.

This module isolates every git subprocess call behind a single method, making
status reporting testable without a real repository.

Architecture:
- GitQuery: Closed set of queries the status reporter needs
- QueryOutput / QueryFailure: Result of running a query
- Git: Abstract base class defining the interface
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class GitQuery(Enum):
    """The three git queries used by status reporting."""

    BRANCH = "branch"
    LAST_COMMIT = "last_commit"
    SHORT_STATUS = "short_status"


@dataclass(frozen=True)
class QueryOutput:
    """Successful query: git exited with status 0."""

    text: str


@dataclass(frozen=True)
class QueryFailure:
    """Failed query: non-zero exit, or git could not be started at all.

    exit_code is None when the process never ran (e.g. executable not found).
    """

    message: str
    exit_code: int | None = None


GitQueryResult = QueryOutput | QueryFailure


# ============================================================================
# Abstract Interface
# ============================================================================


class Git(ABC):
    """Abstract interface for git queries.

    All implementations (real and fake) must implement this interface.
    Expected failures are returned as QueryFailure, never raised.
    """

    @abstractmethod
    def run_query(self, query: GitQuery, cwd: Path) -> GitQueryResult:
        """Run a git query in the given working directory.

        Args:
            query: Which query to run
            cwd: Directory the query runs in

        Returns:
            QueryOutput with the combined stdout/stderr text on success,
            QueryFailure otherwise
        """
        ...
