"""Fake Git implementation for testing.

FakeGit is an in-memory implementation that accepts pre-configured state
in its constructor. Construct instances directly with keyword arguments.
"""

from pathlib import Path

from submoduler.core.git.abc import Git, GitQuery, GitQueryResult, QueryFailure


class FakeGit(Git):
    """In-memory fake implementation of git queries.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults.

    Queries that were not configured for a directory return a QueryFailure,
    which is how an unavailable git executable looks to callers.

    Examples:
        >>> git = FakeGit(
        ...     results={
        ...         Path("/repo"): {
        ...             GitQuery.BRANCH: QueryOutput("main\\n"),
        ...             GitQuery.SHORT_STATUS: QueryOutput(""),
        ...         }
        ...     }
        ... )
        >>> git.run_query(GitQuery.BRANCH, Path("/repo"))
        QueryOutput(text='main\\n')
    """

    def __init__(
        self,
        *,
        results: dict[Path, dict[GitQuery, GitQueryResult]] | None = None,
        raise_on_query: Exception | None = None,
    ) -> None:
        """Create FakeGit with pre-configured state.

        Args:
            results: Mapping of directory -> query -> result
            raise_on_query: Exception raised from every run_query() call, for
                simulating unexpected failures
        """
        self._results = results or {}
        self._raise_on_query = raise_on_query
        self._query_calls: list[tuple[GitQuery, Path]] = []

    @property
    def query_calls(self) -> list[tuple[GitQuery, Path]]:
        """Get the list of (query, cwd) calls that were made.

        This property is for test assertions only.
        """
        return self._query_calls

    def run_query(self, query: GitQuery, cwd: Path) -> GitQueryResult:
        self._query_calls.append((query, cwd))
        if self._raise_on_query is not None:
            raise self._raise_on_query

        per_dir = self._results.get(cwd, {})
        if query not in per_dir:
            return QueryFailure(message=f"git: {query.value} not available", exit_code=None)
        return per_dir[query]
