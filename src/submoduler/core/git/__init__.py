"""Git query gateway."""

from submoduler.core.git.abc import Git, GitQuery, GitQueryResult, QueryFailure, QueryOutput

__all__ = ["Git", "GitQuery", "GitQueryResult", "QueryFailure", "QueryOutput"]
