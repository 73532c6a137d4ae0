"""Collect a StatusResult by running the git queries for one directory."""

import logging
from pathlib import Path

from submoduler.core.git.abc import Git, GitQuery, QueryFailure
from submoduler.status.models import StatusResult

logger = logging.getLogger(__name__)


def get_branch(git: Git, cwd: Path) -> str | None:
    result = git.run_query(GitQuery.BRANCH, cwd)
    if isinstance(result, QueryFailure):
        return None
    branch = result.text.strip()
    return branch if branch else None


def get_commit_summary(git: Git, cwd: Path) -> str | None:
    result = git.run_query(GitQuery.LAST_COMMIT, cwd)
    if isinstance(result, QueryFailure):
        logger.debug("No commit history in %s: %s", cwd, result.message)
        return None
    summary = result.text.strip()
    return summary if summary else None


def collect_status(git: Git, cwd: Path) -> StatusResult:
    """Run the branch, last-commit and short-status queries for a directory.

    Failed queries are folded into the result; this never raises for git errors.
    """
    branch = get_branch(git, cwd)
    commit_summary = get_commit_summary(git, cwd)

    status = git.run_query(GitQuery.SHORT_STATUS, cwd)
    if isinstance(status, QueryFailure):
        logger.debug("Status query failed in %s: %s", cwd, status.message)
        return StatusResult(
            branch=branch,
            commit_summary=commit_summary,
            tree_clean=False,
            status_error=True,
        )

    changes = tuple(line.strip() for line in status.text.splitlines() if line.strip())
    return StatusResult(
        branch=branch,
        commit_summary=commit_summary,
        tree_clean=not changes,
        tree_changes=changes,
    )
