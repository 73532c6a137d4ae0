"""Data models for status information."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StatusResult:
    """Last commit and working-tree state of one repository.

    Produced fresh for the parent and for each submodule; never cached.

    Attributes:
        branch: Current branch name, or None if unknown or detached
        commit_summary: "<short-hash> <date> <author>: <subject>", or None if
            the repository has no readable history
        tree_clean: True only when the status query succeeded with no entries
        tree_changes: Trimmed short-status lines, in git's order
        status_error: True when the status query itself failed
    """

    branch: str | None
    commit_summary: str | None
    tree_clean: bool
    tree_changes: tuple[str, ...] = ()
    status_error: bool = False
