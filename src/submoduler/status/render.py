"""Formatting of status results into report lines.

Functions here are pure: they return lines and leave printing to the caller.
"""

from submoduler.status.models import StatusResult


def render_last_commit(result: StatusResult, indent: str) -> list[str]:
    branch_info = f" ({result.branch})" if result.branch else ""
    if result.commit_summary is None:
        return [f"{indent}⚠️  No commit history found{branch_info}"]
    return [f"{indent}📝 Last commit{branch_info}: {result.commit_summary}"]


def render_tree_status(result: StatusResult, indent: str) -> list[str]:
    if result.status_error:
        return [f"{indent}✗ Error checking git status"]
    if result.tree_clean:
        return [f"{indent}✓ Working tree is clean"]

    lines = [f"{indent}✗ Working tree has changes:"]
    lines.extend(f"{indent}  {change}" for change in result.tree_changes)
    return lines


def render_status(result: StatusResult, indent: str) -> list[str]:
    """Render the last-commit line followed by the working-tree lines."""
    return render_last_commit(result, indent) + render_tree_status(result, indent)


def render_missing_directory(path: str | None, indent: str) -> str:
    return f"{indent}✗ Directory does not exist: {path or ''}"
