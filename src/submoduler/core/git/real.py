"""Production Git implementation using subprocess.

This module provides the real Git implementation that executes actual git
commands via subprocess.
"""

import logging
import subprocess
from pathlib import Path

from submoduler.core.git.abc import Git, GitQuery, GitQueryResult, QueryFailure, QueryOutput

logger = logging.getLogger(__name__)

LAST_COMMIT_FORMAT = "%h %ad %an: %s"

QUERY_ARGS: dict[GitQuery, list[str]] = {
    GitQuery.BRANCH: ["branch", "--show-current"],
    GitQuery.LAST_COMMIT: ["log", "-1", f"--pretty=format:{LAST_COMMIT_FORMAT}", "--date=short"],
    GitQuery.SHORT_STATUS: ["status", "--short"],
}


# ============================================================================
# Production Implementation
# ============================================================================


class RealGit(Git):
    """Production implementation using subprocess.

    Each query runs exactly once; stderr is merged into stdout so the payload
    matches what a user would see in a terminal.
    """

    def __init__(self, executable: str = "git") -> None:
        self._executable = executable

    def run_query(self, query: GitQuery, cwd: Path) -> GitQueryResult:
        """Run a git query in the given working directory."""
        cmd = [self._executable, *QUERY_ARGS[query]]
        logger.debug("Running %s in %s", " ".join(cmd), cwd)

        try:
            result = subprocess.run(
                cmd,
                cwd=cwd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as e:
            # Executable missing or cwd unusable
            logger.debug("Could not run %s: %s", cmd[0], e)
            return QueryFailure(message=f"Command not found or not runnable: {cmd[0]} ({e})")

        logger.debug("%s exited with %d", query.value, result.returncode)
        if result.returncode != 0:
            return QueryFailure(message=result.stdout.strip(), exit_code=result.returncode)

        return QueryOutput(text=result.stdout)
