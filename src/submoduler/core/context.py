"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from submoduler.cli.config import LoadedConfig, load_config
from submoduler.core.git.abc import Git
from submoduler.core.git.real import RealGit


@dataclass(frozen=True)
class SubmodulerContext:
    """Immutable context holding all dependencies for submoduler operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    git: Git
    cwd: Path  # Parent repository root: the directory the CLI was invoked from
    config: LoadedConfig

    @staticmethod
    def for_test(
        git: Git,
        cwd: Path,
        config: LoadedConfig | None = None,
    ) -> "SubmodulerContext":
        """Create a context for tests, with default config unless one is given.

        Example:
            >>> ctx = SubmodulerContext.for_test(FakeGit(), tmp_path)
            >>> result = runner.invoke(cli, ["status"], obj=ctx)
        """
        return SubmodulerContext(
            git=git,
            cwd=cwd,
            config=config if config is not None else LoadedConfig(),
        )


def create_context() -> SubmodulerContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.
    """
    cwd = Path.cwd()
    config = load_config(cwd)
    return SubmodulerContext(
        git=RealGit(executable=config.git_executable),
        cwd=cwd,
        config=config,
    )
