import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_GIT_EXECUTABLE = "git"
DEFAULT_GITMODULES_FILE = ".gitmodules"


@dataclass(frozen=True)
class LoadedConfig:
    """In-memory representation of `[tool.submoduler]` in pyproject.toml."""

    git_executable: str = DEFAULT_GIT_EXECUTABLE
    gitmodules_file: str = DEFAULT_GITMODULES_FILE


def load_config(repo_root: Path) -> LoadedConfig:
    """Load `[tool.submoduler]` from pyproject.toml if present; otherwise return defaults.

    The pyproject.toml belongs to the repository being inspected, so a file that
    cannot be read or parsed, or a section of the wrong shape, falls back to
    defaults instead of failing the report.

    Example config:
      [tool.submoduler]
      git_executable = "/usr/local/bin/git"
      gitmodules_file = ".gitmodules"
    """

    pyproject_path = repo_root / "pyproject.toml"
    if not pyproject_path.exists():
        return LoadedConfig()

    try:
        with pyproject_path.open("rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.debug("Ignoring unreadable %s: %s", pyproject_path, e)
        return LoadedConfig()

    tool_section = data.get("tool")
    if not isinstance(tool_section, dict):
        return LoadedConfig()

    section = tool_section.get("submoduler")
    if not isinstance(section, dict):
        if section is not None:
            logger.debug("Ignoring [tool.submoduler] in %s: not a table", pyproject_path)
        return LoadedConfig()

    return LoadedConfig(
        git_executable=str(section.get("git_executable", DEFAULT_GIT_EXECUTABLE)),
        gitmodules_file=str(section.get("gitmodules_file", DEFAULT_GITMODULES_FILE)),
    )
