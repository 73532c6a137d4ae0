"""Tests for loading [tool.submoduler] configuration."""

from pathlib import Path

from submoduler.cli.config import LoadedConfig, load_config


def test_load_config_without_pyproject(tmp_path: Path) -> None:
    assert load_config(tmp_path) == LoadedConfig(git_executable="git", gitmodules_file=".gitmodules")


def test_load_config_without_tool_section(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")

    assert load_config(tmp_path) == LoadedConfig()


def test_load_config_without_submoduler_section(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.ruff]\nline-length = 100\n", encoding="utf-8")

    assert load_config(tmp_path) == LoadedConfig()


def test_load_config_reads_values(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.submoduler]\ngit_executable = "/opt/git/bin/git"\ngitmodules_file = "modules.cfg"\n'
        'unknown = true\n',
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.git_executable == "/opt/git/bin/git"
    assert config.gitmodules_file == "modules.cfg"


def test_load_config_partial_section_keeps_defaults(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.submoduler]\ngit_executable = "git2"\n', encoding="utf-8"
    )

    config = load_config(tmp_path)

    assert config.git_executable == "git2"
    assert config.gitmodules_file == ".gitmodules"


def test_load_config_malformed_toml_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.submoduler\n", encoding="utf-8")

    assert load_config(tmp_path) == LoadedConfig()


def test_load_config_tool_not_a_table_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('tool = "x"\n', encoding="utf-8")

    assert load_config(tmp_path) == LoadedConfig()


def test_load_config_submoduler_not_a_table_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[tool]\nsubmoduler = 3\n', encoding="utf-8")

    assert load_config(tmp_path) == LoadedConfig()


def test_load_config_unreadable_pyproject_uses_defaults(tmp_path: Path) -> None:
    # A directory in place of the file fails to open
    (tmp_path / "pyproject.toml").mkdir()

    assert load_config(tmp_path) == LoadedConfig()
