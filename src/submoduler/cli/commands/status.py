"""Status command: report last commit and working-tree state for the parent
repository and each submodule declared in .gitmodules."""

import logging
import os

import click

from submoduler.cli.output import user_output
from submoduler.core.context import SubmodulerContext, create_context
from submoduler.core.gitmodules import SubmoduleInfo, read_gitmodules
from submoduler.status.collector import collect_status
from submoduler.status.render import render_missing_directory, render_status

logger = logging.getLogger(__name__)

# Enable debug logging if SUBMODULER_DEBUG environment variable is set
if os.getenv("SUBMODULER_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

PARENT_INDENT = "  "
SUBMODULE_INDENT = "    "


def _check_parent_status(ctx: SubmodulerContext) -> None:
    user_output(click.style("Parent Repository:", bold=True))
    result = collect_status(ctx.git, ctx.cwd)
    for line in render_status(result, PARENT_INDENT):
        user_output(line)
    user_output()


def _check_submodule_status(ctx: SubmodulerContext, submodule: SubmoduleInfo) -> None:
    user_output(f"  {submodule.name}:")

    # An empty path would resolve to the parent itself
    if not submodule.path or not (ctx.cwd / submodule.path).is_dir():
        user_output(render_missing_directory(submodule.path, SUBMODULE_INDENT))
        return

    submodule_dir = ctx.cwd / submodule.path
    logger.debug("Checking submodule %s at %s", submodule.name, submodule_dir)
    result = collect_status(ctx.git, submodule_dir)
    for line in render_status(result, SUBMODULE_INDENT):
        user_output(line)


def _check_children_status(ctx: SubmodulerContext) -> None:
    gitmodules_path = ctx.cwd / ctx.config.gitmodules_file
    if not gitmodules_path.exists():
        logger.debug("No %s in %s, skipping submodules", ctx.config.gitmodules_file, ctx.cwd)
        return

    user_output(click.style("Child Submodules:", bold=True))

    submodules = read_gitmodules(gitmodules_path)
    if not submodules:
        user_output("  ℹ No child submodules found")
        return

    for submodule in submodules:
        _check_submodule_status(ctx, submodule)


@click.command("status")
@click.pass_context
def status_cmd(click_ctx: click.Context) -> None:
    """Show last commit and working tree status of the parent and its submodules."""
    try:
        # Only create context if not already provided (e.g., by tests)
        if click_ctx.obj is None:
            click_ctx.obj = create_context()
        ctx: SubmodulerContext = click_ctx.obj

        user_output("Checking parent repository status...")
        user_output()

        _check_parent_status(ctx)
        _check_children_status(ctx)
    except Exception as e:
        logger.debug("Status check failed", exc_info=True)
        user_output(f"Error: {e}")
        raise SystemExit(1) from e
