import click

from submoduler.cli.commands.status import status_cmd

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="submoduler")
def cli() -> None:
    """Report git status for a parent repository and its submodules."""
    # The context is built by each command so that --help never reads config


cli.add_command(status_cmd)


def main() -> None:
    """CLI entry point used by the `submoduler` console script."""
    cli()
