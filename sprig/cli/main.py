"""Main CLI entry point for Sprig."""

import click
from colorama import init

from sprig import __version__
from sprig.core.repository import Repository
from sprig.errors import NoCommand, SprigError, UnknownCommand
from sprig.utils.logger import configure_logging
from sprig.cli.output import BANNER
from sprig.cli.commands import (init_cmd, add_cmd, commit_cmd, rm_cmd, log_cmd,
                                global_log_cmd, find_cmd, status_cmd, checkout_cmd,
                                branch_cmd, rm_branch_cmd, reset_cmd, merge_cmd,
                                config_cmd)

# Initialize colorama for cross-platform colored output
init(autoreset=True)


class SprigGroup(click.Group):
    """
    Command group that owns the error-reporting boundary.

    Any SprigError raised while dispatching or running a command is
    printed as its plain message and the process exits with status 0.
    """

    def format_help(self, ctx, formatter):
        """Override to add banner before help text."""
        click.echo(BANNER)
        super().format_help(ctx, formatter)

    def resolve_command(self, ctx, args):
        cmd_name = args[0]
        if self.get_command(ctx, cmd_name) is None and not cmd_name.startswith('-'):
            raise UnknownCommand()
        return super().resolve_command(ctx, args)

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except SprigError as e:
            click.echo(e.message)
            ctx.exit(0)


@click.group(cls=SprigGroup, invoke_without_command=True)
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx):
    repo = Repository.find_repository()
    level = repo.config.log_level if repo else None
    configure_logging(level)

    if ctx.invoked_subcommand is None:
        raise NoCommand()


# Register commands
cli.add_command(init_cmd)
cli.add_command(add_cmd)
cli.add_command(commit_cmd)
cli.add_command(rm_cmd)
cli.add_command(log_cmd)
cli.add_command(global_log_cmd)
cli.add_command(find_cmd)
cli.add_command(status_cmd)
cli.add_command(checkout_cmd)
cli.add_command(branch_cmd)
cli.add_command(rm_branch_cmd)
cli.add_command(reset_cmd)
cli.add_command(merge_cmd)
cli.add_command(config_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
