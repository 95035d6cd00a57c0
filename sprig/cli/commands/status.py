"""Status command - show branches, staging areas and working tree changes."""

import click
from sprig.core.repository import Repository
from sprig.errors import IncorrectOperands, RepositoryNotFound
from sprig.operations.status import compute_status
from sprig.cli.output import format_status


@click.command('status')
@click.argument('operands', nargs=-1)
def status_cmd(operands):
    """
    Show the working tree status.

    Lists the branches (current one marked with *), staged additions and
    removals, modifications not staged for commit, and untracked files.
    """
    if operands:
        raise IncorrectOperands()

    repo = Repository.find_repository()
    if not repo:
        raise RepositoryNotFound()

    click.echo(format_status(compute_status(repo)))
