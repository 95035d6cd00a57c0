"""Initialize a new Sprig repository."""

import click
from sprig.core.repository import Repository
from sprig.errors import IncorrectOperands
from sprig.cli.output import success


@click.command('init')
@click.argument('operands', nargs=-1)
def init_cmd(operands):
    """
    Initialize a new Sprig repository in the current directory.

    Creates the .sprig directory, the initial commit and the first branch
    (named by core.defaultbranch, 'master' unless configured).

    Examples:
        sprig init
    """
    if operands:
        raise IncorrectOperands()

    repo = Repository('.').init()
    click.echo(success(f"Initialized empty Sprig repository in {repo.sprig_dir}"), err=True)
