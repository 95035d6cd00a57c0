"""Commit command - create a commit from staged changes."""

import click
from sprig.core.repository import Repository
from sprig.errors import IncorrectOperands, RepositoryNotFound
from sprig.operations.commit import create_commit
from sprig.cli.output import success


@click.command('commit')
@click.argument('operands', nargs=-1)
@click.option('-m', '--message', 'message_opt', help='Commit message')
def commit_cmd(operands, message_opt):
    """
    Record the staged changes as a new commit.

    Examples:
        sprig commit "Add notes"
        sprig commit -m "Add notes"
    """
    if len(operands) > 1 or (operands and message_opt is not None):
        raise IncorrectOperands()

    repo = Repository.find_repository()
    if not repo:
        raise RepositoryNotFound()

    message = operands[0] if operands else (message_opt or '')
    commit = create_commit(repo, message)
    click.echo(success(f"[{repo.refs.current} {commit.hash[:7]}] {message}"), err=True)
