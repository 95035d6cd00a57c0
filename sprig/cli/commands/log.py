"""History commands: log, global-log and find."""

import click
from sprig.core.repository import Repository
from sprig.errors import IncorrectOperands, RepositoryNotFound
from sprig.operations.commit import all_commits, find_by_message, first_parent_history
from sprig.cli.output import format_log_entry


def _find_repo():
    repo = Repository.find_repository()
    if not repo:
        raise RepositoryNotFound()
    return repo


@click.command('log')
@click.argument('operands', nargs=-1)
def log_cmd(operands):
    """
    Show the history of the current branch.

    Starting at the current commit, follows first parents back to the
    initial commit. Second parents of merges are not followed.
    """
    if operands:
        raise IncorrectOperands()

    repo = _find_repo()
    for commit_hash, commit in first_parent_history(repo):
        click.echo(format_log_entry(commit_hash, commit))


@click.command('global-log')
@click.argument('operands', nargs=-1)
def global_log_cmd(operands):
    """Show every commit ever made, in hash order."""
    if operands:
        raise IncorrectOperands()

    repo = _find_repo()
    for commit_hash, commit in all_commits(repo):
        click.echo(format_log_entry(commit_hash, commit))


@click.command('find')
@click.argument('operands', nargs=-1)
def find_cmd(operands):
    """
    Print the hash of every commit with the given message.

    Examples:
        sprig find "initial commit"
    """
    if len(operands) != 1:
        raise IncorrectOperands()

    repo = _find_repo()
    for commit_hash in find_by_message(repo, operands[0]):
        click.echo(commit_hash)
