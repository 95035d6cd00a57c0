"""Branch commands - create and remove branches."""

import click
from sprig.core.repository import Repository
from sprig.errors import IncorrectOperands, RepositoryNotFound
from sprig.cli.output import success


def _registry_for(operands):
    if len(operands) != 1:
        raise IncorrectOperands()

    repo = Repository.find_repository()
    if not repo:
        raise RepositoryNotFound()
    return repo.refs


@click.command('branch')
@click.argument('operands', nargs=-1)
def branch_cmd(operands):
    """
    Create a new branch at the current commit.

    The current branch does not change.

    Examples:
        sprig branch feature
    """
    refs = _registry_for(operands)
    commit_hash = refs.add_branch(operands[0])
    refs.save()
    click.echo(success(f"Created branch '{operands[0]}' at {commit_hash[:7]}"), err=True)


@click.command('rm-branch')
@click.argument('operands', nargs=-1)
def rm_branch_cmd(operands):
    """
    Delete a branch pointer.

    Commits made on the branch are kept.

    Examples:
        sprig rm-branch feature
    """
    refs = _registry_for(operands)
    refs.remove_branch(operands[0])
    refs.save()
    click.echo(success(f"Deleted branch '{operands[0]}'"), err=True)
