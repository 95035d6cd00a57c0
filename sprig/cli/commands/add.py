"""Add and rm commands - stage files for the next commit."""

import click
from sprig.core.repository import Repository
from sprig.errors import IncorrectOperands, RepositoryNotFound


def _single_path(operands):
    if len(operands) != 1:
        raise IncorrectOperands()
    return operands[0]


@click.command('add')
@click.argument('operands', nargs=-1)
def add_cmd(operands):
    """
    Stage a file for addition.

    The file's current content is copied into the staging area. Adding a
    file identical to the committed version unstages it instead.

    Examples:
        sprig add notes.txt
    """
    path = _single_path(operands)

    repo = Repository.find_repository()
    if not repo:
        raise RepositoryNotFound()

    repo.index.stage_addition(repo.relative_path(path))


@click.command('rm')
@click.argument('operands', nargs=-1)
def rm_cmd(operands):
    """
    Unstage a file, and stage its removal if it is tracked.

    A tracked file is also deleted from the working tree.

    Examples:
        sprig rm notes.txt
    """
    path = _single_path(operands)

    repo = Repository.find_repository()
    if not repo:
        raise RepositoryNotFound()

    repo.index.stage_removal(repo.relative_path(path))
