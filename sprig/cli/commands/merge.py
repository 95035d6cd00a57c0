"""Merge command - merge another branch into the current one."""

import click
from sprig.core.repository import Repository
from sprig.errors import IncorrectOperands, RepositoryNotFound
from sprig.operations.merge import CONFLICT, FAST_FORWARD
from sprig.cli.output import success, warning
from sprig.cli.commands.checkout import report_deleted_untracked


@click.command('merge')
@click.argument('operands', nargs=-1)
def merge_cmd(operands):
    """
    Merge the given branch into the current branch.

    If the branches have diverged, the changes since their split point are
    combined and recorded in a merge commit with two parents. Files changed
    differently on both sides get conflict markers; the merge commit is
    made anyway.

    Examples:
        sprig merge feature
    """
    if len(operands) != 1:
        raise IncorrectOperands()

    repo = Repository.find_repository()
    if not repo:
        raise RepositoryNotFound()

    result = repo.merge.merge(operands[0])

    if result.message:
        click.echo(result.message)

    if result.status == CONFLICT:
        for conflict in result.conflicts:
            click.echo(warning(f"CONFLICT in {conflict.path}"), err=True)
    elif result.status == FAST_FORWARD:
        report_deleted_untracked(result)
        click.echo(success(f"{repo.refs.current} is now at {result.commit_hash[:7]}"), err=True)
    elif result.commit_hash:
        click.echo(success(f"Merge commit {result.commit_hash[:7]} created"), err=True)
