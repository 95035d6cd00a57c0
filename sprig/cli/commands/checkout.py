"""Checkout and reset commands - synchronize the working tree with a commit."""

import click
from sprig.core.repository import Repository
from sprig.errors import IncorrectOperands, RepositoryNotFound
from sprig.operations.checkout import checkout_branch, checkout_file, reset
from sprig.cli.output import success, warning


class CheckoutCommand(click.Command):
    """
    Command that keeps its raw operands.

    click consumes the ``--`` separator while parsing, but checkout needs it
    to tell ``checkout <branch>`` apart from ``checkout -- <file>``.
    """

    def parse_args(self, ctx, args):
        ctx.meta['checkout.operands'] = list(args)
        return super().parse_args(ctx, args)


def _find_repo():
    repo = Repository.find_repository()
    if not repo:
        raise RepositoryNotFound()
    return repo


def report_deleted_untracked(result):
    """Warn about working files removed that no commit was tracking."""
    for path in result.deleted_untracked:
        click.echo(warning(f"Deleted untracked file: {path}"), err=True)


@click.command('checkout', cls=CheckoutCommand)
@click.argument('operands', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def checkout_cmd(ctx, operands):
    """
    Restore a file or switch branches.

    \b
    Forms:
        sprig checkout -- <file>            file from the current commit
        sprig checkout <commit> -- <file>   file from the given commit
        sprig checkout <branch>             switch to a branch

    Switching branches replaces the whole working tree with the branch's
    snapshot. Files the branch does not track are deleted, even ones that
    were never added.
    """
    raw = ctx.meta.get('checkout.operands', list(operands))

    if len(raw) == 2 and raw[0] == '--':
        repo = _find_repo()
        checkout_file(repo, repo.relative_path(raw[1]))
    elif len(raw) == 3 and raw[1] == '--':
        repo = _find_repo()
        checkout_file(repo, repo.relative_path(raw[2]), commit_ref=raw[0])
    elif len(raw) == 1 and raw[0] != '--':
        repo = _find_repo()
        result = checkout_branch(repo, raw[0])
        report_deleted_untracked(result)
        click.echo(success(f"Switched to branch '{raw[0]}'"), err=True)
    else:
        raise IncorrectOperands()


@click.command('reset')
@click.argument('operands', nargs=-1)
def reset_cmd(operands):
    """
    Check out a commit and move the current branch to it.

    Accepts a full commit hash or an abbreviation of at least six characters.

    Examples:
        sprig reset 1a2b3c4d
    """
    if len(operands) != 1:
        raise IncorrectOperands()

    repo = _find_repo()
    result = reset(repo, operands[0])
    report_deleted_untracked(result)
    click.echo(success(f"{repo.refs.current} is now at {result.commit_hash[:7]}"), err=True)
