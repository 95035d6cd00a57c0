"""Failure kinds raised by Sprig operations.

Every user-facing failure is a subclass of :class:`SprigError`. Core code raises
these and never prints or exits; the CLI layer is the only place that turns them
into a message on stdout.
"""

from typing import Optional


class SprigError(Exception):
    """Base class for all Sprig failures."""

    kind = 'error'
    default_message = 'Unknown error.'

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class RepositoryNotFound(SprigError):
    kind = 'missing-repository'
    default_message = 'Not in an initialized Sprig directory.'


class RepositoryExists(SprigError):
    kind = 'repository-exists'
    default_message = 'A Sprig version-control system already exists in the current directory.'


class MissingFile(SprigError):
    kind = 'missing-file'
    default_message = 'File does not exist.'


class NothingToRemove(SprigError):
    kind = 'nothing-to-remove'
    default_message = 'No reason to remove the file.'


class EmptyMessage(SprigError):
    kind = 'empty-message'
    default_message = 'Please enter a commit message.'


class NothingToCommit(SprigError):
    kind = 'nothing-to-commit'
    default_message = 'No changes added to the commit.'


class NoSuchCommit(SprigError):
    kind = 'missing-commit'
    default_message = 'No commit with that id exists.'


class NoMatchingCommit(SprigError):
    kind = 'missing-commit'
    default_message = 'Found no commit with that message.'


class FileNotInCommit(SprigError):
    kind = 'missing-file'
    default_message = 'File does not exist in that commit.'


class NoSuchBranch(SprigError):
    kind = 'missing-branch'
    default_message = 'A branch with that name does not exist.'


class BranchExists(SprigError):
    kind = 'duplicate-branch'
    default_message = 'A branch with that name already exists.'


class CannotRemoveCurrent(SprigError):
    kind = 'remove-current-branch'
    default_message = 'Cannot remove the current branch.'


class AlreadyOnBranch(SprigError):
    kind = 'already-on-branch'
    default_message = 'No need to checkout the current branch.'


class UntrackedFileConflict(SprigError):
    kind = 'untracked-conflict'
    default_message = 'There is an untracked file in the way; delete it, or add and commit it first.'


class UncommittedChanges(SprigError):
    kind = 'uncommitted-changes'
    default_message = 'You have uncommitted changes.'


class MergeWithSelf(SprigError):
    kind = 'merge-with-self'
    default_message = 'Cannot merge a branch with itself.'


class IncorrectOperands(SprigError):
    kind = 'bad-operands'
    default_message = 'Incorrect operands.'


class NoCommand(SprigError):
    kind = 'bad-operands'
    default_message = 'Please enter a command.'


class UnknownCommand(SprigError):
    kind = 'bad-operands'
    default_message = 'No command with that name exists.'


class ObjectNotFound(SprigError):
    kind = 'missing-object'
    default_message = 'No object with that id exists.'
