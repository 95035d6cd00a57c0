"""Commit creation and history traversal."""

from datetime import datetime
from typing import Iterator, List, Optional, Tuple

from sprig.core.objects import Commit
from sprig.errors import EmptyMessage, NoMatchingCommit, NothingToCommit
from sprig.utils.logger import get_logger

logger = get_logger("operations.commit")


def create_commit(
    repo,
    message: str,
    merge_parent: Optional[str] = None,
    moment: Optional[datetime] = None
) -> Commit:
    """
    Record the staged changes as a new commit on the current branch.

    The new snapshot starts as a copy of the current commit's snapshot.
    Staged additions overwrite or add entries (their content is stored as
    blobs) and staged removals delete entries. The current branch is moved
    to the new commit and the staging index is cleared.

    Args:
        repo: Repository instance
        message: Commit message
        merge_parent: Second parent hash when recording a merge
        moment: Commit time (defaults to now)

    Returns:
        Commit: The persisted commit

    Raises:
        EmptyMessage: If the message is blank
        NothingToCommit: If nothing is staged and this is not a merge
    """
    if not message or not message.strip():
        raise EmptyMessage()

    index = repo.index
    additions = index.staged_additions()
    removals = index.staged_removals()

    if not additions and not removals and merge_parent is None:
        raise NothingToCommit()

    parent_hash = repo.refs.current_commit_hash()
    parent = repo.read_commit(parent_hash)

    snapshot = dict(parent.snapshot)
    for path in additions:
        snapshot[path] = repo.put_blob(index.staged_content(path))
    for path in removals:
        snapshot.pop(path, None)

    commit = Commit.create(
        message=message,
        parent=parent_hash,
        snapshot=snapshot,
        merge_parent=merge_parent,
        moment=moment
    )
    commit_hash = repo.write_commit(commit)

    repo.refs.move_current_branch(commit_hash)
    repo.refs.save()
    index.clear()

    logger.info(
        "commit created",
        commit=commit_hash[:7],
        branch=repo.refs.current,
        added=len(additions),
        removed=len(removals),
    )
    return commit


def first_parent_history(repo, start_hash: Optional[str] = None) -> Iterator[Tuple[str, Commit]]:
    """
    Walk history from a commit back to the root along first parents.

    Args:
        repo: Repository instance
        start_hash: Commit to start from (defaults to the current commit)

    Yields:
        (commit_hash, commit) tuples, newest first
    """
    commit_hash = start_hash or repo.refs.current_commit_hash()

    while commit_hash:
        commit = repo.read_commit(commit_hash)
        yield commit_hash, commit
        commit_hash = commit.parent


def all_commits(repo) -> List[Tuple[str, Commit]]:
    """Every stored commit, ordered by hash."""
    return [(h, repo.read_commit(h)) for h in repo.commit_hashes()]


def find_by_message(repo, message: str) -> List[str]:
    """
    Hashes of every commit whose message is exactly ``message``.

    Raises:
        NoMatchingCommit: If no commit has that message
    """
    matches = [h for h, commit in all_commits(repo) if commit.message == message]
    if not matches:
        raise NoMatchingCommit()
    return matches
