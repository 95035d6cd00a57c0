"""Checkout and reset: synchronizing the working tree with a commit."""

from dataclasses import dataclass, field
from typing import List, Optional

from sprig.core.objects import Commit
from sprig.errors import AlreadyOnBranch, FileNotInCommit, NoSuchBranch, UntrackedFileConflict
from sprig.utils.logger import get_logger

logger = get_logger("operations.checkout")


@dataclass
class SyncResult:
    """Outcome of replacing the working tree with a commit's snapshot."""
    commit_hash: str
    written: List[str] = field(default_factory=list)
    deleted: List[str] = field(default_factory=list)
    # Deleted files that neither the old nor the new commit tracked
    deleted_untracked: List[str] = field(default_factory=list)

    def __repr__(self) -> str:
        return (f"SyncResult({self.commit_hash[:7]}, written={len(self.written)}, "
                f"deleted={len(self.deleted)})")


def checkout_file(repo, path: str, commit_ref: Optional[str] = None) -> str:
    """
    Overwrite a working file with its version from a commit.

    Args:
        repo: Repository instance
        path: Path relative to the working tree root
        commit_ref: Full or abbreviated commit hash (defaults to the current commit)

    Returns:
        str: Hash of the blob that was written

    Raises:
        NoSuchCommit: If commit_ref does not resolve
        FileNotInCommit: If the commit does not track path
    """
    if commit_ref is None:
        commit_hash = repo.refs.current_commit_hash()
    else:
        commit_hash = repo.resolve_commit(commit_ref)

    blob_hash = repo.read_commit(commit_hash).blob_for(path)
    if blob_hash is None:
        raise FileNotInCommit()

    repo.write_work_file(path, repo.get_blob(blob_hash))
    logger.debug("file checked out", path=path, commit=commit_hash[:7])
    return blob_hash


def find_untracked_conflicts(repo, target: Commit) -> List[str]:
    """
    Working files the current commit does not track but target does.

    Switching to target would silently overwrite these.
    """
    current = repo.head_commit()
    return [
        path for path in repo.working_files()
        if not current.tracks(path) and target.tracks(path)
    ]


def check_untracked(repo, target: Commit) -> None:
    """
    Raises:
        UntrackedFileConflict: If switching to target would overwrite an untracked file
    """
    conflicts = find_untracked_conflicts(repo, target)
    if conflicts:
        logger.debug("untracked files in the way", paths=conflicts)
        raise UntrackedFileConflict()


def sync_working_tree(repo, commit_hash: str) -> SyncResult:
    """
    Make the working tree match a commit's snapshot.

    Every working file the target does not track is deleted, including
    files that were never staged or committed on any branch. Then every
    tracked file is written from the object store.
    """
    current = repo.head_commit()
    target = repo.read_commit(commit_hash)
    result = SyncResult(commit_hash=commit_hash)

    for path in repo.working_files():
        if not target.tracks(path):
            repo.delete_work_file(path)
            result.deleted.append(path)
            if not current.tracks(path):
                result.deleted_untracked.append(path)

    for path in sorted(target.snapshot):
        repo.write_work_file(path, repo.get_blob(target.snapshot[path]))
        result.written.append(path)

    if result.deleted_untracked:
        logger.info("deleted untracked files", paths=result.deleted_untracked)

    return result


def checkout_branch(repo, branch_name: str) -> SyncResult:
    """
    Switch to another branch.

    Raises:
        NoSuchBranch: If the branch does not exist
        AlreadyOnBranch: If it is the current branch
        UntrackedFileConflict: If an untracked working file would be overwritten
    """
    refs = repo.refs
    if not refs.has_branch(branch_name):
        raise NoSuchBranch("No such branch exists.")
    if branch_name == refs.current:
        raise AlreadyOnBranch()

    target_hash = refs.branch_hash(branch_name)
    check_untracked(repo, repo.read_commit(target_hash))

    result = sync_working_tree(repo, target_hash)
    refs.set_current_branch(branch_name)
    refs.save()
    repo.index.clear()

    logger.info("switched branch", branch=branch_name, commit=target_hash[:7])
    return result


def reset(repo, commit_ref: str) -> SyncResult:
    """
    Move the current branch to an arbitrary commit and check it out.

    Raises:
        NoSuchCommit: If commit_ref does not resolve
        UntrackedFileConflict: If an untracked working file would be overwritten
    """
    commit_hash = repo.resolve_commit(commit_ref)

    check_untracked(repo, repo.read_commit(commit_hash))

    result = sync_working_tree(repo, commit_hash)
    repo.refs.move_current_branch(commit_hash)
    repo.refs.save()
    repo.index.clear()

    logger.info("reset", branch=repo.refs.current, commit=commit_hash[:7])
    return result
