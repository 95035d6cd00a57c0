"""Merge operations for Sprig VCS."""

from collections import deque
from dataclasses import dataclass, field
from typing import List, Optional, Set

from sprig.errors import MergeWithSelf, NoSuchBranch, UncommittedChanges
from sprig.operations.checkout import SyncResult, check_untracked, sync_working_tree
from sprig.operations.commit import create_commit
from sprig.utils.logger import get_logger

logger = get_logger("operations.merge")

MERGED = 'merged'
CONFLICT = 'conflict'
ANCESTOR = 'ancestor'
FAST_FORWARD = 'fast_forward'

MESSAGES = {
    MERGED: '',
    CONFLICT: 'Encountered a merge conflict.',
    ANCESTOR: 'Given branch is an ancestor of the current branch.',
    FAST_FORWARD: 'Current branch fast-forwarded.',
}


@dataclass
class MergeConflict:
    """A path both sides changed differently since the split point."""
    path: str
    base_hash: Optional[str]
    ours_content: Optional[bytes]
    theirs_content: Optional[bytes]

    def __repr__(self) -> str:
        return f"MergeConflict({self.path})"


@dataclass
class MergeResult:
    """Result of a merge operation."""
    status: str
    split_hash: Optional[str] = None
    commit_hash: Optional[str] = None
    conflicts: List[MergeConflict] = field(default_factory=list)
    # Untracked working files removed by a fast-forward
    deleted_untracked: List[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        return MESSAGES[self.status]

    @property
    def is_fast_forward(self) -> bool:
        return self.status == FAST_FORWARD

    @property
    def has_conflicts(self) -> bool:
        return bool(self.conflicts)

    def __repr__(self) -> str:
        return f"MergeResult({self.status}, conflicts={len(self.conflicts)})"


class MergeEngine:
    """
    Handles merge operations for Sprig VCS.

    Supports:
    - Split point search over the commit graph
    - Fast-forward merges
    - Three-way merges with conflict markers
    """

    def __init__(self, repo):
        """
        Initialize merge engine.

        Args:
            repo: Repository instance
        """
        self.repo = repo

    @property
    def stage_conflicts(self) -> bool:
        """Whether conflicted files are staged into the merge commit."""
        return self.repo.config.stage_conflicts

    def _get_ancestors(self, commit_hash: str) -> Set[str]:
        """
        Get all ancestors of a commit, including the commit itself.

        Breadth-first; each commit is visited once.
        """
        ancestors = {commit_hash}
        to_visit = deque([commit_hash])

        while to_visit:
            commit = self.repo.read_commit(to_visit.popleft())
            for parent in commit.parents:
                if parent not in ancestors:
                    ancestors.add(parent)
                    to_visit.append(parent)

        return ancestors

    def find_split_point(self, head_hash: str, other_hash: str) -> Optional[str]:
        """
        Find the split point of two commits.

        Collects every ancestor of head, then walks breadth-first from other
        and returns the first commit reached that head can also reach. The
        walk from other does not skip commits it has already queued.

        With a single fork this is the latest common ancestor. When histories
        cross-merge and several candidates exist, the one nearest to other
        wins, which need not be the closest to head.

        Args:
            head_hash: Current branch tip
            other_hash: Tip of the branch being merged in

        Returns:
            Hash of the split point, or None if the histories are unrelated
        """
        head_ancestors = self._get_ancestors(head_hash)

        to_visit = deque([other_hash])
        while to_visit:
            current = to_visit.popleft()
            if current in head_ancestors:
                return current
            to_visit.extend(self.repo.read_commit(current).parents)

        return None

    def generate_conflict_markers(
        self,
        ours_content: Optional[bytes],
        theirs_content: Optional[bytes]
    ) -> bytes:
        """
        Build the content of a conflicted file.

        A missing side contributes no content. Neither side is given a
        trailing newline it did not already have.
        """
        return b''.join([
            b'<<<<<<< HEAD\n',
            ours_content or b'',
            b'=======\n',
            theirs_content or b'',
            b'>>>>>>>\n',
        ])

    def write_conflicts_to_working_tree(self, conflicts: List[MergeConflict]) -> None:
        """Write conflict markers to the working tree files."""
        for conflict in conflicts:
            content = self.generate_conflict_markers(conflict.ours_content, conflict.theirs_content)
            self.repo.write_work_file(conflict.path, content)

    def _blob(self, blob_hash: Optional[str]) -> Optional[bytes]:
        return self.repo.get_blob(blob_hash) if blob_hash else None

    def apply_three_way(self, split_hash: str, head_hash: str, other_hash: str) -> List[MergeConflict]:
        """
        Reconcile every path of the three snapshots into the working tree and index.

        For each path, with S/H/O its blob in split, head and other:
        - H == O: nothing to do
        - S == H: take other's side (stage removal, or write and stage addition)
        - S == O: keep head's side
        - otherwise: conflict; markers are written to the working file

        Returns:
            List of conflicts found
        """
        repo = self.repo
        index = repo.index
        split = repo.read_commit(split_hash)
        head = repo.read_commit(head_hash)
        other = repo.read_commit(other_hash)

        all_paths = set(split.snapshot) | set(head.snapshot) | set(other.snapshot)
        conflicts = []

        for path in sorted(all_paths):
            base_hash = split.blob_for(path)
            ours_hash = head.blob_for(path)
            theirs_hash = other.blob_for(path)

            if ours_hash == theirs_hash:
                continue

            if base_hash == ours_hash:
                if theirs_hash is None:
                    index.stage_removal(path)
                else:
                    repo.write_work_file(path, repo.get_blob(theirs_hash))
                    index.stage_addition(path)
                continue

            if base_hash == theirs_hash:
                continue

            conflicts.append(MergeConflict(
                path=path,
                base_hash=base_hash,
                ours_content=self._blob(ours_hash),
                theirs_content=self._blob(theirs_hash)
            ))

        self.write_conflicts_to_working_tree(conflicts)

        if conflicts and self.stage_conflicts:
            for conflict in conflicts:
                index.stage_addition(conflict.path)

        return conflicts

    def fast_forward(self, target_hash: str) -> SyncResult:
        """Move the current branch to a descendant commit and check it out."""
        result = sync_working_tree(self.repo, target_hash)
        self.repo.refs.move_current_branch(target_hash)
        self.repo.refs.save()
        self.repo.index.clear()
        return result

    def merge(self, target_branch: str) -> MergeResult:
        """
        Merge target branch into current branch.

        Every precondition is checked before the working tree is touched.
        A conflicted merge is still committed; the result reports the
        conflicts afterwards.

        Args:
            target_branch: Name of branch to merge

        Returns:
            MergeResult with status and any conflicts

        Raises:
            UncommittedChanges: If the staging index is not empty
            NoSuchBranch: If target_branch does not exist
            UntrackedFileConflict: If an untracked file would be overwritten
            MergeWithSelf: If target_branch is the current branch
        """
        repo = self.repo
        refs = repo.refs

        if not repo.index.is_empty():
            raise UncommittedChanges()

        if not refs.has_branch(target_branch):
            raise NoSuchBranch()
        target_hash = refs.branch_hash(target_branch)

        check_untracked(repo, repo.read_commit(target_hash))

        current_branch = refs.current
        if target_branch == current_branch:
            raise MergeWithSelf()

        current_hash = refs.current_commit_hash()
        split_hash = self.find_split_point(current_hash, target_hash)
        logger.debug("split point found", split=split_hash and split_hash[:7],
                     head=current_hash[:7], other=target_hash[:7])

        if split_hash == target_hash:
            return MergeResult(status=ANCESTOR, split_hash=split_hash)

        if split_hash == current_hash:
            synced = self.fast_forward(target_hash)
            logger.info("fast-forward", branch=current_branch, commit=target_hash[:7])
            return MergeResult(status=FAST_FORWARD, split_hash=split_hash, commit_hash=target_hash,
                               deleted_untracked=synced.deleted_untracked)

        conflicts = self.apply_three_way(split_hash, current_hash, target_hash)

        commit = create_commit(
            repo,
            f"Merged {target_branch} into {current_branch}.",
            merge_parent=target_hash
        )

        logger.info("merge committed", commit=commit.hash[:7], conflicts=len(conflicts))
        return MergeResult(
            status=CONFLICT if conflicts else MERGED,
            split_hash=split_hash,
            commit_hash=commit.hash,
            conflicts=conflicts
        )
