"""Working tree status computation."""

from dataclasses import dataclass, field
from typing import List

from sprig.core.hash import hash_file, hash_object

CONFLICT_HEADER = b'<<<<<<< HEAD'


@dataclass
class Status:
    """Snapshot of branches, staging areas and working tree differences."""
    current_branch: str
    branches: List[str] = field(default_factory=list)
    staged: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)
    # Entries read "<path> (modified)" or "<path> (deleted)"
    modified: List[str] = field(default_factory=list)
    untracked: List[str] = field(default_factory=list)


def compute_status(repo) -> Status:
    """
    Compare the current commit, the staging index and the working tree.

    A file counts as modified but not staged when:
    - it is tracked, its content differs from the commit and it is not
      staged (files still holding conflict markers are left out), or
    - it is staged and its content differs from the staged snapshot.

    It counts as deleted but not staged when it is missing from the working
    tree and either staged for addition, or tracked and not staged for removal.
    """
    refs = repo.refs
    index = repo.index
    head = repo.head_commit()

    working = repo.working_files()
    working_set = set(working)

    status = Status(
        current_branch=refs.current,
        branches=refs.sorted_branch_names(),
        staged=index.staged_additions(),
        removed=index.staged_removals(),
    )

    for path in sorted(working_set | set(head.snapshot)):
        staged_content = index.staged_content(path)

        if path in working_set:
            work_file = repo.work_path(path)
            digest = hash_file(work_file)
            changed_since_commit = (
                head.tracks(path)
                and digest != head.blob_for(path)
                and staged_content is None
                and CONFLICT_HEADER not in work_file.read_bytes()
            )
            changed_since_staged = staged_content is not None and digest != hash_object(staged_content)
            if changed_since_commit or changed_since_staged:
                status.modified.append(f"{path} (modified)")
        elif staged_content is not None or (head.tracks(path) and not index.is_staged_for_removal(path)):
            status.modified.append(f"{path} (deleted)")

    for path in index.staged_additions():
        # Staged but neither tracked nor present
        if path not in working_set and not head.tracks(path):
            status.modified.append(f"{path} (deleted)")

    status.modified.sort()
    status.untracked = [
        path for path in working
        if not head.tracks(path) and not index.is_staged_for_addition(path)
    ]

    return status
