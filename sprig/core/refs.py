"""Branch management for Sprig VCS."""

import json
from typing import Dict, List, Optional

from sprig.errors import BranchExists, CannotRemoveCurrent, NoSuchBranch, NoSuchCommit
from sprig.utils.logger import get_logger

logger = get_logger("refs")


class BranchRegistry:
    """
    Tracks the current branch and the commit every branch points at.

    The registry is read once from ``.sprig/registry`` and mutated in memory;
    callers persist their changes with :meth:`save` once the operation's
    preconditions have all passed.

    Invariants:
    - the current branch is always a key of the branch mapping
    - every branch points at a commit stored in the repository
    """

    def __init__(self, repo, current: str, branches: Dict[str, str]):
        """
        Initialize branch registry.

        Args:
            repo: Repository instance
            current: Name of the checked-out branch
            branches: Mapping of branch name to commit hash
        """
        self.repo = repo
        self.current = current
        self.branches = dict(branches)

    @classmethod
    def create(cls, repo, branch_name: str, root_hash: str) -> 'BranchRegistry':
        """Create the registry for a new repository and write it to disk."""
        registry = cls(repo, branch_name, {branch_name: root_hash})
        registry.save()
        return registry

    @classmethod
    def load(cls, repo) -> 'BranchRegistry':
        """Read the registry from disk."""
        state = json.loads(repo.registry_file.read_text())
        return cls(repo, state['current'], state['branches'])

    def save(self) -> None:
        """Write the registry to disk."""
        state = {'current': self.current, 'branches': self.branches}
        self.repo.registry_file.write_text(json.dumps(state, indent=2, sort_keys=True) + '\n')

    def current_commit_hash(self) -> str:
        """Hash of the commit the current branch points at."""
        return self.branches[self.current]

    def has_branch(self, name: str) -> bool:
        return name in self.branches

    def branch_hash(self, name: str) -> Optional[str]:
        """Hash of the commit a branch points at, or None if unknown."""
        return self.branches.get(name)

    def add_branch(self, name: str) -> str:
        """
        Create a branch at the current commit.

        Raises:
            BranchExists: If a branch with that name already exists
        """
        if self.has_branch(name):
            raise BranchExists()

        commit_hash = self.current_commit_hash()
        self.branches[name] = commit_hash
        logger.debug("branch created", branch=name, commit=commit_hash[:7])
        return commit_hash

    def remove_branch(self, name: str) -> None:
        """
        Delete a branch pointer. The commits it pointed at are kept.

        Raises:
            NoSuchBranch: If the branch does not exist
            CannotRemoveCurrent: If it is the current branch
        """
        if not self.has_branch(name):
            raise NoSuchBranch()
        if name == self.current:
            raise CannotRemoveCurrent()

        del self.branches[name]
        logger.debug("branch removed", branch=name)

    def set_current_branch(self, name: str) -> None:
        """Switch the current branch without moving any pointer."""
        if not self.has_branch(name):
            raise NoSuchBranch()
        self.current = name

    def move_current_branch(self, commit_hash: str) -> None:
        """
        Point the current branch at another commit.

        Raises:
            NoSuchCommit: If the commit is not stored in the repository
        """
        if not self.repo.commit_exists(commit_hash):
            raise NoSuchCommit()

        self.branches[self.current] = commit_hash
        logger.debug("branch moved", branch=self.current, commit=commit_hash[:7])

    def sorted_branch_names(self) -> List[str]:
        """Branch names in lexicographic order."""
        return sorted(self.branches)

    def __repr__(self) -> str:
        return f"BranchRegistry(current={self.current}, branches={len(self.branches)})"
