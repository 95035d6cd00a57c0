"""Repository management for Sprig VCS."""

from pathlib import Path, PurePosixPath
from typing import List, Optional

from sprig.errors import MissingFile, NoSuchCommit, ObjectNotFound, RepositoryExists
from sprig.utils.logger import get_logger
from .hash import DIGEST_LENGTH, is_digest
from .objects import Blob, Commit

logger = get_logger("repository")

SPRIG_DIR_NAME = '.sprig'
REGISTRY_NAME = 'registry'
MIN_PREFIX_LENGTH = 6


class Repository:
    """
    Represents a Sprig repository.

    A repository manages the .sprig directory structure. It is the object
    store for blobs and the persistent home of the commit graph, and hands
    out the branch registry, staging index and configuration of this tree.
    """

    def __init__(self, path: str = '.'):
        """
        Initialize repository.

        Args:
            path: Path to repository root (defaults to current directory)
        """
        self.work_tree = Path(path).resolve()
        self.sprig_dir = self.work_tree / SPRIG_DIR_NAME
        self.blobs_dir = self.sprig_dir / 'blobs'
        self.staging_dir = self.sprig_dir / 'staging'
        self.add_dir = self.staging_dir / 'add'
        self.rm_dir = self.staging_dir / 'rm'
        self.registry_file = self.sprig_dir / REGISTRY_NAME
        self.config_file = self.sprig_dir / 'config'

        # Lazy loading to avoid circular import
        self._refs = None
        self._index = None
        self._config = None
        self._merge_engine = None

    @property
    def refs(self):
        """Get the BranchRegistry, loaded on first access."""
        if self._refs is None:
            from .refs import BranchRegistry
            self._refs = BranchRegistry.load(self)
        return self._refs

    @property
    def index(self):
        """Get the StagingIndex instance."""
        if self._index is None:
            from .index import StagingIndex
            self._index = StagingIndex(self)
        return self._index

    @property
    def config(self):
        """Get the layered Config for this repository."""
        if self._config is None:
            from .config import Config
            self._config = Config(self.config_file)
        return self._config

    @property
    def merge(self):
        """Get MergeEngine instance."""
        if self._merge_engine is None:
            from sprig.operations.merge import MergeEngine
            self._merge_engine = MergeEngine(self)
        return self._merge_engine

    def init(self, default_branch: Optional[str] = None) -> 'Repository':
        """
        Initialize a new repository.

        Creates the .sprig directory structure:
        .sprig/
        ├── blobs/         # File contents, one file per blob hash
        ├── staging/
        │   ├── add/       # Snapshots of files staged for addition
        │   └── rm/        # Markers for files staged for removal
        ├── <commit hash>  # One file per commit
        ├── registry       # Current branch and branch heads
        └── config         # Repository configuration

        Args:
            default_branch: Name of the first branch (defaults to core.defaultbranch)

        Returns:
            Repository: self for method chaining

        Raises:
            RepositoryExists: If repository already exists
        """
        if self.sprig_dir.exists():
            raise RepositoryExists()

        self.sprig_dir.mkdir(parents=True)
        self.blobs_dir.mkdir()
        self.staging_dir.mkdir()
        self.add_dir.mkdir()
        self.rm_dir.mkdir()

        config_content = '[core]\n\trepositoryformatversion = 0\n'
        self.config_file.write_text(config_content)

        if default_branch is None:
            default_branch = self.config.default_branch

        root_hash = self.write_commit(Commit.root())

        from .refs import BranchRegistry
        self._refs = BranchRegistry.create(self, default_branch, root_hash)

        logger.info("repository initialized", path=str(self.work_tree), branch=default_branch)
        return self

    @classmethod
    def find_repository(cls, path: str = '.') -> Optional['Repository']:
        """
        Find repository by searching up the directory tree.

        Args:
            path: Starting path for search

        Returns:
            Repository if found, None otherwise
        """
        current = Path(path).resolve()

        while True:
            if (current / SPRIG_DIR_NAME).is_dir():
                return cls(str(current))

            if current == current.parent:
                return None

            current = current.parent

    # Blob storage

    def blob_path(self, blob_hash: str) -> Path:
        return self.blobs_dir / blob_hash

    def put_blob(self, data: bytes) -> str:
        """
        Store content in the object store.

        Idempotent: content that is already stored is not written again.

        Returns:
            str: SHA-1 hash of the content
        """
        blob = Blob(data)
        blob_hash = blob.hash
        path = self.blob_path(blob_hash)

        if not self.blob_exists(blob_hash):
            path.write_bytes(blob.serialize())
            logger.debug("blob stored", blob=blob_hash[:7], size=len(data))

        return blob_hash

    def get_blob(self, blob_hash: str) -> bytes:
        """
        Read content from the object store.

        Raises:
            ObjectNotFound: If no blob with that hash exists
        """
        path = self.blob_path(blob_hash)
        if not is_digest(blob_hash) or not path.is_file():
            raise ObjectNotFound()
        return path.read_bytes()

    def blob_exists(self, blob_hash: str) -> bool:
        return is_digest(blob_hash) and self.blob_path(blob_hash).is_file()

    # Commit storage

    def commit_path(self, commit_hash: str) -> Path:
        return self.sprig_dir / commit_hash

    def write_commit(self, commit: Commit) -> str:
        """
        Persist a commit under its hash.

        Returns:
            str: SHA-1 hash of the commit
        """
        commit_hash = commit.hash
        path = self.commit_path(commit_hash)

        if not path.exists():
            path.write_bytes(commit.serialize())
            logger.debug("commit written", commit=commit_hash[:7], parents=len(commit.parents))

        return commit_hash

    def read_commit(self, commit_hash: str) -> Commit:
        """
        Read a commit by its full hash.

        Raises:
            NoSuchCommit: If no commit with that hash exists
        """
        if not self.commit_exists(commit_hash):
            raise NoSuchCommit()

        commit = Commit()
        commit.deserialize(self.commit_path(commit_hash).read_bytes())
        return commit

    def commit_exists(self, commit_hash: Optional[str]) -> bool:
        return bool(commit_hash) and is_digest(commit_hash) and self.commit_path(commit_hash).is_file()

    def commit_hashes(self) -> List[str]:
        """
        List the hashes of every stored commit, sorted.

        Commits are the 40-hex named files directly inside .sprig; the
        registry and config files never match that shape.
        """
        return sorted(
            entry.name for entry in self.sprig_dir.iterdir()
            if entry.is_file() and entry.name != REGISTRY_NAME and is_digest(entry.name)
        )

    def resolve_commit(self, prefix: str) -> str:
        """
        Resolve a full hash or an abbreviated hash to a stored commit.

        Abbreviations must be at least six characters long. When several
        commits share the prefix, the first one in sorted order is returned.

        Raises:
            NoSuchCommit: If nothing matches
        """
        prefix = prefix.lower()

        if len(prefix) == DIGEST_LENGTH and self.commit_exists(prefix):
            return prefix

        if len(prefix) >= MIN_PREFIX_LENGTH:
            for commit_hash in self.commit_hashes():
                if commit_hash.startswith(prefix):
                    return commit_hash

        raise NoSuchCommit()

    def head_commit(self) -> Commit:
        """Read the commit the current branch points at."""
        return self.read_commit(self.refs.current_commit_hash())

    # Working tree

    def work_path(self, path: str) -> Path:
        return self.work_tree / path

    def is_internal(self, path: str) -> bool:
        """Return True if a working-tree relative path lies inside .sprig."""
        parts = PurePosixPath(path).parts
        return bool(parts) and parts[0] == SPRIG_DIR_NAME

    def relative_path(self, path: str) -> str:
        """
        Convert a user-supplied path (absolute or relative to the current
        directory) into a POSIX path relative to the working tree root.

        Raises:
            MissingFile: If the path lies outside the working tree or inside .sprig
        """
        full_path = Path(path)
        if not full_path.is_absolute():
            full_path = Path.cwd() / full_path

        try:
            rel_path = full_path.resolve().relative_to(self.work_tree).as_posix()
        except ValueError:
            raise MissingFile()

        if self.is_internal(rel_path):
            raise MissingFile()
        return rel_path

    def working_files(self) -> List[str]:
        """
        List every file in the working tree as a relative POSIX path.

        Everything below the root counts, dot-files included, except the
        contents of the .sprig directory.
        """
        files = []
        for path in self.work_tree.rglob('*'):
            if not path.is_file():
                continue
            rel_path = path.relative_to(self.work_tree).as_posix()
            if self.is_internal(rel_path):
                continue
            files.append(rel_path)
        return sorted(files)

    def write_work_file(self, path: str, data: bytes) -> None:
        full_path = self.work_path(path)
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_bytes(data)

    def delete_work_file(self, path: str) -> None:
        """Delete a working file and prune directories it leaves empty."""
        full_path = self.work_path(path)
        if full_path.exists():
            full_path.unlink()

        parent = full_path.parent
        while parent != self.work_tree and parent.is_dir() and not any(parent.iterdir()):
            parent.rmdir()
            parent = parent.parent

    def __repr__(self) -> str:
        return f"Repository(path={self.work_tree})"
