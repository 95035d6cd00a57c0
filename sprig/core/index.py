"""Staging index implementation."""

from pathlib import Path
from typing import List, Optional

from sprig.errors import MissingFile, NothingToRemove
from sprig.utils.logger import get_logger
from .objects import Blob

logger = get_logger("index")


class StagingIndex:
    """
    Sprig staging area.

    Holds two sets of paths waiting for the next commit:
    - pending additions, each with a snapshot of the file content taken
      when it was staged (``.sprig/staging/add/<path>``)
    - pending removals, recorded as empty marker files
      (``.sprig/staging/rm/<path>``)

    Staging a path in one set always takes it out of the other.
    """

    def __init__(self, repo):
        """
        Initialize staging index.

        Args:
            repo: Repository instance
        """
        self.repo = repo
        self.add_dir = repo.add_dir
        self.rm_dir = repo.rm_dir

    @staticmethod
    def _list(area: Path) -> List[str]:
        if not area.exists():
            return []
        return sorted(
            p.relative_to(area).as_posix()
            for p in area.rglob('*') if p.is_file()
        )

    @staticmethod
    def _discard(area: Path, path: str) -> None:
        entry = area / path
        if entry.is_file():
            entry.unlink()

        parent = entry.parent
        while parent != area and parent.is_dir() and not any(parent.iterdir()):
            parent.rmdir()
            parent = parent.parent

    def staged_additions(self) -> List[str]:
        """Paths staged for addition, sorted."""
        return self._list(self.add_dir)

    def staged_removals(self) -> List[str]:
        """Paths staged for removal, sorted."""
        return self._list(self.rm_dir)

    def is_staged_for_addition(self, path: str) -> bool:
        return (self.add_dir / path).is_file()

    def is_staged_for_removal(self, path: str) -> bool:
        return (self.rm_dir / path).is_file()

    def staged_content(self, path: str) -> Optional[bytes]:
        """Content snapshot staged for path, or None if not staged."""
        entry = self.add_dir / path
        return entry.read_bytes() if entry.is_file() else None

    def is_empty(self) -> bool:
        return not self.staged_additions() and not self.staged_removals()

    def stage_addition(self, path: str) -> bool:
        """
        Stage the working copy of a file for addition.

        If the content matches what the current commit already tracks, any
        staged copy is dropped instead. A pending removal of the same path is
        always cleared.

        Args:
            path: Path relative to the working tree root

        Returns:
            bool: True if the file ended up staged, False if it was unchanged

        Raises:
            MissingFile: If the working file does not exist or lies inside .sprig
        """
        work_file = self.repo.work_path(path)
        if self.repo.is_internal(path) or not work_file.is_file():
            raise MissingFile()

        blob = Blob.from_file(work_file)
        tracked_hash = self.repo.head_commit().blob_for(path)

        if blob.hash == tracked_hash:
            self._discard(self.add_dir, path)
            staged = False
        else:
            entry = self.add_dir / path
            entry.parent.mkdir(parents=True, exist_ok=True)
            entry.write_bytes(blob.data)
            staged = True

        self._discard(self.rm_dir, path)
        logger.debug("stage addition", path=path, staged=staged)
        return staged

    def stage_removal(self, path: str) -> None:
        """
        Stage a file for removal.

        Unstages any pending addition. If the current commit tracks the file,
        records the removal and deletes the working copy.

        Args:
            path: Path relative to the working tree root

        Raises:
            NothingToRemove: If the path is neither staged nor tracked
        """
        staged = self.is_staged_for_addition(path)
        tracked = self.repo.head_commit().tracks(path)

        if not staged and not tracked:
            raise NothingToRemove()

        self._discard(self.add_dir, path)

        if tracked:
            marker = self.rm_dir / path
            marker.parent.mkdir(parents=True, exist_ok=True)
            marker.touch()
            self.repo.delete_work_file(path)

        logger.debug("stage removal", path=path, tracked=tracked)

    def clear(self) -> None:
        """Empty both staging areas."""
        for path in self.staged_additions():
            self._discard(self.add_dir, path)
        for path in self.staged_removals():
            self._discard(self.rm_dir, path)

    def __len__(self) -> int:
        return len(self.staged_additions()) + len(self.staged_removals())

    def __repr__(self) -> str:
        return f"StagingIndex(add={len(self.staged_additions())}, rm={len(self.staged_removals())})"
