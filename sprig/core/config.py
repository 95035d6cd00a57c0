"""Configuration for Sprig.

A value is looked up in four layers, highest precedence first:

1. the environment, as ``SPRIG_<SECTION>_<KEY>``
2. the repository file ``.sprig/config``
3. the user file ``~/.sprigconfig``
4. the built-in defaults in :data:`DEFAULTS`

Both files are INI. Only the keys in :data:`DEFAULTS` change Sprig's
behaviour; any other key can be stored and read back but is ignored.
"""

import os
import configparser
from pathlib import Path
from typing import Dict, List, Optional, Tuple

TRUE_VALUES = ('1', 'true', 'yes', 'on')

DEFAULTS: Dict[Tuple[str, str], str] = {
    ('core', 'defaultbranch'): 'master',
    ('merge', 'stageconflicts'): 'false',
    ('log', 'level'): 'WARNING',
}


def split_key(key: str) -> Tuple[str, str]:
    """Split ``section.option`` into its parts; bare keys belong to [core]."""
    section, _, option = key.rpartition('.')
    return (section or 'core'), option


class Config:
    """Layered view over the environment, repository and global config files."""

    GLOBAL_CONFIG_PATH = Path.home() / '.sprigconfig'

    def __init__(self, repo_config_path: Optional[Path] = None):
        """
        Args:
            repo_config_path: Path to .sprig/config, or None outside a repository
        """
        self.repo_config_path = repo_config_path
        self._parsers: Dict[Path, configparser.ConfigParser] = {}

    def _parser(self, path: Path) -> configparser.ConfigParser:
        if path not in self._parsers:
            parser = configparser.ConfigParser()
            if path.exists():
                parser.read(path)
            self._parsers[path] = parser
        return self._parsers[path]

    def _files(self) -> List[Tuple[str, Path]]:
        """Config files as (scope, path), highest precedence first."""
        files = []
        if self.repo_config_path:
            files.append(('repository', self.repo_config_path))
        files.append(('global', self.GLOBAL_CONFIG_PATH))
        return files

    def get(self, section: str, key: str) -> Optional[str]:
        """
        Look a value up through every layer.

        Returns:
            The value, the built-in default for known keys, or None
        """
        env_value = os.environ.get(f"SPRIG_{section.upper()}_{key.upper()}")
        if env_value is not None:
            return env_value

        for _, path in self._files():
            parser = self._parser(path)
            if parser.has_option(section, key):
                return parser.get(section, key)

        return DEFAULTS.get((section, key))

    def set(self, section: str, key: str, value: str, global_config: bool = False) -> None:
        """
        Write a value to the repository file, or to the global file.

        Raises:
            ValueError: If the repository file is asked for outside a repository
        """
        if global_config:
            path = self.GLOBAL_CONFIG_PATH
        elif self.repo_config_path:
            path = self.repo_config_path
        else:
            raise ValueError("No repository config path available")

        parser = self._parser(path)
        if not parser.has_section(section):
            parser.add_section(section)
        parser.set(section, key, value)

        with open(path, 'w') as f:
            parser.write(f)

    def entries(self, global_only: bool = False) -> List[Tuple[str, str, str]]:
        """
        Every value stored in the config files.

        Returns:
            Sorted (``section.key``, value, scope) tuples, scope being
            'repository' or 'global'
        """
        result = []
        for scope, path in self._files():
            if global_only and scope != 'global':
                continue
            parser = self._parser(path)
            for section in parser.sections():
                for key, value in parser.items(section):
                    result.append((f"{section}.{key}", value, scope))
        return sorted(result)

    @property
    def default_branch(self) -> str:
        """Name of the branch ``init`` creates (core.defaultbranch)."""
        return self.get('core', 'defaultbranch')

    @property
    def stage_conflicts(self) -> bool:
        """Whether a conflicted merge records its marker files (merge.stageconflicts)."""
        return self.get('merge', 'stageconflicts').strip().lower() in TRUE_VALUES

    @property
    def log_level(self) -> str:
        """Diagnostic log level name (log.level)."""
        return self.get('log', 'level')


def get_config(repo=None) -> Config:
    """
    Get a Config instance.

    Args:
        repo: Repository instance, or None for global-only config
    """
    if repo:
        return repo.config
    return Config()
