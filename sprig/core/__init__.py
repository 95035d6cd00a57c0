"""Core functionality for Sprig.

This module contains the core data structures:
- Sprig objects (Blob, Commit)
- Repository management and object storage
- Staging index
- Branch registry
- Configuration management
- Hashing utilities

For operations like commit, checkout, merge and status, see sprig.operations
"""

from sprig.core.objects import SprigObject, Blob, Commit
from sprig.core.repository import Repository
from sprig.core.hash import hash_object, hash_file
from sprig.core.index import StagingIndex
from sprig.core.refs import BranchRegistry
from sprig.core.config import Config, get_config

__all__ = [
    'SprigObject',
    'Blob',
    'Commit',
    'Repository',
    'StagingIndex',
    'BranchRegistry',
    'Config',
    'get_config',
    'hash_object',
    'hash_file',
]
