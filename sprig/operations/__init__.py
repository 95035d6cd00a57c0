"""Operations module for high-level Sprig operations.

This module contains the business logic for Sprig operations like:
- Commit creation and history walks
- Checkout and reset of the working tree
- Merge algorithms
- Status computation
"""

from sprig.operations.commit import create_commit, first_parent_history, all_commits, find_by_message
from sprig.operations.checkout import SyncResult, checkout_file, checkout_branch, reset
from sprig.operations.merge import MergeEngine, MergeResult, MergeConflict
from sprig.operations.status import Status, compute_status

__all__ = [
    'create_commit', 'first_parent_history', 'all_commits', 'find_by_message',
    'SyncResult', 'checkout_file', 'checkout_branch', 'reset',
    'MergeEngine', 'MergeResult', 'MergeConflict',
    'Status', 'compute_status',
]
