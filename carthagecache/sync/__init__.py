"""
Cache/project synchronization for carthage-cache.

- reconciler: decides what to build
- executor: builds, stores and restores frameworks
- runner: the per-run state machine
"""

from carthagecache.sync.reconciler import missing_keys, reconcile
from carthagecache.sync.executor import SyncExecutor, bootstrap_command, build_command
from carthagecache.sync.runner import RunReport, RunState, SyncRunner, prepare_cache

__all__ = [
    "missing_keys",
    "reconcile",
    "SyncExecutor",
    "bootstrap_command",
    "build_command",
    "RunReport",
    "RunState",
    "SyncRunner",
    "prepare_cache",
]
