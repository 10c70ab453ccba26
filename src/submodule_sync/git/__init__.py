"""Git module — submodule update and reconciliation for the superproject."""

from submodule_sync.git.gitmodules import Submodule, read_submodules
from submodule_sync.git.reconcile import Action, apply, bootstrap, plan
from submodule_sync.git.runner import GitRunner, run_git
from submodule_sync.git.update import resolve_branch, update_all, update_submodule

__all__ = [
    "Submodule",
    "read_submodules",
    "Action",
    "apply",
    "bootstrap",
    "plan",
    "GitRunner",
    "run_git",
    "resolve_branch",
    "update_all",
    "update_submodule",
]
