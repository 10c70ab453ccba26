"""Reconcile submodule registrations against package manifests.

Each manifest declares the repository its project comes from. The
desired table (path -> URL) built from the manifests is compared with
.gitmodules, .git/config and the working tree, and at most one
corrective git command is planned per path.
"""

from dataclasses import dataclass
from pathlib import Path

from submodule_sync.config import SyncConfig
from submodule_sync.errors import ManifestError
from submodule_sync.git.gitmodules import configured_url, is_initialized, read_submodules
from submodule_sync.git.runner import GitRunner
from submodule_sync.git.update import update_all
from submodule_sync.manifest.discover import discover_manifests
from submodule_sync.manifest.reader import read_manifest, submodule_path_for
from submodule_sync.manifest.urls import format_url, normalize_repo_path

# Action kinds, in the order they are checked
ADD = "add"
SET_URL = "set-url"
SYNC = "sync"
INIT = "init"
OK = "ok"


@dataclass
class DesiredSubmodule:
    path: str
    repo_path: str
    url: str
    manifest: Path


@dataclass
class Action:
    kind: str
    path: str
    url: str
    reason: str = ""

    def git_args(self) -> list[str] | None:
        """git arguments that carry out this action, or None for ``ok``."""
        if self.kind == ADD:
            return ["submodule", "add", self.url, self.path]
        if self.kind == SET_URL:
            return ["submodule", "set-url", "--", self.path, self.url]
        if self.kind == SYNC:
            return ["submodule", "sync", "--", self.path]
        if self.kind == INIT:
            return ["submodule", "update", "--init", "--", self.path]
        return None


def desired_submodules(config: SyncConfig) -> list[DesiredSubmodule]:
    """Build the desired submodule table from the manifests.

    Several manifests may map to the same submodule (packages of one
    monorepo); they must agree on the repository.

    Raises:
        ManifestError: On an unparseable URL or conflicting declarations.
    """
    desired: dict[str, DesiredSubmodule] = {}
    for manifest in discover_manifests(config.root, config.manifest_globs):
        record = read_manifest(manifest)
        if record is None:
            continue

        path = submodule_path_for(record, config.root)
        if path is None:
            continue

        try:
            repo_path = normalize_repo_path(record.url)
        except ValueError as e:
            raise ManifestError(f"{manifest}: {e}") from e

        entry = DesiredSubmodule(
            path=path,
            repo_path=repo_path,
            url=format_url(repo_path, config.protocol, config.host),
            manifest=manifest,
        )
        existing = desired.get(path)
        if existing and existing.repo_path != entry.repo_path:
            raise ManifestError(
                f"Conflicting repositories for {path}: "
                f"{existing.repo_path} ({existing.manifest}) vs "
                f"{entry.repo_path} ({entry.manifest})"
            )
        desired.setdefault(path, entry)

    return [desired[p] for p in sorted(desired)]


def plan(config: SyncConfig) -> list[Action]:
    """Compare desired submodules with the current state.

    Returns:
        One Action per desired submodule, sorted by path.
    """
    root = config.root
    current = {s.path: s for s in read_submodules(root)}

    actions = []
    for want in desired_submodules(config):
        have = current.get(want.path)
        if have is None:
            actions.append(Action(ADD, want.path, want.url, "not registered in .gitmodules"))
            continue

        if have.url != want.url:
            actions.append(Action(SET_URL, want.path, want.url, f"url is {have.url}"))
            continue

        registered = configured_url(root, have.name)
        if registered is not None and registered != have.url:
            actions.append(Action(SYNC, want.path, want.url, f".git/config url is {registered}"))
            continue

        if registered is None or not is_initialized(root, want.path):
            actions.append(Action(INIT, want.path, want.url, "not initialized"))
            continue

        actions.append(Action(OK, want.path, want.url))

    return actions


def apply(actions: list[Action], root: Path, runner: GitRunner) -> list[Action]:
    """Run the corrective command for each action, stopping on the first failure.

    Returns:
        The actions that were carried out (everything except ``ok``).
    """
    applied = []
    for action in actions:
        args = action.git_args()
        if args is None:
            continue
        print(f"  {action.path}: {action.kind} ({action.reason})")
        runner.run(args, root, action.path, f"submodule {action.kind}")
        applied.append(action)
    return applied


def bootstrap(config: SyncConfig, runner: GitRunner | None = None) -> dict:
    """Initialize, update and reconcile all submodules.

    Steps:
        1. git submodule update --init --recursive
        2. update every submodule (fetch + fast-forward)
        3. reconcile .gitmodules against the manifests

    Returns:
        Dict with keys: root, updated, actions, dry_run.

    Raises:
        SubmoduleSyncError: On the first failure.
    """
    runner = runner or GitRunner(dry_run=config.dry_run)
    root = config.root

    print("  Initializing submodules")
    runner.run(
        ["submodule", "update", "--init", "--recursive"],
        root, ".", "submodule update --init --recursive",
    )

    print("  Updating submodules")
    updated = update_all(root, runner, config.default_branch)

    print("  Reconciling submodules with manifests")
    applied = apply(plan(config), root, runner)

    return {
        "root": str(root),
        "updated": updated,
        "actions": applied,
        "dry_run": runner.dry_run,
    }
