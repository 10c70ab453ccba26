"""Per-submodule update: fetch and fast-forward each tracked branch."""

from pathlib import Path

from submodule_sync.git.gitmodules import Submodule, is_initialized, read_submodules
from submodule_sync.git.runner import GitRunner, run_git


def current_branch(repo_path: Path) -> str | None:
    """Return the branch checked out in repo_path, or None if detached/unknown."""
    result = run_git(["rev-parse", "--abbrev-ref", "HEAD"], repo_path)
    if result.returncode != 0:
        return None
    branch = result.stdout.strip()
    if not branch or branch == "HEAD":
        return None
    return branch


def _head_sha(repo_path: Path) -> str | None:
    result = run_git(["rev-parse", "HEAD"], repo_path)
    if result.returncode == 0:
        return result.stdout.strip()
    return None


def resolve_branch(submodule: Submodule, root: Path, default: str = "main") -> str:
    """Pick the branch to track for a submodule.

    Order: the branch currently checked out, then the ``branch`` recorded
    in .gitmodules, then ``default``.
    """
    return current_branch(root / submodule.path) or submodule.branch or default


def update_submodule(
    submodule: Submodule,
    root: Path,
    runner: GitRunner,
    default_branch: str = "main",
) -> dict:
    """Fetch origin, check out the tracked branch and fast-forward it.

    Args:
        submodule: Entry from .gitmodules.
        root: Superproject root.
        runner: Runner for mutating git commands.
        default_branch: Branch used when none can be determined.

    Returns:
        Dict with keys: path, branch, before, after, status.

    Raises:
        GitCommandError: On the first failing git command.
    """
    repo_path = root / submodule.path
    branch = resolve_branch(submodule, root, default_branch)
    before = _head_sha(repo_path)

    print(f"  {submodule.path}: updating {branch}")
    runner.run(["fetch", "origin"], repo_path, submodule.path, "fetch")
    runner.run(["checkout", branch], repo_path, submodule.path, f"checkout {branch}")
    runner.run(
        ["pull", "--ff-only", "origin", branch],
        repo_path, submodule.path, f"pull --ff-only origin {branch}",
    )

    after = _head_sha(repo_path)
    if runner.dry_run:
        status = "dry-run"
    elif before != after:
        status = "updated"
    else:
        status = "up-to-date"

    return {
        "path": submodule.path,
        "branch": branch,
        "before": before,
        "after": after,
        "status": status,
    }


def update_all(
    root: Path,
    runner: GitRunner,
    default_branch: str = "main",
) -> list[dict]:
    """Update every submodule listed in .gitmodules, one at a time.

    Submodules whose working tree isn't checked out are reported as
    skipped. The first git failure aborts the whole run.

    Returns:
        One result dict per submodule (see update_submodule).
    """
    results = []
    for submodule in read_submodules(root):
        if not is_initialized(root, submodule.path):
            print(f"  {submodule.path}: not initialized, skipping")
            results.append({
                "path": submodule.path,
                "branch": None,
                "before": None,
                "after": None,
                "status": "not-initialized",
            })
            continue
        results.append(update_submodule(submodule, root, runner, default_branch))
    return results
