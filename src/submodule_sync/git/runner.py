"""Git process invocation.

Read-only queries call ``run_git`` directly and inspect the result.
Mutating commands go through ``GitRunner`` so dry-run mode can intercept
them and failures abort the run.
"""

import shlex
import subprocess
from pathlib import Path

from submodule_sync.errors import GitCommandError


def run_git(args: list[str], cwd: Path) -> subprocess.CompletedProcess:
    """Run a git command and return the result."""
    return subprocess.run(
        ["git"] + args,
        cwd=cwd,
        capture_output=True,
        text=True,
    )


class GitRunner:
    """Executes mutating git commands, or just prints them in dry-run mode."""

    def __init__(self, dry_run: bool = False):
        self.dry_run = dry_run
        self.history: list[list[str]] = []

    def run(
        self,
        args: list[str],
        cwd: Path,
        path: str,
        action: str,
    ) -> subprocess.CompletedProcess | None:
        """Run ``git <args>`` in cwd.

        Args:
            args: git arguments.
            cwd: Directory to run in.
            path: Submodule path the command is about (for error messages).
            action: Short name of the operation (fetch, pull, add, ...).

        Returns:
            The completed process, or None in dry-run mode.

        Raises:
            GitCommandError: If git exits non-zero.
        """
        self.history.append(list(args))
        if self.dry_run:
            print(f"  would run: git {shlex.join(args)}  (in {cwd})")
            return None

        result = run_git(args, cwd)
        if result.returncode != 0:
            raise GitCommandError(path, action, result.stderr or result.stdout)
        return result
