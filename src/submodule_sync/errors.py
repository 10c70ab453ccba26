"""Exceptions raised by submodule-sync.

Every failure aborts the run. The CLI catches ``SubmoduleSyncError``,
prints the message and exits non-zero.
"""


class SubmoduleSyncError(RuntimeError):
    """Base class for all fatal submodule-sync errors."""


class ConfigError(SubmoduleSyncError):
    """Invalid configuration value or unreadable config file."""


class ManifestError(SubmoduleSyncError):
    """A manifest could not be parsed or conflicts with another manifest."""


class GitCommandError(SubmoduleSyncError):
    """A git command failed.

    Carries the submodule path and the operation that failed so the
    message identifies exactly what to fix before re-running.
    """

    def __init__(self, path: str, action: str, detail: str = ""):
        self.path = path
        self.action = action
        self.detail = detail.strip()
        message = f"{action} failed for {path}"
        if self.detail:
            message += f": {self.detail}"
        super().__init__(message)
