"""Read the submodule table from .gitmodules and .git/config."""

from dataclasses import dataclass
from pathlib import Path

from submodule_sync.git.runner import run_git


@dataclass
class Submodule:
    name: str
    path: str
    url: str = ""
    branch: str | None = None


def read_submodules(root: Path) -> list[Submodule]:
    """Parse .gitmodules into Submodule entries, in file order.

    A missing .gitmodules yields an empty list.
    """
    if not (root / ".gitmodules").is_file():
        return []

    result = run_git(
        ["config", "--file", ".gitmodules", "--get-regexp", r"^submodule\."],
        root,
    )
    # Exit code 1 means no matching keys
    if result.returncode != 0:
        return []

    entries: dict[str, dict[str, str]] = {}
    for line in result.stdout.splitlines():
        if not line.strip():
            continue
        # Format: "submodule.<name>.<key> <value>"; <name> may contain dots
        key, _, value = line.partition(" ")
        name, _, attr = key[len("submodule."):].rpartition(".")
        if not name:
            continue
        entries.setdefault(name, {})[attr] = value.strip()

    submodules = []
    for name, attrs in entries.items():
        if "path" not in attrs:
            continue
        submodules.append(Submodule(
            name=name,
            path=attrs["path"],
            url=attrs.get("url", ""),
            branch=attrs.get("branch") or None,
        ))
    return submodules


def configured_url(root: Path, name: str) -> str | None:
    """URL registered for a submodule in .git/config, or None if not registered."""
    result = run_git(["config", "--get", f"submodule.{name}.url"], root)
    if result.returncode == 0:
        return result.stdout.strip()
    return None


def is_initialized(root: Path, path: str) -> bool:
    """Whether the submodule's working tree is checked out."""
    return (root / path / ".git").exists()
