"""Discover package manifests under the superproject root."""

from pathlib import Path

from submodule_sync.config import DEFAULT_MANIFEST_GLOBS


def discover_manifests(
    root: Path | str,
    patterns: list[str] | None = None,
) -> list[Path]:
    """Expand manifest glob patterns relative to the superproject root.

    Structure: <root>/<project>/package.json (default pattern)

    Args:
        root: Superproject root directory.
        patterns: Glob patterns. Defaults to ``*/package.json``.

    Returns:
        Sorted, de-duplicated list of manifest files. Anything under
        a node_modules directory is skipped.
    """
    root_path = Path(root)
    if patterns is None:
        patterns = DEFAULT_MANIFEST_GLOBS
    found: set[Path] = set()
    for pattern in patterns:
        for path in root_path.glob(pattern):
            if not path.is_file():
                continue
            if "node_modules" in path.relative_to(root_path).parts:
                continue
            found.add(path)
    return sorted(found)
