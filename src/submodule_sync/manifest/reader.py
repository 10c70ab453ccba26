"""Parse repository metadata out of package.json manifests."""

import json
import warnings
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from submodule_sync.errors import ManifestError


@dataclass
class ManifestRecord:
    """Repository declared by one manifest."""

    manifest: Path
    url: str
    directory: str | None = None


def read_manifest(path: Path | str) -> ManifestRecord | None:
    """Read the ``repository`` field of a manifest.

    ``repository`` may be a plain string or an object with ``url`` and an
    optional ``directory`` (the package's location inside a monorepo).

    Returns:
        ManifestRecord, or None when the manifest declares no repository.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ManifestError: If the file is not valid UTF-8 JSON, not an object,
            or has a non-string repository.directory.
    """
    manifest_path = Path(path)
    try:
        with open(manifest_path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ManifestError(f"Malformed manifest {manifest_path}: {e}") from e

    if not isinstance(data, dict):
        raise ManifestError(f"Manifest {manifest_path} is not a JSON object")

    repo = data.get("repository")
    directory = None
    if isinstance(repo, dict):
        url = repo.get("url")
        directory = repo.get("directory") or None
        if directory is not None and not isinstance(directory, str):
            raise ManifestError(f"{manifest_path}: repository.directory must be a string")
    else:
        url = repo

    if not url or not isinstance(url, str):
        warnings.warn(f"{manifest_path}: no repository URL, skipping")
        return None

    return ManifestRecord(manifest=manifest_path, url=url, directory=directory)


def submodule_path_for(record: ManifestRecord, root: Path | str) -> str | None:
    """Return the submodule path (relative to root, posix) a manifest belongs to.

    The submodule is the manifest's directory, unless ``repository.directory``
    names the package's place inside a monorepo: then the matching suffix is
    dropped and the monorepo root is the submodule.

    Returns None for a manifest at the superproject root itself.
    """
    rel = PurePosixPath(record.manifest.parent.relative_to(Path(root)).as_posix())
    parts = rel.parts
    if record.directory:
        sub = PurePosixPath(record.directory.strip("/")).parts
        if sub and len(parts) > len(sub) and parts[-len(sub):] == sub:
            parts = parts[: -len(sub)]

    if not parts or parts == (".",):
        return None
    return PurePosixPath(*parts).as_posix()
