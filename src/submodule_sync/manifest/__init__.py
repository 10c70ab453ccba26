"""Manifest module — repository declarations read from package manifests."""

from submodule_sync.manifest.discover import discover_manifests
from submodule_sync.manifest.reader import ManifestRecord, read_manifest, submodule_path_for
from submodule_sync.manifest.urls import desired_url, format_url, normalize_repo_path

__all__ = [
    "discover_manifests",
    "ManifestRecord",
    "read_manifest",
    "submodule_path_for",
    "desired_url",
    "format_url",
    "normalize_repo_path",
]
