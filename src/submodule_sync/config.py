"""Run configuration.

Resolves settings from defaults, an optional YAML file in the superproject
root, environment variables and CLI flags (in increasing precedence).

Environment variables:
    SUBMOD_PROTO — URL protocol for submodule remotes: ssh or https (default: ssh)
    SKIP_GIT — when non-empty, print mutating git commands instead of running them
    SUBMOD_ROOT — superproject root (default: current directory)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from submodule_sync.errors import ConfigError

CONFIG_FILENAME = ".submodule-sync.yaml"

PROTOCOLS = ("ssh", "https")
DEFAULT_PROTOCOL = "ssh"
DEFAULT_HOST = "github.com"
DEFAULT_BRANCH = "main"
DEFAULT_MANIFEST_GLOBS = ["*/package.json"]


@dataclass
class SyncConfig:
    root: Path
    protocol: str = DEFAULT_PROTOCOL
    host: str = DEFAULT_HOST
    dry_run: bool = False
    default_branch: str = DEFAULT_BRANCH
    manifest_globs: list[str] = field(default_factory=lambda: list(DEFAULT_MANIFEST_GLOBS))


def resolve_root(root: Path | str | None = None, env: Mapping[str, str] | None = None) -> Path:
    """Return the superproject root from an explicit path, SUBMOD_ROOT, or cwd."""
    env = os.environ if env is None else env
    raw = root or env.get("SUBMOD_ROOT")
    if raw:
        return Path(raw).expanduser().resolve()
    return Path.cwd()


def read_config_file(path: Path | str) -> dict:
    """Read a YAML config file.

    Raises:
        ConfigError: If the file is unreadable, the YAML is malformed,
            or the top level is not a mapping.
    """
    config_path = Path(path)
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Malformed config file {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} is not a YAML mapping")
    return data


def _check_protocol(value: str, source: str) -> str:
    proto = value.strip().lower()
    if proto not in PROTOCOLS:
        raise ConfigError(
            f"Unknown protocol '{value}' from {source}. Valid: {', '.join(PROTOCOLS)}"
        )
    return proto


def load_config(
    root: Path | str | None = None,
    config_path: Path | str | None = None,
    env: Mapping[str, str] | None = None,
    protocol: str | None = None,
    dry_run: bool | None = None,
) -> SyncConfig:
    """Build the run configuration.

    Args:
        root: Superproject root. Defaults to SUBMOD_ROOT or the current directory.
        config_path: YAML config file. Defaults to <root>/.submodule-sync.yaml if present.
        env: Environment mapping. Defaults to os.environ.
        protocol: CLI override for the URL protocol.
        dry_run: CLI override for dry-run mode (only True overrides).

    Returns:
        Resolved SyncConfig.

    Raises:
        ConfigError: On an unknown protocol or a bad config file.
    """
    env = os.environ if env is None else env
    cfg = SyncConfig(root=resolve_root(root, env))

    if config_path:
        file_data = read_config_file(config_path)
    elif (cfg.root / CONFIG_FILENAME).is_file():
        file_data = read_config_file(cfg.root / CONFIG_FILENAME)
    else:
        file_data = {}

    if "protocol" in file_data:
        cfg.protocol = _check_protocol(str(file_data["protocol"]), "config file")
    if file_data.get("host"):
        cfg.host = str(file_data["host"])
    if file_data.get("default_branch"):
        cfg.default_branch = str(file_data["default_branch"])
    if "manifests" in file_data:
        globs = file_data["manifests"]
        if isinstance(globs, str):
            globs = [globs]
        if not isinstance(globs, list) or not all(isinstance(g, str) for g in globs):
            raise ConfigError("'manifests' must be a glob string or a list of glob strings")
        cfg.manifest_globs = globs

    if env.get("SUBMOD_PROTO") and not protocol:
        cfg.protocol = _check_protocol(env["SUBMOD_PROTO"], "SUBMOD_PROTO")
    if env.get("SKIP_GIT"):
        cfg.dry_run = True

    if protocol:
        cfg.protocol = _check_protocol(protocol, "--proto")
    if dry_run:
        cfg.dry_run = True

    return cfg
