"""Shared test fixtures for submodule-sync."""

import json
import subprocess
from pathlib import Path

import pytest


def git(args: list[str], cwd: Path) -> str:
    """Run a git command for test setup, failing loudly."""
    result = subprocess.run(
        ["git"] + args, cwd=cwd, capture_output=True, text=True, check=True,
    )
    return result.stdout.strip()


def commit_file(repo: Path, name: str, content: str, message: str = "update") -> str:
    (repo / name).write_text(content)
    git(["add", name], repo)
    git(["commit", "-m", message], repo)
    return git(["rev-parse", "HEAD"], repo)


def write_manifest(directory: Path, repository) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    manifest = directory / "package.json"
    data = {"name": directory.name, "version": "1.0.0"}
    if repository is not None:
        data["repository"] = repository
    manifest.write_text(json.dumps(data, indent=2))
    return manifest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's SUBMOD_* / SKIP_GIT settings out of tests."""
    for var in ("SUBMOD_PROTO", "SKIP_GIT", "SUBMOD_ROOT"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def git_env(tmp_path, monkeypatch):
    """Isolated git identity/config; allows file:// submodule clones."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_AUTHOR_NAME", "test")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "t@t")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "test")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "t@t")
    monkeypatch.setenv("GIT_CONFIG_COUNT", "1")
    monkeypatch.setenv("GIT_CONFIG_KEY_0", "protocol.file.allow")
    monkeypatch.setenv("GIT_CONFIG_VALUE_0", "always")
    return home


@pytest.fixture
def upstream(tmp_path, git_env):
    """A repo on branch main with one commit, used as a submodule remote."""
    repo = tmp_path / "upstream" / "lib"
    repo.mkdir(parents=True)
    git(["init", "-b", "main"], repo)
    commit_file(repo, "README.md", "lib\n", "init")
    return repo


@pytest.fixture
def superproject(tmp_path, git_env, upstream):
    """A superproject with ``upstream`` registered as submodule ``lib``."""
    root = tmp_path / "super"
    root.mkdir()
    git(["init", "-b", "main"], root)
    commit_file(root, "README.md", "super\n", "init")
    git(["submodule", "add", str(upstream), "lib"], root)
    git(["commit", "-m", "add lib"], root)
    return root


@pytest.fixture
def empty_superproject(tmp_path, git_env):
    """A superproject with no submodules."""
    root = tmp_path / "super"
    root.mkdir()
    git(["init", "-b", "main"], root)
    commit_file(root, "README.md", "super\n", "init")
    return root
