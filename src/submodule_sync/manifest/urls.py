"""Repository URL normalization.

Manifests spell the same repository many ways (``git+https://...``,
``git@host:...``, ``github:owner/repo``). Everything is reduced to a
canonical ``owner/repo.git`` path, then formatted for the configured
protocol.
"""

import re

# user@host:owner/repo (scp-like syntax, no scheme)
_SCP_RE = re.compile(r"^(?:[^@/\s]+@)?[^:/\s]+:(?P<path>[^/\s].*)$")
# scheme://[user@]host[:port]/owner/repo
_SCHEME_RE = re.compile(r"^[a-z][a-z0-9+.-]*://(?:[^@/\s]+@)?[^/\s]+/(?P<path>.+)$", re.IGNORECASE)
_OWNER_REPO_RE = re.compile(r"^[\w.-]+/[\w.-]+$")

# npm shorthand prefixes, e.g. "github:owner/repo"
_SHORTHAND_PREFIXES = ("github:", "gitlab:", "bitbucket:")


def normalize_repo_path(url: str) -> str:
    """Reduce a repository URL to ``owner/repo.git``.

    Raises:
        ValueError: If the URL has no recognizable owner/repo path.
    """
    raw = url.strip()
    candidate = raw.split("#", 1)[0]
    if candidate.startswith("git+"):
        candidate = candidate[len("git+"):]

    path = None
    for prefix in _SHORTHAND_PREFIXES:
        if candidate.startswith(prefix):
            path = candidate[len(prefix):]
            break
    else:
        m = _SCHEME_RE.match(candidate)
        if m:
            path = m.group("path")
        elif "://" not in candidate:
            m = _SCP_RE.match(candidate)
            path = m.group("path") if m else candidate

    if path is None:
        raise ValueError(f"Unrecognized repository URL: {url!r}")

    path = path.strip("/")
    if path.endswith(".git"):
        path = path[: -len(".git")]

    if not _OWNER_REPO_RE.match(path):
        raise ValueError(f"Unrecognized repository URL: {url!r}")
    return f"{path}.git"


def format_url(path: str, protocol: str, host: str = "github.com") -> str:
    """Format a canonical ``owner/repo.git`` path as an ssh or https URL."""
    if protocol == "ssh":
        return f"git@{host}:{path}"
    if protocol == "https":
        return f"https://{host}/{path}"
    raise ValueError(f"Unknown protocol: {protocol}")


def desired_url(url: str, protocol: str, host: str = "github.com") -> str:
    """Normalize a manifest URL and format it for the given protocol."""
    return format_url(normalize_repo_path(url), protocol, host)
