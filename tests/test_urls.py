"""Tests for repository URL normalization."""

import pytest

from submodule_sync.manifest.urls import desired_url, format_url, normalize_repo_path


class TestNormalizeRepoPath:
    @pytest.mark.parametrize("url", [
        "git+https://github.com/acme/widget",
        "git+https://github.com/acme/widget.git",
        "https://github.com/acme/widget",
        "https://github.com/acme/widget/",
        "git+ssh://git@github.com/acme/widget.git",
        "ssh://git@github.com:22/acme/widget.git",
        "git://github.com/acme/widget.git",
        "git@github.com:acme/widget",
        "git@github.com:acme/widget.git",
        "github:acme/widget",
        "acme/widget",
        "https://github.com/acme/widget.git#v1.2.0",
    ])
    def test_known_forms(self, url):
        assert normalize_repo_path(url) == "acme/widget.git"

    def test_git_plus_prefix_on_other_host(self):
        assert normalize_repo_path("git+https://gitlab.example.com/team/tool") == "team/tool.git"

    def test_scp_form_other_host(self):
        assert normalize_repo_path("git@gitlab.example.com:team/tool") == "team/tool.git"

    def test_dots_and_dashes_kept(self):
        assert normalize_repo_path("git@github.com:my-org/some.lib.git") == "my-org/some.lib.git"

    @pytest.mark.parametrize("url", [
        "",
        "widget",
        "https://github.com/acme",
        "https://github.com/acme/widget/tree/main",
    ])
    def test_rejects_unrecognized(self, url):
        with pytest.raises(ValueError, match="Unrecognized repository URL"):
            normalize_repo_path(url)


class TestFormatUrl:
    def test_ssh(self):
        assert format_url("acme/widget.git", "ssh") == "git@github.com:acme/widget.git"

    def test_https(self):
        assert format_url("acme/widget.git", "https") == "https://github.com/acme/widget.git"

    def test_custom_host(self):
        assert format_url("a/b.git", "https", "git.example.org") == "https://git.example.org/a/b.git"

    def test_unknown_protocol(self):
        with pytest.raises(ValueError, match="Unknown protocol"):
            format_url("a/b.git", "ftp")

    def test_desired_url_from_ssh_manifest_as_https(self):
        assert desired_url("git@github.com:acme/widget", "https") == "https://github.com/acme/widget.git"
