"""Example templates: locate them on GitHub and download them with GitPython."""

import os
import shutil
import tempfile
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse

from git import GitCommandError, Repo

OFFICIAL_OWNER = "vercel"
OFFICIAL_REPO = "next.js"
OFFICIAL_BRANCH = "canary"
OFFICIAL_EXAMPLES_DIR = "examples"

CLONE_ENV = {"GIT_TERMINAL_PROMPT": "0"}
SPARSE_CLONE_OPTIONS = ["--filter=blob:none", "--sparse"]


class DownloadError(Exception):
    """The example could not be fetched because of a connectivity problem."""


class InvalidExampleError(ValueError):
    """The example name or URL does not point at a usable GitHub location."""


@dataclass(frozen=True)
class RepoInfo:
    username: str
    name: str
    branch: Optional[str]
    file_path: str

    @property
    def clone_url(self):
        return f"https://github.com/{self.username}/{self.name}.git"


def _is_url(example):
    return example.startswith(("http://", "https://"))


def _repo_info_from_url(example, example_path):
    url = urlparse(example)
    if url.hostname != "github.com":
        raise InvalidExampleError(f"Invalid URL: {example}. Only GitHub repositories are supported.")
    parts = [part for part in url.path.split("/") if part]
    if len(parts) < 2:
        raise InvalidExampleError(f"Found invalid GitHub URL: {example}. Please fix the URL and try again.")
    username, name = parts[0], parts[1].removesuffix(".git")
    if len(parts) == 2:
        return RepoInfo(username, name, None, example_path or "")
    if parts[2] != "tree" or len(parts) < 4:
        raise InvalidExampleError(f"Found invalid GitHub URL: {example}. Please fix the URL and try again.")
    rest = parts[3:]
    if example_path:
        # Branch names may contain slashes; the explicit path tells them apart.
        file_path = example_path.strip("/")
        branch = "/".join(rest).removesuffix(f"/{file_path}")
        return RepoInfo(username, name, branch, file_path)
    return RepoInfo(username, name, rest[0], "/".join(rest[1:]))


def resolve_example(example: str, example_path: Optional[str] = None) -> RepoInfo:
    """Map an example name or GitHub URL to the repository holding it.

    Raises:
        InvalidExampleError: If a URL is not a recognisable GitHub location.
    """
    if _is_url(example):
        return _repo_info_from_url(example, example_path)
    return RepoInfo(
        OFFICIAL_OWNER, OFFICIAL_REPO, OFFICIAL_BRANCH,
        f"{OFFICIAL_EXAMPLES_DIR}/{example}",
    )


# git reports these when the repository or branch does not exist; with
# terminal prompts disabled an unknown https repo fails on credentials.
_MISSING_REMOTE_MARKERS = ("not found", "could not read username", "does not exist")


def _clone_failure(repo_info, exc):
    stderr = str(exc.stderr or "").lower()
    if any(marker in stderr for marker in _MISSING_REMOTE_MARKERS):
        branch = f" (branch {repo_info.branch})" if repo_info.branch else ""
        return InvalidExampleError(
            f"Could not locate the repository {repo_info.username}/{repo_info.name}{branch}. "
            "Please check that the repository exists and try again."
        )
    return DownloadError(f"Failed to download {repo_info.clone_url}: {exc}")


def download_example(repo_info: RepoInfo, root: str, clone_fn=Repo.clone_from):
    """Shallow-clone the repository and copy the example directory into root.

    A sub-path is fetched with a blobless sparse checkout so only the example's
    files are downloaded.

    Raises:
        DownloadError: If the clone fails for any reason other than a missing
            repository or branch.
        InvalidExampleError: If the repository, branch or example directory
            does not exist.
    """
    with tempfile.TemporaryDirectory() as checkout_dir:
        clone_kwargs = {"depth": 1, "single_branch": True, "env": CLONE_ENV}
        if repo_info.branch:
            clone_kwargs["branch"] = repo_info.branch
        if repo_info.file_path:
            clone_kwargs["multi_options"] = SPARSE_CLONE_OPTIONS
        try:
            repo = clone_fn(repo_info.clone_url, checkout_dir, **clone_kwargs)
            if repo_info.file_path:
                repo.git.sparse_checkout("set", repo_info.file_path)
        except GitCommandError as exc:
            raise _clone_failure(repo_info, exc) from exc

        source = os.path.join(checkout_dir, repo_info.file_path) if repo_info.file_path else checkout_dir
        if not os.path.isdir(source):
            raise InvalidExampleError(
                f"Could not locate the path \"{repo_info.file_path}\" in "
                f"{repo_info.username}/{repo_info.name}."
            )
        shutil.copytree(
            source, root, dirs_exist_ok=True, ignore=shutil.ignore_patterns(".git"),
        )
