from __future__ import annotations

import re
from typing import Any, Optional, TypedDict

_EMAIL_RE = re.compile(
    r"^(([^<>()\[\]\.,;:\s@\"]+(\.[^<>()\[\]\.,;:\s@\"]+)*)|(\".+\"))"
    r"@((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))$"
)

_URL_RE = re.compile(
    r"https?://(www\.)?[-a-zA-Z0-9@:%._+~#=]{2,256}\.[a-z]{2,6}\b([-a-zA-Z0-9@:%_+.~#?&//=]*)"
)

_GITHUB_REPO_RE = re.compile(r"(https|http|git)://(www\.)?github\.com/[^/]+/[^/]+(\.git)?$")

GITHUB_PREFIXES = (
    "https://github.com/",
    "http://github.com/",
    "git://github.com/",
    "git@github.com:/",
)


class GithubRepoRef(TypedDict):
    owner: str
    repo: Optional[str]


def is_valid_email(email: Any) -> bool:
    """Structural check only; says nothing about deliverability."""

    if not isinstance(email, str):
        return False
    return _EMAIL_RE.match(email) is not None


def is_valid_url(url: Any) -> bool:
    """True when an http(s) URL appears anywhere in the value."""

    if not isinstance(url, str):
        return False
    return _URL_RE.search(url) is not None


def is_valid_repository_url(repo_url: Any) -> bool:
    """True when repo_url ends with a GitHub owner/repo URL."""

    if not repo_url or not isinstance(repo_url, str):
        return False
    return _GITHUB_REPO_RE.search(repo_url) is not None


def parse_github_url(github_url: str) -> GithubRepoRef:
    """Split a GitHub URL into owner and repo.

    >>> parse_github_url("https://github.com/GSA/code-gov-harvester/")
    {'owner': 'GSA', 'repo': 'code-gov-harvester'}
    """

    url = github_url
    if url.endswith("/"):
        url = url[:-1]
    if url.endswith(".git"):
        url = url[: -len(".git")]
    for prefix in GITHUB_PREFIXES:
        if url.startswith(prefix):
            url = url[len(prefix):]

    parts = url.split("/")
    return {"owner": parts[0], "repo": parts[1] if len(parts) > 1 else None}
