from os import getenv
from typing import Optional

from git.remote import Remote
from git.repo import Repo

from .git_url import GitUrl


default_remote = "origin"


def git_url_from_remote(remote: Remote) -> GitUrl:
    return GitUrl(remote.url)


def default_remote_name(repo: Repo) -> str:
    remote_name = getenv("GITURL_REMOTE")
    if remote_name:
        return remote_name

    tracking_remote_name = get_tracking_remote_name(repo)
    if tracking_remote_name:
        return tracking_remote_name

    return default_remote


def get_tracking_remote_name(repo: Repo) -> Optional[str]:
    if repo.head.is_detached:
        return None

    tracking_branch = repo.active_branch.tracking_branch()
    if tracking_branch is None:
        return None

    return tracking_branch.remote_name


def get_remote_git_url(path: str = ".", remote_name: Optional[str] = None) -> GitUrl:
    repo = Repo(path, search_parent_directories=True)
    try:
        remote = repo.remote(remote_name or default_remote_name(repo))
        return git_url_from_remote(remote)
    finally:
        repo.close()
