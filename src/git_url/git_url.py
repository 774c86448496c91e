from copy import copy
from typing import Optional


class ParseGitUrlError(ValueError):
    def __init__(self, url: str):
        super().__init__(url)
        self.url = url


class GitUrl:
    """A git remote URL split into a fixed host and a navigable path.

    Accepted forms are ``http://host/path``, ``https://host/path`` and the
    scp-like ``[user@]host:path``. The value renders back as ``host:path``.
    """

    http_prefix = "http://"
    https_prefix = "https://"

    def __init__(self, url: str):
        self._host, self._path = self.__split(url)

    @classmethod
    def parse(cls, url: str) -> "GitUrl":
        return cls(url)

    @property
    def host(self) -> str:
        return self._host

    @property
    def path(self) -> str:
        return self._path

    def copy(self) -> "GitUrl":
        return copy(self)

    def pop(self) -> Optional["GitUrl"]:
        git_url = self.copy()
        return git_url if git_url.pop_mut() else None

    def pop_mut(self) -> bool:
        path = pop_segment(self._path)
        if path is None:
            return False
        self._path = path
        return True

    def join(self, child_path: str) -> Optional["GitUrl"]:
        git_url = self.copy()
        return git_url if git_url.join_mut(child_path) else None

    def join_mut(self, child_path: str) -> bool:
        path = join_segments(self._path, child_path)
        if path is None:
            return False
        self._path = path
        return True

    def __split(self, url: str) -> tuple[str, str]:
        for prefix in (self.http_prefix, self.https_prefix):
            if url.startswith(prefix):
                separator = url.find("/", len(prefix))
                break
        else:
            separator = url.find(":")

        if separator < 0:
            raise ParseGitUrlError(url)

        return url[:separator], url[separator + 1 :]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GitUrl):
            return NotImplemented
        return (self._host, self._path) == (other._host, other._path)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        if not self._path:
            return self._host
        return f"{self._host}:{self._path}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"


def pop_segment(path: str) -> Optional[str]:
    if not path:
        return None
    separator = path.rfind("/")
    return path[:separator] if separator >= 0 else ""


def join_segments(path: str, child_path: str) -> Optional[str]:
    """Resolve ``child_path`` against ``path``.

    Returns ``None`` on an empty segment or on a ``..`` above the root.
    """
    for segment in child_path.split("/"):
        if not segment:
            return None

        if segment == "..":
            parent = pop_segment(path)
            if parent is None:
                return None
            path = parent
        elif segment != ".":
            path = f"{path}/{segment}" if path else segment

    return path
