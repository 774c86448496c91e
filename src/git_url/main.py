from argparse import ArgumentParser
from dotenv import find_dotenv, load_dotenv
from git.exc import InvalidGitRepositoryError, NoSuchPathError
from typing import NoReturn, Optional

from git_url.git_url import GitUrl, ParseGitUrlError
from git_url.remote import get_remote_git_url


version = "0.1.0"
program = "git-url"

verbose = False


def main(argv: Optional[list[str]] = None):
    global verbose

    parser = build_parser()
    args = parser.parse_args(argv)
    verbose = args.verbose

    load_dotenv(find_dotenv(usecwd=True))

    git_url = resolve_git_url(args.url, args.directory, args.remote)

    for operation, child_path in args.steps or []:
        if operation == "pop":
            pop(git_url)
        else:
            join(git_url, child_path)

    if args.host:
        print(git_url.host)
    elif args.path:
        print(git_url.path)
    else:
        print(git_url)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog=program, description="Parse and navigate Git remote URLs."
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {version}"
    )
    parser.add_argument(
        "url", nargs="?", help="remote URL; read from the repository when omitted"
    )
    parser.add_argument(
        "-C",
        "--directory",
        metavar="PATH",
        help="repository to read the remote URL from (default: .)",
    )
    parser.add_argument(
        "-r",
        "--remote",
        metavar="NAME",
        help="remote to read the URL from (default: $GITURL_REMOTE, "
        "the tracking branch's remote, then origin)",
    )
    parser.add_argument(
        "-p",
        "--pop",
        dest="steps",
        action="append_const",
        const=("pop", None),
        help="go up one path segment",
    )
    parser.add_argument(
        "-j",
        "--join",
        dest="steps",
        action="append",
        type=lambda child_path: ("join", child_path),
        metavar="CHILD",
        help="append a relative path, resolving '.' and '..'",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--host", action="store_true", help="print only the host")
    output.add_argument("--path", action="store_true", help="print only the path")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="report each step"
    )
    return parser


def resolve_git_url(
    url: Optional[str], directory: Optional[str], remote_name: Optional[str]
) -> GitUrl:
    if url is not None:
        if directory is not None or remote_name is not None:
            fail("A URL cannot be combined with --directory or --remote.")
        return parse(url)

    directory = directory or "."
    try:
        git_url = get_remote_git_url(directory, remote_name)
    except (InvalidGitRepositoryError, NoSuchPathError):
        fail(f"{directory} is not inside a Git repository.")
    except ParseGitUrlError as error:
        fail(f"Remote URL {error.url} is not a Git URL.")
    except ValueError as error:
        fail(str(error))

    info(f"Using remote URL {git_url}")
    return git_url


def parse(url: str) -> GitUrl:
    try:
        return GitUrl(url)
    except ParseGitUrlError as error:
        fail(f"{error.url} is not a Git URL.")


def pop(git_url: GitUrl):
    if not git_url.pop_mut():
        fail(f"Cannot go up from {git_url}.")
    info(f"pop -> {git_url}")


def join(git_url: GitUrl, child_path: str):
    if not git_url.join_mut(child_path):
        fail(f"Cannot join {child_path!r} to {git_url}.")
    info(f"join {child_path} -> {git_url}")


def fail(message: str) -> NoReturn:
    raise SystemExit(f"{program} error: {message}")


def info(message: str):
    if verbose:
        print(f"{program} info: {message}")
