"""Parse owner and repository name out of a git remote URL."""

import re

from gitrelease.errors import ParseError
from gitrelease.models import RepoRemoteInfo

# scheme://[user@]host[:port]/owner/name
_URL_RE = re.compile(
    r"^[A-Za-z][A-Za-z0-9+.-]*://(?:[^@/\s]+@)?(?P<host>[^/:@\s]+)(?::\d*)?/(?P<path>\S+)$"
)
# user@host:owner/name
_SCP_RE = re.compile(r"^[^@/:\s]+@(?P<host>[^/:\s]+):/?(?P<path>\S+)$")
# host.tld/owner/name or host.tld:owner/name. The host must be a DNS name
# ending in an alphabetic TLD; a relative directory shaped like one
# (``my.dir/sub/repo``) cannot be told apart and is read as a host.
_BARE_RE = re.compile(
    r"^(?P<host>(?:[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?\.)+[A-Za-z]{2,})"
    r"[:/](?P<path>\S+)$"
)

_PATTERNS = (_URL_RE, _SCP_RE, _BARE_RE)


def parse_remote_url(url: str) -> RepoRemoteInfo:
    """Return the owner/name pair a remote URL points at.

    Accepts SSH (``git@host:owner/name``), bare host paths
    (``host/owner/name``) and full URLs (``https://host/owner/name``), each
    with or without a ``.git`` suffix. Raises ParseError for anything else,
    local filesystem paths included.
    """
    text = url.strip()
    for pattern in _PATTERNS:
        match = pattern.match(text)
        if not match:
            continue
        owner, name = _owner_and_name(match.group("path"))
        if owner and name:
            return RepoRemoteInfo(owner=owner, name=name, host=match.group("host"))
    raise ParseError("could not parse repository info", url)


def _owner_and_name(path: str) -> tuple[str, str]:
    segments = path.split("/")
    if len(segments) < 2:
        return "", ""
    owner, name = segments[0], segments[1]
    if name.endswith(".git"):
        name = name[: -len(".git")]
    return owner, name
