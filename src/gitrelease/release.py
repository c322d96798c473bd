"""Gather the facts for one release in a single call."""

import logging
from typing import Optional

from gitrelease.inspector import RepoInspector
from gitrelease.models import Release

logger = logging.getLogger(__name__)


async def collect_release(inspector: RepoInspector, tag: Optional[str] = None) -> Release:
    """Collect tag, previous tag, commit messages and remote info.

    Uses the latest tag when ``tag`` is not given. Errors from any query
    propagate unchanged.
    """
    if not tag:
        tag = await inspector.latest_tag()
    previous = await inspector.previous_tag(tag)
    messages = await inspector.commits(previous, tag)
    info = await inspector.repo_info()
    logger.debug("%s %s..%s: %d commits", info.slug, previous, tag, len(messages))

    return Release(
        tag=tag,
        previous_tag=previous,
        owner=info.owner,
        name=info.name,
        commits=messages,
    )
