"""Read-only git queries used to assemble a release."""

import asyncio
import contextlib
import logging
import os
from asyncio.subprocess import DEVNULL, PIPE, STDOUT
from typing import Optional, Union

from gitrelease.errors import InvocationError
from gitrelease.models import RepoRemoteInfo
from gitrelease.remote import parse_remote_url

logger = logging.getLogger(__name__)

# Prefixes every message in `git log` output so the stream can be split per commit.
COMMIT_SENTINEL = "0" * 35


class RepoInspector:
    """Runs git processes targeted at a directory.

    If ``directory`` is empty, git runs in the current working directory.
    Instances hold no state besides their configuration: every query starts
    its own git process and parses fresh output, so concurrent calls are
    independent. Cancelling the awaiting task kills the process.
    """

    def __init__(
        self,
        directory: Union[str, os.PathLike, None] = None,
        git_executable: str = "git",
    ) -> None:
        self.directory: Optional[str] = os.fspath(directory) if directory else None
        self.git_executable = git_executable

    def __repr__(self) -> str:
        return f"RepoInspector(directory={self.directory!r})"

    # ── Queries ───────────────────────────────────────────────────────────

    async def latest_tag(self) -> str:
        """Return the most recent tag reachable from HEAD."""
        out = await self._run("describe", "--tags", "--abbrev=0")
        return out.rstrip("\n")

    async def previous_tag(self, tag: str) -> str:
        """Return the nearest tag reachable from the parent of ``tag``.

        ``tag`` can be any reference git understands, e.g. ``"@"`` for the
        current checkout.
        """
        self._check_refs("describe", tag)
        out = await self._run("describe", "--tags", "--abbrev=0", f"{tag}^")
        return out.rstrip("\n")

    async def commits(self, tag_a: str, tag_b: str) -> list[str]:
        """Return the messages of commits in ``tag_a..tag_b``, oldest first."""
        self._check_refs("log", tag_a, tag_b)
        out = await self._run(
            "log",
            "--oneline",
            "--reverse",
            f"{tag_a}..{tag_b}",
            f"--pretty={COMMIT_SENTINEL}%B",
        )
        # Nothing precedes the first sentinel; the trailing newlines are git's.
        return [segment.rstrip("\n") for segment in out.split(COMMIT_SENTINEL)[1:]]

    async def repo_info(self) -> RepoRemoteInfo:
        """Return owner and name of the ``origin`` remote."""
        out = await self._run("config", "--get", "remote.origin.url")
        return parse_remote_url(out)

    # ── Process plumbing ──────────────────────────────────────────────────

    def _check_refs(self, subcommand: str, *refs: str) -> None:
        """Refuse references git would parse as options."""
        for ref in refs:
            if ref.startswith("-"):
                raise InvocationError(
                    [self.git_executable, subcommand, ref],
                    None,
                    f"invalid reference {ref!r}: must not start with '-'",
                )

    async def _run(self, *args: str) -> str:
        """Run git with ``args`` and return its combined stdout+stderr."""
        command = [self.git_executable, *args]
        logger.debug("running %s in %s", command, self.directory or ".")
        try:
            proc = await asyncio.create_subprocess_exec(
                *command,
                cwd=self.directory,
                stdin=DEVNULL,
                stdout=PIPE,
                stderr=STDOUT,
            )
        except OSError as e:
            raise InvocationError(command, None, str(e)) from e

        try:
            raw, _ = await proc.communicate()
        except asyncio.CancelledError:
            with contextlib.suppress(ProcessLookupError):
                proc.kill()
            await proc.wait()
            raise

        output = raw.decode("utf-8", errors="replace")
        logger.debug("%s exited with %s", command, proc.returncode)
        if proc.returncode != 0:
            raise InvocationError(command, proc.returncode, output)
        return output
