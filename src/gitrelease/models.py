"""Data models for gitrelease."""

from pydantic import BaseModel, Field


class RepoRemoteInfo(BaseModel):
    """Owner and repository name parsed from a remote URL."""

    owner: str
    name: str
    host: str = ""

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.name}"


class Release(BaseModel):
    """Everything a release-notes generator needs for one tag."""

    tag: str
    previous_tag: str
    owner: str
    name: str
    commits: list[str] = Field(default_factory=list)

    @property
    def compare_range(self) -> str:
        """The ``previous..tag`` range the commits were read from."""
        return f"{self.previous_tag}..{self.tag}"
