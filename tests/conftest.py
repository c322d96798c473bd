"""Pytest configuration and fixtures."""

import uuid
from pathlib import Path

import git  # GitPython
import pytest

from gitrelease.inspector import RepoInspector


class RepoBuilder:
    """Builds a throwaway git repository commit by commit."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self.repo = git.Repo.init(path)
        with self.repo.config_writer() as cw:
            cw.set_value("user", "name", "Release Tester")
            cw.set_value("user", "email", "tester@example.com")

    def commit(self, message: str, filename: str = "file.txt") -> git.Commit:
        """Append random content to ``filename`` and commit it."""
        with (self.path / filename).open("a") as f:
            f.write(uuid.uuid4().hex + "\n")
        self.repo.index.add([filename])
        return self.repo.index.commit(message)

    def tag(self, name: str) -> None:
        self.repo.create_tag(name)

    def add_origin(self, url: str) -> None:
        self.repo.create_remote("origin", url)


@pytest.fixture
def repo_builder(tmp_path):
    return RepoBuilder(tmp_path)


@pytest.fixture
def inspector(repo_builder):
    return RepoInspector(directory=repo_builder.path)


@pytest.fixture
def tagged_repo(repo_builder):
    """Tags v0.0.1 and v0.0.2, then one untagged commit on top."""
    repo_builder.commit("initial import")
    repo_builder.tag("v0.0.1")
    repo_builder.commit("second change", filename="file2.txt")
    repo_builder.tag("v0.0.2")
    repo_builder.commit("unreleased work", filename="file3.txt")
    return repo_builder
