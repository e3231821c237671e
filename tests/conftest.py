"""Pytest configuration and fixtures for semv tests"""
import tempfile
from pathlib import Path
import pytest


class FakeTagSource:
    """In-memory TagSource that records the repositories it was asked for"""

    def __init__(self, tags=None, error=None):
        self.tags = list(tags or [])
        self.error = error
        self.calls = []

    def list_tags(self, repository=""):
        self.calls.append(repository)
        if self.error is not None:
            raise self.error
        return list(self.tags)


class FakeMetadata:
    """BuildMetadataProvider returning fixed values"""

    def __init__(self, commit="abc1234", user="alice", error=None):
        self.commit = commit
        self.user = user
        self.error = error

    def latest_commit(self):
        if self.error is not None:
            raise self.error
        return self.commit

    def current_user(self):
        if self.error is not None:
            raise self.error
        return self.user


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for test files"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def git_repo(temp_dir):
    """Provide a temporary directory that looks like a git checkout"""
    (temp_dir / ".git").mkdir()
    yield temp_dir


@pytest.fixture
def tag_source():
    """Provide a tag source with a mix of releases, pre-releases and junk"""
    return FakeTagSource([
        "v1.0.0",
        "v1.1.0-rc.0",
        "not-a-version",
        "v2.0.0",
        "v1.2.9",
    ])


@pytest.fixture
def metadata():
    """Provide a build metadata provider"""
    return FakeMetadata()


@pytest.fixture
def make_metadata():
    """Provide a factory for metadata providers with custom values"""
    return FakeMetadata


@pytest.fixture
def make_source():
    """Provide a factory for tag sources with custom tags"""
    return FakeTagSource
