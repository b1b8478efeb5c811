"""Shared test fixtures for clipath tests."""

from collections.abc import Callable, Iterable, Mapping

import pytest


class FakeProbe:
    """In-memory FilesystemProbe describing a directory tree."""

    def __init__(self, executables: Iterable[str] = (), directories: Mapping[str, list[str]] | None = None) -> None:
        """Initialize the FakeProbe."""
        self.executables = set(executables)
        self.directories = dict(directories or {})
        self.probed: list[str] = []
        self.listed: list[str] = []

    def is_executable_file(self, path: str) -> bool:
        """Return True if the path was registered as executable."""
        self.probed.append(path)
        return path in self.executables

    def list_directory(self, path: str) -> list[str]:
        """Return the registered entries of a directory."""
        self.listed.append(path)
        return list(self.directories.get(path, []))


@pytest.fixture
def home() -> str:
    """Fake home directory that never exists on disk."""
    return "/home/tester"


@pytest.fixture
def make_probe() -> Callable[..., FakeProbe]:
    """Build a FakeProbe from executables and directory listings."""
    return FakeProbe
