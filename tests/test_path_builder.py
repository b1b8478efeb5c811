"""Tests for clipath.path_builder module."""

from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import pytest

from clipath.const import PathPurpose
from clipath.data import PathDebugSnapshot
from clipath.locator import BinaryLocator
from clipath.path_builder import PathBuilder, dedupe_path_entries


@pytest.fixture
def cache() -> MagicMock:
    """Login shell cache stub with nothing captured."""
    stub = MagicMock()
    stub.current = None
    return stub


def make_builder(home: str, probe: Any, cache: MagicMock) -> PathBuilder:
    return PathBuilder(locator=BinaryLocator(probe=probe, home=home), cache=cache)


class TestDedupePathEntries:
    """Test de-duplication."""

    def test_keeps_first_occurrence(self) -> None:
        """Test later duplicates and empty entries are dropped."""
        assert dedupe_path_entries(["/a", "", "/b", "/a", "/c", "/b", ""]) == ["/a", "/b", "/c"]


class TestEffectivePath:
    """Test effective PATH composition."""

    def test_uses_existing_path_first_and_dedupes(
        self, home: str, make_probe: Callable[..., Any], cache: MagicMock
    ) -> None:
        """Test the process PATH leads and duplicates collapse."""
        builder = make_builder(home, make_probe(), cache)

        parts = builder.effective_path(
            {PathPurpose.RPC},
            {"PATH": "/custom/bin:/usr/bin"},
            login_path=None,
            resolved_binary_paths=["/tmp/codex/bin"],
        ).split(":")

        assert parts[0] == "/custom/bin"
        assert "/opt/homebrew/bin" in parts
        assert "/tmp/codex/bin" in parts
        assert parts.count("/usr/bin") == 1

    def test_full_order(self, home: str, make_probe: Callable[..., Any], cache: MagicMock) -> None:
        """Test env PATH, baseline, tool dirs, then login PATH."""
        builder = make_builder(home, make_probe(), cache)

        path = builder.effective_path(
            {PathPurpose.TTY},
            {"PATH": "/usr/bin"},
            login_path=["/login/bin", "/usr/bin"],
            resolved_binary_paths=["/tools/bin"],
        )

        assert path == ":".join(
            [
                "/usr/bin",
                "/opt/homebrew/bin",
                "/usr/local/bin",
                f"{home}/.local/bin",
                f"{home}/bin",
                f"{home}/.bun/bin",
                f"{home}/.npm-global/bin",
                "/tools/bin",
                "/login/bin",
            ]
        )

    def test_dedupe_across_sources(self, home: str, make_probe: Callable[..., Any], cache: MagicMock) -> None:
        """Test /a and /b each appear once, in order, across env, baseline and tool dirs."""
        builder = make_builder(home, make_probe(), cache)

        parts = builder.effective_path(
            {PathPurpose.RPC},
            {"PATH": "/opt/homebrew/bin:/tools/bin"},
            resolved_binary_paths=["/tools/bin"],
        ).split(":")

        assert parts.count("/opt/homebrew/bin") == 1
        assert parts.count("/tools/bin") == 1
        assert parts.index("/opt/homebrew/bin") < parts.index("/tools/bin") < parts.index("/usr/local/bin")

    def test_posix_fallback_without_path(self, home: str, make_probe: Callable[..., Any], cache: MagicMock) -> None:
        """Test a missing PATH starts with the POSIX fallback."""
        builder = make_builder(home, make_probe(), cache)

        parts = builder.effective_path({PathPurpose.TTY}, {}, resolved_binary_paths=[]).split(":")

        assert parts[:5] == ["/usr/bin", "/bin", "/usr/sbin", "/sbin", "/opt/homebrew/bin"]

    def test_posix_fallback_with_empty_path(
        self, home: str, make_probe: Callable[..., Any], cache: MagicMock
    ) -> None:
        """Test an empty PATH is treated like a missing one."""
        builder = make_builder(home, make_probe(), cache)

        assert builder.effective_path({PathPurpose.TTY}, {"PATH": ""}, resolved_binary_paths=[]).startswith(
            "/usr/bin:/bin:/usr/sbin:/sbin:"
        )

    def test_appends_login_path(self, home: str, make_probe: Callable[..., Any], cache: MagicMock) -> None:
        """Test login PATH entries are included when there is no PATH."""
        builder = make_builder(home, make_probe(), cache)

        parts = builder.effective_path(
            {PathPurpose.TTY}, {}, login_path=["/login/path/bin"], resolved_binary_paths=[]
        ).split(":")

        assert parts[0] == "/usr/bin"
        assert parts[-1] == "/login/path/bin"

    def test_resolves_binary_dirs_when_not_given(
        self, home: str, make_probe: Callable[..., Any], cache: MagicMock
    ) -> None:
        """Test tool directories come from the locator by default."""
        nvm_root = f"{home}/.nvm/versions/node"
        probe = make_probe(
            executables=[f"{nvm_root}/v20.0.0/bin/codex"],
            directories={nvm_root: ["v20.0.0"]},
        )
        builder = make_builder(home, probe, cache)

        parts = builder.effective_path({PathPurpose.RPC}, {"PATH": "/usr/bin"}, login_path=["/login"]).split(":")

        assert parts[-2:] == [f"{nvm_root}/v20.0.0/bin", "/login"]

    def test_node_tooling_skips_binary_dirs(
        self, home: str, make_probe: Callable[..., Any], cache: MagicMock
    ) -> None:
        """Test non-binary purposes leave tool directories out."""
        nvm_root = f"{home}/.nvm/versions/node"
        probe = make_probe(
            executables=[f"{nvm_root}/v20.0.0/bin/codex"],
            directories={nvm_root: ["v20.0.0"]},
        )
        builder = make_builder(home, probe, cache)

        path = builder.effective_path({PathPurpose.NODE_TOOLING}, {"PATH": "/usr/bin"})

        assert f"{nvm_root}/v20.0.0/bin" not in path.split(":")


class TestDebugSnapshot:
    """Test diagnostic snapshots."""

    def test_snapshot_with_login_path(self, home: str, make_probe: Callable[..., Any], cache: MagicMock) -> None:
        """Test the snapshot reflects the cached login PATH."""
        cache.current = ["/login/bin", "/usr/bin"]
        probe = make_probe(executables=["/login/bin/codex", f"{home}/.claude/local/claude"])
        builder = make_builder(home, probe, cache)

        snapshot = builder.debug_snapshot({PathPurpose.RPC}, {"PATH": "/usr/bin"})

        assert snapshot == PathDebugSnapshot(
            codex_binary="/login/bin/codex",
            claude_binary=f"{home}/.claude/local/claude",
            effective_path=builder.effective_path(
                {PathPurpose.RPC}, {"PATH": "/usr/bin"}, login_path=["/login/bin", "/usr/bin"]
            ),
            login_shell_path="/login/bin:/usr/bin",
        )
        assert snapshot.effective_path.split(":")[-2:] == ["/login/bin", f"{home}/.claude/local"]
        cache.capture_once.assert_not_called()

    def test_snapshot_without_login_path(
        self, home: str, make_probe: Callable[..., Any], cache: MagicMock
    ) -> None:
        """Test nothing resolved and nothing captured."""
        builder = make_builder(home, make_probe(), cache)

        snapshot = builder.debug_snapshot({PathPurpose.TTY}, {})

        assert snapshot.codex_binary is None
        assert snapshot.claude_binary is None
        assert snapshot.login_shell_path is None
        assert snapshot.effective_path.startswith("/usr/bin:/bin")
