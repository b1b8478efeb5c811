"""Tests for clipath.data module."""

import dataclasses

import pytest

from clipath.data import PathDebugSnapshot, ToolSpec


class TestPathDebugSnapshot:
    """Test PathDebugSnapshot."""

    def test_empty(self) -> None:
        """Test the empty snapshot."""
        snapshot = PathDebugSnapshot.empty()
        assert snapshot.codex_binary is None
        assert snapshot.claude_binary is None
        assert snapshot.effective_path == ""
        assert snapshot.login_shell_path is None

    def test_immutable(self) -> None:
        """Test snapshots cannot be modified."""
        snapshot = PathDebugSnapshot.empty()
        with pytest.raises(dataclasses.FrozenInstanceError):
            snapshot.effective_path = "/usr/bin"  # type: ignore[misc]

    def test_as_dict(self) -> None:
        """Test conversion to a plain dict."""
        snapshot = PathDebugSnapshot("/a/codex", None, "/a:/usr/bin", "/usr/bin")
        assert snapshot.as_dict() == {
            "codex_binary": "/a/codex",
            "claude_binary": None,
            "effective_path": "/a:/usr/bin",
            "login_shell_path": "/usr/bin",
        }


class TestToolSpec:
    """Test ToolSpec."""

    def test_defaults(self) -> None:
        """Test extra candidates default to none."""
        spec = ToolSpec(name="codex", override_key="CODEX_CLI_PATH")
        assert spec.extra_candidates == ()
        assert spec == ToolSpec("codex", "CODEX_CLI_PATH")

    def test_hashable_with_default_candidates(self) -> None:
        """Test specs with default candidates hash equal and share the empty tuple."""
        first = ToolSpec(name="codex", override_key="CODEX_CLI_PATH")
        second = ToolSpec(name="codex", override_key="CODEX_CLI_PATH")
        assert hash(first) == hash(second)
        assert first.extra_candidates is second.extra_candidates
