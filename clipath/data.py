"""Data classes for clipath."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class ToolSpec:
    """How to look up one command-line tool."""

    name: str
    override_key: str
    extra_candidates: tuple[str, ...] = ()
    """Home-relative paths probed after the shared static candidates."""


@dataclass(frozen=True)
class PathDebugSnapshot:
    """Point-in-time view of the resolved tools and composed PATH."""

    codex_binary: str | None
    claude_binary: str | None
    effective_path: str
    login_shell_path: str | None

    @classmethod
    def empty(cls) -> "PathDebugSnapshot":
        """Return a snapshot with nothing resolved."""
        return cls(codex_binary=None, claude_binary=None, effective_path="", login_shell_path=None)

    def as_dict(self) -> dict[str, str | None]:
        """Return the snapshot as a plain dict."""
        return asdict(self)
