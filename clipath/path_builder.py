"""Compose the effective PATH handed to child processes.

Sources, highest priority first:

1. the process ``PATH`` (or a POSIX fallback when it is unset or empty)
2. a static baseline of common install directories
3. directories holding the resolved codex/claude binaries
4. the captured login-shell PATH

Later duplicates are dropped, so a directory keeps its highest-priority slot.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence

from clipath.const import PATH_ENV, PATH_SEPARATOR, POSIX_FALLBACK_PATH, PathPurpose
from clipath.data import PathDebugSnapshot
from clipath.locator import BinaryLocator, static_bin_dirs
from clipath.login_shell import LoginShellPathCache, get_shared_cache

logger = logging.getLogger(__name__)


def dedupe_path_entries(entries: Iterable[str]) -> list[str]:
    """Drop empty and repeated entries, keeping the first occurrence."""
    seen: set[str] = set()
    deduped = []
    for entry in entries:
        if entry and entry not in seen:
            seen.add(entry)
            deduped.append(entry)
    return deduped


class PathBuilder:
    """Build effective PATH strings and diagnostic snapshots."""

    def __init__(self, locator: BinaryLocator | None = None, cache: LoginShellPathCache | None = None) -> None:
        """Initialize the builder.

        Args:
            locator: Binary locator used for tool directories
            cache: Login shell PATH cache read by ``debug_snapshot``;
                defaults to the process-wide cache

        """
        self.locator = locator if locator is not None else BinaryLocator()
        self.cache = cache if cache is not None else get_shared_cache()

    def effective_path(
        self,
        purposes: Iterable[PathPurpose],
        env: Mapping[str, str],
        login_path: Sequence[str] | None = None,
        resolved_binary_paths: Sequence[str] | None = None,
    ) -> str:
        """Return the ordered, de-duplicated PATH for the given purposes.

        Args:
            purposes: What the PATH will be used for
            env: Environment providing the current ``PATH``
            login_path: Login shell PATH entries, appended last
            resolved_binary_paths: Tool directories to include; computed
                with the locator when None

        """
        existing = env.get(PATH_ENV)
        parts = existing.split(PATH_SEPARATOR) if existing else list(POSIX_FALLBACK_PATH)
        parts.extend(static_bin_dirs(self.locator.home))

        if resolved_binary_paths is None:
            resolved_binary_paths = self.locator.directories(purposes, env, login_path)
        parts.extend(resolved_binary_paths)

        if login_path:
            parts.extend(login_path)

        return PATH_SEPARATOR.join(dedupe_path_entries(parts))

    def debug_snapshot(self, purposes: Iterable[PathPurpose], env: Mapping[str, str]) -> PathDebugSnapshot:
        """Collect resolved tools and PATHs for display.

        Reads whatever the cache holds right now; never starts a capture.
        """
        purposes = frozenset(purposes)
        login_path = self.cache.current
        snapshot = PathDebugSnapshot(
            codex_binary=self.locator.resolve_codex(env, login_path),
            claude_binary=self.locator.resolve_claude(env, login_path),
            effective_path=self.effective_path(purposes, env, login_path),
            login_shell_path=PATH_SEPARATOR.join(login_path) if login_path is not None else None,
        )
        logger.debug("PATH debug snapshot: %s", snapshot)
        return snapshot
