"""Locate the codex and claude command-line tools.

Resolution runs a fixed sequence of strategies and returns the first
executable hit:

1. explicit override environment variable
2. the process ``PATH``
3. the captured login-shell PATH
4. well-known install locations
5. nvm versions
6. fnm node versions, then fnm aliases
7. mise/rtx shims, then mise/rtx installs

A miss is not an error, it is ``None``.
"""

import logging
import os
from collections.abc import Callable, Iterable, Mapping, Sequence

from clipath.const import (
    BINARY_PURPOSES,
    CLAUDE_EXTRA_CANDIDATES,
    CLAUDE_OVERRIDE_ENV,
    CODEX_OVERRIDE_ENV,
    DEFAULT_FNM_DIRS,
    DEFAULT_MISE_DIRS,
    DEFAULT_NVM_DIR,
    FNM_ALIASES_SUBDIR,
    FNM_DIR_ENV,
    FNM_INSTALLATION_SUBDIR,
    FNM_NODE_VERSIONS_SUBDIR,
    FNM_PREFERRED_ALIASES,
    HOME_BIN_DIRS,
    MISE_DATA_DIR_ENV,
    MISE_INSTALLS_SUBDIR,
    MISE_SHIMS_SUBDIR,
    NVM_DIR_ENV,
    NVM_VERSIONS_SUBDIR,
    PATH_ENV,
    PATH_SEPARATOR,
    RTX_DATA_DIR_ENV,
    SYSTEM_BIN_DIRS,
    PathPurpose,
    ToolName,
)
from clipath.data import ToolSpec
from clipath.probe import FilesystemProbe, OSFilesystemProbe
from clipath.versions import sort_versions_descending

CODEX_TOOL = ToolSpec(name=str(ToolName.CODEX), override_key=CODEX_OVERRIDE_ENV)
CLAUDE_TOOL = ToolSpec(
    name=str(ToolName.CLAUDE),
    override_key=CLAUDE_OVERRIDE_ENV,
    extra_candidates=CLAUDE_EXTRA_CANDIDATES,
)

TOOL_SPECS: dict[str, ToolSpec] = {
    CODEX_TOOL.name: CODEX_TOOL,
    CLAUDE_TOOL.name: CLAUDE_TOOL,
}


def static_bin_dirs(home: str) -> list[str]:
    """Return the well-known bin directories, system prefixes first."""
    return [*SYSTEM_BIN_DIRS, *(f"{home}/{rel}" for rel in HOME_BIN_DIRS)]


class BinaryLocator:
    """Resolve tool binaries against the environment and the filesystem.

    The locator holds no state besides its probe and home directory, so one
    instance can be shared across threads.
    """

    def __init__(self, probe: FilesystemProbe | None = None, home: str | None = None) -> None:
        """Initialize the locator.

        Args:
            probe: Filesystem access; defaults to the real filesystem
            home: Home directory used for home-relative candidates

        """
        self.probe: FilesystemProbe = probe if probe is not None else OSFilesystemProbe()
        self.home = home or os.path.expanduser("~")
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def resolve(
        self,
        name: str,
        override_key: str,
        env: Mapping[str, str],
        login_path: Sequence[str] | None = None,
        extra_candidates: Sequence[str] = (),
    ) -> str | None:
        """Find ``name`` using every strategy in precedence order.

        Args:
            name: Executable file name, e.g. ``codex``
            override_key: Environment variable holding an explicit path
            env: Environment to read ``PATH`` and manager roots from
            login_path: Directories from the login shell's PATH, if captured
            extra_candidates: Home-relative paths specific to this tool

        Returns:
            Absolute path of the first executable hit, or None

        """
        strategies: list[tuple[str, Callable[[], str | None]]] = [
            ("override", lambda: self._from_override(env.get(override_key))),
            ("PATH", lambda: self._find_in_dirs(name, env.get(PATH_ENV, "").split(PATH_SEPARATOR))),
            ("login shell PATH", lambda: self._find_in_dirs(name, login_path or [])),
            ("static candidates", lambda: self._first_executable(self._static_candidates(name, extra_candidates))),
            ("nvm", lambda: self._scan_nvm(name, env)),
            ("fnm", lambda: self._scan_fnm(name, self._fnm_roots(env))),
            ("mise", lambda: self._scan_mise(name, self._mise_roots(env))),
        ]
        for strategy, lookup in strategies:
            hit = lookup()
            if hit:
                self.logger.debug("Resolved %s via %s: %s", name, strategy, hit)
                return hit

        self.logger.debug("Could not resolve %s", name)
        return None

    def resolve_tool(
        self, tool: ToolSpec, env: Mapping[str, str], login_path: Sequence[str] | None = None
    ) -> str | None:
        """Resolve a tool described by a ToolSpec."""
        return self.resolve(tool.name, tool.override_key, env, login_path, tool.extra_candidates)

    def resolve_codex(self, env: Mapping[str, str], login_path: Sequence[str] | None = None) -> str | None:
        """Resolve the codex CLI."""
        return self.resolve_tool(CODEX_TOOL, env, login_path)

    def resolve_claude(self, env: Mapping[str, str], login_path: Sequence[str] | None = None) -> str | None:
        """Resolve the claude CLI."""
        return self.resolve_tool(CLAUDE_TOOL, env, login_path)

    def directories(
        self,
        purposes: Iterable[PathPurpose],
        env: Mapping[str, str],
        login_path: Sequence[str] | None = None,
    ) -> list[str]:
        """Return the directories holding the resolved tools.

        Codex's directory comes first, then claude's. Purposes other than
        RPC and TTY get an empty list.
        """
        if not BINARY_PURPOSES.intersection(purposes):
            return []

        dirs = []
        for binary in (self.resolve_codex(env, login_path), self.resolve_claude(env, login_path)):
            if binary:
                dirs.append(os.path.dirname(binary))
        return dirs

    def _from_override(self, override: str | None) -> str | None:
        if override and self.probe.is_executable_file(override):
            return override
        return None

    def _first_executable(self, candidates: Iterable[str]) -> str | None:
        for candidate in candidates:
            if self.probe.is_executable_file(candidate):
                return candidate
        return None

    def _find_in_dirs(self, name: str, dirs: Iterable[str]) -> str | None:
        return self._first_executable(f"{d[:-1] if d.endswith('/') else d}/{name}" for d in dirs if d)

    def _static_candidates(self, name: str, extra_candidates: Sequence[str]) -> list[str]:
        candidates = [f"{d}/{name}" for d in static_bin_dirs(self.home)]
        candidates.extend(f"{self.home}/{rel}" for rel in extra_candidates)
        return candidates

    def _scan_versions(self, root: str, suffix: str) -> str | None:
        """Probe ``<root>/<version>/<suffix>`` for each version, newest first."""
        versions = sort_versions_descending(self.probe.list_directory(root))
        return self._first_executable(f"{root}/{version}/{suffix}" for version in versions)

    def _scan_nvm(self, name: str, env: Mapping[str, str]) -> str | None:
        nvm_dir = env.get(NVM_DIR_ENV) or f"{self.home}/{DEFAULT_NVM_DIR}"
        return self._scan_versions(f"{nvm_dir}/{NVM_VERSIONS_SUBDIR}", f"bin/{name}")

    def _fnm_roots(self, env: Mapping[str, str]) -> list[str]:
        defaults = [f"{self.home}/{rel}" for rel in DEFAULT_FNM_DIRS]
        # FNM_DIR replaces the XDG default only; the other defaults are still scanned.
        return [env.get(FNM_DIR_ENV) or defaults[0], *defaults[1:]]

    def _scan_fnm(self, name: str, roots: Sequence[str]) -> str | None:
        for root in roots:
            hit = self._scan_versions(
                f"{root}/{FNM_NODE_VERSIONS_SUBDIR}", f"{FNM_INSTALLATION_SUBDIR}/bin/{name}"
            )
            if hit:
                return hit

            aliases_dir = f"{root}/{FNM_ALIASES_SUBDIR}"
            aliases = self.probe.list_directory(aliases_dir)
            if not aliases:
                continue
            ordered = [*FNM_PREFERRED_ALIASES, *sorted(a for a in aliases if a not in FNM_PREFERRED_ALIASES)]
            hit = self._first_executable(f"{aliases_dir}/{alias}/bin/{name}" for alias in ordered)
            if hit:
                return hit
        return None

    def _mise_roots(self, env: Mapping[str, str]) -> list[str]:
        overrides = [env.get(MISE_DATA_DIR_ENV), env.get(RTX_DATA_DIR_ENV)]
        return [root for root in overrides if root] + [f"{self.home}/{rel}" for rel in DEFAULT_MISE_DIRS]

    def _scan_mise(self, name: str, roots: Sequence[str]) -> str | None:
        for root in roots:
            shim = f"{root}/{MISE_SHIMS_SUBDIR}/{name}"
            if self.probe.is_executable_file(shim):
                return shim

            installs_root = f"{root}/{MISE_INSTALLS_SUBDIR}"
            for tool in sorted(self.probe.list_directory(installs_root)):
                hit = self._scan_versions(f"{installs_root}/{tool}", f"bin/{name}")
                if hit:
                    return hit
        return None
