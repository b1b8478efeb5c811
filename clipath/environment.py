"""High-level entry point for code that launches the codex and claude CLIs."""

import logging
from collections.abc import Iterable, Mapping

from clipath.const import PATH_ENV, PathPurpose
from clipath.core.config import PathConfig
from clipath.data import PathDebugSnapshot, ToolSpec
from clipath.locator import TOOL_SPECS, BinaryLocator
from clipath.login_shell import CaptureCallback, LoginPath, LoginShellPathCache, get_shared_cache
from clipath.path_builder import PathBuilder
from clipath.probe import FilesystemProbe


class PathEnvironment:
    """Resolve tools and PATHs against one configuration and one cache.

    Example:
        ```python
        from clipath import PathEnvironment, PathPurpose

        paths = PathEnvironment()
        paths.start_login_shell_capture()

        env = paths.child_env({PathPurpose.RPC})
        codex = paths.resolve_codex()
        ```

    """

    def __init__(
        self,
        config: PathConfig | None = None,
        probe: FilesystemProbe | None = None,
        cache: LoginShellPathCache | None = None,
    ) -> None:
        """Initialize the environment.

        Args:
            config: Home, shell, timeout and environment settings
            probe: Filesystem access; defaults to the real filesystem
            cache: Login shell PATH cache; defaults to the process-wide cache

        """
        self.config = config or PathConfig()
        self.cache = cache if cache is not None else get_shared_cache()
        self.locator = BinaryLocator(probe=probe, home=self.config.get_home())
        self.builder = PathBuilder(locator=self.locator, cache=self.cache)
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    def login_shell_path(self) -> LoginPath:
        """Login shell PATH entries captured so far, if any."""
        return self.cache.current

    def start_login_shell_capture(self, on_finish: CaptureCallback | None = None) -> None:
        """Begin capturing the login shell PATH in the background."""
        self.cache.capture_once(
            shell=self.config.shell,
            timeout=self.config.capture_timeout,
            on_finish=on_finish,
        )

    def wait_for_login_shell_path(self, wait_timeout: float | None = None) -> LoginPath:
        """Capture the login shell PATH if needed and block for the result."""
        return self.cache.wait(
            shell=self.config.shell,
            timeout=self.config.capture_timeout,
            wait_timeout=wait_timeout,
        )

    def resolve(self, tool: str | ToolSpec) -> str | None:
        """Resolve a known tool by name or an arbitrary ToolSpec."""
        spec = tool if isinstance(tool, ToolSpec) else TOOL_SPECS.get(str(tool))
        if spec is None:
            msg = f"Unknown tool {tool!r}; pass a ToolSpec to resolve other tools"
            raise ValueError(msg)
        return self.locator.resolve_tool(spec, self.config.get_env(), self.cache.current)

    def resolve_codex(self) -> str | None:
        """Resolve the codex CLI."""
        return self.locator.resolve_codex(self.config.get_env(), self.cache.current)

    def resolve_claude(self) -> str | None:
        """Resolve the claude CLI."""
        return self.locator.resolve_claude(self.config.get_env(), self.cache.current)

    def effective_path(self, purposes: Iterable[PathPurpose]) -> str:
        """Build the effective PATH for the given purposes."""
        return self.builder.effective_path(frozenset(purposes), self.config.get_env(), self.cache.current)

    def child_env(self, purposes: Iterable[PathPurpose], base: Mapping[str, str] | None = None) -> dict[str, str]:
        """Return an environment for a child process with the effective PATH.

        Args:
            purposes: What the child process is for
            base: Environment to copy; defaults to the configured environment

        """
        purposes = frozenset(purposes)
        env = dict(base) if base is not None else self.config.get_env()
        path = self.builder.effective_path(purposes, env, self.cache.current)
        self.logger.debug("Child PATH for %s: %s", sorted(str(p) for p in purposes), path)
        env[PATH_ENV] = path
        return env

    def debug_snapshot(self, purposes: Iterable[PathPurpose]) -> PathDebugSnapshot:
        """Collect a diagnostic snapshot without starting a capture."""
        return self.builder.debug_snapshot(purposes, self.config.get_env())
