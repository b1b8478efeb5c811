"""clipath - locate the codex and claude CLIs and build a PATH to launch them with."""

from .const import PathPurpose, ToolName
from .core.config import PathConfig
from .data import PathDebugSnapshot, ToolSpec
from .environment import PathEnvironment
from .exceptions import (
    ClipathError,
    LoginShellCaptureError,
    LoginShellLaunchError,
    LoginShellOutputError,
    LoginShellTimeoutError,
)
from .locator import BinaryLocator
from .login_shell import LoginShellPathCache, capture_login_shell_path, get_shared_cache
from .path_builder import PathBuilder
from .probe import FilesystemProbe, OSFilesystemProbe
from .versions import sort_versions_descending

__all__ = [
    "BinaryLocator",
    "ClipathError",
    "FilesystemProbe",
    "LoginShellCaptureError",
    "LoginShellLaunchError",
    "LoginShellOutputError",
    "LoginShellPathCache",
    "LoginShellTimeoutError",
    "OSFilesystemProbe",
    "PathBuilder",
    "PathConfig",
    "PathDebugSnapshot",
    "PathEnvironment",
    "PathPurpose",
    "ToolName",
    "ToolSpec",
    "capture_login_shell_path",
    "get_shared_cache",
    "sort_versions_descending",
]
