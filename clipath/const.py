"""Constants used throughout clipath.

This module defines enumerations for PATH purposes and known tool names,
the environment variables the locator reads, and the fixed directory tables
used when probing well-known install locations.
"""

from enum import Enum
from typing import Any


class StrEnum(str, Enum):
    """A string enumeration that combines str and Enum functionality.

    This implementation provides StrEnum functionality for Python versions < 3.11
    where StrEnum is not available natively.

    Members are strings and can be compared directly to string values.
    """

    def __new__(cls, value: str) -> "StrEnum":
        """Create a new StrEnum member."""
        if not isinstance(value, str):
            msg = f"StrEnum values must be strings, got {type(value).__name__}"
            raise TypeError(msg)

        obj = str.__new__(cls, value)
        obj._value_ = value
        return obj

    def __str__(self) -> str:
        """Return the string value."""
        return str(self.value)

    def __repr__(self) -> str:
        """Return a detailed representation."""
        return f"<{self.__class__.__name__}.{self.name}: '{self.value}'>"

    @classmethod
    def _missing_(cls, value: Any) -> "StrEnum":
        """Allow case-insensitive lookup by value."""
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.lower():
                    return member

        msg = f"{value!r} is not a valid {cls.__name__}"
        raise ValueError(msg)


class PathPurpose(StrEnum):
    r"""Why an effective PATH is being built.

    Only RPC and TTY pull the resolved tool directories into the PATH;
    NODE_TOOLING gets the plain composed PATH.
    """

    RPC = "rpc"
    TTY = "tty"
    NODE_TOOLING = "node-tooling"


BINARY_PURPOSES = frozenset({PathPurpose.RPC, PathPurpose.TTY})


class ToolName(StrEnum):
    """Command-line tools the locator knows how to find."""

    CODEX = "codex"
    CLAUDE = "claude"


# Environment variables
PATH_ENV = "PATH"
SHELL_ENV = "SHELL"
CODEX_OVERRIDE_ENV = "CODEX_CLI_PATH"
CLAUDE_OVERRIDE_ENV = "CLAUDE_CLI_PATH"
NVM_DIR_ENV = "NVM_DIR"
FNM_DIR_ENV = "FNM_DIR"
MISE_DATA_DIR_ENV = "MISE_DATA_DIR"
RTX_DATA_DIR_ENV = "RTX_DATA_DIR"

PATH_SEPARATOR = ":"

POSIX_FALLBACK_PATH = ("/usr/bin", "/bin", "/usr/sbin", "/sbin")

# Absolute directories probed ahead of the home-relative ones.
SYSTEM_BIN_DIRS = ("/opt/homebrew/bin", "/usr/local/bin")

# Relative to the user's home directory.
HOME_BIN_DIRS = (".local/bin", "bin", ".bun/bin", ".npm-global/bin")

CLAUDE_EXTRA_CANDIDATES = (".claude/local/claude", ".claude/bin/claude")

DEFAULT_NVM_DIR = ".nvm"
NVM_VERSIONS_SUBDIR = "versions/node"

DEFAULT_FNM_DIRS = (".local/share/fnm", "Library/Application Support/fnm", ".fnm")
FNM_NODE_VERSIONS_SUBDIR = "node-versions"
FNM_INSTALLATION_SUBDIR = "installation"
FNM_ALIASES_SUBDIR = "aliases"
FNM_PREFERRED_ALIASES = ("default", "current")

DEFAULT_MISE_DIRS = (".local/share/mise", ".local/share/rtx", ".mise")
MISE_SHIMS_SUBDIR = "shims"
MISE_INSTALLS_SUBDIR = "installs"

DEFAULT_SHELL = "/bin/zsh"
DEFAULT_CAPTURE_TIMEOUT = 2.0
LOGIN_SHELL_PATH_COMMAND = 'printf %s "$PATH"'
