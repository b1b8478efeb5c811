"""Configuration for path resolution."""

import os

from pydantic import BaseModel, Field, field_validator

from clipath.const import DEFAULT_CAPTURE_TIMEOUT


class PathConfig(BaseModel):
    """Configuration for a PathEnvironment."""

    home: str | None = Field(
        default=None,
        description="Home directory used for home-relative install locations. "
        "If None, the current user's home directory is used.",
    )
    shell: str | None = Field(
        default=None,
        description="Login shell used to capture PATH (e.g., '/bin/zsh'). "
        "If None, `$SHELL` is read at capture time, falling back to zsh.",
    )
    capture_timeout: float = Field(
        default=DEFAULT_CAPTURE_TIMEOUT,
        gt=0,
        description="Seconds to wait for the login shell before terminating it.",
    )
    env: dict[str, str] | None = Field(
        default=None,
        description="Environment to resolve against. If None, `os.environ` is read on every call.",
    )

    @field_validator("home", "shell")
    @classmethod
    def validate_not_blank(cls, v: str | None) -> str | None:
        """Treat blank strings as unset."""
        if v is not None and not v.strip():
            return None
        return v

    def get_home(self) -> str:
        """Get the home directory."""
        return self.home or os.path.expanduser("~")

    def get_env(self) -> dict[str, str]:
        """Get a snapshot of the environment to resolve against."""
        return dict(self.env) if self.env is not None else dict(os.environ)
