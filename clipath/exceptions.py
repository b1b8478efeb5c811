"""Custom exceptions for clipath."""


class ClipathError(Exception):
    """Base exception for all clipath related errors."""

    def __init__(self, message: str) -> None:
        """Initialize the ClipathError."""
        super().__init__(message)


class LoginShellCaptureError(ClipathError):
    """Raised when the login shell's PATH cannot be captured."""


class LoginShellLaunchError(LoginShellCaptureError):
    """Raised when the login shell process cannot be started."""

    def __init__(self, shell: str, error: str) -> None:
        """Initialize the LoginShellLaunchError."""
        super().__init__(f"Failed to launch login shell {shell}: {error}")
        self.shell = shell


class LoginShellTimeoutError(LoginShellCaptureError):
    """Raised when the login shell does not exit within the timeout."""

    def __init__(self, shell: str, timeout_duration: float) -> None:
        """Initialize the LoginShellTimeoutError."""
        super().__init__(f"Login shell {shell} did not finish within {timeout_duration}s")
        self.shell = shell
        self.timeout_duration = timeout_duration


class LoginShellOutputError(LoginShellCaptureError):
    """Raised when the login shell prints nothing usable."""
