"""Capture the PATH a user's login shell would set up.

Processes started from a GUI inherit a bare environment; the PATH entries
added by shell rc files (version managers, package-manager prefixes) are
missing. ``capture_login_shell_path`` runs the login shell once to read its
PATH, and ``LoginShellPathCache`` makes sure that happens at most once at a
time per process while any number of callers wait on the result.
"""

import logging
import os
import subprocess
import threading
from collections.abc import Callable

from clipath.const import (
    DEFAULT_CAPTURE_TIMEOUT,
    DEFAULT_SHELL,
    LOGIN_SHELL_PATH_COMMAND,
    PATH_SEPARATOR,
    SHELL_ENV,
)
from clipath.exceptions import (
    LoginShellCaptureError,
    LoginShellLaunchError,
    LoginShellOutputError,
    LoginShellTimeoutError,
)

logger = logging.getLogger(__name__)

LoginPath = list[str] | None
CaptureCallback = Callable[[LoginPath], None]
Capturer = Callable[[str | None, float], LoginPath]


def resolve_shell(shell: str | None = None) -> str:
    """Pick the shell to launch: argument, then ``$SHELL``, then zsh."""
    return shell or os.environ.get(SHELL_ENV) or DEFAULT_SHELL


def run_login_shell(shell: str, timeout: float) -> list[str]:
    """Run ``shell`` as a login shell and return its PATH entries.

    Raises:
        LoginShellLaunchError: If the shell cannot be started
        LoginShellTimeoutError: If the shell does not exit within ``timeout``
        LoginShellOutputError: If the output is empty or not UTF-8

    """
    try:
        proc = subprocess.Popen(  # noqa: S603
            [shell, "-l", "-c", LOGIN_SHELL_PATH_COMMAND],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
        )
    except (OSError, ValueError) as e:
        raise LoginShellLaunchError(shell, str(e)) from e

    with proc:
        try:
            stdout, _ = proc.communicate(timeout=timeout)
        except subprocess.TimeoutExpired as e:
            proc.kill()
            raise LoginShellTimeoutError(shell, timeout) from e

    try:
        text = stdout.decode("utf-8").strip()
    except UnicodeDecodeError as e:
        msg = f"Login shell {shell} printed a PATH that is not valid UTF-8"
        raise LoginShellOutputError(msg) from e

    if not text:
        msg = f"Login shell {shell} printed an empty PATH"
        raise LoginShellOutputError(msg)
    return text.split(PATH_SEPARATOR)


def capture_login_shell_path(shell: str | None = None, timeout: float = DEFAULT_CAPTURE_TIMEOUT) -> LoginPath:
    """Return the login shell's PATH entries, or None if they cannot be read.

    Launch failures, timeouts and unusable output all come back as None.
    """
    shell_path = resolve_shell(shell)
    try:
        entries = run_login_shell(shell_path, timeout)
    except LoginShellTimeoutError as e:
        logger.warning("%s", e)
        return None
    except LoginShellCaptureError as e:
        logger.debug("Login shell PATH capture failed: %s", e)
        return None

    logger.debug("Captured %d PATH entries from %s", len(entries), shell_path)
    return entries


class LoginShellPathCache:
    """One-shot, thread-safe cache of the login shell's PATH.

    The first ``capture_once`` call starts a background capture; calls made
    while it runs only queue their callback. Once a capture succeeds its
    result is served forever without another subprocess. A failed capture
    is not cached, so the next ``capture_once`` tries again.

    Thread Safety:
        ``captured``, ``is_capturing`` and the callback queue are only read
        or written while holding ``_lock``. Callbacks always run outside the
        lock, so a callback may call back into the cache.
    """

    def __init__(self, capturer: Capturer | None = None) -> None:
        """Initialize the cache.

        Args:
            capturer: Callable ``(shell, timeout) -> list[str] | None`` that
                performs one capture; defaults to ``capture_login_shell_path``

        """
        if capturer is not None and not callable(capturer):
            msg = f"capturer must be callable, got {type(capturer).__name__}"
            raise TypeError(msg)

        self._capturer: Capturer = capturer or capture_login_shell_path
        self._lock = threading.Lock()
        self._captured: LoginPath = None
        self._is_capturing = False
        self._callbacks: list[CaptureCallback] = []
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    def current(self) -> LoginPath:
        """The cached PATH entries, or None if nothing has been captured yet."""
        with self._lock:
            return self._captured

    @property
    def is_capturing(self) -> bool:
        """Whether a capture is running right now."""
        with self._lock:
            return self._is_capturing

    def capture_once(
        self,
        shell: str | None = None,
        timeout: float = DEFAULT_CAPTURE_TIMEOUT,
        on_finish: CaptureCallback | None = None,
    ) -> None:
        """Start a capture unless one has finished or is already running.

        Args:
            shell: Shell to launch; defaults to ``$SHELL`` at capture time
            timeout: Seconds to wait for the shell before killing it
            on_finish: Called exactly once with the result. Runs immediately
                on this thread if a result is already cached, otherwise on
                the capture thread in registration order.

        """
        with self._lock:
            captured = self._captured
            if captured is None:
                if on_finish is not None:
                    self._callbacks.append(on_finish)
                if self._is_capturing:
                    return
                self._is_capturing = True

        if captured is not None:
            if on_finish is not None:
                on_finish(captured)
            return

        self.logger.info("Starting login shell PATH capture")
        thread = threading.Thread(
            target=self._run_capture,
            args=(shell, timeout),
            daemon=True,
            name="login-shell-path-capture",
        )
        thread.start()

    def wait(
        self,
        shell: str | None = None,
        timeout: float = DEFAULT_CAPTURE_TIMEOUT,
        wait_timeout: float | None = None,
    ) -> LoginPath:
        """Trigger a capture if needed and block until its result arrives.

        Args:
            shell: Shell to launch
            timeout: Capture timeout passed to the subprocess
            wait_timeout: Seconds to block; None waits for the capture to end

        Returns:
            The delivered result, or ``current`` if ``wait_timeout`` elapses

        """
        done = threading.Event()
        delivered: list[LoginPath] = []

        def on_finish(result: LoginPath) -> None:
            delivered.append(result)
            done.set()

        self.capture_once(shell=shell, timeout=timeout, on_finish=on_finish)
        if not done.wait(wait_timeout):
            return self.current
        return delivered[0]

    def _run_capture(self, shell: str | None, timeout: float) -> None:
        try:
            result = self._capturer(shell, timeout)
        except Exception:
            self.logger.exception("Login shell PATH capturer raised")
            result = None

        with self._lock:
            if result:
                self._captured = result
            else:
                result = None
            self._is_capturing = False
            callbacks = self._callbacks
            self._callbacks = []

        self.logger.info(
            "Login shell PATH capture %s, notifying %d waiter(s)",
            "succeeded" if result else "failed",
            len(callbacks),
        )
        for callback in callbacks:
            try:
                callback(result)
            except Exception:
                self.logger.exception("Login shell PATH callback raised")


_shared_cache: LoginShellPathCache | None = None
_shared_cache_lock = threading.Lock()


def get_shared_cache() -> LoginShellPathCache:
    """Return the process-wide cache, creating it on first use."""
    global _shared_cache  # noqa: PLW0603
    with _shared_cache_lock:
        if _shared_cache is None:
            _shared_cache = LoginShellPathCache()
        return _shared_cache
