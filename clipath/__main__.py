"""Print where codex and claude resolve and the PATH they would be launched with.

Usage:
    python -m clipath [--purpose rpc] [--capture] [--json] [--verbose]
"""

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from clipath.const import DEFAULT_CAPTURE_TIMEOUT, PathPurpose
from clipath.core.config import PathConfig
from clipath.data import PathDebugSnapshot
from clipath.environment import PathEnvironment


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(prog="clipath", description=__doc__.splitlines()[0])
    parser.add_argument(
        "--purpose",
        action="append",
        choices=[str(p) for p in PathPurpose],
        help="PATH purpose; may be repeated (default: rpc and tty)",
    )
    parser.add_argument("--capture", action="store_true", help="capture the login shell PATH first")
    parser.add_argument("--shell", default=None, help="login shell to capture from (default: $SHELL)")
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_CAPTURE_TIMEOUT,
        help="seconds to wait for the login shell (default: %(default)s)",
    )
    parser.add_argument("--json", action="store_true", help="print the snapshot as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def format_snapshot(snapshot: PathDebugSnapshot) -> str:
    """Render a snapshot as aligned text lines."""
    rows = [
        ("codex", snapshot.codex_binary or "(not found)"),
        ("claude", snapshot.claude_binary or "(not found)"),
        ("login shell PATH", snapshot.login_shell_path or "(not captured)"),
        ("effective PATH", snapshot.effective_path),
    ]
    width = max(len(label) for label, _ in rows)
    return "\n".join(f"{label.ljust(width)}  {value}" for label, value in rows)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the diagnostic command and return the exit code."""
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    config = PathConfig(shell=args.shell, capture_timeout=args.timeout)
    paths = PathEnvironment(config=config)
    if args.capture:
        paths.wait_for_login_shell_path(wait_timeout=args.timeout + 1)

    purposes = {PathPurpose(p) for p in args.purpose} if args.purpose else {PathPurpose.RPC, PathPurpose.TTY}
    snapshot = paths.debug_snapshot(purposes)
    if args.json:
        print(json.dumps(snapshot.as_dict(), indent=2))
    else:
        print(format_snapshot(snapshot))
    return 0


if __name__ == "__main__":
    sys.exit(main())
