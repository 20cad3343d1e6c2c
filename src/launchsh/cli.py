"""Command-line interface for launchsh."""

import argparse
import logging
import shlex
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from launchsh import __version__
from launchsh.config import load_config
from launchsh.env import overlay_keys
from launchsh.errors import LaunchError
from launchsh.models import LaunchRequest, ShellInvocation
from launchsh.shell import BashShell

log = logging.getLogger("launchsh")

DEFAULT_CALLER = "launchsh"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="launchsh",
        description="Source profile scripts, then replace this process with a command",
    )
    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--script",
        action="store_true",
        help="Treat command as bash source; args after the first become $1, $2, ...",
    )
    parser.add_argument(
        "-p", "--profile",
        dest="profiles",
        action="append",
        default=[],
        metavar="PATH",
        help="Profile script to source before the command (repeatable, sourced in order)",
    )
    parser.add_argument(
        "-e", "--env",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Environment override (repeatable, last one wins)",
    )
    parser.add_argument(
        "-w", "--working-directory",
        default="",
        metavar="DIR",
        help="Directory to run the command in (profiles still run in the current one)",
    )
    parser.add_argument(
        "--caller",
        default=DEFAULT_CALLER,
        help="Name exposed as $0 to profiles and as argv0 to the command",
    )
    parser.add_argument(
        "--expand-args",
        action="store_true",
        help="Expand $VAR and $(...) in command and args after profiles are sourced",
    )
    parser.add_argument(
        "--no-execute",
        action="store_true",
        help="Print the composed invocation instead of running it",
    )
    parser.add_argument("command", help="Executable to run, or bash source with --script")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="Arguments for the command")
    return parser


def format_invocation(invocation: ShellInvocation, overlay: Sequence[str]) -> str:
    """Return a human-readable description of a composed invocation."""
    lines = [
        f"executable: {invocation.executable}",
        f"argv: {shlex.join(invocation.argv)}",
        f"cwd: {invocation.cwd}",
    ]
    for key in overlay_keys(overlay):
        lines.append(f"env: {key}={invocation.env[key]}")
    return "\n".join(lines)


def _validation_message(error: ValidationError) -> str:
    return "; ".join(str(item["msg"]) for item in error.errors())


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    config = load_config()

    logging.basicConfig(
        level=logging.DEBUG if args.debug or config.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    try:
        request = LaunchRequest(
            script=args.script,
            command=args.command,
            args=args.args,
            profiles=args.profiles,
            env=args.env,
            caller=args.caller,
            working_directory=args.working_directory,
            expand_args=args.expand_args,
        )
    except ValidationError as e:
        print(f"Error: {_validation_message(e)}", file=sys.stderr)
        return 1
    log.debug("request=%r", request)

    shell = BashShell(shell=config.shell)
    try:
        if args.no_execute:
            print(format_invocation(shell.compose(request), request.env))
            return 0
        shell.launch(request)
    except LaunchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def entrypoint() -> None:
    raise SystemExit(main())
