"""Bash launcher: source profiles, then become the requested command.

The launcher hands bash a single ``-c`` program made of three parts:

    source <profile 1>
    ...
    cd -- <effective directory> || exit
    <command body>

Profiles are sourced one after another in the same bash process, from the
directory the launcher was started in, so exports from one profile are seen
by the next and by the command. Only the command body runs in the requested
working directory.

For scripts the command body is the script text itself, and the request's
args (minus the leading placeholder) become ``$1``, ``$2`` and so on. For
plain commands the body is ``exec -a "$0" -- <command> <args...>``: bash
replaces itself with the command, so the command ends up occupying the
launcher's process. In both modes ``$0`` is the request's caller.
"""

import logging
import os
import sys
from collections.abc import Callable, Mapping, Sequence
from typing import NoReturn

from launchsh.config import DEFAULT_SHELL
from launchsh.env import merge_env, overlay_keys
from launchsh.errors import CompositionError, DirectoryError, ExecError
from launchsh.models import LaunchRequest, ShellInvocation
from launchsh.shell.detection import resolve_shell
from launchsh.shell.quoting import cd_statement, exec_statement, source_statement

log = logging.getLogger("launchsh.shell")

ExecFn = Callable[[str, Sequence[str], Mapping[str, str]], NoReturn]


def _profile_directory() -> str:
    try:
        return os.getcwd()
    except OSError as e:
        raise DirectoryError(f"cannot determine current directory: {e}") from e


def _effective_directory(working_directory: str, profile_dir: str) -> str:
    """Return the directory the command body should run in."""
    if not working_directory:
        return profile_dir
    directory = os.path.normpath(os.path.join(profile_dir, working_directory))
    if not os.path.isdir(directory):
        raise DirectoryError(f"working directory {directory} does not exist")
    if not os.access(directory, os.X_OK):
        raise DirectoryError(f"working directory {directory} is not accessible")
    return directory


def _check_request(request: LaunchRequest) -> None:
    """Reject requests that cannot be expressed as an exec argv."""
    if not request.caller:
        raise CompositionError("caller must not be empty")
    if not request.script and not request.command:
        raise CompositionError("command must not be empty")
    if request.script and request.expand_args:
        raise CompositionError("expand_args only applies when script is false")
    fields = {
        "command": [request.command],
        "args": request.args,
        "caller": [request.caller],
        "profiles": request.profiles,
        "env": request.env,
        "working_directory": [request.working_directory],
    }
    for name, values in fields.items():
        if any("\0" in value for value in values):
            raise CompositionError(f"{name} contains a NUL byte")


def build_source(request: LaunchRequest, directory: str) -> str:
    """Return the bash program for ``request``, ending in ``directory``."""
    lines = [source_statement(profile) for profile in request.profiles]
    lines.append(cd_statement(directory))
    if request.script:
        lines.append(request.command)
    else:
        lines.append(
            exec_statement([request.command, *request.args], expand=request.expand_args)
        )
    return "\n".join(lines)


def build_argv(request: LaunchRequest, source: str) -> list[str]:
    """Return the full argv for bash, with the caller as argv0 and ``$0``."""
    argv = [request.caller, "-c", source, request.caller]
    if request.script:
        # args[0] is a conventional placeholder for $0, which is always the caller.
        argv.extend(request.args[1:])
    return argv


def _flush_output() -> None:
    """Flush buffered output that would otherwise vanish with this process."""
    for handler in logging.getLogger().handlers:
        handler.flush()
    for stream in (sys.stdout, sys.stderr):
        if stream is not None:
            stream.flush()


class BashShell:
    """Launch requests through bash, replacing the current process."""

    def __init__(
        self,
        shell: str = DEFAULT_SHELL,
        exec_fn: ExecFn = os.execve,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.shell = shell
        self._exec = exec_fn
        self._environ = environ

    def compose(self, request: LaunchRequest) -> ShellInvocation:
        """Build the invocation for ``request`` without running it."""
        _check_request(request)
        profile_dir = _profile_directory()
        directory = _effective_directory(request.working_directory, profile_dir)
        log.debug("profile directory=%s command directory=%s", profile_dir, directory)

        environ = os.environ if self._environ is None else self._environ
        env = merge_env(environ, request.env)
        log.debug("env overlay keys=%s", overlay_keys(request.env))

        executable = resolve_shell(self.shell, path=env.get("PATH"))
        if executable is None:
            raise ExecError(self.shell, "shell executable not found")

        source = build_source(request, directory)
        argv = build_argv(request, source)
        log.debug("argv=%r", argv)
        return ShellInvocation(executable=executable, argv=argv, env=env, cwd=profile_dir)

    def launch(self, request: LaunchRequest) -> NoReturn:
        """Replace the current process with ``request``'s command.

        Returns only by raising a ``LaunchError``.
        """
        invocation = self.compose(request)
        log.debug("replacing process with %s", invocation.executable)
        _flush_output()
        try:
            self._exec(invocation.executable, invocation.argv, invocation.env)
        except OSError as e:
            raise ExecError(invocation.executable, e.strerror or str(e)) from e
