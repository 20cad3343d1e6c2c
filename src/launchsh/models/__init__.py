"""Model package for launchsh."""

from launchsh.models.launch_request import LaunchRequest
from launchsh.models.shell_invocation import ShellInvocation

__all__ = [
    "LaunchRequest",
    "ShellInvocation",
]
