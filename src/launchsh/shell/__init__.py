"""Shell launchers that source profiles and replace the current process."""

from launchsh.shell.base import Shell
from launchsh.shell.bash import BashShell, ExecFn

__all__ = [
    "BashShell",
    "ExecFn",
    "Shell",
]
