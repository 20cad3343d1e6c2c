"""The shell capability shared by launchers."""

from typing import NoReturn, Protocol, runtime_checkable

from launchsh.models import LaunchRequest


@runtime_checkable
class Shell(Protocol):
    def launch(self, request: LaunchRequest) -> NoReturn:
        """Become the requested command, or raise a ``LaunchError``."""
        ...
