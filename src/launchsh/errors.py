"""Errors raised before the launched command takes over the process."""


class LaunchError(Exception):
    """Base class for launch failures, tagged with the stage that failed."""

    stage = "launch"

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"{self.stage}: {detail}")


class DirectoryError(LaunchError):
    """The profile or working directory could not be resolved."""

    stage = "directory"


class CompositionError(LaunchError):
    """The shell source or argv could not be built from the request."""

    stage = "composition"


class ExecError(LaunchError):
    """The process-replacement call itself failed."""

    stage = "exec"

    def __init__(self, executable: str, detail: str):
        self.executable = executable
        super().__init__(f"{executable}: {detail}")
