"""Composed shell invocation model."""

from dataclasses import dataclass


@dataclass
class ShellInvocation:
    """Everything handed to the process-replacement primitive."""

    executable: str
    argv: list[str]
    env: dict[str, str]
    # Directory profiles are sourced from; the shell cds away before the command.
    cwd: str
