"""Launch request model."""

from pydantic import BaseModel, ConfigDict, field_validator

from launchsh.env import parse_env_entry


class LaunchRequest(BaseModel):
    """One attempt at launching a command through a shell.

    ``script`` selects whether ``command`` is shell source (with ``args`` as
    positional parameters) or an executable that receives ``args`` verbatim.
    ``expand_args`` only applies to executables; combining it with ``script``
    is rejected at launch.
    """

    model_config = ConfigDict(frozen=True)

    script: bool = False
    command: str
    args: tuple[str, ...] = ()
    profiles: tuple[str, ...] = ()
    env: tuple[str, ...] = ()
    caller: str
    working_directory: str = ""
    expand_args: bool = False

    @field_validator("env")
    @classmethod
    def _check_env_entries(cls, entries: tuple[str, ...]) -> tuple[str, ...]:
        for entry in entries:
            parse_env_entry(entry)
        return entries
