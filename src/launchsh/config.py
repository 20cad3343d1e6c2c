"""Configuration for launchsh."""

import os
from collections.abc import Mapping

from pydantic import BaseModel

DEFAULT_SHELL = "/bin/bash"
TRUTHY = {"1", "true", "yes", "on"}


class LauncherConfig(BaseModel):
    """Runtime configuration for the launcher."""

    shell: str = DEFAULT_SHELL
    debug: bool = False


def load_config(environ: Mapping[str, str] | None = None) -> LauncherConfig:
    """Build configuration from ``LAUNCHSH_*`` environment variables."""
    source = os.environ if environ is None else environ
    shell = source.get("LAUNCHSH_SHELL", "").strip() or DEFAULT_SHELL
    debug = source.get("LAUNCHSH_DEBUG", "").strip().lower() in TRUTHY
    return LauncherConfig(shell=shell, debug=debug)
