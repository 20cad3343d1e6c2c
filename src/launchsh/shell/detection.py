"""Shell executable resolution."""

import logging
import os
import shutil

log = logging.getLogger("launchsh.shell")


def _is_bash(candidate: str) -> bool:
    """Return whether a candidate executable/path names bash."""
    return os.path.basename(candidate).lower() in {"bash", "bash.exe"}


def resolve_shell(candidate: str, path: str | None = None) -> str | None:
    """Resolve a shell name or path to a runnable executable path.

    ``path`` is the search path used for bare names, defaulting to ``PATH``.
    """
    if not _is_bash(candidate):
        log.warning("shell %s is not bash; profile sourcing relies on bash builtins", candidate)
    has_sep = os.path.sep in candidate or (
        os.path.altsep is not None and os.path.altsep in candidate
    )
    if has_sep:
        if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
            return candidate
        return None
    return shutil.which(candidate, path=path)
