"""Rendering of words and statements into bash source."""

import os
import shlex

# Characters that stay special inside double quotes and must be escaped to be
# taken literally. ``$`` and backticks are left alone so expansion still runs.
_DOUBLE_QUOTE_ESCAPES = str.maketrans({"\\": "\\\\", '"': '\\"'})


def literal_word(word: str) -> str:
    """Quote ``word`` so bash passes it through as one verbatim argument."""
    return shlex.quote(word)


def expanding_word(word: str) -> str:
    """Double-quote ``word`` so bash expands ``$VAR`` and ``$(...)`` in it.

    Double quoting still suppresses word splitting and globbing, so the result
    is a single argument whatever the expansion produces.
    """
    return '"' + word.translate(_DOUBLE_QUOTE_ESCAPES) + '"'


def source_statement(path: str) -> str:
    """Return a statement sourcing ``path`` into the running shell."""
    # Without a slash bash would look the file up on PATH first.
    if os.sep not in path:
        path = os.path.join(os.curdir, path)
    return f"source {shlex.quote(path)}"


def cd_statement(directory: str) -> str:
    """Return a statement entering ``directory`` that stops the shell on failure."""
    return f"cd -- {shlex.quote(directory)} || exit"


def exec_statement(words: list[str], expand: bool = False) -> str:
    """Return a statement replacing the shell with ``words``, argv0 set to ``$0``."""
    render = expanding_word if expand else literal_word
    return 'exec -a "$0" -- ' + " ".join(render(word) for word in words)
