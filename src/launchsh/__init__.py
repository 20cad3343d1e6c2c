"""launchsh: source profile scripts, then become the launched command."""

__version__ = "0.1.0"
