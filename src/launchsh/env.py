"""Environment overlay merging."""

from collections.abc import Mapping, Sequence


def parse_env_entry(entry: str) -> tuple[str, str]:
    """Split a ``KEY=VALUE`` entry on the first ``=``."""
    key, sep, value = entry.partition("=")
    if not sep or not key:
        raise ValueError(f"env entry must look like KEY=VALUE, got {entry!r}")
    return key, value


def merge_env(base: Mapping[str, str], overlay: Sequence[str]) -> dict[str, str]:
    """Return ``base`` overlaid with ``KEY=VALUE`` entries.

    Keys keep their position from ``base``; new keys are appended in overlay
    order. When a key appears more than once the last entry wins.
    """
    merged = dict(base)
    for entry in overlay:
        key, value = parse_env_entry(entry)
        merged[key] = value
    return merged


def overlay_keys(overlay: Sequence[str]) -> list[str]:
    """Return the distinct keys set by an overlay, in first-seen order."""
    keys: list[str] = []
    for entry in overlay:
        key, _ = parse_env_entry(entry)
        if key not in keys:
            keys.append(key)
    return keys
