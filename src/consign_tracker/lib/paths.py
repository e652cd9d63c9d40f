"""Path helpers for cache and asset locations."""

import tempfile
from pathlib import Path


def temp_dir() -> Path:
    """Return the system temporary directory as a Path."""
    return Path(tempfile.gettempdir())


def cache_dir(name: str) -> Path:
    """
    Return a named directory under the system temp directory.

    Args:
        name: Sub-directory name (e.g. "consign_tracker_records").

    Returns:
        Path to the directory. It is not created here; diskcache does that.
    """
    return temp_dir() / name
