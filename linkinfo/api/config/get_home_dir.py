"""Get linkinfo home directory path or path under it."""

import os
from pathlib import Path

from ...constants import LINKINFO_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get linkinfo home directory path or path under it.

    Checks the LINKINFO_HOME environment variable first, defaults to
    ~/.linkinfo if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Returns:
        Home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.linkinfo")
        >>> get_home_dir("config.json")
        Path("/Users/user/.linkinfo/config.json")
    """
    home_env = os.environ.get("LINKINFO_HOME")
    home = Path(home_env).expanduser().resolve() if home_env else Path.home() / LINKINFO_HOME_EXT
    return home / Path(*parts) if parts else home
