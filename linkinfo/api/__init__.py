"""API module for linkinfo.

Command functions (cmd_*) defined here are the single source of truth for
the CLI.
"""

__all__ = []
