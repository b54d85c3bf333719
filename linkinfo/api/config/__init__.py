"""Configuration models for linkinfo."""

from .ExtensionConfig import ExtensionConfig
from .LinkInfoConfig import LinkInfoConfig
from .LogConfig import LogConfig

__all__ = [
    "ExtensionConfig",
    "LinkInfoConfig",
    "LogConfig",
]
