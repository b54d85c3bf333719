"""Shared constants for linkinfo state and config locations."""

LINKINFO_HOME_EXT = ".linkinfo"  # user-level state/config directory

CONFIG_FILENAME = "config.json"

LOG_FILENAME = "linkinfo.log"
