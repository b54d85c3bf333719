import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..api.config.get_home_dir import get_home_dir
from ..constants import LOG_FILENAME

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(home: Path | None = None, level: str = "INFO") -> None:
    """Configure linkinfo logging to a rotating file under the home directory.

    Args:
        home: Home directory. If None, get_home_dir() (LINKINFO_HOME or ~/.linkinfo).
        level: Level name for the "linkinfo" logger
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home is None:
        home = get_home_dir()

    home.mkdir(parents=True, exist_ok=True)
    log_file = home / LOG_FILENAME

    root_logger = logging.getLogger("linkinfo")
    root_logger.setLevel(getattr(logging, level, logging.INFO))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True
