"""Top-level linkinfo configuration."""

import json
import logging
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...constants import CONFIG_FILENAME
from ..link.file_type_registry import set_file_types
from .ExtensionConfig import ExtensionConfig
from .get_home_dir import get_home_dir
from .LogConfig import LogConfig

logger = logging.getLogger(__name__)


class LinkInfoConfig(BaseModel):
    """Configuration for link classification and logging."""

    model_config = ConfigDict(extra="forbid")

    extensions: ExtensionConfig = Field(default_factory=ExtensionConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get home directory based on LINKINFO_HOME or default to ~/.linkinfo."""
        return get_home_dir()

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file under the home directory."""
        return get_home_dir(CONFIG_FILENAME)

    @classmethod
    def load(cls) -> "LinkInfoConfig":
        """Load and validate config from file.

        A missing file yields the defaults.

        Raises:
            ValueError: If the file is unreadable, not valid JSON, or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            logger.debug("No configuration at %s, using defaults", path)
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e
        except OSError as e:
            raise ValueError(f"Cannot read config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration validation error: expected an object in {path}")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def apply(self) -> "LinkInfoConfig":
        """Register the configured extension sets and log level."""
        set_file_types(self.extensions.to_file_types())
        logging.getLogger("linkinfo").setLevel(getattr(logging, self.log.level))
        logger.debug("Registered file types %s", self.extensions.model_dump())
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for serialization."""
        return {
            "extensions": self.extensions.model_dump(),
            "log": self.log.model_dump(),
        }

    def save(self) -> None:
        """Save the configuration to its JSON file.

        Writes a temp file and renames it over the config so a failed write
        never leaves a partial file behind.
        """
        path = self.get_config_path()
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with temp_path.open("w") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except Exception as e:
            with suppress(Exception):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
