"""Register configured file types before a command runs."""

import logging

logger = logging.getLogger(__name__)


def _load_file_types() -> list[str]:
    """Load configuration and register its extension sets.

    Returns:
        Error messages; empty when the configuration loaded. On error the
        default extension sets stay in effect.
    """
    from ..config.LinkInfoConfig import LinkInfoConfig

    try:
        LinkInfoConfig.load().apply()
    except ValueError as e:
        logger.warning("Falling back to default file types: %s", e)
        return [str(e)]
    return []
