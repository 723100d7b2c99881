from __future__ import annotations

import logging
from typing import Optional

from username_registry.settings import get_settings


def configure_logging(level: Optional[str] = None) -> None:
    """Simple, dev-friendly logging setup.

    The level defaults to LOG_LEVEL from settings. Embedding applications that
    configure logging themselves do not need to call this.
    """
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
