from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a stream handler on the root logger unless one is already present."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("dojo").setLevel(level)
