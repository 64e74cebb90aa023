from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    lvl = logging.getLevelName(level.upper())
    if not isinstance(lvl, int):
        lvl = logging.INFO

    root = logging.getLogger()
    if root.handlers:
        root.setLevel(lvl)
        return

    logging.basicConfig(level=lvl, format=LOG_FORMAT)
