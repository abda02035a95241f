from __future__ import annotations

import logging

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO
    logging.basicConfig(level=resolved, format=_FORMAT)
    # discord.py's gateway chatter is noisy below WARNING.
    logging.getLogger("discord").setLevel(max(resolved, logging.WARNING))
    logging.getLogger("discipline").setLevel(resolved)
