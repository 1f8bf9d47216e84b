from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | int = "INFO") -> None:
    if isinstance(level, str):
        level_value = getattr(logging, level.upper(), logging.INFO)
    else:
        level_value = level

    root = logging.getLogger()
    if not getattr(root, "_sipcalc_logging_initialized", False):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root._sipcalc_logging_initialized = True
    root.setLevel(level_value)

    # werkzeug logs every request at INFO
    logging.getLogger("werkzeug").setLevel(max(level_value, logging.WARNING))
