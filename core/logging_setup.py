from __future__ import annotations
import logging


def setup_console_logging(level: int = logging.DEBUG) -> None:
    """
    Call once at process start. Prints logs to the console.
    """
    root = logging.getLogger()
    if root.handlers:
        # already configured (pytest, uvicorn): only adjust the level
        root.setLevel(level)
        return

    root.setLevel(level)
    h = logging.StreamHandler()
    fmt = logging.Formatter(
        "[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    h.setFormatter(fmt)
    root.addHandler(h)
    # SQL echo is noisy at debug level
    logging.getLogger("sqlalchemy.engine").setLevel(max(level, logging.WARNING))
