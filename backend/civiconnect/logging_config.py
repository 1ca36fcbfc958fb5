"""Root logger setup, applied once at application start."""
import logging

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Attach a console handler to the root logger unless one is already there.

    Test runners and uvicorn may configure logging before the app is
    imported; in that case only the level is adjusted.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if root.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
