# Standard library imports
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging once for the process.

    Uvicorn installs its own handlers; we only add one when the root
    logger has none so running under pytest or uvicorn stays untouched.
    """
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    else:
        root.setLevel(level)
    # motor/pymongo are chatty at DEBUG
    logging.getLogger("pymongo").setLevel(max(logging.INFO, root.level))
