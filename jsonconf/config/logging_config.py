import logging
from logging.handlers import RotatingFileHandler

from jsonconf.config.config import log_level, log_file_path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(logger: logging.Logger | None = None) -> bool:
    """Logging for init_config.py and other programs embedding the store.

    Level comes from LOG_LEVEL, an optional rotating file from LOG_FILE_PATH.
    Store warnings about swallowed read/write errors land here. Pass a
    logger to configure it instead of the root one. Returns False and
    leaves it alone if it already has handlers.
    """
    logging.captureWarnings(True)

    root = logger or logging.getLogger()
    if root.handlers:
        return False

    root.setLevel(log_level())

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    # stdout
    sh = logging.StreamHandler()
    sh.setFormatter(fmt)
    root.addHandler(sh)

    log_file = log_file_path()
    if log_file:
        fh = RotatingFileHandler(log_file, maxBytes=2_000_000, backupCount=2, encoding="utf-8")
        fh.setFormatter(fmt)
        root.addHandler(fh)
    return True
