import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from plz.utils.constants import LOG_FILENAME


def setup_logging(log_dir: Path, debug: bool = False) -> logging.Logger:
    """Configure the `plz` logger: rotating file next to the config, stderr too with --debug."""
    logger = logging.getLogger('plz')
    # Avoid adding duplicate handlers when main() runs more than once in a process
    if logger.handlers:
        return logger
    fmt = logging.Formatter('%(asctime)s %(levelname)s %(message)s')
    try:
        log_path = Path(log_dir) / LOG_FILENAME
        handler = RotatingFileHandler(str(log_path), maxBytes=1024 * 1024, backupCount=3, encoding='utf-8')
        handler.setFormatter(fmt)
        logger.addHandler(handler)
    except OSError:
        # Logging should never block the command itself
        logging.basicConfig(level=logging.WARNING)
    if debug:
        ch = logging.StreamHandler()
        ch.setFormatter(fmt)
        logger.addHandler(ch)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    return logger


def close_logging():
    """Detach and close handlers so temporary log directories can be removed."""
    logger = logging.getLogger('plz')
    for h in list(logger.handlers):
        try:
            h.close()
        finally:
            logger.removeHandler(h)
