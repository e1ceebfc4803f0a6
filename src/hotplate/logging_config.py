"""
Log setup for the hotplate command
Records go to stderr and, when asked, to a log file
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%H:%M:%S'


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> None:
    """
    Attach handlers to the 'hotplate' logger

    Plates are printed on stdout, so solver progress is kept on stderr.
    Calling this again replaces the handlers of the previous call.

    Args:
        level: Threshold for both handlers (logging.DEBUG shows per-iteration progress)
        log_file: Path of a log file, overwritten on each run
    """
    logger = logging.getLogger("hotplate")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Logging at {logging.getLevelName(level)}, log file: {log_file}")
