"""Structured debug logging (timestamp, operation, timing, etc.)."""

import logging
import logging.handlers
from pathlib import Path

LOG_FORMAT = (
    "level=%(levelname)s | time=%(asctime)s | process=%(process)d | "
    "thread=%(thread)d | module=%(module)s | funcName=%(funcName)s | "
    "lineno=%(lineno)d | message=%(message)s"
)
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_LOG_LEVEL = logging.INFO


def setup_logging(log_file_path: Path, level: int = _LOG_LEVEL) -> None:
    """Configure the root logger to write to a rotating log file.

    Any handler already attached to the root logger is replaced.

    Args:
        log_file_path (Path): The file the records are written to. Its
            parent directory is created when missing.
        level (int): The minimum level of the records to keep.

    """
    log_file_path.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setFormatter(
        logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT),
    )
    root_logger.addHandler(file_handler)


def log(
    operation: str,
    argument: str,
    result: object,
    execution_time_ms: float,
) -> None:
    """Log the details of a trie operation using the configured
    logging system.

    Args:
        operation (str): The name of the operation (insert, remove, ...).
        argument (str): The word or prefix the operation was called with.
        result (object): What the operation returned.
        execution_time_ms (float): The execution time in milliseconds.

    """
    logging.info(
        "Operation: %s, Argument: '%s', Result: %s, Execution Time: %.4f ms",
        operation,
        argument,
        result,
        execution_time_ms,
    )
