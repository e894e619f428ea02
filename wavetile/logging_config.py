"""
Logging for wavetile runs.

Every applied step, collapse decision, and contradiction is logged under the
"wavetile" logger. setup_logging() sends all of it to data/debug.log
(rotated) and only warnings and above to stderr, so a CLI run stays quiet
unless a contradiction shows up.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path


LOG_FILE_NAME = "debug.log"
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB per file
BACKUP_COUNT = 5

ROOT_LOGGER_NAME = "wavetile"

FILE_FORMAT = "%(asctime)s.%(msecs)03d | %(levelname)-8s | %(name)-32s | %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s | %(message)s"


def setup_logging(
    data_root: Path | str,
    log_level: int = logging.DEBUG,
    console_level: int = logging.WARNING,
) -> Path:
    """
    Attach the run log and the console handler to the wavetile logger.

    Calling it again replaces the previous handlers, so tests and repeated
    CLI invocations in one process never double up output.

    Returns:
        Path to the log file
    """
    log_path = Path(data_root) / LOG_FILE_NAME
    log_path.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        handler.close()
    root_logger.handlers.clear()

    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=MAX_LOG_SIZE,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    root_logger.addHandler(console_handler)

    root_logger.debug(f"Logging to {log_path.absolute()}")
    return log_path


def get_logger(name: str) -> logging.Logger:
    """Logger under the wavetile namespace; `name` is usually __name__."""
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


# =============================================================================
# Structured Logging Helpers
# =============================================================================


def log_step(
    logger: logging.Logger,
    step_count: int,
    kind: str,
    details: str | None = None,
) -> None:
    """Log a worklist step being applied."""
    details_str = f" | {details}" if details else ""
    logger.debug(f"STEP {step_count:06d} | {kind}{details_str}")


def log_collapse(
    logger: logging.Logger,
    step_count: int,
    position: tuple[int, int],
    tile_index: int,
) -> None:
    """Log a collapse decision made by the selector."""
    logger.debug(
        f"STEP {step_count:06d} | COLLAPSE | ({position[0]}, {position[1]}) -> {tile_index}"
    )


def log_contradiction(
    logger: logging.Logger,
    step_count: int,
    positions: list[tuple[int, int]],
) -> None:
    """Log cells whose candidate sets have been emptied."""
    shown = ", ".join(f"({x}, {y})" for x, y in positions[:5])
    more = f" (+{len(positions) - 5} more)" if len(positions) > 5 else ""
    logger.warning(f"STEP {step_count:06d} | CONTRADICTION | {shown}{more}")
