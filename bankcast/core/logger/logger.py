"""
Logging Bootstrap.

Configures the pipeline logger exactly once per process: a colorized console
handler for humans and a rotating plain-text file handler inside the run's
log directory for post-mortem analysis.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

# =========================================================================== #
#                                Internal Imports                             #
# =========================================================================== #
from .styles import LogStyle

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ColorFormatter(logging.Formatter):
    """Console formatter that tints the level name with ANSI colors."""

    LEVEL_COLORS = {
        logging.DEBUG: LogStyle.DIM,
        logging.INFO: LogStyle.GREEN,
        logging.WARNING: LogStyle.YELLOW,
        logging.ERROR: LogStyle.RED,
        logging.CRITICAL: LogStyle.BOLD + LogStyle.RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno, "")
        original = record.levelname
        record.levelname = f"{color}{original}{LogStyle.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


class Logger:
    """
    Idempotent logger factory.

    Calling `setup` twice for the same name replaces the previous handlers,
    so tests and repeated runs in one interpreter never duplicate output.
    """

    @staticmethod
    def setup(
        name: str,
        log_dir: Path | None = None,
        level: str = "INFO",
        max_bytes: int = 5 * 1024 * 1024,
        backup_count: int = 3,
    ) -> logging.Logger:
        """
        Configures and returns the named logger.

        Args:
            name: Logger name (usually LOGGER_NAME).
            log_dir: Directory for 'run.log'. Console-only when None.
            level: Minimum level name.
            max_bytes: Rotation threshold for the file handler.
            backup_count: Number of rotated files to keep.

        Returns:
            logging.Logger: The configured logger.
        """
        logger = logging.getLogger(name)
        logger.setLevel(getattr(logging, level.upper(), logging.INFO))
        logger.propagate = False

        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(ColorFormatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(console)

        if log_dir is not None:
            log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_dir / "run.log",
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
            logger.addHandler(file_handler)

        return logger
