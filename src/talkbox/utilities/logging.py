import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_LEVEL_ENV_VAR = "LOG_LEVEL"
LOG_DIR_ENV_VAR = "TALKBOX_LOG_DIR"
MAX_LOG_BYTES = 10 * 1024 * 1024  # 10 MiB
BACKUP_COUNT = 5
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_log_directory() -> Path | None:
    """Return the directory for log files, or ``None`` when file logging is off."""

    log_dir = os.getenv(LOG_DIR_ENV_VAR)
    if not log_dir:
        return None
    path = Path(log_dir).expanduser()
    path.mkdir(parents=True, exist_ok=True)
    return path


def _sanitize_logger_name(name: str) -> str:
    """Convert a logger name to a filesystem-friendly filename."""

    sanitized = name.replace("/", "_").replace(os.sep, "_")
    return sanitized.replace(".", "_") or "root"


def _attach_handler(
    logger: logging.Logger,
    handler: logging.Handler,
    formatter: logging.Formatter,
    level: int,
) -> None:
    handler.setFormatter(formatter)
    handler.setLevel(level)
    logger.addHandler(handler)


def _configure_logger(logger: logging.Logger, log_level: str) -> None:
    level = getattr(logging, log_level, logging.INFO)
    logger.setLevel(level)

    if logger.handlers:
        # Already configured by an earlier get_logger call or the host game.
        return

    formatter = logging.Formatter(LOG_FORMAT)
    _attach_handler(logger, logging.StreamHandler(), formatter, level)

    log_dir = _resolve_log_directory()
    if log_dir is not None:
        file_handler = RotatingFileHandler(
            log_dir / f"{_sanitize_logger_name(logger.name)}.log",
            maxBytes=MAX_LOG_BYTES,
            backupCount=BACKUP_COUNT,
        )
        _attach_handler(logger, file_handler, formatter, level)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger with a stream handler and an optional rolling file handler."""

    log_level = os.getenv(LOG_LEVEL_ENV_VAR, "INFO").upper()
    logger = logging.getLogger(name)
    _configure_logger(logger, log_level)
    return logger
