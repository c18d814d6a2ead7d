import logging
import logging.config
from datetime import datetime
from pathlib import Path
from typing import Optional

from fruitbayes.config.resolvers import default_log_dir

def setup_logging(
    log_dir: Optional[str] = None,
    console: bool = True,
    level: str = "INFO",
    quiet_console: bool = False,
    console_level: Optional[str] = None,
) -> tuple:
    """
    Setup logging with file and optional console handlers.

    Args:
        log_dir: Directory for log files (defaults to the user log directory)
        console: Whether to enable console logging
        level: Project logger level
        quiet_console: If True, only errors reach the console
        console_level: Separate level for console (defaults to level)
    """
    name = "fruitbayes"

    log_dir = Path(log_dir) if log_dir else default_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_path = str(log_dir / f"{name}_{ts}.log")

    # base config: file handler for all logs
    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "plain": {
                "format": "{asctime} {levelname:<7} {name} - {message}",
                "style": "{",
            },
        },
        "handlers": {
            "file": {
                "class": "logging.FileHandler",
                "formatter": "plain",
                "filename": log_path,
                "encoding": "utf-8",
                "mode": "w",
                "level": "DEBUG",   # capture everything in file
            }
        },
        "loggers": {
            name: {
                "level": level,
                "handlers": ["file"],
                "propagate": False,
            },
        },
        "root": {"handlers": []},  # keep root empty
    }

    logging.config.dictConfig(config)
    logging.captureWarnings(True)

    logger = logging.getLogger(name)

    console_formatter = logging.Formatter("{levelname:<7} {message}", style="{")

    summary_logger = logging.getLogger(f"{name}.summary")
    summary_logger.setLevel(logging.INFO)
    summary_logger.propagate = False
    for h in list(summary_logger.handlers):
        summary_logger.removeHandler(h)
        h.close()

    fh_summary = logging.FileHandler(log_path, encoding="utf-8", mode="a")
    fh_summary.setLevel(logging.INFO)
    fh_summary.setFormatter(logging.Formatter("{asctime} SUMMARY - {message}", style="{"))
    summary_logger.addHandler(fh_summary)

    if console and not quiet_console:
        console_handler = logging.StreamHandler()
        console_level = console_level or level
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(console_formatter)

        logger.addHandler(console_handler)
        summary_logger.addHandler(console_handler)
    elif console and quiet_console:
        # Minimal console output - only errors and critical
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.ERROR)
        console_handler.setFormatter(console_formatter)

        summary_logger.addHandler(console_handler)

    logger.info("Logging initialised. File: %s", log_path)
    return logger, summary_logger
