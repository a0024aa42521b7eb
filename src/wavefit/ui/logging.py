"""Logging configuration for WaveFit."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime
from pathlib import Path

from rich.logging import RichHandler

from wavefit.ui.console import VERSION, console

LOGGER_NAME = "wavefit"

# Module-level logger (configured by setup_logging)
_logger: logging.Logger | None = None


class JSONFormatter(logging.Formatter):
    """JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_record = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_record)


def setup_logging(
    log_file: Path | None = None,
    verbose: bool = False,
    level: int = logging.INFO,
    log_format: str = "text",
) -> None:
    """Configure the ``wavefit`` logger.

    Args:
        log_file: File to write records to
        verbose: Also print records on the console through Rich
        level: Minimum level for all handlers
        log_format: ``"json"`` for structured records, ``"text"`` otherwise;
            a ``.json`` file suffix also selects JSON
    """
    global _logger

    if log_file is None and not verbose:
        _logger = None
        return

    _logger = logging.getLogger(LOGGER_NAME)
    _logger.setLevel(level)
    for handler in _logger.handlers[:]:
        handler.close()
        _logger.removeHandler(handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="w")
        file_handler.setLevel(level)

        if log_format == "json" or log_file.suffix == ".json":
            file_formatter: logging.Formatter = JSONFormatter()
        else:
            file_formatter = logging.Formatter(
                "%(asctime)s | %(levelname)-5s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )

        file_handler.setFormatter(file_formatter)
        _logger.addHandler(file_handler)

    if verbose:
        console_handler = RichHandler(
            console=console,
            show_time=False,
            show_path=False,
            markup=False,
        )
        console_handler.setLevel(level)
        _logger.addHandler(console_handler)

    _logger.info(f"WaveFit v{VERSION} - Session Started")
    _logger.info(f"Command: {' '.join(sys.argv)}")
    _logger.info(f"Python: {sys.version.split()[0]} | Platform: {sys.platform}")


def log(message: str, level: str = "info") -> None:
    """Log a message (no-op until setup_logging enabled a handler)."""
    if _logger is None:
        return

    level_map = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
        "critical": logging.CRITICAL,
    }

    _logger.log(level_map.get(level.lower(), logging.INFO), message)


def close_logging() -> None:
    """Close logging and release handlers."""
    global _logger

    if _logger is None:
        return

    _logger.info("WaveFit Session Completed")

    for handler in _logger.handlers[:]:
        handler.close()
        _logger.removeHandler(handler)
    _logger = None


__all__ = [
    "JSONFormatter",
    "close_logging",
    "log",
    "setup_logging",
]
