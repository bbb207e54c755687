"""Logging configuration for the wallet generator."""

import logging
import sys
from typing import Optional

from evm_wallet_gen.config.constants import LOG_DATE_FORMAT, LOG_FORMAT


def setup_logging(
    level: str = "WARNING",
    log_file: Optional[str] = None,
) -> None:
    """
    Configure logging for the application.

    Console output is reserved for wallet boxes, so diagnostics go to stderr.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR).
        log_file: Optional file path to write logs.
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Reduce noise from third-party libraries
    logging.getLogger("eth_account").setLevel(logging.WARNING)
    logging.getLogger("eth_keys").setLevel(logging.WARNING)
    logging.getLogger("eth_utils").setLevel(logging.WARNING)

    targets = ["stderr"] + ([log_file] if log_file else [])
    logging.debug(f"Logging to {', '.join(targets)} at {logging.getLevelName(numeric_level)}")
