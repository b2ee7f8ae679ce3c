"""
Logging configuration for the transcoder.

Provides:
- Console handler on stderr: skipped records and errors (WARNING, DEBUG when verbose)
- Optional file handler with rotation capturing all details

stdout is never used for logging since it may carry the converted output.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


def setup_logging(
    verbose: bool = False,
    log_file: Optional[Path] = None,
    max_bytes: int = 5 * 1024 * 1024,  # 5MB
    backup_count: int = 3,
) -> None:
    """
    Initialize logging for the vcf2snp package.

    Args:
        verbose: Lower the console level from WARNING to DEBUG.
        log_file: Optional path for a rotating DEBUG-level log file.
        max_bytes: Maximum size per log file before rotation.
        backup_count: Number of backup files to keep.
    """
    package_logger = logging.getLogger("vcf2snp")
    package_logger.setLevel(logging.DEBUG)  # Capture everything, handlers filter

    # Clear any existing handlers so repeated runs don't duplicate output
    reset_logging()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        package_logger.addHandler(file_handler)

    package_logger.propagate = False


def reset_logging() -> None:
    """Remove and close the package logger's handlers. Useful for testing."""
    package_logger = logging.getLogger("vcf2snp")
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.propagate = True
