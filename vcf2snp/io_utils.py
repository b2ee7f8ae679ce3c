"""I/O utilities for input and output streams.

Input may be a plain or gzip-compressed file (detected by magic bytes) or
standard input. Output is appended to a named file, or written to stdout.

Example:
    with open_input(Path("calls.vcf.gz")) as f:
        for line in f:
            process(line)
"""

import gzip
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterator

from vcf2snp.exceptions import ConfigurationError

# Gzip magic bytes (first two bytes of gzip file)
GZIP_MAGIC = b"\x1f\x8b"

STDIO_PATH = "-"


def is_gzipped(filepath: Path) -> bool:
    """Detect if a file is gzip-compressed.

    Checks magic bytes first, falls back to extension if the file is too
    small or unreadable.

    Args:
        filepath: Path to file to check

    Returns:
        True if file is gzip-compressed
    """
    try:
        with open(filepath, "rb") as f:
            magic = f.read(2)
            if len(magic) >= 2:
                return magic == GZIP_MAGIC
    except OSError:
        pass

    return filepath.suffix == ".gz"


def is_stdio(filepath: Path | None) -> bool:
    """True if the path means stdin/stdout (unset or "-")."""
    return filepath is None or str(filepath) == STDIO_PATH


@contextmanager
def open_input(filepath: Path | None) -> Iterator[IO[str]]:
    """Open the input stream with automatic gzip detection.

    Args:
        filepath: Path to a VCF file, or None/"-" for stdin

    Yields:
        Text file handle. stdin is yielded but never closed.

    Raises:
        ConfigurationError: If the file cannot be opened
    """
    if is_stdio(filepath):
        yield sys.stdin
        return

    assert filepath is not None
    try:
        if is_gzipped(filepath):
            f = gzip.open(filepath, "rt", encoding="utf-8")
        else:
            f = open(filepath, "r", encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot open input file {filepath}: {e}") from e

    try:
        yield f
    finally:
        f.close()


@contextmanager
def open_output(filepath: Path | None) -> Iterator[IO[str]]:
    """Open the output stream in append mode.

    Args:
        filepath: Output path, or None/"-" for stdout

    Yields:
        Writable text handle. stdout is flushed but never closed.

    Raises:
        ConfigurationError: If the file cannot be opened
    """
    if is_stdio(filepath):
        try:
            yield sys.stdout
        finally:
            sys.stdout.flush()
        return

    assert filepath is not None
    try:
        f = open(filepath, "a", encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot open output file {filepath}: {e}") from e

    try:
        yield f
    finally:
        f.close()


def iter_lines(f: IO[str]) -> Iterator[tuple[int, str]]:
    """Iterate over numbered lines stripped of trailing newlines.

    Args:
        f: Open text handle

    Yields:
        (line number starting at 1, line)
    """
    for line_num, line in enumerate(f, 1):
        yield line_num, line.rstrip("\r\n")
