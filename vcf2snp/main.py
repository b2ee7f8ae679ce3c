"""Main orchestration for the transcoder.

Implements run_conversion(), which coordinates reading the VCF, converting
records, writing the SNP file, and producing the summary and report.
"""

import cProfile
import logging
from pathlib import Path

from rich.console import Console

from vcf2snp.calls.aggregator import convert_records
from vcf2snp.config import Config
from vcf2snp.exceptions import ConfigurationError, VCFFormatError
from vcf2snp.io_utils import open_input, open_output
from vcf2snp.models import Statistics
from vcf2snp.parsers.vcf import VCFReader
from vcf2snp.writers.log import print_summary
from vcf2snp.writers.report import ReportWriter
from vcf2snp.writers.snp_file import SnpFileWriter

logger = logging.getLogger(__name__)


def run_conversion(config: Config, console: Console | None = None) -> Statistics:
    """Convert a VCF stream into the SNP format.

    Main entry point that coordinates:
    1. Opening the input (file, gzip or stdin) and output (append or stdout)
    2. Reading the VCF header for sample names
    3. Streaming records through normalization and genotype resolution
    4. Writing the JSON report (if configured) and printing a summary

    When config.cpu_profile is set the whole run is profiled with cProfile.

    Args:
        config: Run configuration
        console: Console for the summary (default: stderr)

    Returns:
        Statistics for the run

    Raises:
        ConfigurationError: If a configured path cannot be opened
        VCFFormatError: If the input cannot be read or parsed
        PloidyError: If a sample is polyploid and strict_ploidy is set
    """
    if console is None:
        console = Console(stderr=True)

    if config.cpu_profile is None:
        return _run(config, console)

    profiler = cProfile.Profile()
    try:
        stats = profiler.runcall(_run, config, console)
    except Exception:
        # Keep the run's own error; a failed dump is only logged
        try:
            _dump_profile(profiler, config.cpu_profile)
        except ConfigurationError as e:
            logger.error(str(e))
        raise

    _dump_profile(profiler, config.cpu_profile)
    return stats


def _dump_profile(profiler: cProfile.Profile, path: Path) -> None:
    try:
        profiler.dump_stats(path)
    except OSError as e:
        raise ConfigurationError(f"Cannot write CPU profile {path}: {e}") from e
    logger.info(f"CPU profile written to {path}")


def _run(config: Config, console: Console) -> Statistics:
    stats = Statistics()
    report_writer = ReportWriter(config) if config.report_file else None

    logger.info(f"Reading {config.input_name}")

    with open_input(config.input_path) as infile:
        try:
            # Header is checked before the output is created or appended to
            reader = VCFReader(infile)
            logger.debug(f"Samples in header: {len(reader.samples)}")

            with open_output(config.output_path) as outfile:
                writer = SnpFileWriter(outfile, reader.samples)
                for row in convert_records(reader, stats, strict_ploidy=config.strict_ploidy):
                    writer.write_row(row)
        except (OSError, EOFError, UnicodeDecodeError) as e:
            logger.error(f"I/O error converting {config.input_name}: {e}")
            raise VCFFormatError(f"I/O error converting {config.input_name}: {e}") from e

    logger.info(f"Wrote {stats.rows_written:,} rows to {config.output_name}")

    if report_writer and config.report_file:
        report_writer.write(config.report_file, stats, reader.samples)
        logger.info(f"Report written to {config.report_file}")

    print_summary(stats, console)

    return stats
