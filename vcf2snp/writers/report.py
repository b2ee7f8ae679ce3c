"""JSON report writer.

Records run metadata and statistics for audit and reproducibility.
"""

import json
import tempfile
from datetime import datetime
from pathlib import Path

from vcf2snp import __version__
from vcf2snp.config import Config
from vcf2snp.models import Statistics


class ReportWriter:
    """Builds and writes the JSON run report.

    Usage:
        writer = ReportWriter(config)
        ... run the conversion ...
        writer.write(output_path, stats, samples)
    """

    def __init__(self, config: Config) -> None:
        """Initialize report writer.

        Args:
            config: Run configuration
        """
        self.config = config
        self.start_time = datetime.now()

    def build(self, stats: Statistics, samples: list[str]) -> dict:
        """Build the report as a JSON-serializable dict.

        Args:
            stats: Run statistics
            samples: Sample names from the VCF header
        """
        end_time = datetime.now()
        duration = (end_time - self.start_time).total_seconds()

        metadata = {
            "version": __version__,
            "tool": "vcf2snp",
            "timestamp": end_time.isoformat(),
            "duration_seconds": duration,
            "input": self.config.input_name,
            "output": self.config.output_name,
            "samples": samples,
            "options": {
                "strict_ploidy": self.config.strict_ploidy,
                "cpu_profile": str(self.config.cpu_profile) if self.config.cpu_profile else None,
            },
        }

        statistics = {
            "records_read": stats.records_read,
            "rows_written": stats.rows_written,
            "skipped": {
                "total": stats.skipped,
                "invalid_allele": stats.invalid_allele,
                "invalid_genotype": stats.invalid_genotype,
                "polyploid": stats.polyploid,
            },
            "call_types": dict(stats.call_types),
        }

        return {"metadata": metadata, "statistics": statistics}

    def write(self, output_path: Path, stats: Statistics, samples: list[str]) -> None:
        """Write the JSON report atomically.

        Writes to a temporary file first, then renames to prevent
        partial files on interruption.

        Args:
            output_path: Path for JSON report file
            stats: Run statistics
            samples: Sample names from the VCF header
        """
        report = self.build(stats, samples)

        with tempfile.NamedTemporaryFile(
            mode="w",
            dir=output_path.parent,
            suffix=".json.tmp",
            delete=False,
        ) as tmp:
            json.dump(report, tmp, indent=2)
            tmp_path = Path(tmp.name)

        tmp_path.replace(output_path)
