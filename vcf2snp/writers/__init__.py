"""Output writers for the SNP file, run summary and JSON report."""

from vcf2snp.writers.report import ReportWriter
from vcf2snp.writers.snp_file import SnpFileWriter

__all__ = ["ReportWriter", "SnpFileWriter"]
