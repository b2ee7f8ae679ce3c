"""
Custom exceptions for the VCF to SNP transcoder.
Record-level errors skip one record; everything else aborts the run.
"""

from vcf2snp.models import SkipReason


class Vcf2SnpError(Exception):
    """Base exception for transcoder errors."""
    pass


class RecordError(Vcf2SnpError):
    """Raised when a single record cannot be converted and should be skipped."""

    reason = SkipReason.INVALID_ALLELE


class InvalidAllele(RecordError):
    """Raised when an allele is not representable (bad bases, empty insertion)."""

    reason = SkipReason.INVALID_ALLELE

    def __init__(self, allele: str, message: str | None = None) -> None:
        self.allele = allele
        super().__init__(message or f"Alleles must be composed of ACGT, got {allele!r}")


class InvalidGenotype(RecordError):
    """Raised when a genotype index does not refer to a known allele."""

    reason = SkipReason.INVALID_GENOTYPE


class PloidyError(Vcf2SnpError):
    """Raised when a sample carries more than two genotype indices."""

    reason = SkipReason.POLYPLOID

    def __init__(self, ploidy: int) -> None:
        self.ploidy = ploidy
        super().__init__(f"Sample more than diploid (ploidy {ploidy}), input file is malformed")


class VCFFormatError(Vcf2SnpError):
    """Raised when the VCF text itself cannot be parsed."""
    pass


class ConfigurationError(Vcf2SnpError):
    """Raised when configured paths cannot be used."""
    pass
