"""Allele normalization, genotype resolution and record aggregation."""

from vcf2snp.calls.aggregator import classify_call, convert_record, convert_records
from vcf2snp.calls.genotypes import resolve_genotype
from vcf2snp.calls.normalizer import normalize_alleles

__all__ = [
    "classify_call",
    "convert_record",
    "convert_records",
    "normalize_alleles",
    "resolve_genotype",
]
