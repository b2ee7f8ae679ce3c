"""
VCF to SNP-format transcoder.

Converts VCF variant records into a denormalized tab-separated format with
right-anchored indel alleles, per-record call types, cohort allele counts
and a single IUPAC-style genotype token per sample.
"""

__version__ = "1.0.0"
__author__ = "Data Tecnica International"
