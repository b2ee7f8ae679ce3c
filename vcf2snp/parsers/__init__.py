"""Input parsers."""

from vcf2snp.parsers.vcf import VCFReader, parse_record

__all__ = ["VCFReader", "parse_record"]
