"""Utility functions for the VCF to SNP transcoder.

Base validation, the IUPAC ambiguity table and contig naming helpers.
"""

import re

# Reference and alternate alleles must be uppercase DNA bases only
ALLELE_PATTERN = re.compile(r"^[ACGT]+$")

# Two-base keys are stored sorted, single bases map to themselves
IUPAC: dict[str, str] = {
    "A": "A",
    "C": "C",
    "G": "G",
    "T": "T",
    "AA": "A",
    "CC": "C",
    "GG": "G",
    "TT": "T",
    "AC": "M",
    "AG": "R",
    "AT": "W",
    "CG": "S",
    "CT": "Y",
    "GT": "K",
}

# Token for a sample with no called alleles
NO_CALL = "N"


def is_valid_allele(allele: str) -> bool:
    """Check that an allele is a non-empty string over A, C, G, T.

    Example:
        >>> is_valid_allele("ACGT")
        True
        >>> is_valid_allele("acgt")
        False
        >>> is_valid_allele("AN")
        False
    """
    return ALLELE_PATTERN.fullmatch(allele) is not None


def iupac_code(bases: str) -> str:
    """Get the IUPAC ambiguity code for one or two observed bases.

    Args:
        bases: Zero, one or two bases, in any order

    Returns:
        IUPAC code, or NO_CALL for an empty string

    Raises:
        KeyError: If bases is not a one- or two-base combination of ACGT

    Example:
        >>> iupac_code("CA")
        "M"
        >>> iupac_code("G")
        "G"
    """
    if not bases:
        return NO_CALL
    return IUPAC["".join(sorted(bases))]


def normalize_chromosome(chrom: str) -> str:
    """Prefix a contig name with "chr" unless it already has one.

    Example:
        >>> normalize_chromosome("1")
        "chr1"
        >>> normalize_chromosome("chrX")
        "chrX"
    """
    if chrom.startswith("chr"):
        return chrom
    return f"chr{chrom}"


def split_genotype(gt: str) -> list[int | None]:
    """Split a VCF GT string into allele indices.

    Phased and unphased separators are treated alike. Missing calls (".")
    keep their slot as None so the ploidy stays visible.

    Raises:
        ValueError: If an index is not an integer

    Example:
        >>> split_genotype("0/1")
        [0, 1]
        >>> split_genotype("1|.")
        [1, None]
        >>> split_genotype("./.")
        [None, None]
    """
    parts = re.split(r"[/|]", gt)
    return [None if p in ("", ".") else int(p) for p in parts]
