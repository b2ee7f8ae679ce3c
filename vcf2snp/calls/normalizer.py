"""Allele normalization.

Rewrites VCF's left-anchored, reference-padded alleles into the
right-anchored, minimal form used by the SNP format:

1. Reference is reduced to its last base
2. Deletion (len(ref) > len(alt)) - alt becomes "-N", position moves to the
   last deleted base (pos + N)
3. Insertion (len(ref) < len(alt)) - alt becomes "+" plus the inserted bases
4. Substitution (equal lengths) - alt becomes its last base

Position priority: a deletion-derived position outranks any other. Among
deletions the last alternate wins. Without deletions the position is left
unchanged.

Example:
    >>> normalize_alleles(100, "ACGT", ["A"])
    NormalizedCall(pos=103, ref='T', alts=['-3'], types=[<AlleleType.DELETION: 'D'>])
"""

from vcf2snp.exceptions import InvalidAllele
from vcf2snp.models import AlleleType, NormalizedCall
from vcf2snp.utils import is_valid_allele


def classify_allele(ref: str, alt: str) -> AlleleType:
    """Classify an alternate allele by comparing its length to the reference."""
    if len(ref) > len(alt):
        return AlleleType.DELETION
    if len(ref) < len(alt):
        return AlleleType.INSERTION
    return AlleleType.SUBSTITUTION


def deletion_allele(ref: str, alt: str) -> str:
    """Deleted size as a negative number string, e.g. "-3"."""
    return str(-(len(ref) - len(alt)))


def insertion_allele(ref: str, alt: str) -> str:
    """Inserted bases (reference excluded) prefixed with "+".

    Raises:
        InvalidAllele: If no bases remain after removing the reference
    """
    inserted = alt[len(ref):]
    if not inserted:
        raise InvalidAllele(alt, f"Failed to make insertion allele from ref {ref!r}, alt {alt!r}")
    return f"+{inserted}"


def substitution_allele(ref: str, alt: str) -> str:
    """Last base of the alternate."""
    return alt[len(ref) - 1:]


def normalize_alleles(pos: int, ref: str, alts: list[str]) -> NormalizedCall:
    """Normalize a record's position, reference and alternates.

    Args:
        pos: Original 1-based position
        ref: Reference allele
        alts: Alternate alleles in VCF order

    Returns:
        NormalizedCall with alternates and types in input order

    Raises:
        InvalidAllele: If any allele contains characters outside ACGT, or an
            insertion carries no inserted bases
    """
    if not is_valid_allele(ref):
        raise InvalidAllele(ref, f"Ref alleles must be composed of ACGT, got {ref!r}")

    norm_alts: list[str] = []
    types: list[AlleleType] = []
    deletion_pos: int | None = None

    for alt in alts:
        if not is_valid_allele(alt):
            raise InvalidAllele(alt, f"Alt alleles must be composed of ACGT, got {alt!r}")

        allele_type = classify_allele(ref, alt)

        if allele_type == AlleleType.DELETION:
            norm_alts.append(deletion_allele(ref, alt))
            deletion_pos = pos + len(ref) - len(alt)
        elif allele_type == AlleleType.INSERTION:
            norm_alts.append(insertion_allele(ref, alt))
        else:
            norm_alts.append(substitution_allele(ref, alt))

        types.append(allele_type)

    return NormalizedCall(
        pos=deletion_pos if deletion_pos is not None else pos,
        ref=ref[-1],
        alts=norm_alts,
        types=types,
    )
