"""Per-sample genotype resolution.

Each sample's genotype indices are resolved into one token, checked in
this order:

1. Any deletion allele - "D" if every allele is a deletion, else "E"
2. Any insertion allele - "I" if every allele is an insertion, else "H"
3. Otherwise the IUPAC code of the reference/substitution bases

Ploidy counts every slot of the genotype, missing calls included, so
"1/." is a heterozygous deletion and "0/1/." is triploid.

Every allele seen is also counted in the record-wide tally, keyed by its
normalized form (reference base, substitution base, "+BASES" or "-N").
"""

from collections import Counter

from vcf2snp.exceptions import InvalidGenotype, PloidyError
from vcf2snp.models import AlleleType, NormalizedCall, SampleCall, SampleGenotype
from vcf2snp.utils import iupac_code

MAX_PLOIDY = 2


def resolve_genotype(
    genotype: SampleGenotype,
    call: NormalizedCall,
    tally: Counter[str],
) -> SampleCall:
    """Resolve one sample's genotype into its output token.

    Args:
        genotype: The sample's genotype indices
        call: Normalized alleles of the record
        tally: Record-wide allele counter (mutated in place)

    Returns:
        SampleCall with token and deletion/insertion counts

    Raises:
        PloidyError: If the sample has more than two genotype slots
        InvalidGenotype: If an index does not refer to a known allele
    """
    if len(genotype) > MAX_PLOIDY:
        raise PloidyError(len(genotype))

    deletions = 0
    insertions = 0
    bases = ""

    for index in genotype.indices:
        # Missing call: counts toward ploidy only
        if index is None:
            continue

        if index == 0:
            bases += call.ref
            tally[call.ref] += 1
            continue

        if index < 0 or index > len(call.alts):
            raise InvalidGenotype(
                f"Genotype index {index} out of range for {len(call.alts)} alternate allele(s)"
            )

        allele = call.alts[index - 1]
        allele_type = call.types[index - 1]

        if allele_type == AlleleType.DELETION:
            deletions += 1
        elif allele_type == AlleleType.INSERTION:
            insertions += 1
        else:
            bases += allele

        tally[allele] += 1

    ploidy = len(genotype)

    if deletions > 0:
        token = "D" if deletions == ploidy else "E"
    elif insertions > 0:
        token = "I" if insertions == ploidy else "H"
    else:
        token = iupac_code(bases)

    return SampleCall(token=token, deletions=deletions, insertions=insertions)
