"""Record aggregation and the streaming conversion loop.

Processing flow per record:
1. Normalize alleles (record skipped on InvalidAllele)
2. Resolve every sample, building the cohort allele tally
3. Classify the call type from the tally
4. Assemble the output row
"""

import logging
from collections import Counter
from collections.abc import Iterable, Iterator

from vcf2snp.calls.genotypes import resolve_genotype
from vcf2snp.calls.normalizer import normalize_alleles
from vcf2snp.exceptions import PloidyError, RecordError
from vcf2snp.models import CallType, OutputRow, SampleCall, Statistics, VariantRecord
from vcf2snp.utils import normalize_chromosome

logger = logging.getLogger(__name__)


def classify_call(tally: Counter[str], ref: str, calls: list[SampleCall]) -> CallType:
    """Derive a record's call type from the cohort.

    Args:
        tally: Allele counts across all samples of the record
        ref: Normalized reference base
        calls: Resolved sample calls of the record

    Returns:
        MULTIALLELIC if more than one non-reference allele was observed,
        else DEL/INS if any sample carried a deletion/insertion, else SNP
    """
    saw_ref = 1 if ref in tally else 0
    if len(tally) - saw_ref > 1:
        return CallType.MULTIALLELIC
    if any(c.deletions > 0 for c in calls):
        return CallType.DEL
    if any(c.insertions > 0 for c in calls):
        return CallType.INS
    return CallType.SNP


def convert_record(record: VariantRecord) -> OutputRow:
    """Convert one variant record into an output row.

    Raises:
        RecordError: If the record's alleles or genotypes are invalid
        PloidyError: If any sample is more than diploid
    """
    call = normalize_alleles(record.pos, record.ref, record.alts)

    tally: Counter[str] = Counter()
    calls = [resolve_genotype(sample, call, tally) for sample in record.samples]

    return OutputRow(
        chrom=normalize_chromosome(record.chrom),
        pos=call.pos,
        ref=call.ref,
        call_type=classify_call(tally, call.ref, calls),
        alleles=list(tally),
        allele_counts=list(tally.values()),
        calls=calls,
    )


def convert_records(
    records: Iterable[VariantRecord],
    stats: Statistics | None = None,
    strict_ploidy: bool = True,
) -> Iterator[OutputRow]:
    """Stream output rows for accepted records.

    Records with invalid alleles or genotypes are logged and skipped. A
    sample with more than two alleles aborts the run unless strict_ploidy
    is False, in which case that record is skipped too.

    Args:
        records: Variant records from the reader
        stats: Optional Statistics object to update (mutated in place)
        strict_ploidy: Raise PloidyError instead of skipping polyploid records

    Yields:
        OutputRow for each accepted record

    Raises:
        PloidyError: On a polyploid sample when strict_ploidy is True
    """
    if stats is None:
        stats = Statistics()

    for record in records:
        stats.records_read += 1

        try:
            row = convert_record(record)
        except RecordError as e:
            logger.warning(f"Skipping {record.chrom}:{record.pos}: {e}")
            stats.record_skip(e.reason)
            continue
        except PloidyError as e:
            if strict_ploidy:
                logger.error(f"Aborting at {record.chrom}:{record.pos}: {e}")
                raise
            logger.warning(f"Skipping {record.chrom}:{record.pos}: {e}")
            stats.record_skip(e.reason)
            continue

        stats.record_row(row)
        yield row
