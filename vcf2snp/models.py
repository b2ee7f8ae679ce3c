"""Data models for the VCF to SNP transcoder.

Records as delivered by the reader, the normalizer's output, per-sample
calls, output rows and run statistics.
"""

from dataclasses import dataclass, field
from enum import Enum, auto


class AlleleType(Enum):
    """Type of a single alternate allele relative to the reference."""

    SUBSTITUTION = "S"
    INSERTION = "I"
    DELETION = "D"


class CallType(str, Enum):
    """Overall call type of an output row."""

    SNP = "SNP"
    INS = "INS"
    DEL = "DEL"
    MULTIALLELIC = "MULTIALLELIC"


class SkipReason(Enum):
    """Reasons for skipping an input record."""

    INVALID_ALLELE = auto()
    INVALID_GENOTYPE = auto()
    POLYPLOID = auto()


@dataclass(slots=True)
class SampleGenotype:
    """Genotype indices of one sample at one locus.

    Attributes:
        indices: 0 = reference, k = alternate k (1-based), None = missing call;
            phase ignored
    """

    indices: list[int | None] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.indices)


@dataclass(slots=True)
class VariantRecord:
    """One VCF data line.

    Attributes:
        chrom: Contig name as found in the input
        pos: 1-based position
        ref: Reference allele
        alts: Alternate alleles, in VCF order
        samples: One genotype per sample, in header order
    """

    chrom: str
    pos: int
    ref: str
    alts: list[str]
    samples: list[SampleGenotype] = field(default_factory=list)


@dataclass(slots=True)
class NormalizedCall:
    """Right-anchored representation of a record's alleles.

    Attributes:
        pos: Normalized position
        ref: Last base of the reference allele
        alts: Normalized alternates (base, "+BASES" or "-N"), parallel to types
        types: AlleleType of each alternate
    """

    pos: int
    ref: str
    alts: list[str]
    types: list[AlleleType]


@dataclass(slots=True)
class SampleCall:
    """Resolved genotype of one sample.

    Attributes:
        token: Single-letter genotype code (IUPAC, D, E, I or H)
        deletions: Number of deletion alleles carried
        insertions: Number of insertion alleles carried
        confidence: Placeholder confidence, always 1
    """

    token: str
    deletions: int = 0
    insertions: int = 0
    confidence: int = 1


@dataclass
class OutputRow:
    """One row of the SNP-format output."""

    chrom: str
    pos: int
    ref: str
    call_type: CallType
    alleles: list[str]
    allele_counts: list[int]
    calls: list[SampleCall]

    def to_line(self) -> str:
        """Render the row as a tab-separated line without newline."""
        sample_fields = "\t".join(f"{c.token}\t{c.confidence}" for c in self.calls)
        fields = [
            self.chrom,
            str(self.pos),
            self.ref,
            self.call_type.value,
            ",".join(self.alleles),
            ",".join(str(c) for c in self.allele_counts),
        ]
        if sample_fields:
            fields.append(sample_fields)
        return "\t".join(fields)


@dataclass
class Statistics:
    """Running statistics for a conversion run."""

    records_read: int = 0
    rows_written: int = 0

    # Record-level skips
    invalid_allele: int = 0
    invalid_genotype: int = 0
    polyploid: int = 0

    call_types: dict[str, int] = field(
        default_factory=lambda: {c.value: 0 for c in CallType}
    )

    @property
    def skipped(self) -> int:
        """Total records skipped for any reason."""
        return self.invalid_allele + self.invalid_genotype + self.polyploid

    def record_skip(self, reason: SkipReason) -> None:
        """Count a skipped record."""
        if reason == SkipReason.INVALID_ALLELE:
            self.invalid_allele += 1
        elif reason == SkipReason.INVALID_GENOTYPE:
            self.invalid_genotype += 1
        else:
            self.polyploid += 1

    def record_row(self, row: OutputRow) -> None:
        """Count a written row."""
        self.rows_written += 1
        self.call_types[row.call_type.value] += 1
