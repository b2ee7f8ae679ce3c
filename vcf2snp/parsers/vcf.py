"""VCF text parser.

Streams VCF data lines into VariantRecord objects. Only the columns the
transcoder needs are interpreted:

#CHROM  POS     ID  REF  ALT    QUAL  FILTER  INFO  FORMAT  sample1  sample2
1       10000   .   A    G,AT   .     PASS    .     GT:DP   0/1:12   1|1:9

Genotypes are taken from the GT key of the FORMAT column. Phase is ignored
and missing calls (".") keep their slot as None.
"""

from collections.abc import Iterator
from typing import IO

from vcf2snp.exceptions import VCFFormatError
from vcf2snp.io_utils import iter_lines
from vcf2snp.models import SampleGenotype, VariantRecord
from vcf2snp.utils import split_genotype

HEADER_PREFIX = "#CHROM"
META_PREFIX = "##"
MIN_COLUMNS = 8
SAMPLE_COLUMN = 9


class VCFReader:
    """Reads the header on construction, then yields records on iteration.

    Usage:
        with open_input(path) as f:
            reader = VCFReader(f)
            for record in reader:
                ...
    """

    def __init__(self, handle: IO[str]) -> None:
        """Initialize reader and consume the header.

        Args:
            handle: Open text handle positioned at the start of the VCF

        Raises:
            VCFFormatError: If no #CHROM header line precedes the data
        """
        self._lines = iter_lines(handle)
        self.samples: list[str] = []
        self.line_num = 0
        self._read_header()

    def _read_header(self) -> None:
        for line_num, line in self._lines:
            self.line_num = line_num
            if line.startswith(META_PREFIX):
                continue
            if line.startswith(HEADER_PREFIX):
                self.samples = line.split("\t")[SAMPLE_COLUMN:]
                return
            if line:
                raise VCFFormatError(
                    f"Invalid VCF at line {line_num}: data line before #CHROM header"
                )
        raise VCFFormatError("Invalid VCF: missing #CHROM header line")

    def __iter__(self) -> Iterator[VariantRecord]:
        for line_num, line in self._lines:
            self.line_num = line_num
            if not line or line.startswith("#"):
                continue
            yield parse_record(line, line_num, len(self.samples))


def parse_record(line: str, line_num: int, n_samples: int) -> VariantRecord:
    """Parse one VCF data line.

    Args:
        line: Tab-separated data line
        line_num: Line number for error messages
        n_samples: Number of samples declared in the header

    Returns:
        VariantRecord with one SampleGenotype per sample

    Raises:
        VCFFormatError: If the line is malformed
    """
    parts = line.split("\t")

    if len(parts) < MIN_COLUMNS:
        raise VCFFormatError(
            f"Invalid VCF format at line {line_num}: expected at least "
            f"{MIN_COLUMNS} columns, got {len(parts)}"
        )

    sample_fields = parts[SAMPLE_COLUMN:]
    if len(sample_fields) != n_samples:
        raise VCFFormatError(
            f"Invalid VCF format at line {line_num}: header declares {n_samples} "
            f"sample(s), line has {len(sample_fields)}"
        )

    try:
        pos = int(parts[1])
    except ValueError:
        raise VCFFormatError(f"Invalid position at line {line_num}: {parts[1]!r}")

    alts = [] if parts[4] == "." else parts[4].split(",")

    samples: list[SampleGenotype] = []
    if n_samples:
        gt_index = _gt_index(parts[8], line_num)
        for sample_field in sample_fields:
            values = sample_field.split(":")
            gt = values[gt_index] if gt_index < len(values) else "."
            try:
                samples.append(SampleGenotype(split_genotype(gt)))
            except ValueError:
                raise VCFFormatError(f"Invalid genotype at line {line_num}: {gt!r}")

    return VariantRecord(
        chrom=parts[0],
        pos=pos,
        ref=parts[3],
        alts=alts,
        samples=samples,
    )


def _gt_index(format_field: str, line_num: int) -> int:
    keys = format_field.split(":")
    if "GT" not in keys:
        raise VCFFormatError(f"Missing GT in FORMAT column at line {line_num}")
    return keys.index("GT")
