"""SNP-format TSV writer.

Output format (tab-separated, one header row):
Fragment  Position  Reference  Type  Alleles  Allele_Counts  sample1  ...  sampleN
chr1      103       T          DEL   T,-3     3,1            A       1    E  1

Each sample contributes two columns: the genotype token and a fixed
confidence of 1.
"""

from typing import TextIO

from vcf2snp.models import OutputRow

HEADER_COLUMNS = ["Fragment", "Position", "Reference", "Type", "Alleles", "Allele_Counts"]


def format_header(samples: list[str]) -> str:
    """Build the header line (without newline) for the given sample names."""
    return "\t".join(HEADER_COLUMNS + samples)


class SnpFileWriter:
    """Writes the header and rows to an already open text stream.

    Usage:
        with open_output(path) as f:
            writer = SnpFileWriter(f, reader.samples)
            for row in rows:
                writer.write_row(row)
    """

    def __init__(self, handle: TextIO, samples: list[str]) -> None:
        """Initialize writer and write the header row.

        Args:
            handle: Writable text stream
            samples: Sample names in VCF header order
        """
        self.handle = handle
        self.samples = samples
        self.row_count = 0
        self.handle.write(format_header(samples) + "\n")

    def write_row(self, row: OutputRow) -> None:
        """Write one output row."""
        self.handle.write(row.to_line() + "\n")
        self.row_count += 1
