"""Pytest fixtures for vcf2snp tests."""

import io
from pathlib import Path

import pytest
from rich.console import Console

VCF_HEADER = (
    "##fileformat=VCFv4.2\n"
    '##FORMAT=<ID=GT,Number=1,Type=String,Description="Genotype">\n'
    "#CHROM\tPOS\tID\tREF\tALT\tQUAL\tFILTER\tINFO\tFORMAT\tS1\tS2\tS3\n"
)


@pytest.fixture
def vcf_text() -> str:
    """Small three-sample VCF covering every call type.

    Records:
    - 1:100 A>C: SNP, tokens A / M / C
    - 2:200 ACGT>A: 3bp deletion, tokens E / D / T
    - chr3:300 A>ACG,G: insertion plus substitution, MULTIALLELIC
    - 4:400 N>A: invalid reference, skipped
    - X:500 G>T: SNP with a missing genotype
    """
    return VCF_HEADER + (
        "1\t100\trs1\tA\tC\t50\tPASS\t.\tGT\t0/0\t0/1\t1/1\n"
        "2\t200\t.\tACGT\tA\t50\tPASS\t.\tGT:DP\t0/1:5\t1/1:7\t0/0:3\n"
        "chr3\t300\t.\tA\tACG,G\t50\tPASS\t.\tGT\t0/1\t0/2\t1|1\n"
        "4\t400\t.\tN\tA\t50\tPASS\t.\tGT\t0/1\t0/0\t0/0\n"
        "X\t500\t.\tG\tT\t50\tPASS\t.\tGT\t./.\t0/1\t1/1\n"
    )


@pytest.fixture
def expected_rows() -> list[str]:
    """Output rows expected from vcf_text."""
    return [
        "chr1\t100\tA\tSNP\tA,C\t3,3\tA\t1\tM\t1\tC\t1",
        "chr2\t203\tT\tDEL\tT,-3\t3,3\tE\t1\tD\t1\tT\t1",
        "chr3\t300\tA\tMULTIALLELIC\tA,+CG,G\t2,3,1\tH\t1\tR\t1\tI\t1",
        "chrX\t500\tG\tSNP\tG,T\t1,3\tN\t1\tK\t1\tT\t1",
    ]


@pytest.fixture
def expected_header() -> str:
    """Header row expected from vcf_text."""
    return "Fragment\tPosition\tReference\tType\tAlleles\tAllele_Counts\tS1\tS2\tS3"


@pytest.fixture
def sample_vcf(tmp_path: Path, vcf_text: str) -> Path:
    """Path to the small VCF written to disk."""
    path = tmp_path / "sample.vcf"
    path.write_text(vcf_text)
    return path


@pytest.fixture
def quiet_console() -> Console:
    """Console that writes into memory instead of the terminal."""
    return Console(file=io.StringIO())
