"""End-of-run summary."""

from rich.console import Console

from vcf2snp.models import CallType, Statistics


def print_summary(stats: Statistics, console: Console) -> None:
    """Print summary statistics.

    Args:
        stats: Statistics collected during processing
        console: Console to print on (stderr when output goes to stdout)
    """
    console.print("\n[bold]Conversion summary[/bold]")
    console.print(f" Records read            {stats.records_read:,}")
    console.print(f" Rows written            {stats.rows_written:,}")
    console.print(f" Records skipped         {stats.skipped:,}")
    console.print(f"   Invalid alleles       {stats.invalid_allele:,}")
    console.print(f"   Invalid genotypes     {stats.invalid_genotype:,}")
    console.print(f"   More than diploid     {stats.polyploid:,}")

    console.print("\n Call types")
    for call_type in CallType:
        console.print(f"   {call_type.value:<21} {stats.call_types[call_type.value]:,}")
