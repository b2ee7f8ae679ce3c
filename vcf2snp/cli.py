"""Typer CLI for the VCF to SNP transcoder.

Usage:
    # Read a VCF file, write to stdout
    vcf2snp -i calls.vcf.gz

    # Read stdin, append to a file
    zcat calls.vcf.gz | vcf2snp -o calls.snp

    # Profile the run
    vcf2snp -i calls.vcf -o calls.snp --cpu-profile vcf2snp.prof
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from vcf2snp import __version__

app = typer.Typer(
    name="vcf2snp",
    help="Convert VCF variant records into the SNP tab-separated format",
    add_completion=False,
)

# stdout may carry the converted output
console = Console(stderr=True)


@app.command()
def convert(
    in_path: Annotated[
        Path | None,
        typer.Option(
            "--in-path", "-i",
            help="Input VCF file, plain or gzipped (default: stdin)",
            dir_okay=False,
        ),
    ] = None,
    out_path: Annotated[
        Path | None,
        typer.Option(
            "--out-path", "-o",
            help="Output file, opened in append mode (default: stdout)",
            dir_okay=False,
        ),
    ] = None,
    cpu_profile: Annotated[
        Path | None,
        typer.Option(
            "--cpu-profile",
            help="Write cProfile statistics to this file",
            dir_okay=False,
        ),
    ] = None,
    report_file: Annotated[
        Path | None,
        typer.Option(
            "--report-file",
            help="Write a JSON run report to this file",
            dir_okay=False,
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Also write detailed log messages to this file",
            dir_okay=False,
        ),
    ] = None,
    lenient_ploidy: Annotated[
        bool,
        typer.Option(
            "--lenient-ploidy",
            help="Skip records with more-than-diploid samples instead of aborting",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose", "-v",
            help="Enable verbose logging",
        ),
    ] = False,
) -> None:
    """Convert a VCF into the SNP format.

    Each output row carries the right-anchored position, the reference base,
    the call type (SNP, INS, DEL or MULTIALLELIC), the alleles observed across
    all samples with their counts, and one genotype token per sample.

    Records with invalid alleles or genotypes are skipped and logged. A
    sample with more than two alleles aborts the run unless --lenient-ploidy
    is given.
    """
    from vcf2snp.config import Config
    from vcf2snp.logging_config import setup_logging
    from vcf2snp.main import run_conversion

    config = Config(
        input_path=in_path,
        output_path=out_path,
        cpu_profile=cpu_profile,
        strict_ploidy=not lenient_ploidy,
        verbose=verbose,
        report_file=report_file,
        log_file=log_file,
    )

    errors = config.validate()
    if errors:
        for error in errors:
            console.print(f"[red]ERROR:[/red] {error}")
        raise typer.Exit(code=1)

    setup_logging(verbose=config.verbose, log_file=config.log_file)

    if config.verbose:
        console.print(f"[bold]vcf2snp[/bold] v{__version__}", style="blue")
        console.print(f"Input:          {config.input_name}")
        console.print(f"Output:         {config.output_name}")
        console.print(f"Strict ploidy:  {config.strict_ploidy}")
        if config.cpu_profile:
            console.print(f"CPU profile:    {config.cpu_profile}")
        if config.report_file:
            console.print(f"Report file:    {config.report_file}")
        console.print("")

    try:
        run_conversion(config, console=console)
    except Exception as e:
        console.print(f"[red]ERROR:[/red] {e}")
        if verbose:
            import traceback
            console.print(traceback.format_exc())
        raise typer.Exit(code=1)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
