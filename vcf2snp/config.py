"""Configuration dataclass for the VCF to SNP transcoder."""

from dataclasses import dataclass
from pathlib import Path

from vcf2snp.io_utils import is_stdio


@dataclass
class Config:
    """Configuration for a conversion run.

    Attributes:
        input_path: VCF file (plain or gzip), None or "-" for stdin
        output_path: Output file opened in append mode, None or "-" for stdout
        cpu_profile: Write cProfile stats to this path
        strict_ploidy: Abort the run on a sample with more than two alleles;
            when False such records are skipped
        verbose: Enable verbose logging
        report_file: Write a JSON run report to this path
        log_file: Also write log messages to this file
    """

    input_path: Path | None = None
    output_path: Path | None = None
    cpu_profile: Path | None = None

    # Behavior flags
    strict_ploidy: bool = True
    verbose: bool = False

    # Report options
    report_file: Path | None = None
    log_file: Path | None = None

    def __post_init__(self) -> None:
        """Ensure paths are Path objects."""
        for name in ("input_path", "output_path", "cpu_profile", "report_file", "log_file"):
            value = getattr(self, name)
            if isinstance(value, str):
                setattr(self, name, Path(value))

    @property
    def input_name(self) -> str:
        """Display name of the input stream."""
        return "<stdin>" if is_stdio(self.input_path) else str(self.input_path)

    @property
    def output_name(self) -> str:
        """Display name of the output stream."""
        return "<stdout>" if is_stdio(self.output_path) else str(self.output_path)

    def validate(self) -> list[str]:
        """Validate configuration and return list of errors.

        Returns:
            List of error messages (empty if valid)
        """
        errors: list[str] = []

        if not is_stdio(self.input_path):
            assert self.input_path is not None
            if not self.input_path.exists():
                errors.append(f"Input file not found: {self.input_path}")
            elif self.input_path.is_dir():
                errors.append(f"Input path is a directory: {self.input_path}")

        outputs = {
            "Output": None if is_stdio(self.output_path) else self.output_path,
            "CPU profile": self.cpu_profile,
            "Report": self.report_file,
            "Log": self.log_file,
        }
        for label, path in outputs.items():
            if path is None:
                continue
            if path.is_dir():
                errors.append(f"{label} path is a directory: {path}")
            elif not path.parent.exists():
                errors.append(f"{label} directory does not exist: {path.parent}")

        return errors
