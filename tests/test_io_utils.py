"""Tests for io_utils module (gzip, stdin and stdout support)."""

import gzip
import io
from pathlib import Path

import pytest

from vcf2snp.exceptions import ConfigurationError
from vcf2snp.io_utils import is_gzipped, is_stdio, open_input, open_output


class TestIsGzipped:
    """Tests for gzip detection."""

    def test_detects_gzip_magic(self, tmp_path: Path) -> None:
        """Gzip content is detected regardless of extension."""
        path = tmp_path / "calls.vcf"
        with gzip.open(path, "wt") as f:
            f.write("##fileformat=VCFv4.2\n")

        assert is_gzipped(path) is True

    def test_plain_file(self, tmp_path: Path) -> None:
        """Plain text is not gzipped even with a .gz name."""
        path = tmp_path / "calls.vcf.gz"
        path.write_text("##fileformat=VCFv4.2\n")

        assert is_gzipped(path) is False

    def test_missing_file_falls_back_to_extension(self, tmp_path: Path) -> None:
        """Unreadable files are judged by extension."""
        assert is_gzipped(tmp_path / "missing.vcf.gz") is True
        assert is_gzipped(tmp_path / "missing.vcf") is False


class TestIsStdio:
    """Tests for is_stdio."""

    def test_none_and_dash(self) -> None:
        """None and "-" mean the standard streams."""
        assert is_stdio(None)
        assert is_stdio(Path("-"))
        assert not is_stdio(Path("calls.vcf"))


class TestOpenInput:
    """Tests for open_input."""

    def test_plain(self, tmp_path: Path) -> None:
        """Plain files are read as text."""
        path = tmp_path / "calls.vcf"
        path.write_text("line1\nline2\n")

        with open_input(path) as f:
            assert f.read() == "line1\nline2\n"

    def test_gzip(self, tmp_path: Path) -> None:
        """Gzipped files are decompressed transparently."""
        path = tmp_path / "calls.vcf.gz"
        with gzip.open(path, "wt") as f:
            f.write("line1\nline2\n")

        with open_input(path) as f:
            assert f.read() == "line1\nline2\n"

    def test_stdin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """No path reads from stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO("from stdin\n"))

        with open_input(None) as f:
            assert f.read() == "from stdin\n"

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing input is a configuration error."""
        with pytest.raises(ConfigurationError, match="Cannot open input file"):
            with open_input(tmp_path / "missing.vcf"):
                pass


class TestOpenOutput:
    """Tests for open_output."""

    def test_appends(self, tmp_path: Path) -> None:
        """Existing content is kept."""
        path = tmp_path / "out.snp"
        path.write_text("existing\n")

        with open_output(path) as f:
            f.write("new\n")

        assert path.read_text() == "existing\nnew\n"

    def test_creates_file(self, tmp_path: Path) -> None:
        """A missing output file is created."""
        path = tmp_path / "out.snp"

        with open_output(path) as f:
            f.write("row\n")

        assert path.read_text() == "row\n"

    def test_stdout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """No path writes to stdout, which stays open."""
        buffer = io.StringIO()
        monkeypatch.setattr("sys.stdout", buffer)

        with open_output(None) as f:
            f.write("row\n")

        assert buffer.getvalue() == "row\n"
        assert not buffer.closed

    def test_missing_directory(self, tmp_path: Path) -> None:
        """An unwritable output path is a configuration error."""
        with pytest.raises(ConfigurationError, match="Cannot open output file"):
            with open_output(tmp_path / "missing" / "out.snp"):
                pass
