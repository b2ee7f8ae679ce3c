"""Tests for allele normalization."""

import pytest

from vcf2snp.calls.normalizer import (
    classify_allele,
    insertion_allele,
    normalize_alleles,
)
from vcf2snp.exceptions import InvalidAllele
from vcf2snp.models import AlleleType


class TestClassifyAllele:
    """Tests for length-based allele classification."""

    @pytest.mark.parametrize(
        "ref,alt,expected",
        [
            ("A", "C", AlleleType.SUBSTITUTION),
            ("AC", "GT", AlleleType.SUBSTITUTION),
            ("ACGT", "A", AlleleType.DELETION),
            ("A", "ACG", AlleleType.INSERTION),
        ],
    )
    def test_classify(self, ref: str, alt: str, expected: AlleleType) -> None:
        """Test classification by relative length."""
        assert classify_allele(ref, alt) == expected


class TestSubstitution:
    """Tests for equal-length alleles."""

    def test_single_base(self) -> None:
        """Single-base substitution keeps position and alleles."""
        call = normalize_alleles(100, "A", ["C"])

        assert call.pos == 100
        assert call.ref == "A"
        assert call.alts == ["C"]
        assert call.types == [AlleleType.SUBSTITUTION]

    def test_multi_base_uses_last_bases(self) -> None:
        """Equal-length multi-base alleles reduce to their last bases."""
        call = normalize_alleles(100, "AC", ["GT"])

        assert call.pos == 100
        assert call.ref == "C"
        assert call.alts == ["T"]


class TestDeletion:
    """Tests for deletions."""

    def test_deletion(self) -> None:
        """ACGT>A is a 3bp deletion anchored at its last deleted base."""
        call = normalize_alleles(100, "ACGT", ["A"])

        assert call.pos == 103
        assert call.ref == "T"
        assert call.alts == ["-3"]
        assert call.types == [AlleleType.DELETION]

    def test_last_deletion_sets_position(self) -> None:
        """With several deletions the last alternate determines the position."""
        call = normalize_alleles(100, "ACG", ["A", "AC"])

        assert call.alts == ["-2", "-1"]
        assert call.pos == 101

    def test_deletion_outranks_earlier_insertion(self) -> None:
        """A deletion after an insertion still moves the position."""
        call = normalize_alleles(100, "AC", ["ACT", "A"])

        assert call.types == [AlleleType.INSERTION, AlleleType.DELETION]
        assert call.pos == 101

    def test_deletion_outranks_later_insertion(self) -> None:
        """An insertion after a deletion does not reset the position."""
        call = normalize_alleles(100, "AC", ["A", "ACT"])

        assert call.alts == ["-1", "+T"]
        assert call.pos == 101


class TestInsertion:
    """Tests for insertions."""

    def test_insertion(self) -> None:
        """A>ACG inserts CG, reference base excluded."""
        call = normalize_alleles(100, "A", ["ACG"])

        assert call.pos == 100
        assert call.ref == "A"
        assert call.alts == ["+CG"]
        assert call.types == [AlleleType.INSERTION]

    def test_empty_insertion_rejected(self) -> None:
        """An insertion without inserted bases cannot be represented."""
        with pytest.raises(InvalidAllele):
            insertion_allele("AC", "AC")


class TestValidation:
    """Tests for allele validation."""

    @pytest.mark.parametrize("ref", ["N", "acgt", "A-", "<DEL>", ""])
    def test_invalid_reference(self, ref: str) -> None:
        """References outside uppercase ACGT are rejected."""
        with pytest.raises(InvalidAllele) as exc_info:
            normalize_alleles(100, ref, ["A"])
        assert exc_info.value.allele == ref

    @pytest.mark.parametrize("alt", ["N", "c", "*", "<INS>"])
    def test_invalid_alternate(self, alt: str) -> None:
        """Alternates outside uppercase ACGT are rejected."""
        with pytest.raises(InvalidAllele) as exc_info:
            normalize_alleles(100, "A", ["C", alt])
        assert exc_info.value.allele == alt


class TestMultipleAlternates:
    """Tests for records with several alternates."""

    def test_order_preserved(self) -> None:
        """Alternates and types stay parallel to the input order."""
        call = normalize_alleles(100, "A", ["ACG", "G", "T"])

        assert call.alts == ["+CG", "G", "T"]
        assert call.types == [
            AlleleType.INSERTION,
            AlleleType.SUBSTITUTION,
            AlleleType.SUBSTITUTION,
        ]
        assert call.pos == 100

    def test_no_alternates(self) -> None:
        """A record without alternates keeps its position."""
        call = normalize_alleles(100, "AG", [])

        assert call.pos == 100
        assert call.ref == "G"
        assert call.alts == []
