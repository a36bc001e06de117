"""Tests for allele minimisation."""

import pytest

from varprio.exceptions import InvalidAlleleError
from varprio.models.allele import AllelePosition
from varprio.normalization.normalizer import normalize


@pytest.mark.parametrize("pos, ref, alt", [
    (1, "A", "T"),
    (1, "A", "AT"),
    (1, "AT", "A"),
    (1, "AT", "GC"),
    (1, "A", "."),
])
def test_untrimmable_alleles_unchanged(pos, ref, alt):
    assert normalize(pos, ref, alt) == AllelePosition.of(pos, ref, alt)


def test_right_trim_first():
    """CAAA>CA only loses one trailing A before the ALT is a single base."""
    assert normalize(1, "CAAA", "CA") == AllelePosition.of(1, "CAA", "C")


def test_right_then_left_trim():
    assert normalize(5, "ATG", "ACG") == AllelePosition.of(6, "T", "C")


def test_repeat_insertion_from_multiallelic_site():
    assert normalize(118887583, "TCAAAA", "TCAAAACAAAA") == AllelePosition.of(118887583, "T", "TCAAAA")


def test_left_trim_keeps_one_base_insertion():
    assert normalize(100, "GAT", "GATC") == AllelePosition.of(102, "T", "TC")


def test_left_trim_keeps_one_base_deletion():
    assert normalize(100, "GATC", "GAT") == AllelePosition.of(102, "TC", "T")


def test_right_trim_stops_at_single_base():
    assert normalize(10, "CTTTA", "CTA") == AllelePosition.of(10, "CTT", "C")


def test_mnv_with_shared_flanks():
    assert normalize(10, "ACGT", "AGGT") == AllelePosition.of(11, "C", "G")


def test_right_trim_on_identical_suffix_runs():
    assert normalize(7, "AAA", "AA") == AllelePosition.of(7, "AA", "A")


@pytest.mark.parametrize("ref, alt", [
    ("", "A"),
    ("A", ""),
    ("", ""),
    (None, "A"),
    ("A", None),
])
def test_empty_or_missing_alleles_rejected(ref, alt):
    with pytest.raises(InvalidAlleleError):
        normalize(1, ref, alt)


@pytest.mark.parametrize("ref, alt", [
    ("A", "<DEL>"),
    ("AT", "<INS:ME:ALU>"),
    ("GTTG", "<DUP>"),
    ("AA", "AA]2:3000]"),
    ("CC", "[13:123457[CC"),
    ("GAT", "GA."),
    ("GAT", ".AT"),
    ("ACGT", "ACG>"),
])
def test_symbolic_alleles_pass_through(ref, alt):
    allele = normalize(1000, ref, alt)
    assert allele.is_symbolic()
    assert (allele.position, allele.ref, allele.alt) == (1000, ref, alt)


MINIMISABLE = [
    (1, "CAAA", "CA"),
    (5, "ATG", "ACG"),
    (118887583, "TCAAAA", "TCAAAACAAAA"),
    (100, "GAT", "GATC"),
    (10, "ACGT", "AGGT"),
    (20, "TTAGCTT", "TTCGCTT"),
    (30, "GGCA", "GGTA"),
    (40, "CACACA", "CACA"),
]


@pytest.mark.parametrize("pos, ref, alt", MINIMISABLE)
def test_normalize_is_idempotent(pos, ref, alt):
    once = normalize(pos, ref, alt)
    assert normalize(once.position, once.ref, once.alt) == once


@pytest.mark.parametrize("pos, ref, alt", MINIMISABLE)
def test_result_is_minimal(pos, ref, alt):
    allele = normalize(pos, ref, alt)
    if len(allele.ref) > 1 and len(allele.alt) > 1:
        assert allele.ref[0] != allele.alt[0]
        assert allele.ref[-1] != allele.alt[-1]
