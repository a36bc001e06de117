"""Tests for allele, assembly and pedigree models."""

import pytest
from pydantic import ValidationError

from varprio.exceptions import InvalidAlleleError, InvalidGenomeAssemblyError
from varprio.models.allele import AllelePosition, GenomeAssembly, chromosome_to_int
from varprio.models.annotation import PutativeImpact, VariantEffect
from varprio.models.pedigree import Individual, Pedigree, Sex, Status


@pytest.mark.parametrize("value, expected", [
    ("hg19", GenomeAssembly.HG19),
    ("hg37", GenomeAssembly.HG19),
    ("GRCh37", GenomeAssembly.HG19),
    ("HG38", GenomeAssembly.HG38),
    ("grch38", GenomeAssembly.HG38),
])
def test_genome_assembly_from_value(value, expected):
    assert GenomeAssembly.from_value(value) == expected


def test_genome_assembly_invalid():
    with pytest.raises(InvalidGenomeAssemblyError, match="hg18"):
        GenomeAssembly.from_value("hg18")


def test_default_build_is_hg19():
    assert GenomeAssembly.default_build() == GenomeAssembly.HG19


@pytest.mark.parametrize("name, expected", [
    ("1", 1),
    ("chr22", 22),
    ("X", 23),
    ("chrY", 24),
    ("MT", 25),
    ("chrM", 25),
    ("GL000192.1", 0),
    ("23", 0),
])
def test_chromosome_to_int(name, expected):
    assert chromosome_to_int(name) == expected


def test_allele_position_is_immutable():
    allele = AllelePosition.of(1, "A", "T")
    with pytest.raises(ValidationError):
        allele.position = 2


def test_allele_position_of_rejects_none():
    with pytest.raises(InvalidAlleleError):
        AllelePosition.of(1, None, "T")


def test_allele_position_types():
    assert AllelePosition.of(1, "A", "T").is_snv()
    assert AllelePosition.of(1, "A", "AT").is_insertion()
    assert AllelePosition.of(1, "AT", "A").is_deletion()
    assert not AllelePosition.of(1, "A", "<DEL>").is_snv()


def test_single_base_is_never_symbolic():
    assert not AllelePosition.of(1, "A", ".").is_symbolic()
    assert not AllelePosition.of(1, "A", "<").is_symbolic()


def test_symbolic_ref_detected():
    assert AllelePosition.of(1, "<DEL>", "A").is_symbolic()


def test_effect_impacts():
    assert VariantEffect.STOP_GAINED.impact == PutativeImpact.HIGH
    assert VariantEffect.MISSENSE_VARIANT.impact == PutativeImpact.MODERATE
    assert VariantEffect.SYNONYMOUS_VARIANT.impact == PutativeImpact.LOW
    assert VariantEffect.INTERGENIC_VARIANT.impact == PutativeImpact.MODIFIER
    assert VariantEffect.STRUCTURAL_VARIANT.impact == PutativeImpact.HIGH


def test_effect_severity_follows_declaration_order():
    assert VariantEffect.STOP_GAINED.severity_rank < VariantEffect.MISSENSE_VARIANT.severity_rank
    assert VariantEffect.MISSENSE_VARIANT.severity_rank < VariantEffect.INTERGENIC_VARIANT.severity_rank


class TestPedigree:
    def test_empty_pedigree(self):
        assert Pedigree.empty().is_empty()

    def test_unaffected_only_is_empty(self):
        pedigree = Pedigree(individuals=(Individual(id="s1", status=Status.UNAFFECTED),))
        assert pedigree.is_empty()

    def test_unnamed_affected_is_empty(self):
        pedigree = Pedigree(individuals=(Individual(id="", status=Status.AFFECTED),))
        assert pedigree.is_empty()

    def test_just_proband(self):
        pedigree = Pedigree.just_proband("s1", Sex.MALE)
        assert not pedigree.is_empty()
        assert pedigree.identifiers == {"s1"}
        assert pedigree.get("s1").is_male()
        assert pedigree.get("s2") is None

    def test_parents_of(self, trio_pedigree):
        child = trio_pedigree.get("proband")
        assert {p.id for p in trio_pedigree.parents_of(child)} == {"father", "mother"}
        assert [i.id for i in trio_pedigree.affected()] == ["proband"]
        assert {i.id for i in trio_pedigree.unaffected()} == {"father", "mother"}
