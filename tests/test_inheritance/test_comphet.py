"""Tests for compound-het candidate pairing."""

import pytest

from varprio.inheritance.annotator import InheritanceModeAnnotator
from varprio.inheritance.comphet import CompHetPairFinder
from varprio.models.inheritance import InheritanceModeOptions
from varprio.models.variant import AlleleCall, GenotypeCall, VariantRecord

REF, ALT = AlleleCall.REF, AlleleCall.ALT


def _make_variant(identity: str, freq: float = 0.0, **calls) -> VariantRecord:
    genotypes = {}
    for sample, (first, second, phased) in calls.items():
        genotypes[sample] = GenotypeCall.of(sample, first, second, phased=phased)
    return VariantRecord(variant_identity=identity, chromosome=1, genotypes=genotypes, frequency_max_percent=freq)


def _pair_ids(pairs):
    return [(first.variant_identity, second.variant_identity) for first, second in pairs]


def _finder(pedigree):
    annotator = InheritanceModeAnnotator(pedigree, InheritanceModeOptions.defaults())
    return CompHetPairFinder("proband", annotator)


def test_pairs_all_het_variants(singleton_pedigree):
    variants = [
        _make_variant("v1", proband=(REF, ALT, False)),
        _make_variant("hom", proband=(ALT, ALT, False)),
        _make_variant("v2", proband=(REF, ALT, False)),
        _make_variant("v3", proband=(ALT, REF, False)),
    ]
    pairs = _finder(singleton_pedigree).candidate_pairs(variants)
    assert _pair_ids(pairs) == [("v1", "v2"), ("v1", "v3"), ("v2", "v3")]


@pytest.mark.parametrize("count", [0, 1])
def test_too_few_variants(singleton_pedigree, count):
    variants = [_make_variant(f"v{i}", proband=(REF, ALT, False)) for i in range(count)]
    assert _finder(singleton_pedigree).candidate_pairs(variants) == []


def test_phased_cis_pair_is_skipped(singleton_pedigree):
    variants = [
        _make_variant("v1", proband=(ALT, REF, True)),
        _make_variant("v2", proband=(ALT, REF, True)),
        _make_variant("v3", proband=(REF, ALT, True)),
    ]
    pairs = _finder(singleton_pedigree).candidate_pairs(variants)
    assert _pair_ids(pairs) == [("v1", "v3"), ("v2", "v3")]


def test_unphased_calls_are_paired(singleton_pedigree):
    variants = [
        _make_variant("v1", proband=(ALT, REF, True)),
        _make_variant("v2", proband=(ALT, REF, False)),
    ]
    assert _pair_ids(_finder(singleton_pedigree).candidate_pairs(variants)) == [("v1", "v2")]


def test_pair_over_comp_het_ceiling(singleton_pedigree):
    variants = [
        _make_variant("common", freq=3.0, proband=(REF, ALT, False)),
        _make_variant("v1", freq=1.5, proband=(REF, ALT, False)),
        _make_variant("v2", proband=(REF, ALT, False)),
    ]
    assert _pair_ids(_finder(singleton_pedigree).candidate_pairs(variants)) == [("v1", "v2")]


def test_trio_pairs_need_one_allele_from_each_parent(trio_pedigree):
    variants = [
        _make_variant("pat1", proband=(REF, ALT, False), father=(REF, ALT, False), mother=(REF, REF, False)),
        _make_variant("pat2", proband=(REF, ALT, False), father=(REF, ALT, False), mother=(REF, REF, False)),
        _make_variant("mat", proband=(REF, ALT, False), father=(REF, REF, False), mother=(REF, ALT, False)),
    ]
    pairs = _finder(trio_pedigree).candidate_pairs(variants)
    assert _pair_ids(pairs) == [("pat1", "mat"), ("pat2", "mat")]
