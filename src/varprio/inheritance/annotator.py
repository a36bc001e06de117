"""Inheritance-mode compatibility of a gene's variants.

Converts variant records into checker genotype calls, runs the Mendelian
checker once, and maps the compatible calls back to their records, dropping
records over the population-frequency ceiling for each mode unless they are
whitelisted.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import TypeVar

from varprio.config import config
from varprio.exceptions import EmptyPedigreeError, FilterPreconditionError, IncompatiblePedigreeError
from varprio.inheritance.checker import MendelianInheritanceChecker
from varprio.inheritance.genotypes import NO_CALL, REF_CALL, ChromosomeType, Genotype, GenotypeCalls, MendelianChecker
from varprio.models.inheritance import InheritanceModeOptions, ModeOfInheritance, SubModeOfInheritance
from varprio.models.pedigree import Pedigree
from varprio.models.variant import AlleleCall, GenotypeCall, VariantRecord

logger = logging.getLogger(__name__)

_ALLELE_NUMBERS: dict[AlleleCall, int] = {
    AlleleCall.REF: REF_CALL,
    AlleleCall.ALT: 1,
    AlleleCall.OTHER_ALT: 2,
    AlleleCall.NO_CALL: NO_CALL,
}

M = TypeVar("M", ModeOfInheritance, SubModeOfInheritance)


class InheritanceModeAnnotator:
    """Finds the modes of inheritance a gene's variants are compatible with.

    Input variants must already have passed filtering. Unfiltered input makes the
    checker slower and its answers wrong, so it is rejected rather than skipped.
    """

    def __init__(
        self,
        pedigree: Pedigree,
        inheritance_mode_options: InheritanceModeOptions | None = None,
        checker: MendelianChecker | None = None,
    ) -> None:
        if pedigree.is_empty():
            raise EmptyPedigreeError(
                "pedigree cannot be empty - at least one named, affected individual must be present"
            )
        self.pedigree = pedigree
        self.inheritance_mode_options = (
            inheritance_mode_options if inheritance_mode_options is not None
            else config.inheritance.to_options()
        )
        self.checker = checker if checker is not None else MendelianInheritanceChecker(pedigree)

    @property
    def defined_modes(self) -> set[ModeOfInheritance]:
        return self.inheritance_mode_options.defined_modes

    def compute_compatible_inheritance_modes(
        self, variants: Sequence[VariantRecord]
    ) -> dict[ModeOfInheritance, list[VariantRecord]]:
        genotype_calls = build_genotype_calls(variants)
        try:
            compatibility_calls = self.checker.check_inheritance(genotype_calls)
        except IncompatiblePedigreeError:
            logger.exception("Problem checking variants for Mendelian inheritance")
            return {}
        logger.debug("Compatible modes: %s", {m.value: len(c) for m, c in compatibility_calls.items()})
        return self._group_by_compatible_mode(
            compatibility_calls,
            ModeOfInheritance,
            self.inheritance_mode_options.defined_modes,
            self.inheritance_mode_options.max_freq_for_mode,
        )

    def compute_compatible_inheritance_sub_modes(
        self, variants: Sequence[VariantRecord]
    ) -> dict[SubModeOfInheritance, list[VariantRecord]]:
        genotype_calls = build_genotype_calls(variants)
        try:
            compatibility_calls = self.checker.check_inheritance_sub_modes(genotype_calls)
        except IncompatiblePedigreeError:
            logger.exception("Problem checking variants for Mendelian inheritance")
            return {}
        logger.debug("Compatible sub-modes: %s", {m.value: len(c) for m, c in compatibility_calls.items()})
        return self._group_by_compatible_mode(
            compatibility_calls,
            SubModeOfInheritance,
            self.inheritance_mode_options.defined_sub_modes,
            self.inheritance_mode_options.max_freq_for_sub_mode,
        )

    @staticmethod
    def _group_by_compatible_mode(
        compatibility_calls: Mapping[M, list[GenotypeCalls]],
        vocabulary: type[M],
        defined: set[M],
        max_freq_for: Callable[[M], float],
    ) -> dict[M, list[VariantRecord]]:
        results: dict[M, list[VariantRecord]] = {}
        for mode in vocabulary:
            if mode not in compatibility_calls or mode not in defined:
                continue
            compatible = _under_frequency_ceiling(compatibility_calls[mode], max_freq_for(mode))
            if compatible:
                results[mode] = compatible
        return results


def _under_frequency_ceiling(genotype_calls: Sequence[GenotypeCalls], max_freq: float) -> list[VariantRecord]:
    compatible = []
    for calls in genotype_calls:
        variant: VariantRecord = calls.payload
        if variant.frequency_max_percent <= max_freq or variant.is_whitelisted:
            compatible.append(variant)
    return compatible


def build_genotype_calls(variants: Sequence[VariantRecord]) -> list[GenotypeCalls]:
    """Convert variant records to checker calls, carrying each record as the payload."""
    result = []
    for variant in variants:
        if not variant.passed_filters:
            raise FilterPreconditionError(
                f"Variant {variant} has not passed filtering and cannot be checked for inheritance"
            )
        sample_to_genotype = {
            sample_id: _to_genotype(genotype_call) for sample_id, genotype_call in variant.genotypes.items()
        }
        logger.debug("Converted %s %s to %s", variant.ref, variant.alt, sample_to_genotype)
        result.append(GenotypeCalls(
            chromosome_type=ChromosomeType.from_chromosome(variant.chromosome),
            sample_to_genotype=sample_to_genotype,
            payload=variant,
        ))
    return result


def _to_genotype(genotype_call: GenotypeCall) -> Genotype:
    return Genotype(alleles=tuple(_ALLELE_NUMBERS[call] for call in genotype_call.allele_calls))
