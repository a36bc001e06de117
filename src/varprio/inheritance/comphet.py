"""Candidate compound-heterozygous pairs."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from itertools import combinations
from typing import Protocol

from varprio.inheritance.annotator import InheritanceModeAnnotator
from varprio.models.inheritance import SubModeOfInheritance
from varprio.models.variant import AlleleCall, VariantRecord

logger = logging.getLogger(__name__)

_COMP_HET_SUB_MODES = (
    SubModeOfInheritance.AUTOSOMAL_RECESSIVE_COMP_HET,
    SubModeOfInheritance.X_RECESSIVE_COMP_HET,
)


class TransPairGenerator(Protocol):
    def candidate_pairs(self, variants: Sequence[VariantRecord]) -> list[tuple[VariantRecord, VariantRecord]]:
        """Pairs of variants that can lie on opposite haplotypes of the proband."""
        ...


class CompHetPairFinder:
    """Pairs up het variants whose joint genotypes fit a comp-het sub-mode.

    Each pair is checked on its own against the pedigree, so the frequency
    ceilings of the comp-het sub-modes apply too. Pairs phased onto the same
    haplotype in the proband are dropped.
    """

    def __init__(self, proband_id: str, inheritance_mode_annotator: InheritanceModeAnnotator) -> None:
        self.proband_id = proband_id
        self.inheritance_mode_annotator = inheritance_mode_annotator

    def candidate_pairs(self, variants: Sequence[VariantRecord]) -> list[tuple[VariantRecord, VariantRecord]]:
        if len(variants) < 2:
            return []
        hets = [v for v in variants if v.is_het_in(self.proband_id)]
        pairs = []
        for first, second in combinations(hets, 2):
            if self._in_cis(first, second):
                logger.debug("Skipping cis pair %s %s", first, second)
                continue
            if self._is_comp_het_compatible(first, second):
                pairs.append((first, second))
        logger.debug("Found %d comp het pairs in %d variants", len(pairs), len(variants))
        return pairs

    def _is_comp_het_compatible(self, first: VariantRecord, second: VariantRecord) -> bool:
        compatible = self.inheritance_mode_annotator.compute_compatible_inheritance_sub_modes([first, second])
        for sub_mode in _COMP_HET_SUB_MODES:
            if len(compatible.get(sub_mode, [])) == 2:
                return True
        return False

    def _in_cis(self, first: VariantRecord, second: VariantRecord) -> bool:
        gt_first = first.genotype_for(self.proband_id)
        gt_second = second.genotype_for(self.proband_id)
        if gt_first is None or gt_second is None or not (gt_first.phased and gt_second.phased):
            return False
        return gt_first.allele_calls.index(AlleleCall.ALT) == gt_second.allele_calls.index(AlleleCall.ALT)
