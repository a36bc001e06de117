"""Selection of the alleles that set a gene's score under each mode of inheritance.

For recessive modes the best compound-het pair (scored as the mean of its two
alleles) competes with the best homozygous-ALT allele. The pair wins whenever
its score equals the overall best, including an exact tie with the hom-alt
allele. Changing that tie-break changes clinical rankings.

Every other mode takes the single highest-scoring allele, first seen on ties.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Hashable, Sequence
from dataclasses import dataclass, field

from varprio.inheritance.comphet import TransPairGenerator
from varprio.models.inheritance import ModeOfInheritance
from varprio.models.variant import VariantRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompHetPair:
    """Two alleles jointly compatible with compound-het inheritance."""
    allele_one: VariantRecord | None
    allele_two: VariantRecord | None
    score: float = field(init=False)

    def __post_init__(self) -> None:
        one = self.allele_one.variant_score if self.allele_one is not None else 0.0
        two = self.allele_two.variant_score if self.allele_two is not None else 0.0
        object.__setattr__(self, "score", (one + two) / 2.0)

    @property
    def alleles(self) -> list[VariantRecord]:
        return [allele for allele in (self.allele_one, self.allele_two) if allele is not None]


class ContributingAlleleRegistry:
    """Which variants contribute to their gene's score, per mode.

    Owned by the caller and keyed on ``VariantRecord.variant_identity``, so the
    variant objects themselves are never mutated. Marking is idempotent.
    """

    def __init__(self) -> None:
        self._by_mode: dict[ModeOfInheritance, set[Hashable]] = defaultdict(set)

    def mark(self, mode: ModeOfInheritance, variants: Sequence[VariantRecord]) -> None:
        for variant in variants:
            self._by_mode[mode].add(variant.variant_identity)

    def contributes(self, variant: VariantRecord, mode: ModeOfInheritance) -> bool:
        return variant.variant_identity in self._by_mode.get(mode, set())

    def modes_for(self, variant: VariantRecord) -> set[ModeOfInheritance]:
        return {mode for mode, identities in self._by_mode.items() if variant.variant_identity in identities}

    def contributing(self, mode: ModeOfInheritance) -> set[Hashable]:
        return set(self._by_mode.get(mode, set()))

    def clear(self) -> None:
        self._by_mode.clear()


class ContributingAlleleSelector:

    def __init__(
        self,
        proband_id: str,
        pair_generator: TransPairGenerator,
        registry: ContributingAlleleRegistry | None = None,
    ) -> None:
        self.proband_id = proband_id
        self.pair_generator = pair_generator
        self.registry = registry if registry is not None else ContributingAlleleRegistry()

    def select(self, mode: ModeOfInheritance, compatible_variants: Sequence[VariantRecord]) -> list[VariantRecord]:
        """Return the 0, 1 or 2 alleles contributing to the gene score under ``mode``.

        ``compatible_variants`` must already be restricted to passing variants
        compatible with ``mode``, in a stable order: on score ties the first one
        wins.
        """
        if not compatible_variants:
            return []
        if mode.is_recessive():
            return self._select_recessive(mode, compatible_variants)
        return self._select_best(mode, compatible_variants)

    def _select_recessive(self, mode: ModeOfInheritance, variants: Sequence[VariantRecord]) -> list[VariantRecord]:
        best_comp_het = self._best_comp_het_pair(variants)

        hom_alts = [v for v in variants if v.is_hom_alt_in(self.proband_id)]
        best_hom_alt = max(hom_alts, key=_score) if hom_alts else None

        best_comp_het_score = best_comp_het.score if best_comp_het is not None else 0.0
        best_hom_alt_score = best_hom_alt.variant_score if best_hom_alt is not None else 0.0
        best_score = max(best_hom_alt_score, best_comp_het_score)

        if best_comp_het is not None and best_score == best_comp_het_score:
            logger.debug("Top scoring comp het: %s", best_comp_het)
            alleles = best_comp_het.alleles
            self.registry.mark(mode, alleles)
            return alleles
        if best_hom_alt is not None:
            logger.debug("Top scoring hom alt: %s", best_hom_alt)
            self.registry.mark(mode, [best_hom_alt])
            return [best_hom_alt]
        return []

    def _best_comp_het_pair(self, variants: Sequence[VariantRecord]) -> CompHetPair | None:
        pairs = [CompHetPair(first, second) for first, second in self.pair_generator.candidate_pairs(variants)]
        if not pairs:
            return None
        return max(pairs, key=lambda pair: pair.score)

    def _select_best(self, mode: ModeOfInheritance, variants: Sequence[VariantRecord]) -> list[VariantRecord]:
        best = max(variants, key=_score)
        self.registry.mark(mode, [best])
        return [best]


def _score(variant: VariantRecord) -> float:
    return variant.variant_score
