"""Pedigree-based Mendelian compatibility checks.

A plain rules engine over the genotypes of every pedigree member for a single
gene's variants. Rules per sub-mode:

- dominant (autosomal, X): every affected member is het or uncalled and at
  least one is het; no unaffected member carries the ALT allele.
- recessive hom-alt (autosomal, X): every affected member is hom-alt or
  uncalled and at least one is hom-alt; no unaffected member is hom-alt;
  parents of affected members are not hom-ref. On X, affected males only need
  to carry the ALT allele and unaffected males must not carry it.
- recessive comp-het (autosomal, X in female-only affected): two het variants
  in trans, judged by which parent carries each allele; no unaffected member
  carries both.
- mitochondrial: every affected member carries the ALT allele or is uncalled.

Every sub-mode's result also feeds ANY.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from itertools import combinations

from varprio.exceptions import IncompatiblePedigreeError
from varprio.inheritance.genotypes import ChromosomeType, Genotype, GenotypeCalls
from varprio.models.inheritance import ModeOfInheritance, SubModeOfInheritance
from varprio.models.pedigree import Individual, Pedigree

logger = logging.getLogger(__name__)


class MendelianInheritanceChecker:

    def __init__(self, pedigree: Pedigree) -> None:
        self.pedigree = pedigree
        self._affected = pedigree.affected()
        self._unaffected = pedigree.unaffected()

    def check_inheritance(self, calls: list[GenotypeCalls]) -> dict[ModeOfInheritance, list[GenotypeCalls]]:
        by_sub_mode = self.check_inheritance_sub_modes(calls)
        grouped: dict[ModeOfInheritance, list[GenotypeCalls]] = {}
        for sub_mode, compatible in by_sub_mode.items():
            grouped.setdefault(sub_mode.mode, []).extend(compatible)
        return {
            mode: _in_input_order(calls, grouped[mode])
            for mode in ModeOfInheritance
            if mode in grouped
        }

    def check_inheritance_sub_modes(
        self, calls: list[GenotypeCalls]
    ) -> dict[SubModeOfInheritance, list[GenotypeCalls]]:
        self._check_pedigree_members_called(calls)

        autosomal = [c for c in calls if c.chromosome_type == ChromosomeType.AUTOSOMAL]
        x_linked = [c for c in calls if c.chromosome_type == ChromosomeType.X_CHROMOSOMAL]
        mitochondrial = [c for c in calls if c.chromosome_type == ChromosomeType.MITOCHONDRIAL]

        results: dict[SubModeOfInheritance, list[GenotypeCalls]] = {
            SubModeOfInheritance.AUTOSOMAL_DOMINANT: [c for c in autosomal if self._is_dominant(c)],
            SubModeOfInheritance.AUTOSOMAL_RECESSIVE_HOM_ALT: [
                c for c in autosomal if self._is_recessive_hom_alt(c, x_linked=False)
            ],
            SubModeOfInheritance.AUTOSOMAL_RECESSIVE_COMP_HET: self._comp_het_compatible(autosomal),
            SubModeOfInheritance.X_DOMINANT: [c for c in x_linked if self._is_dominant(c, x_linked=True)],
            SubModeOfInheritance.X_RECESSIVE_HOM_ALT: [
                c for c in x_linked if self._is_recessive_hom_alt(c, x_linked=True)
            ],
            SubModeOfInheritance.X_RECESSIVE_COMP_HET: (
                [] if any(ind.is_male() for ind in self._affected) else self._comp_het_compatible(x_linked)
            ),
            SubModeOfInheritance.MITOCHONDRIAL: [c for c in mitochondrial if self._is_mitochondrial(c)],
        }
        compatible_with_any = [c for sub_mode_calls in results.values() for c in sub_mode_calls]
        results[SubModeOfInheritance.ANY] = _in_input_order(calls, compatible_with_any)

        return {sub_mode: results[sub_mode] for sub_mode in SubModeOfInheritance if results.get(sub_mode)}

    def _check_pedigree_members_called(self, calls: Sequence[GenotypeCalls]) -> None:
        # samples outside the pedigree are ignored, e.g. other members of a joint-called batch
        expected = self.pedigree.identifiers
        for call in calls:
            missing = sorted(expected - set(call.sample_to_genotype))
            if missing:
                raise IncompatiblePedigreeError(f"Pedigree members without a genotype: missing={missing}")

    def _is_dominant(self, call: GenotypeCalls, x_linked: bool = False) -> bool:
        def affected_ok(individual: Individual, genotype: Genotype) -> bool:
            # hemizygous males may be called hom-alt on X
            if x_linked and individual.is_male():
                return genotype.carries_alt()
            return genotype.is_het()

        if not self._all_affected(call, affected_ok, with_individual=True):
            return False
        return not any(_gt(call, ind).carries_alt() for ind in self._unaffected)

    def _is_recessive_hom_alt(self, call: GenotypeCalls, x_linked: bool) -> bool:
        def affected_ok(individual: Individual, genotype: Genotype) -> bool:
            if x_linked and individual.is_male():
                return genotype.carries_alt()
            return genotype.is_hom_alt()

        if not self._all_affected(call, affected_ok, with_individual=True):
            return False

        for ind in self._unaffected:
            genotype = _gt(call, ind)
            if genotype.is_hom_alt():
                return False
            if x_linked and ind.is_male() and genotype.carries_alt():
                return False

        for ind in self._affected:
            for parent in self.pedigree.parents_of(ind):
                # sons inherit their X from their mother
                if x_linked and ind.is_male() and parent.is_male():
                    continue
                if _gt(call, parent).is_hom_ref():
                    return False
        return True

    def _is_mitochondrial(self, call: GenotypeCalls) -> bool:
        return self._all_affected(call, Genotype.carries_alt)

    def _comp_het_compatible(self, calls: Sequence[GenotypeCalls]) -> list[GenotypeCalls]:
        candidates = [c for c in calls if self._is_comp_het_candidate(c)]
        compatible: list[GenotypeCalls] = []
        for first, second in combinations(candidates, 2):
            if self._is_trans_pair(first, second):
                for call in (first, second):
                    if not any(call is seen for seen in compatible):
                        compatible.append(call)
        return _in_input_order(calls, compatible)

    def _is_comp_het_candidate(self, call: GenotypeCalls) -> bool:
        if not self._all_affected(call, Genotype.is_het):
            return False
        return not any(_gt(call, ind).is_hom_alt() for ind in self._unaffected)

    def _is_trans_pair(self, first: GenotypeCalls, second: GenotypeCalls) -> bool:
        """True if two het calls can sit on opposite haplotypes in every affected member."""
        for ind in self._unaffected:
            if _gt(first, ind).carries_alt() and _gt(second, ind).carries_alt():
                return False

        for ind in self._affected:
            father = self.pedigree.get(ind.father_id)
            mother = self.pedigree.get(ind.mother_id)
            from_father = (_could_inherit(first, father), _could_inherit(second, father))
            from_mother = (_could_inherit(first, mother), _could_inherit(second, mother))
            paternal_first = from_father[0] and from_mother[1]
            maternal_first = from_mother[0] and from_father[1]
            if not (paternal_first or maternal_first):
                logger.debug("Calls are in cis for %s", ind.id)
                return False
        return True

    def _all_affected(
        self,
        call: GenotypeCalls,
        predicate: Callable[..., bool],
        with_individual: bool = False,
    ) -> bool:
        """Every affected member satisfies ``predicate`` or is uncalled, at least one is called."""
        observed = 0
        for ind in self._affected:
            genotype = _gt(call, ind)
            if genotype.is_not_observed():
                continue
            matches = predicate(ind, genotype) if with_individual else predicate(genotype)
            if not matches:
                return False
            observed += 1
        return observed > 0


def _gt(call: GenotypeCalls, individual: Individual) -> Genotype:
    return call.sample_to_genotype[individual.id]


def _could_inherit(call: GenotypeCalls, parent: Individual | None) -> bool:
    if parent is None:
        return True
    genotype = _gt(call, parent)
    return genotype.is_not_observed() or genotype.carries_alt()


def _in_input_order(calls: Sequence[GenotypeCalls], selected: Sequence[GenotypeCalls]) -> list[GenotypeCalls]:
    selected_ids = {id(c) for c in selected}
    return [c for c in calls if id(c) in selected_ids]
