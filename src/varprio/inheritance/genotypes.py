"""Genotype-call representation exchanged with Mendelian compatibility checkers."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Protocol

from varprio.models.allele import MITOCHONDRIAL_CHROMOSOME, X_CHROMOSOME, Y_CHROMOSOME
from varprio.models.inheritance import ModeOfInheritance, SubModeOfInheritance


class ChromosomeType(enum.StrEnum):
    AUTOSOMAL = "autosomal"
    X_CHROMOSOMAL = "x_chromosomal"
    Y_CHROMOSOMAL = "y_chromosomal"
    MITOCHONDRIAL = "mitochondrial"

    @classmethod
    def from_chromosome(cls, chromosome: int) -> ChromosomeType:
        if chromosome == X_CHROMOSOME:
            return cls.X_CHROMOSOMAL
        if chromosome == Y_CHROMOSOME:
            return cls.Y_CHROMOSOMAL
        if chromosome == MITOCHONDRIAL_CHROMOSOME:
            return cls.MITOCHONDRIAL
        return cls.AUTOSOMAL


REF_CALL = 0
NO_CALL = -1


@dataclass(frozen=True)
class Genotype:
    """Allele numbers for one sample: 0 is REF, 1.. are ALT alleles, -1 is no call."""
    alleles: tuple[int, ...]

    def is_hom_ref(self) -> bool:
        return bool(self.alleles) and all(a == REF_CALL for a in self.alleles)

    def is_hom_alt(self) -> bool:
        return bool(self.alleles) and all(a == 1 for a in self.alleles)

    def is_het(self) -> bool:
        return REF_CALL in self.alleles and 1 in self.alleles

    def carries_alt(self) -> bool:
        return 1 in self.alleles

    def is_not_observed(self) -> bool:
        return all(a == NO_CALL for a in self.alleles)


@dataclass
class GenotypeCalls:
    """All sample genotypes for one variant. ``payload`` is carried through untouched."""
    chromosome_type: ChromosomeType
    sample_to_genotype: dict[str, Genotype] = field(default_factory=dict)
    payload: Any = None

    def genotype_for(self, sample_id: str) -> Genotype | None:
        return self.sample_to_genotype.get(sample_id)


class MendelianChecker(Protocol):
    def check_inheritance(self, calls: list[GenotypeCalls]) -> dict[ModeOfInheritance, list[GenotypeCalls]]:
        """Group calls by the modes they are compatible with.

        Raises:
            IncompatiblePedigreeError: if the calls cannot be checked against the pedigree.
        """
        ...

    def check_inheritance_sub_modes(
        self, calls: list[GenotypeCalls]
    ) -> dict[SubModeOfInheritance, list[GenotypeCalls]]:
        ...
