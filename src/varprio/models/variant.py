"""Genotyped variant models consumed by inheritance checking."""

from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class AlleleCall(enum.StrEnum):
    REF = "ref"
    ALT = "alt"
    OTHER_ALT = "other_alt"
    NO_CALL = "no_call"


class GenotypeCall(BaseModel):
    """Diploid call for one sample. Call order is meaningful only when phased."""
    model_config = ConfigDict(frozen=True)

    sample_id: str
    allele_calls: tuple[AlleleCall, AlleleCall]
    phased: bool = False

    @classmethod
    def of(cls, sample_id: str, first: AlleleCall, second: AlleleCall, phased: bool = False) -> GenotypeCall:
        return cls(sample_id=sample_id, allele_calls=(first, second), phased=phased)

    def is_hom_alt(self) -> bool:
        return all(call == AlleleCall.ALT for call in self.allele_calls)

    def is_hom_ref(self) -> bool:
        return all(call == AlleleCall.REF for call in self.allele_calls)

    def is_het(self) -> bool:
        return AlleleCall.REF in self.allele_calls and AlleleCall.ALT in self.allele_calls

    def carries_alt(self) -> bool:
        return AlleleCall.ALT in self.allele_calls

    def is_no_call(self) -> bool:
        return all(call == AlleleCall.NO_CALL for call in self.allele_calls)


class VariantRecord(BaseModel):
    """A filtered, genotyped variant as seen by inheritance checking.

    ``variant_identity`` is an opaque token pointing back at the caller's own
    variant object. It is what contributing-allele bookkeeping is keyed on, so
    it must be hashable. Records hash on it too, since the genotype map is a
    plain dict.
    """
    model_config = ConfigDict(frozen=True)

    variant_identity: Any
    chromosome: int
    position: int = 0
    ref: str = ""
    alt: str = ""
    gene_symbol: str = "."
    genotypes: dict[str, GenotypeCall] = Field(default_factory=dict)
    frequency_max_percent: float = 0.0
    is_whitelisted: bool = False
    passed_filters: bool = True
    variant_score: float = 0.0

    def genotype_for(self, sample_id: str) -> GenotypeCall | None:
        return self.genotypes.get(sample_id)

    def is_hom_alt_in(self, sample_id: str) -> bool:
        genotype = self.genotypes.get(sample_id)
        return genotype is not None and genotype.is_hom_alt()

    def is_het_in(self, sample_id: str) -> bool:
        genotype = self.genotypes.get(sample_id)
        return genotype is not None and genotype.is_het()

    def __hash__(self) -> int:
        return hash(self.variant_identity)

    def __str__(self) -> str:
        return f"{self.chromosome}-{self.position}-{self.ref}-{self.alt} ({self.variant_identity})"
