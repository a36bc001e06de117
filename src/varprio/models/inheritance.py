"""Modes of inheritance and their frequency ceilings."""

from __future__ import annotations

import enum
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ModeOfInheritance(enum.StrEnum):
    ANY = "any"
    AUTOSOMAL_DOMINANT = "autosomal_dominant"
    AUTOSOMAL_RECESSIVE = "autosomal_recessive"
    X_DOMINANT = "x_dominant"
    X_RECESSIVE = "x_recessive"
    MITOCHONDRIAL = "mitochondrial"

    def is_recessive(self) -> bool:
        return self in (ModeOfInheritance.AUTOSOMAL_RECESSIVE, ModeOfInheritance.X_RECESSIVE)


class SubModeOfInheritance(enum.StrEnum):
    ANY = "any"
    AUTOSOMAL_DOMINANT = "autosomal_dominant"
    AUTOSOMAL_RECESSIVE_COMP_HET = "autosomal_recessive_comp_het"
    AUTOSOMAL_RECESSIVE_HOM_ALT = "autosomal_recessive_hom_alt"
    X_DOMINANT = "x_dominant"
    X_RECESSIVE_COMP_HET = "x_recessive_comp_het"
    X_RECESSIVE_HOM_ALT = "x_recessive_hom_alt"
    MITOCHONDRIAL = "mitochondrial"

    @property
    def mode(self) -> ModeOfInheritance:
        return _SUB_MODE_PARENT[self]


_SUB_MODE_PARENT: dict[SubModeOfInheritance, ModeOfInheritance] = {
    SubModeOfInheritance.ANY: ModeOfInheritance.ANY,
    SubModeOfInheritance.AUTOSOMAL_DOMINANT: ModeOfInheritance.AUTOSOMAL_DOMINANT,
    SubModeOfInheritance.AUTOSOMAL_RECESSIVE_COMP_HET: ModeOfInheritance.AUTOSOMAL_RECESSIVE,
    SubModeOfInheritance.AUTOSOMAL_RECESSIVE_HOM_ALT: ModeOfInheritance.AUTOSOMAL_RECESSIVE,
    SubModeOfInheritance.X_DOMINANT: ModeOfInheritance.X_DOMINANT,
    SubModeOfInheritance.X_RECESSIVE_COMP_HET: ModeOfInheritance.X_RECESSIVE,
    SubModeOfInheritance.X_RECESSIVE_HOM_ALT: ModeOfInheritance.X_RECESSIVE,
    SubModeOfInheritance.MITOCHONDRIAL: ModeOfInheritance.MITOCHONDRIAL,
}

# Percentages, not fractions
DEFAULT_MAX_FREQ: dict[SubModeOfInheritance, float] = {
    SubModeOfInheritance.AUTOSOMAL_DOMINANT: 0.1,
    SubModeOfInheritance.AUTOSOMAL_RECESSIVE_COMP_HET: 2.0,
    SubModeOfInheritance.AUTOSOMAL_RECESSIVE_HOM_ALT: 0.1,
    SubModeOfInheritance.X_DOMINANT: 0.1,
    SubModeOfInheritance.X_RECESSIVE_COMP_HET: 2.0,
    SubModeOfInheritance.X_RECESSIVE_HOM_ALT: 0.1,
    SubModeOfInheritance.MITOCHONDRIAL: 0.2,
}


class InheritanceModeOptions(BaseModel):
    """Modes of interest and the maximum allele frequency allowed under each.

    Ceilings are set per sub-mode. The ceiling of a mode is the highest of its
    sub-mode ceilings, and ANY takes the highest ceiling overall.
    """
    model_config = ConfigDict(frozen=True)

    max_freqs: dict[SubModeOfInheritance, float] = Field(default_factory=dict)

    @field_validator("max_freqs")
    @classmethod
    def _check_percentages(cls, value: dict[SubModeOfInheritance, float]) -> dict[SubModeOfInheritance, float]:
        for sub_mode, freq in value.items():
            if not 0.0 <= freq <= 100.0:
                raise ValueError(f"Frequency ceiling for {sub_mode} must be within 0-100%, got {freq}")
        return value

    @classmethod
    def defaults(cls) -> InheritanceModeOptions:
        return cls(max_freqs=dict(DEFAULT_MAX_FREQ))

    @classmethod
    def empty(cls) -> InheritanceModeOptions:
        return cls()

    @classmethod
    def of(cls, max_freqs: Mapping[SubModeOfInheritance, float]) -> InheritanceModeOptions:
        return cls(max_freqs=dict(max_freqs))

    @classmethod
    def default_for_modes(cls, *modes: ModeOfInheritance) -> InheritanceModeOptions:
        """Default ceilings restricted to the given modes. ANY selects all the defaults."""
        if ModeOfInheritance.ANY in modes:
            return cls.defaults()
        return cls(max_freqs={
            sub_mode: freq for sub_mode, freq in DEFAULT_MAX_FREQ.items() if sub_mode.mode in modes
        })

    def is_empty(self) -> bool:
        return not self.max_freqs

    @property
    def defined_sub_modes(self) -> set[SubModeOfInheritance]:
        return set(self.max_freqs)

    @property
    def defined_modes(self) -> set[ModeOfInheritance]:
        return {sub_mode.mode for sub_mode in self.defined_sub_modes}

    def max_freq(self) -> float:
        return max(self.max_freqs.values(), default=float("inf"))

    def max_freq_for_sub_mode(self, sub_mode: SubModeOfInheritance) -> float:
        if sub_mode == SubModeOfInheritance.ANY:
            return self.max_freq()
        return self.max_freqs.get(sub_mode, float("inf"))

    def max_freq_for_mode(self, mode: ModeOfInheritance) -> float:
        if mode == ModeOfInheritance.ANY:
            return self.max_freq()
        freqs = [freq for sub_mode, freq in self.max_freqs.items() if sub_mode.mode == mode]
        return max(freqs, default=float("inf"))
