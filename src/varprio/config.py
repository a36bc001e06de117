"""varprio configuration, built from environment variables at import."""

import os

from pydantic import BaseModel, field_validator

from varprio.models.annotation import PutativeImpact
from varprio.models.inheritance import InheritanceModeOptions, SubModeOfInheritance


class InheritanceConfig(BaseModel):
    # maximum population allele frequency (percent) per inheritance sub-mode
    max_freq_autosomal_dominant: float = 0.1
    max_freq_autosomal_recessive_comp_het: float = 2.0
    max_freq_autosomal_recessive_hom_alt: float = 0.1
    max_freq_x_dominant: float = 0.1
    max_freq_x_recessive_comp_het: float = 2.0
    max_freq_x_recessive_hom_alt: float = 0.1
    max_freq_mitochondrial: float = 0.2

    def to_options(self) -> InheritanceModeOptions:
        return InheritanceModeOptions.of({
            SubModeOfInheritance.AUTOSOMAL_DOMINANT: self.max_freq_autosomal_dominant,
            SubModeOfInheritance.AUTOSOMAL_RECESSIVE_COMP_HET: self.max_freq_autosomal_recessive_comp_het,
            SubModeOfInheritance.AUTOSOMAL_RECESSIVE_HOM_ALT: self.max_freq_autosomal_recessive_hom_alt,
            SubModeOfInheritance.X_DOMINANT: self.max_freq_x_dominant,
            SubModeOfInheritance.X_RECESSIVE_COMP_HET: self.max_freq_x_recessive_comp_het,
            SubModeOfInheritance.X_RECESSIVE_HOM_ALT: self.max_freq_x_recessive_hom_alt,
            SubModeOfInheritance.MITOCHONDRIAL: self.max_freq_mitochondrial,
        })


class AnnotationConfig(BaseModel):
    genome_assembly: str = "hg19"
    # only split multi-gene changes hitting 2+ genes at this impact or worse
    split_minimum_impact: PutativeImpact = PutativeImpact.MODERATE

    @field_validator("split_minimum_impact", mode="before")
    @classmethod
    def _impact_by_name(cls, value: object) -> object:
        if isinstance(value, str):
            try:
                return PutativeImpact[value.strip().upper()]
            except KeyError:
                valid = ", ".join(impact.name for impact in PutativeImpact)
                raise ValueError(
                    f"split_minimum_impact (VARPRIO_SPLIT_MIN_IMPACT) must be one of {valid}, got {value!r}"
                ) from None
        return value


class AppConfig(BaseModel):
    inheritance: InheritanceConfig = InheritanceConfig()
    annotation: AnnotationConfig = AnnotationConfig()
    debug: bool = False


def _env_float(name: str, default: float) -> float:
    return float(os.environ.get(name, str(default)))


def _build_config() -> AppConfig:
    """Build config from environment variables."""
    return AppConfig(
        inheritance=InheritanceConfig(
            max_freq_autosomal_dominant=_env_float("VARPRIO_MAX_FREQ_AD", 0.1),
            max_freq_autosomal_recessive_comp_het=_env_float("VARPRIO_MAX_FREQ_AR_COMP_HET", 2.0),
            max_freq_autosomal_recessive_hom_alt=_env_float("VARPRIO_MAX_FREQ_AR_HOM_ALT", 0.1),
            max_freq_x_dominant=_env_float("VARPRIO_MAX_FREQ_XD", 0.1),
            max_freq_x_recessive_comp_het=_env_float("VARPRIO_MAX_FREQ_XR_COMP_HET", 2.0),
            max_freq_x_recessive_hom_alt=_env_float("VARPRIO_MAX_FREQ_XR_HOM_ALT", 0.1),
            max_freq_mitochondrial=_env_float("VARPRIO_MAX_FREQ_MT", 0.2),
        ),
        annotation=AnnotationConfig(
            genome_assembly=os.environ.get("VARPRIO_GENOME_ASSEMBLY", "hg19"),
            split_minimum_impact=os.environ.get("VARPRIO_SPLIT_MIN_IMPACT", "MODERATE"),
        ),
        debug=os.environ.get("VARPRIO_DEBUG", "").lower() in ("1", "true", "yes"),
    )


config = _build_config()
