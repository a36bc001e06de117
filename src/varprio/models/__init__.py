"""Data models shared by normalisation, annotation and inheritance checking."""

from varprio.models.allele import AllelePosition, GenomeAssembly, chromosome_to_int
from varprio.models.annotation import AnnotatedAllele, PutativeImpact, TranscriptAnnotation, VariantEffect
from varprio.models.inheritance import InheritanceModeOptions, ModeOfInheritance, SubModeOfInheritance
from varprio.models.pedigree import Individual, Pedigree, Sex, Status
from varprio.models.variant import AlleleCall, GenotypeCall, VariantRecord

__all__ = [
    "AlleleCall",
    "AllelePosition",
    "AnnotatedAllele",
    "GenomeAssembly",
    "GenotypeCall",
    "Individual",
    "InheritanceModeOptions",
    "ModeOfInheritance",
    "Pedigree",
    "PutativeImpact",
    "Sex",
    "Status",
    "SubModeOfInheritance",
    "TranscriptAnnotation",
    "VariantEffect",
    "VariantRecord",
    "chromosome_to_int",
]
