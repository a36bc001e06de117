from varprio.inheritance.annotator import InheritanceModeAnnotator, build_genotype_calls
from varprio.inheritance.checker import MendelianInheritanceChecker
from varprio.inheritance.comphet import CompHetPairFinder, TransPairGenerator
from varprio.inheritance.contributing import CompHetPair, ContributingAlleleRegistry, ContributingAlleleSelector
from varprio.inheritance.genotypes import ChromosomeType, Genotype, GenotypeCalls, MendelianChecker

__all__ = [
    "ChromosomeType",
    "CompHetPair",
    "CompHetPairFinder",
    "ContributingAlleleRegistry",
    "ContributingAlleleSelector",
    "Genotype",
    "GenotypeCalls",
    "InheritanceModeAnnotator",
    "MendelianChecker",
    "MendelianInheritanceChecker",
    "TransPairGenerator",
    "build_genotype_calls",
]
