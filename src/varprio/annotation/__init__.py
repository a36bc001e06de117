from varprio.annotation.regions import ChromosomalRegion, ChromosomalRegionIndex, RegulatoryRegionIndex
from varprio.annotation.splitter import GeneImpactSplitter, GenomicChange, VariantAnnotator

__all__ = [
    "ChromosomalRegion",
    "ChromosomalRegionIndex",
    "GeneImpactSplitter",
    "GenomicChange",
    "RegulatoryRegionIndex",
    "VariantAnnotator",
]
