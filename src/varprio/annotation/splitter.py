"""Per-gene splitting of transcript annotations.

A change overlapping several genes can be annotated once, against its single
most severe transcript annotation, or split into one allele per gene. Splitting
roughly doubles the number of variants passed downstream and most of the extra
alleles are filtered out again, so it only happens when at least two genes are
hit with an impact of MODERATE or worse (by default).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from pydantic import BaseModel, ConfigDict

from varprio.annotation.regions import ChromosomalRegionIndex, RegulatoryRegionIndex
from varprio.config import config
from varprio.models.allele import AllelePosition, GenomeAssembly, chromosome_to_int
from varprio.models.annotation import (
    AnnotatedAllele,
    PutativeImpact,
    TranscriptAnnotation,
    VariantEffect,
)
from varprio.normalization.normalizer import normalize

logger = logging.getLogger(__name__)

_REGULATORY_CANDIDATE_EFFECTS = frozenset({
    VariantEffect.INTERGENIC_VARIANT,
    VariantEffect.UPSTREAM_GENE_VARIANT,
})


class GenomicChange(BaseModel):
    """A normalised allele on a named contig."""
    model_config = ConfigDict(frozen=True)

    chromosome_name: str
    chromosome: int
    allele: AllelePosition

    @classmethod
    def of(cls, chromosome_name: str, allele: AllelePosition) -> GenomicChange:
        return cls(
            chromosome_name=chromosome_name,
            chromosome=chromosome_to_int(chromosome_name),
            allele=allele,
        )


class TranscriptAnnotationSource(Protocol):
    def annotations_for(self, chromosome_name: str, position: int, ref: str, alt: str) -> list[TranscriptAnnotation]:
        ...


class GeneImpactSplitter:
    """Builds AnnotatedAllele objects from the transcript annotations of one change."""

    def __init__(
        self,
        genome_assembly: GenomeAssembly | None = None,
        regulatory_index: RegulatoryRegionIndex | None = None,
        minimum_impact: PutativeImpact | None = None,
    ) -> None:
        self.genome_assembly = genome_assembly or GenomeAssembly.from_value(config.annotation.genome_assembly)
        self.regulatory_index = (
            regulatory_index if regulatory_index is not None else ChromosomalRegionIndex.empty()
        )
        self.minimum_impact = (
            minimum_impact if minimum_impact is not None
            else config.annotation.split_minimum_impact
        )

    def split(self, change: GenomicChange, annotations: Sequence[TranscriptAnnotation]) -> list[AnnotatedAllele]:
        if self._affects_more_than_one_gene_with_minimum_impact(annotations):
            logger.debug(
                "Multiple gene annotations for %s %s, splitting by gene",
                change.chromosome_name, change.allele,
            )
            return [
                self._build_annotated_allele(change, gene_annotations)
                for gene_annotations in _group_by_gene(annotations).values()
            ]
        return [self._build_annotated_allele(change, annotations)]

    def _affects_more_than_one_gene_with_minimum_impact(self, annotations: Sequence[TranscriptAnnotation]) -> bool:
        # checks are in increasing order of cost, keep it that way
        if len(annotations) <= 1:
            return False
        highest = highest_impact_annotation(annotations)
        if highest is None or not self._is_at_least_minimum_impact(highest.variant_effect):
            return False
        if len({annotation.gene_symbol for annotation in annotations}) <= 1:
            return False
        impactful_genes = {
            annotation.gene_symbol
            for annotation in annotations
            if annotation.variant_effect is not None and self._is_at_least_minimum_impact(annotation.variant_effect)
        }
        return len(impactful_genes) > 1

    def _is_at_least_minimum_impact(self, effect: VariantEffect | None) -> bool:
        return effect is not None and effect.impact <= self.minimum_impact

    def _build_annotated_allele(
        self, change: GenomicChange, annotations: Sequence[TranscriptAnnotation]
    ) -> AnnotatedAllele:
        allele = change.allele
        highest = highest_impact_annotation(annotations)

        if allele.is_symbolic():
            effect = VariantEffect.STRUCTURAL_VARIANT
        elif highest is None or highest.variant_effect is None:
            effect = VariantEffect.SEQUENCE_VARIANT
        else:
            effect = highest.variant_effect

        return AnnotatedAllele(
            genome_assembly=self.genome_assembly,
            chromosome=change.chromosome,
            chromosome_name=change.chromosome_name,
            position=allele.position,
            ref=allele.ref,
            alt=allele.alt,
            gene_id=highest.gene_id if highest is not None and highest.gene_id else "",
            gene_symbol=highest.gene_symbol if highest is not None and highest.gene_symbol else ".",
            variant_effect=self._check_regulatory_region(effect, change.chromosome, allele.position),
            annotations=tuple(annotations),
        )

    def _check_regulatory_region(self, effect: VariantEffect, chromosome: int, position: int) -> VariantEffect:
        # regulatory regions can overlap coding exons, only re-label non-genic effects
        if effect in _REGULATORY_CANDIDATE_EFFECTS and self.regulatory_index.contains(chromosome, position):
            return VariantEffect.REGULATORY_REGION_VARIANT
        return effect


class VariantAnnotator:
    """Normalises a raw allele, annotates the trimmed coordinates and splits by gene.

    Trimming before annotation keeps alleles from multi-allelic sites on the
    same coordinates whichever caller produced them.
    """

    def __init__(self, annotation_source: TranscriptAnnotationSource, splitter: GeneImpactSplitter) -> None:
        self.annotation_source = annotation_source
        self.splitter = splitter

    def annotate(self, chromosome_name: str, position: int, ref: str, alt: str) -> list[AnnotatedAllele]:
        allele = normalize(position, ref, alt)
        annotations = self.annotation_source.annotations_for(
            chromosome_name, allele.position, allele.ref, allele.alt
        )
        return self.splitter.split(GenomicChange.of(chromosome_name, allele), annotations)


def highest_impact_annotation(annotations: Sequence[TranscriptAnnotation]) -> TranscriptAnnotation | None:
    """Most severe annotation, first seen on ties. Annotations without an effect rank last."""
    if not annotations:
        return None
    return min(annotations, key=_severity_key)


def _severity_key(annotation: TranscriptAnnotation) -> int:
    if annotation.variant_effect is None:
        return len(VariantEffect)
    return annotation.variant_effect.severity_rank


def _group_by_gene(annotations: Sequence[TranscriptAnnotation]) -> dict[str, list[TranscriptAnnotation]]:
    groups: dict[str, list[TranscriptAnnotation]] = {}
    for annotation in annotations:
        groups.setdefault(annotation.gene_symbol, []).append(annotation)
    return groups
