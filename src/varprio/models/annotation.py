"""Gene and transcript annotation models."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field

from varprio.models.allele import GenomeAssembly


class PutativeImpact(enum.IntEnum):
    """Impact rank of a variant effect. Lower is more severe."""
    HIGH = 0
    MODERATE = 1
    LOW = 2
    MODIFIER = 3


class VariantEffect(enum.StrEnum):
    """Sequence Ontology effect terms, declared from most to least severe."""
    STRUCTURAL_VARIANT = "structural_variant"
    TRANSCRIPT_ABLATION = "transcript_ablation"
    SPLICE_ACCEPTOR_VARIANT = "splice_acceptor_variant"
    SPLICE_DONOR_VARIANT = "splice_donor_variant"
    STOP_GAINED = "stop_gained"
    FRAMESHIFT_VARIANT = "frameshift_variant"
    STOP_LOST = "stop_lost"
    START_LOST = "start_lost"
    EXON_LOSS_VARIANT = "exon_loss_variant"
    DISRUPTIVE_INFRAME_DELETION = "disruptive_inframe_deletion"
    DISRUPTIVE_INFRAME_INSERTION = "disruptive_inframe_insertion"
    INFRAME_DELETION = "inframe_deletion"
    INFRAME_INSERTION = "inframe_insertion"
    MISSENSE_VARIANT = "missense_variant"
    SPLICE_REGION_VARIANT = "splice_region_variant"
    STOP_RETAINED_VARIANT = "stop_retained_variant"
    INITIATOR_CODON_VARIANT = "initiator_codon_variant"
    SYNONYMOUS_VARIANT = "synonymous_variant"
    FIVE_PRIME_UTR_EXON_VARIANT = "5_prime_UTR_exon_variant"
    THREE_PRIME_UTR_EXON_VARIANT = "3_prime_UTR_exon_variant"
    NON_CODING_TRANSCRIPT_EXON_VARIANT = "non_coding_transcript_exon_variant"
    FIVE_PRIME_UTR_INTRON_VARIANT = "5_prime_UTR_intron_variant"
    THREE_PRIME_UTR_INTRON_VARIANT = "3_prime_UTR_intron_variant"
    CODING_TRANSCRIPT_INTRON_VARIANT = "coding_transcript_intron_variant"
    NON_CODING_TRANSCRIPT_INTRON_VARIANT = "non_coding_transcript_intron_variant"
    UPSTREAM_GENE_VARIANT = "upstream_gene_variant"
    DOWNSTREAM_GENE_VARIANT = "downstream_gene_variant"
    INTERGENIC_VARIANT = "intergenic_variant"
    REGULATORY_REGION_VARIANT = "regulatory_region_variant"
    SEQUENCE_VARIANT = "sequence_variant"

    @property
    def impact(self) -> PutativeImpact:
        return _EFFECT_IMPACT.get(self, PutativeImpact.MODIFIER)

    @property
    def severity_rank(self) -> int:
        return _SEVERITY_RANK[self]


_EFFECT_IMPACT: dict[VariantEffect, PutativeImpact] = {
    VariantEffect.STRUCTURAL_VARIANT: PutativeImpact.HIGH,
    VariantEffect.TRANSCRIPT_ABLATION: PutativeImpact.HIGH,
    VariantEffect.SPLICE_ACCEPTOR_VARIANT: PutativeImpact.HIGH,
    VariantEffect.SPLICE_DONOR_VARIANT: PutativeImpact.HIGH,
    VariantEffect.STOP_GAINED: PutativeImpact.HIGH,
    VariantEffect.FRAMESHIFT_VARIANT: PutativeImpact.HIGH,
    VariantEffect.STOP_LOST: PutativeImpact.HIGH,
    VariantEffect.START_LOST: PutativeImpact.HIGH,
    VariantEffect.EXON_LOSS_VARIANT: PutativeImpact.HIGH,
    VariantEffect.DISRUPTIVE_INFRAME_DELETION: PutativeImpact.MODERATE,
    VariantEffect.DISRUPTIVE_INFRAME_INSERTION: PutativeImpact.MODERATE,
    VariantEffect.INFRAME_DELETION: PutativeImpact.MODERATE,
    VariantEffect.INFRAME_INSERTION: PutativeImpact.MODERATE,
    VariantEffect.MISSENSE_VARIANT: PutativeImpact.MODERATE,
    VariantEffect.SPLICE_REGION_VARIANT: PutativeImpact.LOW,
    VariantEffect.STOP_RETAINED_VARIANT: PutativeImpact.LOW,
    VariantEffect.INITIATOR_CODON_VARIANT: PutativeImpact.LOW,
    VariantEffect.SYNONYMOUS_VARIANT: PutativeImpact.LOW,
}

_SEVERITY_RANK: dict[VariantEffect, int] = {effect: rank for rank, effect in enumerate(VariantEffect)}


class TranscriptAnnotation(BaseModel):
    """Annotation of one change against a single transcript."""
    model_config = ConfigDict(frozen=True)

    variant_effect: VariantEffect | None = None
    accession: str = ""
    gene_symbol: str = "."
    gene_id: str = ""
    hgvs_genomic: str = ""
    hgvs_cdna: str = ""
    hgvs_protein: str = ""
    distance_from_nearest_gene: int | None = None

    @property
    def impact(self) -> PutativeImpact | None:
        return self.variant_effect.impact if self.variant_effect is not None else None


class AnnotatedAllele(BaseModel):
    """One genomic change annotated against one gene."""
    model_config = ConfigDict(frozen=True)

    genome_assembly: GenomeAssembly = GenomeAssembly.HG19
    chromosome: int
    chromosome_name: str
    position: int
    ref: str
    alt: str
    gene_id: str = ""
    gene_symbol: str = "."
    variant_effect: VariantEffect = VariantEffect.SEQUENCE_VARIANT
    annotations: tuple[TranscriptAnnotation, ...] = Field(default_factory=tuple)
