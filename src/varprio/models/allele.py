"""Allele coordinate models."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict

from varprio.exceptions import InvalidAlleleError, InvalidGenomeAssemblyError


class GenomeAssembly(enum.StrEnum):
    HG19 = "hg19"
    HG38 = "hg38"

    @classmethod
    def default_build(cls) -> GenomeAssembly:
        return cls.HG19

    @classmethod
    def from_value(cls, value: str) -> GenomeAssembly:
        """Parse an assembly name, accepting the common GRC aliases."""
        if value is None:
            raise InvalidGenomeAssemblyError("Genome build cannot be None")
        build = _ASSEMBLY_ALIASES.get(value.lower())
        if build is None:
            raise InvalidGenomeAssemblyError(f"'{value}' is not a valid/supported genome assembly.")
        return build


_ASSEMBLY_ALIASES: dict[str, GenomeAssembly] = {
    "hg19": GenomeAssembly.HG19,
    "hg37": GenomeAssembly.HG19,
    "grch37": GenomeAssembly.HG19,
    "hg38": GenomeAssembly.HG38,
    "grch38": GenomeAssembly.HG38,
}

X_CHROMOSOME = 23
Y_CHROMOSOME = 24
MITOCHONDRIAL_CHROMOSOME = 25
UNKNOWN_CHROMOSOME = 0

_SEX_AND_MT_CHROMOSOMES = {
    "X": X_CHROMOSOME,
    "Y": Y_CHROMOSOME,
    "M": MITOCHONDRIAL_CHROMOSOME,
    "MT": MITOCHONDRIAL_CHROMOSOME,
}


def chromosome_to_int(name: str) -> int:
    """Convert a contig name (chr1, 1, chrX, MT, ...) to its numeric id.

    Unplaced or unrecognised contigs map to 0.
    """
    key = name.strip().upper()
    if key.startswith("CHR"):
        key = key[3:]
    if key in _SEX_AND_MT_CHROMOSOMES:
        return _SEX_AND_MT_CHROMOSOMES[key]
    if key.isdigit() and 1 <= int(key) <= 22:
        return int(key)
    return UNKNOWN_CHROMOSOME


def is_symbolic_allele(allele: str) -> bool:
    if len(allele) <= 1:
        return False
    return (
        allele[0] == "<" or allele[-1] == ">"  # symbolic or large insertion
        or allele[0] == "." or allele[-1] == "."  # single breakend
        or "[" in allele or "]" in allele  # mated breakend
    )


class AllelePosition(BaseModel):
    """Single-allele variant coordinates, 1-based and inclusive as in VCF."""
    model_config = ConfigDict(frozen=True)

    position: int
    ref: str
    alt: str

    @classmethod
    def of(cls, position: int, ref: str, alt: str) -> AllelePosition:
        """Exact representation of the given coordinates, no trimming."""
        if ref is None:
            raise InvalidAlleleError("REF string cannot be None")
        if alt is None:
            raise InvalidAlleleError("ALT string cannot be None")
        return cls(position=position, ref=ref, alt=alt)

    def is_symbolic(self) -> bool:
        # VCF only describes symbolic ALT alleles, but check REF too
        return is_symbolic_allele(self.alt) or is_symbolic_allele(self.ref)

    def is_snv(self) -> bool:
        return len(self.ref) == 1 and len(self.alt) == 1

    def is_deletion(self) -> bool:
        return len(self.ref) > len(self.alt)

    def is_insertion(self) -> bool:
        return len(self.ref) < len(self.alt)

    def __str__(self) -> str:
        return f"{self.position}-{self.ref}-{self.alt}"
