"""Allele minimisation.

Trims shared bases from the right, then the left, of a single REF/ALT pair and
moves the position to match. This is not full normalisation: there is no
reference sequence here, so the variant is assumed to be left-aligned already.

Minimisation follows Tan et al. 2015 (https://doi.org/10.1093/bioinformatics/btv112),
see also https://genome.sph.umich.edu/wiki/Variant_Normalization

A variant is minimised when:
1. its alleles share no bases on the left or right side, or
2. the shorter allele has length 1.

Symbolic alleles (<DEL>, breakends, ...) are never trimmed. Multi-allelic ALT
strings must be split before they get here, and MNVs are not split into SNVs.
"""

from __future__ import annotations

import logging

from varprio.exceptions import InvalidAlleleError
from varprio.models.allele import AllelePosition

logger = logging.getLogger(__name__)


def normalize(position: int, ref: str, alt: str) -> AllelePosition:
    """Return the minimised representation of ``position``, ``ref``, ``alt``.

    Raises:
        InvalidAlleleError: if either allele is missing or empty. A monomorphic
            site must use the symbolic '.' allele rather than an empty string.
    """
    _validate(ref, alt)

    allele = AllelePosition.of(position, ref, alt)
    if allele.is_symbolic() or _cant_trim(ref, alt):
        return allele

    if _needs_right_trim(ref, alt):
        ref, alt = _right_trim(ref, alt)

    if _needs_left_trim(ref, alt):
        left_idx = _shared_prefix_length(ref, alt)
        # keep at least one base in each allele
        if left_idx == len(ref) or left_idx == len(alt):
            left_idx -= 1
        position += left_idx
        ref = ref[left_idx:]
        alt = alt[left_idx:]

    trimmed = AllelePosition.of(position, ref, alt)
    if trimmed != allele:
        logger.debug("Trimmed %s to %s", allele, trimmed)
    return trimmed


def _validate(ref: str | None, alt: str | None) -> None:
    if ref is None:
        raise InvalidAlleleError("REF string cannot be None")
    if alt is None:
        raise InvalidAlleleError("ALT string cannot be None")
    if not ref or not alt:
        raise InvalidAlleleError(f"Empty allele strings are not allowed: ref='{ref}' alt='{alt}'")


def _cant_trim(ref: str, alt: str) -> bool:
    return len(ref) == 1 or len(alt) == 1


def _needs_right_trim(ref: str, alt: str) -> bool:
    return len(ref) > 1 and len(alt) > 1 and ref[-1] == alt[-1]


def _needs_left_trim(ref: str, alt: str) -> bool:
    return len(ref) > 1 and len(alt) > 1 and ref[0] == alt[0]


def _right_trim(ref: str, alt: str) -> tuple[str, str]:
    # stop as soon as either allele is down to a single base
    ref_end = len(ref)
    alt_end = len(alt)
    while ref_end > 1 and alt_end > 1 and ref[ref_end - 1] == alt[alt_end - 1]:
        ref_end -= 1
        alt_end -= 1
    return ref[:ref_end], alt[:alt_end]


def _shared_prefix_length(ref: str, alt: str) -> int:
    idx = 0
    while idx < len(ref) and idx < len(alt) and ref[idx] == alt[idx]:
        idx += 1
    return idx
