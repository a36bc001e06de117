"""varprio exceptions."""


class VarPrioError(Exception):
    """Base exception for varprio."""


class InvalidAlleleError(VarPrioError, ValueError):
    """Raised when a REF or ALT allele string is missing or empty."""


class InvalidGenomeAssemblyError(VarPrioError, ValueError):
    """Raised when a genome assembly name is not supported."""


class EmptyPedigreeError(VarPrioError, ValueError):
    """Raised when a pedigree has no named, affected individual."""


class IncompatiblePedigreeError(VarPrioError):
    """Raised when genotype calls cannot be reconciled with the pedigree."""


class FilterPreconditionError(VarPrioError, ValueError):
    """Raised when a variant that failed filtering reaches inheritance checking."""
