"""varprio: allele normalisation and Mendelian variant prioritisation."""

__version__ = "0.1.0"
