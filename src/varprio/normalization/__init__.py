from varprio.normalization.normalizer import normalize

__all__ = ["normalize"]
