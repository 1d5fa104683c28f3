from .ndsi import ClassificationResult, classify, classify_ndsi, compute_ndsi

__all__ = ["ClassificationResult", "classify", "classify_ndsi", "compute_ndsi"]
