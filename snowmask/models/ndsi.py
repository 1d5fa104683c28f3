from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from snowmask.config import NDSI_THRESHOLD
from snowmask.inputs.readers.base_reader import BandSet


def compute_ndsi(green: np.ndarray, swir: np.ndarray) -> np.ndarray:
    """Normalized Difference Snow Index, (green - swir) / (green + swir).

    Computed in float32. Pixels whose denominator is exactly 0.0 get an index
    of 0.0. Values are not clamped to [-1, 1].
    """
    green = np.asarray(green, dtype=np.float32)
    swir = np.asarray(swir, dtype=np.float32)
    if green.shape != swir.shape:
        raise ValueError(f"Band shapes differ: green {green.shape}, swir {swir.shape}")

    denom = green + swir
    ndsi = np.zeros_like(denom)
    np.divide(green - swir, denom, out=ndsi, where=denom != 0)
    return ndsi


def classify_ndsi(ndsi: np.ndarray, threshold: float = NDSI_THRESHOLD) -> np.ndarray:
    """Boolean snow mask. The threshold is exclusive: ndsi == threshold is non-snow.

    The threshold is compared in the dtype of ``ndsi`` (float32 in the pipeline).
    """
    ndsi = np.asarray(ndsi)
    dtype = ndsi.dtype if np.issubdtype(ndsi.dtype, np.floating) else np.float64
    return ndsi > np.asarray(threshold, dtype=dtype)


@dataclass
class ClassificationResult:
    ndsi: np.ndarray  # HxW float32
    snow: np.ndarray  # HxW bool, True = snow

    @property
    def snow_plane(self) -> np.ndarray:
        return np.where(self.snow, 255, 0).astype(np.uint8)

    @property
    def non_snow_plane(self) -> np.ndarray:
        return np.where(self.snow, 0, 255).astype(np.uint8)

    @property
    def snow_pixels(self) -> int:
        return int(np.count_nonzero(self.snow))

    @property
    def total_pixels(self) -> int:
        return int(self.snow.size)

    @property
    def snow_fraction(self) -> float:
        if self.total_pixels == 0:
            return 0.0
        return self.snow_pixels / self.total_pixels


def classify(bands: BandSet, threshold: float = NDSI_THRESHOLD) -> ClassificationResult:
    ndsi = compute_ndsi(bands.green, bands.swir)
    return ClassificationResult(ndsi=ndsi, snow=classify_ndsi(ndsi, threshold))
