from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

import numpy as np


@dataclass
class BandSet:
    """The two NDSI bands of a raster plus its georeferencing.

    green, swir: HxW float32 arrays
    geotransform: GDAL-ordered affine coefficients (6 floats)
    projection: WKT of the source CRS, empty string if the source has none
    band_count: number of bands in the source dataset
    source: path the bands were read from, if known
    """

    green: np.ndarray
    swir: np.ndarray
    width: int
    height: int
    geotransform: Tuple[float, float, float, float, float, float]
    projection: str
    band_count: int
    source: Optional[str] = None

    @property
    def shape(self) -> Tuple[int, int]:
        return self.height, self.width


class BaseReader(Protocol):
    """Reader interface. Implementations convert a file into a BandSet."""

    def read(self, path: str) -> BandSet:
        ...
