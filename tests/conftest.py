from __future__ import annotations

import os

os.environ.setdefault("MPLBACKEND", "Agg")

import numpy as np
import pytest
import rasterio
from rasterio.crs import CRS
from rasterio.transform import from_origin

UTM33N = CRS.from_epsg(32633)
TRANSFORM = from_origin(500_000.0, 5_200_000.0, 20.0, 20.0)


def write_stack(path, count, fill=0.0, bands=None, height=4, width=6, crs=UTM33N, transform=TRANSFORM):
    """Write a float32 GeoTIFF with `count` bands; `bands` maps 1-based index -> HxW array."""
    bands = bands or {}
    first = next(iter(bands.values()), None)
    if first is not None:
        height, width = np.asarray(first).shape
    with rasterio.open(
        path, "w",
        driver="GTiff",
        height=height, width=width,
        count=count, dtype="float32",
        crs=crs,
        transform=transform,
    ) as dst:
        for i in range(1, count + 1):
            data = bands.get(i, np.full((height, width), fill))
            dst.write(np.asarray(data, dtype=np.float32), i)
    return str(path)


@pytest.fixture()
def sentinel_stack(tmp_path):
    """11-band stack: left half snow (green 0.8, swir 0.1), right half bare ground."""
    green = np.full((4, 6), 0.8, dtype=np.float32)
    swir = np.full((4, 6), 0.1, dtype=np.float32)
    green[:, 3:] = 0.2
    swir[:, 3:] = 0.3
    return write_stack(tmp_path / "input_sentinel2.tif", 11, fill=0.05, bands={3: green, 11: swir})
