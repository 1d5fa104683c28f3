from __future__ import annotations

import logging
import os

import numpy as np
import rasterio
from rasterio.transform import Affine
from rasterio.errors import RasterioError

from snowmask.errors import CannotCreateOutput, OutputDriverUnavailable
from snowmask.inputs.readers.base_reader import BandSet
from snowmask.models.ndsi import ClassificationResult

logger = logging.getLogger(__name__)

BAND_DESCRIPTIONS = ("non_snow", "zero", "snow")


def ensure_driver(name: str = "GTiff") -> None:
    """Raise OutputDriverUnavailable unless GDAL has the named driver registered."""
    with rasterio.Env() as env:
        drivers = env.drivers()
    if name not in drivers:
        raise OutputDriverUnavailable(f"{name} driver not available.")


def encode_planes(result: ClassificationResult) -> np.ndarray:
    """Stack the output bands as (3, H, W) uint8: non-snow, zero, snow."""
    non_snow = result.non_snow_plane
    return np.stack([non_snow, np.zeros_like(non_snow), result.snow_plane])


def write_snow_geotiff(result: ClassificationResult, bands: BandSet, out_path: str, driver: str = "GTiff") -> str:
    """Write the snow classification as a 3-band uint8 raster georeferenced like the input.

    Band 1 is 255 where non-snow, band 2 is all zero, band 3 is 255 where snow,
    so the file renders red for bare ground and blue for snow. An existing
    file at out_path is replaced.
    """
    ensure_driver(driver)

    out = encode_planes(result)
    profile = {
        "driver": driver,
        "height": bands.height,
        "width": bands.width,
        "count": 3,
        "dtype": out.dtype,
        "crs": bands.projection or None,
        "transform": Affine.from_gdal(*bands.geotransform),
    }
    if driver == "GTiff":
        profile["compress"] = "lzw"

    try:
        out_dir = os.path.dirname(out_path)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        dst = rasterio.open(out_path, "w", **profile)
    except (OSError, RasterioError) as e:
        raise CannotCreateOutput(f"Cannot create output dataset: {out_path} ({e})") from e

    with dst:
        dst.write(out)
        for i, desc in enumerate(BAND_DESCRIPTIONS, start=1):
            dst.set_band_description(i, desc)

    logger.debug("Wrote 3 bands to %s", out_path)
    return out_path
