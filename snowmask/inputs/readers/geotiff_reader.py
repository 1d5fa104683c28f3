from __future__ import annotations

import logging

import numpy as np
import rasterio
from rasterio.errors import RasterioIOError

from snowmask.config import BandRoles
from snowmask.errors import CannotOpenDataset, InsufficientBands
from snowmask.inputs.validators import validate_band_count

from .base_reader import BandSet

logger = logging.getLogger(__name__)


def load_bands(src, roles: BandRoles | None = None) -> BandSet:
    """Read the green and SWIR bands of an open rasterio dataset as float32.

    The band count is checked before any pixel is read. ``src`` is left open;
    closing it is the caller's job.
    """
    roles = roles or BandRoles()

    v = validate_band_count(src.count, roles)
    if not v.ok:
        for m in v.messages:
            logger.debug(m)
        raise InsufficientBands(src.count, roles.required_count)

    geotransform = tuple(src.transform.to_gdal())
    projection = src.crs.to_wkt() if src.crs else ""

    # rasterio uses 1-based band indices
    green = src.read(roles.green, out_dtype=np.float32)
    swir = src.read(roles.swir, out_dtype=np.float32)
    height, width = green.shape

    logger.debug("Read bands green=%d swir=%d (%dx%d)", roles.green, roles.swir, width, height)
    return BandSet(
        green=green,
        swir=swir,
        width=width,
        height=height,
        geotransform=geotransform,
        projection=projection,
        band_count=src.count,
        source=getattr(src, "name", None),
    )


class GeoTiffBandReader:
    """Reads the NDSI bands from a multiband GeoTIFF (e.g. a Sentinel-2 stack)."""

    def __init__(self, roles: BandRoles | None = None):
        self.roles = roles or BandRoles()

    def read(self, path: str) -> BandSet:
        try:
            src = rasterio.open(path)
        except RasterioIOError as e:
            raise CannotOpenDataset(f"Cannot open input file: {path} ({e})") from e

        with src:
            logger.info("Loading %s (%d bands)", path, src.count)
            try:
                bands = load_bands(src, self.roles)
            except RasterioIOError as e:
                raise CannotOpenDataset(f"Cannot read input file: {path} ({e})") from e
        bands.source = str(path)
        return bands
