from .base_reader import BandSet, BaseReader
from .geotiff_reader import GeoTiffBandReader, load_bands

__all__ = ["BandSet", "BaseReader", "GeoTiffBandReader", "load_bands"]
