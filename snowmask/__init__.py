"""NDSI snow detection for multiband GeoTIFFs."""

from snowmask.config import BandRoles, DetectionConfig
from snowmask.errors import (
    CannotCreateOutput,
    CannotOpenDataset,
    InsufficientBands,
    OutputDriverUnavailable,
    SnowMaskError,
)
from snowmask.state import PipelineState

__version__ = "0.1.0"

__all__ = [
    "BandRoles",
    "DetectionConfig",
    "PipelineState",
    "SnowMaskError",
    "CannotOpenDataset",
    "InsufficientBands",
    "OutputDriverUnavailable",
    "CannotCreateOutput",
]
