from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_INPUT = "input_sentinel2.tif"
DEFAULT_OUTPUT = "snow_only_colored.tif"

NDSI_THRESHOLD = 0.4


@dataclass(frozen=True)
class BandRoles:
    """1-based band indices of the spectral roles used for NDSI.

    Defaults follow the Sentinel-2 stack order (B3 green, B11 SWIR).
    """

    green: int = 3
    swir: int = 11

    def __post_init__(self):
        for role, index in (("green", self.green), ("swir", self.swir)):
            if index < 1:
                raise ValueError(f"Band index for {role} must be >= 1, got {index}")

    @property
    def required_count(self) -> int:
        return max(self.green, self.swir)


@dataclass
class DetectionConfig:
    roles: BandRoles = field(default_factory=BandRoles)
    threshold: float = NDSI_THRESHOLD
    driver: str = "GTiff"
    plot: bool = False
