from __future__ import annotations

from dataclasses import dataclass
from typing import List

from snowmask.config import BandRoles


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


def validate_band_count(count: int, roles: BandRoles) -> ValidationResult:
    """Validates the raster has enough bands for every configured role."""
    missing = [
        f"{role}={index}"
        for role, index in (("green", roles.green), ("swir", roles.swir))
        if index > count
    ]
    if missing:
        return ValidationResult(
            ok=False,
            messages=[
                f"Band(s) out of range: {missing}",
                f"Available bands: {count}",
            ],
        )
    return ValidationResult(ok=True, messages=[])
