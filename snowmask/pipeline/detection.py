from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from snowmask.config import DetectionConfig
from snowmask.errors import SnowMaskError
from snowmask.inputs.readers.base_reader import BaseReader
from snowmask.inputs.readers.geotiff_reader import GeoTiffBandReader
from snowmask.models.ndsi import ClassificationResult, classify
from snowmask.pipeline.encoding import write_snow_geotiff
from snowmask.state import PipelineState

logger = logging.getLogger(__name__)


@dataclass
class DetectionResult:
    state: PipelineState
    output_path: str
    classification: ClassificationResult
    diagnostics_path: Optional[str] = None


def run_snow_detection(
    input_path: str,
    output_path: str,
    config: DetectionConfig | None = None,
    reader: BaseReader | None = None,
) -> DetectionResult:
    """Load the NDSI bands, classify snow and write the false-colour raster.

    Any failure ends the run; the raised SnowMaskError carries the terminal
    state in ``.state``. Nothing is written when loading fails. ``reader``
    defaults to a GeoTiffBandReader for ``config.roles``.
    """
    config = config or DetectionConfig()
    reader = reader or GeoTiffBandReader(config.roles)
    state = PipelineState.IDLE

    def advance(new_state):
        nonlocal state
        logger.debug("%s -> %s", state.value, new_state.value)
        state = new_state

    advance(PipelineState.LOADING)
    try:
        bands = reader.read(str(input_path))
    except SnowMaskError as e:
        advance(e.state)
        raise
    advance(PipelineState.LOADED)

    advance(PipelineState.CLASSIFYING)
    result = classify(bands, config.threshold)
    logger.info(
        "Snow pixels: %d / %d (%.2f%%)",
        result.snow_pixels,
        result.total_pixels,
        100.0 * result.snow_fraction,
    )

    try:
        write_snow_geotiff(result, bands, str(output_path), driver=config.driver)
    except SnowMaskError as e:
        advance(e.state)
        raise
    advance(PipelineState.WRITTEN)

    diagnostics_path = None
    if config.plot:
        from snowmask.models.diagnostics import plot_ndsi_diagnostics

        out = Path(output_path)
        diagnostics_path = str(out.with_name(out.stem + "_ndsi_hist.png"))
        plot_ndsi_diagnostics(result, bands, diagnostics_path, config.threshold)

    return DetectionResult(
        state=state,
        output_path=str(output_path),
        classification=result,
        diagnostics_path=diagnostics_path,
    )
