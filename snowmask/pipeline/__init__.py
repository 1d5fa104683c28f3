from .detection import DetectionResult, run_snow_detection
from .encoding import write_snow_geotiff

__all__ = ["DetectionResult", "run_snow_detection", "write_snow_geotiff"]
