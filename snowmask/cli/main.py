from __future__ import annotations

import argparse
import logging

from snowmask.config import DEFAULT_INPUT, DEFAULT_OUTPUT, NDSI_THRESHOLD, BandRoles, DetectionConfig
from snowmask.errors import SnowMaskError


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="NDSI snow detection (Blue=Snow, Red=Non-snow)")
    p.add_argument("--input", default=DEFAULT_INPUT, help="Path to input multiband raster (GeoTIFF)")
    p.add_argument("--out", default=DEFAULT_OUTPUT, help="Path to output 3-band GeoTIFF")
    p.add_argument("--green-band", type=int, default=BandRoles.green, help="1-based index of the green band")
    p.add_argument("--swir-band", type=int, default=BandRoles.swir, help="1-based index of the SWIR band")
    p.add_argument("--threshold", type=float, default=NDSI_THRESHOLD, help="NDSI above this value is snow")
    p.add_argument("--driver", default="GTiff", help="GDAL driver for the output raster")
    p.add_argument("--plot", action="store_true", help="Also save an NDSI histogram/quicklook PNG")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p


def gen_snow_mask(input_path: str, output_path: str, config: DetectionConfig | None = None):
    from snowmask.pipeline.detection import run_snow_detection

    result = run_snow_detection(input_path, output_path, config)
    print(f"Output written: {result.output_path} (Blue=Snow, Red=Non-snow)")
    if result.diagnostics_path:
        print(f"Diagnostics written: {result.diagnostics_path}")
    return result


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = DetectionConfig(
            roles=BandRoles(green=args.green_band, swir=args.swir_band),
            threshold=args.threshold,
            driver=args.driver,
            plot=args.plot,
        )
        gen_snow_mask(args.input, args.out, config)
    except (SnowMaskError, ValueError) as e:
        print("ERROR:", e)
        raise SystemExit(2)
    return 0


if __name__ == "__main__":
    main()
