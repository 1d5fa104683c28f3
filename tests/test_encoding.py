import logging

import numpy as np
import pytest
import rasterio

from snowmask.errors import CannotCreateOutput, OutputDriverUnavailable
from snowmask.inputs.readers.base_reader import BandSet
from snowmask.models.ndsi import classify
from snowmask.pipeline.encoding import encode_planes, ensure_driver, write_snow_geotiff
from snowmask.state import PipelineState

from conftest import TRANSFORM, UTM33N


def _bands(projection=None):
    green = np.array([[0.5, 0.2], [0.9, 0.0]], dtype=np.float32)
    swir = np.array([[0.1, 0.2], [0.1, 0.0]], dtype=np.float32)
    return BandSet(green=green, swir=swir, width=2, height=2,
                   geotransform=TRANSFORM.to_gdal(),
                   projection=UTM33N.to_wkt() if projection is None else projection,
                   band_count=11)


def test_encode_planes():
    out = encode_planes(classify(_bands()))
    assert out.shape == (3, 2, 2)
    assert out.dtype == np.uint8
    assert out[0].tolist() == [[0, 255], [0, 255]]
    assert out[1].tolist() == [[0, 0], [0, 0]]
    assert out[2].tolist() == [[255, 0], [255, 0]]


def test_write_preserves_georeferencing(tmp_path):
    bands = _bands()
    out_path = str(tmp_path / "nested" / "snow.tif")
    write_snow_geotiff(classify(bands), bands, out_path)

    with rasterio.open(out_path) as dst:
        assert dst.count == 3
        assert dst.dtypes == ("uint8", "uint8", "uint8")
        assert (dst.width, dst.height) == (2, 2)
        assert dst.transform.to_gdal() == bands.geotransform
        assert dst.crs == UTM33N
        assert dst.descriptions == ("non_snow", "zero", "snow")
        data = dst.read()
    assert data[2].tolist() == [[255, 0], [255, 0]]
    assert not data[1].any()


def test_write_overwrites(tmp_path):
    out_path = str(tmp_path / "snow.tif")
    bands = _bands()
    write_snow_geotiff(classify(bands), bands, out_path)
    bands.green[:] = 0.0
    write_snow_geotiff(classify(bands), bands, out_path)
    with rasterio.open(out_path) as dst:
        assert not dst.read(3).any()


def test_unknown_driver(tmp_path):
    bands = _bands()
    out_path = tmp_path / "snow.xyz"
    with pytest.raises(OutputDriverUnavailable) as exc:
        write_snow_geotiff(classify(bands), bands, str(out_path), driver="NoSuchDriver")
    assert exc.value.state is PipelineState.WRITE_FAILED
    assert not out_path.exists()


def test_ensure_driver_gtiff():
    ensure_driver("GTiff")


def test_cannot_create_output(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("")
    bands = _bands()
    with pytest.raises(CannotCreateOutput) as exc:
        write_snow_geotiff(classify(bands), bands, str(blocker / "snow.tif"))
    assert exc.value.state is PipelineState.WRITE_FAILED


def test_empty_projection_writes_no_crs(tmp_path):
    bands = _bands(projection="")
    out_path = str(tmp_path / "snow.tif")
    write_snow_geotiff(classify(bands), bands, out_path)
    with rasterio.open(out_path) as dst:
        assert dst.crs is None
        assert dst.transform.to_gdal() == bands.geotransform


def test_cannot_create_output_writes_nothing(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("")
    bands = _bands()
    with pytest.raises(CannotCreateOutput):
        write_snow_geotiff(classify(bands), bands, str(blocker / "snow.tif"))
    assert blocker.is_file()
    assert blocker.read_text() == ""
    assert [p.name for p in tmp_path.iterdir()] == ["file"]


def test_write_does_not_log_output_line(tmp_path, caplog):
    bands = _bands()
    with caplog.at_level(logging.DEBUG, logger="snowmask"):
        write_snow_geotiff(classify(bands), bands, str(tmp_path / "snow.tif"))
    assert not [r for r in caplog.records if r.levelno >= logging.INFO and "Output written" in r.getMessage()]
