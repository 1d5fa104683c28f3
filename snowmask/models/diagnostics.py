import logging
import os

import matplotlib.pyplot as plt
import numpy as np
from skimage import exposure
from skimage.filters import threshold_otsu

logger = logging.getLogger(__name__)


def stretch_band(band):
    """Scale a band to uint8 with a 2-98 percentile stretch, ignoring NaNs."""
    band = np.asarray(band, dtype=np.float32)
    valid = band[np.isfinite(band)]
    if valid.size == 0:
        return np.zeros(band.shape, dtype=np.uint8)
    p2, p98 = np.percentile(valid, (2, 98))  # ignore outliers
    if p98 <= p2:
        return np.zeros(band.shape, dtype=np.uint8)
    band = np.nan_to_num(band, nan=p2, posinf=p98, neginf=p2)
    return exposure.rescale_intensity(band, in_range=(p2, p98), out_range=(0, 255)).astype(np.uint8)


def otsu_ndsi(ndsi):
    """Otsu threshold of the finite NDSI values, NaN if it cannot be computed."""
    arr = np.ravel(ndsi[np.isfinite(ndsi)])
    if arr.size == 0 or np.all(arr == arr[0]):
        return np.nan
    return float(threshold_otsu(arr))


def plot_ndsi_diagnostics(result, bands, save_path, threshold):
    '''
    Save a 2x2 figure: NDSI histogram, stretched green band, NDSI, classification.
    Args:
        result: ClassificationResult
        bands: BandSet the result was computed from
        save_path: PNG path
        threshold: NDSI threshold used for the classification
    Returns:
        save_path
    '''
    ndsi = result.ndsi
    finite = ndsi[np.isfinite(ndsi)]
    counts, bin_edges = np.histogram(finite, bins=100)
    bin_centers = (bin_edges[:-1] + bin_edges[1:]) / 2
    otsu = otsu_ndsi(ndsi)

    fig, axes = plt.subplots(nrows=2, ncols=2, figsize=(12, 10))
    fig.suptitle(os.path.basename(bands.source) if bands.source else 'NDSI')
    axes = axes.flatten()

    axes[0].plot(bin_centers, counts, label='NDSI')
    axes[0].axvline(x=threshold, color='r', linestyle='--', linewidth=2, label=f'threshold = {threshold:.3f}')
    if not np.isnan(otsu):
        axes[0].axvline(x=otsu, color='b', linestyle='--', linewidth=2, label=f'otsu = {otsu:.3f}')
    axes[0].set_xlabel('Value')
    axes[0].set_ylabel('Pixel Counts')
    axes[0].set_title('NDSI Histogram')
    axes[0].legend()

    axes[1].imshow(stretch_band(bands.green), cmap='gray')
    axes[1].set_title('Green')
    axes[2].imshow(ndsi, vmin=-1, vmax=1)
    axes[2].set_title('NDSI')

    rgb = np.dstack([result.non_snow_plane, np.zeros_like(result.snow_plane), result.snow_plane])
    axes[3].imshow(rgb)
    axes[3].set_title(f'Snow {result.snow_fraction:.1%} (Blue=Snow, Red=Non-snow)')

    save_dir = os.path.dirname(save_path)
    if save_dir:
        os.makedirs(save_dir, exist_ok=True)
    plt.savefig(str(save_path))
    plt.close(fig)
    logger.info("Diagnostics written: %s", save_path)
    return save_path
