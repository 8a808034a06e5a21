import math

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view


def median_filter(field: np.ndarray, kernel_size: int) -> np.ndarray:
    """
    Median over a kernel_size x kernel_size window.
    Out-of-range neighbours are clamped to the nearest row/column (edge replicate).
    """
    assert field.ndim == 2, "scalar field only"
    assert kernel_size > 0 and kernel_size % 2 == 1, "kernel_size must be odd"
    H, W = field.shape
    half = kernel_size // 2
    count = kernel_size * kernel_size

    padded = np.pad(field, ((half, half), (half, half)), mode="edge")
    windows = sliding_window_view(padded, (kernel_size, kernel_size))
    values = np.sort(windows.reshape(H, W, count), axis=-1)
    return values[:, :, count // 2].astype(np.float32)


def gaussian_kernel(sigma: float) -> np.ndarray:
    """1-D kernel of radius ceil(3*sigma), normalized to sum 1."""
    assert sigma > 0, "sigma must be > 0"
    radius = int(math.ceil(3 * sigma))
    i = np.arange(-radius, radius + 1, dtype=np.float64)
    w = np.exp(-(i * i) / (2 * sigma * sigma))
    return w / w.sum()


def _convolve_rows(field: np.ndarray, kernel: np.ndarray) -> np.ndarray:
    # 1-D convolution along axis 1 with edge-replicate borders
    r = len(kernel) // 2
    W = field.shape[1]
    padded = np.pad(field.astype(np.float64), ((0, 0), (r, r)), mode="edge")

    out = np.zeros(field.shape, dtype=np.float64)
    for k, w in enumerate(kernel):
        out += w * padded[:, k:k + W]
    return out.astype(np.float32)


def gaussian_blur(field: np.ndarray, sigma: float) -> np.ndarray:
    """
    Separable gaussian blur: horizontal pass into an intermediate field,
    then a vertical pass over that intermediate.
    """
    assert field.ndim == 2, "scalar field only"
    kernel = gaussian_kernel(sigma)

    temp = _convolve_rows(field, kernel)
    out = _convolve_rows(np.ascontiguousarray(temp.T), kernel)
    return np.ascontiguousarray(out.T)
