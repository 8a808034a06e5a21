import numpy as np

def normalize_depth(field: np.ndarray) -> np.ndarray:
    """
    Linear min-max rescale of a scalar field to uint8 [0, 255].
    A flat field (max == min) uses range 1 and therefore maps to 0 everywhere.
    """
    values = field.astype(np.float64)

    # global reduction first, nothing is written before it completes
    lo = float(values.min())
    hi = float(values.max())
    rng = hi - lo
    if rng == 0:
        rng = 1.0

    scaled = np.floor((values - lo) / rng * 255.0 + 0.5)
    return np.clip(scaled, 0, 255).astype(np.uint8)

def to_depth_u8(field: np.ndarray) -> np.ndarray:
    """Round and clamp a field into uint8 without rescaling (normalize disabled)."""
    return np.clip(np.rint(field.astype(np.float64)), 0, 255).astype(np.uint8)

def depth_to_rgba(depth: np.ndarray) -> np.ndarray:
    """(H, W) uint8 depth -> (H, W, 4) texture, value in R, G, B and alpha 255."""
    assert depth.ndim == 2 and depth.dtype == np.uint8, "depth map only"
    H, W = depth.shape
    rgba = np.empty((H, W, 4), dtype=np.uint8)
    rgba[:, :, :3] = depth[:, :, None]
    rgba[:, :, 3] = 255
    return rgba
