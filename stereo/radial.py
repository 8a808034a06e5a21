import numpy as np

def radial_bias(width: int, height: int) -> np.ndarray:
    """
    Center-weighted prior: 1 at (W/2, H/2), falling linearly with distance to 0
    at the distance of a corner.
    """
    assert width > 0 and height > 0, "empty image"
    cx = width / 2
    cy = height / 2
    max_dist = np.sqrt(cx * cx + cy * cy)

    ys, xs = np.mgrid[0:height, 0:width].astype(np.float64)
    dist = np.sqrt((xs - cx) ** 2 + (ys - cy) ** 2)
    return (1.0 - dist / max_dist).astype(np.float32)
