import numpy as np

def to_grayscale(image: np.ndarray) -> np.ndarray:
    """
    RGBA (H, W, 4) uint8 -> (H, W) uint8 intensity.
    alpha is ignored, values are rounded half up.
    """
    assert image.ndim == 3 and image.shape[2] == 4, "RGBA only"
    r = image[:, :, 0].astype(np.float64)
    g = image[:, :, 1].astype(np.float64)
    b = image[:, :, 2].astype(np.float64)
    # summed left to right so exact .5 values round up
    gray = np.floor(0.299 * r + 0.587 * g + 0.114 * b + 0.5)
    return np.clip(gray, 0, 255).astype(np.uint8)
