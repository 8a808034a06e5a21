import numpy as np

from stereo.errors import InvalidInput

def validate_image(img: np.ndarray, name: str = "image") -> np.ndarray:
    """
    Check that img is an RGBA8 buffer (H, W, 4) with H, W > 0.
    """
    if not isinstance(img, np.ndarray):
        raise InvalidInput(f"{name}: expected numpy array, got {type(img).__name__}")
    if img.ndim != 3 or img.shape[2] != 4:
        raise InvalidInput(f"{name}: expected shape (H, W, 4), got {img.shape}")
    if img.dtype != np.uint8:
        raise InvalidInput(f"{name}: expected uint8 samples, got {img.dtype}")
    H, W = img.shape[:2]
    if H == 0 or W == 0:
        raise InvalidInput(f"{name}: empty image {W}x{H}")
    return img

def validate_stereo_pair(left: np.ndarray, right: np.ndarray):
    validate_image(left, "left")
    validate_image(right, "right")
    if left.shape[:2] != right.shape[:2]:
        HL, WL = left.shape[:2]
        HR, WR = right.shape[:2]
        raise InvalidInput(f"left/right size mismatch: {WL}x{HL} vs {WR}x{HR}")
    return left, right
