import logging
import time
from typing import Optional

import cv2
import numpy as np

from pipeline.depth_map import estimate_depth
from stereo.config import DepthConfig
from stereo.result import DepthResult
from stereo.viz import depth_stats, show_pair

logger = logging.getLogger(__name__)


def load_rgba(path: str) -> np.ndarray:
    """Decode an image file into an (H, W, 4) uint8 RGBA array."""
    img = cv2.imread(path, cv2.IMREAD_UNCHANGED)
    if img is None:
        raise RuntimeError(f"Image load failed: {path}")

    if img.dtype != np.uint8:
        # 16-bit PNG/TIFF
        img = (img >> 8).astype(np.uint8)
    if img.ndim == 2:
        return cv2.cvtColor(img, cv2.COLOR_GRAY2RGBA)
    if img.shape[2] == 4:
        return cv2.cvtColor(img, cv2.COLOR_BGRA2RGBA)
    return cv2.cvtColor(img, cv2.COLOR_BGR2RGBA)


def estimate_depth_map(
        left_path: str,
        right_path: Optional[str],
        config: DepthConfig,
        output_path: Optional[str] = None,
        show_vis: bool = False
) -> DepthResult:
    """
    Depth map for image files.

    Args:
        left_path (str): Path to the left image, or the only image.
        right_path (Optional[str]): Path to the right image. None selects the
            single-image fallback pipeline.
        config (DepthConfig): depth options.
        output_path (Optional[str]): Where to write the depth map as an 8-bit image.
        show_vis (bool): Whether to display the image and depth map.

    Returns:
        result (DepthResult): depth map, pipeline used and elapsed time.
    """
    config.validate()

    t0 = time.perf_counter()
    left = load_rgba(left_path)
    right = load_rgba(right_path) if right_path is not None else None

    depth = estimate_depth(left, right, config)
    mode = "fallback" if right is None else "stereo"

    t1 = time.perf_counter()
    result = DepthResult(depth=depth, mode=mode, elapsed_ms=(t1 - t0) * 1000)
    logger.info("[estimate_depth_map] %s time = %.2f ms", mode, result.elapsed_ms)
    depth_stats(depth)

    if output_path is not None:
        if not cv2.imwrite(output_path, depth):
            raise RuntimeError(f"Image write failed: {output_path}")
        logger.info("depth map written to %s", output_path)
    if show_vis:
        show_pair(left, depth, scale=0.6)

    return result
