import logging
import threading
import time
from typing import Optional

import numpy as np

from stereo.block_match import block_match
from stereo.config import DepthConfig
from stereo.edges import sobel_edges
from stereo.filters import gaussian_blur, median_filter
from stereo.grayscale import to_grayscale
from stereo.input import validate_image, validate_stereo_pair
from stereo.normalize import normalize_depth, to_depth_u8
from stereo.radial import radial_bias

logger = logging.getLogger(__name__)

# post-filter parameters of the two pipelines
STEREO_MEDIAN_KERNEL = 3
STEREO_BLUR_SIGMA = 2
FALLBACK_BLUR_SIGMA = 5


def compute_stereo_depth(
        left: np.ndarray,
        right: np.ndarray,
        config: DepthConfig,
        cancel_event: Optional[threading.Event] = None
) -> np.ndarray:
    """
    Depth map from a rectified stereo pair using SAD block matching.

    Args:
        left (np.ndarray): (H, W, 4) uint8 RGBA left image.
        right (np.ndarray): (H, W, 4) uint8 RGBA right image, same size as left.
        config (DepthConfig): block_size, max_disparity, smoothing and normalize
            are used here.
        cancel_event (threading.Event): optional, stops block matching between
            row batches.

    Returns:
        depth (np.ndarray): (H, W) uint8 depth map.
    """
    config.validate()
    validate_stereo_pair(left, right)

    t0 = time.perf_counter()
    L_gray = to_grayscale(left)
    R_gray = to_grayscale(right)

    disp = block_match(L_gray, R_gray, config.block_size, config.max_disparity,
                       cancel_event=cancel_event)
    logger.debug("disparity range %.0f..%.0f", disp.min(), disp.max())

    if config.smoothing:
        disp = median_filter(disp, STEREO_MEDIAN_KERNEL)
        disp = gaussian_blur(disp, STEREO_BLUR_SIGMA)

    if config.normalize:
        depth = normalize_depth(disp)
    else:
        depth = to_depth_u8(disp)

    t1 = time.perf_counter()
    logger.info("[compute_stereo_depth] time = %.2f ms", (t1 - t0) * 1000)
    return depth


def compute_fallback_depth(image: np.ndarray, config: DepthConfig) -> np.ndarray:
    """
    Approximate depth from a single image: Sobel edges weighted by edge_weight
    plus a radial center prior weighted by center_bias, blurred and normalized.
    """
    config.validate()
    validate_image(image)

    t0 = time.perf_counter()
    H, W = image.shape[:2]
    gray = to_grayscale(image)

    edges = sobel_edges(gray)
    radial = radial_bias(W, H)
    combined = edges * config.edge_weight + radial * config.center_bias

    smoothed = gaussian_blur(combined.astype(np.float32), FALLBACK_BLUR_SIGMA)
    depth = normalize_depth(smoothed)

    t1 = time.perf_counter()
    logger.info("[compute_fallback_depth] time = %.2f ms", (t1 - t0) * 1000)
    return depth


def estimate_depth(
        left: np.ndarray,
        right: Optional[np.ndarray],
        config: DepthConfig,
        cancel_event: Optional[threading.Event] = None
) -> np.ndarray:
    """Stereo pipeline when a right image is given, single-image fallback otherwise."""
    if right is None:
        logger.debug("no stereo pair, using fallback depth")
        return compute_fallback_depth(left, config)
    return compute_stereo_depth(left, right, config, cancel_event=cancel_event)
