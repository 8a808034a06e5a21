import logging
import threading
from typing import Optional

import numpy as np
from numba import njit, prange

from stereo.errors import DepthCancelled

logger = logging.getLogger(__name__)

# rows handed to the kernel between two cancellation checks
ROW_BATCH = 32


@njit(parallel=True, cache=True)
def _sad_rows(left, right, disp, half, max_disp, y0, y1):
    """
    left, right: (H, W) int32
    disp: (H, W) float32, written for rows y0..y1-1 only
    """
    H, W = left.shape
    for y in prange(y0, y1):
        for x in range(half, W - half):
            max_d = min(max_disp, x - half)

            best_d = 0
            best_sad = -1  # no candidate evaluated yet
            for d in range(max_d + 1):
                sad = 0
                for by in range(-half, half + 1):
                    for bx in range(-half, half + 1):
                        diff = left[y + by, x + bx] - right[y + by, x + bx - d]
                        if diff < 0:
                            diff = -diff
                        sad += diff

                # strict '<': the smallest d wins a tie
                if best_sad < 0 or sad < best_sad:
                    best_sad = sad
                    best_d = d

            disp[y, x] = best_d


def block_match(
    left_gray: np.ndarray,
    right_gray: np.ndarray,
    block_size: int,
    max_disparity: int,
    cancel_event: Optional[threading.Event] = None,
) -> np.ndarray:
    """
    SAD block matching, left image as reference.

    Args:
        left_gray (np.ndarray): (H, W) uint8 left intensities.
        right_gray (np.ndarray): (H, W) uint8 right intensities.
        block_size (int): odd window side length.
        max_disparity (int): largest disparity searched.
        cancel_event (threading.Event): checked between row batches; when set the
            search stops with DepthCancelled.

    Returns:
        disp (np.ndarray): (H, W) float32 integer disparities. Pixels closer than
            block_size // 2 to any border are 0.
    """
    assert left_gray.shape == right_gray.shape, "input error"
    assert block_size > 0 and block_size % 2 == 1, "block_size must be odd"
    assert max_disparity >= 0, "max_disparity must be >= 0"

    H, W = left_gray.shape
    half = (block_size - 1) // 2
    disp = np.zeros((H, W), dtype=np.float32)

    L = left_gray.astype(np.int32)
    R = right_gray.astype(np.int32)

    for y0 in range(half, H - half, ROW_BATCH):
        if cancel_event is not None and cancel_event.is_set():
            raise DepthCancelled(f"block matching cancelled at row {y0}")
        y1 = min(y0 + ROW_BATCH, H - half)
        _sad_rows(L, R, disp, half, max_disparity, y0, y1)
        logger.debug("block_match rows %d-%d / %d", y0, y1 - 1, H)

    return disp
