import logging

import cv2
import numpy as np

logger = logging.getLogger(__name__)

def depth_stats(depth: np.ndarray) -> dict:
    d = depth.astype(np.float32)
    p1, p5, p50, p95, p99 = np.percentile(d, [1, 5, 50, 95, 99])
    stats = {
        "min": float(d.min()),
        "max": float(d.max()),
        "p1": float(p1), "p5": float(p5), "p50": float(p50),
        "p95": float(p95), "p99": float(p99),
        "ratio_zero": float(np.mean(d == 0)),
    }
    logger.info("min/max: %.1f %.1f", stats["min"], stats["max"])
    logger.info("p1/p5/p50/p95/p99: %.1f %.1f %.1f %.1f %.1f", p1, p5, p50, p95, p99)
    logger.info("ratio == 0: %.3f", stats["ratio_zero"])
    return stats

def show_pair(image_rgba: np.ndarray, depth: np.ndarray, scale=0.5):
    bgr = cv2.cvtColor(image_rgba, cv2.COLOR_RGBA2BGR)
    image_show = cv2.resize(bgr, None, fx=scale, fy=scale, interpolation=cv2.INTER_AREA)
    depth_show = cv2.resize(depth, None, fx=scale, fy=scale, interpolation=cv2.INTER_NEAREST)
    cv2.imshow("image", image_show)
    cv2.imshow("depth", depth_show)
    cv2.waitKey(0)
