from dataclasses import dataclass

import numpy as np

from stereo.normalize import depth_to_rgba

@dataclass
class DepthResult:
    depth: np.ndarray       # (H, W) uint8
    mode: str               # "stereo" or "fallback"
    elapsed_ms: float

    @property
    def rgba(self) -> np.ndarray:
        return depth_to_rgba(self.depth)
