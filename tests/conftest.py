import numpy as np
import pytest

from stereo.config import DepthConfig


def gray_to_rgba(gray):
    """(H, W) uint8 -> (H, W, 4) RGBA with equal R, G, B and opaque alpha."""
    gray = np.asarray(gray, dtype=np.uint8)
    rgba = np.empty(gray.shape + (4,), dtype=np.uint8)
    rgba[:, :, :3] = gray[:, :, None]
    rgba[:, :, 3] = 255
    return rgba


@pytest.fixture
def make_rgba():
    return gray_to_rgba


@pytest.fixture
def textured():
    rng = np.random.default_rng(0)
    return rng.integers(0, 256, size=(24, 40), dtype=np.uint8)


@pytest.fixture
def stereo_config():
    return DepthConfig(
        block_size=5,
        max_disparity=8,
        smoothing=True,
        normalize=True,
        center_bias=0.4,
        edge_weight=0.6,
    )
