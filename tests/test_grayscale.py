import numpy as np
import pytest

from stereo.grayscale import to_grayscale


@pytest.mark.parametrize("k", [0, 1, 17, 100, 128, 254, 255])
def test_gray_pixels_keep_their_value(k):
    img = np.full((2, 3, 4), k, dtype=np.uint8)
    img[:, :, 3] = 0
    assert np.all(to_grayscale(img) == k)


def test_luminosity_weights_and_alpha_ignored():
    img = np.zeros((1, 3, 4), dtype=np.uint8)
    img[0, 0] = (255, 0, 0, 0)
    img[0, 1] = (0, 255, 0, 255)
    img[0, 2] = (0, 0, 255, 17)
    # 76.245, 149.685, 29.07
    assert to_grayscale(img).tolist() == [[76, 150, 29]]


def test_output_shape_and_input_untouched():
    img = np.random.default_rng(1).integers(0, 256, size=(5, 7, 4), dtype=np.uint8)
    before = img.copy()
    gray = to_grayscale(img)
    assert gray.shape == (5, 7)
    assert gray.dtype == np.uint8
    np.testing.assert_array_equal(img, before)


@pytest.mark.parametrize("rgb, expected", [
    ((0, 114, 163), 86),
    ((0, 0, 0), 0),
    ((255, 255, 255), 255),
])
def test_half_values_round_up(rgb, expected):
    img = np.zeros((1, 1, 4), dtype=np.uint8)
    img[0, 0, :3] = rgb
    assert to_grayscale(img)[0, 0] == expected


def test_matches_left_to_right_sum():
    rng = np.random.default_rng(7)
    img = rng.integers(0, 256, size=(64, 64, 4), dtype=np.uint8)
    gray = to_grayscale(img)
    for y, x in np.ndindex(64, 64):
        r, g, b = (float(v) for v in img[y, x, :3])
        assert gray[y, x] == int(np.floor(0.299 * r + 0.587 * g + 0.114 * b + 0.5))
