import threading

import numpy as np
import pytest

from stereo.block_match import block_match
from stereo.errors import DepthCancelled


def test_identical_images_give_zero(textured):
    disp = block_match(textured, textured.copy(), 5, 8)
    assert disp.shape == textured.shape
    assert disp.dtype == np.float32
    assert np.all(disp == 0)


@pytest.mark.parametrize("k", [1, 3, 6])
def test_recovers_constant_shift(textured, k):
    # right(x, y) = left(x + k, y)
    right = np.zeros_like(textured)
    right[:, :-k] = textured[:, k:]
    block_size, half = 5, 2

    disp = block_match(textured, right, block_size, 8)

    H, W = textured.shape
    np.testing.assert_array_equal(disp[half:H - half, half + k:W - half], k)


def test_borders_are_zero(textured):
    right = np.zeros_like(textured)
    right[:, :-3] = textured[:, 3:]
    disp = block_match(textured, right, 7, 8)
    half = 3
    assert np.all(disp[:half, :] == 0)
    assert np.all(disp[-half:, :] == 0)
    assert np.all(disp[:, :half] == 0)
    assert np.all(disp[:, -half:] == 0)


def test_search_limited_by_column():
    # every candidate ties on a flat image, so the result is always 0,
    # and the search must never read left of column 0
    flat = np.full((9, 9), 50, dtype=np.uint8)
    disp = block_match(flat, flat, 3, 100)
    assert np.all(disp == 0)


def test_ties_go_to_smallest_disparity():
    # period-2 columns: d = 0 and d = 2 both give SAD 0 on the shifted pair
    row = np.tile(np.array([10, 200], dtype=np.uint8), 8)
    left = np.tile(row, (7, 1))
    right = np.zeros_like(left)
    right[:, :-2] = left[:, 2:]
    right[:, -2:] = left[:, -2:]
    disp = block_match(left, right, 3, 4)
    assert np.all(disp[1:-1, 1:-1] == 0)


def test_block_larger_than_image_gives_zero():
    a = np.random.default_rng(2).integers(0, 256, size=(4, 4), dtype=np.uint8)
    disp = block_match(a, a[:, ::-1].copy(), 5, 3)
    assert np.all(disp == 0)


def test_inputs_not_modified(textured):
    right = np.roll(textured, -2, axis=1)
    l0, r0 = textured.copy(), right.copy()
    block_match(textured, right, 3, 4)
    np.testing.assert_array_equal(textured, l0)
    np.testing.assert_array_equal(right, r0)


def test_cancel_event_stops_matching(textured):
    ev = threading.Event()
    ev.set()
    with pytest.raises(DepthCancelled):
        block_match(textured, textured, 5, 8, cancel_event=ev)


def test_unset_cancel_event_is_harmless(textured):
    disp = block_match(textured, textured, 5, 8, cancel_event=threading.Event())
    assert np.all(disp == 0)
