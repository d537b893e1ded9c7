import numpy as np
import pytest
from PIL import Image

from stripslicer.scanner import crop_strips, find_cut_lines, save_strips


def _uniform(height=50, width=4, value=100):
    return np.full((height, width, 3), value, dtype=np.uint8)


def _noise(height=40, width=8, low=0, high=256, seed=1):
    rng = np.random.default_rng(seed)
    return rng.integers(low, high, size=(height, width, 3), dtype=np.uint8)


def test_single_row_image_is_one_strip():
    assert find_cut_lines(_uniform(height=1), 0, 10, 3, 1) == [0, 1]


def test_crop_height_larger_than_image_gives_no_cuts():
    assert find_cut_lines(_uniform(height=30), 0, 100, 3, 1) == [0, 30]


def test_boundaries_cover_image_in_order():
    bounds = find_cut_lines(_uniform(), 0, 10, 3, 1)
    assert bounds[0] == 0
    assert bounds[-1] == 50
    assert bounds == sorted(bounds)
    assert len(bounds) > 2


def test_uniform_strips_are_not_taller_than_crop_height():
    bounds = find_cut_lines(_uniform(), 0, 10, 3, 1)
    gaps = [b - a for a, b in zip(bounds, bounds[1:-1])]
    assert all(0 < gap <= 10 for gap in gaps)


def test_threshold_tolerates_small_noise():
    quiet = _noise(height=50, width=4, low=100, high=105)
    assert find_cut_lines(quiet, 10, 10, 3, 1) == find_cut_lines(_uniform(), 10, 10, 3, 1)


def test_noise_without_room_above_raises():
    with pytest.raises(ValueError):
        find_cut_lines(_noise(), 0, 10, 2, 1)


def test_noise_with_zero_aura_cuts_at_top():
    bounds = find_cut_lines(_noise(), 0, 10, 0, 1)
    assert bounds[-1] == 40
    assert set(bounds[:-1]) == {0}


@pytest.mark.parametrize(
    "kwargs",
    [
        {"threshold": 0, "crop_height": 10, "aura_margin": 3, "scan_step": 0},
        {"threshold": 256, "crop_height": 10, "aura_margin": 3, "scan_step": 1},
        {"threshold": 0, "crop_height": -1, "aura_margin": 3, "scan_step": 1},
    ],
)
def test_invalid_parameters_raise(kwargs):
    with pytest.raises(ValueError):
        find_cut_lines(_uniform(), **kwargs)


def test_empty_image_raises():
    with pytest.raises(ValueError):
        find_cut_lines(np.zeros((0, 4, 3), dtype=np.uint8), 0, 10, 3, 1)


def test_crop_strips_reassemble():
    img = _noise(height=30, width=5)
    strips = crop_strips(img, [0, 7, 7, 20, 30])
    assert [s.shape[0] for s in strips] == [7, 0, 13, 10]
    assert np.array_equal(np.concatenate(strips, axis=0), img)


def test_crop_strips_rejects_decreasing_boundaries():
    with pytest.raises(ValueError):
        crop_strips(_uniform(height=20), [0, 10, 5, 20])


def test_save_strips_round_trip(tmp_path):
    img = _noise(height=30, width=5)
    paths = save_strips(img, [0, 10, 10, 30], tmp_path, "pic")
    assert [p.name for p in paths] == ["pic_0.png", "pic_2.png"]
    loaded = [np.asarray(Image.open(p)) for p in paths]
    assert np.array_equal(np.concatenate(loaded, axis=0), img)


def test_save_strips_single_channel(tmp_path):
    gray = np.arange(60, dtype=np.uint8).reshape(12, 5)
    paths = save_strips(gray, [0, 12], tmp_path, "g")
    assert np.array_equal(np.asarray(Image.open(paths[0])), gray)