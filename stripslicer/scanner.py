"""Find quiet rows in a tall image and cut it into strips along them."""

from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image


def _as_pixels(pixels) -> np.ndarray:
    """Return *pixels* as a (height, width, channels) uint8 array."""
    arr = np.asarray(pixels)
    if arr.ndim == 2:
        arr = arr[:, :, np.newaxis]
    if arr.ndim != 3:
        raise ValueError("expected an image of shape (height, width[, channels])")
    if arr.dtype != np.uint8:
        if not np.issubdtype(arr.dtype, np.integer) or (
            arr.size and (arr.min() < 0 or arr.max() > 255)
        ):
            raise ValueError("pixel values must be 8-bit unsigned integers")
        arr = arr.astype(np.uint8)
    return arr


def _max_diff(row: np.ndarray, reference: np.ndarray) -> int:
    """Largest absolute channel difference between *row* and *reference*."""
    diff = np.abs(row - reference)
    return int(diff.max()) if diff.size else 0


def _refine_split(wide: np.ndarray, split_line: int, threshold: int, aura_margin: int) -> int:
    """Move a cut line up when the rows right below it are not quiet."""
    height = wide.shape[0]
    if aura_margin + split_line >= height:
        return split_line

    base = wide[split_line, :1]
    needs_split = aura_margin <= 1 or any(
        _max_diff(wide[split_line + offset], base) > threshold
        for offset in range(1, aura_margin)
    )
    if not needs_split:
        return split_line

    correction = 0
    for offset in range(1, 2 * aura_margin):
        above = split_line - offset
        if above < 0:
            raise ValueError(f"no room above row {split_line} to adjust the cut line")
        correction = offset // 2
        if _max_diff(wide[above], base) > threshold:
            break
    return split_line - correction


def find_cut_lines(pixels, threshold, crop_height, aura_margin, scan_step, central=False):
    """Return the row boundaries of the strips, starting at 0 and ending at the height.

    A row counts as quiet when it differs from the next row by at most
    *threshold* in every channel.  With *central* the next row is
    represented by its middle pixel only.
    """
    img = _as_pixels(pixels)
    height, width, _ = img.shape
    if height == 0:
        raise ValueError("image has no rows")
    if scan_step <= 0:
        raise ValueError("scan step must be positive")
    if not 0 <= threshold <= 255:
        raise ValueError("threshold must be between 0 and 255")
    if crop_height < 0 or aura_margin < 0:
        raise ValueError("crop height and aura margin must not be negative")

    wide = img.astype(np.int16)
    center = width // 2
    next_crop_start = crop_height
    split_line = 0
    boundaries = [0]

    for row in range(0, height - 1, scan_step):
        if row >= next_crop_start:
            split_line = _refine_split(wide, split_line, threshold, aura_margin)
            boundaries.append(split_line)
            next_crop_start = split_line + crop_height

        following = wide[row + 1, center:center + 1] if central else wide[row + 1]
        if _max_diff(wide[row], following) <= threshold:
            split_line = row

    boundaries.append(height)
    return boundaries


def crop_strips(pixels, boundaries):
    """Return the horizontal strips between consecutive boundaries."""
    img = _as_pixels(pixels)
    height = img.shape[0]
    strips = []
    for start, end in zip(boundaries, boundaries[1:]):
        if not 0 <= start <= end <= height:
            raise ValueError(f"invalid strip boundaries {start}..{end} for height {height}")
        strips.append(img[start:end])
    return strips


def save_strips(pixels, boundaries, out_dir, name):
    """Write each non-empty strip to ``<out_dir>/<name>_<index>.png``; return the paths."""
    out_dir = Path(out_dir)
    written = []
    for index, strip in enumerate(crop_strips(pixels, boundaries)):
        if strip.shape[0] == 0 or strip.shape[1] == 0:
            continue
        target = out_dir / f"{name}_{index}.png"
        target.parent.mkdir(parents=True, exist_ok=True)
        data = strip[:, :, 0] if strip.shape[2] == 1 else strip
        Image.fromarray(np.ascontiguousarray(data)).save(target)
        written.append(target)
    return written