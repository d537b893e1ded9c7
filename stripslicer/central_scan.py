"""Cut an image where a row matches the middle pixel of the next row."""

from __future__ import annotations

from stripslicer.scanner import find_cut_lines, save_strips


def slasher_central(pixels, out_dir, name, threshold, crop_height, aura_margin, scan_step):
    """Cut *pixels* using the centre-pixel comparison; return the saved paths."""
    boundaries = find_cut_lines(
        pixels, threshold, crop_height, aura_margin, scan_step, central=True
    )
    return save_strips(pixels, boundaries, out_dir, name)