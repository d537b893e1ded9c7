"""Cut an image where a row matches the next row across its full width."""

from __future__ import annotations

from stripslicer.scanner import find_cut_lines, save_strips


def slasher(pixels, out_dir, name, threshold, crop_height, aura_margin, scan_step):
    """Cut *pixels* into strips saved as ``<name>_<i>.png`` in *out_dir*; return the paths."""
    boundaries = find_cut_lines(
        pixels, threshold, crop_height, aura_margin, scan_step, central=False
    )
    return save_strips(pixels, boundaries, out_dir, name)