"""Command line tool that cuts tall images into strips."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

import numpy as np
from PIL import Image
from tqdm import tqdm

from stripslicer.central_scan import slasher_central
from stripslicer.standard import slasher

DEFAULT_THRESHOLD = 0
DEFAULT_CROP_HEIGHT = 15_000
DEFAULT_AURA_MARGIN = 100
DEFAULT_SCAN_STEP = 5


def _iter_files(root: Path):
    if root.is_file():
        yield root
        return
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        for filename in sorted(filenames):
            path = Path(dirpath) / filename
            if path.is_file():
                yield path


def collect_groups(input_root, folder_mode):
    """Group the files under *input_root*: one per file, or one per folder."""
    root = Path(input_root)
    if not folder_mode:
        return [[path] for path in _iter_files(root)]
    folders: dict[Path, list[Path]] = {}
    for path in _iter_files(root):
        try:
            rel = path.parent.relative_to(root)
        except ValueError:
            rel = Path()
        folders.setdefault(rel, []).append(path)
    return list(folders.values())


def load_group(paths):
    """Read the images as RGB and stack them top to bottom."""
    if not paths:
        raise ValueError("no images to load")
    arrays = []
    for path in paths:
        with Image.open(path) as img:
            arrays.append(np.asarray(img.convert("RGB")))
    widths = {arr.shape[1] for arr in arrays}
    if len(widths) > 1:
        raise ValueError(f"images have different widths: {sorted(widths)}")
    return np.concatenate(arrays, axis=0)


def group_name(group, input_root):
    """Name for the output: the file stem, or the relative folder for several files."""
    first = Path(group[0])
    if len(group) > 1:
        try:
            rel = first.parent.relative_to(Path(input_root))
        except ValueError:
            return ""
        return "" if rel == Path() else str(rel)
    return first.stem or "unnamed"


def process_image(name, pixels, output_root, threshold, crop_height, aura_margin, scan_step, central):
    """Cut *pixels* into ``<output_root>/<name>/``; return the written paths."""
    target = Path(output_root) / name
    target.mkdir(parents=True, exist_ok=True)
    cut = slasher_central if central else slasher
    return cut(pixels, target, name, threshold, crop_height, aura_margin, scan_step)


def _threshold(text: str) -> int:
    value = int(text)
    if not 0 <= value <= 255:
        raise argparse.ArgumentTypeError("threshold must be between 0 and 255")
    return value


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError("value must not be negative")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stripslicer", description="Cut tall images into strips.", add_help=False
    )
    parser.add_argument("--help", action="help", help="show this help message and exit")
    parser.add_argument("-i", "--input", type=Path, required=True, help="input folder with images")
    parser.add_argument("-o", "--output", type=Path, help="output folder (defaults to the input)")
    parser.add_argument("-t", "--threshold", type=_threshold, default=DEFAULT_THRESHOLD)
    parser.add_argument("-h", "--crop-height", type=_non_negative, default=DEFAULT_CROP_HEIGHT,
                        help="strip height in pixels")
    parser.add_argument("-a", "--aura-margin", type=_non_negative, default=DEFAULT_AURA_MARGIN,
                        help="aura margin in pixels")
    parser.add_argument("-s", "--scan-step", type=_non_negative, default=DEFAULT_SCAN_STEP,
                        help="scan step in pixels")
    parser.add_argument("-f", "--folder-mode", action="store_true",
                        help="join all images of a folder into one")
    parser.add_argument("-c", "--central-scan", action="store_true",
                        help="compare rows with the centre pixel of the next row")
    return parser


def main(argv=None):
    args = _build_parser().parse_args(argv)
    try:
        input_root = args.input.resolve(strict=True)
        output_root = args.output if args.output is not None else input_root
        output_root.mkdir(parents=True, exist_ok=True)
        groups = collect_groups(input_root, args.folder_mode)
        total = sum(len(group) for group in groups)
        with tqdm(
            total=total,
            bar_format="[{elapsed}] [{bar:40}] {n_fmt}/{total_fmt} {postfix}",
        ) as bar:
            for group in groups:
                pixels = load_group(group)
                name = group_name(group, input_root)
                bar.set_postfix_str(name)
                try:
                    process_image(
                        name, pixels, output_root, args.threshold, args.crop_height,
                        args.aura_margin, args.scan_step, args.central_scan,
                    )
                except (OSError, ValueError) as exc:
                    print(f"Error processing {name}: {exc}", file=sys.stderr)
                bar.update(len(group))
            bar.set_postfix_str("Done!")
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())