# stripslicer

stripslicer cuts very tall images, such as long comic strips, into shorter
strips. It cuts only on rows that are uniform, so panels and text are not
split in the middle.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Command-line use

```
stripslicer --input path/to/images
```

The command walks the input folder and reads every file it finds there as an
image. Each image is converted to RGB. If `--input` names a single file, only
that file is processed. For each image the command creates a folder named
after the file stem. The strips are written into that folder as
`<name>_0.png`, `<name>_1.png`, and so on. A progress bar shows how many
images have been handled.

| Option | Default | Meaning |
| --- | --- | --- |
| `-i`, `--input` | required | Folder (or file) holding the images |
| `-o`, `--output` | the input folder | Folder where results are written |
| `-t`, `--threshold` | `0` | Largest per-channel difference (0–255) that still counts as uniform |
| `-h`, `--crop-height` | `15000` | Rows after the last cut before the next cut is looked for |
| `-a`, `--aura-margin` | `100` | Rows below a candidate cut that must also be uniform |
| `-s`, `--scan-step` | `5` | Step between scanned rows, in pixels |
| `-f`, `--folder-mode` | off | Join the images of each folder from top to bottom before cutting |
| `-c`, `--central-scan` | off | Compare each row with the centre pixel of the row below it |
| `--help` | | Show help and exit |

`-h` sets the crop height. Help is shown only by `--help`.

In folder mode, the images in each folder are joined from top to bottom, in
file-name order, into one tall image. They must all have the same width.
When a folder holds more than one image, the output folder is named after
that folder's path relative to the input folder. Images that sit directly in
the input folder are written straight into the output folder.

If a strip cannot be cut or saved, an error line is printed and the command
moves on to the next image. If a file cannot be read as an image, the command
stops, prints an error, and exits with status 1.

## How cuts are chosen

Rows are scanned every `scan_step` pixels. A row is *quiet* when it differs
from the row below it by at most `threshold` in every channel. With
`--central-scan`, the row is compared only with the middle pixel of the row
below it. Once `crop_height` rows have passed since the last cut, the most
recent quiet row becomes the next cut. If the rows just below that cut, up to
`aura_margin` of them, are not uniform, the cut is moved up.

## Library use

```python
import numpy as np
from stripslicer.scanner import find_cut_lines, crop_strips, save_strips

pixels = np.zeros((40000, 800, 3), dtype=np.uint8)
boundaries = find_cut_lines(pixels, 0, 15000, 100, 5, False)
strips = crop_strips(pixels, boundaries)      # list of (h, w, c) arrays
paths = save_strips(pixels, boundaries, "out", "page")
```

- `find_cut_lines` returns the row boundaries. The list starts at `0` and ends
  at the image height. Invalid arguments raise `ValueError`.
- `crop_strips` returns the slices between consecutive boundaries.
- `save_strips` writes every non-empty strip as `<name>_<index>.png` and
  returns the paths it wrote.
- `stripslicer.standard.slasher` and
  `stripslicer.central_scan.slasher_central` find the cut lines and save the
  strips in one call. They compare against the full next row and the centre
  pixel of the next row, respectively.
- `stripslicer.cli` provides `collect_groups`, `load_group`, `group_name` and
  `process_image`. These are the steps the command uses. `main(argv)` returns
  the exit status.