# rangeseg

Segmentation of range images, such as the depth images produced by rotating
lidar scanners, into connected clusters.

A depth image is a 2-D `numpy` array of `float32` readings in metres. Pixels
whose reading is below `0.001` are treated as empty. Neighbouring pixels join
the same cluster when a *difference helper* says they belong together. The
column direction wraps around, as in a full 360° scan.

## Installation

```
pip install .
```

Only `numpy` is required. To run the tests, install the `test` extra
(`pip install .[test]`) and run `pytest`.

## Projection parameters

The angle-based helpers and the labeler take a `params` object describing how
the image was projected. The package does not provide one; any object with
these members will do:

- `rows`, `cols`: the image size (ints);
- `h_span`: the horizontal span in radians;
- `angle_from_row(row)`, `angle_from_col(col)`: the beam angle, in radians, of
  a row or a column.

```python
import math

class Params:
    def __init__(self, rows, cols, step_deg=1.0):
        self.rows, self.cols = rows, cols
        self._step = math.radians(step_deg)
        self.h_span = cols * self._step

    def angle_from_row(self, row):
        return row * self._step

    def angle_from_col(self, col):
        return col * self._step
```

## Pixel coordinates

`rangeseg.pixel_coords.PixelCoord(row, col)` is a frozen dataclass addressing a
pixel. Adding two coordinates gives their element-wise sum.

## Difference helpers

All helpers derive from `rangeseg.abstract_diff.AbstractDiff`, which offers
`diff_at(from_coord, to_coord)`, `satisfies_threshold(value, threshold)` and
`visualize()`. By default `visualize()` returns an empty `(0, 0, 3)` `uint8`
array.

- `SimpleDiff` (`rangeseg.abstract_diff`): the absolute difference of the two
  readings. The threshold is met when the difference is *below* it.
- `AngleDiff` and `AngleDiffPrecomputed` (`rangeseg.angle_diff`): the angle
  β = |atan2(d2·sin α, d1 − d2·cos α)|, where d1 and d2 are the larger and
  smaller reading and α is the angle between the two beams. The threshold is
  met when β is *above* it. `AngleDiff` computes β when asked; the
  precomputed variant fills the tables `beta_rows` and `beta_cols` for the
  whole image up front.
- `LineDistDiff` and `LineDistDiffPrecomputed` (`rangeseg.line_dist_diff`):
  the value d1·sin β. The threshold is met when it is above the threshold.
  The precomputed variant fills `dists_row` and `dists_col`.

In the precomputed tables, entry `[r, c]` of the row table relates pixel
`(r, c)` to `(r + 1, c)` (the last row is zero), and entry `[r, c]` of the
column table relates `(r, c)` to `(r, c + 1)`, the last column wrapping onto
the first. Pixels with a reading below `0.001` get zero. Asking a precomputed
helper for the difference of a pixel with itself raises `ValueError`.

The precomputed helpers' `visualize()` returns an `(rows, cols, 3)` `uint8`
image: channel 0 is `255 − 255·(row value / scale)`, channel 1 the same for the
column value, channel 2 is zero, and pixels with a reading below `0.01` stay
black. The scale is 90° for angles and 20 m for line distances.

Choose a helper by kind with `rangeseg.diff_factory`:

```python
from rangeseg.diff_factory import DiffType, build_diff

helper = build_diff(DiffType.ANGLES_PRECOMPUTED, depth_image, params)
```

`DiffType` has the members `SIMPLE`, `ANGLES`, `ANGLES_PRECOMPUTED`,
`LINE_DIST`, `LINE_DIST_PRECOMPUTED` and `NONE`. `build_diff` raises
`ValueError` for `NONE`, and for every kind except `SIMPLE` when `params` is
`None`.

## Labelling an image

```python
import math
from rangeseg.diff_factory import DiffType
from rangeseg.linear_image_labeler import LinearImageLabeler

labeler = LinearImageLabeler(depth_image, params, math.radians(20),
                             step_row=1, step_col=1)
labeler.compute_labels(DiffType.ANGLES)
labels = labeler.label_image          # uint16 array, 0 marks unlabelled pixels
```

The threshold is given in radians. Labels start at 1 and are handed out in
scan order: row by row, left to right. Each cluster grows from its first pixel
by breadth-first search over `labeler.neighborhood`, which reaches `step_row`
pixels up and down and `step_col` pixels left and right; rows do not wrap,
columns do (`wrap_cols`). An empty pixel reached from a cluster gets that
cluster's label but is not grown from. `label_one_component(label, start,
diff_helper)` labels a single cluster with a helper you supply.

`LinearImageLabeler` derives from
`rangeseg.abstract_image_labeler.AbstractImageLabeler`, which holds the
`depth_image` (settable), `params` and `label_image`.

`labels_to_color(label_image)` in the same module turns a label image into an
`(rows, cols, 3)` `uint8` image, taking colours from the fixed 200-entry
palette `RANDOM_COLORS` by label modulo 200.

## Queue of coordinates

`rangeseg.hash_queue.HashQueue` is a FIFO queue of `PixelCoord`s with `push`,
`pop` (returns the front), `front` and `len()`. `coord in queue` is true for
any coordinate that has ever been pushed, even after it was popped. `pop` and
`front` on an empty queue raise `IndexError`.

## What the package does not do

It works on depth images only. It does not read sensor data, project point
clouds into images or turn images back into clouds, provide projection
parameters for particular scanners, remove ground points, or offer a command
line or viewer.