"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np

# Quarter-circle cubic handle length: 4/3·(√2 - 1).
KAPPA = 0.5522847498307936


def merge_bboxes(
    boxes: list[tuple[float, float, float, float]],
) -> tuple[float, float, float, float]:
    """Union of (xmin, ymin, xmax, ymax) boxes."""
    if not boxes:
        return (0.0, 0.0, 0.0, 0.0)
    arr = np.array(boxes, dtype=np.float64)
    return (
        float(np.min(arr[:, 0])),
        float(np.min(arr[:, 1])),
        float(np.max(arr[:, 2])),
        float(np.max(arr[:, 3])),
    )
