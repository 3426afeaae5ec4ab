from typing import Optional, Sequence

import numpy as np

from spiralpack.circumscribed_circle import circle_area
from spiralpack.geometry import Point, Rectangle


def rectangles_to_array(rectangles: Sequence[Rectangle]) -> np.ndarray:
    """
    Convert a layout into an integer array for rendering or export.

    Parameters
    ----------
    rectangles : sequence[Rectangle]
        The placed rectangles, in layout order.

    Returns
    -------
    array : np.ndarray
        Array of shape (n, 4) with columns (x, y, width, height), rows in layout order.
    """
    if not rectangles:
        return np.zeros((0, 4), dtype=np.int64)
    return np.array([tuple(r) for r in rectangles], dtype=np.int64)


def bounding_box(rectangles: Sequence[Rectangle]) -> Optional[Rectangle]:
    """Smallest rectangle containing the whole layout, None for an empty one."""
    if not rectangles:
        return None
    a = rectangles_to_array(rectangles)
    left, top = a[:, 0].min(), a[:, 1].min()
    right = (a[:, 0] + a[:, 2]).max()
    bottom = (a[:, 1] + a[:, 3]).max()
    return Rectangle(int(left), int(top), int(right - left), int(bottom - top))


def layout_circularity(rectangles: Sequence[Rectangle], center: Point) -> float:
    """Total area of the layout over the area of the circle around center enclosing its last rectangle."""
    if not rectangles:
        return 0.0
    total_area = int(rectangles_to_array(rectangles)[:, 2:].prod(axis=1).sum())
    return total_area / circle_area(rectangles[-1], Point(*center))


def find_intersections(rectangles: Sequence[Rectangle]) -> np.ndarray:
    """
    All-pairs audit of a layout.

    Returns
    -------
    pairs : np.ndarray
        Array of shape (k, 2) with the index pairs i < j of intersecting rectangles. Empty for a
        valid layout.
    """
    n = len(rectangles)
    if n <= 1:
        return np.zeros((0, 2), dtype=np.int64)

    a = rectangles_to_array(rectangles)
    left, top = a[:, 0], a[:, 1]
    right, bottom = left + a[:, 2], top + a[:, 3]

    iu, ju = np.triu_indices(n, 1)
    overlaps = (
        (left[ju] < right[iu])
        & (left[iu] < right[ju])
        & (top[ju] < bottom[iu])
        & (top[iu] < bottom[ju])
    )
    return np.stack([iu[overlaps], ju[overlaps]], axis=1).astype(np.int64)
