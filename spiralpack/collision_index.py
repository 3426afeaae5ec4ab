from typing import Iterator, List

import numpy as np

from spiralpack.geometry import Rectangle


class CollisionIndex:
    """Ordered store of placed rectangles answering "does a candidate overlap any of them?".

    Rectangles are kept in placement order. Next to the list, the (left, top, right, bottom)
    bounds live in a preallocated int64 array so that a query is a single vectorized pass
    instead of a python loop over every stored rectangle.

    Parameters
    ----------
        initial_capacity: Number of rows allocated up front. The bounds array doubles whenever
            it fills up.
    """

    def __init__(self, initial_capacity: int = 64):
        self._rectangles: List[Rectangle] = []
        self._bounds = np.empty((max(1, initial_capacity), 4), dtype=np.int64)

    def __len__(self) -> int:
        return len(self._rectangles)

    def __iter__(self) -> Iterator[Rectangle]:
        return iter(self._rectangles)

    def __getitem__(self, index):
        return self._rectangles[index]

    @property
    def rectangles(self) -> List[Rectangle]:
        return list(self._rectangles)

    @property
    def bounds(self) -> np.ndarray:
        """(n, 4) view with the left, top, right and bottom edge of every stored rectangle."""
        return self._bounds[: len(self._rectangles)]

    def add(self, rectangle: Rectangle):
        n = len(self._rectangles)
        if n == self._bounds.shape[0]:
            grown = np.empty((2 * n, 4), dtype=np.int64)
            grown[:n] = self._bounds
            self._bounds = grown

        self._bounds[n] = (rectangle.left, rectangle.top, rectangle.right, rectangle.bottom)
        self._rectangles.append(rectangle)

    def intersects_any(self, rectangle: Rectangle) -> bool:
        if not self._rectangles:
            return False

        b = self.bounds
        overlaps = (
            (b[:, 0] < rectangle.right)
            & (rectangle.left < b[:, 2])
            & (b[:, 1] < rectangle.bottom)
            & (rectangle.top < b[:, 3])
        )
        return bool(overlaps.any())

    def is_free(self, rectangle: Rectangle) -> bool:
        return not self.intersects_any(rectangle)

    def truncate(self, count: int):
        """Keep only the first `count` rectangles."""
        if count < 0 or count > len(self._rectangles):
            raise ValueError(
                f"Cannot truncate an index of {len(self._rectangles)} rectangles to {count}."
            )
        del self._rectangles[count:]

    def clear(self):
        self.truncate(0)
