import math
import operator
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from spiralpack.circumscribed_circle import CircumscribedCircle
from spiralpack.collision_index import CollisionIndex
from spiralpack.geometry import Point, Rectangle, Size

DEFAULT_CIRCULARITY_THRESHOLD = 0.6
DEFAULT_ANGLE_STEP = math.pi / 180

PointLike = Union[Point, Tuple[int, int]]
SizeLike = Union[Size, Tuple[int, int]]


class PackerMode(str, Enum):
    idle = "idle"
    replaying = "replaying"


@dataclass
class PackerState:
    rectangles: List[Rectangle]
    angles: List[float]
    spiral_angle: float
    total_area: int


def archimedean_spiral(center: Point, angle: float, parameter: float = 1.0) -> Point:
    """Point of the spiral r = parameter * angle around center, rounded half to even to pixels."""
    radius = parameter * angle
    return Point(
        center.x + int(round(radius * math.cos(angle))),
        center.y + int(round(radius * math.sin(angle))),
    )


def _as_size(size: SizeLike) -> Size:
    width, height = size
    size = Size(operator.index(width), operator.index(height))
    if size.width <= 0 or size.height <= 0:
        raise ValueError(
            f"Invalid rectangle size: {tuple(size)}. Both width and height should be positive."
        )
    return size


class SpiralPacker:
    """Circular cloud layout of axis-aligned rectangles.

    Rectangles are placed one by one around a fixed center. Each one is put on the first free
    position of an Archimedean spiral, continuing from where the previous search stopped. After
    every placement the layout is compared against a circle: if the covered area is too small
    compared to the circle enclosing the last rectangle, the rectangles are re-packed in
    descending area order, which moves the big ones near the center.

    Parameters
    ----------
    center: Point or (x, y)
        The center of the layout. It does not change during the lifetime of the packer.

    circularity_threshold: float (default 0.6)
        Minimal ratio between the covered area and the area of the circle around the last
        rectangle for the layout to count as circular. Below it a re-pack is triggered.

    angle_step: float (default pi / 180)
        The increment of the spiral angle between two candidate positions.

    spiral_parameter: float (default 1.0)
        Coefficient of the spiral r = spiral_parameter * angle.

    verbose: bool (default False)
        Print a line every time a re-pack takes place.

    Attributes
    ----------
    mode: PackerMode
        `replaying` while a re-pack places the discarded rectangles again, `idle` otherwise. The
        circularity check is skipped while replaying.
    """

    def __init__(
        self,
        center: PointLike,
        circularity_threshold: float = DEFAULT_CIRCULARITY_THRESHOLD,
        angle_step: float = DEFAULT_ANGLE_STEP,
        spiral_parameter: float = 1.0,
        verbose: bool = False,
    ):
        if not 0 < circularity_threshold < 1:
            raise ValueError(
                f"The circularity threshold should be in (0, 1), given {circularity_threshold}."
            )
        if angle_step <= 0:
            raise ValueError(f"The angle step should be positive, given {angle_step}.")
        if spiral_parameter <= 0:
            raise ValueError(
                f"The spiral parameter should be positive, given {spiral_parameter}."
            )

        self._center = Point(*center)
        self.circularity_threshold = circularity_threshold
        self.angle_step = angle_step
        self.spiral_parameter = spiral_parameter
        self.verbose = verbose

        self._circle = CircumscribedCircle(self._center)
        self._index = CollisionIndex()
        # One entry per placed rectangle: the spiral angle right after it was found.
        self._angles: List[float] = []
        self._spiral_angle = 0.0
        self._total_area = 0
        self.mode = PackerMode.idle

    def __len__(self) -> int:
        return len(self._index)

    @property
    def center(self) -> Point:
        return self._center

    @property
    def rectangles(self) -> List[Rectangle]:
        return self._index.rectangles

    @property
    def angles(self) -> List[float]:
        return list(self._angles)

    @property
    def spiral_angle(self) -> float:
        return self._spiral_angle

    @property
    def total_area(self) -> int:
        return self._total_area

    @property
    def last_rectangle(self) -> Optional[Rectangle]:
        return self._index[-1] if len(self._index) else None

    def state(self) -> PackerState:
        return PackerState(
            rectangles=self.rectangles,
            angles=self.angles,
            spiral_angle=self._spiral_angle,
            total_area=self._total_area,
        )

    def place_next(self, size: SizeLike) -> Rectangle:
        """Place a rectangle of the given size on the first free position of the spiral.

        Parameters
        ----------
            size: Width and height of the rectangle, both positive integers.

        Returns
        -------
            rectangle: The placed rectangle, at its final position. If the placement caused a
            re-pack, this is the position the rectangle got in the re-packed layout.
        """
        size = _as_size(size)

        while True:
            candidate = Rectangle.centered_at(
                archimedean_spiral(self._center, self._spiral_angle, self.spiral_parameter),
                size,
            )
            self._spiral_angle += self.angle_step
            if self._index.is_free(candidate):
                break

        self._index.add(candidate)
        self._angles.append(self._spiral_angle)
        self._total_area += candidate.area

        if self.mode == PackerMode.idle and not self.looks_like_circle():
            return self._repack_and_locate(len(self._index) - 1)
        return candidate

    def circularity_ratio(self) -> float:
        """Covered area divided by the area of the circle around center enclosing the last rectangle."""
        last = self.last_rectangle
        if last is None:
            return 0.0
        return self._total_area / self._circle.area(last)

    def looks_like_circle(self) -> bool:
        if not len(self._index):
            return True
        return self.circularity_ratio() > self.circularity_threshold

    def repack(self) -> bool:
        """Re-place the rectangles which break the descending area order.

        The longest prefix of the layout which is already sorted by descending area is kept. The
        rest is discarded and placed again in sorted order, with the spiral resuming from the
        angle of the last kept rectangle.

        Returns
        -------
            changed: False if the layout was already sorted and nothing was touched.
        """
        return self._repack_order() is not None

    def _sorted_order(self) -> np.ndarray:
        areas = np.array([r.area for r in self._index], dtype=np.int64)
        return np.argsort(-areas, kind="stable")

    def _repack_order(self) -> Optional[np.ndarray]:
        order = self._sorted_order()
        n = len(order)
        diverging = np.nonzero(order != np.arange(n))[0]
        if diverging.size == 0:
            return None
        keep = int(diverging[0])

        sizes: Sequence[Size] = [self._index[i].size for i in order[keep:]]
        if self.verbose:
            print(
                f"Layout circularity {self.circularity_ratio():.3f} below {self.circularity_threshold}, "
                f"keeping {keep} rectangles and placing {len(sizes)} again."
            )

        self._index.truncate(keep)
        del self._angles[keep:]
        self._spiral_angle = self._angles[-1] if self._angles else 0.0
        self._total_area = sum(r.area for r in self._index)

        self.mode = PackerMode.replaying
        try:
            for size in sizes:
                self.place_next(size)
        finally:
            self.mode = PackerMode.idle

        return order

    def _repack_and_locate(self, placed_index: int) -> Rectangle:
        order = self._repack_order()
        if order is None:
            return self._index[placed_index]
        # Replay follows the sorted order, so the rank of the placed item is its new slot.
        return self._index[int(np.nonzero(order == placed_index)[0][0])]
