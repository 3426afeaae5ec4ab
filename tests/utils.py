from typing import List, Sequence

import numpy as np

from spiralpack import Rectangle, Size, SpiralPacker, find_intersections


def generate_sizes(
    n: int, low: int = 5, high: int = 40, seed: int = 636
) -> List[Size]:
    """Reproducible sequence of n random sizes with both sides in [low, high)."""
    random_state = np.random.RandomState(seed)
    sides = random_state.randint(low, high, size=(n, 2))
    return [Size(int(w), int(h)) for w, h in sides]


def place_all(packer: SpiralPacker, sizes: Sequence[Size]) -> List[Rectangle]:
    return [packer.place_next(size) for size in sizes]


def assert_no_intersections(rectangles: Sequence[Rectangle]):
    pairs = find_intersections(rectangles)
    assert len(pairs) == 0, f"Intersecting rectangles: {pairs[:5].tolist()}"
