from spiralpack.circumscribed_circle import (
    CircumscribedCircle,
    circle_area,
    squared_radius_for,
)
from spiralpack.collision_index import CollisionIndex
from spiralpack.geometry import Point, Rectangle, Size
from spiralpack.layout_utils import (
    bounding_box,
    find_intersections,
    layout_circularity,
    rectangles_to_array,
)
from spiralpack.spiral_packer import (
    DEFAULT_ANGLE_STEP,
    DEFAULT_CIRCULARITY_THRESHOLD,
    PackerMode,
    PackerState,
    SpiralPacker,
    archimedean_spiral,
)
