"""
Polygon ring simplification.

Per-arc coordinate runs that belong to polygon rings are reduced with the
Douglas-Peucker algorithm (shapely/GEOS) before they are assembled. A point
is kept only if, after recursive subdivision, its distance from the segment
joining the retained neighbours exceeds the tolerance. The first and last
points of a run are always kept, so arcs still meet at their shared endpoints.

Line geometries are not simplified, and the tolerance does not adapt to scale.
"""

from typing import List, Optional, Sequence

import numpy as np
from shapely.geometry import LineString

from ..core.constants import MIN_SIMPLIFY_POINTS
from ..core.types import Coordinate
from .. import config


def simplify_ring(
    coordinates: Sequence[Coordinate],
    tolerance: Optional[float] = None,
) -> List[Coordinate]:
    """
    Simplify one per-arc run of a polygon ring.

    Args:
        coordinates: Decoded coordinates in stored order
        tolerance: Maximum allowed deviation (None = configured SIMPLIFY_TOLERANCE)

    Returns:
        Ordered subsequence of the input that keeps its first and last points

    Example:
        >>> simplify_ring([(0.0, 0.0), (1.0, 0.1), (2.0, 0.0)], tolerance=0.5)
        [(0.0, 0.0), (2.0, 0.0)]

        >>> simplify_ring([(0.0, 0.0), (1.0, 3.0), (2.0, 0.0)], tolerance=0.5)
        [(0.0, 0.0), (1.0, 3.0), (2.0, 0.0)]

    Notes:
        - Runs with fewer than three points are returned unchanged
        - Uses preserve_topology=False (plain Douglas-Peucker, no validity repair)
        - Runs holding NaN or infinite values are returned unchanged, since GEOS
          drops such vertices
    """
    if tolerance is None:
        tolerance = config.SIMPLIFY_TOLERANCE

    coords = [(float(x), float(y)) for x, y in coordinates]
    if len(coords) < MIN_SIMPLIFY_POINTS:
        return coords

    if not np.isfinite(coords).all():
        return coords

    simplified = LineString(coords).simplify(tolerance, preserve_topology=False)
    result = [(x, y) for x, y in simplified.coords]

    # Degenerate runs can collapse to nothing; endpoints are the minimum result
    if len(result) < 2:
        return [coords[0], coords[-1]]

    return result
