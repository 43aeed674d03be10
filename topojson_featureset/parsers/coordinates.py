"""
Coordinate decoding for TopoJSON arcs.

This module converts raw arc coordinates into absolute-space coordinates.
Quantized topologies store every arc as a sequence of deltas; decoding keeps a
running sum per arc and maps it through the topology transform.

Performance:
- Delta accumulation is vectorised with NumPy (``cumsum`` adds sequentially,
  so results are identical to a scalar running sum)
"""

from typing import List, Optional, Sequence

import numpy as np

from ..core.types import Arc, Coordinate, Transform


def decode_arc(arc: Arc, transform: Optional[Transform]) -> List[Coordinate]:
    """
    Decode one arc into absolute coordinates.

    Without a transform the raw coordinates are already absolute and are
    returned unchanged. With a transform each raw coordinate is a delta from the
    previous one; the running sum starts at (0, 0) for every arc and is never
    carried from one arc to the next.

    Args:
        arc: Arc to decode
        transform: Topology transform, or None for absolute coordinates

    Returns:
        List of (x, y) tuples, same length as the arc

    Example:
        >>> arc = Arc(((0, 0), (1, 0), (0, 1)))
        >>> decode_arc(arc, Transform(1.0, 1.0, 0.0, 0.0))
        [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0)]

        >>> decode_arc(arc, None)
        [(0.0, 0.0), (1.0, 0.0), (0.0, 1.0)]
    """
    coords = arc.coordinates
    if transform is None:
        return list(coords)
    if not coords:
        return []

    return decode_deltas(coords, transform)


def decode_deltas(deltas: Sequence[Coordinate], transform: Transform) -> List[Coordinate]:
    """
    Accumulate a delta-encoded sequence and dequantize it.

    For each (dx, dy): px += dx; py += dy;
    x = px * scale_x + translate_x; y = py * scale_y + translate_y.
    """
    values = np.asarray(deltas, dtype=np.float64).reshape(-1, 2)
    summed = np.cumsum(values, axis=0)

    xs = summed[:, 0] * transform.scale_x + transform.translate_x
    ys = summed[:, 1] * transform.scale_y + transform.translate_y

    return list(zip(xs.tolist(), ys.tolist()))


def transform_point(coordinate: Coordinate, transform: Optional[Transform]) -> Coordinate:
    """
    Dequantize a standalone position (Point / MultiPoint member).

    Point positions are not delta-encoded, so only the affine mapping applies.
    """
    x, y = float(coordinate[0]), float(coordinate[1])
    if transform is None:
        return (x, y)
    return (
        x * transform.scale_x + transform.translate_x,
        y * transform.scale_y + transform.translate_y,
    )
