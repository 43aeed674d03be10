"""
Path storage and assembly.

A path is an ordered list of vertices, each tagged with a drawing command
(move-to, line-to, close). This module provides the Path container and the
assemblers that turn decoded arc coordinates into point, line and ring paths.

Ring assembly joins several arcs into one closed boundary. Consecutive arcs
share their join point, so the last coordinate of every arc but the final one
is dropped before appending; the ring is then closed explicitly.
"""

from typing import Iterator, List, NamedTuple, Optional, Sequence, Tuple

from ..core.constants import (
    COMMAND_NAMES,
    GEOM_LINESTRING,
    GEOM_POINT,
    GEOM_POLYGON,
    GEOM_TYPE_NAMES,
    SEG_CLOSE,
    SEG_LINETO,
    SEG_MOVETO,
)
from ..core.types import Coordinate


class Vertex(NamedTuple):
    command: int
    x: float
    y: float

    @property
    def command_name(self) -> str:
        return COMMAND_NAMES.get(self.command, "unknown")


class Path:
    """Geometry-typed vertex storage for one emitted path."""

    def __init__(self, geom_type: int):
        self.geom_type = geom_type
        self._vertices: List[Vertex] = []

    def move_to(self, x: float, y: float) -> None:
        self._vertices.append(Vertex(SEG_MOVETO, x, y))

    def line_to(self, x: float, y: float) -> None:
        self._vertices.append(Vertex(SEG_LINETO, x, y))

    def close_path(self) -> None:
        self._vertices.append(Vertex(SEG_CLOSE, 0.0, 0.0))

    @property
    def vertices(self) -> List[Vertex]:
        return list(self._vertices)

    @property
    def commands(self) -> List[int]:
        return [v.command for v in self._vertices]

    @property
    def coordinates(self) -> List[Coordinate]:
        """Positioned vertices only (close commands carry no position)."""
        return [(v.x, v.y) for v in self._vertices if v.command != SEG_CLOSE]

    @property
    def is_closed(self) -> bool:
        return bool(self._vertices) and self._vertices[-1].command == SEG_CLOSE

    @property
    def type_name(self) -> str:
        return GEOM_TYPE_NAMES.get(self.geom_type, "Unknown")

    def envelope(self) -> Optional[Tuple[float, float, float, float]]:
        """Bounding box (min_x, min_y, max_x, max_y), or None for an empty path."""
        coords = self.coordinates
        if not coords:
            return None
        xs = [x for x, _ in coords]
        ys = [y for _, y in coords]
        return (min(xs), min(ys), max(xs), max(ys))

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.geom_type == other.geom_type and self._vertices == other._vertices

    def __repr__(self) -> str:
        return f"Path({self.type_name}, {len(self._vertices)} vertices)"


def build_point_path(coordinate: Coordinate) -> Path:
    path = Path(GEOM_POINT)
    path.move_to(coordinate[0], coordinate[1])
    return path


def build_line_path(coordinates: Sequence[Coordinate], reversed: bool = False) -> Path:
    """
    Assemble an open path from one decoded arc.

    Args:
        coordinates: Decoded arc coordinates in stored order
        reversed: Read the coordinates back-to-front

    Returns:
        LineString path: move-to on the first coordinate, line-to for the rest
    """
    path = Path(GEOM_LINESTRING)
    ordered = coordinates[::-1] if reversed else coordinates
    _append_run(path, ordered, first=True)
    return path


def build_ring_path(segments: Sequence[Tuple[Sequence[Coordinate], bool]]) -> Optional[Path]:
    """
    Assemble one closed polygon ring from its constituent arcs.

    Each segment is applied in traversal order first (reversed segments are read
    back-to-front), then its last coordinate is dropped unless it is the final
    segment of the ring, since that point is the start of the next arc. The
    ring is closed with an explicit close command.

    Args:
        segments: Sequence of (decoded_coordinates, reversed) pairs

    Returns:
        Closed Polygon path, or None if the segments hold no coordinates

    Example:
        >>> ring = build_ring_path([
        ...     ([(0, 0), (1, 0)], False),
        ...     ([(1, 0), (1, 1), (0, 0)], False),
        ... ])
        >>> ring.coordinates
        [(0, 0), (1, 0), (1, 1), (0, 0)]
        >>> ring.is_closed
        True
    """
    path = Path(GEOM_POLYGON)
    last = len(segments) - 1
    first = True

    for position, (coords, reversed_) in enumerate(segments):
        ordered = list(coords[::-1] if reversed_ else coords)
        if position < last:
            ordered = ordered[:-1]
        first = _append_run(path, ordered, first)

    if first:
        # Nothing was appended
        return None

    path.close_path()
    return path


def _append_run(path: Path, coords: Sequence[Coordinate], first: bool) -> bool:
    for x, y in coords:
        if first:
            path.move_to(x, y)
            first = False
        else:
            path.line_to(x, y)
    return first
