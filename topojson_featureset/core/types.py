"""
Type definitions for the TopoJSON decoding pipeline.

This module provides the in-memory topology model consumed by the decoder:
the optional quantization transform, the shared arc table and the six
geometry variants that reference arcs by signed index.

The geometry variants form a closed set. The feature generator dispatches on
them exhaustively; any other object found in ``Topology.geometries`` is
decoded as an empty feature.
"""

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union


# Type aliases for clarity
Coordinate = Tuple[float, float]
PropertyValue = Union[str, bytes, float, int, bool]
Property = Tuple[str, PropertyValue]
Properties = Union[Sequence[Property], Mapping[str, PropertyValue]]


@dataclass(frozen=True)
class Transform:
    """
    Affine dequantization transform attached to a quantized topology.

    When present, arc coordinates are delta-encoded integers and every decoded
    position is ``(sum_x * scale_x + translate_x, sum_y * scale_y + translate_y)``.

    Attributes:
        scale_x: Horizontal scale factor
        scale_y: Vertical scale factor
        translate_x: Horizontal offset
        translate_y: Vertical offset
    """

    scale_x: float = 1.0
    scale_y: float = 1.0
    translate_x: float = 0.0
    translate_y: float = 0.0


@dataclass(frozen=True)
class Arc:
    """An immutable, independently stored polyline fragment."""

    coordinates: Tuple[Coordinate, ...] = ()

    def __post_init__(self) -> None:
        # Extra dimensions beyond x, y are dropped
        object.__setattr__(
            self, "coordinates", tuple((float(pt[0]), float(pt[1])) for pt in self.coordinates)
        )

    def __len__(self) -> int:
        return len(self.coordinates)


# ============================================================================
# Geometry Variants
# ============================================================================

@dataclass
class Point:
    coordinate: Coordinate
    properties: Optional[Properties] = None


@dataclass
class MultiPoint:
    points: List[Coordinate] = field(default_factory=list)
    properties: Optional[Properties] = None


@dataclass
class LineString:
    """A single open path referencing one arc (negative index = reversed)."""

    ring: int
    properties: Optional[Properties] = None


@dataclass
class MultiLineString:
    """Independent open paths, one per signed arc reference."""

    rings: List[int] = field(default_factory=list)
    properties: Optional[Properties] = None


@dataclass
class Polygon:
    """
    A polygon made of one or more closed rings (outer boundary, then holes).

    Each ring is an ordered list of signed arc references which, traversed in
    sequence, form one closed boundary.
    """

    rings: List[List[int]] = field(default_factory=list)
    properties: Optional[Properties] = None


@dataclass
class MultiPolygon:
    polygons: List[List[List[int]]] = field(default_factory=list)
    properties: Optional[Properties] = None


Geometry = Union[Point, MultiPoint, LineString, MultiLineString, Polygon, MultiPolygon]


# ============================================================================
# Topology
# ============================================================================

@dataclass
class Topology:
    """
    Decoded topology shared by every featureset that reads from it.

    Arcs are stored once in a stably indexed list and geometries refer to them
    strictly by index. The topology is never mutated by the decoder, so one
    instance may be read by several featuresets at once.

    Attributes:
        arcs: Arc table (raw coordinate sequences are wrapped into Arc on construction)
        geometries: Ordered geometry list addressed by the featureset index array
        transform: Quantization transform, None when coordinates are absolute
    """

    arcs: List[Arc] = field(default_factory=list)
    geometries: List[Any] = field(default_factory=list)
    transform: Optional[Transform] = None

    def __post_init__(self) -> None:
        self.arcs = [
            arc if isinstance(arc, Arc) else Arc(tuple(arc))
            for arc in self.arcs
        ]
        self.geometries = list(self.geometries)
