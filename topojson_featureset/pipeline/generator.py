"""
Feature generation from topology geometries.

generate_feature() dispatches on the six geometry variants, drives arc
resolution, decoding, simplification and path assembly, then attaches the
geometry's properties to the resulting feature.

Error policy:
- An out-of-range arc reference skips only the line or ring that uses it; the
  feature is still returned with every other path and its properties.
- An unsupported geometry object yields an empty feature (no paths, no
  properties).
- Nothing is raised to the caller.
"""

from typing import Any, List, Mapping, Optional, Sequence

from ..core.feature import Context, Feature, create_feature
from ..core.types import (
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Properties,
    Topology,
)
from ..geometry.paths import Path, build_line_path, build_point_path, build_ring_path
from ..geometry.simplify import simplify_ring
from ..parsers.arcs import resolve_arc
from ..parsers.coordinates import transform_point
from ..utils.logging import log_debug


def generate_feature(
    geometry: Any,
    topology: Topology,
    context: Context,
    transcoder: Any,
    feature_id: int,
    tolerance: Optional[float] = None,
    debug: bool = False,
) -> Feature:
    """
    Build one feature from one topology geometry.

    Args:
        geometry: Point, MultiPoint, LineString, MultiLineString, Polygon or MultiPolygon
        topology: Topology owning the arcs the geometry references
        context: Attribute registry shared by the featureset
        transcoder: Object with transcode(value) -> str for textual properties
        feature_id: Id assigned to the feature
        tolerance: Polygon ring simplification tolerance (None = configured default)
        debug: Log skipped rings and unsupported geometries

    Returns:
        Feature with one path per point, line or ring

    Example:
        >>> topo = Topology(arcs=[[(0, 0), (1, 0), (0, 1)]], transform=Transform())
        >>> feature = generate_feature(LineString(0), topo, Context(), Transcoder(), 0)
        >>> feature.paths[0].coordinates
        [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0)]
    """
    feature = create_feature(context, feature_id)
    transform = topology.transform

    if isinstance(geometry, Point):
        feature.add_path(build_point_path(transform_point(geometry.coordinate, transform)))

    elif isinstance(geometry, MultiPoint):
        for pt in geometry.points:
            feature.add_path(build_point_path(transform_point(pt, transform)))

    elif isinstance(geometry, LineString):
        path = _line_path(topology, geometry.ring, feature_id, debug)
        if path is not None:
            feature.add_path(path)

    elif isinstance(geometry, MultiLineString):
        for index in geometry.rings:
            path = _line_path(topology, index, feature_id, debug)
            if path is not None:
                feature.add_path(path)

    elif isinstance(geometry, Polygon):
        for path in _polygon_paths(topology, geometry.rings, tolerance, feature_id, debug):
            feature.add_path(path)

    elif isinstance(geometry, MultiPolygon):
        for rings in geometry.polygons:
            for path in _polygon_paths(topology, rings, tolerance, feature_id, debug):
                feature.add_path(path)

    else:
        log_debug(
            f"[GENERATOR] feature {feature_id}: unsupported geometry "
            f"{type(geometry).__name__}, emitting empty feature",
            debug,
        )
        return feature

    assign_properties(feature, geometry.properties, transcoder)
    return feature


def assign_properties(feature: Feature, properties: Optional[Properties], transcoder: Any) -> None:
    """
    Copy geometry properties onto a feature.

    Textual values (str or bytes) go through the transcoder; numbers and
    booleans are stored unchanged.
    """
    if not properties:
        return

    pairs = properties.items() if isinstance(properties, Mapping) else properties
    for key, value in pairs:
        if isinstance(value, (str, bytes, bytearray)):
            value = transcoder.transcode(value)
        feature.put_new(key, value)


def _line_path(topology: Topology, index: int, feature_id: int, debug: bool) -> Optional[Path]:
    try:
        coords, reversed_ = resolve_arc(topology, index)
    except IndexError as e:
        log_debug(f"[GENERATOR] feature {feature_id}: line skipped ({e})", debug)
        return None
    return build_line_path(coords, reversed_)


def _polygon_paths(
    topology: Topology,
    rings: Sequence[Sequence[int]],
    tolerance: Optional[float],
    feature_id: int,
    debug: bool,
) -> List[Path]:
    paths: List[Path] = []

    for ring_number, ring in enumerate(rings):
        segments = []
        try:
            for index in ring:
                coords, reversed_ = resolve_arc(topology, index)
                segments.append((simplify_ring(coords, tolerance), reversed_))
        except IndexError as e:
            log_debug(
                f"[GENERATOR] feature {feature_id}: ring {ring_number} skipped ({e})",
                debug,
            )
            continue

        path = build_ring_path(segments)
        if path is not None:
            paths.append(path)

    return paths
