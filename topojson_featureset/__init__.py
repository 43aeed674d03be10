"""
TopoJSON featureset decoding.

Decodes a topology (shared arcs, optional quantization transform, geometries
referencing arcs by signed index) into attributed features made of
move-to / line-to / close paths.

Components:
- parsers: coordinate delta decoding and arc reference resolution
- geometry: path assembly and polygon ring simplification
- pipeline: geometry-to-feature generation
- streaming: the pull-based Featureset cursor
"""

from .config import FeaturesetConfig
from .core.constants import SEG_CLOSE, SEG_LINETO, SEG_MOVETO
from .core.feature import Context, Feature, create_feature
from .core.types import (
    Arc,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Topology,
    Transform,
)
from .geometry.paths import Path, Vertex, build_line_path, build_ring_path
from .geometry.simplify import simplify_ring
from .parsers.arcs import oriented_arc, resolve_ring_index
from .parsers.coordinates import decode_arc
from .pipeline.generator import generate_feature
from .streaming import Featureset, FeaturesetState
from .utils.transcoder import Transcoder

__all__ = [
    "FeaturesetConfig",
    "SEG_MOVETO",
    "SEG_LINETO",
    "SEG_CLOSE",
    "Context",
    "Feature",
    "create_feature",
    "Arc",
    "Transform",
    "Topology",
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "Path",
    "Vertex",
    "build_line_path",
    "build_ring_path",
    "simplify_ring",
    "decode_arc",
    "resolve_ring_index",
    "oriented_arc",
    "generate_feature",
    "Featureset",
    "FeaturesetState",
    "Transcoder",
]
