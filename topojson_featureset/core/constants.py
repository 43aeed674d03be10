"""
Constants for TopoJSON feature decoding.

This module defines the constant values used throughout the decoding pipeline,
including path vertex commands, path geometry types and the polygon
simplification tolerance.
"""

# ============================================================================
# Path Vertex Commands
# ============================================================================

# Command codes stored with every path vertex (AGG-style vertex storage)
SEG_MOVETO = 1
SEG_LINETO = 2
SEG_CLOSE = 0x40 | 0x0F

COMMAND_NAMES = {
    SEG_MOVETO: "move_to",
    SEG_LINETO: "line_to",
    SEG_CLOSE: "close",
}

# ============================================================================
# Path Geometry Types
# ============================================================================

GEOM_POINT = 1
GEOM_LINESTRING = 2
GEOM_POLYGON = 3

GEOM_TYPE_NAMES = {
    GEOM_POINT: "Point",
    GEOM_LINESTRING: "LineString",
    GEOM_POLYGON: "Polygon",
}

# ============================================================================
# Simplification
# ============================================================================

# Douglas-Peucker tolerance applied to every per-arc run of a polygon ring.
# Output coordinate units. Fixed regardless of scale or zoom; line geometries
# are never simplified.
DEFAULT_SIMPLIFY_TOLERANCE = 1e-6

# Runs shorter than this are returned unchanged by the simplifier
MIN_SIMPLIFY_POINTS = 3

# ============================================================================
# Default Values
# ============================================================================

DEFAULT_ENCODING = "utf-8"
