"""
Unit tests for arc coordinate decoding

Tests cover:
1. Pass-through of absolute coordinates (no transform)
2. Delta accumulation and dequantization
3. Running sum reset per arc
4. Delta round-trip
5. Standalone point dequantization
"""

import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from topojson_featureset.core.types import Arc, Transform
from topojson_featureset.parsers.coordinates import decode_arc, decode_deltas, transform_point


# ============================================================================
# Test Fixtures
# ============================================================================

@pytest.fixture
def identity_transform():
    return Transform(scale_x=1.0, scale_y=1.0, translate_x=0.0, translate_y=0.0)


def encode_deltas(coords, transform):
    """Quantize absolute coordinates and encode them as successive deltas."""
    deltas = []
    px, py = 0.0, 0.0
    for x, y in coords:
        qx = (x - transform.translate_x) / transform.scale_x
        qy = (y - transform.translate_y) / transform.scale_y
        deltas.append((qx - px, qy - py))
        px, py = qx, qy
    return deltas


# ============================================================================
# Absolute Coordinates
# ============================================================================

def test_decode_without_transform_passes_through():
    """Raw coordinates are returned unchanged when no transform is present."""
    arc = Arc(((0.0, 0.0), (1.0, 0.0), (0.0, 1.0)))
    assert decode_arc(arc, None) == [(0.0, 0.0), (1.0, 0.0), (0.0, 1.0)]


def test_decode_empty_arc():
    """Empty arcs decode to empty lists with or without transform."""
    assert decode_arc(Arc(()), None) == []
    assert decode_arc(Arc(()), Transform()) == []


def test_arc_drops_extra_dimensions():
    """Positions with more than two values keep only x and y."""
    arc = Arc(((1, 2, 3), (4, 5, 6)))
    assert arc.coordinates == ((1.0, 2.0), (4.0, 5.0))


# ============================================================================
# Delta Decoding
# ============================================================================

def test_decode_identity_transform_accumulates(identity_transform):
    """Deltas [(0,0),(1,0),(0,1)] decode to (0,0),(1,0),(1,1)."""
    arc = Arc(((0, 0), (1, 0), (0, 1)))
    assert decode_arc(arc, identity_transform) == [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0)]


def test_decode_applies_scale_and_translate():
    """Running sums are mapped through scale then translate."""
    transform = Transform(scale_x=0.5, scale_y=2.0, translate_x=10.0, translate_y=-5.0)
    arc = Arc(((2, 1), (2, 1), (-4, 0)))
    coords = decode_arc(arc, transform)

    assert coords == [
        (2 * 0.5 + 10.0, 1 * 2.0 - 5.0),
        (4 * 0.5 + 10.0, 2 * 2.0 - 5.0),
        (0 * 0.5 + 10.0, 2 * 2.0 - 5.0),
    ]


def test_running_sum_resets_for_each_arc(identity_transform):
    """Decoding the same arc twice gives identical results (no carried state)."""
    arc_a = Arc(((5, 5), (1, 1)))
    arc_b = Arc(((0, 0), (1, 0)))

    first_a = decode_arc(arc_a, identity_transform)
    b = decode_arc(arc_b, identity_transform)
    second_a = decode_arc(arc_a, identity_transform)

    assert b == [(0.0, 0.0), (1.0, 0.0)]
    assert first_a == second_a == [(5.0, 5.0), (6.0, 6.0)]


def test_decode_preserves_length():
    """Output has the same number of coordinates as the arc."""
    arc = Arc(tuple((i, -i) for i in range(50)))
    assert len(decode_arc(arc, Transform(0.1, 0.1, 3.0, 4.0))) == 50


def test_delta_round_trip():
    """Encoding absolute coordinates as deltas then decoding reproduces them."""
    transform = Transform(scale_x=0.001, scale_y=0.002, translate_x=-73.5, translate_y=40.25)
    absolute = [(-73.5, 40.25), (-73.2, 40.5), (-72.9, 40.31), (-73.05, 41.0)]

    decoded = decode_deltas(encode_deltas(absolute, transform), transform)

    assert len(decoded) == len(absolute)
    for (x, y), (ex, ey) in zip(decoded, absolute):
        assert x == pytest.approx(ex, abs=1e-9)
        assert y == pytest.approx(ey, abs=1e-9)


def test_non_finite_transform_propagates():
    """Non-finite transform values are not guarded."""
    transform = Transform(scale_x=float("inf"), scale_y=1.0, translate_x=0.0, translate_y=0.0)
    coords = decode_arc(Arc(((1, 1),)), transform)
    assert coords[0][0] == float("inf")
    assert coords[0][1] == 1.0


# ============================================================================
# Point Dequantization
# ============================================================================

def test_transform_point_without_transform():
    assert transform_point((10, 20), None) == (10.0, 20.0)


def test_transform_point_is_not_delta_encoded():
    """Points are scaled and translated directly."""
    transform = Transform(scale_x=2.0, scale_y=3.0, translate_x=1.0, translate_y=-1.0)
    assert transform_point((4, 5), transform) == (9.0, 14.0)
