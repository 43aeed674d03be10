"""
Arc reference resolution.

Geometries reference arcs by signed index. A non-negative index addresses the
arc directly in forward order; a negative index ``i`` addresses arc ``-i - 1``
traversed back-to-front (``-1`` is arc 0 reversed, ``-2`` is arc 1 reversed).
"""

from typing import List, Tuple

from ..core.types import Coordinate, Topology
from .coordinates import decode_arc


def resolve_ring_index(index: int, arc_count: int) -> Tuple[int, bool]:
    """
    Map a signed ring reference to (arc index, reversed).

    Args:
        index: Signed arc reference taken from a geometry
        arc_count: Number of arcs in the topology

    Returns:
        Tuple of (resolved_arc_index, reversed)

    Raises:
        IndexError: If the resolved arc index is outside the arc table

    Example:
        >>> resolve_ring_index(3, 5)
        (3, False)
        >>> resolve_ring_index(-1, 5)
        (0, True)
    """
    index = int(index)
    reversed_ = index < 0
    arc_index = -index - 1 if reversed_ else index
    if not 0 <= arc_index < arc_count:
        raise IndexError(
            f"arc reference {index} resolves to arc {arc_index}, "
            f"topology has {arc_count} arcs"
        )
    return arc_index, reversed_


def resolve_arc(topology: Topology, index: int) -> Tuple[List[Coordinate], bool]:
    """
    Resolve and decode a ring reference.

    Returns the decoded coordinates in stored order together with the
    traversal direction; callers apply the reversal themselves so polygon runs
    can be simplified first.

    Raises:
        IndexError: If the reference is out of range
    """
    arc_index, reversed_ = resolve_ring_index(index, len(topology.arcs))
    return decode_arc(topology.arcs[arc_index], topology.transform), reversed_


def oriented_arc(topology: Topology, index: int) -> List[Coordinate]:
    """Decoded arc coordinates in traversal order for a signed reference."""
    coords, reversed_ = resolve_arc(topology, index)
    if reversed_:
        coords.reverse()
    return coords
