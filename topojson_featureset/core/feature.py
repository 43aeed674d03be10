"""
Feature containers produced by the decoder.

A Feature is one emitted output unit: an ordered list of paths, a property
mapping and an id. Features minted by one featureset share a Context, the
ordered registry of every attribute name seen so far.
"""

from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..geometry.paths import Path
from .types import PropertyValue


class Context:
    """Ordered attribute-name registry shared by the features of one featureset."""

    def __init__(self):
        self._mapping: Dict[str, int] = {}

    def push(self, key: str) -> int:
        """Register a key (idempotent) and return its slot index."""
        if key not in self._mapping:
            self._mapping[key] = len(self._mapping)
        return self._mapping[key]

    def index_of(self, key: str) -> Optional[int]:
        return self._mapping.get(key)

    def keys(self) -> List[str]:
        return list(self._mapping)

    def __contains__(self, key: object) -> bool:
        return key in self._mapping

    def __len__(self) -> int:
        return len(self._mapping)

    def __iter__(self) -> Iterator[str]:
        return iter(self._mapping)


class Feature:
    """
    A decoded feature: paths plus attributes.

    Attributes:
        id: Feature id assigned by the featureset (0, 1, 2, ...)
        context: Attribute registry shared with sibling features
        paths: Ordered list of Path objects
        properties: Attribute mapping (unique keys, insertion order preserved)
    """

    def __init__(self, context: Context, feature_id: int):
        self.context = context
        self.id = feature_id
        self.paths: List[Path] = []
        self.properties: Dict[str, Any] = {}

    def put(self, key: str, value: PropertyValue) -> None:
        """Set an attribute, registering the key with the shared context."""
        self.context.push(key)
        self.properties[key] = value

    # Attribute assignment from decoded geometries
    put_new = put

    def get(self, key: str, default: Any = None) -> Any:
        return self.properties.get(key, default)

    def has_key(self, key: str) -> bool:
        return key in self.properties

    def add_path(self, path: Path) -> None:
        self.paths.append(path)

    def num_geometries(self) -> int:
        return len(self.paths)

    def is_empty(self) -> bool:
        """True when the feature holds neither paths nor properties."""
        return not self.paths and not self.properties

    def envelope(self) -> Optional[Tuple[float, float, float, float]]:
        """Union of path bounding boxes, or None if no path has coordinates."""
        boxes = [box for box in (p.envelope() for p in self.paths) if box is not None]
        if not boxes:
            return None
        return (
            min(b[0] for b in boxes),
            min(b[1] for b in boxes),
            max(b[2] for b in boxes),
            max(b[3] for b in boxes),
        )

    def __getitem__(self, key: str) -> Any:
        return self.properties[key]

    def __contains__(self, key: object) -> bool:
        return key in self.properties

    def __repr__(self) -> str:
        return (
            f"Feature(id={self.id}, paths={len(self.paths)}, "
            f"properties={self.properties!r})"
        )


def create_feature(context: Context, feature_id: int) -> Feature:
    """Mint an empty feature bound to a featureset context."""
    return Feature(context, feature_id)
