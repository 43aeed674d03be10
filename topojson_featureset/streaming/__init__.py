"""
Featureset streaming module.

Pull-based decoding of topology geometries, one feature per next() call.
"""

from .featureset import Featureset, FeaturesetState

__all__ = [
    "Featureset",
    "FeaturesetState",
]
