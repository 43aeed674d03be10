"""
Pull-based featureset over a topology.

A Featureset walks an externally supplied index array and decodes one
geometry per next() call. Each featureset owns its cursor position, feature id
counter and attribute context, so several featuresets may read the same
topology concurrently without locking.

State machine:
    ACTIVE ──(last index consumed)──▶ EXHAUSTED
"""

from enum import Enum
from typing import Any, Iterator, List, Optional, Sequence

from ..config import FeaturesetConfig
from ..core.feature import Context, Feature, create_feature
from ..core.types import Topology
from ..pipeline.generator import generate_feature
from ..utils.logging import close_log_file, get_log_file, log_debug, set_log_file
from ..utils.transcoder import Transcoder


class FeaturesetState(Enum):
    ACTIVE = "active"
    EXHAUSTED = "exhausted"


class Featureset:
    """
    Sequential feature cursor.

    Args:
        topology: Topology to read (never modified)
        index_array: Ordered geometry indices to expose
        transcoder: Object with transcode(value) -> str (None = Transcoder(config.encoding))
        config: Per-featureset settings (None = environment defaults)

    Example:
        >>> fs = Featureset(topology, [0, 1, 2])
        >>> feature = fs.next()
        >>> while feature is not None:
        ...     render(feature)
        ...     feature = fs.next()

    Notes:
        - Ids count consumed indices: 0, 1, 2, ... including empty features
        - An index outside the geometry list yields an empty feature
        - After the last index every call returns None
    """

    def __init__(
        self,
        topology: Topology,
        index_array: Sequence[int],
        transcoder: Optional[Any] = None,
        config: Optional[FeaturesetConfig] = None,
    ):
        self.config = config if config is not None else FeaturesetConfig()
        self.topology = topology
        self.transcoder = transcoder if transcoder is not None else Transcoder(self.config.encoding)
        self.context = Context()

        self._index_array: List[int] = list(index_array)
        self._position = 0
        self._feature_id = 0
        self._state = FeaturesetState.ACTIVE if self._index_array else FeaturesetState.EXHAUSTED

    @property
    def state(self) -> FeaturesetState:
        return self._state

    @property
    def is_exhausted(self) -> bool:
        return self._state is FeaturesetState.EXHAUSTED

    def next(self) -> Optional[Feature]:
        """
        Decode the next geometry.

        Returns:
            The next Feature, or None once the index array is consumed
        """
        if self._state is FeaturesetState.EXHAUSTED:
            return None

        index = self._index_array[self._position]
        self._position += 1
        feature_id = self._feature_id
        self._feature_id += 1

        if self._position >= len(self._index_array):
            self._state = FeaturesetState.EXHAUSTED

        geometries = self.topology.geometries
        if 0 <= index < len(geometries):
            return generate_feature(
                geometries[index],
                self.topology,
                self.context,
                self.transcoder,
                feature_id,
                tolerance=self.config.simplify_tolerance,
                debug=self.config.debug,
            )

        log_debug(
            f"[FEATURESET] geometry index {index} out of range "
            f"({len(geometries)} geometries), emitting empty feature {feature_id}",
            self.config.debug,
        )
        return create_feature(self.context, feature_id)

    def __iter__(self) -> Iterator[Feature]:
        """
        Yield features until the index array is consumed.

        When ``config.log_path`` is set, diagnostics logged on this thread are
        appended to that file for the duration of the iteration.
        """
        log_path = self.config.log_path
        previous = get_log_file()
        if log_path:
            set_log_file(open(log_path, "a", encoding="utf-8"))

        try:
            feature = self.next()
            while feature is not None:
                yield feature
                feature = self.next()
        finally:
            if log_path:
                close_log_file()
                set_log_file(previous)
