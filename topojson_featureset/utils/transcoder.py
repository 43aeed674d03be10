"""
String attribute transcoding.

Textual property values are passed through a transcoder before they are stored
on a feature. Any object with a ``transcode(value) -> str`` method can be
supplied to a featureset; Transcoder is the codec-based default.
"""

import codecs
from typing import Union


class Transcoder:
    """
    Decode byte strings from a fixed source encoding.

    Args:
        encoding: Source encoding name understood by the codecs module
        errors: Codec error handler ("strict", "replace", ...)

    Raises:
        LookupError: If the encoding is unknown

    Example:
        >>> Transcoder("latin-1").transcode(b"caf\\xe9")
        'café'
        >>> Transcoder().transcode("already text")
        'already text'
    """

    def __init__(self, encoding: str = "utf-8", errors: str = "replace"):
        self.encoding = codecs.lookup(encoding).name
        self.errors = errors

    def transcode(self, value: Union[str, bytes, bytearray]) -> str:
        if isinstance(value, str):
            return value
        if isinstance(value, (bytes, bytearray)):
            return bytes(value).decode(self.encoding, self.errors)
        raise TypeError(f"cannot transcode {type(value).__name__} value")

    def __repr__(self) -> str:
        return f"Transcoder({self.encoding!r})"
