"""
Thread-local logging utilities for feature decoding.

Diagnostics always go to stdout. A thread may additionally bind a file, and
every log() call made on that thread is appended to it. Featuresets bind
``FeaturesetConfig.log_path`` this way while they are iterated, so cursors
consumed on different threads keep separate log files.

Usage:
    from topojson_featureset.utils.logging import log, set_log_file, close_log_file

    set_log_file(open("decode.log", "a"))
    try:
        log("[FEATURESET] geometry index 12 out of range")
    finally:
        close_log_file()
"""

import threading
from typing import Optional, TextIO


_thread_local = threading.local()


def log(message: str) -> None:
    """
    Print a diagnostic and append it to the current thread's log file.

    Args:
        message: One log line, without trailing newline

    Example:
        >>> log("[GENERATOR] ring 2 skipped")
        [GENERATOR] ring 2 skipped
    """
    print(message)
    log_file = get_log_file()
    if log_file:
        try:
            log_file.write(message + "\n")
            log_file.flush()
        except (OSError, ValueError):
            # Closed or unwritable log file must not break decoding
            pass


def log_debug(message: str, debug: bool = False) -> None:
    """Log a message only when debug output is enabled."""
    if debug:
        log(message)


def set_log_file(log_file: Optional[TextIO]) -> None:
    """Bind a file to the current thread (None unbinds without closing)."""
    _thread_local.log_file = log_file


def close_log_file() -> None:
    """
    Unbind and close the current thread's log file, if any.

    Calling it again, or with nothing bound, does nothing.
    """
    log_file = get_log_file()
    if log_file:
        set_log_file(None)
        try:
            log_file.close()
        except OSError:
            pass


def get_log_file() -> Optional[TextIO]:
    return getattr(_thread_local, 'log_file', None)
