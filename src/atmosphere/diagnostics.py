"""
One-shot Diagnostic Notices
===========================

A notice that is emitted at most once for the lifetime of the object,
regardless of how many threads call emit() concurrently.

The real-frequency wavenumber solver uses the module-level instance
REAL_DISCRIMINANT_NOTICE by default (process-wide "at most once"). Callers
that want their own bookkeeping pass a fresh OneShotNotice instead.

Notices go through the warnings module by default, so the usual
filters (-W, warnings.simplefilter, pytest.warns) apply.

Oct 2026
"""

import threading
import warnings
from typing import Callable, Optional, Type

from .constants import REAL_DISCRIMINANT_MESSAGE


class AtmosphereWarning(UserWarning):
    """Non-fatal numerical notice from the atmosphere layer."""


def _warn_sink(message: str, category: Type[Warning], stacklevel: int) -> None:
    warnings.warn(message, category, stacklevel=stacklevel + 1)


class OneShotNotice:
    """
    Thread-safe latch around a single diagnostic message.

    Args:
        message: text of the notice
        category: warning category passed to the sink
        sink: callable(message, category, stacklevel); defaults to warnings.warn
    """

    def __init__(self, message: str,
                 category: Type[Warning] = AtmosphereWarning,
                 sink: Optional[Callable[[str, Type[Warning], int], None]] = None):
        self.message = message
        self.category = category
        self._sink = sink if sink is not None else _warn_sink
        self._lock = threading.Lock()
        self._fired = False

    @property
    def fired(self) -> bool:
        return self._fired

    def emit(self, stacklevel: int = 2) -> bool:
        """
        Emit the notice unless it has already been emitted.

        Args:
            stacklevel: as for warnings.warn, counted from the caller of
                emit() (1 = the caller itself, 2 = its caller)

        Returns:
            True for the single call that actually emitted, False otherwise.
        """
        with self._lock:
            if self._fired:
                return False
            self._fired = True

        # Latch is set before the sink runs (sink is called outside the lock)
        self._sink(self.message, self.category, stacklevel + 1)
        return True

    def reset(self) -> None:
        """Re-arm the notice (test isolation only)."""
        with self._lock:
            self._fired = False

    def __repr__(self) -> str:
        return f"OneShotNotice({self.message!r}, fired={self._fired})"


# Process-wide default used by wavenumber_real
REAL_DISCRIMINANT_NOTICE = OneShotNotice(REAL_DISCRIMINANT_MESSAGE)
