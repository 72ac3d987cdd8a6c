"""
watcher.py

Polling change detector for the presented document.

The baseline is the modification time of the last content that loaded
successfully.  It only moves forward after `reload` returns, so a failing
reload leaves the next tick comparing against the same value.
"""

from __future__ import annotations

import os
from typing import Callable, Optional, TypeVar

T = TypeVar("T")


class FileWatcher:
    def __init__(self, path: str, baseline: Optional[int] = None) -> None:
        self.path = path
        # unknown baseline: the first successful stat counts as a change
        self.baseline = baseline if baseline is not None else self._stat()

    def _stat(self) -> Optional[int]:
        try:
            return os.stat(self.path).st_mtime_ns
        except OSError:
            return None

    def changed(self) -> Optional[int]:
        """New modification time if it differs from the baseline, else None.

        Stat failures count as "no change"; the next tick tries again.
        """
        mtime = self._stat()
        if mtime is None or mtime == self.baseline:
            return None
        return mtime

    def tick(self, reload: Callable[[], T]) -> Optional[T]:
        """Run one check; call `reload` only when the file changed.

        Exceptions from `reload` propagate and the baseline stays put.
        """
        mtime = self.changed()
        if mtime is None:
            return None
        result = reload()
        self.baseline = mtime
        return result
