from __future__ import annotations
import itertools
import logging
from typing import Callable, Dict

logger = logging.getLogger(__name__)


class FrameScheduler:
    """
    One-shot "next frame" callbacks, the pygame counterpart of requestAnimationFrame.

    A callback requested while a frame is running is deferred to the following
    frame, so a callback that re-requests itself runs exactly once per frame.
    Cancelling is synchronous: once cancel() returns the callback will not run.
    """

    def __init__(self):
        self._ids = itertools.count(1)
        self._pending: Dict[int, Callable[..., None]] = {}

    @property
    def pending(self) -> int:
        return len(self._pending)

    def request(self, callback: Callable[..., None]) -> int:
        handle = next(self._ids)
        self._pending[handle] = callback
        return handle

    def cancel(self, handle: int | None) -> None:
        if handle is None:
            return
        self._pending.pop(handle, None)

    def is_pending(self, handle: int | None) -> bool:
        return handle in self._pending

    def clear(self) -> None:
        self._pending.clear()

    def run_frame(self, *args) -> int:
        """Run the callbacks due this frame, passing *args. Returns how many ran."""
        due = list(self._pending.keys())
        ran = 0
        for handle in due:
            # a callback earlier in this frame may have cancelled this one
            callback = self._pending.pop(handle, None)
            if callback is None:
                continue
            callback(*args)
            ran += 1
        return ran
