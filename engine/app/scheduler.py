from __future__ import annotations

import itertools
import logging
from typing import Callable, Dict

logger = logging.getLogger(__name__)

FrameCallback = Callable[[int], None]


class FrameScheduler:
    """
    Per-tick callback queue, the engine's stand-in for "run this before the
    next repaint".

    request() queues a callback for the next tick and returns a handle that
    cancel() accepts. run_pending() is called once per tick by the main loop
    with the tick timestamp (ms). Callbacks requested while the queue is
    running land on the following tick, so a callback that reschedules
    itself runs exactly once per tick.
    """

    def __init__(self):
        self._ids = itertools.count(1)
        self._pending: Dict[int, FrameCallback] = {}

    def request(self, callback: FrameCallback) -> int:
        handle = next(self._ids)
        self._pending[handle] = callback
        return handle

    def cancel(self, handle: int | None) -> bool:
        if handle is None:
            return False
        return self._pending.pop(handle, None) is not None

    def has_pending(self) -> bool:
        return bool(self._pending)

    def __len__(self) -> int:
        return len(self._pending)

    def run_pending(self, now_ms: int) -> int:
        batch = self._pending
        self._pending = {}
        for handle, callback in batch.items():
            try:
                callback(now_ms)
            except Exception:
                logger.exception("frame callback %d failed", handle)
        return len(batch)
