"""
Cancelable timers for the AI's move delay.

A GameSession holds at most one outstanding timer. Any object with
a `schedule(delay, callback)` method returning a handle with
`cancel()` can be plugged in, e.g. one backed by Tk's `after`.
"""

import threading
from typing import Callable


class ThreadingMoveTimer:
    """
    Runs callbacks on a background threading.Timer.

    The returned handle is the threading.Timer itself, so callers
    can also `join()` it to wait for the callback to finish.
    """

    def schedule(self, delay: float, callback: Callable[[], None]) -> threading.Timer:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer
