"""
Debounced autosave for editor forms.

Each edit restarts a single timer; the save runs once the form has been quiet
for ``delay`` seconds. There is never more than one pending timer per form.
"""

import logging
import threading
from typing import Any, Callable, Optional


logger = logging.getLogger(__name__)

TimerFactory = Callable[[float, Callable[[], None]], Any]


class Debouncer:
    """
    Coalesce bursts of calls into one delayed callback.

    The callback receives the arguments of the most recent ``trigger``.
    """

    def __init__(
        self,
        delay: float,
        callback: Callable[..., None],
        timer_factory: TimerFactory = threading.Timer,
    ):
        """
        Args:
            delay: Quiet period in seconds before the callback fires
            callback: Called with the latest trigger arguments
            timer_factory: Builds a startable/cancelable timer; threading.Timer
                by default
        """
        self.delay = delay
        self.callback = callback
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._timer = None
        self._generation = 0
        self._args: tuple = ()
        self._kwargs: dict = {}

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def trigger(self, *args, **kwargs):
        """Record the latest arguments and restart the timer."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._args = args
            self._kwargs = kwargs
            self._generation += 1
            generation = self._generation
            timer = self._timer_factory(self.delay, lambda: self._fire(generation))
            if isinstance(timer, threading.Timer):
                timer.daemon = True
            self._timer = timer
        timer.start()

    def cancel(self):
        """Drop the pending call, if any."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None

    def flush(self) -> bool:
        """Run the pending call now. Returns False if nothing was pending."""
        with self._lock:
            if self._timer is None:
                return False
            self._timer.cancel()
            self._timer = None
            args, kwargs = self._args, self._kwargs
        self.callback(*args, **kwargs)
        return True

    def _fire(self, generation: int):
        with self._lock:
            # A newer trigger, cancel or flush superseded this timer
            if generation != self._generation or self._timer is None:
                return
            self._timer = None
            args, kwargs = self._args, self._kwargs
        try:
            self.callback(*args, **kwargs)
        except Exception:
            # Timer threads have no caller to re-raise to
            logger.exception("Autosave callback failed")
