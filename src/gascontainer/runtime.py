"""Background drift runtime that ticks a container on a dedicated thread."""

from __future__ import annotations

import logging
import threading

from gascontainer.container import GasContainer


class DriftRuntime:
    """Threaded loop that sleeps ``tick_interval`` seconds, then ticks the container.

    The loop runs until :meth:`stop` is called. The container lock is only
    taken inside :meth:`GasContainer.tick`, never across the sleep.
    """

    def __init__(
        self,
        container: GasContainer,
        *,
        interval: float | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._container = container
        self._interval = container.config.tick_interval if interval is None else interval
        self._logger = logger or logging.getLogger(__name__)
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._ticks = 0

    @property
    def is_running(self) -> bool:
        """Whether the drift thread is alive."""
        thread = self._thread
        return thread is not None and thread.is_alive()

    @property
    def ticks(self) -> int:
        """Number of ticks performed since the runtime was created."""
        return self._ticks

    def start(self) -> None:
        """Spawn the drift thread. Starting a running runtime is a no-op."""
        if self.is_running and not self._stop_event.is_set():
            return
        # One stop event per thread; a signalled thread never resumes.
        stop_event = threading.Event()
        thread = threading.Thread(target=self._run, args=(stop_event,), name="gas-drift", daemon=True)
        self._stop_event = stop_event
        self._thread = thread
        thread.start()
        self._logger.debug("Drift runtime started interval=%ss", self._interval)

    def stop(self, timeout: float | None = None) -> None:
        """Signal the drift thread to exit and wait up to *timeout* seconds for it."""
        self._stop_event.set()
        thread = self._thread
        if thread is None:
            return
        thread.join(timeout)
        if thread.is_alive():
            self._logger.warning("Drift thread still running after %ss", timeout)
            return
        self._thread = None
        self._logger.debug("Drift runtime stopped after %d ticks", self._ticks)

    def _run(self, stop_event: threading.Event) -> None:
        # Event.wait doubles as the sleep so stop() interrupts it immediately.
        while not stop_event.wait(self._interval):
            try:
                self._container.tick()
            except Exception:
                self._logger.exception("Drift tick failed")
            self._ticks += 1
