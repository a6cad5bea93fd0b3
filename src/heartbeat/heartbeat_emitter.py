"""
Heartbeat emitter for the Promtail logging demo app
Writes a liveness line to the log on a fixed interval for the lifetime of the process
"""

import asyncio
import logging
from contextlib import suppress
from typing import Optional

from ..utils.config_manager import config
from ..utils.logger import DemoLogger, get_logger


DEFAULT_INTERVAL_MS = 5000
HEARTBEAT_MESSAGE = "App heartbeat log"

# Last-resort sink when the configured logger itself fails
_fallback_logger = logging.getLogger(__name__)


class HeartbeatEmitter:
    """Periodic log emitter scheduled as a single asyncio task"""

    def __init__(self, interval_ms: Optional[int] = None, message: str = HEARTBEAT_MESSAGE,
                 logger: Optional[DemoLogger] = None):
        if interval_ms is None:
            interval_ms = config.get_heartbeat_config().get('interval_ms', DEFAULT_INTERVAL_MS)
        interval_ms = int(interval_ms)
        if interval_ms <= 0:
            raise ValueError(f"Heartbeat interval must be positive, got {interval_ms}")

        self.interval_ms = interval_ms
        self.message = message
        self.logger = logger or get_logger('heartbeat')

        # State
        self.is_running = False
        self.beats = 0
        self._task: Optional[asyncio.Task] = None

    @property
    def interval(self) -> float:
        """Interval in seconds"""
        return self.interval_ms / 1000.0

    async def start(self) -> None:
        """Start the heartbeat task on the running event loop"""
        if self.is_running:
            return
        self.is_running = True
        self._task = asyncio.create_task(self._heartbeat_worker())

    async def stop(self) -> None:
        """Cancel the heartbeat task and wait for it to finish"""
        self.is_running = False
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        with suppress(asyncio.CancelledError):
            await task

    def emit(self) -> None:
        """Write one heartbeat line"""
        self.beats += 1
        self.logger.info(self.message)

    async def _heartbeat_worker(self) -> None:
        """Emit on a fixed-rate schedule measured on the loop clock"""
        loop = asyncio.get_running_loop()
        next_beat = loop.time() + self.interval

        while self.is_running:
            await asyncio.sleep(max(0.0, next_beat - loop.time()))

            try:
                self.emit()
            except Exception as e:
                self._report_error(e)

            next_beat += self.interval
            # Fell behind by more than a full interval: skip the missed beats
            if next_beat < loop.time():
                next_beat = loop.time() + self.interval

    def _report_error(self, error: Exception) -> None:
        """Log a failed beat without letting a broken logger kill the task"""
        try:
            self.logger.error(f"Error in heartbeat worker: {error}")
        except Exception:
            _fallback_logger.exception(f"Error in heartbeat worker: {error}")
