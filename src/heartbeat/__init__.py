"""
Heartbeat logging for the Promtail logging demo app
"""

from .heartbeat_emitter import HeartbeatEmitter, HEARTBEAT_MESSAGE, DEFAULT_INTERVAL_MS

__all__ = [
    'HeartbeatEmitter',
    'HEARTBEAT_MESSAGE',
    'DEFAULT_INTERVAL_MS'
]
