import logging
from collections import deque
from typing import List, Dict


class LogStreamManager:
    """Ring buffer of recent formatted log lines, served by /system/logs"""
    _instance = None

    def __init__(self, maxlen: int = 2000):
        self.buffer: deque = deque(maxlen=maxlen)

    @classmethod
    def get_instance(cls):
        if cls._instance is None:
            cls._instance = LogStreamManager()
        return cls._instance

    def resize(self, maxlen: int):
        """Change capacity, keeping the newest entries"""
        if maxlen <= 0:
            raise ValueError("maxlen must be positive")
        if maxlen != self.buffer.maxlen:
            self.buffer = deque(self.buffer, maxlen=maxlen)

    def add_log(self, message: str, level: str = "INFO"):
        """Adds a log message to the buffer."""
        self.buffer.append({
            "message": message,
            "level": level,
        })

    def recent(self, limit: int = 100) -> List[Dict[str, str]]:
        """Newest `limit` entries, oldest first"""
        if limit <= 0:
            return []
        entries = list(self.buffer)
        return entries[-limit:]

    def clear(self):
        self.buffer.clear()


# Global instance
log_manager = LogStreamManager.get_instance()


class ListLogHandler(logging.Handler):
    """Custom logging handler to push logs into LogStreamManager."""
    def emit(self, record):
        try:
            msg = self.format(record)
            log_manager.add_log(msg, record.levelname)
        except Exception:
            self.handleError(record)
