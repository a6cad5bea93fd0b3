"""
Logging utilities for the Promtail logging demo app
Writes `[<ISO-8601 timestamp>] <message>` lines to stdout, optionally mirrored
to a rotating log file for the log collector to tail
"""

import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional
from logging.handlers import RotatingFileHandler
from .config_manager import config


class IsoTimestampFormatter(logging.Formatter):
    """Formatter rendering record time as ISO-8601 UTC with milliseconds"""

    def formatTime(self, record: logging.LogRecord, datefmt: Optional[str] = None) -> str:
        stamp = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return stamp.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class DemoLogger:
    """Custom logger for the demo application"""

    def __init__(self, name: str, level: Optional[str] = None):
        self.name = name
        self.level = level or config.get('logging.level', 'INFO')
        log_dir = config.get('logging.log_dir')
        self.log_dir = Path(log_dir) if log_dir else None
        self.max_file_size = config.get('logging.max_file_size', '10MB')
        self.backup_count = config.get('logging.backup_count', 5)

        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self.logger = self._setup_logger()

    def _setup_logger(self) -> logging.Logger:
        """Setup logger with console and optional file handlers"""
        logger = logging.getLogger(self.name)
        logger.setLevel(getattr(logging, str(self.level).upper()))

        # Clear existing handlers
        logger.handlers.clear()

        formatter = IsoTimestampFormatter('[%(asctime)s] %(message)s')

        # Console handler
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if self.log_dir is not None:
            log_file = self.log_dir / f"{self.name}_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=self._parse_file_size(self.max_file_size),
                backupCount=self.backup_count,
                encoding='utf-8'
            )
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        return logger

    def _parse_file_size(self, size_str) -> int:
        """Parse file size string to bytes"""
        size_str = str(size_str).strip().upper()
        if size_str.endswith('KB'):
            return int(size_str[:-2]) * 1024
        elif size_str.endswith('MB'):
            return int(size_str[:-2]) * 1024 * 1024
        elif size_str.endswith('GB'):
            return int(size_str[:-2]) * 1024 * 1024 * 1024
        else:
            return int(size_str)

    def info(self, message: str) -> None:
        """Log info message"""
        self.logger.info(message)

    def warning(self, message: str) -> None:
        """Log warning message"""
        self.logger.warning(message)

    def error(self, message: str) -> None:
        """Log error message"""
        self.logger.error(message)

    def debug(self, message: str) -> None:
        """Log debug message"""
        self.logger.debug(message)

    def critical(self, message: str) -> None:
        """Log critical message"""
        self.logger.critical(message)


def get_logger(name: str, level: Optional[str] = None) -> DemoLogger:
    """Get logger instance for specific component"""
    return DemoLogger(name, level)
