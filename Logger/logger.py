# Logger/logger.py
import logging
import sys
import threading
import uuid
from datetime import datetime
from typing import Dict, List, Optional

from Config.logging_config import LoggingConfig
from .formatters import ColorFormatter
from .models import LogEntry, LOG_LEVELS


class LoggerService:
    """In-memory, process-wide logger with colorized console output"""

    _instance = None
    _lock = threading.RLock()

    def __new__(cls, *args, **kwargs):
        # Double-checked locking: only the first caller pays for the lock
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    instance = super(LoggerService, cls).__new__(cls)
                    instance._initialized = False
                    cls._instance = instance
        return cls._instance

    def __init__(self, config: Optional[LoggingConfig] = None):
        with self._lock:
            if self._initialized:
                return

            self._logs: List[LogEntry] = []
            self._instance_id = uuid.uuid4().hex
            self.config = None
            self.console_handler = None
            self._initialize_base_logger(config or LoggingConfig())

            self._initialized = True

            self.logger.info(
                f"LoggerService instance created at {datetime.now():%H:%M:%S.%f}",
                extra={'source': 'SINGLETON'}
            )

    @classmethod
    def instance(cls) -> 'LoggerService':
        """Get the shared logger, creating it on first access"""
        return cls()

    def _initialize_base_logger(self, config: LoggingConfig):
        """Initialize the console logger with global settings"""
        self.config = config

        self.logger = logging.getLogger(config.logger_name)
        self.logger.setLevel(logging.INFO)
        self.logger.propagate = False

        # Clear existing handlers
        for handler in self.logger.handlers[:]:
            self.logger.removeHandler(handler)

        if config.console_output:
            self._setup_console_handler(config)
        else:
            self._setup_null_handler()

    def _setup_null_handler(self):
        """Swallow records when console output is off so logging.lastResort stays silent"""
        for handler in self.logger.handlers[:]:
            self.logger.removeHandler(handler)
        self.console_handler = None
        self.logger.addHandler(logging.NullHandler())

    def _setup_console_handler(self, config: LoggingConfig):
        """Set up console handler with level based colors"""
        for handler in self.logger.handlers[:]:
            self.logger.removeHandler(handler)

        self.console_handler = logging.StreamHandler(sys.stdout)
        self.console_handler.setFormatter(
            ColorFormatter(config.log_format, config.color_scheme, config.date_format))
        self.console_handler.setLevel(logging.INFO)
        self.logger.addHandler(self.console_handler)

    def load_config(self, config: LoggingConfig):
        """Apply a LoggingConfig to the running instance"""
        with self._lock:
            if config.logger_name != self.config.logger_name:
                self._initialize_base_logger(config)
                return

            self.config = config
            if config.console_output:
                self._setup_console_handler(config)
            else:
                self._setup_null_handler()

    # Core logging methods
    def log_info(self, message: str, source: str):
        """Log an info message"""
        self._log('INFO', message, source)

    def log_warning(self, message: str, source: str):
        """Log a warning message"""
        self._log('WARNING', message, source)

    def log_error(self, message: str, source: str):
        """Log an error message"""
        self._log('ERROR', message, source)

    def _log(self, level: str, message: str, source: str):
        if level not in LOG_LEVELS:
            raise ValueError(f"Unsupported log level: {level}")

        # Entry append and console line share the lock so lines never interleave
        with self._lock:
            entry = LogEntry(
                timestamp=datetime.now(),
                level=level,
                message=message,
                source=source
            )
            self._logs.append(entry)
            self.logger.log(getattr(logging, level), message, extra={'source': source})

    def get_all_logs(self) -> List[LogEntry]:
        """Get a snapshot of all retained entries"""
        with self._lock:
            return list(self._logs)

    def get_logs_by_level(self, level: str) -> List[LogEntry]:
        """Get a snapshot of entries matching level, case-insensitively"""
        wanted = (level or '').upper()
        with self._lock:
            return [entry for entry in self._logs if entry.level == wanted]

    def clear_logs(self):
        """Remove every retained entry"""
        with self._lock:
            self._logs.clear()
            self.logger.warning("Logs have been cleared", extra={'source': 'SINGLETON'})

    def get_log_count(self) -> int:
        with self._lock:
            return len(self._logs)

    def get_statistics(self) -> Dict[str, object]:
        """Per-level entry counts taken in one snapshot"""
        with self._lock:
            stats = {level: 0 for level in LOG_LEVELS}
            for entry in self._logs:
                stats[entry.level] += 1
            stats['total'] = len(self._logs)
            stats['instance_id'] = self._instance_id
            return stats

    def get_instance_id(self) -> str:
        """Identity token used to verify the singleton across callers"""
        return self._instance_id
