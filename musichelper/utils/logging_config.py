"""
Logging Configuration for Music Helper

Centralized logging setup for the helper package. Library code only asks
for named loggers; handlers are attached when the host application calls
setup_logging().
"""

import os
import sys
import logging
import logging.handlers
from pathlib import Path
from typing import Dict, Any, Optional


ROOT_LOGGER_NAME = 'musichelper'


class ColoredFormatter(logging.Formatter):
    """Colored console formatter for better readability"""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        # Color a copy so file handlers sharing the record see the plain level
        record = logging.makeLogRecord(record.__dict__)
        if record.levelname in self.COLORS:
            record.levelname = f"{self.COLORS[record.levelname]}{record.levelname}{self.RESET}"
        return super().format(record)


class MusicHelperLogger:
    """Logger configuration for the musichelper package"""

    def __init__(self, log_dir: Optional[str] = None, console_level: str = "INFO",
                 file_level: str = "DEBUG", enable_console: bool = True):
        """
        Initialize logging for the package

        Args:
            log_dir: Directory for the rotating log file (no file logging if None)
            console_level: Console logging level
            file_level: File logging level
            enable_console: Whether to enable console logging
        """
        self.log_dir = os.path.expanduser(log_dir) if log_dir else None
        self.console_level = getattr(logging, console_level.upper())
        self.file_level = getattr(logging, file_level.upper())
        self.enable_console = enable_console

        if self.log_dir:
            Path(self.log_dir).mkdir(parents=True, exist_ok=True)

        self._setup_package_logger()

    def _setup_package_logger(self):
        """Attach handlers to the package logger"""
        package_logger = logging.getLogger(ROOT_LOGGER_NAME)
        package_logger.setLevel(logging.DEBUG)

        # Clear handlers from a previous setup
        for handler in list(package_logger.handlers):
            package_logger.removeHandler(handler)
            handler.close()

        if self.enable_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(self.console_level)
            console_handler.setFormatter(ColoredFormatter(
                '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
                datefmt='%H:%M:%S'
            ))
            package_logger.addHandler(console_handler)

        if self.log_dir:
            log_file = os.path.join(self.log_dir, 'musichelper.log')
            file_handler = logging.handlers.RotatingFileHandler(
                log_file, maxBytes=5*1024*1024, backupCount=3
            )
            file_handler.setLevel(self.file_level)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            package_logger.addHandler(file_handler)

    def get_logger(self, name: str) -> logging.Logger:
        """Get a logger for a specific component"""
        return get_logger(name)

    def log_inference(self, collection: str, result: Dict[str, Any]):
        """Log the outcome of a main-artist inference"""
        logger = self.get_logger('inference')
        if result.get('dominant'):
            logger.info(f"Main artist for '{collection}': {result.get('artist')!r} "
                        f"({result.get('max_count')}/{result.get('song_count')})")
        else:
            logger.info(f"No main artist for '{collection}'")
        if result.get('skipped'):
            logger.debug(f"  Skipped references: {result['skipped']}")


def setup_logging(log_dir: Optional[str] = None, console_level: str = "INFO",
                  file_level: str = "DEBUG", enable_console: bool = True) -> MusicHelperLogger:
    """Setup package logging configuration"""
    return MusicHelperLogger(log_dir, console_level, file_level, enable_console)

def get_logger(name: str = 'main') -> logging.Logger:
    """Get a component logger"""
    if name.startswith(f'{ROOT_LOGGER_NAME}.') or name == ROOT_LOGGER_NAME:
        return logging.getLogger(name)
    return logging.getLogger(f'{ROOT_LOGGER_NAME}.{name}')
