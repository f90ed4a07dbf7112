"""
Centralized logging configuration for the SAT prep backend
- Structured logging with rotation and cleanup
- Performance tracking for debugging
- Console-only mode for serverless deployments
"""
import logging
import logging.handlers
import sys
from pathlib import Path
from datetime import datetime, timedelta
import time

from core.config import settings

if settings.LOG_TO_FILE:
    LOGS_DIR = Path(__file__).parent.parent / "logs"
    LOGS_DIR.mkdir(exist_ok=True)
else:
    LOGS_DIR = None

class PerformanceLogger:
    """Logger specifically for tracking performance metrics"""

    def __init__(self):
        self.timers = {}

    def start_timer(self, operation: str) -> str:
        """Start timing an operation"""
        timer_id = f"{operation}_{int(time.time() * 1000)}"
        self.timers[timer_id] = time.time()
        return timer_id

    def end_timer(self, timer_id: str, context: str = "") -> float:
        """End timing and log the duration"""
        if timer_id not in self.timers:
            return 0.0

        duration_ms = (time.time() - self.timers.pop(timer_id)) * 1000

        perf_logger = logging.getLogger('performance')
        perf_logger.info(f"{timer_id.rsplit('_', 1)[0]}: {duration_ms:.1f}ms {context}")

        return duration_ms

def setup_console_logging():
    """Setup console-only logging for serverless deployments"""
    logger = logging.getLogger('satprep')
    logger.setLevel(settings.LOG_LEVEL.upper())
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(
        '%(asctime)s | %(levelname)s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
    logger.propagate = False

    return logger

def _rotating_handler(filename: str, formatter: logging.Formatter, max_mb: int, backups: int):
    handler = logging.handlers.RotatingFileHandler(
        LOGS_DIR / filename,
        maxBytes=max_mb * 1024 * 1024,
        backupCount=backups
    )
    handler.setFormatter(formatter)
    return handler

def setup_logging():
    """Setup logging configuration"""
    if LOGS_DIR is None:
        return setup_console_logging()

    detailed_formatter = logging.Formatter(
        '%(asctime)s | %(name)s | %(levelname)s | %(filename)s:%(lineno)d | %(message)s'
    )
    simple_formatter = logging.Formatter(
        '%(asctime)s | %(levelname)s | %(message)s'
    )

    # 1. Main application logger
    main_logger = logging.getLogger('satprep')
    main_logger.setLevel(logging.DEBUG)
    main_logger.handlers.clear()
    main_logger.addHandler(_rotating_handler('satprep.log', detailed_formatter, 10, 5))

    # 2. Performance logger (separate file)
    perf_logger = logging.getLogger('performance')
    perf_logger.setLevel(logging.INFO)
    perf_logger.handlers.clear()
    perf_logger.addHandler(_rotating_handler('performance.log', simple_formatter, 5, 3))

    # 3. API request logger
    api_logger = logging.getLogger('satprep.api')
    api_logger.setLevel(logging.INFO)
    api_logger.handlers.clear()
    api_logger.addHandler(_rotating_handler('api.log', detailed_formatter, 5, 3))

    # 4. Errors get their own file for easy monitoring
    error_handler = _rotating_handler('errors.log', detailed_formatter, 5, 5)
    error_handler.setLevel(logging.ERROR)
    main_logger.addHandler(error_handler)

    # Console handler for development
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(simple_formatter)
    console_handler.setLevel(settings.LOG_LEVEL.upper())
    main_logger.addHandler(console_handler)

    main_logger.propagate = False
    perf_logger.propagate = False

    return main_logger

def cleanup_old_logs(days_to_keep: int = 7):
    """Remove log files older than specified days"""
    if not LOGS_DIR:
        return

    cutoff_date = datetime.now() - timedelta(days=days_to_keep)

    cleaned_count = 0
    for log_file in LOGS_DIR.glob("*.log.*"):
        if log_file.stat().st_mtime < cutoff_date.timestamp():
            try:
                log_file.unlink()
                cleaned_count += 1
            except OSError as e:
                logging.getLogger('satprep').warning(f"Could not remove {log_file.name}: {e}")

    if cleaned_count > 0:
        logging.getLogger('satprep').info(f"Cleaned up {cleaned_count} old log files")

# Global performance logger instance
performance_logger = PerformanceLogger()

# Auto-setup logging when module is imported
logger = setup_logging()

# Prune rotated logs once when the module loads
cleanup_old_logs()
