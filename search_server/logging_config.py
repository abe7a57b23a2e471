"""Logging configuration with console and rotating file handlers"""
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

KEEP_SESSION_LOGS = 5


def _cleanup_old_logs(log_dir: Path, base_name: str, keep: int) -> None:
    """Delete old session logs so that, with the new one, at most `keep` remain"""
    existing_logs = sorted(log_dir.glob(f"{base_name}_*.log"), reverse=True)  # Newest first
    for old_log in existing_logs[keep - 1:]:
        try:
            old_log.unlink()
        except OSError:
            pass  # Another process may hold or have removed it


def setup_logging(
    log_file: str = "logs/search-server.log",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    keep: int = KEEP_SESSION_LOGS,
) -> Path:
    """
    Configure logging with two destinations:
    - Console: Brief logs (INFO by default)
    - File: Detailed logs (DEBUG by default) with rotation

    Rotation policy:
    - New log file per process start (timestamp-based naming)
    - Keep last `keep` session logs (cleanup on startup)
    - Rotate when a file reaches 10MB

    Args:
        log_file: Base path to log file
        console_level: Console logging level
        file_level: File logging level
        keep: Number of session logs to retain

    Returns:
        Path of this session's log file
    """
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    _cleanup_old_logs(log_path.parent, log_path.stem, keep)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    session_log = log_path.parent / f"{log_path.stem}_{timestamp}.log"

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Filter in handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

    file_handler = RotatingFileHandler(
        session_log,
        mode='a',
        maxBytes=10*1024*1024,  # 10MB
        backupCount=10,
        encoding='utf-8'
    )
    file_handler.setLevel(file_level)
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))

    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)

    # Request logs are noisy at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logging.info(f"Logging configured: console={logging.getLevelName(console_level)}, file={session_log} ({logging.getLevelName(file_level)})")

    return session_log
