import logging
import logging.handlers
import os
from datetime import datetime

from portfolio_server.core.config import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

_configured = False


def setup_logging(log_dir: str = None, level: str = None, log_to_file: bool = True):
    """
    Set up logging configuration to write logs to files with date-time names
    """
    global _configured
    if _configured:
        return

    log_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)

    # Create formatter
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Create console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_to_file:
        # Create logs directory if it doesn't exist
        logs_dir = log_dir or settings.log_dir
        os.makedirs(logs_dir, exist_ok=True)

        # Create log file name with current date and time
        current_time = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        log_filename = os.path.join(logs_dir, f"app_{current_time}.log")

        file_handler = logging.FileHandler(log_filename, encoding='utf-8')
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

        # Also configure uvicorn access logs to use the same file
        access_logger = logging.getLogger("uvicorn.access")
        access_logger.addHandler(file_handler)
        access_logger.setLevel(log_level)

    # Quieten per-request chatter from the HTTP client
    logging.getLogger("httpx").setLevel(logging.WARNING)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the specified name
    """
    return logging.getLogger(name)
