"""
Shared logging utilities.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

# Configure logging format
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure root logger.
    
    Args:
        level: Log level ('DEBUG', 'INFO', 'WARNING', 'ERROR')
        log_file: Optional log file path
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    
    # Calling twice (CLI + tests) must not duplicate output
    for handler in list(root_logger.handlers):
        if getattr(handler, "_scraper_handler", False):
            root_logger.removeHandler(handler)
            handler.close()
    
    # Console handler (stderr: stdout carries the JSON output)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    console_handler._scraper_handler = True
    root_logger.addHandler(console_handler)
    
    # File handler if specified
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        
        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        file_handler._scraper_handler = True
        root_logger.addHandler(file_handler)
