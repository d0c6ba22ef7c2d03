"""
Logging configuration for the GB2260 tree application.

This module provides the logger wrapper used by the formatting engine and
the command line entry point.
"""

import logging
import sys
from pathlib import Path
from typing import Optional


class TreeLogger:
    """Custom logger for GB2260 tree operations."""
    
    def __init__(self, name: str = "gb2260_tree", level: str = "INFO",
                 log_file: Optional[str] = None):
        """
        Initialize the tree logger.
        
        Args:
            name: Logger name
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_file: Optional file path for log output
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))
        
        # Clear any existing handlers
        self.logger.handlers.clear()
        
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        
        # Console handler; stdout is reserved for the formatted tree
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)
        
        if log_file:
            self._setup_file_handler(log_file, formatter)
    
    def _setup_file_handler(self, log_file: str, formatter: logging.Formatter):
        """Set up file logging handler."""
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setFormatter(formatter)
        self.logger.addHandler(file_handler)
    
    def info(self, message: str):
        """Log info message."""
        self.logger.info(message)
    
    def debug(self, message: str):
        """Log debug message."""
        self.logger.debug(message)
    
    def warning(self, message: str):
        """Log warning message."""
        self.logger.warning(message)
    
    def error(self, message: str):
        """Log error message."""
        self.logger.error(message)
    
    def log_phase_start(self, phase_name: str):
        """Log the start of a processing phase."""
        self.info("-" * 40)
        self.info(f"Starting {phase_name}")
        self.info("-" * 40)
    
    def log_phase_complete(self, phase_name: str, count: int, duration: float):
        """Log the completion of a processing phase."""
        self.info(f"Completed {phase_name}")
        self.info(f"Records processed: {count:,}")
        self.info(f"Duration: {duration:.3f} seconds")
    
    def log_assembly_complete(self, stats, tree_format: str):
        """Log tree assembly completion with statistics."""
        self.info("=" * 60)
        self.info(f"GB2260 TREE ASSEMBLED ({tree_format})")
        self.info("=" * 60)
        self.info(f"Total records: {stats.total_records:,}")
        self.info(f"Provinces: {stats.provinces:,}")
        self.info(f"Prefectures: {stats.prefectures:,}")
        self.info(f"Counties: {stats.counties:,}")
        
        if stats.synthesized_prefectures:
            self.info(f"Synthesized prefectures: {stats.synthesized_prefectures:,}")
        if stats.province_level_counties:
            self.info(f"Counties attached to a province: {stats.province_level_counties:,}")
        
        dropped = stats.dropped_prefectures + stats.dropped_counties
        if dropped:
            self.log_data_quality_warning(
                f"{dropped:,} records without an owning province were dropped "
                f"({stats.get_drop_rate():.2f}%)"
            )
        self.info(f"Processing time: {stats.processing_time:.3f} seconds")
    
    def log_data_quality_warning(self, message: str):
        """Log data quality warnings."""
        self.warning(f"DATA QUALITY: {message}")


def setup_logging(config) -> TreeLogger:
    """
    Set up logging based on configuration.
    
    Args:
        config: FormatConfig instance
        
    Returns:
        Configured TreeLogger instance
    """
    return TreeLogger(
        name="gb2260_tree",
        level=config.log_level,
        log_file=config.log_file
    )
