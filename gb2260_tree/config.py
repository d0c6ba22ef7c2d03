"""
Configuration management for the GB2260 tree application.

This module provides dataclasses for the tree formatting options and the
statistics gathered while assembling a tree.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from .exceptions import ConfigurationError, create_config_error
from .hierarchy.hierarchy_config import FALLBACK_PREFECTURE_NAME


TREE_FORMATS = ('standard', 'well_formed')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class FormatConfig:
    """Configuration class for tree formatting parameters."""

    # Assembly policy: 'standard' may skip the prefecture level,
    # 'well_formed' fabricates placeholder prefectures instead
    tree_format: str = 'standard'

    # Name used for fabricated prefectures missing from the default table
    fallback_prefecture_name: str = FALLBACK_PREFECTURE_NAME

    # Show a tqdm progress bar while attaching counties
    show_progress: bool = False

    # Logging configuration
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_tree_format()
        self._validate_fallback_name()
        self._validate_log_level()

    def _validate_tree_format(self):
        """Normalize and validate the tree format name."""
        normalized = str(self.tree_format).strip().lower().replace('-', '_')
        if normalized not in TREE_FORMATS:
            raise create_config_error('tree_format', self.tree_format, list(TREE_FORMATS))
        self.tree_format = normalized

    def _validate_fallback_name(self):
        """Validate the fallback prefecture name."""
        if not self.fallback_prefecture_name or not str(self.fallback_prefecture_name).strip():
            raise ConfigurationError(
                "Fallback prefecture name must not be empty",
                config_key='fallback_prefecture_name',
                config_value=self.fallback_prefecture_name
            )

    def _validate_log_level(self):
        """Validate the logging level."""
        if str(self.log_level).upper() not in LOG_LEVELS:
            raise create_config_error('log_level', self.log_level, list(LOG_LEVELS))
        self.log_level = str(self.log_level).upper()

    def is_well_formed(self) -> bool:
        """Check whether the well-formed policy is selected."""
        return self.tree_format == 'well_formed'

    @classmethod
    def from_dict(cls, config_dict: Dict) -> 'FormatConfig':
        """Create configuration from dictionary."""
        return cls(**config_dict)

    def to_dict(self) -> Dict:
        """Convert configuration to dictionary."""
        return {
            'tree_format': self.tree_format,
            'fallback_prefecture_name': self.fallback_prefecture_name,
            'show_progress': self.show_progress,
            'log_level': self.log_level,
            'log_file': self.log_file
        }


@dataclass
class AssemblyStats:
    """Statistics tracking for one tree assembly."""

    total_records: int = 0
    provinces: int = 0
    prefectures: int = 0
    counties: int = 0

    # Records with no owning province
    dropped_prefectures: int = 0
    dropped_counties: int = 0

    # Well-formed policy: placeholder prefectures created
    synthesized_prefectures: int = 0

    # Standard policy: counties attached straight to their province
    province_level_counties: int = 0

    processing_time: float = 0.0

    def get_attached_count(self) -> int:
        """Number of input records that ended up in the tree."""
        return self.total_records - self.dropped_prefectures - self.dropped_counties

    def get_drop_rate(self) -> float:
        """Calculate the percentage of records dropped during assembly."""
        if self.total_records == 0:
            return 0.0

        dropped = self.dropped_prefectures + self.dropped_counties
        return (dropped / self.total_records) * 100
