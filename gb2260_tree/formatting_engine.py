"""
Formatting orchestration engine for the GB2260 tree application.

This module provides the FormattingEngine class that loads division records
from in-memory sources, runs the configured assembly policy and reports
statistics through the application logger.
"""

import time
from collections.abc import Iterable, Mapping
from typing import Any, List, Optional, Tuple

import pandas as pd

from .config import FormatConfig, AssemblyStats
from .data import DATA_OF_202011
from .exceptions import DataLoadError
from .hierarchy.partitioner import coerce_record, process_gb2260
from .hierarchy.tree_builder import TreeBuilder
from .logging_config import TreeLogger
from .models import ADDataItem, ADCodeNode, PartitionResult
from .utils.data_utils import records_from_dataframe


REQUIRED_COLUMNS = ['code', 'name']


class FormattingEngine:
    """
    Orchestrates record loading and tree assembly.

    The engine is stateless between runs apart from the statistics of the
    most recent run, so one instance can format several sources in turn.
    """

    def __init__(self, config: Optional[FormatConfig] = None,
                 logger: Optional[TreeLogger] = None):
        """
        Initialize the FormattingEngine.

        Args:
            config: Configuration object with formatting parameters
            logger: Optional logger instance for logging operations
        """
        self.config = config or FormatConfig()
        self.logger = logger or TreeLogger(level=self.config.log_level,
                                           log_file=self.config.log_file)
        self.tree_builder = TreeBuilder(
            logger=self.logger.logger,
            fallback_prefecture_name=self.config.fallback_prefecture_name,
            show_progress=self.config.show_progress
        )
        self.processing_stats: Optional[AssemblyStats] = None

    def load_records(self, source: Any = None) -> List[ADDataItem]:
        """
        Turn a record source into a list of ADDataItem.

        Args:
            source: A DataFrame with ``code`` and ``name`` columns, an iterable
                of ADDataItem or mappings, or None for the embedded dataset

        Returns:
            List of records in source order

        Raises:
            DataLoadError: If the source type is unsupported or a DataFrame
                lacks required columns
        """
        if source is None:
            return list(DATA_OF_202011)

        if isinstance(source, pd.DataFrame):
            missing = [col for col in REQUIRED_COLUMNS if col not in source.columns]
            if missing:
                raise DataLoadError(
                    f"Record DataFrame is missing required columns: {', '.join(missing)}",
                    source_type='DataFrame',
                    missing_columns=missing
                )
            return [ADDataItem.from_dict(row) for row in records_from_dataframe(source)]

        if isinstance(source, (str, bytes, Mapping)) or not isinstance(source, Iterable):
            raise DataLoadError(
                f"Unsupported record source: {type(source).__name__}",
                source_type=type(source).__name__
            )

        return [coerce_record(record) for record in source]

    def partition(self, source: Any = None) -> PartitionResult:
        """
        Load records and split them by administrative level.

        Args:
            source: Record source accepted by load_records

        Returns:
            PartitionResult of (provinces, prefectures, counties)
        """
        records = self.load_records(source)
        result = process_gb2260(records, logger=self.logger.logger)
        self.logger.info(
            f"Partitioned {result.total():,} records into "
            f"{len(result.provinces):,} provinces, {len(result.prefectures):,} prefectures "
            f"and {len(result.counties):,} counties"
        )
        return result

    def run(self, source: Any = None) -> Tuple[List[ADCodeNode], AssemblyStats]:
        """
        Run the complete pipeline from record loading to the assembled tree.

        Args:
            source: Record source accepted by load_records

        Returns:
            Tuple of (province nodes, assembly statistics)
        """
        start_time = time.time()

        self.logger.log_phase_start("Record Loading")
        load_start = time.time()
        records = self.load_records(source)
        self.logger.log_phase_complete("Record Loading", len(records), time.time() - load_start)

        self.logger.log_phase_start("Tree Assembly")
        if self.config.is_well_formed():
            tree = self.tree_builder.build_well_formed(records)
        else:
            tree = self.tree_builder.build_standard(records)

        stats = self.tree_builder.last_stats
        stats.processing_time = time.time() - start_time
        self.processing_stats = stats

        self.logger.log_assembly_complete(stats, self.config.tree_format)
        return tree, stats
