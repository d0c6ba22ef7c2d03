"""
Record partitioning for the GB2260 tree application.

Splits a flat list of division records into province, prefecture and
county buckets in a single pass, keeping input order inside each bucket.
"""

import logging
from typing import Any, Iterable, Mapping, Optional, Union

from ..models import ADDataItem, ADCodeNode, PartitionResult
from .code_parser import parse_ad_code, classify_parsed
from .hierarchy_config import AdministrativeLevel


RecordLike = Union[ADDataItem, Mapping[str, Any]]


def coerce_record(record: RecordLike) -> ADDataItem:
    """
    Normalize a record given as ``ADDataItem``, mapping or attribute object.
    
    Missing fields become empty strings; an empty code parses as absent.
    """
    if isinstance(record, ADDataItem):
        return record
    if isinstance(record, Mapping):
        return ADDataItem.from_dict(record)
    return ADDataItem(code=getattr(record, 'code', None), name=getattr(record, 'name', None))


def process_gb2260(records: Iterable[RecordLike],
                   logger: Optional[logging.Logger] = None) -> PartitionResult:
    """
    Partition records by administrative level.
    
    Every record is parsed once and routed to exactly one bucket. Records
    whose code cannot be parsed land in the county bucket; assembly later
    drops them since no province matches an absent province code.
    
    Args:
        records: Division records in catalog order
        logger: Optional logger for debug output
        
    Returns:
        PartitionResult of (provinces, prefectures, counties)
    """
    logger = logger or logging.getLogger(__name__)
    
    buckets = {level: [] for level in AdministrativeLevel.ALL_LEVELS}
    malformed = 0
    
    for record in records:
        item = coerce_record(record)
        parsed = parse_ad_code(item.code)
        if not parsed.is_valid():
            malformed += 1
            logger.debug(f"Unparseable division code {item.code!r} ({item.name})")
        
        level = classify_parsed(parsed)
        buckets[level].append(ADCodeNode.from_record(item, parsed, level))
    
    result = PartitionResult(
        provinces=buckets[AdministrativeLevel.PROVINCE],
        prefectures=buckets[AdministrativeLevel.PREFECTURE],
        counties=buckets[AdministrativeLevel.COUNTY]
    )
    
    logger.debug(
        f"Partitioned {result.total():,} records: {len(result.provinces):,} provinces, "
        f"{len(result.prefectures):,} prefectures, {len(result.counties):,} counties "
        f"({malformed:,} unparseable)"
    )
    return result
