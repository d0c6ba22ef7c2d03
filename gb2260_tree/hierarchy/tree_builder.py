"""
Tree assembly for the GB2260 tree application.

This module turns partitioned division records into province -> prefecture
-> county trees under two policies:

* standard: a county with no prefecture record is attached directly to its
  province, so some branches skip the prefecture level.
* well-formed: a placeholder prefecture is fabricated for such counties, so
  every county sits exactly three levels deep.

In both policies prefectures and counties whose province is missing are
dropped. Nothing is raised; drops are counted in ``AssemblyStats``.
"""

import logging
import time
from typing import Dict, Iterable, List, Optional, Tuple

from tqdm import tqdm

from ..config import AssemblyStats
from ..models import ADCodeNode, PartitionResult
from .hierarchy_config import (
    AdministrativeLevel,
    FALLBACK_PREFECTURE_NAME,
    ZERO_SEGMENT,
    default_prefecture_name
)
from .partitioner import RecordLike, process_gb2260


class TreeBuilder:
    """
    Assembles division trees from flat record lists.

    Sibling lookups go through dictionaries keyed by province code and by
    (province code, prefecture code). A key is registered only by the first
    node that claims it, which matches scanning the children in order and
    taking the first hit.
    """

    def __init__(self, logger: Optional[logging.Logger] = None,
                 fallback_prefecture_name: str = FALLBACK_PREFECTURE_NAME,
                 show_progress: bool = False):
        """
        Initialize the tree builder.

        Args:
            logger: Optional logger instance for debug output
            fallback_prefecture_name: Name for fabricated prefectures whose
                code is not in DEFAULT_PREFECTURE_NAMES
            show_progress: Display a progress bar while attaching counties
        """
        self.logger = logger or logging.getLogger(__name__)
        self.fallback_prefecture_name = fallback_prefecture_name
        self.show_progress = show_progress
        self.last_stats: Optional[AssemblyStats] = None

    def build_standard(self, records: Iterable[RecordLike]) -> List[ADCodeNode]:
        """
        Build a tree in which counties may hang directly off a province.

        Args:
            records: Division records in catalog order

        Returns:
            Province nodes in input order
        """
        return self._build(records, well_formed=False)

    def build_well_formed(self, records: Iterable[RecordLike]) -> List[ADCodeNode]:
        """
        Build a uniform three-level tree, fabricating prefectures as needed.

        Args:
            records: Division records in catalog order

        Returns:
            Province nodes in input order
        """
        return self._build(records, well_formed=True)

    def _build(self, records: Iterable[RecordLike], well_formed: bool) -> List[ADCodeNode]:
        start_time = time.time()
        partition = process_gb2260(records, logger=self.logger)

        stats = AssemblyStats(
            total_records=partition.total(),
            provinces=len(partition.provinces),
            prefectures=len(partition.prefectures),
            counties=len(partition.counties)
        )

        roots, province_index = self._create_provinces(partition)
        sibling_index = self._attach_prefectures(partition, province_index, stats)

        if well_formed:
            self._attach_counties_well_formed(partition, province_index, sibling_index, stats)
        else:
            self._attach_counties_standard(partition, province_index, sibling_index, stats)

        stats.processing_time = time.time() - start_time
        self.last_stats = stats

        self.logger.debug(
            f"Assembled {'well-formed' if well_formed else 'standard'} tree: "
            f"{len(roots):,} provinces, {stats.get_attached_count():,}/{stats.total_records:,} "
            f"records attached, {stats.synthesized_prefectures:,} synthesized prefectures"
        )
        return roots

    def _create_provinces(self, partition: PartitionResult
                          ) -> Tuple[List[ADCodeNode], Dict[str, ADCodeNode]]:
        """Create the root sequence and index it by province code."""
        roots = []
        province_index = {}

        for province in partition.provinces:
            node = province.with_children()
            roots.append(node)
            province_index.setdefault(node.province_code, node)

        return roots, province_index

    def _attach_prefectures(self, partition: PartitionResult,
                            province_index: Dict[str, ADCodeNode],
                            stats: AssemblyStats) -> Dict[Tuple[str, str], ADCodeNode]:
        """Attach prefectures to their provinces and index the new children."""
        sibling_index = {}

        for prefecture in partition.prefectures:
            province_node = province_index.get(prefecture.province_code)
            if province_node is None:
                stats.dropped_prefectures += 1
                self.logger.debug(f"Dropping prefecture {prefecture.code} ({prefecture.name}): no province")
                continue

            node = prefecture.with_children()
            province_node.children.append(node)
            sibling_index.setdefault((node.province_code, node.prefecture_code), node)

        return sibling_index

    def _iter_counties(self, partition: PartitionResult) -> Iterable[ADCodeNode]:
        """Iterate counties, wrapped in a progress bar when enabled."""
        return tqdm(
            partition.counties,
            desc="Attaching counties",
            unit="county",
            disable=not self.show_progress
        )

    def _attach_counties_standard(self, partition: PartitionResult,
                                  province_index: Dict[str, ADCodeNode],
                                  sibling_index: Dict[Tuple[str, str], ADCodeNode],
                                  stats: AssemblyStats):
        """Attach counties, falling back to the province when no prefecture matches."""
        for county in self._iter_counties(partition):
            province_node = province_index.get(county.province_code)
            if province_node is None:
                stats.dropped_counties += 1
                self.logger.debug(f"Dropping county {county.code!r} ({county.name}): no province")
                continue

            key = (county.province_code, county.prefecture_code)
            parent = sibling_index.get(key)

            # An earlier orphan county may hold the key; it is a sibling, not a parent
            if parent is None or parent.level == AdministrativeLevel.COUNTY:
                province_node.children.append(county)
                sibling_index.setdefault(key, county)
                stats.province_level_counties += 1
            else:
                parent.children.append(county)

    def _attach_counties_well_formed(self, partition: PartitionResult,
                                     province_index: Dict[str, ADCodeNode],
                                     sibling_index: Dict[Tuple[str, str], ADCodeNode],
                                     stats: AssemblyStats):
        """Attach counties, fabricating a prefecture when none matches."""
        for county in self._iter_counties(partition):
            province_node = province_index.get(county.province_code)
            if province_node is None:
                stats.dropped_counties += 1
                self.logger.debug(f"Dropping county {county.code!r} ({county.name}): no province")
                continue

            key = (county.province_code, county.prefecture_code)
            parent = sibling_index.get(key)

            if parent is None:
                parent = self._synthesize_prefecture(county)
                province_node.children.append(parent)
                sibling_index[key] = parent
                stats.synthesized_prefectures += 1
                self.logger.debug(f"Synthesized prefecture {parent.code} ({parent.name})")

            parent.children.append(county)

    def _synthesize_prefecture(self, county: ADCodeNode) -> ADCodeNode:
        """Create the placeholder prefecture owning ``county``."""
        code = f"{county.province_code}{county.prefecture_code}{ZERO_SEGMENT}"
        return ADCodeNode(
            code=code,
            name=default_prefecture_name(code, self.fallback_prefecture_name),
            province_code=county.province_code,
            prefecture_code=county.prefecture_code,
            county_code=ZERO_SEGMENT,
            level=AdministrativeLevel.PREFECTURE,
            children=[]
        )


def format_gb2260_standard(records: Iterable[RecordLike]) -> List[ADCodeNode]:
    """
    Format records as a province -> (prefecture ->) county tree.

    Counties without a prefecture record are attached to their province
    directly, next to the prefectures.

    Args:
        records: Division records in catalog order

    Returns:
        Province nodes in input order
    """
    return TreeBuilder().build_standard(records)


def format_gb2260_well_formed(records: Iterable[RecordLike]) -> List[ADCodeNode]:
    """
    Format records as a strict province -> prefecture -> county tree.

    Args:
        records: Division records in catalog order

    Returns:
        Province nodes in input order
    """
    return TreeBuilder().build_well_formed(records)
