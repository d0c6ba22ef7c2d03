"""
Data models for the GB2260 tree application.

This module defines the core data structures used throughout code parsing,
partitioning and tree assembly.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Mapping, NamedTuple, Optional, Tuple

from .utils.data_utils import safe_string_conversion


@dataclass
class ADDataItem:
    """Represents a raw administrative division record (code plus name)."""

    code: str
    name: str

    def __post_init__(self):
        """Clean both fields after initialization; string codes are kept verbatim."""
        if not isinstance(self.code, str):
            self.code = safe_string_conversion(self.code)
        self.name = safe_string_conversion(self.name)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'ADDataItem':
        """Create a record from a mapping; missing keys become empty strings."""
        return cls(code=data.get('code'), name=data.get('name'))


@dataclass(frozen=True)
class ADCodeParsed:
    """
    Result of splitting a division code into its three two-digit segments.

    Either every field holds a string or every field is None; a code that
    does not start with six ASCII digits is never partially parsed.

    Attributes:
        code: The leading six digits of the input
        province_code: Digits 1-2
        prefecture_code: Digits 3-4
        county_code: Digits 5-6
    """
    code: Optional[str]
    province_code: Optional[str]
    prefecture_code: Optional[str]
    county_code: Optional[str]

    @classmethod
    def absent(cls) -> 'ADCodeParsed':
        """Build the all-absent result used for malformed codes."""
        return cls(code=None, province_code=None, prefecture_code=None, county_code=None)

    def is_valid(self) -> bool:
        """Check whether the code was parsed successfully."""
        return self.code is not None


@dataclass
class ADCodeNode:
    """
    A classified division record, and a node of the assembled tree.

    Counties are leaves and keep ``children`` as None. Provinces and
    prefectures created during assembly always carry a list, even when
    nothing was attached to them.
    """

    code: str
    name: str
    province_code: Optional[str]
    prefecture_code: Optional[str]
    county_code: Optional[str]
    level: str
    children: Optional[List['ADCodeNode']] = None

    @classmethod
    def from_record(cls, record: ADDataItem, parsed: ADCodeParsed, level: str) -> 'ADCodeNode':
        """Create a classified node from a raw record and its parsed code."""
        return cls(
            code=record.code,
            name=record.name,
            province_code=parsed.province_code,
            prefecture_code=parsed.prefecture_code,
            county_code=parsed.county_code,
            level=level
        )

    def with_children(self, children: Optional[List['ADCodeNode']] = None) -> 'ADCodeNode':
        """Return a copy of this node owning a fresh children list."""
        return ADCodeNode(
            code=self.code,
            name=self.name,
            province_code=self.province_code,
            prefecture_code=self.prefecture_code,
            county_code=self.county_code,
            level=self.level,
            children=list(children) if children else []
        )

    def iter_nodes(self, depth: int = 1) -> Iterator[Tuple[int, 'ADCodeNode']]:
        """
        Walk this subtree depth-first in pre-order.

        Args:
            depth: Depth assigned to this node (top-level provinces are 1)

        Yields:
            Tuples of (depth, node)
        """
        yield depth, self
        for child in self.children or []:
            yield from child.iter_nodes(depth + 1)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert node (and its subtree) to a plain dictionary.

        The ``children`` key is omitted for leaves that carry None.
        """
        result: Dict[str, Any] = {
            'code': self.code,
            'name': self.name,
            'province_code': self.province_code,
            'prefecture_code': self.prefecture_code,
            'county_code': self.county_code,
            'level': self.level
        }
        if self.children is not None:
            result['children'] = [child.to_dict() for child in self.children]
        return result


class PartitionResult(NamedTuple):
    """Records split into the three administrative levels, input order kept."""

    provinces: List[ADCodeNode]
    prefectures: List[ADCodeNode]
    counties: List[ADCodeNode]

    def total(self) -> int:
        """Total number of records across the three buckets."""
        return len(self.provinces) + len(self.prefectures) + len(self.counties)
