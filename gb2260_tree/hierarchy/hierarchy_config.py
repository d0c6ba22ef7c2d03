"""
Hierarchy configuration for the GB2260 tree application.

This module defines the three administrative levels encoded by a GB2260
code and the static table of names used for fabricated prefectures.
"""

from types import MappingProxyType
from typing import Mapping


class AdministrativeLevel:
    """
    Level tags carried by classified nodes.
    
    A code is split into three two-digit segments; which trailing segments
    are ``"00"`` decides the level:
    
        110000 -> province    (prefecture and county segments are zero)
        130100 -> prefecture  (county segment is zero)
        110101 -> county      (county segment is non-zero)
    """
    PROVINCE = 'province'
    PREFECTURE = 'prefecture'
    COUNTY = 'county'
    
    ALL_LEVELS = (PROVINCE, PREFECTURE, COUNTY)


# Segment value marking an unused level in a code
ZERO_SEGMENT = '00'

# Names for prefecture codes that have no record of their own in the catalog
DEFAULT_PREFECTURE_NAMES: Mapping[str, str] = MappingProxyType({
    '110100': '市辖区',  # 北京市
    '120100': '市辖区',  # 天津市
    '310100': '市辖区',  # 上海市
    '419000': '省直辖县级行政区划',  # 河南省
    '429000': '省直辖县级行政区划',  # 湖北省
    '469000': '省直辖县级行政区划',  # 海南省
    '500100': '市辖区',  # 重庆市
    '500200': '县',  # 重庆市
    '659000': '自治区直辖县级行政区划',  # 新疆维吾尔自治区
})

FALLBACK_PREFECTURE_NAME = '直辖'


def default_prefecture_name(code: str, fallback: str = FALLBACK_PREFECTURE_NAME) -> str:
    """
    Look up the display name for a synthesized prefecture code.
    
    Args:
        code: Six-digit prefecture code ending in ``"00"``
        fallback: Name returned for codes missing from the table
        
    Returns:
        The table entry for ``code``, or ``fallback``
    """
    return DEFAULT_PREFECTURE_NAMES.get(code, fallback)
