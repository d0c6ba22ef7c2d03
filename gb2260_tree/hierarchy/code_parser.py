"""
Code parsing and level classification for GB2260 division codes.

Parsing is permissive: anything that does not start with six ASCII digits
yields an all-absent ``ADCodeParsed`` instead of an exception, so the
classification predicates below are total over arbitrary input.
"""

import re
from typing import Any, Union

from ..models import ADCodeParsed
from ..utils.data_utils import safe_string_conversion
from .hierarchy_config import AdministrativeLevel, ZERO_SEGMENT


_CODE_PATTERN = re.compile(r'^(\d{2})(\d{2})(\d{2})', re.ASCII)

CodeOrParsed = Union[str, ADCodeParsed]


def parse_ad_code(ad_code: Any) -> ADCodeParsed:
    """
    Split a division code into province, prefecture and county segments.
    
    Only the leading six characters matter, so twelve-digit township codes
    are accepted and truncated. Strings are matched as given, so leading
    whitespace makes a code malformed; other values (ints, None, NaN) are
    converted with safe_string_conversion first.
    
    Args:
        ad_code: Division code, usually a string such as ``"320102"``
        
    Returns:
        ADCodeParsed with all four fields set, or all of them None
        
    Example:
        >>> parse_ad_code('320102003002')
        ADCodeParsed(code='320102', province_code='32', prefecture_code='01', county_code='02')
    """
    if not isinstance(ad_code, str):
        ad_code = safe_string_conversion(ad_code)

    match = _CODE_PATTERN.match(ad_code)
    if match is None:
        return ADCodeParsed.absent()
    
    province_code, prefecture_code, county_code = match.groups()
    return ADCodeParsed(
        code=match.group(0),
        province_code=province_code,
        prefecture_code=prefecture_code,
        county_code=county_code
    )


def _ensure_parsed(ad_code: CodeOrParsed) -> ADCodeParsed:
    if isinstance(ad_code, ADCodeParsed):
        return ad_code
    return parse_ad_code(ad_code)


def classify_parsed(parsed: ADCodeParsed) -> str:
    """
    Apply the segment rule to a parsed code.
    
    Malformed (absent) codes fall through to the county level here, because
    their county segment is not ``"00"``. The public predicates filter them
    out; the partitioner relies on this to keep every record in a bucket.
    """
    if parsed.county_code == ZERO_SEGMENT:
        if parsed.prefecture_code == ZERO_SEGMENT:
            return AdministrativeLevel.PROVINCE
        return AdministrativeLevel.PREFECTURE
    return AdministrativeLevel.COUNTY


def is_province(ad_code: CodeOrParsed) -> bool:
    """Check if a code (or parsed code) denotes a province-level division."""
    parsed = _ensure_parsed(ad_code)
    return parsed.is_valid() and classify_parsed(parsed) == AdministrativeLevel.PROVINCE


def is_prefecture(ad_code: CodeOrParsed) -> bool:
    """Check if a code (or parsed code) denotes a prefecture-level division."""
    parsed = _ensure_parsed(ad_code)
    return parsed.is_valid() and classify_parsed(parsed) == AdministrativeLevel.PREFECTURE


def is_county(ad_code: CodeOrParsed) -> bool:
    """Check if a code (or parsed code) denotes a county-level division."""
    parsed = _ensure_parsed(ad_code)
    return parsed.is_valid() and classify_parsed(parsed) == AdministrativeLevel.COUNTY
