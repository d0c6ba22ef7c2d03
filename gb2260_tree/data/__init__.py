"""
Embedded reference data for the GB2260 tree application.
"""

from .gb2260_202011 import DATA_OF_202011, DATA_VERSION

__all__ = ['DATA_OF_202011', 'DATA_VERSION']
