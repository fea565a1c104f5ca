"""
Ocean-specific components.
"""

from .taints import Taint, TaintParseResult, TaintParseStatus, parse_taint, parse_ocean_taints, build_ocean_taints

__all__ = [
    'Taint',
    'TaintParseResult',
    'TaintParseStatus',
    'parse_taint',
    'parse_ocean_taints',
    'build_ocean_taints',
]
