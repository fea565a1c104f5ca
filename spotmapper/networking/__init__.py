"""
Networking components.
"""

from .subnets import Subnet, subnets_equal_ignore_order

__all__ = [
    'Subnet',
    'subnets_equal_ignore_order',
]
