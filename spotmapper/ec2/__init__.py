"""
EC2 lookups.
"""

from .cloud import Ec2Cloud, Image, MachineTypeInfo, EphemeralDevice

__all__ = [
    'Ec2Cloud',
    'Image',
    'MachineTypeInfo',
    'EphemeralDevice',
]
