"""
Block device mapping components.
"""

from .ebs import BlockDeviceMapping, RootVolumeOpts, ElastigroupEbs, volume_iops
from .devices import (
    ElastigroupBlockDeviceMapping,
    build_ephemeral_devices,
    build_root_device,
    build_block_device_mapping,
)

__all__ = [
    'BlockDeviceMapping',
    'RootVolumeOpts',
    'ElastigroupEbs',
    'volume_iops',
    'ElastigroupBlockDeviceMapping',
    'build_ephemeral_devices',
    'build_root_device',
    'build_block_device_mapping',
]
