"""
Utility functions for launch specification translation.
"""

from .tags import (
    build_elastigroup_tags,
    build_ocean_tags,
    build_autoscale_labels,
    build_ocean_labels,
    ElastigroupTag,
    OceanTag,
    AutoScaleLabel,
    OceanLabel,
)
from .ami import resolve_image
from .orientation import Orientation, normalize_orientation

__all__ = [
    'build_elastigroup_tags',
    'build_ocean_tags',
    'build_autoscale_labels',
    'build_ocean_labels',
    'ElastigroupTag',
    'OceanTag',
    'AutoScaleLabel',
    'OceanLabel',
    'resolve_image',
    'Orientation',
    'normalize_orientation',
]
