"""
Configuration for launch specification translation.

Values are read from the ``spotinst`` Pulumi config namespace, e.g.::

    pulumi config set spotinst:rootVolumeSize 40
    pulumi config set spotinst:rootVolumeType io1
    pulumi config set spotinst:rootVolumeIops 3000
    pulumi config set spotinst:orientation cost
"""

import pulumi
from typing import Optional

from .storage.ebs import RootVolumeOpts
from .utils.orientation import Orientation, normalize_orientation

CONFIG_NAMESPACE = "spotinst"

DEFAULTS = {
    "root_volume_size": 20,  # GB
    "root_volume_type": "gp2",
    "root_volume_iops": None,
    "orientation": None,
}


def _get_config(config: Optional[pulumi.Config]) -> pulumi.Config:
    return config if config is not None else pulumi.Config(CONFIG_NAMESPACE)


def get_root_volume_opts(config: Optional[pulumi.Config] = None) -> RootVolumeOpts:
    """
    Read root volume options, falling back to DEFAULTS.
    
    Args:
        config: Optional config to read from (defaults to the spotinst namespace)
    
    Returns:
        RootVolumeOpts: The root volume options
    """
    config = _get_config(config)

    size = config.get_int("rootVolumeSize")
    volume_type = config.get("rootVolumeType")
    iops = config.get_int("rootVolumeIops")

    return RootVolumeOpts(
        size=size if size is not None else DEFAULTS["root_volume_size"],
        type=volume_type or DEFAULTS["root_volume_type"],
        iops=iops if iops is not None else DEFAULTS["root_volume_iops"],
    )


def get_orientation(config: Optional[pulumi.Config] = None) -> Orientation:
    """Read and normalize the placement orientation."""
    config = _get_config(config)
    return normalize_orientation(config.get("orientation") or DEFAULTS["orientation"])
