"""
Block device mappings for Elastigroup and Ocean launch specifications.
"""

from typing import Any, Dict, Optional

from ..errors import RequiredFieldMissing
from ..utils.ami import resolve_image
from .ebs import BlockDeviceMapping, ElastigroupEbs, RootVolumeOpts, volume_iops


class ElastigroupBlockDeviceMapping:
    """A block device mapping in the Spotinst API format."""

    def __init__(
        self,
        device_name: str,
        virtual_name: Optional[str] = None,
        ebs: Optional[ElastigroupEbs] = None,
    ):
        self.device_name = device_name
        self.virtual_name = virtual_name
        self.ebs = ebs

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"deviceName": self.device_name}
        if self.virtual_name is not None:
            out["virtualName"] = self.virtual_name
        if self.ebs is not None:
            out["ebs"] = self.ebs.to_dict()
        return out


def build_ephemeral_devices(cloud, instance_type: Optional[str]) -> Dict[str, BlockDeviceMapping]:
    """
    Build mappings for the instance store devices of an instance type.
    
    Args:
        cloud: Collaborator exposing get_machine_type_info(name)
        instance_type: EC2 instance type (e.g., m5d.large)
    
    Returns:
        Dict[str, BlockDeviceMapping]: Mappings keyed by device name
    
    Raises:
        RequiredFieldMissing: If no instance type is given
    """
    if instance_type is None:
        raise RequiredFieldMissing("InstanceType")

    machine_type = cloud.get_machine_type_info(instance_type)

    mappings = {}
    for device in machine_type.ephemeral_devices():
        mappings[device.device_name] = BlockDeviceMapping(virtual_name=device.virtual_name)

    return mappings


def build_root_device(cloud, image_id: Optional[str], opts: RootVolumeOpts) -> Dict[str, BlockDeviceMapping]:
    """
    Build the root volume mapping for an image.
    
    Args:
        cloud: Collaborator exposing resolve_image(name)
        image_id: AMI ID or owner/name reference
        opts: Root volume options
    
    Returns:
        Dict[str, BlockDeviceMapping]: A single mapping keyed by the image's
        root device name
    """
    image = resolve_image(cloud, image_id or "")

    mapping = BlockDeviceMapping(
        ebs_delete_on_termination=True,
        ebs_volume_size=int(opts.size),
        ebs_volume_type=opts.type,
        ebs_volume_iops=volume_iops(opts.type, opts.iops),
    )

    return {image.root_device_name or "": mapping}


def build_block_device_mapping(device_name: str, mapping: BlockDeviceMapping) -> ElastigroupBlockDeviceMapping:
    """
    Convert a block device mapping to the Spotinst API format.
    
    Args:
        device_name: Device name (e.g., /dev/xvda)
        mapping: The mapping to convert
    
    Returns:
        ElastigroupBlockDeviceMapping: The converted mapping
    """
    out = ElastigroupBlockDeviceMapping(device_name, virtual_name=mapping.virtual_name)

    if mapping.has_ebs():
        out.ebs = ElastigroupEbs(
            delete_on_termination=mapping.ebs_delete_on_termination,
            volume_size=mapping.ebs_volume_size,
            volume_type=mapping.ebs_volume_type,
            iops=volume_iops(mapping.ebs_volume_type, mapping.ebs_volume_iops),
        )

    return out
