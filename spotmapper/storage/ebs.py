from typing import Any, Dict, Optional

# The Spotinst API rejects the IOPS parameter for gp2 volumes.
IOPS_UNSUPPORTED_VOLUME_TYPES = frozenset({"gp2"})


class BlockDeviceMapping:
    """
    A block device mapping as the provisioning tasks model it.
    
    The device name is not part of the mapping; mappings are held in a
    dictionary keyed by device name.
    """

    def __init__(
        self,
        virtual_name: Optional[str] = None,
        ebs_delete_on_termination: Optional[bool] = None,
        ebs_volume_size: Optional[int] = None,
        ebs_volume_type: Optional[str] = None,
        ebs_volume_iops: Optional[int] = None,
    ):
        self.virtual_name = virtual_name
        self.ebs_delete_on_termination = ebs_delete_on_termination
        self.ebs_volume_size = ebs_volume_size
        self.ebs_volume_type = ebs_volume_type
        self.ebs_volume_iops = ebs_volume_iops

    def has_ebs(self) -> bool:
        return (
            self.ebs_delete_on_termination is not None
            or self.ebs_volume_size is not None
            or self.ebs_volume_type is not None
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, BlockDeviceMapping):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in vars(self).items() if v is not None)
        return f"BlockDeviceMapping({fields})"


class RootVolumeOpts:
    """Root volume options for an instance group."""

    def __init__(self, size: int, type: Optional[str] = None, iops: Optional[int] = None):
        self.size = size
        self.type = type
        self.iops = iops

    def __repr__(self) -> str:
        return f"RootVolumeOpts(size={self.size!r}, type={self.type!r}, iops={self.iops!r})"


def volume_iops(volume_type: Optional[str], iops: Optional[int]) -> Optional[int]:
    """
    Return the IOPS value that may be sent for a volume.
    
    Args:
        volume_type: EBS volume type (gp2, gp3, io1, etc.)
        iops: Requested IOPS, if any
    
    Returns:
        Optional[int]: The IOPS to send, or None if it must be omitted
    """
    if iops is None or volume_type in IOPS_UNSUPPORTED_VOLUME_TYPES:
        return None
    return int(iops)


class ElastigroupEbs:
    """The EBS section of an Elastigroup block device mapping."""

    def __init__(
        self,
        delete_on_termination: Optional[bool] = None,
        volume_size: Optional[int] = None,
        volume_type: Optional[str] = None,
        iops: Optional[int] = None,
    ):
        self.delete_on_termination = delete_on_termination
        self.volume_size = volume_size
        self.volume_type = volume_type
        self.iops = iops

    def to_dict(self) -> Dict[str, Any]:
        out = {
            "deleteOnTermination": self.delete_on_termination,
            "volumeSize": self.volume_size,
            "volumeType": self.volume_type,
            "iops": self.iops,
        }
        return {k: v for k, v in out.items() if v is not None}
