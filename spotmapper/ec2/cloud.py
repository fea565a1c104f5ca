"""
EC2 lookups used while building launch specifications.

This module provides the image and machine type lookups the translation
helpers depend on, backed by the EC2 API through boto3.
"""

import boto3
import pulumi
from botocore.exceptions import ClientError
from typing import Any, Dict, List, Optional

from ..errors import MachineTypeNotFoundError

__all__ = [
    'Ec2Cloud',
    'Image',
    'MachineTypeInfo',
    'EphemeralDevice',
]

# Instance store devices are attached from /dev/sdc onwards.
MAX_EPHEMERAL_DEVICES = 20


class Image:
    """The parts of an AMI description the translation helpers use."""

    def __init__(self, image_id: str, name: Optional[str] = None,
                 root_device_name: Optional[str] = None,
                 creation_date: Optional[str] = None,
                 owner_id: Optional[str] = None):
        self.image_id = image_id
        self.name = name
        self.root_device_name = root_device_name
        self.creation_date = creation_date
        self.owner_id = owner_id

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Image":
        return cls(
            image_id=data["ImageId"],
            name=data.get("Name"),
            root_device_name=data.get("RootDeviceName"),
            creation_date=data.get("CreationDate"),
            owner_id=data.get("OwnerId"),
        )

    def __repr__(self) -> str:
        return f"Image(image_id={self.image_id!r}, name={self.name!r})"


class EphemeralDevice:
    def __init__(self, device_name: str, virtual_name: str, size_gb: int = 0):
        self.device_name = device_name
        self.virtual_name = virtual_name
        self.size_gb = size_gb


class MachineTypeInfo:
    """Instance type details relevant to block device mappings."""

    def __init__(self, name: str, ephemeral_disks: Optional[List[int]] = None):
        self.name = name
        self.ephemeral_disks = ephemeral_disks or []

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "MachineTypeInfo":
        disks = []
        storage = data.get("InstanceStorageInfo")
        # NVMe instance stores are attached by the hypervisor, not mapped.
        if storage and storage.get("NvmeSupport") != "required":
            for disk in storage.get("Disks", []):
                disks.extend([disk.get("SizeInGB", 0)] * disk.get("Count", 1))
        return cls(data["InstanceType"], disks)

    def ephemeral_devices(self) -> List[EphemeralDevice]:
        """
        List the instance store devices of this machine type.
        
        Returns:
            List[EphemeralDevice]: Devices named /dev/sdc, /dev/sdd, ...
        
        Raises:
            ValueError: If the type has more disks than device letters
        """
        if len(self.ephemeral_disks) > MAX_EPHEMERAL_DEVICES:
            raise ValueError(
                f"ephemeral devices for > {MAX_EPHEMERAL_DEVICES} not supported: {self.name}"
            )

        devices = []
        for i, size_gb in enumerate(self.ephemeral_disks):
            devices.append(EphemeralDevice(
                device_name="/dev/sd" + chr(ord("c") + i),
                virtual_name=f"ephemeral{i}",
                size_gb=size_gb,
            ))
        return devices


class Ec2Cloud:
    """
    Image and machine type lookups for a region.
    """

    def __init__(self, region: Optional[str] = None, client=None):
        """
        Initialize the lookups.
        
        Args:
            region: AWS region; ignored when a client is given
            client: Optional boto3 EC2 client
        """
        self.client = client or boto3.client("ec2", region_name=region)

    def resolve_image(self, name: str) -> Optional[Image]:
        """
        Look up an image by ID, owner/name reference or name.
        
        Args:
            name: AMI ID (ami-...), owner/name or image name
        
        Returns:
            Optional[Image]: The newest matching image, or None if none match
        """
        if name.startswith("ami-"):
            try:
                response = self.client.describe_images(ImageIds=[name])
            except ClientError as e:
                # EC2 reports unknown image IDs as an error rather than an empty list.
                if e.response["Error"]["Code"] == "InvalidAMIID.NotFound":
                    return None
                raise
        elif "/" in name:
            owner, image_name = name.split("/", 1)
            response = self.client.describe_images(
                Owners=[owner],
                Filters=[{"Name": "name", "Values": [image_name]}],
            )
        else:
            response = self.client.describe_images(
                Filters=[{"Name": "name", "Values": [name]}],
            )

        images = response.get("Images", [])
        if not images:
            return None
        if len(images) > 1:
            pulumi.log.debug(f"Found {len(images)} images matching {name!r}; using the newest")

        newest = max(images, key=lambda i: i.get("CreationDate", ""))
        return Image.from_api(newest)

    def get_machine_type_info(self, instance_type: str) -> MachineTypeInfo:
        """
        Describe an instance type.
        
        Args:
            instance_type: EC2 instance type (e.g., m5d.large)
        
        Returns:
            MachineTypeInfo: The instance type details
        
        Raises:
            MachineTypeNotFoundError: If EC2 does not know the instance type
        """
        response = self.client.describe_instance_types(InstanceTypes=[instance_type])
        types = response.get("InstanceTypes", [])
        if not types:
            raise MachineTypeNotFoundError(instance_type)
        return MachineTypeInfo.from_api(types[0])
