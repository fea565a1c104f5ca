"""
Exceptions raised by the translation helpers.
"""

from typing import Optional


class SpotmapperError(Exception):
    """Base class for all spotmapper errors."""


class RequiredFieldMissing(SpotmapperError):
    """A field needed to build a payload was not set."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"field is required: {field}")


class ImageResolutionError(SpotmapperError):
    """The image lookup collaborator failed for the given image."""

    def __init__(self, name: str, reason: Optional[str] = None):
        self.name = name
        self.reason = reason
        super().__init__(f"spotinst: unable to resolve image {name!r}: {reason}")


class ImageNotFoundError(ImageResolutionError):
    """The image lookup succeeded but returned no image."""

    def __init__(self, name: str):
        super().__init__(name, "not found")


class MachineTypeNotFoundError(SpotmapperError):
    """The machine type catalog has no entry for the instance type."""

    def __init__(self, instance_type: str):
        self.instance_type = instance_type
        super().__init__(f"machine type {instance_type!r} not found")
