"""
Shared test fixtures and configuration.
"""

import pytest
import os
import sys
from unittest.mock import MagicMock

# Add the parent directory to the path so we can import the spotmapper package
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from spotmapper.ec2.cloud import EphemeralDevice, Image


class FakeMachineType:
    """Machine type stand-in returning a fixed list of ephemeral devices."""
    
    def __init__(self, devices):
        self.devices = devices
    
    def ephemeral_devices(self):
        return self.devices


@pytest.fixture
def fake_cloud():
    """Fixture providing a cloud collaborator with canned lookups."""
    cloud = MagicMock()
    cloud.resolve_image.return_value = Image(
        image_id="ami-0123456789abcdef0",
        name="test-image",
        root_device_name="/dev/xvda",
    )
    cloud.get_machine_type_info.return_value = FakeMachineType([
        EphemeralDevice("/dev/sdc", "ephemeral0"),
        EphemeralDevice("/dev/sdd", "ephemeral1"),
    ])
    return cloud


@pytest.fixture
def fake_config():
    """Fixture building a stand-in for pulumi.Config from a dict."""
    def make(values):
        config = MagicMock()
        config.get.side_effect = lambda key: values.get(key)
        config.get_int.side_effect = lambda key: values.get(key)
        return config
    return make
