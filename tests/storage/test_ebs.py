import pytest
from spotmapper.storage.ebs import BlockDeviceMapping, ElastigroupEbs, volume_iops

def test_volume_iops_omitted_for_gp2():
    """Test that IOPS is never sent for gp2 volumes."""
    assert volume_iops("gp2", 3000) is None

@pytest.mark.parametrize("volume_type", ["io1", "io2", "gp3", None])
def test_volume_iops_kept_for_other_types(volume_type):
    """Test that IOPS is passed through for other volume types."""
    assert volume_iops(volume_type, 3000) == 3000

def test_volume_iops_not_set():
    """Test that a missing IOPS stays missing."""
    assert volume_iops("io1", None) is None

def test_has_ebs():
    """Test detecting EBS settings on a mapping."""
    assert not BlockDeviceMapping(virtual_name="ephemeral0").has_ebs()
    # IOPS alone does not make a mapping an EBS mapping
    assert not BlockDeviceMapping(ebs_volume_iops=100).has_ebs()
    assert BlockDeviceMapping(ebs_delete_on_termination=False).has_ebs()
    assert BlockDeviceMapping(ebs_volume_size=20).has_ebs()
    assert BlockDeviceMapping(ebs_volume_type="gp3").has_ebs()

def test_ebs_to_dict_skips_unset_fields():
    """Test the EBS serialization."""
    ebs = ElastigroupEbs(delete_on_termination=True, volume_size=20, volume_type="gp2")
    
    assert ebs.to_dict() == {
        "deleteOnTermination": True,
        "volumeSize": 20,
        "volumeType": "gp2",
    }
