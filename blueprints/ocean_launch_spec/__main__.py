"""
Example Ocean Launch Specification

This example demonstrates how to:
1. Resolve the root device of an AMI and build its block device mapping
2. Add the instance store devices implied by the instance type
3. Translate tags, labels and taints into the Ocean API format

The translated fragments are exported as stack outputs so they can be
embedded in a launch specification request.
"""

import pulumi
import pulumi_aws as aws
from spotmapper.config import get_root_volume_opts, get_orientation
from spotmapper.ec2 import Ec2Cloud
from spotmapper.ocean import parse_ocean_taints
from spotmapper.storage import build_ephemeral_devices, build_root_device, build_block_device_mapping
from spotmapper.utils import build_ocean_tags, build_ocean_labels

# Configuration
CONFIG = {
    "region": "us-west-2",
    "instance_type": "m5d.large",
    # Canonical's Ubuntu 22.04 image
    "image": "099720109477/ubuntu/images/hvm-ssd/ubuntu-jammy-22.04-amd64-server-20240301",
    "tags": {
        "Project": "spotmapper-example",
        "Environment": "dev",
    },
    "labels": {
        "node-role.kubernetes.io/node": "",
        "workload": "batch",
    },
    "taints": [
        "dedicated=batch:NoSchedule",
    ],
}

# Prefer the region the AWS provider is configured with
cloud = Ec2Cloud(region=aws.config.region or CONFIG["region"])

root_volume = get_root_volume_opts()
print(f"Root volume: {root_volume}")

mappings = build_root_device(cloud, CONFIG["image"], root_volume)
mappings.update(build_ephemeral_devices(cloud, CONFIG["instance_type"]))

taints, rejected = parse_ocean_taints(CONFIG["taints"])
for result in rejected:
    pulumi.log.warn(f"Ignoring taint {result.raw!r}: {result.status.value}")

pulumi.export("tags", [t.to_dict() for t in build_ocean_tags(CONFIG["tags"])])
pulumi.export("labels", [l.to_dict() for l in build_ocean_labels(CONFIG["labels"])])
pulumi.export("taints", [t.to_dict() for t in taints])
pulumi.export("block_device_mappings", [
    build_block_device_mapping(name, mapping).to_dict()
    for name, mapping in sorted(mappings.items())
])
pulumi.export("orientation", get_orientation().value)
