from typing import Dict, List, Optional


class _KeyValueRecord:
    """A key/value pair as the Spotinst API serializes it."""

    key_field = "key"
    value_field = "value"

    def __init__(self, key: str, value: str):
        self.key = key
        self.value = value

    def to_dict(self) -> Dict[str, str]:
        return {self.key_field: self.key, self.value_field: self.value}

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (self.key, self.value) == (other.key, other.value)

    def __hash__(self) -> int:
        return hash((type(self), self.key, self.value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r}, value={self.value!r})"


class ElastigroupTag(_KeyValueRecord):
    key_field = "tagKey"
    value_field = "tagValue"


class OceanTag(_KeyValueRecord):
    key_field = "tagKey"
    value_field = "tagValue"


class AutoScaleLabel(_KeyValueRecord):
    pass


class OceanLabel(_KeyValueRecord):
    pass


def build_elastigroup_tags(tags: Optional[Dict[str, str]]) -> List[ElastigroupTag]:
    """
    Convert a tag map into Elastigroup tag records.
    
    Args:
        tags: Dictionary of tags
    
    Returns:
        List[ElastigroupTag]: One record per tag, in no particular order
    """
    return [ElastigroupTag(key, value) for key, value in (tags or {}).items()]


def build_ocean_tags(tags: Optional[Dict[str, str]]) -> List[OceanTag]:
    """
    Convert a tag map into Ocean tag records.
    
    Args:
        tags: Dictionary of tags
    
    Returns:
        List[OceanTag]: One record per tag, in no particular order
    """
    return [OceanTag(key, value) for key, value in (tags or {}).items()]


def build_autoscale_labels(labels: Optional[Dict[str, str]]) -> List[AutoScaleLabel]:
    """
    Convert node labels into Elastigroup auto-scaler label records.
    
    Args:
        labels: Dictionary of node labels
    
    Returns:
        List[AutoScaleLabel]: One record per label, in no particular order
    """
    return [AutoScaleLabel(key, value) for key, value in (labels or {}).items()]


def build_ocean_labels(labels: Optional[Dict[str, str]]) -> List[OceanLabel]:
    """Convert node labels into Ocean label records, in no particular order."""
    return [OceanLabel(key, value) for key, value in (labels or {}).items()]
