from enum import Enum
from typing import Optional


class Orientation(str, Enum):
    """Placement strategies understood by the Spotinst API."""

    BALANCED = "balanced"
    COST = "costOriented"
    AVAILABILITY = "availabilityOriented"
    EQUAL_ZONE_DISTRIBUTION = "equalAzDistribution"


_ORIENTATIONS = {
    "cost": Orientation.COST,
    "availability": Orientation.AVAILABILITY,
    "equal-distribution": Orientation.EQUAL_ZONE_DISTRIBUTION,
}


def normalize_orientation(orientation: Optional[str] = None) -> Orientation:
    """
    Map a user-facing orientation name to its API value.
    
    Unknown names fall back to the balanced orientation.
    
    Args:
        orientation: Orientation name (cost, availability, equal-distribution)
    
    Returns:
        Orientation: The normalized orientation
    """
    # Fast path.
    if orientation is None:
        return Orientation.BALANCED

    return _ORIENTATIONS.get(orientation, Orientation.BALANCED)
