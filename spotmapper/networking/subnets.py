import pulumi
from typing import Iterable, Optional


class Subnet:
    """A reference to a subnet; only the ID takes part in comparisons."""

    def __init__(self, id: Optional[str] = None, name: Optional[str] = None):
        self.id = id
        self.name = name

    def __repr__(self) -> str:
        return f"Subnet(id={self.id!r}, name={self.name!r})"


def subnets_equal_ignore_order(left: Iterable[Subnet], right: Iterable[Subnet]) -> bool:
    """
    Compare two subnet collections by ID, ignoring order and duplicates.
    
    A subnet on the right-hand side without an ID makes the collections
    unequal.
    
    Args:
        left: Current subnets
        right: Desired subnets
    
    Returns:
        bool: True if both collections reference the same subnet IDs
    """
    left_ids = {s.id for s in left}

    right_ids = set()
    for s in right:
        if s.id is None:
            pulumi.log.debug(f"Subnet ID not set; returning not-equal: {s!r}")
            return False
        right_ids.add(s.id)

    return left_ids == right_ids
