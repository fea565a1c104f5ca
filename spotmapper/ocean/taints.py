"""
Kubernetes taint parsing for Ocean launch specifications.

Taints are written as ``key=value:effect``. The key ends at the first ``=``
and the effect starts after the last ``:``; everything in between is the
value. All three parts must be non-empty.
"""

from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple


class Taint:
    """An Ocean taint record."""

    def __init__(self, key: str, value: str, effect: str):
        self.key = key
        self.value = value
        self.effect = effect

    def to_dict(self) -> Dict[str, str]:
        return {"key": self.key, "value": self.value, "effect": self.effect}

    def __eq__(self, other) -> bool:
        if not isinstance(other, Taint):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash((self.key, self.value, self.effect))

    def __repr__(self) -> str:
        return f"Taint(key={self.key!r}, value={self.value!r}, effect={self.effect!r})"


class TaintParseStatus(Enum):
    OK = "ok"
    # Has a key but the value or effect is missing.
    PARTIAL = "partial"
    # No key=value structure at all.
    MALFORMED = "malformed"


class TaintParseResult:
    """Outcome of parsing a single taint string."""

    def __init__(self, raw: str, status: TaintParseStatus, taint: Optional[Taint] = None):
        self.raw = raw
        self.status = status
        self.taint = taint

    @property
    def ok(self) -> bool:
        return self.status is TaintParseStatus.OK

    def __repr__(self) -> str:
        return f"TaintParseResult(raw={self.raw!r}, status={self.status.name})"


def parse_taint(raw: str) -> TaintParseResult:
    """
    Parse a ``key=value:effect`` string.
    
    Args:
        raw: The taint string
    
    Returns:
        TaintParseResult: The parsed taint, or the reason it was rejected
    """
    key, sep, rest = raw.partition("=")
    if not sep or not key:
        return TaintParseResult(raw, TaintParseStatus.MALFORMED)

    value, sep, effect = rest.rpartition(":")
    if not sep or not value or not effect:
        return TaintParseResult(raw, TaintParseStatus.PARTIAL)

    return TaintParseResult(raw, TaintParseStatus.OK, Taint(key, value, effect))


def parse_ocean_taints(taints: Optional[Iterable[str]]) -> Tuple[List[Taint], List[TaintParseResult]]:
    """
    Parse taint strings, keeping track of the ones that were rejected.
    
    Args:
        taints: Taint strings in ``key=value:effect`` form
    
    Returns:
        Tuple[List[Taint], List[TaintParseResult]]: The parsed taints in input
        order and the results of the strings that could not be parsed
    """
    out = []
    rejected = []
    for raw in taints or []:
        result = parse_taint(raw)
        if result.ok:
            out.append(result.taint)
        else:
            rejected.append(result)
    return out, rejected


def build_ocean_taints(taints: Optional[Iterable[str]]) -> List[Taint]:
    """
    Build Ocean taint records, dropping strings that do not parse.
    
    Args:
        taints: Taint strings in ``key=value:effect`` form
    
    Returns:
        List[Taint]: The parsed taints in input order
    """
    out, _ = parse_ocean_taints(taints)
    return out
