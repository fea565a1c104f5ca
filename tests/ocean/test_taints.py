import pytest
from spotmapper.ocean.taints import (
    Taint,
    TaintParseStatus,
    parse_taint,
    parse_ocean_taints,
    build_ocean_taints,
)

def test_build_ocean_taints():
    """Test parsing a well-formed taint."""
    taints = build_ocean_taints(["dedicated=true:NoSchedule"])
    
    assert taints == [Taint("dedicated", "true", "NoSchedule")]
    assert taints[0].to_dict() == {"key": "dedicated", "value": "true", "effect": "NoSchedule"}

def test_build_ocean_taints_drops_malformed_entries():
    """Test that unparseable taints are skipped and the rest kept."""
    taints = build_ocean_taints([
        "malformed",
        "dedicated=true:NoSchedule",
        "nodes=gpu",
        "spot=true:PreferNoSchedule",
    ])
    
    assert taints == [
        Taint("dedicated", "true", "NoSchedule"),
        Taint("spot", "true", "PreferNoSchedule"),
    ]

def test_build_ocean_taints_empty():
    """Test that no taints give an empty list."""
    assert build_ocean_taints([]) == []

@pytest.mark.parametrize("raw,expected", [
    # The key ends at the first '='
    ("a=b=c:NoExecute", Taint("a", "b=c", "NoExecute")),
    # The effect starts after the last ':'
    ("example.com/role=db:primary:NoSchedule", Taint("example.com/role", "db:primary", "NoSchedule")),
])
def test_parse_taint_separators(raw, expected):
    """Test which separators delimit the key and effect."""
    result = parse_taint(raw)
    
    assert result.status is TaintParseStatus.OK
    assert result.taint == expected

@pytest.mark.parametrize("raw,status", [
    ("malformed", TaintParseStatus.MALFORMED),
    ("", TaintParseStatus.MALFORMED),
    ("=true:NoSchedule", TaintParseStatus.MALFORMED),
    ("dedicated=true", TaintParseStatus.PARTIAL),
    ("dedicated=:NoSchedule", TaintParseStatus.PARTIAL),
    ("dedicated=true:", TaintParseStatus.PARTIAL),
])
def test_parse_taint_rejected(raw, status):
    """Test the outcome for strings that are not complete taints."""
    result = parse_taint(raw)
    
    assert result.status is status
    assert result.taint is None
    assert not result.ok

def test_parse_ocean_taints_reports_rejected():
    """Test that rejected strings are returned alongside the taints."""
    taints, rejected = parse_ocean_taints(["dedicated=true:NoSchedule", "malformed"])
    
    assert taints == [Taint("dedicated", "true", "NoSchedule")]
    assert [r.raw for r in rejected] == ["malformed"]
    assert rejected[0].status is TaintParseStatus.MALFORMED

def test_build_ocean_taints_none():
    """Test that missing taints are treated as empty."""
    assert build_ocean_taints(None) == []
    assert parse_ocean_taints(None) == ([], [])
