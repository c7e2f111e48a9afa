from pathlib import Path

import pytest


@pytest.fixture
def heart_rate_definition():
    """Provide the heart rate zone definition.

    Returns:
        ZoneDefinition for ``heartRate``.
    """
    from zones.models import find_zone_definition

    return find_zone_definition("heartRate")


@pytest.fixture
def default_zones():
    """Provide a small defaults mapping for the heart rate definition.

    Returns:
        Dictionary with four contiguous heart rate zones.
    """
    from zones.models import Zone

    return {
        "heartRate": [
            Zone(from_=0, to=120),
            Zone(from_=120, to=140),
            Zone(from_=140, to=160),
            Zone(from_=160, to=200),
        ]
    }


@pytest.fixture
def store():
    """Provide an empty in-memory zone store.

    Returns:
        InMemoryZoneStore instance.
    """
    from zones.store import InMemoryZoneStore

    return InMemoryZoneStore()


@pytest.fixture
def service(store, default_zones, heart_rate_definition):
    """Provide a zones service holding three contiguous zones.

    Returns:
        ZonesService with zones [0,50], [50,100], [100,150].
    """
    from zones.config import Config
    from zones.models import Zone
    from zones.service import ZonesService

    svc = ZonesService(store, default_zones, Config())
    svc.zone_definition = heart_rate_definition
    svc.current_zones = [
        Zone(from_=0, to=50),
        Zone(from_=50, to=100),
        Zone(from_=100, to=150),
    ]
    return svc


@pytest.fixture
def shipped_defaults_path():
    """Provide the path to the shipped default zones YAML file.

    Returns:
        Path to defaults/zones.yaml.
    """
    return Path(__file__).parent.parent / "defaults" / "zones.yaml"
