import pytest
import yaml

from zones.defaults import get_default_zones, load_default_zones
from zones.models import ZONE_DEFINITIONS, Zone, find_zone_definition
from zones.service import ZonesService
from zones.store import InMemoryZoneStore


DEFAULTS_DATA = {
    "zones": {
        "power": [
            {"from": 0, "to": 100},
            {"from": 100, "to": 200},
            {"from": 200, "to": 300},
        ],
    },
}


@pytest.fixture
def defaults_path(tmp_path):
    """Provide a temporary defaults YAML file for testing.

    Args:
        tmp_path: Pytest tmp_path fixture.

    Returns:
        Path to the temporary defaults YAML file.
    """
    path = tmp_path / "zones.yaml"
    path.write_text(yaml.dump(DEFAULTS_DATA))
    return path


class TestLoadDefaultZones:
    """Tests for load_default_zones."""

    def test_load_default_zones_parses_from_key(self, defaults_path):
        """Test that load_default_zones builds Zone models.

        Args:
            defaults_path: Path to test defaults YAML.
        """
        defaults = load_default_zones(defaults_path)
        assert defaults["power"][1] == Zone(from_=100, to=200)

    def test_load_default_zones_empty_raises(self, tmp_path):
        """Test that load_default_zones raises ValueError for empty files.

        Args:
            tmp_path: Pytest tmp_path fixture.
        """
        path = tmp_path / "empty.yaml"
        path.write_text("")
        with pytest.raises(ValueError, match="empty"):
            load_default_zones(path)

    def test_shipped_defaults_cover_every_definition(self, shipped_defaults_path):
        """Test that the shipped defaults are compliant for every definition.

        Args:
            shipped_defaults_path: Path to defaults/zones.yaml.
        """
        defaults = load_default_zones(shipped_defaults_path)
        service = ZonesService(InMemoryZoneStore(), defaults)
        for definition in ZONE_DEFINITIONS:
            assert service.is_zones_compliant(defaults[definition.value])


class TestGetDefaultZones:
    """Tests for get_default_zones."""

    def test_get_default_zones_returns_independent_copy(self, defaults_path):
        """Test that mutating returned zones leaves the defaults intact.

        Args:
            defaults_path: Path to test defaults YAML.
        """
        defaults = load_default_zones(defaults_path)
        zones = get_default_zones(defaults, find_zone_definition("power"))
        zones[0].to = 1
        zones.pop()
        assert defaults["power"][0].to == 100
        assert len(defaults["power"]) == 3

    def test_get_default_zones_unknown_definition_raises(self, defaults_path):
        """Test that a definition without defaults raises ValueError.

        Args:
            defaults_path: Path to test defaults YAML.
        """
        defaults = load_default_zones(defaults_path)
        with pytest.raises(ValueError, match="heartRate"):
            get_default_zones(defaults, find_zone_definition("heartRate"))
