"""Load default zone configurations from YAML."""

from pathlib import Path

import yaml

from zones.models import Zone, ZoneDefinition


def load_default_zones(defaults_path: Path) -> dict[str, list[Zone]]:
    """Load a defaults YAML file into zones keyed by definition value.

    Args:
        defaults_path: Path to the default zones YAML file.

    Returns:
        Dictionary mapping each definition value to its default zones.
    """
    data = yaml.safe_load(defaults_path.read_text())
    if not data:
        raise ValueError("Default zones file is empty")

    return {
        key: [Zone(**zone) for zone in zones]
        for key, zones in (data.get("zones") or {}).items()
    }


def get_default_zones(
    defaults: dict[str, list[Zone]], definition: ZoneDefinition
) -> list[Zone]:
    """Return an independent copy of the default zones for a definition.

    Args:
        defaults: Mapping produced by ``load_default_zones``.
        definition: Zone definition whose defaults are requested.

    Returns:
        Deep copy of the default zones.
    """
    zones = defaults.get(definition.value)
    if zones is None:
        raise ValueError(f"No default zones for definition: {definition.value}")
    return [zone.model_copy(deep=True) for zone in zones]
