"""Pydantic v2 models for zone partitions and boundary edits."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Zone(BaseModel):
    """A contiguous numeric range bounded by ``from`` and ``to``.

    ``from`` is a Python keyword, so the attribute is ``from_`` and the
    serialised key is ``from``.
    """

    model_config = ConfigDict(populate_by_name=True)

    from_: int | float = Field(alias="from")
    to: int | float


class ZoneChange(BaseModel):
    """A boundary edit made on the zone at ``source_id``."""

    model_config = ConfigDict(populate_by_name=True)

    source_id: int
    to: bool = False
    from_: bool = Field(default=False, alias="from")
    value: Any = None


class ZoneChangeInstruction(ZoneChange):
    """A change to replay on the neighbouring zone ``destination_id``."""

    destination_id: int | None = None


class ZoneDefinition(BaseModel):
    """Describes one configurable kind of zones (heart rate, power, ...)."""

    model_config = {"frozen": True}

    name: str
    value: str
    units: str = ""
    step: float = 1
    min: float = 0
    max: float = 9999


ZONE_DEFINITIONS: list[ZoneDefinition] = [
    ZoneDefinition(name="Cycling Speed", value="speed", units="KPH", step=0.1, max=9999),
    ZoneDefinition(name="Running Pace", value="pace", units="Seconds", max=3599),
    ZoneDefinition(name="Heart Rate", value="heartRate", units="BPM", max=9999),
    ZoneDefinition(name="Cycling Power", value="power", units="Watts", max=9999),
    ZoneDefinition(
        name="Cycling Cadence", value="cyclingCadence", units="RPM", max=9999
    ),
    ZoneDefinition(
        name="Running Cadence", value="runningCadence", units="SPM", max=9999
    ),
    ZoneDefinition(name="Grade", value="grade", units="%", step=0.1, min=-9999),
    ZoneDefinition(name="Elevation", value="elevation", units="m", min=-9999),
    ZoneDefinition(name="Ascent Speed", value="ascent", units="Vm/h"),
]


def find_zone_definition(value: str) -> ZoneDefinition:
    """Look up a zone definition by its ``value`` key.

    Args:
        value: Definition key, e.g. ``"heartRate"``.

    Returns:
        The matching ZoneDefinition.
    """
    for definition in ZONE_DEFINITIONS:
        if definition.value == value:
            return definition
    raise ValueError(f"Unknown zone definition: {value}")
