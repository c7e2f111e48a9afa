"""Zones service: edits a contiguous partition of a numeric range.

The service owns the in-memory list of zones for the selected zone
definition. Edits keep neighbouring boundaries stitched together where the
operation allows it; compliance (count bounds and contiguity) is only
checked on demand and before saving.
"""

import logging
import math
from pathlib import Path

from zones.channel import Channel
from zones.config import Config
from zones.defaults import get_default_zones, load_default_zones
from zones.errors import (
    CapacityExceeded,
    InvalidChangeRequest,
    MinimumCountViolation,
    NonCompliantPartition,
)
from zones.logconfig import configure_logging
from zones.models import Zone, ZoneChange, ZoneChangeInstruction, ZoneDefinition
from zones.store import JsonZoneStore, ZoneStore

logger = logging.getLogger(__name__)


class ZonesService:
    """Editor for the zones of one zone definition at a time."""

    def __init__(
        self,
        store: ZoneStore,
        defaults: dict[str, list[Zone]],
        config: Config | None = None,
    ) -> None:
        self._store = store
        self._defaults = defaults
        self._config = config or Config()
        self._current_zones: list[Zone] = []
        self._zone_definition: ZoneDefinition | None = None
        self._instruction_listener: Channel[ZoneChangeInstruction | None] = Channel(
            "instructions"
        )
        self._zones_reload_request_listener: Channel[list[Zone]] = Channel(
            "zones_reload_request"
        )

    @classmethod
    def from_config(cls, config: Config | None = None) -> "ZonesService":
        """Build a service wired to the stores and defaults named in ``config``.

        Configures logging, opens a JsonZoneStore at ``config.store_path`` and
        loads the default zones from ``config.defaults_path``.

        Args:
            config: Settings to use; read from the environment when omitted.

        Returns:
            A ZonesService with no zone definition selected yet.
        """
        config = config or Config()
        configure_logging(level=config.log_level, log_json=config.log_json)
        store = JsonZoneStore(Path(config.store_path))
        defaults = load_default_zones(Path(config.defaults_path))
        logger.debug(
            "Built zones service (store=%s, defaults=%s)",
            config.store_path,
            config.defaults_path,
        )
        return cls(store, defaults, config)

    def add_last_zone(self) -> str:
        """Split the last zone in two at its integer midpoint.

        Returns:
            Message naming the new zone count.
        """
        if len(self._current_zones) >= self.get_max_zone_count():
            raise CapacityExceeded(
                f"You can't add more than {self.get_max_zone_count()} zones..."
            )

        old_last_zone = self.get_last_zone()
        if old_last_zone is None:
            raise ValueError("There is no zone to split")

        intermediate_value = (old_last_zone.from_ + old_last_zone.to) // 2
        last_zone = Zone(from_=intermediate_value, to=old_last_zone.to)
        old_last_zone.to = intermediate_value
        self._current_zones.append(last_zone)

        logger.debug("Added zone %d", len(self._current_zones))
        return f"Zone <{len(self._current_zones)}> has been added."

    def remove_last_zone(self) -> str:
        """Drop the last zone. Its range is not merged into the new last zone.

        Returns:
            Message naming the removed 1-based position.
        """
        self._check_can_remove()
        self._current_zones.pop()
        logger.debug("Removed last zone %d", len(self._current_zones) + 1)
        return f"Zone <{len(self._current_zones) + 1}> has been removed."

    def remove_zone_at_index(self, index: int) -> str:
        """Remove the zone at ``index``, re-stitching interior neighbours.

        First and last zones are removed outright and their range is lost.

        Args:
            index: 0-based position of the zone to remove.

        Returns:
            Message naming the removed 1-based position.
        """
        self._check_can_remove()
        if not 0 <= index < len(self._current_zones):
            raise IndexError(f"Zone <{index + 1}> does not exist")

        is_first_zone = index == 0
        is_last_zone = index == len(self._current_zones) - 1
        if not is_first_zone and not is_last_zone:
            self._current_zones[index + 1].from_ = self._current_zones[index - 1].to
        del self._current_zones[index]

        logger.debug("Removed zone %d", index + 1)
        return f"Zone <{index + 1}> has been removed."

    def notify_change(self, zone_change: ZoneChange) -> None:
        """Emit the instruction needed to keep a neighbour contiguous.

        Emits a ZoneChangeInstruction on ``instruction_listener``, or None
        when the edited boundary has no neighbour. Invalid changes are
        emitted as an InvalidChangeRequest error instead of being raised.

        Args:
            zone_change: The boundary edit made on a zone.
        """
        if zone_change.to and zone_change.from_:
            self._emit_change_error(
                "Impossible to notify both 'from' & 'to' changes at the same time"
            )
            return

        if not _is_number(zone_change.value):
            self._emit_change_error("Value provided is not a number")
            return

        if not 0 <= zone_change.source_id < len(self._current_zones):
            self._emit_change_error(
                f"Zone <{zone_change.source_id + 1}> does not exist"
            )
            return

        self._instruction_listener.next(self._build_instruction(zone_change))

    def _build_instruction(
        self, zone_change: ZoneChange
    ) -> ZoneChangeInstruction | None:
        source_id = zone_change.source_id
        is_first_zone = source_id == 0
        is_last_zone = source_id == len(self._current_zones) - 1

        instruction = ZoneChangeInstruction(
            source_id=source_id, value=zone_change.value
        )

        if is_first_zone:
            if zone_change.from_:
                return None
            if zone_change.to:
                return _propagate_to_next(instruction)
        elif is_last_zone:
            if zone_change.to:
                return None
            if zone_change.from_:
                return _propagate_to_previous(instruction)
        elif zone_change.from_:
            return _propagate_to_previous(instruction)
        elif zone_change.to:
            return _propagate_to_next(instruction)
        return instruction

    def is_zones_compliant(self, zones: list[Zone] | None) -> bool:
        """Check count bounds and boundary contiguity.

        Args:
            zones: Zones to check; not modified.

        Returns:
            True when every adjacent pair shares its boundary.
        """
        if not zones:
            return False
        if len(zones) > self.get_max_zone_count():
            return False
        if len(zones) < self.get_min_zone_count():
            return False
        return all(
            current.to == following.from_
            for current, following in zip(zones, zones[1:])
        )

    def save_zones(self) -> bool:
        """Persist the current zones under the active zone definition.

        Returns:
            The store's success flag.
        """
        if not self.is_zones_compliant(self._current_zones):
            raise NonCompliantPartition("Zones are not compliant")

        definition = self._require_definition()
        status = self._store.save(definition.value, self._current_zones)
        logger.info(
            "Saved %d %s zones (status=%s)",
            len(self._current_zones),
            definition.value,
            status,
        )
        return status

    def reset_zones_to_default(self) -> bool:
        """Replace the current zones with the defaults and save them.

        On success the new zones are pushed on
        ``zones_reload_request_listener``; on failure the error is signalled
        there too before being re-raised.

        Returns:
            The store's success flag.
        """
        try:
            self._current_zones = get_default_zones(
                self._defaults, self._require_definition()
            )
            status = self.save_zones()
        except Exception as exc:
            self._emit_reload_error(exc)
            raise

        self._zones_reload_request_listener.next(
            [zone.model_copy() for zone in self._current_zones]
        )
        return status

    def load_zones(self) -> list[Zone]:
        """Load the active definition's zones, falling back to the defaults.

        Returns:
            The zones now held by the service.
        """
        definition = self._require_definition()
        zones = self._store.load(definition.value)
        if zones is None:
            logger.info("No saved %s zones, using defaults", definition.value)
            zones = get_default_zones(self._defaults, definition)
        self._current_zones = zones
        return zones

    def get_last_zone(self) -> Zone | None:
        """Return the final zone, or None when there are no zones."""
        if not self._current_zones:
            return None
        return self._current_zones[-1]

    def get_max_zone_count(self) -> int:
        """Return the configured maximum number of zones."""
        return self._config.max_zones_count

    def get_min_zone_count(self) -> int:
        """Return the configured minimum number of zones."""
        return self._config.min_zones_count

    @property
    def instruction_listener(self) -> Channel[ZoneChangeInstruction | None]:
        """Channel receiving instructions emitted by ``notify_change``."""
        return self._instruction_listener

    @property
    def zones_reload_request_listener(self) -> Channel[list[Zone]]:
        """Channel receiving zone snapshots after a reset to defaults."""
        return self._zones_reload_request_listener

    @property
    def zone_definition(self) -> ZoneDefinition | None:
        """The zone definition the current zones belong to."""
        return self._zone_definition

    @zone_definition.setter
    def zone_definition(self, value: ZoneDefinition) -> None:
        self._zone_definition = value

    @property
    def current_zones(self) -> list[Zone]:
        """The zones being edited, mutated in place by the edit operations."""
        return self._current_zones

    @current_zones.setter
    def current_zones(self, value: list[Zone]) -> None:
        self._current_zones = value

    def _check_can_remove(self) -> None:
        """Raise MinimumCountViolation when no zone may be removed."""
        if len(self._current_zones) <= self.get_min_zone_count():
            raise MinimumCountViolation(
                f"You can't have less than {self.get_min_zone_count()} zones..."
            )

    def _require_definition(self) -> ZoneDefinition:
        if self._zone_definition is None:
            raise ValueError("No zone definition selected")
        return self._zone_definition

    def _emit_change_error(self, message: str) -> None:
        error = InvalidChangeRequest(message)
        if self._config.terminal_channel_errors:
            self._instruction_listener.fail(error)
        else:
            self._instruction_listener.reject(error)

    def _emit_reload_error(self, error: Exception) -> None:
        if self._config.terminal_channel_errors:
            self._zones_reload_request_listener.fail(error)
        else:
            self._zones_reload_request_listener.reject(error)


def apply_instruction(
    zones: list[Zone], instruction: ZoneChangeInstruction | None
) -> list[Zone]:
    """Apply an instruction to a copy of ``zones``.

    Args:
        zones: Zones as seen by the consumer.
        instruction: Instruction emitted by ``ZonesService.notify_change``.

    Returns:
        New list with the destination boundary set to the instruction value.
    """
    updated = [zone.model_copy() for zone in zones]
    if instruction is None or instruction.destination_id is None:
        return updated

    destination = updated[instruction.destination_id]
    if instruction.from_:
        destination.from_ = instruction.value
    elif instruction.to:
        destination.to = instruction.value
    return updated


def _propagate_to_next(instruction: ZoneChangeInstruction) -> ZoneChangeInstruction:
    """Target the ``from`` boundary of the zone after the source."""
    instruction.destination_id = instruction.source_id + 1
    instruction.from_ = True
    instruction.to = False
    return instruction


def _propagate_to_previous(
    instruction: ZoneChangeInstruction,
) -> ZoneChangeInstruction:
    """Target the ``to`` boundary of the zone before the source."""
    instruction.destination_id = instruction.source_id - 1
    instruction.from_ = False
    instruction.to = True
    return instruction


def _is_number(value: object) -> bool:
    """Whether ``value`` is a finite int or float, excluding bools."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)
