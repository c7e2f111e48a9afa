"""Errors raised or emitted by the zones service."""


class ZoneError(Exception):
    """Base class for zone partition errors."""


class CapacityExceeded(ZoneError):
    """Raised when adding a zone would exceed the maximum zone count."""


class MinimumCountViolation(ZoneError):
    """Raised when removing a zone would go below the minimum zone count."""


class NonCompliantPartition(ZoneError):
    """Raised when zones fail the compliance check before being saved."""


class InvalidChangeRequest(ZoneError):
    """Emitted on the instruction channel for ambiguous or non-numeric changes."""
