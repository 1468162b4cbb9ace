"""Domain-specific exceptions for Vendor Core.

This module defines custom exceptions that are part of the public API.
All exceptions inherit from VendorAPIError for easy catching.
"""

from __future__ import annotations


class VendorAPIError(Exception):
    """Base exception for all Vendor Core errors.

    Users can catch this exception to handle any Vendor Core error.
    """

    pass


class ConfigError(VendorAPIError):
    """Raised when there is a configuration error.

    This exception is raised when:
    - Invalid storage paths are provided
    - Display settings are out of range
    """

    pass


class ValidationError(VendorAPIError):
    """Raised when user input fails boundary validation.

    The core trusts its input; validation happens before a mutation is
    invoked (forms, CLI). ``errors`` maps each offending field to the
    message shown to the user.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        detail = "; ".join(f"{field}: {msg}" for field, msg in self.errors.items())
        super().__init__(f"Invalid input ({detail})")


class DataQualityError(VendorAPIError):
    """Raised when data quality checks cannot run.

    This exception is raised when:
    - Required columns are missing from input data
    """

    pass


class PersistenceError(VendorAPIError):
    """Raised when a snapshot store fails to read or write a slot.

    This exception is raised when:
    - A snapshot file cannot be written
    - A snapshot file exists but cannot be parsed
    """

    def __init__(self, slot: str, message: str) -> None:
        self.slot = slot
        super().__init__(f"Snapshot slot '{slot}': {message}")
