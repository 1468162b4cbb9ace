"""Unified configuration for Vendor Core.

This module provides the storage path layout used by the file-backed
snapshot store and the CSV marts, plus the fixed display settings.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from vendor_core.exceptions import ConfigError

DATA_ROOT_ENV = "VENDOR_DATA_ROOT"
DEFAULT_DATA_ROOT = "data"


@dataclass
class StoragePaths:
    """All filesystem paths used by the snapshot store and marts.

    Attributes:
        data_root: Root directory for all vendor data.

    Directory Structure:
        data_root/
        ├── snapshots/       # one JSON file per slot
        │   ├── customers.json
        │   └── salesRecords.json
        └── marts/           # CSV exports (sales, item lines, daily, vegetables)
    """

    data_root: Path

    @classmethod
    def from_root(cls, data_root: str | Path) -> StoragePaths:
        """Create StoragePaths from a root directory.

        Args:
            data_root: Root directory for vendor data.

        Returns:
            StoragePaths instance.

        Raises:
            ConfigError: If data_root is empty.

        Examples:
            >>> paths = StoragePaths.from_root("data")
            >>> paths.snapshots
            PosixPath('data/snapshots')

        """
        if isinstance(data_root, str):
            if not data_root.strip():
                raise ConfigError("data_root must not be empty")
            data_root = Path(data_root)

        return cls(data_root=data_root)

    @classmethod
    def from_env(cls) -> StoragePaths:
        """Create StoragePaths from VENDOR_DATA_ROOT, falling back to ./data."""
        return cls.from_root(os.environ.get(DATA_ROOT_ENV, DEFAULT_DATA_ROOT))

    @property
    def snapshots(self) -> Path:
        """Snapshot slots (customers, salesRecords)."""
        return self.data_root / "snapshots"

    @property
    def marts(self) -> Path:
        """Aggregated CSV exports."""
        return self.data_root / "marts"

    def ensure_dirs(self) -> None:
        """Create all directories in the data structure."""
        for path in [self.snapshots, self.marts]:
            path.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class DisplayConfig:
    """Fixed display formatting for amounts and the dashboard.

    Attributes:
        currency_symbol: Prefix for money values.
        decimals: Decimal places for money and weights.
        recent_sales: Number of records on the dashboard's recent list.
    """

    currency_symbol: str = "₹"
    decimals: int = 2
    recent_sales: int = 5

    def __post_init__(self) -> None:
        if self.decimals < 0:
            raise ConfigError("decimals must be >= 0")
        if self.recent_sales < 0:
            raise ConfigError("recent_sales must be >= 0")

    def money(self, value: float) -> str:
        """Format a money value, e.g. ``₹110.00``."""
        return f"{self.currency_symbol}{value:,.{self.decimals}f}"

    def weight(self, value: float) -> str:
        """Format a weight in kilograms, e.g. ``2.50 kg``."""
        return f"{value:.{self.decimals}f} kg"
