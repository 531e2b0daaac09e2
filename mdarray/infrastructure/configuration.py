import os
import tomllib
from dataclasses import dataclass, field
from typing import Any


def _read_table(config_path: str, table: str) -> dict[str, Any]:
    """
    Read one top-level table from a TOML file.

    Parameters
    ----------
    config_path : str
        Filesystem path to a TOML file.
    table : str
        Name of the table to extract.

    Returns
    -------
    dict[str, Any]
        Contents of the table, or an empty dict if the file has no such table.

    Raises
    ------
    FileNotFoundError
        If no file exists at `config_path`.
    """
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Configuration file not found at {config_path}")

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    return data.get(table, {})


@dataclass
class AllocationConfiguration:
    """Configuration for allocating a tensor."""

    dtype: str = "float32"
    shape: list[int] = field(default_factory=list)
    fill: str | int | float = "zeros"
    max_bytes: int | None = None  # None: no ceiling beyond available memory

    @classmethod
    def load(cls, config_path: str) -> "AllocationConfiguration":
        """
        Load allocation configuration from a TOML file.

        Parameters
        ----------
        config_path : str
            Filesystem path to a TOML file containing an "allocation" table.

        Returns
        -------
        AllocationConfiguration
            Instance populated from the "allocation" table; missing fields use their defaults.

        Raises
        ------
        FileNotFoundError
            If no file exists at `config_path`.
        """
        return cls(**_read_table(config_path, "allocation"))


@dataclass
class LoggingConfiguration:
    """Configuration for application logging."""

    level: str = "INFO"

    @classmethod
    def load(cls, config_path: str) -> "LoggingConfiguration":
        """
        Load logging configuration from a TOML file.

        Parameters:
            config_path (str): Filesystem path to a TOML file, optionally containing a "logging" table.

        Returns:
            LoggingConfiguration: Instance populated from the "logging" table.

        Raises:
            FileNotFoundError: If no file exists at `config_path`.
        """
        return cls(**_read_table(config_path, "logging"))
