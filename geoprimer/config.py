# -*- coding: utf-8 -*-
"""Configuration for the example workflow: which archive to fetch and what to read from it.

Defaults point at the Natural Earth 1:110m countries shapefile. A YAML file can override any field.
"""

from dataclasses import asdict, dataclass, fields
from typing import Optional

import yaml


@dataclass(frozen=True)
class DatasetConfig:
    """Where the example dataset comes from and how to read it."""

    archive_url: str = "https://naciscdn.org/naturalearth/110m/cultural/ne_110m_admin_0_countries.zip"
    data_dir: str = "data/ne_110m_admin_0_countries"
    shapefile: str = "ne_110m_admin_0_countries"
    name_column: str = "NAME"
    pattern: str = "Guinea"
    stops_file: Optional[str] = None  # GTFS stops.txt inside the archive, if any
    crs: str = "EPSG:4326"
    output_dir: str = "output"
    timeout: float = 60.0

    def __post_init__(self):
        """Validate configuration."""
        if not isinstance(self.archive_url, str) or not self.archive_url.startswith(("http://", "https://")):
            raise ValueError(f"Invalid archive_url: {self.archive_url}. Must be an http(s) URL")

        if not isinstance(self.timeout, (int, float)) or self.timeout <= 0:
            raise ValueError(f"Invalid timeout: {self.timeout}. Must be positive")

        if not self.shapefile:
            raise ValueError("shapefile must not be empty")

    def to_dict(self):
        """Plain dict of all fields."""
        return asdict(self)


def load_config(path):
    """Load a DatasetConfig from a YAML file.

    Parameters:
    -----------
    path : str
        Path to a YAML mapping; missing keys keep their defaults

    Returns:
    --------
    config : DatasetConfig
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")

    known = {field.name for field in fields(DatasetConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config keys in {path}: {unknown}")

    return DatasetConfig(**data)
