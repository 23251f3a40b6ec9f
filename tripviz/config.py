"""Centralized configuration using Pydantic Settings.

This module is the single source of truth for the drawing constants of
both renderers (surface sizes, paddings, grid geometry, colors) and for
the export and logging behavior.

Configuration can be overridden via environment variables:
- TRIPVIZ_MAP_WIDTH=1200
- TRIPVIZ_MAP_FIT_MARKERS=true
- TRIPVIZ_LOG_GRID_WIDTH=700
- TRIPVIZ_EXPORT_BACKEND=reportlab
- TRIPVIZ_OBS_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MapConfig(BaseSettings):
    """Route map surface configuration.

    Environment variables prefixed with TRIPVIZ_MAP_.
    """

    model_config = SettingsConfigDict(env_prefix="TRIPVIZ_MAP_")

    width: int = 600
    height: int = 400
    padding: int = 40
    background: str = "#f8fafc"

    route_color: str = "#3b82f6"
    route_width: int = 3

    marker_radius: int = 8
    marker_inner_radius: int = 4
    marker_inner_color: str = "#ffffff"
    marker_label_offset: int = 15
    marker_label_color: str = "#1f2937"
    marker_label_size: int = 12

    placeholder_text: str = "Calculate trip to see route visualization"
    placeholder_color: str = "#64748b"
    placeholder_size: int = 16

    # Include marker locations in the bounding box, not only the route path
    fit_markers: bool = False


class LogSheetConfig(BaseSettings):
    """ELD log sheet surface configuration.

    Environment variables prefixed with TRIPVIZ_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="TRIPVIZ_LOG_")

    width: int = 800
    height: int = 600
    background: str = "#ffffff"
    ink: str = "#000000"

    title: str = "ELECTRONIC LOGGING DEVICE (ELD) DAILY LOG"
    title_size: int = 16
    body_size: int = 12

    grid_x: int = 50
    grid_y: int = 110
    grid_width: int = 700
    grid_height: int = 300
    grid_line_width: int = 1

    row_label_size: int = 10
    hour_label_size: int = 8

    segment_width: int = 3
    segment_label_size: int = 8
    segment_label_offset: int = 5
    min_end_label_width: float = 30.0

    remark_size: int = 10
    remark_line_height: int = 15
    bottom_margin: int = 30

    empty_text: str = "No duty status records for this date"
    missing_value: str = "N/A"


class ExportConfig(BaseSettings):
    """File export configuration.

    Environment variables prefixed with TRIPVIZ_EXPORT_.
    """

    model_config = SettingsConfigDict(env_prefix="TRIPVIZ_EXPORT_")

    backend: Literal["pillow", "reportlab"] = "pillow"
    # None picks the backend default: png for pillow, pdf for reportlab
    default_format: Optional[Literal["png", "pdf", "svg"]] = None
    output_dir: Path = Field(default_factory=lambda: Path.cwd() / "tripviz-output")


class ObservabilityConfig(BaseSettings):
    """Logging and observability configuration.

    Environment variables prefixed with TRIPVIZ_OBS_.
    """

    model_config = SettingsConfigDict(env_prefix="TRIPVIZ_OBS_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.map.padding)
        print(config.log_sheet.grid_width)

    Environment variables prefixed with TRIPVIZ_.
    """

    model_config = SettingsConfigDict(env_prefix="TRIPVIZ_")

    map: MapConfig = Field(default_factory=MapConfig)
    log_sheet: LogSheetConfig = Field(default_factory=LogSheetConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
