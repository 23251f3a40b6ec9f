"""Typed domain errors for the trip visualization engine.

Only preconditions and I/O failures are errors. Empty data, malformed
single records and degenerate geometry are handled inside the renderers
by drawing placeholders or skipping the record.

All errors inherit from TripVizError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class TripVizError(Exception):
    """Base error for the trip visualization domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class SurfaceUnavailableError(TripVizError):
    """No drawing surface was handed to a render entry point.

    Raised before anything is drawn.

    Attributes:
        renderer: Name of the renderer that was invoked
    """

    renderer: str = ""


@dataclass
class TripDataError(TripVizError):
    """The trip payload cannot be read at all.

    Attributes:
        field_name: The offending field, if known
    """

    field_name: Optional[str] = None


@dataclass
class RenderingError(TripVizError):
    """Writing a rendered surface to its output failed.

    Attributes:
        output_path: Path where rendering was attempted
        backend: Surface backend that failed
    """

    output_path: Optional[str] = None
    backend: str = ""


@dataclass
class ConfigurationError(TripVizError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
