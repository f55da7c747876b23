"""Runtime support: configuration, logging and error types."""

from vectorgfx.runtime.config import (
    GeometryConfig,
    get_geometry_config,
    initialize_geometry_config,
    load_geometry_config,
    reset_geometry_config,
    set_geometry_config,
)
from vectorgfx.runtime.errors import (
    ArrayLengthError,
    ArrayValueError,
    GeometryError,
    NullArgumentError,
    PointConversionError,
)
from vectorgfx.runtime.logging import (
    JsonFormatter,
    configure_logging,
    get_logger,
    setup_logging,
    shutdown_logging,
)

__all__ = [
    "ArrayLengthError",
    "ArrayValueError",
    "GeometryConfig",
    "GeometryError",
    "JsonFormatter",
    "NullArgumentError",
    "PointConversionError",
    "configure_logging",
    "get_geometry_config",
    "get_logger",
    "initialize_geometry_config",
    "load_geometry_config",
    "reset_geometry_config",
    "set_geometry_config",
    "setup_logging",
    "shutdown_logging",
]
