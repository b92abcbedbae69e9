"""Public configuration module.

Re-exports configuration components from the _common package.
"""

from ._common.config import (
    DEFAULT_ENCODING,
    DEFAULT_LOG_LEVEL,
    DEFAULT_REPOSITORY,
    TraversalOrder,
    ReportMode,
    InvalidReportModeError,
    TrackerConfig,
    runtime_config,
    reset_runtime_config_cache,
)

__all__ = [
    'DEFAULT_ENCODING',
    'DEFAULT_LOG_LEVEL',
    'DEFAULT_REPOSITORY',
    'TraversalOrder',
    'ReportMode',
    'InvalidReportModeError',
    'TrackerConfig',
    'runtime_config',
    'reset_runtime_config_cache',
]
