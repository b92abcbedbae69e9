"""Common components shared across WordTreeLib.

This internal package contains configuration and enums that both the
tree core and the word index depend on. It should NOT be imported
directly by users.

Important: This package must NEVER import from core or index to avoid
circular dependencies.
"""

# Re-export configuration components
from .config import (
    TraversalOrder,
    ReportMode,
    InvalidReportModeError,
    TrackerConfig,
    runtime_config,
    reset_runtime_config_cache,
)

__all__ = [
    'TraversalOrder',
    'ReportMode',
    'InvalidReportModeError',
    'TrackerConfig',
    'runtime_config',
    'reset_runtime_config_cache',
]
