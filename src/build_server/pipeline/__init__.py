"""
Pipeline module for the build server.

Contains configuration, the individual steps and the executor that runs them.
"""

from .config import PipelineConfig
from .errors import (
    BuildError,
    CloneError,
    ConfigurationError,
    LocateError,
    ManifestReadError,
    PipelineError,
    UploadError,
)
from .executor import PipelineExecutor, PipelineResult, PipelineState

__all__ = [
    "PipelineConfig",
    "PipelineExecutor",
    "PipelineResult",
    "PipelineState",
    "PipelineError",
    "ConfigurationError",
    "CloneError",
    "ManifestReadError",
    "BuildError",
    "LocateError",
    "UploadError",
]
