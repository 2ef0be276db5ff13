"""
Exception hierarchy for the build pipeline.

Every pipeline failure inherits from PipelineError so the executor can
catch them in one place. Each error records the step that raised it.
"""

from typing import Any, Dict, Optional


class PipelineError(Exception):
    """Base exception for all pipeline errors."""

    step_name: Optional[str] = None

    def __init__(
        self,
        message: str,
        step_name: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        if step_name is not None:
            self.step_name = step_name
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(PipelineError):
    """A required setting is missing; the pipeline never starts."""

    step_name = "configuration"


class CloneError(PipelineError):
    """Cloning the repository failed."""

    step_name = "clone"


class ManifestReadError(PipelineError):
    """package.json is missing or malformed."""

    step_name = "inspect"


class BuildError(PipelineError):
    """Dependency install or build script failed."""

    step_name = "build"


class LocateError(PipelineError):
    """The build did not produce the expected output directory."""

    step_name = "locate"


class UploadError(PipelineError):
    """A single file failed to upload. Never aborts the batch."""

    step_name = "upload"
