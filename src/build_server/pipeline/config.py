"""Pipeline configuration loaded from the environment or a YAML file."""

import os
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, List, Mapping, Optional

import yaml

from ..helpers.log_publisher import DEFAULT_REDIS_URL
from ..helpers.utils import load_yaml, mask_secret
from .errors import ConfigurationError

DEFAULT_WORKSPACE_DIR = "output"

# Field name -> environment variable(s), first match wins
ENV_VARS = {
    "repository_url": ("GIT_REPOSITORY_URL", "GIT_REPOSITORY__URL"),
    "project_id": ("PROJECT_ID",),
    "bucket_name": ("S3_BUCKET_NAME",),
    "redis_url": ("REDIS_URL",),
    "aws_region": ("AWS_REGION",),
    "aws_access_key_id": ("AWS_ACCESS_KEY_ID",),
    "aws_secret_access_key": ("AWS_SECRET_ACCESS_KEY",),
    "workspace_dir": ("WORKSPACE_DIR",),
}

REQUIRED_FIELDS = ("repository_url", "project_id")
SECRET_FIELDS = ("aws_access_key_id", "aws_secret_access_key")


@dataclass(frozen=True)
class PipelineConfig:
    """Immutable settings for one pipeline run."""

    repository_url: Optional[str] = None
    project_id: Optional[str] = None
    bucket_name: Optional[str] = None
    redis_url: str = DEFAULT_REDIS_URL
    aws_region: Optional[str] = None
    aws_access_key_id: Optional[str] = None
    aws_secret_access_key: Optional[str] = None
    workspace_dir: str = DEFAULT_WORKSPACE_DIR

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PipelineConfig":
        """Build config from environment variables without validating it."""
        return cls().with_values(_values_from_env(environ))

    @classmethod
    def from_file(
        cls, config_file: str, environ: Optional[Mapping[str, str]] = None
    ) -> "PipelineConfig":
        """Build config from a YAML file; environment variables take precedence."""
        try:
            data = load_yaml(config_file, environ)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigurationError(str(e)) from e

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration keys in {config_file}: {', '.join(unknown)}"
            )

        values = {k: str(v) for k, v in data.items() if v is not None and v != ""}
        values.update(_values_from_env(environ))
        return cls().with_values(values)

    @classmethod
    def load(
        cls,
        config_file: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "PipelineConfig":
        """Resolve config: overrides > environment > file > defaults."""
        if config_file:
            config = cls.from_file(config_file, environ)
        else:
            config = cls.from_env(environ)
        return config.with_values(overrides or {})

    def with_values(self, values: Dict[str, Any]) -> "PipelineConfig":
        """Copy with the non-empty values applied."""
        applied = {k: v for k, v in values.items() if v not in (None, "")}
        return replace(self, **applied) if applied else self

    def missing_fields(self) -> List[str]:
        return [name for name in REQUIRED_FIELDS if not getattr(self, name)]

    def missing_env_vars(self) -> List[str]:
        """Primary environment variable names of the missing required fields."""
        return [ENV_VARS[name][0] for name in self.missing_fields()]

    def validate(self) -> "PipelineConfig":
        """
        Check required settings are present.

        Raises:
            ConfigurationError: If the repository URL or project id is missing
        """
        missing = self.missing_fields()
        if missing:
            raise ConfigurationError(
                f"{' or '.join(self.missing_env_vars())} environment variable is missing.",
                details={"missing": missing},
            )
        return self

    @property
    def can_upload(self) -> bool:
        """Whether the object store settings needed for upload are present."""
        return bool(self.bucket_name and self.aws_region)

    def to_dict(self, mask_secrets: bool = True) -> Dict[str, Any]:
        data = asdict(self)
        if mask_secrets:
            for name in SECRET_FIELDS:
                data[name] = mask_secret(data[name])
        return data


def _values_from_env(environ: Optional[Mapping[str, str]]) -> Dict[str, str]:
    if environ is None:
        environ = os.environ

    values = {}
    for name, env_names in ENV_VARS.items():
        for env_name in env_names:
            value = environ.get(env_name)
            if value:
                values[name] = value
                break
    return values
