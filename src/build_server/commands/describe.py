"""Describe command: shows the resolved pipeline configuration."""

import json
from typing import Optional

import typer

from ..helpers.error_handler import (
    handle_error,
    handle_success,
    handle_warning,
    validate_required_settings,
)
from ..helpers.log_publisher import channel_name
from ..helpers.s3 import output_key_prefix
from ..pipeline import ConfigurationError, PipelineConfig


def describe_command(config_file: Optional[str], output: str) -> None:
    """
    Print the configuration a run would use, with secrets masked.

    Exits 1 when a required setting is missing.
    """
    try:
        config = PipelineConfig.load(config_file)
    except ConfigurationError as e:
        handle_error(str(e))
        return

    missing = config.missing_fields()
    data = config.to_dict()

    if output.upper() == "JSON":
        result = {
            "config": data,
            "missing": missing,
            "canUpload": config.can_upload,
        }
        if config.project_id:
            result["channel"] = channel_name(config.project_id)
            result["keyPrefix"] = output_key_prefix(config.project_id)
        typer.echo(json.dumps(result, indent=2))
    else:
        typer.echo("Pipeline configuration:")
        for key, value in data.items():
            typer.echo(f"  {key}: {value if value is not None else '-'}")
        if config.project_id:
            typer.echo(f"  log channel: {channel_name(config.project_id)}")
            typer.echo(f"  object key prefix: {output_key_prefix(config.project_id)}/")
        if not config.can_upload:
            handle_warning("S3_BUCKET_NAME or AWS_REGION is not set, uploads disabled")

    validate_required_settings(config)

    if output.upper() != "JSON":
        handle_success("Configuration is complete")
