"""Run command: executes one build pipeline."""

from typing import Optional

import typer

from ..helpers.log_publisher import LogPublisher
from ..helpers.logger import get_logger
from ..helpers.s3 import create_s3_client
from ..pipeline import ConfigurationError, PipelineConfig, PipelineExecutor
from ..pipeline.uploader import ArtifactUploader

logger = get_logger("commands.run")


def run_command(
    config_file: Optional[str] = None,
    repo_url: Optional[str] = None,
    project_id: Optional[str] = None,
    workspace: Optional[str] = None,
    strict_exit_code: bool = False,
) -> None:
    """
    Clone, build and upload one project.

    Failures are reported through the log publisher. The command exits 0
    unless strict_exit_code is set, in which case a failed run exits 1.

    Args:
        config_file: Optional YAML configuration file
        repo_url: Repository URL (overrides GIT_REPOSITORY_URL)
        project_id: Project identifier (overrides PROJECT_ID)
        workspace: Clone directory (overrides WORKSPACE_DIR)
        strict_exit_code: Exit non-zero when the pipeline fails

    Examples:
        build-server run
        build-server run --repo-url https://github.com/acme/site.git --project-id site
    """
    overrides = {
        "repository_url": repo_url,
        "project_id": project_id,
        "workspace_dir": workspace,
    }

    try:
        config = PipelineConfig.load(config_file, overrides)
    except ConfigurationError as e:
        with LogPublisher() as publisher:
            publisher.publish(f"Error: {e}")
        _exit(False, strict_exit_code)
        return

    logger.debug(f"Resolved configuration: {config.to_dict()}")

    publisher = LogPublisher.connect(config.redis_url, config.project_id)

    uploader = None
    if config.can_upload:
        s3_client = create_s3_client(
            config.aws_region, config.aws_access_key_id, config.aws_secret_access_key
        )
        uploader = ArtifactUploader(publisher, s3_client)
    else:
        logger.warning(
            "S3_BUCKET_NAME or AWS_REGION is not set, build outputs will not be uploaded"
        )

    result = PipelineExecutor(config, publisher, uploader=uploader).run()
    logger.info(f"Pipeline finished in state {result.state.value}")

    _exit(result.succeeded, strict_exit_code)


def _exit(succeeded: bool, strict_exit_code: bool) -> None:
    if strict_exit_code and not succeeded:
        raise typer.Exit(1)
