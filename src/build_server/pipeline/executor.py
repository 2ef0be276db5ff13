"""Pipeline executor: clone, inspect, build, locate and upload in order."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from ..helpers import s3
from ..helpers.logger import get_logger
from .builder import BuildRunner
from .config import PipelineConfig
from .errors import PipelineError
from .fetcher import RepositoryFetcher
from .locator import locate
from .uploader import ArtifactUploader, UploadReport

logger = get_logger("pipeline.executor")


class PipelineState(Enum):
    START = "START"
    CLONING = "CLONING"
    INSPECTING = "INSPECTING"
    BUILDING = "BUILDING"
    LOCATING = "LOCATING"
    UPLOADING = "UPLOADING"
    DONE = "DONE"
    FAILED = "FAILED"


@dataclass
class PipelineResult:
    """Final outcome of a pipeline run."""

    state: PipelineState
    error: Optional[str] = None
    failed_step: Optional[str] = None
    report: Optional[UploadReport] = None
    states: List[PipelineState] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.state == PipelineState.DONE


class PipelineExecutor:
    """
    Runs one pipeline to completion.

    Steps are strictly sequential and fail fast, except uploads which are
    best-effort per file. Every run ends with a terminal log line and the
    publisher closed, whatever the outcome.

    Usage::

        with LogPublisher.connect(config.redis_url, config.project_id) as publisher:
            executor = PipelineExecutor(config, publisher, uploader=uploader)
            result = executor.run()
    """

    def __init__(
        self,
        config: PipelineConfig,
        publisher,
        fetcher: Optional[RepositoryFetcher] = None,
        builder: Optional[BuildRunner] = None,
        locator: Callable = locate,
        uploader: Optional[ArtifactUploader] = None,
    ):
        self.config = config
        self.publisher = publisher
        self.fetcher = fetcher or RepositoryFetcher(publisher)
        self.builder = builder or BuildRunner(publisher)
        self.locator = locator
        self.uploader = uploader
        self.state = PipelineState.START
        self._states = [PipelineState.START]

    def _transition(self, state: PipelineState) -> None:
        logger.debug(f"{self.state.value} -> {state.value}")
        self.state = state
        self._states.append(state)

    def _finish(self, state: PipelineState, **kwargs) -> PipelineResult:
        self._transition(state)
        return PipelineResult(state=state, states=list(self._states), **kwargs)

    def run(self) -> PipelineResult:
        """Execute the pipeline once and close the publisher."""
        try:
            return self._run()
        except PipelineError as e:
            self.publisher.publish(f"Error: {e}")
            return self._finish(
                PipelineState.FAILED, error=str(e), failed_step=e.step_name
            )
        except Exception as e:
            logger.exception("Unexpected pipeline failure")
            self.publisher.publish(f"Error: {e}")
            return self._finish(
                PipelineState.FAILED, error=str(e), failed_step=self.state.value
            )
        finally:
            self.publisher.close()

    def _run(self) -> PipelineResult:
        config = self.config.validate()
        workspace = config.workspace_dir

        self.publisher.publish(f"Starting build pipeline for project {config.project_id}")

        self._transition(PipelineState.CLONING)
        self.fetcher.fetch(config.repository_url, workspace)

        self._transition(PipelineState.INSPECTING)
        build_script = self.builder.inspect(workspace)
        if build_script is None:
            # Nothing to build means nothing to upload either
            return self._finish(PipelineState.DONE)

        self._transition(PipelineState.BUILDING)
        self.builder.run(workspace, build_script)

        self._transition(PipelineState.LOCATING)
        output_dir = self.locator(workspace)

        report = None
        if self.uploader is None:
            self.publisher.publish(
                f"No upload target configured, skipping upload of {output_dir}"
            )
        else:
            self._transition(PipelineState.UPLOADING)
            report = self.uploader.upload(
                output_dir,
                config.bucket_name,
                s3.output_key_prefix(config.project_id),
            )

        self.publisher.publish("Process completed successfully")
        return self._finish(PipelineState.DONE, report=report)
