"""Artifact uploader: pushes build outputs to S3 one file at a time."""

import os
from dataclasses import dataclass, field
from typing import List, Tuple

from ..helpers import s3
from .errors import UploadError


@dataclass
class UploadTask:
    """One top-level output file and where it goes."""

    local_path: str
    object_key: str
    content_type: str

    @property
    def file_name(self) -> str:
        return os.path.basename(self.local_path)


@dataclass
class UploadReport:
    """Per-file outcome of an upload batch."""

    uploaded: List[UploadTask] = field(default_factory=list)
    failed: List[Tuple[UploadTask, str]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.uploaded) + len(self.failed)


def plan_uploads(output_dir: str, key_prefix: str) -> List[UploadTask]:
    """
    List the upload tasks for the top-level files of output_dir.

    Subdirectories are skipped, not recursed into. Order follows the
    filesystem enumeration.
    """
    tasks = []
    with os.scandir(output_dir) as entries:
        for entry in entries:
            if entry.is_dir():
                continue
            tasks.append(
                UploadTask(
                    local_path=entry.path,
                    object_key=s3.build_object_key(key_prefix, entry.name),
                    content_type=s3.guess_content_type(entry.name),
                )
            )
    return tasks


class ArtifactUploader:
    """
    Best-effort sequential uploader.

    A failing file is logged and recorded in the report; the rest of the
    batch still runs.
    """

    def __init__(self, publisher, s3_client):
        self.publisher = publisher
        self.s3_client = s3_client

    def upload(self, output_dir: str, bucket: str, key_prefix: str) -> UploadReport:
        report = UploadReport()

        for task in plan_uploads(str(output_dir), key_prefix):
            self.publisher.publish(f"Uploading {task.file_name}")
            try:
                self._upload_one(task, bucket)
            except UploadError as e:
                self.publisher.publish(f"Error uploading {task.file_name}: {e}")
                report.failed.append((task, str(e)))
                continue

            self.publisher.publish(f"Uploaded {task.file_name}")
            report.uploaded.append(task)

        return report

    def _upload_one(self, task: UploadTask, bucket: str) -> None:
        try:
            s3.upload_file(
                self.s3_client,
                task.local_path,
                bucket,
                task.object_key,
                task.content_type,
            )
        except Exception as e:
            raise UploadError(str(e), details={"key": task.object_key}) from e
