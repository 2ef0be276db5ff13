"""Unit tests for ArtifactUploader."""

from unittest.mock import Mock

import pytest
from botocore.exceptions import ClientError

from build_server.pipeline.uploader import ArtifactUploader, plan_uploads

KEY_PREFIX = "__outputs/site-1"


@pytest.fixture
def dist_dir(tmp_path):
    dist = tmp_path / "dist"
    dist.mkdir()
    (dist / "index.html").write_text("<html></html>")
    (dist / "app.js").write_text("console.log('hi')")
    (dist / "sub").mkdir()
    (dist / "sub" / "ignored.txt").write_text("nested")
    return dist


class TestPlanUploads:
    """Test upload task planning."""

    def test_top_level_files_only(self, dist_dir):
        tasks = {t.file_name: t for t in plan_uploads(str(dist_dir), KEY_PREFIX)}

        assert set(tasks) == {"index.html", "app.js"}
        assert tasks["index.html"].object_key == "__outputs/site-1/index.html"
        assert tasks["index.html"].content_type == "text/html"
        assert tasks["app.js"].object_key == "__outputs/site-1/app.js"

    def test_unknown_extension(self, tmp_path):
        (tmp_path / "blob.unknownext").write_bytes(b"\x00\x01")

        (task,) = plan_uploads(str(tmp_path), KEY_PREFIX)

        assert task.content_type == "application/octet-stream"

    def test_empty_directory(self, tmp_path):
        assert plan_uploads(str(tmp_path), KEY_PREFIX) == []


class TestArtifactUploader:
    """Test the best-effort upload batch."""

    def test_uploads_each_top_level_file(self, dist_dir, publisher):
        mock_s3 = Mock()

        report = ArtifactUploader(publisher, mock_s3).upload(
            dist_dir, "deployments", KEY_PREFIX
        )

        assert mock_s3.upload_file.call_count == 2
        keys = sorted(c[0][2] for c in mock_s3.upload_file.call_args_list)
        assert keys == ["__outputs/site-1/app.js", "__outputs/site-1/index.html"]
        for c in mock_s3.upload_file.call_args_list:
            assert c[0][1] == "deployments"
            assert not c[0][0].endswith("ignored.txt")
            assert "ContentType" in c[1]["ExtraArgs"]

        assert len(report.uploaded) == 2
        assert report.failed == []
        assert "Uploaded index.html" in publisher.messages
        assert "Uploaded app.js" in publisher.messages

    def test_one_failure_does_not_abort_batch(self, dist_dir, publisher):
        mock_s3 = Mock()

        def upload_file(local_path, bucket, key, ExtraArgs=None):
            if key.endswith("app.js"):
                raise ClientError(
                    {"Error": {"Code": "AccessDenied", "Message": "Access Denied"}},
                    "PutObject",
                )

        mock_s3.upload_file.side_effect = upload_file

        report = ArtifactUploader(publisher, mock_s3).upload(
            dist_dir, "deployments", KEY_PREFIX
        )

        assert mock_s3.upload_file.call_count == 2
        assert [t.file_name for t in report.uploaded] == ["index.html"]
        assert len(report.failed) == 1
        failed_task, error = report.failed[0]
        assert failed_task.file_name == "app.js"
        assert "AccessDenied" in error
        assert "Uploaded index.html" in publisher.messages
        assert any(
            m.startswith("Error uploading app.js:") for m in publisher.messages
        )
        assert report.total == 2

    def test_logs_uploading_before_outcome(self, tmp_path, publisher):
        (tmp_path / "index.html").write_text("x")

        ArtifactUploader(publisher, Mock()).upload(tmp_path, "b", KEY_PREFIX)

        assert publisher.messages == ["Uploading index.html", "Uploaded index.html"]
