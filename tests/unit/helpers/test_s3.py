"""Unit tests for S3 helpers."""

from unittest.mock import Mock, patch

import pytest

from build_server.helpers import s3
from build_server.helpers.boto3_client import create_client


class TestS3Helpers:
    """Test S3 helper functions."""

    def test_guess_content_type(self):
        assert s3.guess_content_type("index.html") == "text/html"
        assert s3.guess_content_type("styles.css") == "text/css"
        assert s3.guess_content_type("logo.png") == "image/png"

    def test_guess_content_type_unknown_extension(self):
        assert s3.guess_content_type("data.unknownext") == "application/octet-stream"
        assert s3.guess_content_type("LICENSE") == "application/octet-stream"

    def test_output_key_prefix(self):
        assert s3.output_key_prefix("site-1") == "__outputs/site-1"

    def test_build_object_key(self):
        assert s3.build_object_key("__outputs/site-1", "app.js") == "__outputs/site-1/app.js"
        assert s3.build_object_key("__outputs/site-1/", "app.js") == "__outputs/site-1/app.js"

    def test_upload_file_sets_content_type(self):
        mock_s3 = Mock()

        s3.upload_file(mock_s3, "/tmp/index.html", "bucket", "key/index.html", "text/html")

        mock_s3.upload_file.assert_called_once_with(
            "/tmp/index.html",
            "bucket",
            "key/index.html",
            ExtraArgs={"ContentType": "text/html"},
        )

    def test_upload_file_propagates_errors(self):
        mock_s3 = Mock()
        mock_s3.upload_file.side_effect = Exception("Access denied")

        with pytest.raises(Exception, match="Access denied"):
            s3.upload_file(mock_s3, "/tmp/a", "bucket", "key")


class TestBoto3Client:
    """Test boto3 client creation."""

    def test_region_required(self):
        with pytest.raises(ValueError, match="Region must be provided"):
            create_client("s3")

    @patch("build_server.helpers.boto3_client.boto3.client")
    def test_default_credential_chain(self, mock_client):
        create_client("s3", "us-east-1")
        mock_client.assert_called_once_with("s3", region_name="us-east-1")

    @patch("build_server.helpers.boto3_client.boto3.client")
    def test_static_credentials(self, mock_client):
        s3.create_s3_client("eu-west-1", "AKIAEXAMPLE", "secret")
        mock_client.assert_called_once_with(
            "s3",
            region_name="eu-west-1",
            aws_access_key_id="AKIAEXAMPLE",
            aws_secret_access_key="secret",
        )

    @patch("build_server.helpers.boto3_client.boto3.client")
    def test_partial_credentials_ignored(self, mock_client):
        create_client("s3", "us-east-1", "AKIAEXAMPLE", None)
        mock_client.assert_called_once_with("s3", region_name="us-east-1")
