"""Build server: clone, build and deploy static sites to S3."""

__version__ = "1.0.0"
