"""Helper modules shared by the pipeline and the CLI."""
