"""Artifact locator."""

from pathlib import Path

from .errors import LocateError

OUTPUT_DIR_NAME = "dist"


def locate(workspace_dir: str) -> Path:
    """
    Return the build output directory inside the workspace.

    Raises:
        LocateError: If the build did not create it
    """
    output_dir = Path(workspace_dir) / OUTPUT_DIR_NAME
    if not output_dir.is_dir():
        raise LocateError(
            f"{OUTPUT_DIR_NAME} folder not found. Make sure your build script "
            f"creates a '{OUTPUT_DIR_NAME}' folder."
        )
    return output_dir
