"""Build inspector and runner for npm projects."""

from typing import List, Optional

from ..helpers import shell
from .errors import BuildError, ManifestReadError
from .manifest import MANIFEST_FILE_NAME, read_build_manifest

INSTALL_COMMAND = ["npm", "install"]
BUILD_COMMAND = ["npm", "run", "build"]


class BuildRunner:
    """Inspect package.json and run the install + build step."""

    def __init__(
        self,
        publisher,
        install_command: Optional[List[str]] = None,
        build_command: Optional[List[str]] = None,
    ):
        self.publisher = publisher
        self.install_command = install_command or INSTALL_COMMAND
        self.build_command = build_command or BUILD_COMMAND

    def inspect(self, workspace_dir: str) -> Optional[str]:
        """
        Return the declared build script, or None if there is none.

        Raises:
            ManifestReadError: If package.json cannot be read or is malformed
        """
        try:
            manifest = read_build_manifest(workspace_dir)
        except ManifestReadError as e:
            self.publisher.publish(f"Error reading {MANIFEST_FILE_NAME}: {e}")
            raise

        if manifest.build_command is None:
            self.publisher.publish(f"No build script found in {MANIFEST_FILE_NAME}")

        return manifest.build_command

    def run(self, workspace_dir: str, build_script: Optional[str] = None) -> None:
        """
        Install dependencies and run the build script.

        Install and build are one step: a failure in either raises the same
        BuildError.

        Raises:
            BuildError: If either command fails
        """
        if build_script:
            self.publisher.publish(
                f"Starting build process with command: {build_script}"
            )
        else:
            self.publisher.publish("Starting build process...")

        for command in (self.install_command, self.build_command):
            self._run_step(command, workspace_dir)

        self.publisher.publish("Build completed successfully")

    def _run_step(self, command: List[str], workspace_dir: str) -> None:
        try:
            result = shell.run_command(command, cwd=str(workspace_dir))
        except OSError as e:
            self.publisher.publish(f"Build error: {e}")
            raise BuildError(str(e)) from e

        if result.stdout.strip():
            self.publisher.publish(f"Build stdout: {result.stdout.strip()}")
        if result.stderr.strip():
            self.publisher.publish(f"Build stderr: {result.stderr.strip()}")

        if not result.ok:
            message = result.error_message()
            self.publisher.publish(f"Build error: {message}")
            raise BuildError(message, details={"returncode": result.returncode})
