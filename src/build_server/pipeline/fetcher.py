"""Repository fetcher: clones the source repository into the workspace."""

from ..helpers import shell
from .errors import CloneError


class RepositoryFetcher:
    """Clone a git repository, reporting progress through the publisher."""

    def __init__(self, publisher, git_executable: str = "git"):
        self.publisher = publisher
        self.git_executable = git_executable

    def fetch(self, repo_url: str, dest_dir: str) -> None:
        """
        Clone repo_url into dest_dir.

        An existing dest_dir is not merged into or removed; git refuses it
        and the clone fails.

        Raises:
            CloneError: If git exits non-zero or cannot be started
        """
        self.publisher.publish(f"Cloning repository: {repo_url}")

        try:
            result = shell.run_command(
                [self.git_executable, "clone", repo_url, str(dest_dir)]
            )
        except OSError as e:
            self.publisher.publish(f"Error cloning repository: {e}")
            raise CloneError(str(e)) from e

        if not result.ok:
            message = result.error_message()
            self.publisher.publish(f"Error cloning repository: {message}")
            raise CloneError(message, details={"returncode": result.returncode})

        # git reports progress on stderr
        if result.stderr.strip():
            self.publisher.publish(f"Clone stderr: {result.stderr.strip()}")

        self.publisher.publish("Repository cloned successfully")
