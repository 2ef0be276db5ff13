"""Subprocess invocation helper."""

import subprocess
from dataclasses import dataclass
from typing import List, Optional

from .logger import get_logger

logger = get_logger("shell")


@dataclass
class CommandResult:
    """Outcome of a finished command."""

    args: List[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def error_message(self) -> str:
        """Human readable failure description, similar to a shell error."""
        detail = self.stderr.strip() or self.stdout.strip()
        message = f"Command failed: {' '.join(self.args)} (exit code {self.returncode})"
        return f"{message}\n{detail}" if detail else message


def run_command(args: List[str], cwd: Optional[str] = None) -> CommandResult:
    """
    Run a command to completion and capture its output.

    No shell is involved; arguments are passed as a list. There is no timeout,
    a step runs until the process exits.

    Raises:
        OSError: If the executable cannot be started
    """
    logger.debug(f"Running {args} in {cwd or '.'}")
    result = subprocess.run(
        args,
        cwd=cwd,
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
    )
    logger.debug(f"{args[0]} exited with {result.returncode}")
    return CommandResult(
        args=list(args),
        returncode=result.returncode,
        stdout=result.stdout or "",
        stderr=result.stderr or "",
    )
