"""Thin wrapper around the GitHub CLI binary."""

import logging
import subprocess
from typing import Sequence

logger = logging.getLogger(__name__)

INSTALL_HINT = (
    "GitHub CLI (gh) not found. Please install it from https://cli.github.com/ "
    "and make sure it's in your PATH."
)


class GhError(Exception):
    """Any failure talking to gh. str(exc) is the user-facing message."""


class GhNotFoundError(GhError):
    """The gh binary is not installed or not on PATH."""

    def __init__(self, binary: str = "gh") -> None:
        super().__init__(INSTALL_HINT)
        self.binary = binary


class GhCommandError(GhError):
    """gh ran but exited non-zero."""

    def __init__(self, returncode: int, stderr: str) -> None:
        super().__init__(f"gh command failed: {stderr}")
        self.returncode = returncode
        self.stderr = stderr


class GhParseError(GhError):
    """gh output was not the JSON shape we asked for."""


class GhRunner:
    """Runs gh synchronously and returns its stdout."""

    def __init__(self, binary: str = "gh") -> None:
        self.binary = binary

    def run(self, args: Sequence[str]) -> str:
        """Execute `gh <args>`; raise a GhError subclass on failure."""
        cmd = [self.binary, *args]
        logger.debug("running %s", " ".join(cmd))
        try:
            proc = subprocess.run(cmd, capture_output=True, check=False)
        except FileNotFoundError as e:
            raise GhNotFoundError(self.binary) from e
        except OSError as e:
            raise GhError(f"Failed to execute gh command: {e}") from e

        logger.debug("%s exited with status %d", self.binary, proc.returncode)
        if proc.returncode != 0:
            raise GhCommandError(
                proc.returncode, proc.stderr.decode("utf-8", errors="replace")
            )
        return proc.stdout.decode("utf-8", errors="replace")
