"""
Command Execution

Runs external commands for the probes. Any failure to obtain output is
reported as ``None`` so that a missing tool and a broken tool look the same.
"""

import logging
import os
import subprocess
from typing import Optional, Sequence

logger = logging.getLogger(__name__)


class CommandRunner:
    """
    Runs commands synchronously and checks paths on the local filesystem.

    Probes only talk to the machine through this class, so tests can hand
    them a fake with canned output instead.
    """

    def __init__(self, timeout: Optional[float] = None):
        """
        Initialize the runner.

        Args:
            timeout: Seconds to wait for each command, or None to wait forever
        """
        self.timeout = timeout

    def run(self, command: Sequence[str]) -> Optional[str]:
        """
        Run a command and return its trimmed standard output.

        Args:
            command: Program and arguments

        Returns:
            Trimmed stdout, or None if the command is missing, exits
            non-zero, or times out
        """
        logger.debug("Running %s", " ".join(command))

        try:
            result = subprocess.run(
                list(command),
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except (subprocess.TimeoutExpired, OSError, ValueError) as e:
            logger.debug("Command %s could not run: %s", command[0], e)
            return None

        if result.returncode != 0:
            logger.debug("Command %s exited with %d", command[0], result.returncode)
            return None

        return result.stdout.strip()

    def exists(self, path: str) -> bool:
        """Check whether a file or directory exists."""
        return os.path.exists(path)

    def cwd(self) -> str:
        """Current working directory."""
        return os.getcwd()
