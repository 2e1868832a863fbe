"""
Subprocess execution helpers.

Every external command (mount, umount, vgs, vgcreate, ...) goes through `run`
so that failures surface uniformly as `ExecutionError`.
"""

import subprocess
from typing import Optional, Sequence


class ExecutionError(RuntimeError):
    """An external command exited non-zero or could not be started."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: Optional[int] = None,
        stdout: str = "",
        stderr: str = "",
    ):
        self.command = list(command)
        self.returncode = returncode
        self.stdout = stdout or ""
        self.stderr = stderr or ""
        detail = (self.stderr or self.stdout).strip()
        if returncode is None:
            message = f"Failed to run '{format_command(command)}': {detail}"
        else:
            message = f"Command '{format_command(command)}' failed with exit code {returncode}: {detail}"
        super().__init__(message)


def format_command(cmd: Sequence[str]) -> str:
    return " ".join(cmd)


def run(cmd: Sequence[str], *, check: bool = True) -> subprocess.CompletedProcess:
    """
    Run a command and capture its output.

    Args:
        cmd: Argument vector
        check: Raise ExecutionError on a non-zero exit (default: True)

    Returns:
        The completed process

    Raises:
        ExecutionError: If the command cannot be started, or exits non-zero and check is set
    """
    try:
        result = subprocess.run(list(cmd), capture_output=True, text=True, check=False)
    except OSError as e:
        raise ExecutionError(cmd, stderr=str(e)) from e

    if check and result.returncode != 0:
        raise ExecutionError(cmd, result.returncode, result.stdout, result.stderr)
    return result
