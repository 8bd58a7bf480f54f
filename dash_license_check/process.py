"""Synchronous execution of external commands."""
from __future__ import annotations

import json
import signal
import subprocess
from typing import IO, Any, Optional, Sequence, Union

from dash_license_check.constants import EXIT_SCANNER_INTERNAL_ERROR
from dash_license_check.exceptions import ProcessLaunchError
from dash_license_check.models.process import ProcessStatus

# subprocess accepts a file object, a descriptor, DEVNULL/PIPE, or None (inherit)
StdioSpec = Union[None, int, IO[Any]]


def pretty_command(bin: str, args: Sequence[str], indent: int = 2) -> str:
    """Render a command line as an indented JSON array."""
    return json.dumps([bin, *args], indent=indent)


def _signal_name(signum: int) -> str:
    try:
        return signal.Signals(signum).name
    except ValueError:
        return str(signum)


def run_process(
    bin: str,
    args: Sequence[str],
    stdin: StdioSpec = None,
    stdout: StdioSpec = None,
    stderr: StdioSpec = None,
) -> ProcessStatus:
    """Run a command and block until it terminates.

    Standard streams are inherited from this process unless redirected.

    Args:
        bin: Executable to run, looked up on PATH.
        args: Arguments passed to the executable.
        stdin: Standard input of the child, e.g. subprocess.DEVNULL.
        stdout: Standard output of the child.
        stderr: Standard error of the child.

    Returns:
        ProcessStatus with the exit code, or the signal that killed it.

    Raises:
        ProcessLaunchError: If the command cannot be started at all
            (executable not found, not executable, ...).
    """
    command = [bin, *args]
    try:
        completed = subprocess.run(
            command, stdin=stdin, stdout=stdout, stderr=stderr, check=False
        )
    except OSError as e:
        raise ProcessLaunchError(
            f"Failed to launch {bin}: {e}", command=pretty_command(bin, args)
        ) from e

    # POSIX: a negative return code is the number of the terminating signal
    if completed.returncode < 0:
        return ProcessStatus(
            bin=bin, args=list(args), signal=_signal_name(-completed.returncode)
        )
    return ProcessStatus(bin=bin, args=list(args), returncode=completed.returncode)


def error_from_status(status: ProcessStatus) -> Optional[str]:
    """Describe how a process failed.

    Args:
        status: Status returned by run_process().

    Returns:
        Error message if the process failed, None otherwise.
    """
    command = pretty_command(status.bin, status.args)
    if status.signal is not None:
        return f"Command {command} exited with signal: {status.signal}"
    if status.returncode == EXIT_SCANNER_INTERNAL_ERROR:
        return (
            f"Command {command} exit code ({status.returncode}) means "
            "dash-licenses has encountered an internal error"
        )
    if status.returncode != 0:
        return f"Command {command} exited with code: {status.returncode}"
    return None
