"""
Run an external command on the inherited standard streams.
"""

import signal
import subprocess
from typing import List, Sequence


SPAWN_FAILURE_EXIT_CODE = 1


class SpawnError(RuntimeError):
    """Raised when a child process cannot be started."""


def normalize_exit_code(returncode: int) -> int:
    """
    Map a Popen return code to a shell-style exit status.

    Children killed by signal N report ``-N``; these become ``128 + N``.
    """
    if returncode < 0:
        return 128 + abs(returncode)
    return returncode


def _ignore_interrupt(signum, frame):
    pass


def run_command(command: Sequence[str]) -> int:
    """
    Start ``command``, wait for it and return its exit status.

    stdin, stdout and stderr are inherited untouched. Ctrl-C is swallowed here
    while the child runs; SIG_IGN must not be used, it survives exec.

    Raises:
        SpawnError: If the process could not be started.
    """
    argv: List[str] = [str(part) for part in command]
    previous_handler = signal.signal(signal.SIGINT, _ignore_interrupt)
    try:
        try:
            result = subprocess.run(argv)
        except OSError as e:
            raise SpawnError(str(e)) from e
    finally:
        signal.signal(signal.SIGINT, previous_handler)
    return normalize_exit_code(result.returncode)
