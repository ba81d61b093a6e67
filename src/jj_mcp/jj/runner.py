"""
Process invoker for the jj command-line program.

Runs jj as a child process and normalizes every outcome into a
CommandResult. Nothing in here raises for a failed or unstartable command:
the caller always gets either a CommandSuccess or a CommandFailure.
"""

import logging
import subprocess
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

import anyio

logger = logging.getLogger(__name__)

DEFAULT_JJ_COMMAND = "jj"

# Failure kinds
EXIT = "exit"
SIGNAL = "signal"
SPAWN = "spawn"
TIMEOUT = "timeout"


def _decode(data: Optional[bytes]) -> str:
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class CommandSuccess:
    """The program exited with status zero."""

    args: List[str]
    stdout: str
    stderr: str = ""
    returncode: int = 0
    success: bool = field(default=True, init=False)

    @property
    def output(self) -> str:
        """Standard output with surrounding whitespace removed."""
        return self.stdout.strip()


@dataclass(frozen=True)
class CommandFailure:
    """
    The program could not be run, or ran and reported failure.

    Attributes:
        kind: One of "exit", "signal", "spawn" or "timeout"
        message: Human-readable diagnostic (trimmed stderr where available)
        returncode: Exit status, negative signal number, or None if it never ran
    """

    args: List[str]
    kind: str
    message: str
    returncode: Optional[int] = None
    stderr: str = ""
    success: bool = field(default=False, init=False)


CommandResult = Union[CommandSuccess, CommandFailure]


class JJRunner:
    """Runs jj subcommands asynchronously."""

    def __init__(self, command: str = DEFAULT_JJ_COMMAND, timeout: Optional[float] = None):
        """
        Initialize the runner.

        Args:
            command: Program name or path of the jj executable
            timeout: Seconds to wait for a command before giving up, or None to wait forever
        """
        self.command = command
        self.timeout = timeout

    async def run(self, args: Sequence[str], cwd: Optional[str] = None) -> CommandResult:
        """
        Run jj with the given arguments.

        Args:
            args: Argument tokens following the program name
            cwd: Directory to start the process in, or None for the current one

        Returns:
            The structured outcome of the command
        """
        args = list(args)
        argv = [self.command, *args]
        logger.debug(f"Running {argv} (cwd={cwd or '.'})")

        try:
            with anyio.fail_after(self.timeout):
                completed = await anyio.run_process(
                    argv,
                    stdin=subprocess.DEVNULL,
                    cwd=cwd,
                    check=False,
                )
        except TimeoutError:
            message = f"{self.command} did not finish within {self.timeout} seconds"
            logger.warning(message)
            return CommandFailure(args=args, kind=TIMEOUT, message=message)
        except OSError as e:
            message = e.strerror or str(e)
            if e.filename:
                message = f"{message}: {e.filename}"
            logger.warning(f"Could not start {self.command}: {message}")
            return CommandFailure(args=args, kind=SPAWN, message=message)

        stdout = _decode(completed.stdout)
        stderr = _decode(completed.stderr)
        returncode = completed.returncode

        if returncode == 0:
            return CommandSuccess(args=args, stdout=stdout, stderr=stderr)

        if returncode < 0:
            kind = SIGNAL
            fallback = f"{self.command} was terminated by signal {-returncode}"
        else:
            kind = EXIT
            fallback = f"{self.command} exited with status {returncode}"

        message = stderr.strip() or fallback
        logger.warning(f"{self.command} {' '.join(args[:2])} failed ({kind}, status {returncode})")
        return CommandFailure(args=args, kind=kind, message=message, returncode=returncode, stderr=stderr)
