"""
External command execution.

ProcessRunner runs a command to completion and returns everything it wrote.
Both pipes are drained on their own threads while the process runs, so a
chatty build cannot block on a full pipe buffer, and each line is forwarded
to the log as soon as it arrives.

There is no timeout: a hung command hangs the caller.

Example:
    >>> runner = ProcessRunner()
    >>> result = runner.run(["carthage", "version"])
    >>> if result.succeeded:
    ...     print(result.output[0])
"""

import logging
import subprocess
import threading
from dataclasses import dataclass, field
from typing import IO, Callable, List, Optional, Sequence

logger = logging.getLogger(__name__)

DEFAULT_LAUNCHER = "/usr/bin/env"

# Exit status reported when the launcher itself cannot be started
LAUNCH_FAILURE_EXIT_CODE = 127


@dataclass
class CommandResult:
    """
    Captured result of an external command.

    Attributes:
        args: Full argument vector that was executed
        output: Lines written to stdout
        error: Lines written to stderr
        exit_code: Process exit status
    """

    args: List[str]
    output: List[str] = field(default_factory=list)
    error: List[str] = field(default_factory=list)
    exit_code: int = 0

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0

    @property
    def first_line(self) -> Optional[str]:
        """First stdout line, falling back to the first stderr line."""
        if self.output:
            return self.output[0]
        if self.error:
            return self.error[0]
        return None


class ProcessRunner:
    """
    Synchronous command runner with streamed, fully captured output.

    Attributes:
        launcher: Program prepended to every command (e.g. /usr/bin/env)
        echo: Forward output lines to the log as they arrive
    """

    def __init__(self, launcher: str = DEFAULT_LAUNCHER, echo: bool = True):
        self.launcher = launcher
        self.echo = echo

    def run(self, args: Sequence[str], cwd=None) -> CommandResult:
        """
        Run a command through the launcher and wait for it to exit.

        Empty arguments are dropped, so optional flags can be passed as "".

        Args:
            args: Command and arguments (without the launcher)
            cwd: Working directory for the command

        Returns:
            CommandResult with captured output and exit status. A command
            that cannot be launched yields exit status 127.
        """
        argv = [self.launcher] + [str(a) for a in args if a]
        logger.debug(f"Running: {' '.join(argv)}")

        try:
            process = subprocess.Popen(
                argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                stdin=subprocess.DEVNULL,
                text=True,
                errors="replace",
                cwd=str(cwd) if cwd is not None else None,
            )
        except OSError as e:
            logger.error(f"Failed to launch {argv[0]}: {e}")
            return CommandResult(
                args=argv, error=[str(e)], exit_code=LAUNCH_FAILURE_EXIT_CODE
            )

        result = CommandResult(args=argv)
        readers = [
            threading.Thread(
                target=_drain,
                args=(process.stdout, result.output, self._echo_output),
                daemon=True,
            ),
            threading.Thread(
                target=_drain,
                args=(process.stderr, result.error, self._echo_error),
                daemon=True,
            ),
        ]
        for reader in readers:
            reader.start()

        result.exit_code = process.wait()
        for reader in readers:
            reader.join()

        logger.debug(f"Exit status {result.exit_code}: {' '.join(argv)}")
        return result

    def _echo_output(self, line: str) -> None:
        if self.echo:
            logger.info(line)
        else:
            logger.debug(line)

    def _echo_error(self, line: str) -> None:
        if self.echo:
            logger.warning(line)
        else:
            logger.debug(line)


def _drain(stream: IO[str], sink: List[str], echo: Callable[[str], None]) -> None:
    with stream:
        for raw in stream:
            line = raw.rstrip("\r\n")
            sink.append(line)
            echo(line)
