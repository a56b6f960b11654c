"""
mermaid-cli process runner.

Runs mmdc as an asyncio subprocess bounded by a wall-clock timeout. On
timeout or cancellation the child (and on POSIX its whole process group,
which includes the headless browser) is killed and reaped before the
error propagates.

Dependencies: asyncio
System role: External renderer boundary
"""

import asyncio
import logging
import os
import shlex
import signal
from pathlib import Path

from mermaid_validation.core.exceptions import (
    RendererExitError,
    RendererSpawnError,
    RendererTimeoutError,
)

logger = logging.getLogger(__name__)

_POSIX = os.name == "posix"


class MermaidRenderer:
    """Invokes mmdc for a single input/output file pair."""

    def __init__(
        self,
        command: list[str],
        puppeteer_config: Path,
        timeout: float = 10.0,
    ) -> None:
        """
        Args:
            command: Executable plus leading arguments, e.g. ["npx", "mmdc"]
            puppeteer_config: Browser config passed through with -p
            timeout: Seconds before the process is killed
        """
        self.command = list(command)
        self.puppeteer_config = Path(puppeteer_config)
        self.timeout = timeout

    def build_command(self, input_path: Path, output_path: Path) -> list[str]:
        return [
            *self.command,
            "-i", str(input_path),
            "-o", str(output_path),
            "-p", str(self.puppeteer_config),
        ]

    async def render(self, input_path: Path, output_path: Path) -> None:
        """
        Render input_path to output_path.

        Args:
            input_path: Mermaid source file
            output_path: Destination file for the rendered diagram

        Raises:
            RendererSpawnError: Process could not be started
            RendererTimeoutError: Process exceeded the timeout and was killed;
                carries whatever stderr was captured before the kill
            RendererExitError: Process exited non-zero
        """
        cmd = self.build_command(input_path, output_path)

        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.PIPE,
                start_new_session=_POSIX,
            )
        except OSError as e:
            raise RendererSpawnError(e, details={"command": cmd[0]}) from e

        # stderr is collected as it arrives so a timeout still reports it
        chunks: list[bytes] = []
        try:
            await asyncio.wait_for(
                asyncio.gather(process.wait(), _collect(process.stderr, chunks)),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            await self._terminate(process)
            raise RendererTimeoutError(self.timeout, _decode(chunks)) from None
        except asyncio.CancelledError:
            await self._terminate(process)
            raise

        if process.returncode != 0:
            raise RendererExitError(process.returncode, shlex.join(cmd), _decode(chunks))

        logger.debug("Renderer succeeded", extra={"output_path": str(output_path)})

    @staticmethod
    async def _terminate(process: asyncio.subprocess.Process) -> None:
        """Kill the process (group) and wait for it to exit."""
        if process.returncode is None:
            try:
                if _POSIX:
                    os.killpg(process.pid, signal.SIGKILL)
                else:
                    process.kill()
            except ProcessLookupError:
                pass
        await process.wait()
        logger.warning("Renderer process killed", extra={"pid": process.pid})


async def _collect(stream: asyncio.StreamReader, chunks: list[bytes]) -> None:
    while chunk := await stream.read(4096):
        chunks.append(chunk)


def _decode(chunks: list[bytes]) -> str:
    return b"".join(chunks).decode("utf-8", errors="replace")
