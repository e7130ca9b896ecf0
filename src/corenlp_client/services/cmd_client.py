"""Command line backend running CoreNLP as a local Java process"""

import asyncio
import tempfile
from pathlib import Path
from typing import Any, List, Optional, Sequence

from google.protobuf.message import Message

from ..core.config import SERIALIZER_CLASS, Settings
from ..core.exceptions import ExecutionError
from ..core.logger import get_logger
from ..core.types import UNSET, CmdClientConfig, TextLike
from ..core.validators import validate_run_input
from ..protocol.framing import decode_document, maybe_decompress
from .base_client import BaseClient

logger = get_logger(__name__)

INPUT_FILENAME = "input.text"
OUTPUT_SUFFIX = ".ser.gz"


class CmdClient(BaseClient):
    """Runs Stanford CoreNLP through its command line driver

    CoreNLP must be installed locally, e.g. unzipped to ``/opt/corenlp`` and
    used with ``classpath="/opt/corenlp/*"``. Every call gets its own
    temporary directory and process.

    Omitted options come from settings. ``timeout=None`` runs without a
    time limit even when ``CORENLP_PROCESS_TIMEOUT_SECONDS`` is set.

    See https://stanfordnlp.github.io/CoreNLP/cmdline.html
    """

    def __init__(
        self,
        annotators: Optional[Sequence[str]] = None,
        classpath: Optional[str] = None,
        driver_class: Optional[str] = None,
        java_cmd: Optional[str] = None,
        args: Optional[Sequence[str]] = None,
        timeout: Any = UNSET,
        settings: Optional[Settings] = None,
        config: Optional[CmdClientConfig] = None
    ):
        self.config = config or CmdClientConfig.from_settings(
            annotators,
            settings=settings,
            classpath=UNSET if classpath is None else classpath,
            driver_class=UNSET if driver_class is None else driver_class,
            java_cmd=UNSET if java_cmd is None else java_cmd,
            args=UNSET if args is None else tuple(args),
            timeout=timeout,
        )

    def build_command(self, input_path: Path, output_dir: Path) -> List[str]:
        """Build the full argument list, executable first"""
        config = self.config
        cmd = [config.java_cmd, *config.args]
        if config.classpath:
            cmd += ["-cp", config.classpath]
        cmd.append(config.driver_class)
        if config.annotators:
            cmd += ["-annotators", ",".join(config.annotators)]
        cmd += [
            "-file", str(input_path),
            "--outputDirectory", str(output_dir),
            "-outputFormat", "serialized",
            "-outputSerializer", SERIALIZER_CLASS,
        ]
        return cmd

    async def run_text(self, text: TextLike, document: Message) -> None:
        data = validate_run_input(text, document)

        with tempfile.TemporaryDirectory(prefix="coreNLP", dir=self.config.temp_dir) as tmp:
            output_dir = Path(tmp)
            input_path = output_dir / INPUT_FILENAME
            input_path.write_bytes(data)

            await self._execute(self.build_command(input_path, output_dir))

            output_path = Path(f"{input_path}{OUTPUT_SUFFIX}")
            raw = output_path.read_bytes()

        decode_document(maybe_decompress(raw), document)

    async def _execute(self, cmd: List[str]) -> None:
        executable = cmd[0]
        logger.debug("Running CoreNLP: %s", " ".join(cmd))

        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise ExecutionError(executable, f"cannot start process: {e}") from e

        try:
            _, stderr = await asyncio.wait_for(proc.communicate(), timeout=self.config.timeout)
        except asyncio.TimeoutError as e:
            await self._kill(proc)
            raise ExecutionError(
                executable, f"timed out after {self.config.timeout}s"
            ) from e
        except asyncio.CancelledError:
            await self._kill(proc)
            raise

        stderr_text = stderr.decode("utf-8", errors="replace")
        if proc.returncode != 0:
            raise ExecutionError(
                executable,
                f"exit status {proc.returncode}",
                stderr=stderr_text,
                returncode=proc.returncode,
            )
        logger.debug("CoreNLP finished with exit status 0")

    @staticmethod
    async def _kill(proc: asyncio.subprocess.Process) -> None:
        if proc.returncode is None:
            try:
                proc.kill()
            except ProcessLookupError:
                pass
        await proc.wait()
