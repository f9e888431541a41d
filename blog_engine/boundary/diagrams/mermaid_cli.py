"""
Mermaid CLI diagram renderer.

Shells out to mmdc for each diagram. Input and output files live in a
fresh temporary directory per call, removed on every exit path.

Dependencies: subprocess, tempfile, shutil (stdlib)
System role: Adapter over the external Mermaid rendering tool
"""

import logging
import shutil
import subprocess
import tempfile
from pathlib import Path

from blog_engine.boundary.diagrams.base import DiagramRenderer
from blog_engine.core.exceptions import DiagramRenderError, EmptyInputError

logger = logging.getLogger(__name__)

INPUT_FILENAME = "diagram.mmd"
OUTPUT_FILENAME = "diagram.svg"


class MermaidCLIRenderer(DiagramRenderer):
    """Renders Mermaid diagrams to SVG via the mmdc executable."""

    def __init__(
        self,
        cli_path: str = "mmdc",
        background_color: str = "transparent",
        timeout_seconds: float | None = None,
        tmp_dir: str | None = None,
    ) -> None:
        """
        Initialize renderer.

        Args:
            cli_path: mmdc executable name (resolved on PATH) or absolute path
            background_color: Value passed to mmdc -b
            timeout_seconds: Optional deadline for one mmdc run
            tmp_dir: Parent directory for per-call temp dirs
        """
        self.cli_path = cli_path
        self.background_color = background_color
        self.timeout_seconds = timeout_seconds
        self.tmp_dir = tmp_dir

    def is_available(self) -> bool:
        """Check whether the mmdc executable can be found."""
        return shutil.which(self.cli_path) is not None

    def build_command(self, input_path: Path, output_path: Path) -> list[str]:
        """Build the mmdc argument list for one input/output pair."""
        return [
            self.cli_path,
            "-i",
            str(input_path),
            "-o",
            str(output_path),
            "-b",
            self.background_color,
        ]

    def render_to_svg(self, diagram_code: str) -> str:
        """
        Render one Mermaid diagram to SVG.

        Args:
            diagram_code: Mermaid diagram source

        Returns:
            str: SVG markup written by mmdc

        Raises:
            EmptyInputError: If diagram_code is empty
            DiagramRenderError: If mmdc cannot start, exits non-zero,
                times out, leaves no readable output, or its temp files
                cannot be created
        """
        if not diagram_code:
            raise EmptyInputError()

        try:
            work = tempfile.TemporaryDirectory(
                prefix="mermaid-", dir=self.tmp_dir, ignore_cleanup_errors=True
            )
        except OSError as e:
            raise DiagramRenderError(
                f"failed to create temp directory: {e}",
                details={"tmp_dir": self.tmp_dir},
            ) from e

        with work as work_dir:
            input_path = Path(work_dir) / INPUT_FILENAME
            output_path = Path(work_dir) / OUTPUT_FILENAME
            try:
                input_path.write_text(diagram_code, encoding="utf-8")
            except OSError as e:
                raise DiagramRenderError(f"failed to write input file: {e}") from e

            command = self.build_command(input_path, output_path)
            logger.debug("Running mermaid CLI", extra={"command": command})

            try:
                result = subprocess.run(
                    command,
                    capture_output=True,
                    text=True,
                    timeout=self.timeout_seconds,
                    check=False,
                )
            except FileNotFoundError as e:
                raise DiagramRenderError(
                    f"mermaid CLI not found: {self.cli_path}",
                    details={"cli_path": self.cli_path},
                ) from e
            except subprocess.TimeoutExpired as e:
                stderr = e.stderr.decode("utf-8", "replace") if isinstance(e.stderr, bytes) else e.stderr
                raise DiagramRenderError(
                    f"mermaid CLI timed out after {self.timeout_seconds}s",
                    stderr=stderr,
                ) from e
            except OSError as e:
                raise DiagramRenderError(f"failed to start mermaid CLI: {e}") from e

            if result.returncode != 0:
                raise DiagramRenderError(
                    f"mermaid CLI failed with exit code {result.returncode}",
                    stderr=result.stderr.strip(),
                    returncode=result.returncode,
                )

            try:
                svg = output_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise DiagramRenderError(
                    f"failed to read mermaid CLI output: {e}",
                    stderr=result.stderr.strip(),
                    returncode=result.returncode,
                ) from e

        if not svg.strip():
            raise DiagramRenderError(
                "mermaid CLI produced empty output",
                stderr=result.stderr.strip(),
                returncode=result.returncode,
            )
        return svg
