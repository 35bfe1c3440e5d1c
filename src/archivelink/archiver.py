"""Runs monolith to save a page as a single self-contained HTML file."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass

from .config import config
from .links import anchor_for, build_args, output_filename
from .settings import ArchiveSettings

logger = logging.getLogger(__name__)

# Shell convention for "command not found"
EXIT_NOT_FOUND = 127


@dataclass
class ArchiveResult:
    """Outcome of one monolith run.

    Attributes:
        url: The archived URL
        output_file: File name written inside the output folder
        output_path: Folder the process ran in
        returncode: Process exit code (None if it never finished)
        stdout: Captured standard output
        stderr: Captured standard error
    """

    url: str
    output_file: str
    output_path: str
    returncode: int | None
    stdout: str = ""
    stderr: str = ""

    @property
    def success(self) -> bool:
        return self.returncode == 0

    @property
    def anchor(self) -> str:
        return anchor_for(self.output_path, self.output_file)


class MonolithArchiver:
    """Invoke the archiving binary once per URL."""

    def __init__(self, binary: str | None = None, timeout: float | None = None):
        self.binary = binary or config.MONOLITH_BIN
        self.timeout = timeout if timeout is not None else config.ARCHIVE_TIMEOUT

    def archive(self, url: str, settings: ArchiveSettings) -> ArchiveResult:
        """Archive url into settings.output_path.

        Args:
            url: Validated, normalized URL.
            settings: Flags and output folder to use.

        Returns:
            ArchiveResult; success is exit code 0.
        """
        output_file = output_filename(url)
        args = [self.binary, *build_args(settings.cli_opts, output_file, url)]
        result = ArchiveResult(
            url=url,
            output_file=output_file,
            output_path=settings.output_path,
            returncode=None,
        )

        logger.info("Running %s in %s", " ".join(args), settings.output_path)
        try:
            completed = subprocess.run(
                args,
                cwd=settings.output_path,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            # Raised for a missing binary and for a missing cwd alike
            logger.error("Could not run %s: %s", self.binary, e)
            result.returncode = EXIT_NOT_FOUND
            result.stderr = str(e)
            return result
        except subprocess.TimeoutExpired:
            logger.error("%s timed out after %ss archiving %s", self.binary, self.timeout, url)
            return result

        result.returncode = completed.returncode
        result.stdout = completed.stdout or ""
        result.stderr = completed.stderr or ""
        # Failed runs surface the binary's own output at the default CLI level
        level = logging.INFO if result.success else logging.WARNING
        _log_stream(result.stdout, level)
        _log_stream(result.stderr, level)

        if result.success:
            logger.info("Archived %s to %s/%s", url, settings.output_path, output_file)
        else:
            logger.error("%s exited with code %s for %s", self.binary, result.returncode, url)
        return result


def _log_stream(text: str, level: int) -> None:
    for line in text.splitlines():
        if line.strip():
            logger.log(level, "monolith: %s", line)
