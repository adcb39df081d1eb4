"""File-system backed executable locator."""

from __future__ import annotations

import logging
from pathlib import Path

from code_scanner.errors import ExecutableNotFoundError

logger = logging.getLogger(__name__)


class FileSystemExecutableLocator:
    """Check that the scanner executable exists on the local disk."""

    def locate(self, executable_path: str) -> None:
        """Raise if nothing exists at ``executable_path``.

        A path whose parent cannot be searched counts as missing.

        Raises
        ------
        ExecutableNotFoundError
            If the path does not exist or cannot be checked.
        """
        try:
            found = Path(executable_path).exists()
        except OSError as exc:
            logger.debug("Unable to check executable %s: %s", executable_path, exc)
            raise ExecutableNotFoundError(executable_path) from exc
        if not found:
            logger.debug("Executable not found: %s", executable_path)
            raise ExecutableNotFoundError(executable_path)
