"""Output writer utilities."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from newfile.errors import ErrorKind, InstantiateError

logger = logging.getLogger(__name__)


def ensure_output_absent(output_path: str | Path) -> Path:
    """Refuse an output path that already exists, including dangling symlinks."""
    path = Path(output_path)
    if path.exists() or path.is_symlink():
        raise InstantiateError(ErrorKind.OUTPUT_EXISTS, {"output_file": str(output_path)})
    return path


def copy_template(*, template_path: str | Path, output_path: str | Path) -> Path:
    """Copy template bytes to the output path, keeping mode and timestamps.

    A partially written destination is left in place when the copy fails.
    """
    source = Path(template_path)
    destination = Path(output_path)
    logger.debug("Copying %s -> %s", source, destination)
    try:
        shutil.copy2(source, destination)
    except OSError as exc:
        raise InstantiateError(ErrorKind.COPY_FAILED, {"reason": str(exc)}) from exc
    return destination
